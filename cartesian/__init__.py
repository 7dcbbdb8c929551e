"""cartesian - Lazy Cartesian products that iterate like nested for loops."""

from loguru import logger

from cartesian.core.config import MAX_ARITY, ProductConfig
from cartesian.core.errors import ArityError, CartesianError, ProducerError
from cartesian.tuples.prepend import PREPENDERS, TuplePrepend, prepend, prepender
from cartesian.product.producer import (
    BufferedProducer,
    CollectionProducer,
    FactoryProducer,
    IteratorProducer,
    Producer,
    producer,
)
from cartesian.product.composer import Product, cartesian

# Library mode: applications opt in with logger.enable("cartesian").
logger.disable("cartesian")

__all__ = [
    "MAX_ARITY",
    "ProductConfig",
    "CartesianError",
    "ArityError",
    "ProducerError",
    "PREPENDERS",
    "TuplePrepend",
    "prepend",
    "prepender",
    "Producer",
    "CollectionProducer",
    "FactoryProducer",
    "IteratorProducer",
    "BufferedProducer",
    "producer",
    "Product",
    "cartesian",
]
