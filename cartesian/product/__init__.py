"""Producers and the product composer for cartesian."""

from cartesian.product.producer import (
    BufferedProducer,
    CollectionProducer,
    FactoryProducer,
    IteratorProducer,
    Producer,
    producer,
)
from cartesian.product.composer import Product, cartesian

__all__ = [
    "Producer",
    "CollectionProducer",
    "FactoryProducer",
    "IteratorProducer",
    "BufferedProducer",
    "producer",
    "Product",
    "cartesian",
]
