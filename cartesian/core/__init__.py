"""Core types, configuration and errors for cartesian."""

from cartesian.core.config import MAX_ARITY, ProductConfig
from cartesian.core.errors import ArityError, CartesianError, ProducerError

__all__ = ["MAX_ARITY", "ProductConfig", "CartesianError", "ArityError", "ProducerError"]
