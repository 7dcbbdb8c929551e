"""Exceptions raised while constructing products."""


class CartesianError(Exception):
    """Base class for all errors raised by cartesian."""


class ArityError(CartesianError, ValueError):
    """Raised when a product or prepend is requested for an unsupported arity."""


class ProducerError(CartesianError, TypeError):
    """Raised when an argument cannot serve as a producer in its position."""
