"""Tuple prepend operations for cartesian."""

from cartesian.tuples.prepend import PREPENDERS, TuplePrepend, prepend, prepender

__all__ = ["PREPENDERS", "TuplePrepend", "prepend", "prepender"]
