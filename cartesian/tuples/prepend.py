"""Tuple prepend operations, one per supported arity.

A prepender for arity ``k`` turns ``(value, (t1, ..., tk))`` into
``(value, t1, ..., tk)``. Products fold their producers right to left into
``(head, tail)`` pairs; the prepender for the tail's arity flattens each pair
back into one tuple.

Instances exist for arities ``0`` through ``MAX_ARITY - 1``, so the largest
tuple a prepender ever builds has ``MAX_ARITY`` components.
"""

from typing import Any, TypeVar, TypeVarTuple, Unpack

from cartesian.core.config import MAX_ARITY
from cartesian.core.errors import ArityError

T = TypeVar("T")
Ts = TypeVarTuple("Ts")


class TuplePrepend:
    """Prepend a value to a tuple of a fixed arity."""

    __slots__ = ("arity",)

    def __init__(self, arity: int) -> None:
        self.arity = arity

    def __call__(self, value: Any, tup: tuple[Any, ...]) -> tuple[Any, ...]:
        return (value, *tup)

    def __repr__(self) -> str:
        return f"TuplePrepend({self.arity})"


PREPENDERS: tuple[TuplePrepend, ...] = tuple(TuplePrepend(k) for k in range(MAX_ARITY))


def prepender(arity: int) -> TuplePrepend:
    """
    Return the prepender accepting tuples of ``arity`` components.

    Args:
        arity: Number of components of the tuples that will be extended.

    Returns:
        The shared `TuplePrepend` instance for that arity.

    Raises:
        ArityError: If no prepender exists for ``arity`` (negative, or the
            result would exceed ``MAX_ARITY`` components).
    """
    if not 0 <= arity < MAX_ARITY:
        raise ArityError(
            f"No tuple prepend for arity {arity}. "
            f"Supported arities: 0..{MAX_ARITY - 1}"
        )
    return PREPENDERS[arity]


def prepend(value: T, tup: tuple[Unpack[Ts]]) -> tuple[T, Unpack[Ts]]:
    """
    Return a new tuple with ``value`` in front of the components of ``tup``.

    Example:
        >>> prepend(0, ("x", 1.5))
        (0, 'x', 1.5)
        >>> prepend("a", ())
        ('a',)
    """
    return prepender(len(tup))(value, tup)
