"""Cartesian products of producers, iterated like nested for loops."""

import math
from collections.abc import Iterable, Iterator
from itertools import starmap
from typing import Any, Generic, TypeVar, overload

from loguru import logger

from cartesian.core.config import DEFAULT_CONFIG, ProductConfig
from cartesian.core.errors import ArityError, ProducerError
from cartesian.core.types import ProducerLike
from cartesian.product.producer import Producer
from cartesian.tuples.prepend import TuplePrepend, prepender

T_co = TypeVar("T_co", covariant=True)
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
T6 = TypeVar("T6")
T7 = TypeVar("T7")
T8 = TypeVar("T8")


def _pairwise(head: Producer, tail: Producer) -> Iterator[tuple[Any, Any]]:
    """Pair every item of ``head`` with every item of a fresh view of ``tail``."""
    for a in head.fresh():
        for b in tail.fresh():
            yield (a, b)


class Product(Producer, Generic[T_co]):
    """
    Lazy Cartesian product of one or more producers.

    Iterating a product is equivalent to nested for loops with the first
    producer outermost and the last innermost:

        for a, b, c in Product(xs, ys, zs):
            ...

    walks the same items in the same order as

        for a in xs:
            for b in ys:
                for c in zs:
                    ...

    A single producer yields its items unchanged; two or more yield flat
    tuples. Every inner producer is traversed anew for each item of the
    producers to its left, so inner positions need reusable producers:
    collections, factories or other products. Each ``iter()`` on a product
    starts an independent traversal.

    Examples:
        >>> list(Product(range(2), "xy"))
        [(0, 'x'), (0, 'y'), (1, 'x'), (1, 'y')]

        >>> list(Product(range(2), repeat=2))
        [(0, 0), (0, 1), (1, 0), (1, 1)]

        >>> list(Product(range(1),))
        [0]
    """

    def __init__(
        self,
        *producers: ProducerLike,
        repeat: int = 1,
        config: ProductConfig | None = None,
    ) -> None:
        """
        Validate the producers and build the product.

        Args:
            *producers: Things convertible into producers (see `Producer.of`).
            repeat: Number of times the producer list is repeated, as in
                ``itertools.product``.
            config: Construction settings. Uses defaults if None.

        Raises:
            ArityError: If no producers are given, ``repeat`` is not a
                positive integer, or the product would exceed
                ``config.max_arity`` components.
            ProducerError: If an argument is not convertible into a producer,
                or a single-pass iterator sits where it would have to be
                traversed more than once.
        """
        config = config or DEFAULT_CONFIG

        if isinstance(repeat, bool) or not isinstance(repeat, int) or repeat < 1:
            raise ArityError(f"repeat must be a positive integer, got {repeat!r}")
        if not producers:
            raise ArityError("A product needs at least one producer")

        arity = len(producers) * repeat
        if arity > config.max_arity:
            raise ArityError(
                f"A product supports at most {config.max_arity} producers, "
                f"got {arity}"
            )

        converted = [
            Producer.of(p, buffer=config.buffer_iterators and (i > 0 or repeat > 1))
            for i, p in enumerate(producers)
        ]
        sequence = converted * repeat

        for position, p in enumerate(sequence):
            if position > 0 and not p.reusable:
                raise ProducerError(
                    f"Producer at position {position} is a single-pass iterator "
                    "but is traversed once per outer item. Pass a collection or "
                    "a factory, or set buffer_iterators=True"
                )

        self._init_chain(sequence)
        logger.opt(lazy=True).debug(
            "Product: composed {} producers (repeat={}) into arity {}, size={}",
            lambda: len(producers),
            lambda: repeat,
            lambda: arity,
            self.size,
        )

    @classmethod
    def _chain(cls, producers: list[Producer]) -> "Product[Any]":
        """Build a product from producers that were already validated."""
        product = cls.__new__(cls)
        product._init_chain(producers)
        return product

    def _init_chain(self, producers: list[Producer]) -> None:
        self._producers = tuple(producers)
        self._head = producers[0]
        self._tail: Producer | None = None
        self._flatten: TuplePrepend | None = None

        if len(producers) == 2:
            self._tail = producers[1]
        elif len(producers) > 2:
            self._tail = Product._chain(producers[1:])
            self._flatten = prepender(len(producers) - 1)

    @property
    def arity(self) -> int:
        """Number of components per item; 1 means items are not wrapped."""
        return len(self._producers)

    def size(self) -> int | None:
        """
        Return the number of items without iterating.

        Returns:
            The product of the producer sizes, or None if any producer's
            size is unknown.
        """
        sizes = [p.size() for p in self._producers]
        if any(s is None for s in sizes):
            return None
        return math.prod(sizes)

    def fresh(self) -> Iterator[T_co]:
        return iter(self)

    def __iter__(self) -> Iterator[T_co]:
        if self._tail is None:
            return self._head.fresh()
        pairs = _pairwise(self._head, self._tail)
        if self._flatten is None:
            return pairs
        return starmap(self._flatten, pairs)

    def __repr__(self) -> str:
        inner = ", ".join(repr(p) for p in self._producers)
        return f"Product({inner})"


@overload
def cartesian(p1: Iterable[T1], /, *, config: ProductConfig | None = ...) -> Product[T1]: ...
@overload
def cartesian(
    p1: Iterable[T1], p2: Iterable[T2], /, *, config: ProductConfig | None = ...
) -> Product[tuple[T1, T2]]: ...
@overload
def cartesian(
    p1: Iterable[T1], p2: Iterable[T2], p3: Iterable[T3], /,
    *, config: ProductConfig | None = ...,
) -> Product[tuple[T1, T2, T3]]: ...
@overload
def cartesian(
    p1: Iterable[T1], p2: Iterable[T2], p3: Iterable[T3], p4: Iterable[T4], /,
    *, config: ProductConfig | None = ...,
) -> Product[tuple[T1, T2, T3, T4]]: ...
@overload
def cartesian(
    p1: Iterable[T1], p2: Iterable[T2], p3: Iterable[T3], p4: Iterable[T4],
    p5: Iterable[T5], /, *, config: ProductConfig | None = ...,
) -> Product[tuple[T1, T2, T3, T4, T5]]: ...
@overload
def cartesian(
    p1: Iterable[T1], p2: Iterable[T2], p3: Iterable[T3], p4: Iterable[T4],
    p5: Iterable[T5], p6: Iterable[T6], /, *, config: ProductConfig | None = ...,
) -> Product[tuple[T1, T2, T3, T4, T5, T6]]: ...
@overload
def cartesian(
    p1: Iterable[T1], p2: Iterable[T2], p3: Iterable[T3], p4: Iterable[T4],
    p5: Iterable[T5], p6: Iterable[T6], p7: Iterable[T7], /,
    *, config: ProductConfig | None = ...,
) -> Product[tuple[T1, T2, T3, T4, T5, T6, T7]]: ...
@overload
def cartesian(
    p1: Iterable[T1], p2: Iterable[T2], p3: Iterable[T3], p4: Iterable[T4],
    p5: Iterable[T5], p6: Iterable[T6], p7: Iterable[T7], p8: Iterable[T8], /,
    *, config: ProductConfig | None = ...,
) -> Product[tuple[T1, T2, T3, T4, T5, T6, T7, T8]]: ...
@overload
def cartesian(
    *producers: ProducerLike, repeat: int = ..., config: ProductConfig | None = ...
) -> Product[Any]: ...


def cartesian(
    *producers: ProducerLike,
    repeat: int = 1,
    config: ProductConfig | None = None,
) -> Product[Any]:
    """
    Build the lazy Cartesian product of ``producers``.

    Shorthand for `Product`; see there for the iteration contract and errors.

    Example:
        >>> grid = [[[0] * 3 for _ in range(3)] for _ in range(3)]
        >>> for x, y, z in cartesian(range(3), range(3), range(3)):
        ...     grid[x][y][z] = x * y + z
    """
    return Product(*producers, repeat=repeat, config=config)
