"""Producers: sources that hand out fresh iterators on demand."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Sized
from functools import partial
from typing import Any

from cartesian.core.errors import ProducerError


class Producer(ABC):
    """
    Base class for everything a product can draw items from.

    A product needs a new iterator over an inner producer for every item of
    the producers to its left, so each producer says whether `fresh` can be
    called repeatedly (`reusable`) and hands out one iterator per call.
    """

    reusable: bool = True

    @abstractmethod
    def fresh(self) -> Iterator[Any]:
        """Return a new iterator over the items of this producer."""
        ...

    def size(self) -> int | None:
        """Return the number of items, or None if it is not known upfront."""
        return None

    @staticmethod
    def of(obj: Any, *, buffer: bool = False) -> "Producer":
        """
        Wrap ``obj`` in the matching producer type.

        Args:
            obj: A producer, an iterator, a re-iterable collection, or a
                zero-argument callable returning an iterable.
            buffer: Wrap single-pass iterators in a replay buffer so they can
                be traversed more than once.

        Returns:
            A Producer over ``obj``. Producers are returned unchanged.

        Raises:
            ProducerError: If ``obj`` is neither iterable nor callable.

        Example:
            >>> Producer.of(range(3)).reusable
            True
            >>> Producer.of(iter([1, 2])).reusable
            False
        """
        if isinstance(obj, Producer):
            return obj
        if isinstance(obj, Iterator):
            if buffer:
                return BufferedProducer(obj)
            return IteratorProducer(obj)
        if isinstance(obj, Iterable):
            return CollectionProducer(obj)
        if callable(obj):
            return FactoryProducer(obj)
        raise ProducerError(
            f"Cannot use {type(obj).__name__} as a producer. "
            "Expected an iterable or a callable returning an iterable"
        )


class CollectionProducer(Producer):
    """Producer over a re-iterable collection such as a range, list or str."""

    def __init__(self, collection: Iterable[Any]) -> None:
        self._collection = collection

    def fresh(self) -> Iterator[Any]:
        return iter(self._collection)

    def size(self) -> int | None:
        if isinstance(self._collection, Sized):
            try:
                return len(self._collection)
            except OverflowError:
                return None
        return None

    def __repr__(self) -> str:
        return f"CollectionProducer({self._collection!r})"


class FactoryProducer(Producer):
    """Producer calling a factory for a new iterable on every traversal."""

    def __init__(self, factory: Callable[[], Iterable[Any]]) -> None:
        self._factory = factory

    def fresh(self) -> Iterator[Any]:
        return iter(self._factory())

    def __repr__(self) -> str:
        return f"FactoryProducer({self._factory!r})"


class IteratorProducer(Producer):
    """Producer over a single-pass iterator. Only valid as the outermost producer."""

    reusable = False

    def __init__(self, iterator: Iterator[Any]) -> None:
        self._iterator = iterator

    def fresh(self) -> Iterator[Any]:
        return self._iterator

    def __repr__(self) -> str:
        return f"IteratorProducer({self._iterator!r})"


class BufferedProducer(Producer):
    """
    Producer recording the items of a single-pass iterator as they are drawn.

    Every traversal replays the recorded items and then continues pulling
    from the underlying iterator, so items are drawn from it at most once and
    never before they are requested. Several traversals may be active at the
    same time.
    """

    def __init__(self, iterator: Iterator[Any]) -> None:
        self._iterator = iterator
        self._items: list[Any] = []
        self._exhausted = False

    def fresh(self) -> Iterator[Any]:
        index = 0
        while True:
            if index < len(self._items):
                yield self._items[index]
            elif self._exhausted:
                return
            else:
                try:
                    item = next(self._iterator)
                except StopIteration:
                    self._exhausted = True
                    return
                self._items.append(item)
                yield item
            index += 1

    def size(self) -> int | None:
        if self._exhausted:
            return len(self._items)
        return None

    def __repr__(self) -> str:
        return f"BufferedProducer({self._iterator!r})"


def producer(fn: Callable[..., Iterable[Any]], *args, **kwargs) -> FactoryProducer:
    """
    Build a factory producer from a callable and the arguments to call it with.

    Example:
        >>> rows = producer(range, 3)
        >>> list(rows.fresh()), list(rows.fresh())
        ([0, 1, 2], [0, 1, 2])
    """
    return FactoryProducer(partial(fn, *args, **kwargs))
