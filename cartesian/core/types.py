"""Type aliases shared across cartesian."""

from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

Factory: TypeAlias = Callable[[], Iterable[Any]]
"""A zero-argument callable returning a new iterable on every call."""

ProducerLike: TypeAlias = Iterable[Any] | Factory
"""Anything `Producer.of` accepts."""
