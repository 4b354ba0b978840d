"""Composable lazy sequence adapters applied with the ``|`` operator.

Every adapter turns a source into a :class:`LazyView`. The view is computed
element by element each time it is iterated. A mapping source is read as
its ``(key, value)`` items, so ``Keys`` and ``Values`` work on dictionaries
directly.
"""

from __future__ import annotations

import itertools
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

__all__ = [
    "LazyView",
    "Adapter",
    "Filter",
    "Transform",
    "Take",
    "Drop",
    "Reverse",
    "Keys",
    "Values",
]


def _entries(source: Iterable[Any]) -> Iterable[Any]:
    """Return a mapping's items, or the source unchanged."""
    return source.items() if isinstance(source, Mapping) else source


def _pairs(source: Iterable[Any], adapter_name: str) -> Iterator[tuple[Any, Any]]:
    for item in _entries(source):
        if not (isinstance(item, tuple) and len(item) == 2):
            raise TypeError(f"{adapter_name} requires a range of pairs, got {item!r}")
        yield item


def _count(value: Any, adapter_name: str) -> int:
    count = operator.index(value)
    if count < 0:
        raise ValueError(f"{adapter_name} count must not be negative, got {count}")
    return count


def _require_callable(value: Any, adapter_name: str) -> None:
    if not callable(value):
        raise TypeError(f"{adapter_name} requires a callable, got {value!r}")


class LazyView:
    """A re-iterable view whose elements are recomputed on every iteration."""

    __slots__ = ("_source", "_step")

    def __init__(
        self,
        source: Iterable[Any],
        step: Callable[[Iterable[Any]], Iterable[Any]],
    ) -> None:
        self._source = source
        self._step = step

    def __iter__(self) -> Iterator[Any]:
        return iter(self._step(self._source))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"


class Adapter(ABC):
    """Base of all adapters; ``source | adapter`` is ``adapter.apply(source)``."""

    @abstractmethod
    def apply(self, source: Iterable[Any]) -> LazyView:
        """Wrap ``source`` in a lazy view."""

    def __ror__(self, source: Iterable[Any]) -> LazyView:
        return self.apply(source)


@dataclass(frozen=True)
class Filter(Adapter):
    """Keep only the elements for which ``predicate`` is truthy."""

    predicate: Callable[[Any], Any]

    def __post_init__(self) -> None:
        _require_callable(self.predicate, "Filter")

    def apply(self, source: Iterable[Any]) -> LazyView:
        predicate = self.predicate
        return LazyView(
            source, lambda src: (item for item in _entries(src) if predicate(item))
        )


@dataclass(frozen=True)
class Transform(Adapter):
    """Replace each element with ``function(element)``."""

    function: Callable[[Any], Any]

    def __post_init__(self) -> None:
        _require_callable(self.function, "Transform")

    def apply(self, source: Iterable[Any]) -> LazyView:
        function = self.function
        return LazyView(source, lambda src: (function(item) for item in _entries(src)))


@dataclass(frozen=True)
class Take(Adapter):
    """Yield at most the first ``count`` elements."""

    count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", _count(self.count, "Take"))

    def apply(self, source: Iterable[Any]) -> LazyView:
        count = self.count
        return LazyView(source, lambda src: itertools.islice(_entries(src), count))


@dataclass(frozen=True)
class Drop(Adapter):
    """Skip the first ``count`` elements and yield the rest."""

    count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", _count(self.count, "Drop"))

    def apply(self, source: Iterable[Any]) -> LazyView:
        count = self.count
        return LazyView(
            source, lambda src: itertools.islice(_entries(src), count, None)
        )


@dataclass(frozen=True)
class Reverse(Adapter):
    """Yield the elements in reverse order; the source must be reversible."""

    def apply(self, source: Iterable[Any]) -> LazyView:
        try:
            reversed(_entries(source))
        except TypeError:
            raise TypeError(
                f"Reverse requires a reversible source, got {type(source).__name__}"
            ) from None
        return LazyView(source, lambda src: reversed(_entries(src)))


@dataclass(frozen=True)
class Keys(Adapter):
    """Yield the first item of every pair."""

    def apply(self, source: Iterable[Any]) -> LazyView:
        return LazyView(source, lambda src: (key for key, _ in _pairs(src, "Keys")))


@dataclass(frozen=True)
class Values(Adapter):
    """Yield the second item of every pair."""

    def apply(self, source: Iterable[Any]) -> LazyView:
        return LazyView(
            source, lambda src: (value for _, value in _pairs(src, "Values"))
        )