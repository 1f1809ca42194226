"""Lift any sequence to a recursive one by inspecting its values."""

from __future__ import annotations

from typing import Any

from lazyseq._core import is_container
from lazyseq.sequence import LazySequence, RecursiveSequence
from lazyseq.sources import ContainerSource

__all__ = ['NestedView']


class NestedView[K, V](RecursiveSequence[K, V]):
    """Recursive view over a sequence that has no recursive capability of its own.

    A pair has children when its value is an array-like container, exactly
    as for ``ContainerSource``. This is what lets ``flatten`` and
    ``flat_map`` work on mapped pipelines and generators.
    """

    __slots__ = ('_inner',)

    def __init__(self, inner: LazySequence[K, V]) -> None:
        self._inner = inner

    def current_pair(self) -> tuple[K, V]:
        if not self._inner.is_valid():
            raise self._exhausted()
        return self._inner.current_pair()

    def advance(self) -> None:
        self._inner.advance()

    def is_valid(self) -> bool:
        return self._inner.is_valid()

    def restart(self) -> None:
        self._inner.restart()

    def has_children(self) -> bool:
        return self._inner.is_valid() and is_container(self._inner.current_pair()[1])

    def children(self) -> RecursiveSequence[Any, Any]:
        return ContainerSource(self.current_pair()[1])

    def pair_has_children(self, pair: tuple[K, V]) -> bool:
        return is_container(pair[1])

    def pair_children(self, pair: tuple[K, V]) -> RecursiveSequence[Any, Any]:
        return ContainerSource(pair[1])
