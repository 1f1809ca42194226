"""Flip adapter: swap keys and values."""

from __future__ import annotations

from lazyseq.sequence import LazySequence

__all__ = ['FlipAdapter']


class FlipAdapter[K, V](LazySequence[V, K]):
    """Yield ``(value, key)`` for every ``(key, value)`` of the inner sequence."""

    __slots__ = ('_inner',)

    def __init__(self, inner: LazySequence[K, V]) -> None:
        self._inner = inner

    def current_pair(self) -> tuple[V, K]:
        if not self._inner.is_valid():
            raise self._exhausted()
        key, value = self._inner.current_pair()
        return value, key

    def advance(self) -> None:
        self._inner.advance()

    def is_valid(self) -> bool:
        return self._inner.is_valid()

    def restart(self) -> None:
        self._inner.restart()
