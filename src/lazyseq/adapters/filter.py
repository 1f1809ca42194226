"""Filter adapter: keep the pairs a predicate accepts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lazyseq._callbacks import bind_callback
from lazyseq.sequence import LazySequence

__all__ = ['FilterAdapter']


class FilterAdapter[K, V](LazySequence[K, V]):
    """Skip inner pairs until ``predicate(value, key)`` is truthy.

    The inner sequence is moved forward to the first accepted pair on
    construction, after every ``advance()`` and after every ``restart()``.
    Accepted pairs pass through unchanged.

    While that initial skip is the only movement, the adapter already sits
    at its first pair and ``restart()`` does nothing, so a filter over a
    generator can still be drained once.

    Raises:
        InvalidArgumentError: If ``predicate`` is not callable.
    """

    __slots__ = ('_inner', '_predicate', '_skipped')

    def __init__(self, inner: LazySequence[K, V], predicate: Callable[..., Any]) -> None:
        self._predicate = bind_callback(predicate, 2, 'predicate')
        self._inner = inner
        self._skipped = self._skip()

    def _skip(self) -> bool:
        """Advance to the next accepted pair; True if the inner cursor moved."""
        moved = False
        while self._inner.is_valid():
            key, value = self._inner.current_pair()
            if self._predicate(value, key):
                break
            self._inner.advance()
            moved = True
        return moved

    def current_pair(self) -> tuple[K, V]:
        if not self._inner.is_valid():
            raise self._exhausted()
        return self._inner.current_pair()

    def advance(self) -> None:
        if not self._inner.is_valid():
            return
        self._inner.advance()
        self._skip()
        self._skipped = False

    def is_valid(self) -> bool:
        return self._inner.is_valid()

    def restart(self) -> None:
        if self._skipped:
            return
        self._inner.restart()
        self._skipped = self._skip()
