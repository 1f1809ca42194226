"""Map adapter: transform every value, keep every key."""

from __future__ import annotations

from collections.abc import Callable

from lazyseq._callbacks import ensure_callable
from lazyseq.sequence import LazySequence

__all__ = ['MapAdapter']


class MapAdapter[K, V, U](LazySequence[K, U]):
    """Apply ``callback`` to each value of the inner sequence.

    The callback runs on every ``current_pair()`` call and its result is not
    cached. Reading the same position twice calls it twice, which matters for
    callbacks with side effects.

    Raises:
        InvalidArgumentError: If ``callback`` is not callable.
    """

    __slots__ = ('_callback', '_inner')

    def __init__(self, inner: LazySequence[K, V], callback: Callable[[V], U]) -> None:
        self._callback = ensure_callable(callback)
        self._inner = inner

    def current_pair(self) -> tuple[K, U]:
        if not self._inner.is_valid():
            raise self._exhausted()
        key, value = self._inner.current_pair()
        return key, self._callback(value)

    def advance(self) -> None:
        self._inner.advance()

    def is_valid(self) -> bool:
        return self._inner.is_valid()

    def restart(self) -> None:
        self._inner.restart()
