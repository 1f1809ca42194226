"""Limit adapter: an offset/count window over another sequence."""

from __future__ import annotations

from lazyseq.sequence import LazySequence

__all__ = ['LimitAdapter']


class LimitAdapter[K, V](LazySequence[K, V]):
    """Skip ``offset`` leading pairs, then yield at most ``count`` pairs.

    A negative ``count`` means no upper bound. A negative ``offset`` is
    treated as 0. Windows reaching past the end simply yield fewer pairs.
    Once ``count`` pairs have been yielded the inner sequence is not pulled
    any further.

    While the offset skip is the only movement, ``restart()`` does nothing,
    so windows over generators can still be drained once.
    """

    __slots__ = ('_count', '_inner', '_offset', '_skipped', '_yielded')

    def __init__(self, inner: LazySequence[K, V], offset: int = 0, count: int = -1) -> None:
        self._inner = inner
        self._offset = max(0, offset)
        self._count = count
        self._yielded = 0
        self._skipped = self._skip_offset()

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def count(self) -> int:
        return self._count

    def _skip_offset(self) -> bool:
        """Skip the leading pairs; True if the inner cursor moved."""
        moved = False
        for _ in range(self._offset):
            if not self._inner.is_valid():
                break
            self._inner.advance()
            moved = True
        return moved

    def current_pair(self) -> tuple[K, V]:
        if not self.is_valid():
            raise self._exhausted()
        return self._inner.current_pair()

    def advance(self) -> None:
        if not self.is_valid():
            return
        self._inner.advance()
        self._yielded += 1
        self._skipped = False

    def is_valid(self) -> bool:
        if 0 <= self._count <= self._yielded:
            return False
        return self._inner.is_valid()

    def restart(self) -> None:
        if self._skipped:
            return
        self._inner.restart()
        self._yielded = 0
        self._skipped = self._skip_offset()
