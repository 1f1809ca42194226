"""Initial adapter: every pair except the last one."""

from __future__ import annotations

from lazyseq.sequence import LazySequence

__all__ = ['InitialAdapter']


class InitialAdapter[K, V](LazySequence[K, V]):
    """Hold back one pair of lookahead so the final pair is never yielded.

    The buffered pair is only released once the inner sequence proves it has
    a successor. Keys are preserved. While the lookahead read is the only
    movement, ``restart()`` keeps the buffered pair instead of rewinding.
    """

    __slots__ = ('_held', '_inner', '_pair', '_primed')

    def __init__(self, inner: LazySequence[K, V]) -> None:
        self._inner = inner
        self._pair: tuple[K, V] | None = None
        self._primed = False
        self._held = False

    def _prime(self) -> None:
        if self._primed:
            return
        self._primed = True
        if self._inner.is_valid():
            self._pair = self._inner.current_pair()
            self._inner.advance()
            self._held = True

    def current_pair(self) -> tuple[K, V]:
        if not self.is_valid():
            raise self._exhausted()
        return self._pair  # type: ignore[return-value]

    def advance(self) -> None:
        if not self.is_valid():
            return
        self._pair = self._inner.current_pair()
        self._inner.advance()
        self._held = False

    def is_valid(self) -> bool:
        self._prime()
        return self._pair is not None and self._inner.is_valid()

    def restart(self) -> None:
        if self._held:
            return
        self._inner.restart()
        self._pair = None
        self._primed = False
