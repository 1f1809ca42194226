"""Recursive adapters: depth-first flattening and subtree filtering.

Both adapters require a ``RecursiveSequence`` and reject anything else when
they are built, before a single pair is pulled.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from lazyseq._callbacks import bind_callback
from lazyseq._logging import get_logger
from lazyseq.errors import InvalidArgumentError
from lazyseq.sequence import LazySequence, RecursiveSequence

__all__ = ['RecursiveFilterAdapter', 'RecursiveFlattenAdapter', 'TraversalMode']

logger = get_logger(__name__)


class TraversalMode(StrEnum):
    """Which nodes a recursive flatten yields."""

    LEAVES_ONLY = 'leaves_only'  # only nodes without children
    SELF_FIRST = 'self_first'  # containers before their children
    CHILD_FIRST = 'child_first'  # containers after their children


def _require_recursive(sequence: LazySequence[Any, Any], adapter: str) -> RecursiveSequence[Any, Any]:
    if not isinstance(sequence, RecursiveSequence):
        logger.debug('recursive_input_rejected', adapter=adapter, received=type(sequence).__name__)
        raise InvalidArgumentError('sequence', f'{adapter} needs a recursive sequence, got {type(sequence).__name__}')
    return sequence


@dataclass(slots=True)
class _Frame:
    sequence: RecursiveSequence[Any, Any]
    depth: int
    parent: tuple[Any, Any] | None


class RecursiveFlattenAdapter(LazySequence[Any, Any]):
    """Depth-first walk of a recursive sequence using an explicit frame stack.

    Keys are those of the innermost sequence, so they repeat across levels.
    ``max_depth`` bounds descent: a container found at ``max_depth`` is
    yielded as a plain value instead of being entered. ``-1`` means
    unbounded.

    Example:
        ```python
        seq = RecursiveFlattenAdapter(coerce([1, [2, [3, 4]], 5]))
        seq.to_list()  # [1, 2, 3, 4, 5]

        seq = RecursiveFlattenAdapter(coerce([1, [2, [3, 4]], 5]), max_depth=1)
        seq.to_list()  # [1, 2, [3, 4], 5]
        ```

    Raises:
        InvalidArgumentError: If ``inner`` is not a ``RecursiveSequence``.
    """

    __slots__ = ('_current', '_max_depth', '_mode', '_pending', '_ready', '_root', '_stack')

    def __init__(
        self,
        inner: LazySequence[Any, Any],
        mode: TraversalMode = TraversalMode.LEAVES_ONLY,
        max_depth: int = -1,
    ) -> None:
        self._root = _require_recursive(inner, type(self).__name__)
        self._mode = TraversalMode(mode)
        self._max_depth = max_depth
        self._stack: list[_Frame] = [_Frame(self._root, 0, None)]
        self._current: tuple[tuple[Any, Any], int] | None = None
        self._pending: RecursiveSequence[Any, Any] | None = None
        self._ready = False
        logger.debug('recursive_flatten_built', mode=self._mode.value, max_depth=max_depth)

    @property
    def mode(self) -> TraversalMode:
        return self._mode

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def _can_descend(self, depth: int) -> bool:
        return self._max_depth < 0 or depth < self._max_depth

    def _settle(self) -> None:
        """Move to the next node to present, or run out of frames."""
        if self._ready:
            return
        self._ready = True
        while self._stack:
            frame = self._stack[-1]
            sequence = frame.sequence
            if not sequence.is_valid():
                self._stack.pop()
                if frame.parent is None:
                    continue
                if self._mode is TraversalMode.CHILD_FIRST:
                    self._current = (frame.parent, frame.depth - 1)
                    return
                self._stack[-1].sequence.advance()
                continue
            pair = sequence.current_pair()
            if self._can_descend(frame.depth) and sequence.pair_has_children(pair):
                children = sequence.pair_children(pair)
                if self._mode is TraversalMode.SELF_FIRST:
                    self._current = (pair, frame.depth)
                    self._pending = children
                    return
                self._stack.append(_Frame(children, frame.depth + 1, pair))
                continue
            self._current = (pair, frame.depth)
            return
        self._current = None

    def depth(self) -> int:
        """Depth of the current pair; top-level pairs are at depth 0."""
        if not self.is_valid():
            raise self._exhausted()
        return self._current[1]  # type: ignore[index]

    def current_pair(self) -> tuple[Any, Any]:
        if not self.is_valid():
            raise self._exhausted()
        return self._current[0]  # type: ignore[index]

    def advance(self) -> None:
        if not self.is_valid():
            return
        top = self._stack[-1]
        if self._pending is not None:
            self._stack.append(_Frame(self._pending, top.depth + 1, self._current[0]))  # type: ignore[index]
            self._pending = None
        else:
            top.sequence.advance()
        self._ready = False

    def is_valid(self) -> bool:
        self._settle()
        return self._current is not None

    def restart(self) -> None:
        self._root.restart()
        self._stack = [_Frame(self._root, 0, None)]
        self._current = None
        self._pending = None
        self._ready = False


class RecursiveFilterAdapter[K, V](RecursiveSequence[K, V]):
    """Prune the subtrees of a recursive sequence.

    ``predicate(value, key)`` is only evaluated for nodes that have children.
    When it is falsy the node, and with it its whole subtree, is skipped.
    Leaves always pass. ``children()`` returns a filtered view too, so the
    pruning applies at every level once the result is flattened. While the
    initial skip is the only movement, ``restart()`` does nothing.

    Raises:
        InvalidArgumentError: If ``predicate`` is not callable or ``inner``
            is not a ``RecursiveSequence``.
    """

    __slots__ = ('_callback', '_inner', '_predicate', '_skipped')

    def __init__(self, inner: LazySequence[K, V], predicate: Callable[..., Any]) -> None:
        self._predicate = bind_callback(predicate, 2, 'predicate')
        self._callback = predicate
        self._inner = _require_recursive(inner, type(self).__name__)
        self._skipped = self._skip()

    def _skip(self) -> bool:
        """Advance past rejected containers; True if the inner cursor moved."""
        moved = False
        while self._inner.is_valid():
            pair = self._inner.current_pair()
            if not self._inner.pair_has_children(pair) or self._predicate(pair[1], pair[0]):
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

    def has_children(self) -> bool:
        return self._inner.has_children()

    def children(self) -> RecursiveFilterAdapter[Any, Any]:
        return RecursiveFilterAdapter(self._inner.children(), self._callback)

    def pair_has_children(self, pair: tuple[K, V]) -> bool:
        return self._inner.pair_has_children(pair)

    def pair_children(self, pair: tuple[K, V]) -> RecursiveFilterAdapter[Any, Any]:
        return RecursiveFilterAdapter(self._inner.pair_children(pair), self._callback)
