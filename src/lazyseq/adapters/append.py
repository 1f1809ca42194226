"""Append adapter: concatenate sequences, keeping their own keys."""

from __future__ import annotations

from typing import Any

from lazyseq.sequence import LazySequence

__all__ = ['AppendAdapter']


class AppendAdapter(LazySequence[Any, Any]):
    """Walk each owned sequence to exhaustion, in order.

    Keys come from the sub-sequences untouched, so the same key can appear
    more than once. ``restart()`` restarts every sub-sequence and returns to
    the first one.

    Example:
        ```python
        seq = AppendAdapter(coerce([1, 2]), coerce([3]))
        seq.append(coerce({'x': 4}))
        list(seq.items())  # [(0, 1), (1, 2), (0, 3), ('x', 4)]
        ```
    """

    __slots__ = ('_index', '_sequences')

    def __init__(self, *sequences: LazySequence[Any, Any]) -> None:
        self._sequences: list[LazySequence[Any, Any]] = list(sequences)
        self._index = 0

    def append(self, sequence: LazySequence[Any, Any]) -> None:
        """Add ``sequence`` after the ones already owned."""
        self._sequences.append(sequence)

    @property
    def sequence_count(self) -> int:
        """Number of owned sub-sequences, not the number of pairs."""
        return len(self._sequences)

    def _settle(self) -> None:
        while self._index < len(self._sequences) and not self._sequences[self._index].is_valid():
            self._index += 1

    def current_pair(self) -> tuple[Any, Any]:
        if not self.is_valid():
            raise self._exhausted()
        return self._sequences[self._index].current_pair()

    def advance(self) -> None:
        if self.is_valid():
            self._sequences[self._index].advance()

    def is_valid(self) -> bool:
        self._settle()
        return self._index < len(self._sequences)

    def restart(self) -> None:
        for sequence in self._sequences:
            sequence.restart()
        self._index = 0
