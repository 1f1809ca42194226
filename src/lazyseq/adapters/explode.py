"""Lazy string chunking."""

from __future__ import annotations

from lazyseq.sequence import LazySequence

__all__ = ['ExplodeSequence']


class ExplodeSequence(LazySequence[int, str]):
    """Yield the fields of ``text`` separated by ``delimiter``, keyed ``0..n-1``.

    Fields follow ``str.split(delimiter)``: adjacent delimiters produce empty
    fields and an empty text produces one empty field. An empty delimiter
    yields one pair per character instead. The next delimiter is only
    searched for when the cursor reaches its field.

    Example:
        ```python
        ExplodeSequence('a,b,,c', ',').to_list()  # ['a', 'b', '', 'c']
        ExplodeSequence('abc', '').to_list()  # ['a', 'b', 'c']
        ```
    """

    __slots__ = ('_delimiter', '_end', '_found', '_position', '_start', '_text')

    def __init__(self, text: str, delimiter: str = '') -> None:
        self._text = text
        self._delimiter = delimiter
        self._position = 0
        self._start = 0
        self._end = 0
        self._found = False
        self.restart()

    def _locate(self) -> None:
        if not self._delimiter:
            self._end = self._start + 1
            return
        index = self._text.find(self._delimiter, self._start)
        self._found = index != -1
        self._end = index if self._found else len(self._text)

    def current_pair(self) -> tuple[int, str]:
        if not self.is_valid():
            raise self._exhausted()
        return self._position, self._text[self._start : self._end]

    def advance(self) -> None:
        if not self.is_valid():
            return
        self._position += 1
        if not self._delimiter:
            self._start = self._end
        elif self._found:
            self._start = self._end + len(self._delimiter)
        else:
            self._start = len(self._text) + 1
        if self.is_valid():
            self._locate()

    def is_valid(self) -> bool:
        if not self._delimiter:
            return self._start < len(self._text)
        return self._start <= len(self._text)

    def restart(self) -> None:
        self._position = 0
        self._start = 0
        self._locate()
