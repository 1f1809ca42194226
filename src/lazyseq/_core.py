"""Foundational helpers shared by every lazyseq module.

Holds the root exception type and the container predicate that decides which
values count as nested, array-like containers during recursive traversal.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ['LazySeqError', 'is_container']

_SCALAR_SEQUENCES = (str, bytes, bytearray, memoryview)


class LazySeqError(Exception):
    """Base exception class for lazyseq errors.

    Every error raised by the library derives from this class, so callers can
    catch the whole family with a single ``except`` clause.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from lazyseq import LazySeqError, map

        try:
            map([1, 2, 3], 'not callable')
        except LazySeqError as e:
            print(e.code)  # INVALID_ARGUMENT
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


def is_container(value: Any) -> bool:
    """Return True when ``value`` is an array-like container.

    Lists, tuples, ranges and other ``Sequence`` types count, as do
    ``Mapping`` types. Strings and byte strings are scalars.
    """
    if isinstance(value, _SCALAR_SEQUENCES):
        return False
    return isinstance(value, Sequence | Mapping)
