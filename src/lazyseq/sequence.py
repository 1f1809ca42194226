"""The pull-based sequence abstraction every lazyseq input is coerced to.

A sequence is a cursor over ``(key, value)`` pairs driven entirely by the
consumer:

    ```python
    seq.restart()
    while seq.is_valid():
        key, value = seq.current_pair()
        ...
        seq.advance()
    ```

Sources produce nothing until ``is_valid()`` or ``current_pair()`` asks for
it, and nothing past the current position is ever pulled. Filtering and
windowing adapters move to their first accepted pair when built. A sequence
that has become invalid stays invalid until ``restart()`` is called
explicitly.

A single sequence holds one mutable cursor. Two readers sharing the same
sequence observe each other's ``advance()`` calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from lazyseq.errors import SequenceExhaustedError

__all__ = ['LazySequence', 'RecursiveSequence']


class LazySequence[K, V](ABC):
    """Abstract lazy sequence of key/value pairs.

    Subclasses implement the four cursor primitives. The Python iteration
    helpers (``__iter__``, ``items``, ``keys``, ``to_list``, ``to_dict``) are
    built on top of them and always replay from the start.
    """

    __slots__ = ()

    @abstractmethod
    def current_pair(self) -> tuple[K, V]:
        """Return the pair at the cursor.

        Raises:
            SequenceExhaustedError: If the sequence is not valid.
        """

    @abstractmethod
    def advance(self) -> None:
        """Move the cursor to the next pair. A no-op once exhausted."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True while the cursor points at a pair."""

    @abstractmethod
    def restart(self) -> None:
        """Move the cursor back to the first pair, restarting owned inner sequences."""

    def key(self) -> K:
        """Return the key at the cursor."""
        return self.current_pair()[0]

    def value(self) -> V:
        """Return the value at the cursor."""
        return self.current_pair()[1]

    def _exhausted(self) -> SequenceExhaustedError:
        return SequenceExhaustedError(type(self).__name__)

    def items(self) -> Iterator[tuple[K, V]]:
        """Restart, then yield every ``(key, value)`` pair lazily."""
        self.restart()
        while self.is_valid():
            yield self.current_pair()
            self.advance()

    def __iter__(self) -> Iterator[V]:
        for _, value in self.items():
            yield value

    def keys(self) -> Iterator[K]:
        """Restart, then yield every key lazily."""
        for key, _ in self.items():
            yield key

    def to_list(self) -> list[V]:
        """Drain the values into a list."""
        return list(self)

    def to_dict(self) -> dict[K, V]:
        """Drain the pairs into a dict; later duplicate keys overwrite earlier ones."""
        return dict(self.items())

    def __repr__(self) -> str:
        return f'{type(self).__name__}(valid={self.is_valid()})'


class RecursiveSequence[K, V](LazySequence[K, V]):
    """A sequence whose current pair may itself contain a nested sequence.

    This is the capability the recursive adapters (``flatten_recursive``,
    ``filter_recursive``) require.
    """

    __slots__ = ()

    @abstractmethod
    def has_children(self) -> bool:
        """Return True when the current pair holds a nested sequence."""

    @abstractmethod
    def children(self) -> RecursiveSequence[Any, Any]:
        """Return a recursive sequence over the current pair's nested elements."""

    def pair_has_children(self, pair: tuple[K, V]) -> bool:
        """Return True when ``pair``, already read from the cursor, holds a nested sequence.

        Lets walkers read the current pair once and reuse it.
        """
        return self.has_children()

    def pair_children(self, pair: tuple[K, V]) -> RecursiveSequence[Any, Any]:
        """Return the nested sequence of ``pair``, already read from the cursor."""
        return self.children()
