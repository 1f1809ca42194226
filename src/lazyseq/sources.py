"""Source sequences and coercion of arbitrary Python values.

``coerce`` is the single entry point every root operation uses to normalize
its input:

| Input | Result |
|-------|--------|
| a ``LazySequence`` | the same object |
| an object with ``__lazy_sequence__()`` | whatever that method returns |
| list, tuple, range, dict and other array-like containers | ``ContainerSource`` (recursive) |
| str, bytes and non-iterable values | ``ValueSource`` (one pair, key 0) |
| generators, sets and any other iterable | ``IterableSource`` |

Example:
    ```python
    from lazyseq import coerce

    coerce([1, 2]).to_dict()  # {0: 1, 1: 2}
    coerce({'a': 1}).to_dict()  # {'a': 1}
    coerce(42).to_dict()  # {0: 42}
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from lazyseq._core import is_container
from lazyseq._logging import get_logger
from lazyseq.errors import RestartUnsupportedError
from lazyseq.sequence import LazySequence, RecursiveSequence

__all__ = [
    'ContainerSource',
    'IterableSource',
    'ValueSource',
    'coerce',
    'to_sequence',
]

logger = get_logger(__name__)

_END = object()


class ValueSource[V](LazySequence[int, V]):
    """A sequence yielding exactly one pair: ``(0, value)``."""

    __slots__ = ('_valid', '_value')

    def __init__(self, value: V) -> None:
        self._value = value
        self._valid = True

    def current_pair(self) -> tuple[int, V]:
        if not self._valid:
            raise self._exhausted()
        return 0, self._value

    def advance(self) -> None:
        self._valid = False

    def is_valid(self) -> bool:
        return self._valid

    def restart(self) -> None:
        self._valid = True


class IterableSource[V](LazySequence[int, V]):
    """A sequence over any Python iterable, keyed by position.

    Elements are pulled from the underlying iterator one at a time, only
    when ``is_valid()`` or ``current_pair()`` needs them.

    Re-iterable collections (sets, dict views, custom ``__iter__`` classes)
    restart by calling ``iter()`` again. One-shot iterators such as
    generators can only be restarted while still at their first position;
    restarting one later raises ``RestartUnsupportedError``.
    """

    __slots__ = ('_current', '_done', '_iterable', '_iterator', '_one_shot', '_pending', '_position')

    def __init__(self, iterable: Iterable[V]) -> None:
        self._iterable = iterable
        self._one_shot = isinstance(iterable, Iterator)
        self._iterator: Iterator[V] | None = None
        self._current: Any = _END
        self._position = 0
        self._pending = True
        self._done = False

    @property
    def one_shot(self) -> bool:
        """True when the wrapped object is an iterator that cannot be replayed."""
        return self._one_shot

    def _fill(self) -> None:
        if self._iterator is None:
            self._iterator = iter(self._iterable)
        if self._pending and not self._done:
            self._pending = False
            self._current = next(self._iterator, _END)
            if self._current is _END:
                self._done = True

    def current_pair(self) -> tuple[int, V]:
        if not self.is_valid():
            raise self._exhausted()
        return self._position, self._current

    def advance(self) -> None:
        if not self.is_valid():
            return
        self._position += 1
        self._pending = True

    def is_valid(self) -> bool:
        self._fill()
        return not self._done

    def restart(self) -> None:
        if self._one_shot:
            if self._position > 0:
                logger.debug('restart_refused', source=type(self._iterable).__name__, position=self._position)
                raise RestartUnsupportedError(type(self._iterable).__name__, self._position)
            return
        self._iterator = None
        self._current = _END
        self._position = 0
        self._pending = True
        self._done = False


class ContainerSource[K, V](RecursiveSequence[K, V]):
    """A recursive sequence over an array-like container.

    Sequences (list, tuple, range, ...) are keyed by index, mappings by their
    own keys. A pair has children when its value is itself such a container;
    ``children()`` walks that nested container.

    Sequence containers also support random access through ``seek()``,
    which ``last()`` uses to skip straight to the final element.
    """

    __slots__ = ('_container', '_current', '_items', '_mapping', '_position')

    def __init__(self, container: Any) -> None:
        self._container = container
        self._mapping = isinstance(container, Mapping)
        self._items: Iterator[tuple[K, V]] | None = None
        self._current: Any = _END
        self._position = 0
        self.restart()

    @property
    def container(self) -> Any:
        """The wrapped container."""
        return self._container

    @property
    def seekable(self) -> bool:
        """True when the container supports positional access."""
        return not self._mapping

    def __len__(self) -> int:
        return len(self._container)

    def seek(self, position: int) -> None:
        """Move the cursor to ``position``; past the end leaves the sequence exhausted.

        Raises:
            TypeError: If the container is a mapping.
        """
        if self._mapping:
            msg = 'mapping containers do not support seek()'
            raise TypeError(msg)
        self._position = max(0, position)

    def current_pair(self) -> tuple[K, V]:
        if not self.is_valid():
            raise self._exhausted()
        if self._mapping:
            return self._current
        return self._position, self._container[self._position]  # type: ignore[return-value]

    def advance(self) -> None:
        if not self.is_valid():
            return
        self._position += 1
        if self._mapping:
            self._current = next(self._items, _END)  # type: ignore[arg-type]

    def is_valid(self) -> bool:
        if self._mapping:
            return self._current is not _END
        return self._position < len(self._container)

    def restart(self) -> None:
        self._position = 0
        if self._mapping:
            self._items = iter(self._container.items())
            self._current = next(self._items, _END)

    def has_children(self) -> bool:
        return self.is_valid() and is_container(self.current_pair()[1])

    def children(self) -> ContainerSource[Any, Any]:
        return ContainerSource(self.current_pair()[1])

    def pair_has_children(self, pair: tuple[K, V]) -> bool:
        return is_container(pair[1])

    def pair_children(self, pair: tuple[K, V]) -> ContainerSource[Any, Any]:
        return ContainerSource(pair[1])

    def __repr__(self) -> str:
        return f'ContainerSource({type(self._container).__name__}, position={self._position})'


def coerce(obj: Any) -> LazySequence[Any, Any]:
    """Convert any value into a ``LazySequence``. Never fails.

    Args:
        obj: A sequence, a sequence-producing object, a container, an
            iterable or a single value.

    Returns:
        ``obj`` itself when it already is a ``LazySequence``, otherwise a
        source sequence wrapping it.
    """
    if isinstance(obj, LazySequence):
        return obj
    producer = getattr(type(obj), '__lazy_sequence__', None)
    if producer is not None:
        return producer(obj)
    if is_container(obj):
        return ContainerSource(obj)
    if isinstance(obj, str | bytes | bytearray | memoryview) or not isinstance(obj, Iterable):
        return ValueSource(obj)
    return IterableSource(obj)


to_sequence = coerce
