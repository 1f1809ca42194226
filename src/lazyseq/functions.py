"""Root operations over any iterable input.

Every function first coerces its input with ``coerce``. The lazy operations
wrap the result in adapters and return a ``LazySequence``; nothing is pulled
until the caller iterates. The eager operations restart their input, drain
only as far as they need, and return a plain value or an ``Option``.

Example:
    ```python
    from lazyseq import filter, map, take

    pipeline = take(filter(map([1, 2, 3, 4, 5], lambda x: x * 2), lambda x: x > 4), 2)
    pipeline.to_list()  # [6, 8]
    ```

Note:
    Several names shadow builtins (``map``, ``filter``, ``slice``). Import the
    module or the names explicitly rather than with ``*``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lazyseq._callbacks import bind_callback
from lazyseq._config import get_config
from lazyseq.adapters import (
    AppendAdapter,
    ExplodeSequence,
    FilterAdapter,
    FlipAdapter,
    InitialAdapter,
    LimitAdapter,
    MapAdapter,
    NestedView,
    RecursiveFilterAdapter,
    RecursiveFlattenAdapter,
    TraversalMode,
)
from lazyseq.option import Nothing, NothingType, Option, Some
from lazyseq.sequence import LazySequence, RecursiveSequence
from lazyseq.sources import ContainerSource, coerce

__all__ = [
    'drop',
    'every',
    'explode',
    'filter',
    'filter_recursive',
    'find',
    'flat_map',
    'flatten',
    'flatten_recursive',
    'flip',
    'head',
    'implode',
    'includes',
    'initial',
    'last',
    'map',
    'merge',
    'nested',
    'reduce',
    'search',
    'slice',
    'some',
    'tail',
    'take',
]


# --- Lazy operations ---


def map(iterable: Any, callback: Callable[[Any], Any]) -> LazySequence[Any, Any]:  # noqa: A001
    """Map every value through ``callback``, keeping keys.

    Raises:
        InvalidArgumentError: If ``callback`` is not callable.
    """
    return MapAdapter(coerce(iterable), callback)


def filter(iterable: Any, callback: Callable[..., Any]) -> LazySequence[Any, Any]:  # noqa: A001
    """Keep the pairs for which ``callback(value, key)`` is truthy.

    Raises:
        InvalidArgumentError: If ``callback`` is not callable.
    """
    return FilterAdapter(coerce(iterable), callback)


def slice(iterable: Any, offset: int = 0, count: int = -1) -> LazySequence[Any, Any]:  # noqa: A001
    """Skip ``offset`` elements, then yield up to ``count`` (all when negative)."""
    return LimitAdapter(coerce(iterable), offset, count)


def take(iterable: Any, count: int = -1) -> LazySequence[Any, Any]:
    """Yield the first ``count`` elements."""
    return LimitAdapter(coerce(iterable), 0, count)


def drop(iterable: Any, count: int = 0) -> LazySequence[Any, Any]:
    """Skip the first ``count`` elements and yield the rest.

    Same as ``slice(iterable, count)``.
    """
    return LimitAdapter(coerce(iterable), count)


def tail(iterable: Any) -> LazySequence[Any, Any]:
    """Yield everything but the first element."""
    return LimitAdapter(coerce(iterable), 1)


def initial(iterable: Any) -> LazySequence[Any, Any]:
    """Yield everything but the last element, buffering one pair of lookahead."""
    return InitialAdapter(coerce(iterable))


def nested(iterable: Any) -> RecursiveSequence[Any, Any]:
    """Coerce ``iterable`` and lift it to a ``RecursiveSequence`` if it is not one."""
    sequence = coerce(iterable)
    if isinstance(sequence, RecursiveSequence):
        return sequence
    return NestedView(sequence)


def flatten_recursive(
    iterable: Any,
    mode: TraversalMode = TraversalMode.LEAVES_ONLY,
    depth: int | None = None,
) -> LazySequence[Any, Any]:
    """Flatten a recursive iterable depth-first.

    Args:
        iterable: Anything that coerces to a ``RecursiveSequence``: nested
            lists, tuples and dicts, or the result of ``filter_recursive``.
        mode: Which nodes to yield, see ``TraversalMode``.
        depth: Maximum depth to descend into; ``-1`` is unbounded. Defaults
            to ``SeqConfig.max_depth``.

    Returns:
        A lazy sequence over the nodes selected by ``mode``.

    Raises:
        InvalidArgumentError: If ``iterable`` does not coerce to a recursive
            sequence (generators, mapped pipelines, single values).

    Example:
        ```python
        flatten_recursive([1, [2, [3, 4]], 5]).to_list()  # [1, 2, 3, 4, 5]
        flatten_recursive([1, [2, [3, 4]], 5], depth=1).to_list()  # [1, 2, [3, 4], 5]
        ```
    """
    max_depth = get_config().max_depth if depth is None else depth
    return RecursiveFlattenAdapter(coerce(iterable), mode, max_depth)


def flatten(iterable: Any, depth: int = 1) -> LazySequence[Any, Any]:
    """Flatten nested containers ``depth`` levels deep (one by default).

    Unlike ``flatten_recursive`` this accepts any input: values of a
    non-recursive sequence are checked for nested containers one by one.

    Example:
        ```python
        flatten([1, [2, [3]]]).to_list()  # [1, 2, [3]]
        ```
    """
    return RecursiveFlattenAdapter(nested(iterable), TraversalMode.LEAVES_ONLY, depth)


def flat_map(iterable: Any, callback: Callable[[Any], Any]) -> LazySequence[Any, Any]:
    """Map every value to a container and flatten the results one level.

    Raises:
        InvalidArgumentError: If ``callback`` is not callable.
    """
    return flatten(map(iterable, callback))


def filter_recursive(iterable: Any, callback: Callable[..., Any]) -> RecursiveSequence[Any, Any]:
    """Drop whole subtrees whose container fails ``callback(value, key)``.

    The callback is never called for leaves. The result is still recursive;
    pass it to ``flatten_recursive`` to walk it.

    Raises:
        InvalidArgumentError: If ``callback`` is not callable or
            ``iterable`` does not coerce to a recursive sequence.

    Example:
        ```python
        tree = [1, [2, 3], [4, [5]]]
        pruned = filter_recursive(tree, lambda node: len(node) > 1)
        flatten_recursive(pruned).to_list()  # [1, 2, 3, 4]
        ```
    """
    return RecursiveFilterAdapter(coerce(iterable), callback)


def merge(iterable: Any, *iterables: Any) -> LazySequence[Any, Any]:
    """Concatenate the inputs in argument order, keeping every original key."""
    merged = AppendAdapter(coerce(iterable))
    for other in iterables:
        merged.append(coerce(other))
    return merged


def flip(iterable: Any) -> LazySequence[Any, Any]:
    """Swap keys and values."""
    return FlipAdapter(coerce(iterable))


def explode(text: str, delimiter: str = '') -> LazySequence[int, str]:
    """Split ``text`` lazily on ``delimiter``; an empty delimiter yields single characters."""
    return ExplodeSequence(text, delimiter)


# --- Eager operations ---


def reduce(iterable: Any, callback: Callable[..., Any], initial: Any = None) -> Any:
    """Fold left to right with ``callback(carry, value, key)``, starting from ``initial``.

    Returns ``initial`` unchanged for an empty input.

    Raises:
        InvalidArgumentError: If ``callback`` is not callable.
    """
    fn = bind_callback(callback, 3, fallback_args=2)
    carry = initial
    for key, value in coerce(iterable).items():
        carry = fn(carry, value, key)
    return carry


def every(iterable: Any, callback: Callable[..., Any]) -> bool:
    """Return True if ``callback(value, key)`` is truthy for every pair.

    Stops at the first failing pair. True for an empty input.
    """
    predicate = bind_callback(callback, 2)
    return all(predicate(value, key) for key, value in coerce(iterable).items())


def some(iterable: Any, callback: Callable[..., Any]) -> bool:
    """Return True if ``callback(value, key)`` is truthy for any pair.

    Stops at the first passing pair. False for an empty input.
    """
    predicate = bind_callback(callback, 2)
    return any(predicate(value, key) for key, value in coerce(iterable).items())


def _same(value: Any, needle: Any) -> bool:
    # strict: True does not match 1, 1 does not match 1.0
    return value is needle or (type(value) is type(needle) and value == needle)


def search(iterable: Any, needle: Any) -> Option[Any]:
    """Return ``Some(key)`` of the first value strictly equal to ``needle``, else ``Nothing``.

    Values match when they are the same object, or of the same type and equal.
    """
    for key, value in coerce(iterable).items():
        if _same(value, needle):
            return Some(key)
    return Nothing


def includes(iterable: Any, needle: Any) -> bool:
    """Return True if any value strictly equals ``needle`` (same type and equal)."""
    return search(iterable, needle).is_some()


def find(iterable: Any, callback: Callable[..., Any]) -> Option[Any]:
    """Return ``Some(value)`` for the first pair passing ``callback(value, key)``.

    Example:
        ```python
        find([1, 2, 3], lambda x: x > 5)  # Nothing
        find([1, 2, 0], lambda x: x == 0)  # Some(value=0)
        ```
    """
    predicate = bind_callback(callback, 2)
    for key, value in coerce(iterable).items():
        if predicate(value, key):
            return Some(value)
    return Nothing


def head(iterable: Any) -> Option[Any]:
    """Return ``Some`` of the first value, or ``Nothing`` for an empty input."""
    sequence = coerce(iterable)
    sequence.restart()
    if not sequence.is_valid():
        return Nothing
    return Some(sequence.value())


def last(iterable: Any) -> Option[Any]:
    """Return ``Some`` of the last value, or ``Nothing`` for an empty input.

    Indexable containers jump straight to the end; anything else is drained.
    """
    sequence = coerce(iterable)
    sequence.restart()
    if not sequence.is_valid():
        return Nothing
    if isinstance(sequence, ContainerSource) and sequence.seekable:
        sequence.seek(len(sequence) - 1)
        return Some(sequence.value())
    result: Some[Any] | NothingType = Nothing
    while sequence.is_valid():
        result = Some(sequence.value())
        sequence.advance()
    return result


def implode(iterable: Any, glue: str = '') -> str:
    """Join the string form of every value with ``glue``. Empty input gives ``''``."""
    return glue.join(str(value) for value in coerce(iterable))
