"""Callback validation and arity binding.

Callbacks are documented as receiving ``(value, key)`` or ``(carry, value,
key)``, but most callers only care about the value. The signature is
inspected once, when the adapter or operation is built, and the callback is
wrapped so it receives just the leading arguments it declares.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from lazyseq._logging import get_logger
from lazyseq.errors import InvalidArgumentError

__all__ = ['bind_callback', 'ensure_callable']

logger = get_logger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def ensure_callable(callback: Any, argument: str = 'callback') -> Callable[..., Any]:
    """Return ``callback`` unchanged if it is callable.

    Raises:
        InvalidArgumentError: If ``callback`` is not callable.
    """
    if not callable(callback):
        logger.debug('callback_rejected', argument=argument, received=type(callback).__name__)
        raise InvalidArgumentError(argument, f'expected a callable, got {type(callback).__name__}')
    return callback


_VARIADIC = -1


def _positional_arity(callback: Callable[..., Any]) -> int | None:
    """Count positional parameters; ``_VARIADIC`` for ``*args``, None when unknown."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return None
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return _VARIADIC
        if parameter.kind in _POSITIONAL:
            count += 1
    return count


def bind_callback(
    callback: Any,
    max_args: int,
    argument: str = 'callback',
    *,
    fallback_args: int = 1,
) -> Callable[..., Any]:
    """Validate ``callback`` and adapt it to be called with ``max_args`` arguments.

    A callback declaring fewer positional parameters than ``max_args``
    receives only the leading arguments, and a ``*args`` callback receives
    all of them. Builtins without an inspectable signature (``bool``,
    ``str`` on some interpreters) receive the leading ``fallback_args``
    arguments: the value for predicates, carry and value for folds.

    Args:
        callback: The user-supplied callable.
        max_args: How many arguments the call site passes.
        argument: Argument name used in the error message.
        fallback_args: How many leading arguments to pass when the
            signature cannot be inspected.

    Returns:
        A callable accepting exactly ``max_args`` positional arguments.

    Raises:
        InvalidArgumentError: If ``callback`` is not callable.

    Example:
        ```python
        predicate = bind_callback(lambda x: x > 4, 2)
        predicate(5, 'key')  # True
        ```
    """
    fn = ensure_callable(callback, argument)
    arity = _positional_arity(fn)
    if arity is None:
        arity = fallback_args
    if arity == _VARIADIC or arity >= max_args:
        return fn
    return lambda *args: fn(*args[:arity])
