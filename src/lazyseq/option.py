"""Option type: Some[T] | Nothing for lookups that may find no element.

``head``, ``last``, ``find`` and ``search`` return an Option so that a missing
result can never be confused with a legitimate ``None``, ``0``, ``''`` or
``False`` element.

Example:
    ```python
    from lazyseq import find, Nothing, Some

    find([1, 2, 3], lambda x: x > 5)  # Nothing
    find([1, 2, 0], lambda x: x == 0)  # Some(value=0)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Option, holding the element that was found.

    Examples:
        >>> Some(0).unwrap()
        0
        >>> Some(3).map(lambda x: x * 2)
        Some(value=6)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply ``f`` to the contained value.

        Args:
            f: Function applied to the found element.

        Returns:
            Some holding the transformed element.
        """
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Chain another lookup that may itself find nothing."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only when ``predicate`` accepts it."""
        if predicate(self.value):
            return self
        return Nothing

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self; a found element wins over any alternative."""
        return self


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option: the lookup found no element.

    This is a singleton - use the ``Nothing`` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(-1)
        -1
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise, since there is no element to return.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return ``default``."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a caller-supplied message.

        Raises:
            RuntimeError: Always, with ``msg``.
        """
        raise RuntimeError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing; there is no element to transform."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing without calling ``_f``."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing without calling the predicate."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return ``other``."""
        return other


Nothing: NothingType = NothingType()
"""Singleton instance representing a lookup that found no element."""


type Option[T] = Some[T] | NothingType
