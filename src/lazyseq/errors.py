"""Error types: dual struct+exception for value-based and raise-based code."""

from __future__ import annotations

import msgspec

from lazyseq._core import LazySeqError

__all__ = [
    'InvalidArgument',
    'InvalidArgumentError',
    'RestartUnsupported',
    'RestartUnsupportedError',
    'SequenceExhausted',
    'SequenceExhaustedError',
]


# --- Construction Errors ---


class InvalidArgument(msgspec.Struct, frozen=True, gc=False):
    """Bad argument at pipeline construction - struct variant."""

    argument: str
    reason: str

    def to_exception(self) -> InvalidArgumentError:
        """Convert to exception for raise-based code."""
        return InvalidArgumentError(self.argument, self.reason)


class InvalidArgumentError(LazySeqError, ValueError):
    """Bad argument at pipeline construction - exception variant.

    Raised for a non-callable callback and for a non-recursive input handed
    to a recursive-only adapter. Always raised before any element is pulled.
    """

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f'{argument}: {reason}', code='INVALID_ARGUMENT')

    def to_struct(self) -> InvalidArgument:
        """Convert to struct for value-based code."""
        return InvalidArgument(self.argument, self.reason)


# --- Traversal Errors ---


class SequenceExhausted(msgspec.Struct, frozen=True, gc=False):
    """Pair read from an exhausted sequence - struct variant."""

    sequence: str

    def to_exception(self) -> SequenceExhaustedError:
        """Convert to exception for raise-based code."""
        return SequenceExhaustedError(self.sequence)


class SequenceExhaustedError(LazySeqError, LookupError):
    """Pair read from an exhausted sequence - exception variant."""

    def __init__(self, sequence: str) -> None:
        self.sequence = sequence
        super().__init__(f'{sequence} is exhausted; check is_valid() first', code='SEQUENCE_EXHAUSTED')

    def to_struct(self) -> SequenceExhausted:
        """Convert to struct for value-based code."""
        return SequenceExhausted(self.sequence)


class RestartUnsupported(msgspec.Struct, frozen=True, gc=False):
    """Restart requested on a consumed one-shot source - struct variant."""

    source: str
    position: int

    def to_exception(self) -> RestartUnsupportedError:
        """Convert to exception for raise-based code."""
        return RestartUnsupportedError(self.source, self.position)


class RestartUnsupportedError(LazySeqError, RuntimeError):
    """Restart requested on a consumed one-shot source - exception variant."""

    def __init__(self, source: str, position: int) -> None:
        self.source = source
        self.position = position
        super().__init__(
            f'{source} wraps a one-shot iterator already advanced to position {position}',
            code='RESTART_UNSUPPORTED',
        )

    def to_struct(self) -> RestartUnsupported:
        """Convert to struct for value-based code."""
        return RestartUnsupported(self.source, self.position)
