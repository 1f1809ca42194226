"""lazyseq: lazy, pull-based sequence utilities for Python 3.13+.

Compose map, filter, slice and flatten over lists, dicts, generators or
custom sequences into a single pipeline that is evaluated one element at a
time, only as far as the consumer asks.

Flat imports (preferred):
    from lazyseq import map, filter, take, flatten_recursive, reduce
    from lazyseq import LazySequence, coerce, Some, Nothing

Submodule imports (for organization):
    from lazyseq.functions import map, filter
    from lazyseq.adapters import MapAdapter, TraversalMode
    from lazyseq.sources import ContainerSource, coerce
"""

# Configuration and logging
from lazyseq._config import SeqConfig, get_config, init
from lazyseq._core import LazySeqError
from lazyseq._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Adapters
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

# Errors
from lazyseq.errors import (
    InvalidArgument,
    InvalidArgumentError,
    RestartUnsupported,
    RestartUnsupportedError,
    SequenceExhausted,
    SequenceExhaustedError,
)

# Root operations
from lazyseq.functions import (
    drop,
    every,
    explode,
    filter,
    filter_recursive,
    find,
    flat_map,
    flatten,
    flatten_recursive,
    flip,
    head,
    implode,
    includes,
    initial,
    last,
    map,
    merge,
    nested,
    reduce,
    search,
    slice,
    some,
    tail,
    take,
)
from lazyseq.option import Nothing, NothingType, Option, Some

# Sequences
from lazyseq.sequence import LazySequence, RecursiveSequence
from lazyseq.sources import ContainerSource, IterableSource, ValueSource, coerce, to_sequence

__all__ = [
    'AppendAdapter',
    'ContainerSource',
    'ExplodeSequence',
    'FilterAdapter',
    'FlipAdapter',
    'InitialAdapter',
    'InvalidArgument',
    'InvalidArgumentError',
    'IterableSource',
    'LazySeqError',
    'LazySequence',
    'LimitAdapter',
    'MapAdapter',
    'NestedView',
    'Nothing',
    'NothingType',
    'Option',
    'RecursiveFilterAdapter',
    'RecursiveFlattenAdapter',
    'RecursiveSequence',
    'RestartUnsupported',
    'RestartUnsupportedError',
    'SeqConfig',
    'SequenceExhausted',
    'SequenceExhaustedError',
    'Some',
    'TraversalMode',
    'ValueSource',
    'add_log_hook',
    'clear_log_hooks',
    'coerce',
    'configure_logging',
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
    'get_config',
    'get_logger',
    'head',
    'implode',
    'includes',
    'init',
    'initial',
    'last',
    'map',
    'merge',
    'nested',
    'reduce',
    'remove_log_hook',
    'search',
    'slice',
    'some',
    'tail',
    'take',
    'to_sequence',
]

__version__ = '0.1.0'
