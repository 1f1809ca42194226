"""Sequence adapters.

Every adapter wraps and exclusively owns its inner sequence(s), transforms
what they yield without materializing anything, and restarts them when it
is restarted itself.
"""

from lazyseq.adapters.append import AppendAdapter
from lazyseq.adapters.explode import ExplodeSequence
from lazyseq.adapters.filter import FilterAdapter
from lazyseq.adapters.flip import FlipAdapter
from lazyseq.adapters.initial import InitialAdapter
from lazyseq.adapters.limit import LimitAdapter
from lazyseq.adapters.map import MapAdapter
from lazyseq.adapters.nested import NestedView
from lazyseq.adapters.recursive import RecursiveFilterAdapter, RecursiveFlattenAdapter, TraversalMode

__all__ = [
    'AppendAdapter',
    'ExplodeSequence',
    'FilterAdapter',
    'FlipAdapter',
    'InitialAdapter',
    'LimitAdapter',
    'MapAdapter',
    'NestedView',
    'RecursiveFilterAdapter',
    'RecursiveFlattenAdapter',
    'TraversalMode',
]
