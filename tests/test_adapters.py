"""Tests for the Map, Filter, Limit, Append, Flip, Initial and Explode adapters."""

from __future__ import annotations

import pytest
from lazyseq import (
    AppendAdapter,
    ContainerSource,
    ExplodeSequence,
    FilterAdapter,
    FlipAdapter,
    InitialAdapter,
    InvalidArgumentError,
    IterableSource,
    LazySeqError,
    LimitAdapter,
    MapAdapter,
    RestartUnsupportedError,
    SequenceExhaustedError,
    ValueSource,
)


def pairs(seq) -> list[tuple]:
    return list(seq.items())


class TestMapAdapter:
    """Tests for MapAdapter."""

    def test_maps_values_and_keeps_keys(self) -> None:
        seq = MapAdapter(ContainerSource({'a': 1, 'b': 2}), lambda x: x * 10)
        assert pairs(seq) == [('a', 10), ('b', 20)]

    def test_non_callable_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            MapAdapter(ContainerSource([1]), 'nope')
        assert exc_info.value.argument == 'callback'
        assert exc_info.value.code == 'INVALID_ARGUMENT'
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, LazySeqError)

    def test_callback_not_called_until_read(self, spy) -> None:
        seq = MapAdapter(ContainerSource([1, 2]), spy)
        assert spy.calls == []
        seq.advance()
        assert spy.calls == []

    def test_callback_runs_on_every_read(self, spy) -> None:
        seq = MapAdapter(ContainerSource([1]), spy)
        seq.current_pair()
        seq.current_pair()
        assert len(spy.calls) == 2

    def test_exhausted_raises(self) -> None:
        seq = MapAdapter(ContainerSource([]), str)
        with pytest.raises(SequenceExhaustedError):
            seq.current_pair()


class TestFilterAdapter:
    """Tests for FilterAdapter."""

    def test_keeps_matching_pairs_with_keys(self) -> None:
        seq = FilterAdapter(ContainerSource([1, 2, 3, 4]), lambda x: x % 2 == 0)
        assert pairs(seq) == [(1, 2), (3, 4)]

    def test_predicate_receives_value_and_key(self) -> None:
        seq = FilterAdapter(ContainerSource({'keep': 1, 'drop': 2}), lambda value, key: key == 'keep')
        assert pairs(seq) == [('keep', 1)]

    def test_skips_on_construction(self) -> None:
        inner = ContainerSource([1, 3, 4])
        FilterAdapter(inner, lambda x: x == 4)
        assert inner.current_pair() == (2, 4)

    def test_truthiness(self) -> None:
        seq = FilterAdapter(ContainerSource([0, '', 'x', [], [0]]), lambda x: x)
        assert seq.to_list() == ['x', [0]]

    def test_nothing_matches(self) -> None:
        seq = FilterAdapter(ContainerSource([1, 2]), lambda x: False)
        assert not seq.is_valid()
        assert seq.to_list() == []

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            FilterAdapter(ContainerSource([1]), None)
        assert exc_info.value.argument == 'predicate'

    def test_generator_drains_once(self) -> None:
        seq = FilterAdapter(IterableSource(x for x in range(6)), lambda x: x > 2)
        assert seq.to_list() == [3, 4, 5]
        with pytest.raises(RestartUnsupportedError):
            seq.to_list()

    def test_restart_before_advance_keeps_position(self, spy) -> None:
        spy.result = False
        seq = FilterAdapter(ContainerSource([1, 2]), spy)
        seq.restart()
        seq.restart()
        assert spy.calls == [(1, 0), (2, 1)]

    def test_restart_after_drain_replays(self) -> None:
        seq = FilterAdapter(ContainerSource([1, 2, 3, 4]), lambda x: x % 2 == 0)
        assert seq.to_list() == [2, 4]
        assert seq.to_list() == [2, 4]

    def test_built_over_drained_source(self) -> None:
        source = ContainerSource([1, 2, 3])
        assert source.to_list() == [1, 2, 3]
        assert FilterAdapter(source, lambda x: x > 1).to_list() == [2, 3]


class TestLimitAdapter:
    """Tests for LimitAdapter."""

    def test_offset_and_count(self) -> None:
        seq = LimitAdapter(ContainerSource([0, 1, 2, 3, 4]), 1, 2)
        assert pairs(seq) == [(1, 1), (2, 2)]

    def test_negative_count_is_unbounded(self) -> None:
        assert LimitAdapter(ContainerSource([0, 1, 2]), 1, -1).to_list() == [1, 2]

    def test_zero_count(self) -> None:
        seq = LimitAdapter(ContainerSource([0, 1]), 0, 0)
        assert not seq.is_valid()

    def test_offset_past_end_yields_nothing(self) -> None:
        assert LimitAdapter(ContainerSource([0, 1]), 10).to_list() == []

    def test_negative_offset_is_zero(self) -> None:
        seq = LimitAdapter(ContainerSource([0, 1]), -3, 1)
        assert seq.offset == 0
        assert seq.to_list() == [0]

    def test_does_not_pull_past_count(self) -> None:
        pulled: list[int] = []

        def produce():
            for i in range(10):
                pulled.append(i)
                yield i

        seq = LimitAdapter(IterableSource(produce()), 0, 2)
        assert seq.to_list() == [0, 1]
        assert pulled == [0, 1]

    def test_restart_replays_window(self) -> None:
        seq = LimitAdapter(ContainerSource('abcdef'), 2, 3)
        assert seq.to_list() == ['c', 'd', 'e']
        assert seq.to_list() == ['c', 'd', 'e']

    def test_offset_over_generator_drains_once(self) -> None:
        seq = LimitAdapter(IterableSource(iter('abcdef')), 2, 3)
        assert seq.to_list() == ['c', 'd', 'e']
        with pytest.raises(RestartUnsupportedError):
            seq.to_list()

    def test_built_over_drained_sequence(self) -> None:
        inner = FilterAdapter(ContainerSource([1, 2, 3, 4]), lambda x: x % 2 == 0)
        assert inner.to_list() == [2, 4]
        assert LimitAdapter(inner, 0, 1).to_list() == [2]
        assert LimitAdapter(inner, 1).to_list() == [4]


class TestAppendAdapter:
    """Tests for AppendAdapter."""

    def test_concatenates_keeping_keys(self) -> None:
        seq = AppendAdapter(ContainerSource([1, 2]), ContainerSource({'k': 3}), ValueSource(4))
        assert pairs(seq) == [(0, 1), (1, 2), ('k', 3), (0, 4)]

    def test_skips_empty_sequences(self) -> None:
        seq = AppendAdapter(ContainerSource([]), ContainerSource([1]), ContainerSource([]))
        assert seq.to_list() == [1]

    def test_no_sequences(self) -> None:
        seq = AppendAdapter()
        assert not seq.is_valid()
        with pytest.raises(SequenceExhaustedError):
            seq.current_pair()

    def test_append_after_construction(self) -> None:
        seq = AppendAdapter(ContainerSource([1]))
        seq.append(ContainerSource([2]))
        assert seq.sequence_count == 2
        assert seq.to_list() == [1, 2]

    def test_sequence_count_is_not_a_length(self) -> None:
        seq = AppendAdapter(ContainerSource([]), ContainerSource([]))
        assert seq.sequence_count == 2
        assert not seq.is_valid()
        assert not hasattr(seq, '__len__')

    def test_restart_restarts_every_sequence(self) -> None:
        seq = AppendAdapter(ContainerSource([1]), ContainerSource([2]))
        assert seq.to_list() == [1, 2]
        assert seq.to_list() == [1, 2]


class TestFlipAdapter:
    """Tests for FlipAdapter."""

    def test_swaps_key_and_value(self) -> None:
        assert pairs(FlipAdapter(ContainerSource({'a': 1, 'b': 2}))) == [(1, 'a'), (2, 'b')]

    def test_list_values_become_keys(self) -> None:
        assert FlipAdapter(ContainerSource(['x', 'y'])).to_dict() == {'x': 0, 'y': 1}


class TestInitialAdapter:
    """Tests for InitialAdapter."""

    def test_drops_last_pair(self) -> None:
        assert pairs(InitialAdapter(ContainerSource(['a', 'b', 'c']))) == [(0, 'a'), (1, 'b')]

    def test_single_and_empty(self) -> None:
        assert InitialAdapter(ContainerSource([1])).to_list() == []
        assert InitialAdapter(ContainerSource([])).to_list() == []

    def test_buffers_one_pair(self) -> None:
        pulled: list[int] = []

        def produce():
            for i in range(5):
                pulled.append(i)
                yield i

        seq = InitialAdapter(IterableSource(produce()))
        assert pulled == []
        assert seq.current_pair() == (0, 0)
        assert pulled == [0, 1]

    def test_falsy_values_are_yielded(self) -> None:
        assert InitialAdapter(ContainerSource([None, 0, 1])).to_list() == [None, 0]

    def test_restart(self) -> None:
        seq = InitialAdapter(ContainerSource([1, 2, 3]))
        assert seq.to_list() == [1, 2]
        assert seq.to_list() == [1, 2]

    def test_generator_drains_once_after_lookahead(self) -> None:
        seq = InitialAdapter(IterableSource(iter([1, 2, 3])))
        assert seq.is_valid()
        assert seq.to_list() == [1, 2]
        with pytest.raises(RestartUnsupportedError):
            seq.to_list()


class TestExplodeSequence:
    """Tests for ExplodeSequence."""

    @pytest.mark.parametrize(
        ('text', 'delimiter'),
        [
            ('a,b,c', ','),
            ('a,,b', ','),
            (',a,', ','),
            ('', ','),
            ('no-delimiter', ','),
            ('a::b::c', '::'),
            ('::', '::'),
        ],
    )
    def test_matches_str_split(self, text: str, delimiter: str) -> None:
        assert ExplodeSequence(text, delimiter).to_list() == text.split(delimiter)

    def test_keys_are_field_positions(self) -> None:
        assert pairs(ExplodeSequence('x;y', ';')) == [(0, 'x'), (1, 'y')]

    def test_empty_delimiter_yields_characters(self) -> None:
        assert pairs(ExplodeSequence('abc')) == [(0, 'a'), (1, 'b'), (2, 'c')]

    def test_empty_text_with_empty_delimiter(self) -> None:
        assert ExplodeSequence('').to_list() == []

    def test_restart(self) -> None:
        seq = ExplodeSequence('1 2 3', ' ')
        seq.advance()
        seq.restart()
        assert seq.current_pair() == (0, '1')
