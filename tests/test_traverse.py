"""Tests for traversal: entries() and each()."""

from collections import OrderedDict
from collections.abc import Sequence
from types import MappingProxyType

import pytest
from downdash import NoInstanceError, each, entries
from hypothesis import given

from tests.strategies import int_lists, int_mappings


def _record(collection):
    calls = []
    each(collection, lambda value, key, coll: calls.append((value, key, coll)))
    return calls


class TestEntries:
    """Tests for the (key, value) view over each collection shape."""

    def test_list_entries(self):
        """Sequences yield (index, element) pairs in ascending order."""
        assert list(entries(['a', 'b'])) == [(0, 'a'), (1, 'b')]

    def test_tuple_and_range_entries(self):
        """Any Sequence is accepted, not just list."""
        assert list(entries((5, 6))) == [(0, 5), (1, 6)]
        assert list(entries(range(3))) == [(0, 0), (1, 1), (2, 2)]

    def test_str_is_a_sequence(self):
        """Strings traverse character by character."""
        assert list(entries('hi')) == [(0, 'h'), (1, 'i')]

    def test_mapping_entries(self):
        """Mappings yield their (key, value) items."""
        assert list(entries({'x': 1, 'y': 2})) == [('x', 1), ('y', 2)]

    def test_read_only_mapping(self):
        """Mapping views such as MappingProxyType are mappings too."""
        assert list(entries(MappingProxyType({'k': 'v'}))) == [('k', 'v')]

    def test_none_entries(self):
        """None yields nothing."""
        assert list(entries(None)) == []

    def test_custom_sequence_subclass(self):
        """User-defined Sequence subclasses dispatch through the MRO."""

        class Pair(Sequence):
            def __getitem__(self, index):
                return ('left', 'right')[index]

            def __len__(self):
                return 2

        assert list(entries(Pair())) == [(0, 'left'), (1, 'right')]

    def test_unsupported_type_raises(self):
        """Sets are neither sequences nor mappings."""
        with pytest.raises(NoInstanceError, match="No instance of 'entries' for type 'set'"):
            entries({1, 2})

    def test_unsupported_type_is_type_error(self):
        """NoInstanceError is a TypeError."""
        with pytest.raises(TypeError):
            entries(42)


class TestEach:
    """Tests for each()."""

    def test_visits_sequence_in_order(self):
        """The visitor receives (value, index, collection) in ascending order."""
        items = [10, 20, 30]
        assert _record(items) == [(10, 0, items), (20, 1, items), (30, 2, items)]

    def test_visits_mapping_keys(self):
        """The visitor receives (value, key, collection) for mappings."""
        scores = OrderedDict(a=1, b=2)
        assert _record(scores) == [(1, 'a', scores), (2, 'b', scores)]

    def test_none_is_a_no_op(self):
        """each(None, f) calls f zero times and does not raise."""
        assert _record(None) == []

    def test_empty_collections(self):
        """Empty sequences and mappings produce no calls."""
        assert _record([]) == []
        assert _record({}) == []

    def test_returns_none(self):
        """each() has no return value."""
        assert each([1], lambda *_: 'ignored') is None

    def test_visitor_exception_propagates(self):
        """Exceptions from the visitor stop the traversal unchanged."""
        seen = []

        def visit(value, index, _):
            seen.append(value)
            if index == 1:
                raise KeyError('stop')

        with pytest.raises(KeyError, match='stop'):
            each([1, 2, 3], visit)
        assert seen == [1, 2]

    def test_input_not_mutated(self):
        """Traversal leaves the collection untouched."""
        items = [3, 1, 2]
        each(items, lambda *_: None)
        assert items == [3, 1, 2]

    @given(int_lists)
    def test_sequence_indices_ascend(self, items):
        """Indices passed to the visitor are exactly 0..len-1 in order."""
        assert [key for _, key, _ in _record(items)] == list(range(len(items)))

    @given(int_mappings)
    def test_mapping_keys_visited_once(self, mapping):
        """Every own key is visited exactly once."""
        keys = [key for _, key, _ in _record(mapping)]
        assert sorted(keys) == sorted(mapping)
        assert len(keys) == len(set(keys))
