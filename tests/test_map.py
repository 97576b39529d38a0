import pandas as pd
import pytest

from consolidated_map import Children, ConsolidatedMap, ConsolidatedMapBuilder


def make_map():
    builder = ConsolidatedMapBuilder()
    builder.insert(10, 20)
    builder.insert(20, 30)
    return builder.build()


class TestChildren:
    def test_canonical_example(self):
        cmap = make_map()
        assert list(cmap.children(10)) == [20]
        assert list(cmap.children(20)) == [30]
        assert list(cmap.children(30)) == []

    def test_absent_key_is_empty(self):
        assert list(make_map().children(5)) == []

    def test_returns_children_iterator(self):
        assert isinstance(make_map().children(10), Children)

    def test_single_pass(self):
        it = make_map().children(10)
        assert list(it) == [20]
        assert list(it) == []

    def test_length_hint(self):
        cmap = ConsolidatedMap.from_pairs([(1, 2), (1, 3), (1, 4)])
        it = cmap.children(1)
        assert it.__length_hint__() == 3
        next(it)
        assert it.__length_hint__() == 2

    def test_repeated_queries_agree(self):
        cmap = ConsolidatedMap.from_pairs([(1, 3), (1, 2), (2, 5)])
        assert list(cmap.children(1)) == list(cmap.children(1)) == [3, 2]


class TestContainsChild:
    def test_present_child(self):
        assert make_map().contains_child(10, 20)

    def test_child_of_another_parent(self):
        assert not make_map().contains_child(10, 30)

    def test_absent_parent(self):
        assert not make_map().contains_child(99, 20)

    def test_duplicates_and_self_loop(self):
        cmap = ConsolidatedMap.from_pairs([(1, 2), (1, 2), (3, 3)])
        assert list(cmap.children(1)) == [2, 2]
        assert cmap.contains_child(1, 2)
        assert cmap.contains_child(3, 3)

    @pytest.mark.parametrize("child", [20, 21, 30])
    def test_agrees_with_children(self, child):
        cmap = ConsolidatedMap.from_pairs([(10, 20), (10, 21), (20, 30)])
        assert cmap.contains_child(10, child) == (child in list(cmap.children(10)))


class TestMapInspection:
    def test_default_is_empty(self):
        cmap = ConsolidatedMap()
        assert len(cmap) == 0
        assert cmap.parents == []
        assert list(cmap.consolidated(1)) == [1]
        assert repr(cmap) == "ConsolidatedMap (empty)"

    def test_parents_and_membership(self):
        cmap = make_map()
        assert cmap.parents == [10, 20]
        assert len(cmap) == 2
        assert 10 in cmap
        assert 30 not in cmap

    def test_repr_lists_edges(self):
        assert repr(make_map()) == "ConsolidatedMap:\n  10 → 20\n  20 → 30"

    def test_from_pairs_accepts_generator(self):
        cmap = ConsolidatedMap.from_pairs((i, i + 1) for i in range(3))
        assert list(cmap.consolidated(0)) == [0, 1, 2, 3]

    def test_string_keys(self):
        cmap = ConsolidatedMap.from_pairs([("root", "a"), ("a", "b")])
        assert list(cmap.consolidated("root")) == ["root", "a", "b"]

    def test_tuple_keys(self):
        cmap = ConsolidatedMap.from_pairs([((), (1,)), ((1,), (1, 2))])
        assert list(cmap.consolidated(())) == [(), (1,), (1, 2)]


class TestMapIsolation:
    def test_constructor_copies_entries(self):
        entries = {1: [2]}
        cmap = ConsolidatedMap(entries)
        entries[1].append(3)
        entries[4] = [5]
        assert list(cmap.children(1)) == [2]
        assert 4 not in cmap

    def test_live_iterator_unaffected_by_caller_changes(self):
        entries = {1: [2, 3]}
        cmap = ConsolidatedMap(entries)
        it = cmap.children(1)
        assert next(it) == 2
        entries[1].append(4)
        assert list(it) == [3]

    def test_constructor_accepts_any_iterable_values(self):
        cmap = ConsolidatedMap({"a": iter(["b", "c"])})
        assert list(cmap.children("a")) == ["b", "c"]
        assert list(cmap.children("a")) == ["b", "c"]


class TestSubclassing:
    class Tagged(ConsolidatedMap):
        pass

    def test_from_pairs_returns_subclass(self):
        cmap = self.Tagged.from_pairs([(1, 2)])
        assert type(cmap) is self.Tagged
        assert list(cmap.children(1)) == [2]

    def test_from_frame_returns_subclass(self):
        cmap = self.Tagged.from_frame(pd.DataFrame({"parent": [1], "child": [2]}))
        assert type(cmap) is self.Tagged
