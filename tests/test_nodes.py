"""Tests for the node registry."""

from netdiagram.core.nodes import NodeRegistry, build_nodes, unique


def test_unique_keeps_first_occurrence_and_drops_none():
    assert unique(["b", "a", None, "b", "c", "a"]) == ["b", "a", "c"]


def test_source_labels_come_before_destination_labels():
    nodes = build_nodes(["US", "US", "CN"], ["CN", "CN", "US"])
    assert [(n.id, n.label) for n in nodes] == [(1, "US"), (2, "CN")]


def test_destination_only_labels_are_appended():
    nodes = build_nodes(["a", "b"], ["c", "a", "d"])
    assert [n.label for n in nodes] == ["a", "b", "c", "d"]
    assert [n.id for n in nodes] == [1, 2, 3, 4]


def test_label_and_title_are_the_raw_value():
    node = build_nodes(["checkout"], [])[0]
    assert node.label == "checkout"
    assert node.title == "checkout"


def test_numeric_labels_become_strings_without_duplicates():
    nodes = build_nodes([404, "404", 200], [200.5])
    assert [n.label for n in nodes] == ["404", "200", "200.5"]


def test_ids_are_contiguous_and_labels_unique():
    nodes = build_nodes(list("abcabcxyz"), list("zyxwvu"))
    assert [n.id for n in nodes] == list(range(1, len(nodes) + 1))
    assert len({n.label for n in nodes}) == len(nodes)


def test_empty_columns_build_no_nodes():
    assert build_nodes([], []) == []


class TestNodeRegistry:
    def test_id_for_known_label(self):
        registry = NodeRegistry.from_columns(["US", "CN"], ["FR"])
        assert registry.id_for("US") == 1
        assert registry.id_for("CN") == 2
        assert registry.id_for("FR") == 3
        assert len(registry) == 3

    def test_id_for_unknown_or_none(self):
        registry = NodeRegistry.from_columns(["US"], [])
        assert registry.id_for("DE") is None
        assert registry.id_for(None) is None

    def test_numeric_lookup_matches_string_label(self):
        registry = NodeRegistry.from_columns([500], [])
        assert registry.id_for(500) == 1
        assert 500 in registry
        assert None not in registry
