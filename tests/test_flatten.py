"""Tests for value tree conversion and flattening."""

import datetime

import pytest

from flatenv.config import (
    BooleanNode,
    MappingNode,
    NumberNode,
    SequenceNode,
    StringNode,
    canonicalize_keys,
    flatten,
    stringify,
    to_store_key,
)
from flatenv.config.values import to_mapping_node, to_node


def tree(document: dict) -> MappingNode:
    return to_mapping_node(document)


class TestToNode:
    """Tests for to_node"""

    def test_scalars(self):
        assert to_node("text") == StringNode("text")
        assert to_node(3) == NumberNode(3)
        assert to_node(2.5) == NumberNode(2.5)
        assert to_node(True) == BooleanNode(True)

    def test_bool_is_not_a_number(self):
        assert isinstance(to_node(False), BooleanNode)

    def test_none_becomes_empty_string(self):
        assert to_node(None) == StringNode("")

    def test_other_scalars_use_str(self):
        assert to_node(datetime.date(2024, 1, 15)) == StringNode("2024-01-15")

    def test_containers(self):
        node = to_node({"a": [1, {"b": "c"}]})
        assert node == MappingNode(
            {"a": SequenceNode([NumberNode(1), MappingNode({"b": StringNode("c")})])}
        )

    def test_mapping_node_keys_become_strings(self):
        node = to_mapping_node({1: "one", 2.5: [2]})
        assert isinstance(node, MappingNode)
        assert node.entries == {"1": StringNode("one"), "2.5": SequenceNode([NumberNode(2)])}


class TestStringify:
    """Tests for stringify"""

    @pytest.mark.parametrize(
        "node,expected",
        [
            (StringNode("plain"), "plain"),
            (BooleanNode(True), "true"),
            (BooleanNode(False), "false"),
            (NumberNode(5432), "5432"),
            (NumberNode(-7), "-7"),
            (NumberNode(5432.0), "5432"),
            (NumberNode(0.5), "0.5"),
            (NumberNode(1e21), "1e+21"),
        ],
    )
    def test_scalars(self, node, expected):
        assert stringify(node) == expected

    def test_containers_render_as_compact_json(self):
        assert stringify(MappingNode({"host": StringNode("a")})) == '{"host":"a"}'
        assert stringify(SequenceNode([NumberNode(1), BooleanNode(True)])) == "[1,true]"


class TestFlatten:
    """Tests for flatten"""

    def test_nested_mappings_use_dotted_names(self):
        assert flatten(tree({"a": {"b": {"c": 1}}})) == {"a.b.c": "1"}

    def test_prefix(self):
        assert flatten(tree({"host": "h"}), "database") == {"database.host": "h"}

    def test_arrays_join_with_commas(self):
        assert flatten(tree({"list": ["x", "y", "z"]})) == {"list": "x,y,z"}

    def test_empty_array(self):
        assert flatten(tree({"list": []})) == {"list": ""}

    def test_mixed_scalar_array(self):
        assert flatten(tree({"mixed": ["x", 1, True, 2.5]})) == {"mixed": "x,1,true,2.5"}

    def test_structures_inside_arrays_are_not_flattened(self):
        flat = flatten(tree({"servers": [{"host": "a"}, {"host": "b"}], "matrix": [[1, 2], [3]]}))
        assert flat == {
            "servers": '{"host":"a"},{"host":"b"}',
            "matrix": "[1,2],[3]",
        }

    def test_empty_nested_mapping_produces_nothing(self):
        assert flatten(tree({"empty": {}, "k": "v"})) == {"k": "v"}

    def test_full_document(self):
        flat = flatten(
            tree(
                {
                    "database": {"host": "localhost", "port": 5432, "ssl": False},
                    "app": {"debug": True, "features": ["auth", "logging", "metrics"]},
                    "api_key": "json-secret-key",
                }
            )
        )
        assert flat == {
            "database.host": "localhost",
            "database.port": "5432",
            "database.ssl": "false",
            "app.debug": "true",
            "app.features": "auth,logging,metrics",
            "api_key": "json-secret-key",
        }

    def test_unknown_node_type_is_rejected(self):
        bad = MappingNode({"x": object()})  # type: ignore[dict-item]
        with pytest.raises(TypeError, match="unknown value node at x"):
            flatten(bad)


class TestStoreKeys:
    """Tests for to_store_key and canonicalize_keys"""

    def test_to_store_key(self):
        assert to_store_key("a.b.c") == "A_B_C"
        assert to_store_key("list") == "LIST"
        assert to_store_key("api_key") == "API_KEY"

    def test_canonicalize_keys(self):
        assert canonicalize_keys({"database.host": "h", "list": "x,y,z"}) == {
            "DATABASE_HOST": "h",
            "LIST": "x,y,z",
        }

    def test_round_trip_nested_number(self):
        assert canonicalize_keys(flatten(tree({"a": {"b": {"c": 1}}}))) == {"A_B_C": "1"}
