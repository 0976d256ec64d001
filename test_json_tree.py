"""
Tests for JsonNode, the untyped parsed-tree view.
"""

import json

import pytest

from jsonkit import JsonKind, JsonNode, SerializerOptions


def test_parse_and_navigate():
    node = JsonNode.parse('{"items": [{"n": 1}, {"n": 2}], "ok": true, "none": null}')
    assert node.kind is JsonKind.OBJECT
    assert node["items"].kind is JsonKind.ARRAY
    assert node["items"][1]["n"].value == 2
    assert node["ok"].kind is JsonKind.TRUE
    assert node["none"].kind is JsonKind.NULL
    assert "items" in node
    assert len(node) == 3


@pytest.mark.parametrize("text,kind", [
    ('"s"', JsonKind.STRING),
    ("1.5", JsonKind.NUMBER),
    ("3", JsonKind.NUMBER),
    ("false", JsonKind.FALSE),
    ("[]", JsonKind.ARRAY),
])
def test_kinds(text, kind):
    assert JsonNode.parse(text).kind is kind


def test_get_returns_default_for_missing_key():
    node = JsonNode({"a": 1})
    assert node.get("a") == JsonNode(1)
    assert node.get("b") is None


def test_iteration():
    assert [child.value for child in JsonNode([1, "x"])] == [1, "x"]
    assert list(JsonNode({"a": 1, "b": 2})) == ["a", "b"]
    with pytest.raises(TypeError):
        iter(JsonNode(3))


def test_scalar_nodes_cannot_be_indexed():
    with pytest.raises(TypeError):
        JsonNode("text")[0]
    with pytest.raises(TypeError):
        len(JsonNode(None))


def test_rejects_non_json_values():
    with pytest.raises(TypeError):
        JsonNode(object())


def test_to_json_uses_options():
    node = JsonNode({"a": [1, 2]})
    assert node.to_json() == '{"a":[1,2]}'
    assert json.loads(node.to_json(SerializerOptions(indent=True))) == {"a": [1, 2]}


def test_malformed_text_raises_engine_error():
    with pytest.raises(json.JSONDecodeError):
        JsonNode.parse("[1,")


def test_equality_and_repr():
    assert JsonNode.parse("[1]") == JsonNode([1])
    assert JsonNode(1) != JsonNode(True)
    assert repr(JsonNode({"a": 1})) == 'JsonNode(object: {"a":1})'
