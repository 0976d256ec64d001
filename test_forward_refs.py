"""
Tests for types declared with postponed annotations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from jsonkit import Jsons, JsonSchemaError, json_field


@dataclass
class TreeNode:
    label: str
    children: List[TreeNode] = field(default_factory=list)
    parent_label: Optional[str] = json_field(name="parentLabel", default=None)


def test_postponed_annotations_resolve_at_module_level():
    tree = TreeNode("root", [TreeNode("leaf", parent_label="root")])
    text = Jsons.to_json(tree)
    assert '"parentLabel":"root"' in text

    restored = Jsons.to_obj(text, TreeNode)
    assert restored == tree
    assert isinstance(restored.children[0], TreeNode)


def test_unresolvable_annotation_raises_schema_error():
    @dataclass
    class Local:
        value: int

    @dataclass
    class Holder:
        item: Local

    with pytest.raises(JsonSchemaError):
        Jsons.to_obj('{"item": {"value": "not-an-int"}}', Holder)
    with pytest.raises(JsonSchemaError):
        Jsons.to_json(Holder(Local(1)))
