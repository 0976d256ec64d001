"""
Untyped parsed-JSON tree nodes.

A JsonNode is what you get when text has been parsed but not yet bound to a
Python type, e.g. a request body already decoded by a surrounding framework.
Jsons.to_obj_from_tree() turns a node into a typed value.
"""

import json
from enum import Enum
from typing import Any, Iterator, Optional, Union

from pydantic_core import core_schema

from jsonkit.core.options import DEFAULT_OPTIONS, SerializerOptions


class JsonKind(Enum):
    """Kind of value held by a JsonNode."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


def kind_of(value: Any) -> JsonKind:
    """Classify a plain parsed value."""
    if value is None:
        return JsonKind.NULL
    if value is True:
        return JsonKind.TRUE
    if value is False:
        return JsonKind.FALSE
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    raise TypeError(f"Not a parsed JSON value: {type(value).__name__}")


class JsonNode:
    """
    Read-only view over a parsed JSON value.

    Children are wrapped lazily, so indexing a node never copies the tree.
    """

    __slots__ = ("_value", "_kind")

    def __init__(self, value: Any):
        self._kind = kind_of(value)
        self._value = value

    @classmethod
    def parse(cls, text: Union[str, bytes, bytearray]) -> "JsonNode":
        """
        Parse JSON text into a node.

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
        """
        return cls(json.loads(text))

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        # Lets dataclass and model fields be typed as JsonNode
        return core_schema.no_info_plain_validator_function(
            lambda value: value if isinstance(value, cls) else cls(value),
            serialization=core_schema.plain_serializer_function_ser_schema(lambda node: node.value),
        )

    @property
    def kind(self) -> JsonKind:
        return self._kind

    @property
    def value(self) -> Any:
        """The raw parsed value (dict/list/str/int/float/bool/None)."""
        return self._value

    def __getitem__(self, key: Union[str, int]) -> "JsonNode":
        if self._kind not in (JsonKind.OBJECT, JsonKind.ARRAY):
            raise TypeError(f"Cannot index a JSON {self._kind.value}")
        return JsonNode(self._value[key])

    def get(self, key: str, default: Optional["JsonNode"] = None) -> Optional["JsonNode"]:
        """Child of an object node, or default when the key is missing."""
        if self._kind is not JsonKind.OBJECT:
            raise TypeError(f"Cannot look up keys on a JSON {self._kind.value}")
        if key not in self._value:
            return default
        return JsonNode(self._value[key])

    def __contains__(self, key: str) -> bool:
        return self._kind is JsonKind.OBJECT and key in self._value

    def __len__(self) -> int:
        if self._kind not in (JsonKind.OBJECT, JsonKind.ARRAY):
            raise TypeError(f"JSON {self._kind.value} has no length")
        return len(self._value)

    def __iter__(self) -> Iterator[Any]:
        # Arrays yield child nodes, objects yield keys (like dict)
        if self._kind is JsonKind.ARRAY:
            return (JsonNode(item) for item in self._value)
        if self._kind is JsonKind.OBJECT:
            return iter(self._value)
        raise TypeError(f"JSON {self._kind.value} is not iterable")

    def to_json(self, options: Optional[SerializerOptions] = None) -> str:
        """
        Re-encode this node.

        Args:
            options: Serializer options; defaults to the compact preset

        Returns:
            JSON text
        """
        return json.dumps(self._value, **(options or DEFAULT_OPTIONS).dumps_kwargs())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonNode):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    __hash__ = None

    def __repr__(self) -> str:
        return f"JsonNode({self._kind.value}: {self.to_json()})"
