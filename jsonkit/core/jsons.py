"""
Json helper for converting between objects, JSON text and parsed tree nodes.

Typed objects are bound by pydantic: stdlib dataclasses (fields declared
with json_field(name=..., skip=...)), pydantic models and typing hints.
"""

import json
from typing import Any, Optional, Type, TypeVar, Union

from jsonkit.core.converter import from_plain, to_plain
from jsonkit.core.json_tree import JsonNode
from jsonkit.core.options import DEFAULT_OPTIONS, SerializerOptions, preset

T = TypeVar("T")

JsonInput = Union[str, bytes, bytearray]


class Jsons:
    """
    Static facade for JSON serialization with four cached presets.

    The presets are chosen by (indent, ignore_skipped). Errors from the JSON
    engine (json.JSONDecodeError, pydantic.ValidationError,
    pydantic_core.PydanticSerializationError) are never caught here.
    """

    @staticmethod
    def options(indent: bool = False, ignore_skipped: bool = True) -> SerializerOptions:
        """
        Return the cached preset for a flag pair.

        Args:
            indent: If True, pretty print with newlines and indentation.
            ignore_skipped: If True, fields marked skip=True are left out.

        Returns:
            Shared SerializerOptions instance
        """
        return preset(indent, ignore_skipped)

    @staticmethod
    def to_json(obj: Any, indent: bool = False, ignore_skipped: bool = True) -> str:
        """
        Convert obj to JSON string.

        Args:
            obj: Value to serialize
            indent: If True, pretty print (for logs/files).
                    If False, use compact format with no spaces.
            ignore_skipped: If True, fields declared with skip=True are not written.

        Returns:
            Serialized JSON string

        Raises:
            PydanticSerializationError: If a value in obj has no JSON form
        """
        return Jsons.to_json_with(obj, preset(indent, ignore_skipped))

    @staticmethod
    def to_json_or_none(obj: Any, indent: bool = False, ignore_skipped: bool = True) -> Optional[str]:
        """Same as to_json, but returns None for a None obj instead of "null"."""
        if obj is None:
            return None
        return Jsons.to_json(obj, indent=indent, ignore_skipped=ignore_skipped)

    @staticmethod
    def to_json_with(obj: Any, options: SerializerOptions) -> str:
        """
        Convert obj to JSON string using caller-supplied options.

        Args:
            obj: Value to serialize
            options: Options to use; the preset cache is not consulted

        Returns:
            Serialized JSON string
        """
        return json.dumps(to_plain(obj, options), **options.dumps_kwargs())

    @staticmethod
    def to_obj(json_text: Optional[JsonInput], cls: Type[T]) -> Optional[T]:
        """
        Convert JSON string to obj.

        Uses the default options (compact, skipped fields honored).

        Args:
            json_text: JSON text or UTF-8 bytes; None or empty gives None
            cls: Target type or typing hint, e.g. MyDataclass or List[MyDataclass]

        Returns:
            Converted value, or None for absent input or a JSON null

        Raises:
            json.JSONDecodeError: If the text is malformed
            pydantic.ValidationError: If the parsed value does not fit cls
            JsonSchemaError: If cls cannot be mapped to JSON
        """
        return Jsons.to_obj_with(json_text, cls, DEFAULT_OPTIONS)

    @staticmethod
    def to_obj_with(json_text: Optional[JsonInput], cls: Type[T], options: SerializerOptions) -> Optional[T]:
        """Same as to_obj, but with caller-supplied options."""
        if not json_text:
            return None
        return from_plain(json.loads(json_text), cls, options)

    @staticmethod
    def to_obj_from_tree(node: Any, cls: Type[T], options: Optional[SerializerOptions] = None) -> Optional[T]:
        """
        Convert given JsonNode to given type.

        A JsonNode is what parse_tree() (or a surrounding framework) produces
        when text has been parsed but not yet bound to a type.

        Args:
            node: Should be a JsonNode. Otherwise, None is returned.
            cls: Target type
            options: Options to use (defaults to the default preset)

        Returns:
            Converted value, or None if node is not a JsonNode
        """
        if not isinstance(node, JsonNode):
            return None
        return from_plain(node.value, cls, options or DEFAULT_OPTIONS)

    @staticmethod
    def parse_tree(json_text: Optional[JsonInput]) -> Optional[JsonNode]:
        """Parse JSON text into an untyped JsonNode; None or empty gives None."""
        if not json_text:
            return None
        return JsonNode.parse(json_text)

    @staticmethod
    def to_tree(obj: Any, options: Optional[SerializerOptions] = None) -> JsonNode:
        """
        Convert obj to a JsonNode without producing text.

        Raises:
            PydanticSerializationError: If any value inside obj has no JSON form
        """
        return JsonNode(to_plain(obj, options or DEFAULT_OPTIONS))
