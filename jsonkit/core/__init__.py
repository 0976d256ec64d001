"""
Core serialization components: the Jsons facade, options presets, type
adapters and parsed-tree nodes.
"""

from .exceptions import JsonKitError, JsonSchemaError
from .options import SerializerOptions, DEFAULT_OPTIONS, preset
from .schema import AdapterRegistry, adapter_for, json_field
from .json_tree import JsonKind, JsonNode
from .converter import to_plain, from_plain
from .jsons import Jsons

__all__ = [
    "Jsons",
    "JsonNode",
    "JsonKind",
    "SerializerOptions",
    "DEFAULT_OPTIONS",
    "preset",
    "AdapterRegistry",
    "adapter_for",
    "json_field",
    "to_plain",
    "from_plain",
    "JsonKitError",
    "JsonSchemaError",
]
