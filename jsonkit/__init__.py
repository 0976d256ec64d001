"""
jsonkit - convenience helpers for converting objects to and from JSON.

    from jsonkit import Jsons, json_field

    text = Jsons.to_json(user, indent=True)
    user = Jsons.to_obj(text, User)
"""

from .core import (
    Jsons,
    JsonNode,
    JsonKind,
    SerializerOptions,
    json_field,
    JsonKitError,
    JsonSchemaError,
)

__version__ = "0.1.0"

__all__ = [
    "Jsons",
    "JsonNode",
    "JsonKind",
    "SerializerOptions",
    "json_field",
    "JsonKitError",
    "JsonSchemaError",
]
