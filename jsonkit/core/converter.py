"""
Conversion between typed Python values and plain JSON-compatible trees.

to_plain() runs before json.dumps and from_plain() runs after json.loads;
the engine itself only ever sees dicts, lists and scalars. Typed values are
bound by the pydantic TypeAdapter for their type.
"""

import dataclasses
import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from jsonkit.core.json_tree import JsonNode
from jsonkit.core.options import DEFAULT_OPTIONS, SerializerOptions
from jsonkit.core.schema import adapter_for, exclusions, reset_skipped, schema_errors


def _plain_key(key: Any) -> str:
    # Keys come out the way json.dumps would write them, so trees match parsed text
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    key = to_jsonable_python(key)
    return key if isinstance(key, str) else json.dumps(key)


def _is_typed_object(value: Any) -> bool:
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def to_plain(value: Any, options: Optional[SerializerOptions] = None) -> Any:
    """
    Convert a value into dicts, lists and scalars the JSON engine accepts.

    Args:
        value: Value to convert
        options: Serializer options (ignore_skipped and omit_none are used here)

    Returns:
        Plain JSON-compatible value

    Raises:
        pydantic_core.PydanticSerializationError: If a value has no JSON form
    """
    options = options or DEFAULT_OPTIONS

    if value is None or isinstance(value, (str, int, float, bool)):
        # Enum subclasses of str/int are plain already but keep their value
        if isinstance(value, Enum):
            return value.value
        return value

    if isinstance(value, JsonNode):
        return value.value

    if _is_typed_object(value):
        tp = type(value)
        with schema_errors(tp):
            return adapter_for(tp).dump_python(
                value,
                mode="json",
                by_alias=True,
                exclude=exclusions(value, options.ignore_skipped, options.omit_none),
            )

    if isinstance(value, dict):
        return {_plain_key(k): to_plain(v, options) for k, v in value.items()}

    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(item, options) for item in value]

    # Enums, dates, Decimal, UUID, paths, ...
    return to_jsonable_python(value)


def from_plain(value: Any, target: Any, options: Optional[SerializerOptions] = None) -> Any:
    """
    Bind a plain parsed value to a Python type.

    JSON null yields None for every target type.

    Args:
        value: Parsed value (dict/list/str/int/float/bool/None)
        target: Target type or typing hint (e.g. MyDataclass, List[int], Optional[str])
        options: Serializer options (ignore_skipped is used here)

    Returns:
        Converted value

    Raises:
        pydantic.ValidationError: If value does not fit target
        JsonSchemaError: If target cannot be described
    """
    options = options or DEFAULT_OPTIONS

    if value is None:
        return None

    adapter = adapter_for(target)
    with schema_errors(target):
        result = adapter.validate_python(value)
    if options.ignore_skipped:
        reset_skipped(result)
    return result
