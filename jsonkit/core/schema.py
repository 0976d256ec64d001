"""
Type schemas: how a Python type maps to and from JSON.

Binding is done by pydantic. A TypeAdapter is built once per target type and
memoized; stdlib dataclasses, pydantic models and typing hints are all
accepted. Dataclass fields declare their JSON key and skip marker with
json_field(), which pydantic reads back as Field(alias=...).
"""

import dataclasses
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel, PydanticUndefinedAnnotation, PydanticUserError, TypeAdapter

from jsonkit.core.exceptions import JsonSchemaError
from jsonkit.core.logging_utils import get_logger, log_component_debug

logger = get_logger(__name__)

SKIP_KEY = "jsonkit_skip"


def json_field(name: Optional[str] = None, skip: bool = False, **field_kwargs: Any) -> Any:
    """
    Declare a dataclass field with a JSON name and/or skip marker.

    Args:
        name: Key used in JSON (becomes the pydantic alias)
        skip: Leave the field out of JSON when options.ignore_skipped is on
        **field_kwargs: Passed through to dataclasses.field (default, default_factory, ...)

    Returns:
        A dataclasses.field

    Raises:
        JsonSchemaError: If skip is set and the field has no default
    """
    if skip and "default" not in field_kwargs and "default_factory" not in field_kwargs:
        raise JsonSchemaError("Skipped fields must have a default")
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    if name:
        metadata["alias"] = name
    if skip:
        metadata[SKIP_KEY] = True
    return dataclasses.field(metadata=metadata, **field_kwargs)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp)


@contextmanager
def schema_errors(tp: Any) -> Iterator[None]:
    """Report types pydantic cannot build a schema for as JsonSchemaError."""
    try:
        yield
    except (PydanticUndefinedAnnotation, PydanticUserError) as e:
        raise JsonSchemaError(str(e), type_name=_type_name(tp)) from e


def _check_aliases(tp: Any) -> None:
    if not (isinstance(tp, type) and dataclasses.is_dataclass(tp)):
        return
    seen: Dict[str, str] = {}
    for f in dataclasses.fields(tp):
        key = f.metadata.get("alias") or f.name
        if key in seen:
            raise JsonSchemaError(
                f"JSON name '{key}' used by both '{seen[key]}' and '{f.name}'",
                type_name=tp.__name__,
            )
        seen[key] = f.name


class AdapterRegistry:
    """
    Thread-safe table of pydantic TypeAdapters, one per target type.
    """

    def __init__(self):
        self._adapters: Dict[Any, TypeAdapter] = {}
        self._lock = threading.Lock()

    def get(self, tp: Any) -> TypeAdapter:
        """
        Return the adapter for tp, building it on first use.

        Raises:
            JsonSchemaError: If tp cannot be described (unresolvable
                             annotations, unsupported types, clashing JSON names)
        """
        try:
            adapter = self._adapters.get(tp)
        except TypeError:
            # Unhashable hints (e.g. Annotated with dict metadata) are not cached
            return self._build(tp)
        if adapter is not None:
            return adapter
        with self._lock:
            adapter = self._adapters.get(tp)
            if adapter is None:
                adapter = self._build(tp)
                self._adapters[tp] = adapter
        return adapter

    @staticmethod
    def _build(tp: Any) -> TypeAdapter:
        _check_aliases(tp)
        with schema_errors(tp):
            adapter = TypeAdapter(tp)
        log_component_debug(logger, "Built type adapter", component="schema", context={"type": _type_name(tp)})
        return adapter

    def __contains__(self, tp: Any) -> bool:
        return tp in self._adapters

    def clear(self) -> None:
        """Forget all adapters."""
        with self._lock:
            self._adapters.clear()


_registry = AdapterRegistry()


def adapter_for(tp: Any) -> TypeAdapter:
    """Look up tp in the default registry."""
    return _registry.get(tp)


# ---------------------------------------------------------------------------
# Skip / omit-none policy
# ---------------------------------------------------------------------------


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _field_default(f: "dataclasses.Field") -> Any:
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return f.default


def _has_default(f: "dataclasses.Field") -> bool:
    return f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING


def exclusions(value: Any, ignore_skipped: bool, omit_none: bool) -> Optional[Dict[Any, Any]]:
    """
    Build a pydantic `exclude` mapping for one value.

    Skipped fields are excluded when ignore_skipped is on. With omit_none,
    None fields that have a default are excluded, so the output still reads
    back into the same type.

    Returns:
        Nested exclude mapping, or None when nothing is excluded
    """
    spec: Dict[Any, Any] = {}

    if _is_dataclass_instance(value):
        for f in dataclasses.fields(value):
            attr_value = getattr(value, f.name)
            if ignore_skipped and f.metadata.get(SKIP_KEY):
                spec[f.name] = True
            elif omit_none and attr_value is None and _has_default(f):
                spec[f.name] = True
            else:
                sub = exclusions(attr_value, ignore_skipped, omit_none)
                if sub:
                    spec[f.name] = sub
    elif isinstance(value, BaseModel):
        for name, info in type(value).model_fields.items():
            attr_value = getattr(value, name)
            if omit_none and attr_value is None and not info.is_required():
                spec[name] = True
            else:
                sub = exclusions(attr_value, ignore_skipped, omit_none)
                if sub:
                    spec[name] = sub
    elif isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            sub = exclusions(item, ignore_skipped, omit_none)
            if sub:
                spec[i] = sub
    elif isinstance(value, dict):
        for key, item in value.items():
            sub = exclusions(item, ignore_skipped, omit_none)
            if sub:
                spec[key] = sub

    return spec or None


def reset_skipped(value: Any) -> None:
    """
    Put every skipped field in a freshly decoded tree back to its default.
    """
    if _is_dataclass_instance(value):
        for f in dataclasses.fields(value):
            if f.metadata.get(SKIP_KEY):
                # Frozen dataclasses assign the same way in their __init__
                object.__setattr__(value, f.name, _field_default(f))
            else:
                reset_skipped(getattr(value, f.name))
    elif isinstance(value, BaseModel):
        for name in type(value).model_fields:
            reset_skipped(getattr(value, name))
    elif isinstance(value, (list, tuple)):
        for item in value:
            reset_skipped(item)
    elif isinstance(value, dict):
        for item in value.values():
            reset_skipped(item)
