"""
Serializer options and the four cached presets.

The presets are built once at import time and kept in a read-only mapping,
so every caller selecting the same (indent, ignore_skipped) pair shares one
instance and no configuration is allocated per call.
"""

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from jsonkit import config
from jsonkit.core.logging_utils import get_logger, log_component_debug

logger = get_logger(__name__)

COMPACT_SEPARATORS = (",", ":")


@dataclass(frozen=True)
class SerializerOptions:
    """
    Immutable bundle of serialization behavior flags.

    Attributes:
        indent: Pretty-print with newlines and indentation instead of compact output.
        ignore_skipped: Honor fields marked as skipped; when False they are
                        written and read like any other field.
        indent_width: Spaces per indentation level when indent is on.
        ensure_ascii: Escape non-ASCII characters.
        sort_keys: Emit object keys in sorted order.
        omit_none: Drop fields whose value is None when encoding typed objects.
        allow_nan: Allow NaN/Infinity literals (engine default).
    """
    indent: bool = False
    ignore_skipped: bool = True
    indent_width: int = 2
    ensure_ascii: bool = False
    sort_keys: bool = False
    omit_none: bool = False
    allow_nan: bool = True

    def dumps_kwargs(self) -> Dict[str, Any]:
        """
        Keyword arguments for json.dumps matching these options.

        Returns:
            Dict of json.dumps keyword arguments
        """
        kwargs: Dict[str, Any] = {
            "ensure_ascii": self.ensure_ascii,
            "sort_keys": self.sort_keys,
            "allow_nan": self.allow_nan,
        }
        if self.indent:
            kwargs["indent"] = self.indent_width
        else:
            # Compact: no spaces
            kwargs["separators"] = COMPACT_SEPARATORS
        return kwargs

    def replace(self, **changes: Any) -> "SerializerOptions":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


def _build_presets() -> Mapping[Tuple[bool, bool], SerializerOptions]:
    presets = {}
    for indent in (False, True):
        for ignore_skipped in (False, True):
            presets[(indent, ignore_skipped)] = SerializerOptions(
                indent=indent,
                ignore_skipped=ignore_skipped,
                indent_width=config.INDENT_WIDTH,
                ensure_ascii=config.ENSURE_ASCII,
            )
    log_component_debug(
        logger,
        "Built serializer presets",
        component="options",
        context={"count": len(presets), "indent_width": config.INDENT_WIDTH},
    )
    return MappingProxyType(presets)


_PRESETS = _build_presets()

DEFAULT_OPTIONS = _PRESETS[(False, True)]


def preset(indent: bool = False, ignore_skipped: bool = True) -> SerializerOptions:
    """
    Return the cached options for a flag pair.

    Args:
        indent: Pretty-print output
        ignore_skipped: Honor fields marked as skipped

    Returns:
        The shared SerializerOptions instance for this pair
    """
    return _PRESETS[(bool(indent), bool(ignore_skipped))]
