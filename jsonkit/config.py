"""
Configuration for jsonkit.
Contains the defaults used to build the cached serializer presets and the
helpers a host application calls to load .env files and configure logging.
"""

import os
import logging
from typing import Optional

from dotenv import load_dotenv

from jsonkit.core.logging_utils import get_logger, log_component_info


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def env_flag(name: str, default: bool = False) -> bool:
    """
    Read a boolean environment variable.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or unrecognized

    Returns:
        Parsed boolean
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to default when unset or invalid."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ============================================================================
# Serializer Preset Configuration
# ============================================================================

# Indent width used by the two indented presets
INDENT_WIDTH = env_int("JSONKIT_INDENT_WIDTH", 2)

# Escape non-ASCII characters in the presets' output
ENSURE_ASCII = env_flag("JSONKIT_ENSURE_ASCII", False)

# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL = os.getenv("JSONKIT_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(filename)s:%(lineno)s %(levelname)s:%(message)s"

logger = get_logger("jsonkit")


def load_environment(env_file: Optional[str] = None) -> bool:
    """
    Load environment variables from a .env file.

    Values already present in the environment win. Presets are built at
    import time, so call this before importing jsonkit.core when the .env
    file sets JSONKIT_* values.

    Args:
        env_file: Path to the .env file (defaults to python-dotenv's lookup)

    Returns:
        True if a .env file was found and loaded
    """
    return load_dotenv(env_file, override=False)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the jsonkit logger.

    Args:
        level: Level name such as "DEBUG"; defaults to JSONKIT_LOG_LEVEL

    Returns:
        The configured "jsonkit" logger
    """
    level_name = (level or LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    log_component_info(logger, "Logging configured", component="config", context={"level": level_name})
    return logger
