"""
Standardized logging utilities for consistent info and debug logging across jsonkit.
Provides structured messages of the form "[component] message | Context: k=v".
"""

import logging
from typing import Optional, Dict, Any


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module/component.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def format_component_message(
    message: str,
    component: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> str:
    """
    Build the standardized log line.

    Args:
        message: Log message
        component: Component name (optional)
        context: Additional context dictionary (optional)

    Returns:
        Formatted message
    """
    parts = []

    if component:
        parts.append(f"[{component}]")

    parts.append(message)

    log_message = " ".join(parts)

    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        log_message += f" | Context: {context_str}"

    return log_message


def log_component_debug(
    logger: logging.Logger,
    message: str,
    component: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """Log a component debug message with standardized format."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(format_component_message(message, component, context))


def log_component_info(
    logger: logging.Logger,
    message: str,
    component: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log a component info message with standardized format.

    Args:
        logger: Logger instance
        message: Info message
        component: Component name (optional)
        context: Additional context dictionary (optional)
    """
    logger.info(format_component_message(message, component, context))
