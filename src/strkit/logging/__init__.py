"""Structured logging module for strkit.

Provides configurable logging with JSON format support and file rotation.
Includes input context support so records name the line being processed.
"""

from strkit.logging.config import configure_logging
from strkit.logging.context import (
    InputContextFilter,
    clear_input_context,
    get_input_context,
    input_context,
    set_input_context,
)
from strkit.logging.handlers import JSONFormatter

__all__ = [
    "InputContextFilter",
    "JSONFormatter",
    "clear_input_context",
    "configure_logging",
    "get_input_context",
    "input_context",
    "set_input_context",
]
