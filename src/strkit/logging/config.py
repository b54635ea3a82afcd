"""Root logger setup for strkit.

Records go to stderr, to a rotating log file, or to both. Every handler
gets the InputContextFilter so text lines carry ``[stdin:3]`` style tags
and JSON lines carry an ``input`` object.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from strkit.logging.context import InputContextFilter
from strkit.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from strkit.config.models import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(input_tag)s%(name)s: %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _formatter(format_name: str) -> logging.Formatter:
    if format_name.lower() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    """Open the rotating log file, or return None if it can't be opened."""
    if config.file is None:
        return None
    path = config.file.expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: cannot open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root logger's handlers according to config.

    Logging goes to stderr unless a log file opens successfully; with
    ``include_stderr`` it goes to both.
    """
    level = logging.getLevelName(config.level.upper())
    formatter = _formatter(config.format)
    context_filter = InputContextFilter()

    handlers: list[logging.Handler] = []
    file_handler = _open_log_file(config)
    if file_handler is not None:
        handlers.append(file_handler)
    if file_handler is None or config.include_stderr:
        handlers.append(logging.StreamHandler(sys.stderr))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root.addHandler(handler)
