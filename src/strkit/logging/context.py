"""Input context for structured logging.

Records which input (source name and line number) is being processed,
using contextvars, so every log record emitted while transforming a line
carries that position.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_source: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "source", default=None
)
_line_no: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "line_no", default=None
)


def set_input_context(source: str, line_no: int | None = None) -> None:
    """Set the current input context.

    Args:
        source: Input name (e.g., "stdin", "args", a recipe name).
        line_no: 1-based line number within the source, or None.
    """
    _source.set(source)
    _line_no.set(line_no)


def clear_input_context() -> None:
    """Clear the current input context."""
    _source.set(None)
    _line_no.set(None)


@contextmanager
def input_context(
    source: str, line_no: int | None = None
) -> Generator[None, None, None]:
    """Context manager binding the input context for its body.

    The previous context is restored on exit.

    Example:
        with input_context("stdin", 3):
            logger.debug("Applying step")  # tagged [stdin:3]
    """
    old_source = _source.get()
    old_line_no = _line_no.get()
    try:
        set_input_context(source, line_no)
        yield
    finally:
        _source.set(old_source)
        _line_no.set(old_line_no)


def get_input_context() -> tuple[str | None, int | None]:
    """Get the current (source, line_no), either may be None."""
    return _source.get(), _line_no.get()


class InputContextFilter(logging.Filter):
    """Logging filter that injects the input context into log records.

    Adds ``source`` and ``line_no`` attributes, plus a compact
    ``input_tag`` such as ``[stdin:3] `` for the text format.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        source, line_no = get_input_context()

        record.source = source
        record.line_no = line_no

        if source:
            if line_no is not None:
                record.input_tag = f"[{source}:{line_no}] "
            else:
                record.input_tag = f"[{source}] "
        else:
            record.input_tag = ""

        return True
