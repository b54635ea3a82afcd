"""Input handling shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import click

from strkit.cli.exit_codes import ExitCode
from strkit.cli.output import error_exit
from strkit.config.models import StrkitConfig
from strkit.core.buffers import StringBuffer
from strkit.core.charsets import CharWidth, CodeUnitError, check_code_units

WIDTH_CHOICES = [w.value for w in CharWidth]


def iter_inputs(texts: tuple[str, ...]) -> Iterator[tuple[str, int, str]]:
    """Yield (source, line_no, text) for arguments, or stdin lines if none.

    Args:
        texts: TEXT arguments given on the command line.
    """
    if texts:
        for line_no, text in enumerate(texts, start=1):
            yield "args", line_no, text
        return

    stdin = click.get_text_stream("stdin")
    for line_no, line in enumerate(stdin, start=1):
        yield "stdin", line_no, line.rstrip("\r\n")


def get_config(ctx: click.Context) -> StrkitConfig:
    """Return the configuration loaded by the main group."""
    obj: dict[str, Any] = ctx.ensure_object(dict)
    config = obj.get("config")
    if config is None:
        from strkit.config import get_config as load

        config = load()
        obj["config"] = config
    return config


def resolve_width(ctx: click.Context, width: str | None) -> CharWidth:
    """CLI width if given, otherwise the configured default."""
    if width is not None:
        return CharWidth(width)
    return get_config(ctx).defaults.char_width


def resolve_capacity(ctx: click.Context, capacity: int | None) -> int | None:
    """CLI capacity if given, otherwise the configured default."""
    if capacity is not None:
        return capacity
    return get_config(ctx).defaults.capacity


def make_buffer(
    text: str,
    width: CharWidth,
    capacity: int | None,
    json_output: bool = False,
) -> StringBuffer:
    """Build a buffer for one input, exiting on characters that don't fit."""
    try:
        return StringBuffer(text, capacity=capacity, width=width)
    except CodeUnitError as e:
        error_exit(str(e), ExitCode.INPUT_ERROR, json_output)


def require_code_units(
    values: list[str],
    width: CharWidth,
    option: str,
    json_output: bool = False,
) -> None:
    """Exit with INPUT_ERROR if an option value doesn't fit the width."""
    for value in values:
        try:
            check_code_units(value, width)
        except CodeUnitError as e:
            error_exit(f"{option}: {e}", ExitCode.INPUT_ERROR, json_output)


width_option = click.option(
    "--width",
    type=click.Choice(WIDTH_CHOICES, case_sensitive=False),
    default=None,
    help="Code-unit width (default: from config, narrow).",
)

capacity_option = click.option(
    "--capacity",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum buffer size in code units (default: unbounded).",
)

json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
