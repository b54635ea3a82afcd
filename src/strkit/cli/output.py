"""Unified CLI output formatting for JSON and human-readable output."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, NoReturn

import click

if TYPE_CHECKING:
    from .exit_codes import ExitCode


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Exit with formatted error message.

    Args:
        message: Error message to display.
        code: Exit code to use (ExitCode enum or int).
        json_output: Whether to format output as JSON.

    Note:
        This function never returns; it always calls sys.exit().
    """
    from .exit_codes import ExitCode

    if isinstance(code, ExitCode):
        code_name = code.name
        exit_value = int(code)
    else:
        code_name = "UNKNOWN_ERROR"
        exit_value = code

    if json_output:
        click.echo(
            json.dumps(
                {
                    "status": "failed",
                    "error": {
                        "code": code_name,
                        "message": message,
                    },
                }
            ),
            err=True,
        )
    else:
        click.echo(f"Error: {message}", err=True)

    sys.exit(exit_value)


def emit_results(results: Iterable[dict[str, Any]], json_output: bool = False) -> None:
    """Print command results.

    Each result is a mapping with at least an ``output`` key. Text mode
    prints one output per line; JSON mode prints the whole list.

    Args:
        results: Result mappings in input order.
        json_output: Whether to format output as JSON.
    """
    if json_output:
        click.echo(json.dumps(list(results), indent=2))
        return
    for result in results:
        click.echo(result["output"])
