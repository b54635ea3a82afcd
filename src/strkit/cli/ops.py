"""CLI commands for the core string operations.

Every command takes TEXT arguments, or reads lines from stdin when none
are given, and prints one result per input.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from strkit.cli.inputs import (
    capacity_option,
    get_config,
    iter_inputs,
    json_option,
    make_buffer,
    require_code_units,
    resolve_capacity,
    resolve_width,
    width_option,
)
from strkit.cli.output import emit_results
from strkit.core.buffers import StringBuffer, StringView
from strkit.core.padding import PadDirection, pad
from strkit.core.slicing import left_n, left_n_view, right_n, right_n_view
from strkit.core.tokenizer import iter_tokens
from strkit.core.transforms import replace_characters, replace_strings, reverse
from strkit.core.trim import (
    trim,
    trim_from,
    trim_from_left,
    trim_from_right,
    trim_from_view,
    trim_from_view_left,
    trim_from_view_right,
    trim_left,
    trim_right,
    trim_view,
    trim_view_left,
    trim_view_right,
    trim_view_whitespace,
    trim_view_whitespace_left,
    trim_view_whitespace_right,
    trim_whitespace,
    trim_whitespace_left,
    trim_whitespace_right,
)
from strkit.logging.context import input_context


# (mode, side) -> (buffer operation, view operation)
_TRIMS: dict[tuple[str, str], tuple[Callable[..., Any], Callable[..., Any]]] = {
    ("chars", "both"): (trim_from, trim_from_view),
    ("chars", "left"): (trim_from_left, trim_from_view_left),
    ("chars", "right"): (trim_from_right, trim_from_view_right),
    ("delimiters", "both"): (trim, trim_view),
    ("delimiters", "left"): (trim_left, trim_view_left),
    ("delimiters", "right"): (trim_right, trim_view_right),
    ("whitespace", "both"): (trim_whitespace, trim_view_whitespace),
    ("whitespace", "left"): (trim_whitespace_left, trim_view_whitespace_left),
    ("whitespace", "right"): (trim_whitespace_right, trim_view_whitespace_right),
}


def _view_result(text: str, view: StringView) -> dict[str, Any]:
    return {"input": text, "output": str(view), "start": view.start, "end": view.end}


def _buffer_result(text: str, buffer: StringBuffer) -> dict[str, Any]:
    return {"input": text, "output": str(buffer), "truncated": buffer.is_truncated}


@click.command("trim")
@click.argument("texts", nargs=-1)
@click.option(
    "--side",
    type=click.Choice(["both", "left", "right"]),
    default="both",
    show_default=True,
    help="Which end(s) to trim.",
)
@click.option(
    "--chars",
    default=None,
    help="Trim runs of these characters (default: whitespace).",
)
@click.option(
    "--delimiters",
    default=None,
    help="Trim up to, but not including, the first/last of these delimiters.",
)
@click.option(
    "--view",
    "use_view",
    is_flag=True,
    help="Trim a view instead of a copy and report its offsets.",
)
@width_option
@json_option
@click.pass_context
def trim_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    side: str,
    chars: str | None,
    delimiters: str | None,
    use_view: bool,
    width: str | None,
    json_output: bool,
) -> None:
    """Trim characters or delimiters from the ends of each TEXT.

    Examples:

        strkit trim "  hello  "

        strkit trim --chars "xy" --side left "xxyhello"

        strkit trim --delimiters "<>" "junk<tag>junk"
    """
    if chars is not None and delimiters is not None:
        raise click.UsageError("--chars and --delimiters are mutually exclusive")

    if chars is not None:
        mode, argument = "chars", chars
    elif delimiters is not None:
        mode, argument = "delimiters", delimiters
    else:
        mode, argument = "whitespace", None

    buffer_op, view_op = _TRIMS[(mode, side)]
    args = () if argument is None else (argument,)
    char_width = resolve_width(ctx, width)

    results = []
    for source, line_no, text in iter_inputs(texts):
        buffer = make_buffer(text, char_width, None, json_output)
        with input_context(source, line_no):
            if use_view:
                results.append(_view_result(text, view_op(buffer.view(), *args)))
            else:
                buffer_op(buffer, *args)
                results.append(_buffer_result(text, buffer))
    emit_results(results, json_output)


@click.command("pad")
@click.argument("texts", nargs=-1)
@click.option("--size", type=click.IntRange(min=0), required=True, help="Minimum size.")
@click.option(
    "--direction",
    type=click.Choice([d.value for d in PadDirection]),
    default=PadDirection.RIGHT.value,
    show_default=True,
    help="Side that receives padding.",
)
@click.option("--char", "pad_char", default=None, help="Pad character.")
@width_option
@capacity_option
@json_option
@click.pass_context
def pad_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    size: int,
    direction: str,
    pad_char: str | None,
    width: str | None,
    capacity: int | None,
    json_output: bool,
) -> None:
    """Pad each TEXT to at least --size characters.

    Padding never grows a string past --capacity.
    """
    if pad_char is None:
        pad_char = get_config(ctx).defaults.pad_char
    if len(pad_char) != 1:
        raise click.BadParameter("must be a single character", param_hint="--char")

    char_width = resolve_width(ctx, width)
    max_size = resolve_capacity(ctx, capacity)
    require_code_units([pad_char], char_width, "--char", json_output)

    results = []
    for source, line_no, text in iter_inputs(texts):
        buffer = make_buffer(text, char_width, max_size, json_output)
        with input_context(source, line_no):
            pad(buffer, size, PadDirection(direction), pad_char)
        results.append(_buffer_result(text, buffer))
    emit_results(results, json_output)


@click.command("slice")
@click.argument("texts", nargs=-1)
@click.option("--left", "left", type=int, default=None, help="Keep the first N.")
@click.option("--right", "right", type=int, default=None, help="Keep the last N.")
@click.option(
    "--view",
    "use_view",
    is_flag=True,
    help="Slice a view instead of a copy and report its offsets.",
)
@width_option
@json_option
@click.pass_context
def slice_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    left: int | None,
    right: int | None,
    use_view: bool,
    width: str | None,
    json_output: bool,
) -> None:
    """Keep the leftmost or rightmost characters of each TEXT."""
    if (left is None) == (right is None):
        raise click.UsageError("Give exactly one of --left or --right")

    if left is not None:
        buffer_op, view_op, count = left_n, left_n_view, left
    else:
        buffer_op, view_op, count = right_n, right_n_view, right

    char_width = resolve_width(ctx, width)

    results = []
    for _source, _line_no, text in iter_inputs(texts):
        buffer = make_buffer(text, char_width, None, json_output)
        if use_view:
            results.append(_view_result(text, view_op(buffer.view(), count)))
        else:
            buffer_op(buffer, count)
            results.append(_buffer_result(text, buffer))
    emit_results(results, json_output)


@click.command("reverse")
@click.argument("texts", nargs=-1)
@width_option
@json_option
@click.pass_context
def reverse_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    width: str | None,
    json_output: bool,
) -> None:
    """Reverse each TEXT."""
    char_width = resolve_width(ctx, width)

    results = []
    for _source, _line_no, text in iter_inputs(texts):
        buffer = make_buffer(text, char_width, None, json_output)
        reverse(buffer)
        results.append(_buffer_result(text, buffer))
    emit_results(results, json_output)


@click.command("replace")
@click.argument("texts", nargs=-1)
@click.option(
    "--pair",
    "pairs",
    nargs=2,
    multiple=True,
    required=True,
    metavar="OLD NEW",
    help="Replacement pair, applied in the order given. Repeatable.",
)
@click.option(
    "--strings",
    "substrings",
    is_flag=True,
    help="Replace substrings instead of single characters.",
)
@width_option
@capacity_option
@json_option
@click.pass_context
def replace_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    pairs: tuple[tuple[str, str], ...],
    substrings: bool,
    width: str | None,
    capacity: int | None,
    json_output: bool,
) -> None:
    """Replace characters (or substrings with --strings) in each TEXT.

    Examples:

        strkit replace --pair - _ "a-b-c"

        strkit replace --strings --pair cat dog "cat scat"
    """
    if substrings:
        if any(not old for old, _new in pairs):
            raise click.BadParameter("OLD must not be empty", param_hint="--pair")
        operation = replace_strings
    else:
        if any(len(old) != 1 or len(new) != 1 for old, new in pairs):
            raise click.BadParameter(
                "pairs must be single characters (use --strings for substrings)",
                param_hint="--pair",
            )
        operation = replace_characters

    char_width = resolve_width(ctx, width)
    max_size = resolve_capacity(ctx, capacity)
    require_code_units(
        [value for pair in pairs for value in pair], char_width, "--pair", json_output
    )

    results = []
    for source, line_no, text in iter_inputs(texts):
        buffer = make_buffer(text, char_width, max_size, json_output)
        with input_context(source, line_no):
            operation(buffer, pairs)
        results.append(_buffer_result(text, buffer))
    emit_results(results, json_output)


@click.command("tokenize")
@click.argument("texts", nargs=-1)
@click.option(
    "--delimiters",
    default=None,
    help="Delimiter characters (default: from config, whitespace).",
)
@width_option
@json_option
@click.pass_context
def tokenize_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    delimiters: str | None,
    width: str | None,
    json_output: bool,
) -> None:
    """Split each TEXT into delimiter-separated tokens.

    Text output prints one token per line. JSON output lists each token
    with its start and end offsets.
    """
    if delimiters is None:
        delimiters = get_config(ctx).defaults.delimiters
    char_width = resolve_width(ctx, width)

    results = []
    for _source, _line_no, text in iter_inputs(texts):
        view = make_buffer(text, char_width, None, json_output).view()
        tokens = [
            {"token": str(token), "start": token.start, "end": token.end}
            for token in iter_tokens(view, delimiters)
        ]
        results.append(
            {
                "input": text,
                "output": "\n".join(t["token"] for t in tokens),
                "tokens": tokens,
            }
        )

    if json_output:
        emit_results(results, json_output)
        return
    for result in results:
        for token in result["tokens"]:
            click.echo(token["token"])
