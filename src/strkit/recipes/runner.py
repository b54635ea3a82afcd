"""Apply recipes to text."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from strkit.core.buffers import StringBuffer
from strkit.core.padding import pad, pad_left, pad_right
from strkit.core.slicing import left_n, right_n
from strkit.core.transforms import replace_characters, replace_strings, reverse
from strkit.core.trim import (
    trim,
    trim_from,
    trim_from_left,
    trim_from_right,
    trim_left,
    trim_right,
    trim_whitespace,
    trim_whitespace_left,
    trim_whitespace_right,
)
from strkit.logging.context import input_context
from strkit.recipes.models import (
    CharacterTrimStep,
    DelimiterTrimStep,
    PadStep,
    RecipeModel,
    ReplaceCharactersStep,
    ReplaceStringsStep,
    ReverseStep,
    SliceStep,
    WhitespaceTrimStep,
)

logger = logging.getLogger(__name__)

_DELIMITER_TRIMS: dict[str, Callable[[StringBuffer, str], None]] = {
    "trim": trim,
    "trim_left": trim_left,
    "trim_right": trim_right,
}

_CHARACTER_TRIMS: dict[str, Callable[[StringBuffer, str], None]] = {
    "trim_from": trim_from,
    "trim_from_left": trim_from_left,
    "trim_from_right": trim_from_right,
}

_WHITESPACE_TRIMS: dict[str, Callable[[StringBuffer], None]] = {
    "trim_whitespace": trim_whitespace,
    "trim_whitespace_left": trim_whitespace_left,
    "trim_whitespace_right": trim_whitespace_right,
}

_SLICES: dict[str, Callable[[StringBuffer, int], None]] = {
    "left_n": left_n,
    "right_n": right_n,
}


def _apply_step(buffer: StringBuffer, step: object) -> None:
    if isinstance(step, DelimiterTrimStep):
        _DELIMITER_TRIMS[step.op](buffer, step.delimiters)
    elif isinstance(step, CharacterTrimStep):
        _CHARACTER_TRIMS[step.op](buffer, step.chars)
    elif isinstance(step, WhitespaceTrimStep):
        _WHITESPACE_TRIMS[step.op](buffer)
    elif isinstance(step, SliceStep):
        _SLICES[step.op](buffer, step.count)
    elif isinstance(step, ReverseStep):
        reverse(buffer)
    elif isinstance(step, ReplaceCharactersStep):
        replace_characters(buffer, step.pairs)
    elif isinstance(step, ReplaceStringsStep):
        replace_strings(buffer, step.pairs)
    elif isinstance(step, PadStep):
        if step.op == "pad_left":
            pad_left(buffer, step.size, step.char)
        elif step.op == "pad_right":
            pad_right(buffer, step.size, step.char)
        else:
            pad(buffer, step.size, step.direction, step.char)
    else:
        raise TypeError(f"Unsupported recipe step: {step!r}")


def apply_recipe(recipe: RecipeModel, text: str) -> str:
    """Run every step of recipe over text.

    Args:
        recipe: Validated recipe.
        text: Input text.

    Returns:
        The transformed text.

    Raises:
        CodeUnitError: If text does not fit the recipe's code-unit width.
    """
    buffer = StringBuffer(text, capacity=recipe.capacity, width=recipe.width)
    for step in recipe.steps:
        logger.debug("Applying %s to %r", step.op, str(buffer))
        _apply_step(buffer, step)
    if buffer.is_truncated:
        logger.info(
            "Recipe %r truncated output to capacity %d", recipe.name, recipe.capacity
        )
    return str(buffer)


def apply_recipe_to_lines(
    recipe: RecipeModel,
    lines: Iterable[str],
    source: str = "stdin",
) -> Iterator[str]:
    """Apply recipe to each line, tagging log records with the line number.

    Args:
        recipe: Validated recipe.
        lines: Input lines without trailing newlines.
        source: Name used in log records for the input.

    Yields:
        One transformed line per input line.
    """
    for line_no, line in enumerate(lines, start=1):
        with input_context(source, line_no):
            result = apply_recipe(recipe, line)
        yield result
