"""CLI command for applying YAML recipes."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from strkit.cli.exit_codes import ExitCode
from strkit.cli.inputs import iter_inputs, json_option
from strkit.cli.output import emit_results, error_exit
from strkit.core.charsets import CodeUnitError
from strkit.recipes import RecipeValidationError, apply_recipe_to_lines, load_recipe

logger = logging.getLogger(__name__)


@click.command("apply")
@click.argument("recipe_path", type=click.Path(path_type=Path, dir_okay=False))
@click.argument("texts", nargs=-1)
@json_option
def apply_command(
    recipe_path: Path,
    texts: tuple[str, ...],
    json_output: bool,
) -> None:
    """Apply the recipe at RECIPE_PATH to each TEXT (or stdin lines).

    A recipe is a YAML file listing steps to run in order:

    \b
        name: tidy
        steps:
          - op: trim_whitespace
          - op: pad
            size: 10
            char: "."
    """
    try:
        recipe = load_recipe(recipe_path)
    except FileNotFoundError as e:
        error_exit(str(e), ExitCode.RECIPE_NOT_FOUND, json_output)
    except RecipeValidationError as e:
        error_exit(e.message, ExitCode.RECIPE_VALIDATION_ERROR, json_output)

    source = "args" if texts else "stdin"
    lines = [text for _source, _line_no, text in iter_inputs(texts)]

    try:
        outputs = list(apply_recipe_to_lines(recipe, lines, source=source))
    except CodeUnitError as e:
        error_exit(str(e), ExitCode.INPUT_ERROR, json_output)

    logger.debug("Applied recipe %r to %d input(s)", recipe.name, len(lines))
    emit_results(
        [
            {"input": text, "output": output}
            for text, output in zip(lines, outputs, strict=True)
        ],
        json_output,
    )
