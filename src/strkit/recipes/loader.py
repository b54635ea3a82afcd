"""Recipe file loading and validation.

This module provides functions to load YAML recipe files and validate
them using Pydantic models.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from strkit.recipes.errors import RecipeValidationError
from strkit.recipes.models import RecipeModel

logger = logging.getLogger(__name__)


def load_recipe(recipe_path: Path) -> RecipeModel:
    """Load and validate a recipe from a YAML file.

    Args:
        recipe_path: Path to the YAML recipe file.

    Returns:
        Validated RecipeModel.

    Raises:
        RecipeValidationError: If the recipe file is invalid.
        FileNotFoundError: If the recipe file does not exist.
    """
    if not recipe_path.exists():
        raise FileNotFoundError(f"Recipe file not found: {recipe_path}")

    try:
        with open(recipe_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RecipeValidationError(f"Invalid YAML syntax: {e}") from e

    if data is None:
        raise RecipeValidationError("Recipe file is empty")

    if not isinstance(data, dict):
        raise RecipeValidationError("Recipe file must be a YAML mapping")

    recipe = load_recipe_from_dict(data)
    logger.debug(
        "Loaded recipe %r with %d step(s) from %s",
        recipe.name,
        len(recipe.steps),
        recipe_path,
    )
    return recipe


def load_recipe_from_dict(data: dict[str, Any]) -> RecipeModel:
    """Validate a recipe from a dictionary.

    Raises:
        RecipeValidationError: If the recipe data is invalid.
    """
    try:
        return RecipeModel.model_validate(data)
    except ValidationError as e:
        message, field = _format_validation_error(e)
        raise RecipeValidationError(message, field=field) from e


def _format_validation_error(error: ValidationError) -> tuple[str, str | None]:
    """Format the first Pydantic error as (message, dotted location)."""
    errors = error.errors()
    if not errors:
        return f"Recipe validation failed: {error}", None

    first_error = errors[0]
    loc = ".".join(str(x) for x in first_error.get("loc", []))
    msg = first_error.get("msg", str(error))
    if loc:
        return f"Recipe validation failed: {loc}: {msg}", loc
    return f"Recipe validation failed: {msg}", None
