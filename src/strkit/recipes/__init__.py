"""Recipes: YAML pipelines of string operations.

Provides load_recipe() to validate a YAML recipe into a RecipeModel and
apply_recipe() to run it over text.
"""

from strkit.recipes.errors import RecipeValidationError
from strkit.recipes.loader import load_recipe, load_recipe_from_dict
from strkit.recipes.models import RecipeModel
from strkit.recipes.runner import apply_recipe, apply_recipe_to_lines

__all__ = [
    "RecipeModel",
    "RecipeValidationError",
    "apply_recipe",
    "apply_recipe_to_lines",
    "load_recipe",
    "load_recipe_from_dict",
]
