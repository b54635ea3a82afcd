"""Error types for recipe loading."""

from __future__ import annotations


class RecipeValidationError(Exception):
    """Error while loading or validating a recipe."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)
