"""Pydantic models for recipe files.

A recipe is an ordered list of steps, each naming one core operation
through its ``op`` field along with that operation's arguments.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from strkit.core.charsets import CharWidth
from strkit.core.padding import PadDirection


class _StepModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class DelimiterTrimStep(_StepModel):
    """Trim up to the first/last delimiter."""

    op: Literal["trim", "trim_left", "trim_right"]
    delimiters: str


class CharacterTrimStep(_StepModel):
    """Trim runs of the given characters from the ends."""

    op: Literal["trim_from", "trim_from_left", "trim_from_right"]
    chars: str


class WhitespaceTrimStep(_StepModel):
    op: Literal["trim_whitespace", "trim_whitespace_left", "trim_whitespace_right"]


class SliceStep(_StepModel):
    """Keep the leftmost/rightmost count code units."""

    op: Literal["left_n", "right_n"]
    count: int = Field(ge=0)


class ReverseStep(_StepModel):
    op: Literal["reverse"]


class ReplaceCharactersStep(_StepModel):
    """Replace single code units, pair by pair."""

    op: Literal["replace_characters"]
    pairs: list[tuple[str, str]] = Field(min_length=1)

    @field_validator("pairs")
    @classmethod
    def validate_single_code_units(
        cls, v: list[tuple[str, str]]
    ) -> list[tuple[str, str]]:
        """Both sides of every pair must be exactly one character."""
        for old, new in v:
            if len(old) != 1 or len(new) != 1:
                raise ValueError(
                    f"replace_characters pairs must be single characters, "
                    f"got ({old!r}, {new!r})"
                )
        return v


class ReplaceStringsStep(_StepModel):
    """Replace substrings, pair by pair."""

    op: Literal["replace_strings"]
    pairs: list[tuple[str, str]] = Field(min_length=1)

    @field_validator("pairs")
    @classmethod
    def validate_non_empty_pattern(
        cls, v: list[tuple[str, str]]
    ) -> list[tuple[str, str]]:
        """The substring being replaced cannot be empty."""
        for old, _new in v:
            if not old:
                raise ValueError("replace_strings patterns must not be empty")
        return v


class PadStep(_StepModel):
    """Pad up to size with char."""

    op: Literal["pad", "pad_left", "pad_right"]
    size: int = Field(ge=0)
    char: str = Field(default=" ", min_length=1, max_length=1)
    direction: PadDirection = PadDirection.RIGHT


RecipeStep = Annotated[
    Union[
        DelimiterTrimStep,
        CharacterTrimStep,
        WhitespaceTrimStep,
        SliceStep,
        ReverseStep,
        ReplaceCharactersStep,
        ReplaceStringsStep,
        PadStep,
    ],
    Field(discriminator="op"),
]


class RecipeModel(BaseModel):
    """A named pipeline of string operations."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    description: str | None = None
    width: CharWidth = CharWidth.NARROW
    capacity: int | None = Field(default=None, ge=1)
    steps: list[RecipeStep] = Field(default_factory=list)
