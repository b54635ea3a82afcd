"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (recipe, config, input)
    20-29: File errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for strkit CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1

    # Validation errors (10-19)
    RECIPE_VALIDATION_ERROR = 10
    CONFIG_ERROR = 11
    INPUT_ERROR = 12

    # File errors (20-29)
    RECIPE_NOT_FOUND = 20
