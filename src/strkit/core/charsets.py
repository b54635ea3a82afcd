"""Code-unit widths and character classification.

Strings in strkit are sequences of code units. A code unit is a single
Python character whose ordinal must fit the width of the string it lives in.
"""

from __future__ import annotations

from enum import Enum


class CharWidth(Enum):
    """Supported code-unit widths."""

    NARROW = "narrow"  # 8-bit, char
    WIDE = "wide"  # wchar_t, 32-bit on the platforms we target
    UTF16 = "utf16"  # 16-bit code units
    UTF32 = "utf32"  # 32-bit code units

    @property
    def max_code_unit(self) -> int:
        """Largest ordinal a code unit of this width can hold."""
        return _MAX_CODE_UNIT[self]


_MAX_CODE_UNIT: dict[CharWidth, int] = {
    CharWidth.NARROW: 0xFF,
    CharWidth.WIDE: 0x10FFFF,
    CharWidth.UTF16: 0xFFFF,
    CharWidth.UTF32: 0x10FFFF,
}

# Canonical whitespace set per width. Every width must have an entry.
_WHITESPACE: dict[CharWidth, str] = {
    CharWidth.NARROW: " \t\n\r\f\v",
    CharWidth.WIDE: " \t\n\r\f\v",
    CharWidth.UTF16: " \t\n\r\f\v",
    CharWidth.UTF32: " \t\n\r\f\v",
}

# Delimiter sets are null-terminated; the terminator is never a member.
TERMINATOR = "\0"


class CodeUnitError(ValueError):
    """Raised when a character does not fit the code-unit width."""

    def __init__(self, char: str, position: int, width: CharWidth) -> None:
        self.char = char
        self.position = position
        self.width = width
        super().__init__(
            f"Character U+{ord(char):04X} at position {position} "
            f"does not fit a {width.value} code unit "
            f"(max U+{width.max_code_unit:04X})"
        )


def whitespace(width: CharWidth = CharWidth.NARROW) -> str:
    """Return the whitespace code-unit set for a width.

    Args:
        width: Code-unit width of the target string.

    Returns:
        The whitespace characters space, tab, newline, carriage return,
        form feed and vertical tab.
    """
    return _WHITESPACE[width]


def delimiter_set(delimiters: str) -> str:
    """Cut a delimiter set at its null terminator.

    Example:
        >>> delimiter_set(" ,\\0;")
        ' ,'
        >>> delimiter_set("\\0")
        ''
    """
    end = delimiters.find(TERMINATOR)
    if end == -1:
        return delimiters
    return delimiters[:end]


def check_code_units(text: str, width: CharWidth) -> None:
    """Validate that every character of text fits the width.

    Raises:
        CodeUnitError: On the first character that is too wide.
    """
    limit = width.max_code_unit
    if limit >= 0x10FFFF:
        return
    for position, char in enumerate(text):
        if ord(char) > limit:
            raise CodeUnitError(char, position, width)
