"""Padding buffers up to a minimum size."""

from __future__ import annotations

from enum import Enum

from strkit.core.buffers import StringBuffer


class PadDirection(Enum):
    """Side of the string that receives padding."""

    LEFT = "left"
    RIGHT = "right"


def _pad_count(s: StringBuffer, required_size: int) -> int:
    """Number of pad characters needed, never growing past max_size()."""
    target = min(required_size, s.max_size())
    return max(0, target - len(s))


def pad_left(s: StringBuffer, required_size: int, pad_char: str = " ") -> None:
    """Prepend pad_char until s reaches required_size.

    Example:
        >>> s = StringBuffer("42")
        >>> pad_left(s, 5, "0")
        >>> str(s)
        '00042'
    """
    count = _pad_count(s, required_size)
    if count:
        s.insert(0, count, pad_char)


def pad_right(s: StringBuffer, required_size: int, pad_char: str = " ") -> None:
    """Append pad_char until s reaches required_size."""
    count = _pad_count(s, required_size)
    if count:
        s.insert(len(s), count, pad_char)


def pad(
    s: StringBuffer,
    required_size: int,
    direction: PadDirection,
    pad_char: str = " ",
) -> None:
    """Pad on the side named by direction.

    Anything other than a PadDirection member leaves s unchanged.
    """
    if direction is PadDirection.LEFT:
        pad_left(s, required_size, pad_char)
    elif direction is PadDirection.RIGHT:
        pad_right(s, required_size, pad_char)
