"""Directional delimiter scans.

The four scans operate on a position range ``[first, last)`` of any
indexable sequence of code units (a ``str``, a list of code units, a
StringBuffer or a StringView). Each returns the position of the match, or
``last`` when the range is empty or nothing matches. Both container kinds
and every trim, slice, tokenizer and pad operation are built on these.
"""

from __future__ import annotations

from collections.abc import Sequence

from strkit.core.charsets import delimiter_set


def _resolve_range(
    units: Sequence[str], first: int, last: int | None
) -> tuple[int, int]:
    size = len(units)
    if last is None or last > size:
        last = size
    last = max(0, last)
    first = max(0, min(first, last))
    return first, last


def scan_first_of(
    units: Sequence[str],
    delimiters: str,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Find the first position holding any of the delimiters.

    Args:
        units: Code units to scan.
        delimiters: Null-terminated delimiter set.
        first: Start of the range.
        last: End of the range (exclusive). Defaults to the end of units.

    Returns:
        Position of the first match, or the end of the range.
    """
    first, last = _resolve_range(units, first, last)
    chars = delimiter_set(delimiters)
    for pos in range(first, last):
        if units[pos] in chars:
            return pos
    return last


def scan_first_not_of(
    units: Sequence[str],
    delimiters: str,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Find the first position holding none of the delimiters."""
    first, last = _resolve_range(units, first, last)
    chars = delimiter_set(delimiters)
    for pos in range(first, last):
        if units[pos] not in chars:
            return pos
    return last


def scan_last_of(
    units: Sequence[str],
    delimiters: str,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Find the last position holding any of the delimiters.

    Scans backward from the end of the range. Returns the end of the range
    when it is empty or nothing matches.
    """
    first, last = _resolve_range(units, first, last)
    if first == last:
        return last
    chars = delimiter_set(delimiters)
    for pos in range(last - 1, first - 1, -1):
        if units[pos] in chars:
            return pos
    return last


def scan_last_not_of(
    units: Sequence[str],
    delimiters: str,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Find the last position holding none of the delimiters."""
    first, last = _resolve_range(units, first, last)
    if first == last:
        return last
    chars = delimiter_set(delimiters)
    for pos in range(last - 1, first - 1, -1):
        if units[pos] not in chars:
            return pos
    return last
