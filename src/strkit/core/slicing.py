"""Leftmost and rightmost n code units of buffers and views.

Counts larger than the string keep it whole; zero (or a negative count)
empties it.
"""

from __future__ import annotations

from strkit.core.buffers import StringBuffer, StringView


def _clamp(n: int, size: int) -> int:
    return max(0, min(n, size))


def left_n(s: StringBuffer, n: int) -> None:
    """Keep only the first n code units."""
    n = _clamp(n, len(s))
    s.erase_range(n, len(s))


def right_n(s: StringBuffer, n: int) -> None:
    """Keep only the last n code units."""
    n = _clamp(n, len(s))
    s.erase_range(0, len(s) - n)


def left_n_view(view: StringView, n: int) -> StringView:
    """View of the first n code units."""
    return view.subview(0, _clamp(n, len(view)))


def right_n_view(view: StringView, n: int) -> StringView:
    """View of the last n code units."""
    n = _clamp(n, len(view))
    return view.subview(len(view) - n, n)
