"""Trimming for buffers (in place) and views (by narrowing).

Two flavours of trim exist and they behave differently when nothing
matches:

- ``trim_from*`` removes a run of *trim characters* from an end. A string
  made only of trim characters becomes empty; otherwise content that is
  not a trim character is never touched.
- ``trim_left``/``trim_right``/``trim`` remove everything *up to, but not
  including,* the first/last *delimiter*. When no delimiter is present the
  whole string is removed.

The view functions never modify their input. They return a subview of it,
so the result always shares the input's base and lies inside its extent.
"""

from __future__ import annotations

from strkit.core.buffers import NPOS, StringBuffer, StringView
from strkit.core.charsets import whitespace

# Buffers


def trim_from_left(s: StringBuffer, trim_characters: str) -> None:
    """Remove the leading run of trim characters."""
    position = s.find_first_not_of(trim_characters)
    if position == NPOS:
        s.clear()
    else:
        s.erase(0, position)


def trim_whitespace_left(s: StringBuffer) -> None:
    trim_from_left(s, whitespace(s.width))


def trim_from_right(s: StringBuffer, trim_characters: str) -> None:
    """Remove the trailing run of trim characters."""
    position = s.find_last_not_of(trim_characters)
    if position == NPOS:
        s.clear()
    else:
        s.erase(position + 1)


def trim_whitespace_right(s: StringBuffer) -> None:
    trim_from_right(s, whitespace(s.width))


def trim_from(s: StringBuffer, trim_characters: str) -> None:
    """Remove trim characters from both ends."""
    trim_from_left(s, trim_characters)
    trim_from_right(s, trim_characters)


def trim_whitespace(s: StringBuffer) -> None:
    trim_from(s, whitespace(s.width))


def trim_left(s: StringBuffer, delimiters: str) -> None:
    """Remove everything before the first delimiter.

    Clears the string when it holds no delimiter.
    """
    position = s.find_first_of(delimiters)
    if position == NPOS:
        s.clear()
    else:
        s.erase(0, position)


def trim_right(s: StringBuffer, delimiters: str) -> None:
    """Remove everything after the last delimiter.

    Clears the string when it holds no delimiter.
    """
    position = s.find_last_of(delimiters)
    if position == NPOS:
        s.clear()
    else:
        s.erase(position + 1)


def trim(s: StringBuffer, delimiters: str) -> None:
    """Keep the span from the first delimiter to the last one.

    The right side is scanned after the left side has been trimmed.
    """
    trim_left(s, delimiters)
    trim_right(s, delimiters)


# Views


def trim_from_view_left(view: StringView, trim_characters: str) -> StringView:
    """View without the leading run of trim characters.

    An all-trim view collapses to zero length at its end.
    """
    first = view.find_first_not_of(trim_characters)
    if first == NPOS:
        return view.subview(len(view), 0)
    return view.subview(first)


def trim_view_whitespace_left(view: StringView) -> StringView:
    return trim_from_view_left(view, whitespace(view.width))


def trim_from_view_right(view: StringView, trim_characters: str) -> StringView:
    """View without the trailing run of trim characters.

    An all-trim view collapses to zero length at its origin.
    """
    last = view.find_last_not_of(trim_characters)
    if last == NPOS:
        return view.subview(0, 0)
    return view.subview(0, last + 1)


def trim_view_whitespace_right(view: StringView) -> StringView:
    return trim_from_view_right(view, whitespace(view.width))


def trim_from_view(view: StringView, trim_characters: str) -> StringView:
    """View without trim characters at either end."""
    first = view.find_first_not_of(trim_characters)
    if first == NPOS:
        return view.subview(0, 0)
    last = view.find_last_not_of(trim_characters)
    return view.subview(first, last + 1 - first)


def trim_view_whitespace(view: StringView) -> StringView:
    return trim_from_view(view, whitespace(view.width))


def trim_view_left(view: StringView, delimiters: str) -> StringView:
    """View starting at the first delimiter.

    Without a delimiter the result is zero length at the view's origin.
    """
    first = view.find_first_of(delimiters)
    if first == NPOS:
        return view.subview(0, 0)
    return view.subview(first)


def trim_view_right(view: StringView, delimiters: str) -> StringView:
    """View ending just after the last delimiter."""
    last = view.find_last_of(delimiters)
    if last == NPOS:
        return view.subview(0, 0)
    return view.subview(0, last + 1)


def trim_view(view: StringView, delimiters: str) -> StringView:
    """View from the first delimiter to the last delimiter, inclusive."""
    first = view.find_first_of(delimiters)
    if first == NPOS:
        return view.subview(0, 0)
    last = view.find_last_of(delimiters)
    return view.subview(first, last + 1 - first)
