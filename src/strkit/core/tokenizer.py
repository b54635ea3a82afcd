"""Zero-copy tokenizer.

``get_token`` finds one delimiter-separated token at a time. The only state
is the token the caller got back last time: its end offset is where the
next search resumes. Tokens are views into the source, never copies.

Typical loop::

    token = get_token(text, " ,")
    while not token.is_null:
        handle(token)
        token = get_token(text, " ,", token)
"""

from __future__ import annotations

from collections.abc import Iterator

from strkit.core.buffers import StringLike, StringView, as_view
from strkit.core.scan import scan_first_not_of, scan_first_of


def _resume_offset(source: StringView, previous: StringView | None) -> int:
    """Offset within source where the search for the next token starts."""
    if previous is None or previous.is_null:
        return 0
    return max(0, min(previous.end - source.start, len(source)))


def get_token(
    s: StringLike,
    delimiters: str,
    previous: StringView | None = None,
) -> StringView:
    """Return the next token of s after previous.

    Leading delimiters are skipped; the token then runs to the next
    delimiter or the end of s.

    Args:
        s: Text to tokenize (buffer, view or str).
        delimiters: Null-terminated delimiter set.
        previous: Token returned by the previous call, or None (or a null
            view) to start from the beginning.

    Returns:
        A view of the token, or the null view when no token remains.
    """
    source = as_view(s)
    if source.is_null:
        return StringView()

    start = source.start + _resume_offset(source, previous)
    first = scan_first_not_of(source.base, delimiters, start, source.end)
    last = scan_first_of(source.base, delimiters, first, source.end)

    if last == first:
        return StringView()
    return source.subview(first - source.start, last - first)


def iter_tokens(s: StringLike, delimiters: str) -> Iterator[StringView]:
    """Yield every token of s in order.

    Example:
        >>> [str(t) for t in iter_tokens("  a,b,,c  ", " ,")]
        ['a', 'b', 'c']
    """
    source = as_view(s)
    token = get_token(source, delimiters)
    while not token.is_null:
        yield token
        token = get_token(source, delimiters, token)
