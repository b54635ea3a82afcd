"""In-place content transforms: reversal and replacement."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from strkit.core.buffers import NPOS, StringBuffer

logger = logging.getLogger(__name__)


def reverse(s: StringBuffer) -> None:
    """Reverse the order of code units in place."""
    left = 0
    right = len(s) - 1
    while left < right:
        s[left], s[right] = s[right], s[left]
        left += 1
        right -= 1


def replace_characters(s: StringBuffer, pairs: Iterable[tuple[str, str]]) -> None:
    """Replace every occurrence of each old code unit with its new one.

    Pairs are applied in order, each as its own pass over the whole string,
    so a later pair sees the output of earlier ones.

    Example:
        >>> s = StringBuffer("a-b_c")
        >>> replace_characters(s, [("-", "_"), ("_", " ")])
        >>> str(s)
        'a b c'
    """
    for old, new in pairs:
        for position in range(len(s)):
            if s[position] == old:
                s[position] = new


def replace_strings(s: StringBuffer, pairs: Iterable[tuple[str, str]]) -> None:
    """Replace every non-overlapping occurrence of each old substring.

    After each replacement the search resumes past the inserted text, so a
    replacement that contains its own pattern is not rescanned. Pairs with
    an empty old substring are skipped.

    Example:
        >>> s = StringBuffer("ab")
        >>> replace_strings(s, [("ab", "abab")])
        >>> str(s)
        'abab'
    """
    for old, new in pairs:
        if not old:
            logger.debug("Skipping replacement with empty pattern -> %r", new)
            continue

        replaced = 0
        position = s.find(old, 0)
        while position != NPOS:
            s.replace(position, len(old), new)
            replaced += 1
            position = s.find(old, position + len(new))

        if replaced:
            logger.debug("Replaced %d occurrence(s) of %r", replaced, old)
