"""Core string primitives.

This package contains the stateless string operations: delimiter scans,
trimming, slicing, content transforms, tokenizing and padding. Every
operation works on a caller-owned StringBuffer (in place) or StringView
(by returning a narrower view) and never raises for empty input, missing
matches or out-of-range counts.
"""

from strkit.core.buffers import (
    NPOS,
    StringBuffer,
    StringLike,
    StringView,
    as_view,
)
from strkit.core.charsets import (
    CharWidth,
    CodeUnitError,
    check_code_units,
    delimiter_set,
    whitespace,
)
from strkit.core.padding import PadDirection, pad, pad_left, pad_right
from strkit.core.scan import (
    scan_first_not_of,
    scan_first_of,
    scan_last_not_of,
    scan_last_of,
)
from strkit.core.slicing import left_n, left_n_view, right_n, right_n_view
from strkit.core.tokenizer import get_token, iter_tokens
from strkit.core.transforms import replace_characters, replace_strings, reverse
from strkit.core.trim import (
    trim,
    trim_from,
    trim_from_left,
    trim_from_right,
    trim_from_view,
    trim_from_view_left,
    trim_from_view_right,
    trim_left,
    trim_right,
    trim_view,
    trim_view_left,
    trim_view_right,
    trim_view_whitespace,
    trim_view_whitespace_left,
    trim_view_whitespace_right,
    trim_whitespace,
    trim_whitespace_left,
    trim_whitespace_right,
)

__all__ = [
    # buffers
    "NPOS",
    "StringBuffer",
    "StringLike",
    "StringView",
    "as_view",
    # charsets
    "CharWidth",
    "CodeUnitError",
    "check_code_units",
    "delimiter_set",
    "whitespace",
    # scan
    "scan_first_of",
    "scan_first_not_of",
    "scan_last_of",
    "scan_last_not_of",
    # trim - buffers
    "trim_from_left",
    "trim_from_right",
    "trim_from",
    "trim_whitespace_left",
    "trim_whitespace_right",
    "trim_whitespace",
    "trim_left",
    "trim_right",
    "trim",
    # trim - views
    "trim_from_view_left",
    "trim_from_view_right",
    "trim_from_view",
    "trim_view_whitespace_left",
    "trim_view_whitespace_right",
    "trim_view_whitespace",
    "trim_view_left",
    "trim_view_right",
    "trim_view",
    # slicing
    "left_n",
    "right_n",
    "left_n_view",
    "right_n_view",
    # transforms
    "reverse",
    "replace_characters",
    "replace_strings",
    # tokenizer
    "get_token",
    "iter_tokens",
    # padding
    "PadDirection",
    "pad",
    "pad_left",
    "pad_right",
]
