"""Tests for buffer and view trimming."""

import pytest

from strkit.core.buffers import StringBuffer, StringView
from strkit.core.charsets import CharWidth
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


def _trimmed(func, text, *args):
    s = StringBuffer(text)
    func(s, *args)
    return str(s)


class TestTrimFrom:
    """Tests for trimming runs of trim characters from buffers."""

    def test_trim_from_left(self):
        """trim_from_left removes a leading run of trim characters."""
        assert _trimmed(trim_from_left, "xxyhello", "xy") == "hello"

    def test_trim_from_right(self):
        """trim_from_right removes a trailing run of trim characters."""
        assert _trimmed(trim_from_right, "helloyxx", "xy") == "hello"

    def test_trim_from_both(self):
        """trim_from removes runs at both ends."""
        assert _trimmed(trim_from, "xyhelloyx", "xy") == "hello"

    def test_no_trim_characters_present(self):
        """Content without trim characters is left alone."""
        assert _trimmed(trim_from, "hello", "xy") == "hello"

    def test_all_trim_characters_clears(self):
        """A buffer made only of trim characters becomes empty."""
        assert _trimmed(trim_from_left, "xyxy", "xy") == ""
        assert _trimmed(trim_from_right, "xyxy", "xy") == ""
        assert _trimmed(trim_from, "xyxy", "xy") == ""

    def test_empty_buffer(self):
        """Trimming an empty buffer leaves it empty."""
        assert _trimmed(trim_from, "", "xy") == ""

    def test_interior_characters_kept(self):
        """Trim characters between other characters are kept."""
        assert _trimmed(trim_from, "x-xhix-x", "x") == "-xhix-"


class TestTrimWhitespace:
    """Tests for whitespace trimming of buffers."""

    def test_both_ends(self):
        """trim_whitespace strips mixed whitespace at both ends."""
        assert _trimmed(trim_whitespace, " \t hello world\r\n") == "hello world"

    def test_left(self):
        """trim_whitespace_left keeps trailing whitespace."""
        assert _trimmed(trim_whitespace_left, "  hi  ") == "hi  "

    def test_right(self):
        """trim_whitespace_right keeps leading whitespace."""
        assert _trimmed(trim_whitespace_right, "  hi  ") == "  hi"

    def test_all_whitespace(self):
        """A whitespace-only buffer becomes empty."""
        assert _trimmed(trim_whitespace, " \f\v ") == ""

    @pytest.mark.parametrize("text", ["", "a", "  a b  ", "\t\n", "ab  "])
    def test_idempotent(self, text):
        """Trimming twice gives the same result as trimming once."""
        once = _trimmed(trim_whitespace, text)
        assert _trimmed(trim_whitespace, once) == once

    def test_uses_width_of_buffer(self):
        """A UTF-16 buffer is trimmed with its own whitespace set."""
        s = StringBuffer("  €  ", width=CharWidth.UTF16)
        trim_whitespace(s)
        assert s == "€"


class TestTrimDelimiters:
    """Tests for trimming up to delimiters."""

    def test_trim_left_keeps_delimiter(self):
        """trim_left removes text before the first delimiter."""
        assert _trimmed(trim_left, "junk<tag>junk", "<>") == "<tag>junk"

    def test_trim_right_keeps_delimiter(self):
        """trim_right removes text after the last delimiter."""
        assert _trimmed(trim_right, "junk<tag>junk", "<>") == "junk<tag>"

    def test_trim_keeps_delimited_span(self):
        """trim keeps the span between the outermost delimiters."""
        assert _trimmed(trim, "junk<tag>junk", "<>") == "<tag>"

    def test_no_delimiter_clears(self):
        """Without a delimiter there is nothing to keep."""
        assert _trimmed(trim_left, "hello", "<>") == ""
        assert _trimmed(trim_right, "hello", "<>") == ""
        assert _trimmed(trim, "hello", "<>") == ""

    def test_delimiter_at_edges_is_noop(self):
        """Delimiters already at both ends leave the buffer as is."""
        assert _trimmed(trim, "<tag>", "<>") == "<tag>"

    def test_single_delimiter(self):
        """With one delimiter only that delimiter remains."""
        assert _trimmed(trim, "ab|cd", "|") == "|"

    def test_differs_from_trim_from(self):
        """trim_left removes up to a delimiter; trim_from_left removes a run."""
        assert _trimmed(trim_left, "abc", "x") == ""
        assert _trimmed(trim_from_left, "abc", "x") == "abc"
        assert _trimmed(trim_left, "aab", "a") == "aab"
        assert _trimmed(trim_from_left, "aab", "a") == "b"

    def test_terminator_limits_delimiters(self):
        """Delimiters after the terminator are ignored."""
        assert _trimmed(trim_left, "ab;c,d", ",\0;") == ",d"


class TestTrimViews:
    """Tests for view trimming."""

    def test_trim_from_view_left(self):
        """The trimmed view starts after the leading run."""
        view = trim_from_view_left(StringView("xxhello"), "x")
        assert view == "hello"
        assert view.start == 2

    def test_trim_from_view_left_all_trim_sits_at_end(self):
        """An all-trim view collapses to zero length at its end."""
        source = StringView("abxxxx", 2)
        view = trim_from_view_left(source, "x")
        assert len(view) == 0
        assert view.start == source.end

    def test_trim_from_view_right(self):
        """The trimmed view keeps its start."""
        view = trim_from_view_right(StringView("helloxx"), "x")
        assert view == "hello"
        assert view.start == 0

    def test_trim_from_view_right_all_trim_sits_at_origin(self):
        """An all-trim view collapses to zero length at its start."""
        source = StringView("abxxxx", 2)
        view = trim_from_view_right(source, "x")
        assert len(view) == 0
        assert view.start == source.start

    def test_trim_from_view(self):
        """trim_from_view trims runs at both ends."""
        assert trim_from_view(StringView("xhix"), "x") == "hi"

    def test_trim_from_view_all_trim(self):
        """An all-trim view collapses at its start."""
        source = StringView("--xxx", 2)
        view = trim_from_view(source, "x")
        assert len(view) == 0
        assert view.start == source.start

    def test_whitespace_views(self):
        """Whitespace view trims match the buffer forms."""
        source = StringView("  hi  ")
        assert trim_view_whitespace_left(source) == "hi  "
        assert trim_view_whitespace_right(source) == "  hi"
        assert trim_view_whitespace(source) == "hi"

    def test_delimiter_views(self):
        """Delimiter view trims match the buffer forms."""
        source = StringView("junk<tag>junk")
        assert trim_view_left(source, "<>") == "<tag>junk"
        assert trim_view_right(source, "<>") == "junk<tag>"
        assert trim_view(source, "<>") == "<tag>"

    def test_delimiter_views_without_delimiter(self):
        """Without a delimiter every view trim is empty at the start."""
        source = StringView("--hello", 2)
        for func in (trim_view_left, trim_view_right, trim_view):
            view = func(source, "<>")
            assert len(view) == 0
            assert view.start == source.start

    def test_input_view_untouched(self):
        """View trims never modify the input view or its buffer."""
        buffer = StringBuffer("  hi  ")
        source = buffer.view()
        trim_view_whitespace(source)
        assert source == "  hi  "
        assert buffer == "  hi  "

    @pytest.mark.parametrize(
        "func,args",
        [
            (trim_from_view_left, ("x",)),
            (trim_from_view_right, ("x",)),
            (trim_from_view, ("x",)),
            (trim_view_whitespace_left, ()),
            (trim_view_whitespace_right, ()),
            (trim_view_whitespace, ()),
            (trim_view_left, ("<>",)),
            (trim_view_right, ("<>",)),
            (trim_view, ("<>",)),
        ],
    )
    @pytest.mark.parametrize("text", ["", "xx", "  x<a>x  ", "<>", "plain"])
    def test_result_inside_input(self, func, args, text):
        """Every view trim returns a view enclosed by its input."""
        source = StringView("##" + text + "##", 2, len(text))
        result = func(source, *args)
        assert source.encloses(result)
