"""Tests for the zero-copy tokenizer."""

from strkit.core.buffers import StringBuffer, StringView
from strkit.core.tokenizer import get_token, iter_tokens


class TestGetToken:
    """Tests for get_token."""

    def test_walks_tokens_then_null(self):
        """Leading, repeated and trailing delimiters are all skipped."""
        text = "  a,b,,c  "
        tokens = []
        token = get_token(text, " ,")
        while not token.is_null:
            tokens.append(str(token))
            token = get_token(text, " ,", token)

        assert tokens == ["a", "b", "c"]
        assert token.is_null

    def test_token_offsets(self):
        """Tokens carry their offsets into the source."""
        text = "  a,bc"
        first = get_token(text, " ,")
        second = get_token(text, " ,", first)
        assert (first.start, first.end) == (2, 3)
        assert (second.start, second.end) == (4, 6)

    def test_tokens_alias_source(self):
        """Tokens share the source's storage."""
        s = StringBuffer("x y")
        source = s.view()
        token = get_token(source, " ")
        assert token.base is source.base
        assert source.encloses(token)

    def test_empty_input(self):
        """An empty source has no tokens."""
        assert get_token("", " ").is_null

    def test_only_delimiters(self):
        """A source of only delimiters has no tokens."""
        assert get_token(" , ", " ,").is_null

    def test_no_delimiters_whole_string(self):
        """Without delimiters the whole source is one token."""
        assert get_token("hello", ",") == "hello"

    def test_null_previous_starts_over(self):
        """A null previous token starts from the beginning."""
        assert get_token("a b", " ", StringView()) == "a"

    def test_null_source(self):
        """A null source yields a null token."""
        assert get_token(StringView(), " ").is_null

    def test_within_a_view(self):
        """Tokens never extend past the end of the source view."""
        source = StringView("ab cd ef", 0, 5)
        tokens = [str(t) for t in iter_tokens(source, " ")]
        assert tokens == ["ab", "cd"]

    def test_view_with_offset(self):
        """Resuming works for a view that doesn't start at zero."""
        source = StringView("xx ab cd", 2)
        first = get_token(source, " ")
        second = get_token(source, " ", first)
        assert first == "ab"
        assert second == "cd"
        assert get_token(source, " ", second).is_null


class TestIterTokens:
    """Tests for iter_tokens."""

    def test_yields_all_tokens(self):
        """iter_tokens yields every token in order."""
        assert [str(t) for t in iter_tokens("a b  c", " ")] == ["a", "b", "c"]

    def test_empty(self):
        """iter_tokens yields nothing for delimiter-only input."""
        assert list(iter_tokens("   ", " ")) == []
