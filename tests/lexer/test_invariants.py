"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from marklex.config import LexConfig
from marklex.lexer import Lexer
from marklex.tokens import HEADING_TYPES, TERMINAL_TYPES, TokenType

# Characters that drive every block-level decision
MARKDOWN_ALPHABET = "#-+*= ab\r\n"

markdown_text = st.text(alphabet=MARKDOWN_ALPHABET, max_size=200)


def scan(source: str, config: LexConfig | None = None) -> list:
    return list(Lexer(source, config=config).tokenize())


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every default-config scan ends with exactly one EOF token."""
        tokens = scan(source)

        assert tokens[-1].type == TokenType.EOF, "Last token must be EOF"
        assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1
        assert not any(t.type == TokenType.ERROR for t in tokens)

    @given(markdown_text)
    @settings(max_examples=300)
    def test_raw_spans_reassemble_source(self, source: str) -> None:
        """Joining raw over the stream gives back the source."""
        tokens = scan(source)
        assert "".join(t.raw for t in tokens) == source

    @given(markdown_text)
    @settings(max_examples=200)
    def test_raw_spans_reassemble_source_crlf_only(self, source: str) -> None:
        tokens = scan(source, LexConfig(crlf_only=True))
        assert "".join(t.raw for t in tokens) == source

    @given(markdown_text)
    @settings(max_examples=200)
    def test_value_matches_source_slice(self, source: str) -> None:
        """Each value is the source text between its offsets."""
        for token in scan(source):
            loc = token.location
            assert source[loc.offset : loc.end_offset] == token.value

    @given(markdown_text)
    @settings(max_examples=100)
    def test_deterministic(self, source: str) -> None:
        """Scanning the same source twice gives the same stream."""
        assert scan(source) == scan(source)

    @given(markdown_text)
    @settings(max_examples=100)
    def test_rescanning_reassembled_source(self, source: str) -> None:
        """Rescanning the joined raws reproduces the same stream."""
        tokens = scan(source)
        assert scan("".join(t.raw for t in tokens)) == tokens

    @given(st.text(max_size=500))
    @settings(max_examples=100)
    def test_position_never_negative(self, source: str) -> None:
        """Token positions should never be negative."""
        for token in scan(source):
            loc = token.location
            assert loc.lineno >= 1
            assert loc.col_offset >= 1
            assert 0 <= loc.offset <= loc.end_offset <= len(source)

    @given(markdown_text)
    @settings(max_examples=100)
    def test_offsets_never_decrease(self, source: str) -> None:
        offsets = [t.location.offset for t in scan(source)]
        assert offsets == sorted(offsets)


class TestStrictConfigInvariants:
    """Invariants under the configs that can end a scan early."""

    @given(markdown_text)
    @settings(max_examples=200)
    def test_single_terminal_token_last(self, source: str) -> None:
        config = LexConfig(clamp_heading_level=False, require_line_endings=True)
        tokens = scan(source, config)

        terminals = [t for t in tokens if t.type in TERMINAL_TYPES]
        assert len(terminals) == 1
        assert tokens[-1] is terminals[0]

    @given(markdown_text)
    @settings(max_examples=200)
    def test_raw_spans_are_source_prefix(self, source: str) -> None:
        """An ERROR stops the scan, so the raws cover a prefix of the source."""
        config = LexConfig(clamp_heading_level=False, require_line_endings=True)
        tokens = scan(source, config)
        assert source.startswith("".join(t.raw for t in tokens))


class TestSpecialCharacterHandling:
    """Test handling of marker characters."""

    @given(st.text(alphabet="#-+*=\r\n ", max_size=200))
    @settings(max_examples=200)
    def test_no_exceptions_on_marker_chars(self, source: str) -> None:
        """Any combination of markers scans without raising."""
        tokens = scan(source)
        assert tokens[-1].type == TokenType.EOF

    @given(st.text(alphabet="-* \r\n", max_size=100))
    @settings(max_examples=100)
    def test_rule_tokens_have_enough_markers(self, source: str) -> None:
        for token in scan(source):
            if token.type == TokenType.HORIZONTAL_RULE:
                assert len(token.value.replace(" ", "")) >= 3
                assert not token.value.endswith(" ")

    @given(st.text(alphabet="#a \r\n", max_size=100))
    @settings(max_examples=100)
    def test_heading_values_have_no_line_endings(self, source: str) -> None:
        for token in scan(source):
            if token.type in HEADING_TYPES:
                assert "\r\n" not in token.value
                assert "\n" not in token.value
                assert not token.value.endswith(" ")


class TestBreakInvariants:
    """Line break tokens are line endings with optional leading spaces."""

    @given(markdown_text)
    @settings(max_examples=200)
    def test_breaks_end_with_line_ending(self, source: str) -> None:
        for token in scan(source):
            if token.type == TokenType.HARD_BREAK:
                assert token.value.rstrip("\r\n").strip(" ") == ""
                assert token.value.endswith("\n")
                assert token.value.startswith("  ")
            elif token.type == TokenType.SOFT_BREAK:
                assert token.value in ("\r\n", "\n")

    @given(markdown_text)
    @settings(max_examples=100)
    def test_text_never_contains_line_endings(self, source: str) -> None:
        for token in scan(source):
            if token.type in (TokenType.PARAGRAPH, TokenType.PARAGRAPH_CONTINUATION):
                assert "\n" not in token.value


@pytest.mark.parametrize(
    "source",
    [
        "",
        "\r\n",
        "  \r\n",
        "#",
        "# ",
        "-",
        "- ",
        "---",
        "=",
        "a\r\n=",
        "a\r\n-",
        "a  ",
        "a\r",
        "\r",
    ],
)
def test_tiny_inputs_reassemble(source: str) -> None:
    tokens = scan(source)
    assert "".join(t.raw for t in tokens) == source
    assert tokens[-1].type == TokenType.EOF
