"""Tests for paragraph lines, line breaks, and setext underlines."""

import pytest

from marklex.config import LexConfig
from marklex.lexer import Lexer
from marklex.tokens import TokenType

P = TokenType.PARAGRAPH
C = TokenType.PARAGRAPH_CONTINUATION
SOFT = TokenType.SOFT_BREAK
HARD = TokenType.HARD_BREAK
EOF = TokenType.EOF


def pairs(source: str, config: LexConfig | None = None) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer(source, config=config).tokenize()]


def kinds(source: str, config: LexConfig | None = None) -> list[TokenType]:
    return [t.type for t in Lexer(source, config=config).tokenize()]


class TestLineBreaks:
    """Soft and hard line breaks inside a paragraph."""

    def test_hard_break(self) -> None:
        assert pairs("line one  \r\nline two\r\n") == [
            (P, "line one"),
            (HARD, "  \r\n"),
            (C, "line two"),
            (SOFT, "\r\n"),
            (EOF, ""),
        ]

    def test_hard_break_with_many_spaces(self) -> None:
        assert pairs("a     \r\nb")[:2] == [(P, "a"), (HARD, "     \r\n")]

    def test_single_trailing_space_is_soft(self) -> None:
        assert pairs("a \r\nb") == [(P, "a "), (SOFT, "\r\n"), (C, "b"), (EOF, "")]

    def test_soft_break_then_blank_line(self) -> None:
        assert pairs("line one\r\nline two\r\n\r\n") == [
            (P, "line one"),
            (SOFT, "\r\n"),
            (C, "line two"),
            (SOFT, "\r\n"),
            (SOFT, "\r\n"),
            (EOF, ""),
        ]

    def test_blank_line_starts_new_paragraph(self) -> None:
        assert kinds("one\r\n\r\ntwo\r\n") == [P, SOFT, SOFT, P, SOFT, EOF]

    def test_hard_break_then_blank_line_returns_to_block(self) -> None:
        assert kinds("one  \r\n\r\ntwo") == [P, HARD, P, EOF]

    def test_leading_spaces_of_next_line_discarded(self) -> None:
        assert pairs("a\r\n   b")[2] == (C, "b")

    def test_whitespace_only_line_is_blank(self) -> None:
        assert kinds("a\r\n   \r\nb") == [P, SOFT, SOFT, P, EOF]

    def test_many_lines_one_paragraph(self) -> None:
        assert kinds("a\r\nb\r\nc") == [P, SOFT, C, SOFT, C, EOF]


class TestParagraphText:
    """Paragraph line contents."""

    def test_unterminated_line(self) -> None:
        assert pairs("hello world") == [(P, "hello world"), (EOF, "")]

    def test_inline_punctuation_kept(self) -> None:
        text = "Hi! (a, b); 'c' \"d\" [e] {f} @#$%^&*_-./>?"
        assert pairs(text)[0] == (P, text)

    def test_unicode_text(self) -> None:
        assert pairs("héllo 日本\r\n")[0] == (P, "héllo 日本")

    @pytest.mark.parametrize("source", ["!bang", ".dot", "\ttab", "(paren", "> quote", "1. one"])
    def test_any_leading_character_opens_paragraph(self, source: str) -> None:
        assert pairs(source) == [(P, source), (EOF, "")]

    def test_lone_carriage_return_is_text(self) -> None:
        assert pairs("a\rb") == [(P, "a\rb"), (EOF, "")]

    def test_underscore_opens_paragraph(self) -> None:
        assert pairs("_x_")[0] == (P, "_x_")


class TestLineEndingModes:
    """CRLF-only versus CRLF-or-LF line endings."""

    def test_lf_ends_lines_by_default(self) -> None:
        assert pairs("a\nb") == [(P, "a"), (SOFT, "\n"), (C, "b"), (EOF, "")]

    def test_lf_is_text_when_crlf_only(self) -> None:
        assert pairs("a\nb", LexConfig(crlf_only=True)) == [(P, "a\nb"), (EOF, "")]

    def test_crlf_in_crlf_only_mode(self) -> None:
        assert kinds("a\r\nb", LexConfig(crlf_only=True)) == [P, SOFT, C, EOF]

    def test_mixed_endings(self) -> None:
        assert pairs("a\r\nb\nc")[1::2] == [(SOFT, "\r\n"), (SOFT, "\n"), (EOF, "")]


class TestSetextUnderlines:
    """Setext header detection after paragraph text."""

    def test_equals_underline(self) -> None:
        tokens = list(Lexer("Title\r\n===\r\n").tokenize())
        assert [(t.type, t.value) for t in tokens] == [
            (P, "Title"),
            (SOFT, "\r\n"),
            (TokenType.SETEXT_UNDERLINE, "==="),
            (EOF, ""),
        ]
        assert tokens[2].heading_level == 1

    def test_dash_underline(self) -> None:
        tokens = list(Lexer("Title\r\n---\r\n").tokenize())
        assert tokens[2].type == TokenType.SETEXT_UNDERLINE
        assert tokens[2].heading_level == 2

    def test_single_marker_underline(self) -> None:
        assert pairs("Title\r\n=\r\n")[2] == (TokenType.SETEXT_UNDERLINE, "=")

    def test_underline_trailing_spaces_allowed(self) -> None:
        assert pairs("Title\r\n===   \r\n")[2] == (TokenType.SETEXT_UNDERLINE, "===")

    def test_underline_leading_spaces_allowed(self) -> None:
        assert pairs("Title\r\n  ===\r\n")[2] == (TokenType.SETEXT_UNDERLINE, "===")

    def test_underline_after_hard_break(self) -> None:
        assert kinds("Title  \r\n===\r\n") == [P, HARD, TokenType.SETEXT_UNDERLINE, EOF]

    def test_underline_at_end_of_input(self) -> None:
        assert pairs("Title\r\n===")[2] == (TokenType.SETEXT_UNDERLINE, "===")

    def test_underline_at_end_of_input_error_when_line_endings_required(self) -> None:
        tokens = pairs("Title\r\n===", LexConfig(require_line_endings=True))
        assert tokens[-1][0] == TokenType.ERROR
        assert tokens[:2] == [(P, "Title"), (SOFT, "\r\n")]

    def test_underline_closes_paragraph(self) -> None:
        assert kinds("Title\r\n===\r\nbody") == [P, SOFT, TokenType.SETEXT_UNDERLINE, P, EOF]

    def test_stray_characters_degrade_to_text(self) -> None:
        assert pairs("Title\r\n=== x\r\n") == [
            (P, "Title"),
            (SOFT, "\r\n"),
            (C, "=== x"),
            (SOFT, "\r\n"),
            (EOF, ""),
        ]

    def test_mixed_markers_degrade_to_text(self) -> None:
        assert pairs("Title\r\n=-=\r\n")[2] == (C, "=-=")

    def test_dash_list_line_after_text_continues_paragraph(self) -> None:
        assert pairs("Title\r\n- item\r\n")[2] == (C, "- item")

    def test_equals_at_document_start_is_text(self) -> None:
        assert pairs("===\r\n")[0] == (P, "===")
