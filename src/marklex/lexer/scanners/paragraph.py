"""Paragraph and setext header scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from marklex.charsets import (
    HARD_BREAK_MIN_SPACES,
    PARAGRAPH_INTERRUPT_CHARS,
    SETEXT_MARKERS,
    SPACES,
)
from marklex.lexer.modes import ScanState
from marklex.tokens import Token, TokenType
from marklex.utils.logger import get_logger

if TYPE_CHECKING:
    from marklex.config import LexConfig
    from marklex.lexer.cursor import Cursor

logger = get_logger(__name__)


class ParagraphScannerMixin:
    """Mixin providing paragraph line scanning and setext detection.

    A paragraph is scanned one line at a time. After each line ending the
    scanner looks at the next line to decide between continuing the
    paragraph, validating a setext underline, or handing back to the
    block dispatcher.

    """

    # These will be set by the Lexer class
    _cursor: Cursor
    _config: LexConfig
    _state: ScanState
    _paragraph_open: bool

    def _fail(self, message: str) -> Token:
        """Build a terminal ERROR token. Implemented by Lexer."""
        raise NotImplementedError

    def _end_block_line(self) -> None:
        """Consume the rest of a block line. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_paragraph(self, kind: TokenType) -> Iterator[Token]:
        """Scan one paragraph line as kind.

        Continuation lines that open with "=" or "-" are setext candidates
        and go to the setext scanner first.
        """
        if kind == TokenType.PARAGRAPH_CONTINUATION and self._cursor.peek() in SETEXT_MARKERS:
            self._state = ScanState.SETEXT_HEADER
            return
        yield from self._scan_text_line(kind)

    def _scan_text_line(self, kind: TokenType) -> Iterator[Token]:
        """Consume inline text to the end of the line and emit it with its break.

        Anything already pending (a "#" run that did not open a header) is
        part of the emitted text.
        """
        cursor = self._cursor
        cursor.accept_until_line_ending()

        if not cursor.at_line_ending():
            # Unterminated last line
            if cursor.pending:
                yield cursor.emit(kind)
                self._paragraph_open = True
            self._state = ScanState.BLOCK
            return

        trailing = cursor.trailing_spaces()
        hard = trailing >= HARD_BREAK_MIN_SPACES
        if hard:
            cursor.back_up(trailing)

        if cursor.pending:
            yield cursor.emit(kind)
        self._paragraph_open = True

        if hard:
            cursor.accept_run_of(SPACES)
        cursor.accept_line_ending()
        yield cursor.emit(TokenType.HARD_BREAK if hard else TokenType.SOFT_BREAK)

        yield from self._scan_after_break(hard)

    def _scan_after_break(self, hard: bool) -> Iterator[Token]:
        """Decide what follows a line break inside a paragraph."""
        cursor = self._cursor
        cursor.accept_run_of(SPACES)
        cursor.ignore()

        if cursor.at_line_ending():
            # Blank line ends the paragraph. After a soft break it is
            # reported as one more break; after a hard break the block
            # dispatcher discards it.
            if not hard:
                cursor.accept_line_ending()
                yield cursor.emit(TokenType.SOFT_BREAK)
                self._paragraph_open = False
            self._state = ScanState.BLOCK
            return

        char = cursor.peek()
        if not char or char in PARAGRAPH_INTERRUPT_CHARS:
            self._state = ScanState.BLOCK
            return

        self._state = ScanState.CONTINUATION

    def _scan_setext_header(self) -> Iterator[Token]:
        """Validate a setext underline, or rescan the line as paragraph text.

        The line must hold one run of a single marker character followed by
        nothing but spaces.
        """
        cursor = self._cursor
        checkpoint = cursor.checkpoint()
        marker = cursor.advance()
        cursor.accept_run_of(marker)
        spaces = cursor.accept_run_of(SPACES)

        if not (cursor.at_line_ending() or cursor.at_eof):
            logger.debug(
                "Line %d opens with %r but is not a setext underline; scanning as text",
                cursor.lineno,
                marker,
            )
            cursor.rewind(checkpoint)
            yield from self._scan_text_line(TokenType.PARAGRAPH_CONTINUATION)
            return

        if cursor.at_eof and self._config.require_line_endings:
            yield self._fail("setext header underline is missing its line ending")
            return

        cursor.back_up(spaces)
        yield cursor.emit(TokenType.SETEXT_UNDERLINE)
        self._end_block_line()
