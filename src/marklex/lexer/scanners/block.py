"""Block dispatcher scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from marklex.charsets import ATX_MARKER, SPACES, UNORDERED_LIST_MARKERS, is_word_char
from marklex.lexer.modes import ScanState
from marklex.tokens import Token, TokenType
from marklex.utils.logger import get_logger

if TYPE_CHECKING:
    from marklex.lexer.cursor import Cursor

logger = get_logger(__name__)


class BlockScannerMixin:
    """Mixin providing the block-level dispatcher.

    Looks at the start of a line and picks the scanner for the construct
    it opens. Consumes nothing but indentation, blank lines, and
    whitespace-only hard breaks itself.

    """

    # These will be set by the Lexer class
    _cursor: Cursor
    _state: ScanState
    _paragraph_open: bool

    def _text_state(self) -> ScanState:
        """Paragraph state for fallback text."""
        raise NotImplementedError

    def _scan_block(self) -> Iterator[Token]:
        """Dispatch on the next construct.

        Precedence: hard-break line, list/rule marker, word character,
        ATX marker, end of input, blank line, anything else as text.
        """
        cursor = self._cursor

        if cursor.has_hard_break_prefix():
            cursor.accept_run_of(SPACES)
            cursor.accept_line_ending()
            yield cursor.emit(TokenType.HARD_BREAK)
            return

        # Indentation carries no meaning in this subset
        cursor.accept_run_of(SPACES)
        cursor.ignore()

        char = cursor.peek()
        if char in UNORDERED_LIST_MARKERS:
            self._state = ScanState.RULE_OR_LIST
        elif is_word_char(char):
            self._state = self._text_state()
        elif cursor.has_prefix(ATX_MARKER):
            self._state = ScanState.ATX_HEADER
        elif cursor.at_eof:
            yield cursor.emit(TokenType.EOF)
            self._state = ScanState.DONE
        elif cursor.at_line_ending():
            cursor.accept_line_ending()
            cursor.ignore()
            self._paragraph_open = False
        else:
            logger.debug(
                "No block construct starts with %r at %d:%d; scanning as text",
                char,
                cursor.lineno,
                cursor.col,
            )
            self._state = self._text_state()
