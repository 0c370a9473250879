"""Horizontal rule and unordered list item scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from marklex.charsets import (
    HORIZONTAL_RULE_CHARS,
    HORIZONTAL_RULE_MIN_COUNT,
    SPACE,
    SPACES,
)
from marklex.lexer.modes import ScanState
from marklex.tokens import Token, TokenType
from marklex.utils.logger import get_logger

if TYPE_CHECKING:
    from marklex.lexer.cursor import Cursor

logger = get_logger(__name__)


class RuleScannerMixin:
    """Mixin disambiguating lines that open with "-", "+" or "*".

    The same marker can open a horizontal rule, a list item, or plain
    text. The rule reading is tried first, then the list item reading;
    if neither fits, the line is paragraph text.

    """

    # These will be set by the Lexer class
    _cursor: Cursor
    _state: ScanState

    def _end_block_line(self) -> None:
        """Consume the rest of a block line. Implemented by Lexer."""
        raise NotImplementedError

    def _text_kind(self) -> TokenType:
        """Paragraph token type for fallback text. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_text_line(self, kind: TokenType) -> Iterator[Token]:
        """Scan the rest of a line as paragraph text. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_rule_or_list(self) -> Iterator[Token]:
        """Scan a horizontal rule, a list item, or fall back to text."""
        cursor = self._cursor
        checkpoint = cursor.checkpoint()
        marker = cursor.peek()

        if marker in HORIZONTAL_RULE_CHARS:
            count = self._accept_rule_run(marker)
            if count >= HORIZONTAL_RULE_MIN_COUNT and (cursor.at_line_ending() or cursor.at_eof):
                cursor.back_up(cursor.trailing_spaces())
                yield cursor.emit(TokenType.HORIZONTAL_RULE)
                self._end_block_line()
                return
            cursor.rewind(checkpoint)

        # List item: marker, exactly one space, then text
        cursor.advance()
        if cursor.accept_one_of(SPACES) and self._at_item_text():
            cursor.ignore()
            cursor.accept_until_line_ending()
            cursor.back_up(cursor.trailing_spaces())
            yield cursor.emit(TokenType.LIST_ITEM)
            self._end_block_line()
            return

        logger.debug(
            "Line %d opens with %r but is neither rule nor list item; scanning as text",
            cursor.lineno,
            marker,
        )
        cursor.rewind(checkpoint)
        yield from self._scan_text_line(self._text_kind())

    def _accept_rule_run(self, marker: str) -> int:
        """Consume marker characters and spaces up to the line ending.

        Stops early at any other character.

        Returns:
            Number of marker characters consumed.
        """
        cursor = self._cursor
        count = 0
        while not cursor.at_eof and not cursor.at_line_ending():
            if cursor.accept_one_of(marker):
                count += 1
            elif not cursor.accept_one_of(SPACES):
                break
        return count

    def _at_item_text(self) -> bool:
        char = self._cursor.peek()
        return bool(char) and char != SPACE and not self._cursor.at_line_ending()
