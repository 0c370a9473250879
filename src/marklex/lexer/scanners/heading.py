"""ATX header scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from marklex.charsets import ATX_MARKER, MAX_HEADING_LEVEL, SPACE
from marklex.lexer.modes import ScanState
from marklex.tokens import Token, TokenType, heading_type
from marklex.utils.logger import get_logger

if TYPE_CHECKING:
    from marklex.config import LexConfig
    from marklex.lexer.cursor import Cursor

logger = get_logger(__name__)


class HeadingScannerMixin:
    """Mixin providing ATX header scanning."""

    # These will be set by the Lexer class
    _cursor: Cursor
    _config: LexConfig
    _state: ScanState

    def _fail(self, message: str) -> Token:
        """Build a terminal ERROR token. Implemented by Lexer."""
        raise NotImplementedError

    def _end_block_line(self) -> None:
        """Consume the rest of a block line. Implemented by Lexer."""
        raise NotImplementedError

    def _text_kind(self) -> TokenType:
        """Paragraph token type for fallback text. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_text_line(self, kind: TokenType) -> Iterator[Token]:
        """Scan the rest of a line as paragraph text. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_atx_header(self) -> Iterator[Token]:
        """Scan an ATX header line.

        A run of "#" followed by one space opens a header; the rest of the
        line (without trailing spaces) is its value. Without the space the
        run is ordinary paragraph text.

        Runs longer than six are clamped to level 6, or end the scan with an
        ERROR token when clamp_heading_level is off.
        """
        cursor = self._cursor
        level = cursor.accept_run_of(ATX_MARKER)
        if level == 0:
            yield self._fail(f"expected {ATX_MARKER!r} at start of ATX header")
            return

        if cursor.peek() != SPACE:
            logger.debug("%r run on line %d is not a header; scanning as text", ATX_MARKER, cursor.lineno)
            yield from self._scan_text_line(self._text_kind())
            return

        if level > MAX_HEADING_LEVEL:
            if not self._config.clamp_heading_level:
                yield self._fail(
                    f"ATX header level {level} exceeds maximum of {MAX_HEADING_LEVEL}"
                )
                return
            level = MAX_HEADING_LEVEL

        # Exactly one separating space
        cursor.skip(1)
        cursor.accept_until_line_ending()

        if cursor.at_eof and self._config.require_line_endings:
            yield self._fail("ATX header is missing its line ending")
            return

        cursor.back_up(cursor.trailing_spaces())
        yield cursor.emit(heading_type(level))
        self._end_block_line()
