"""State-machine lexer for a block-level markdown subset.

Scanning is a single left-to-right pass. Each state names one scanning
routine; routines consume their construct, emit tokens, and set the next
state. Every routine either consumes input or hands over to a routine
that will, so the scan always terminates.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from marklex.charsets import SPACES
from marklex.config import LexConfig, get_lex_config
from marklex.errors import ScanError
from marklex.lexer.cursor import Cursor
from marklex.lexer.modes import ScanState
from marklex.lexer.scanners import (
    BlockScannerMixin,
    HeadingScannerMixin,
    ParagraphScannerMixin,
    RuleScannerMixin,
)
from marklex.tokens import Token, TokenType
from marklex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Paragraph scanning first: the other scanners fall back to it
    ParagraphScannerMixin,
    HeadingScannerMixin,
    RuleScannerMixin,
    BlockScannerMixin,
):
    """Streaming block-level markdown scanner.

    Usage:
            >>> lexer = Lexer("line one  \\r\\nline two\\r\\n")
            >>> [t.type.name for t in lexer.tokenize()]
            ['PARAGRAPH', 'HARD_BREAK', 'PARAGRAPH_CONTINUATION', 'SOFT_BREAK', 'EOF']

    The stream always ends with exactly one EOF or ERROR token, unless the
    consumer cancels it first.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_cursor",
        "_config",
        "_state",
        "_paragraph_open",
        "_cancelled",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            source_file: Optional source file path for error messages
            config: Scan configuration (defaults to the context's config)
        """
        self._config = config if config is not None else get_lex_config()
        self._cursor = Cursor(
            source,
            source_file=source_file,
            crlf_only=self._config.crlf_only,
        )
        self._state = ScanState.BLOCK
        self._paragraph_open = False
        self._cancelled = False

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def config(self) -> LexConfig:
        return self._config

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects in source order.

        Raises:
            ScanError: A malformed construct was found and the config has
                raise_on_error set.
        """
        while self._state is not ScanState.DONE and not self._cancelled:
            for token in self._dispatch_state():
                if token.type == TokenType.ERROR and self._config.raise_on_error:
                    raise ScanError(
                        token.value,
                        lineno=token.lineno,
                        col_offset=token.col,
                        source_file=token.location.source_file,
                    )
                yield token
                if self._cancelled:
                    logger.debug("Scan cancelled at offset %d", self._cursor.pos)
                    return

    def cancel(self) -> None:
        """Stop the scan at the next resumption of tokenize()."""
        self._cancelled = True

    def _dispatch_state(self) -> Iterator[Token]:
        """Run the scanning routine for the current state."""
        state = self._state
        if state is ScanState.BLOCK:
            yield from self._scan_block()
        elif state is ScanState.PARAGRAPH:
            yield from self._scan_paragraph(TokenType.PARAGRAPH)
        elif state is ScanState.CONTINUATION:
            yield from self._scan_paragraph(TokenType.PARAGRAPH_CONTINUATION)
        elif state is ScanState.SETEXT_HEADER:
            yield from self._scan_setext_header()
        elif state is ScanState.ATX_HEADER:
            yield from self._scan_atx_header()
        elif state is ScanState.RULE_OR_LIST:
            yield from self._scan_rule_or_list()

    # =========================================================================
    # Shared helpers for scanners
    # =========================================================================

    def _text_state(self) -> ScanState:
        return ScanState.CONTINUATION if self._paragraph_open else ScanState.PARAGRAPH

    def _text_kind(self) -> TokenType:
        if self._paragraph_open:
            return TokenType.PARAGRAPH_CONTINUATION
        return TokenType.PARAGRAPH

    def _end_block_line(self) -> None:
        """Consume trailing spaces and the line ending after a block construct.

        Closes any open paragraph and returns to the block dispatcher.
        """
        cursor = self._cursor
        cursor.accept_run_of(SPACES)
        cursor.accept_line_ending()
        cursor.ignore()
        self._paragraph_open = False
        self._state = ScanState.BLOCK

    def _fail(self, message: str) -> Token:
        """Build a terminal ERROR token and stop the scan."""
        logger.debug("Scan error at %d:%d: %s", self._cursor.lineno, self._cursor.col, message)
        self._state = ScanState.DONE
        return self._cursor.error(message)
