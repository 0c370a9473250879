"""Scanning cursor over an immutable source string.

The cursor owns the scan position and the pending span (the text between
the last emission point and the position). Scanners move it with the
advance/accept primitives and cut tokens out of it with emit().

Back-up safety:
Every advance() records the position it came from on a history stack,
so back_up(n) can rewind any number of steps taken since the last
emit() or ignore(). The stack is cleared at those points; it never grows
beyond one line of input.

Thread Safety:
Cursor instances are single-use and owned by one Lexer. Not thread-safe.

"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from marklex.charsets import CRLF, LF, SPACE
from marklex.errors import CursorError
from marklex.tokens import Token, TokenType

EOF = ""


@dataclass(frozen=True, slots=True)
class CursorCheckpoint:
    """Saved cursor position for re-scanning a line."""

    pos: int
    lineno: int
    col: int
    start: int
    depth: int


class Cursor:
    """Position, pending span, and scanning primitives over a source string.

    Usage:
            >>> cursor = Cursor("# Title\\r\\n")
            >>> cursor.accept_run_of("#")
            1
            >>> cursor.skip(1)
            >>> cursor.accept_until_line_ending()
            5
            >>> cursor.emit(TokenType.H1).value
            'Title'

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_crlf_only",
        "_pos",
        "_lineno",
        "_col",
        "_start",
        "_start_lineno",
        "_start_col",
        "_raw_start",
        "_history",
    )

    def __init__(
        self,
        source: str,
        *,
        source_file: str | None = None,
        crlf_only: bool = False,
    ) -> None:
        """Initialize cursor at the start of source.

        Args:
            source: Markdown source text
            source_file: Optional source file path, copied onto tokens
            crlf_only: Only "\\r\\n" counts as a line ending
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._crlf_only = crlf_only

        self._pos = 0
        self._lineno = 1
        self._col = 1

        # Pending span start (moved by emit and ignore)
        self._start = 0
        self._start_lineno = 1
        self._start_col = 1

        # Raw span start (moved by emit only)
        self._raw_start = 0

        # (pos, lineno, col) before each advance since the last emit/ignore
        self._history: list[tuple[int, int, int]] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def start(self) -> int:
        return self._start

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    @property
    def at_eof(self) -> bool:
        return self._pos >= self._source_len

    @property
    def pending(self) -> str:
        """Text of the pending span."""
        return self._source[self._start : self._pos]

    # =========================================================================
    # Character navigation
    # =========================================================================

    def advance(self) -> str:
        """Consume and return the next character.

        Returns:
            The consumed character, or EOF ("") without moving at end of input.
        """
        if self._pos >= self._source_len:
            return EOF

        char = self._source[self._pos]
        self._history.append((self._pos, self._lineno, self._col))
        self._pos += 1

        if char == LF:
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def peek(self) -> str:
        """Return the next character without consuming it (EOF at end)."""
        if self._pos >= self._source_len:
            return EOF
        return self._source[self._pos]

    def back_up(self, n: int = 1) -> None:
        """Rewind the last n advanced characters.

        Raises:
            CursorError: Fewer than n steps were taken since the last
                emit() or ignore().
        """
        if n <= 0:
            return
        if n > len(self._history):
            raise CursorError(
                f"cannot back up {n} step(s): only {len(self._history)} "
                "recorded since the last emit or ignore"
            )
        self._pos, self._lineno, self._col = self._history[-n]
        del self._history[-n:]

    def accept_one_of(self, chars: Collection[str]) -> bool:
        """Consume the next character if it is one of chars."""
        char = self.peek()
        if char and char in chars:
            self.advance()
            return True
        return False

    def accept_run_of(self, chars: Collection[str]) -> int:
        """Consume characters while they are in chars.

        Returns:
            Number of characters consumed.
        """
        count = 0
        while self.accept_one_of(chars):
            count += 1
        return count

    def has_prefix(self, literal: str) -> bool:
        """Test the unconsumed remainder against literal without consuming."""
        return self._source.startswith(literal, self._pos)

    # =========================================================================
    # Line endings
    # =========================================================================

    def _line_ending_width_at(self, index: int) -> int:
        if self._source.startswith(CRLF, index):
            return len(CRLF)
        if not self._crlf_only and index < self._source_len and self._source[index] == LF:
            return 1
        return 0

    def line_ending_width(self) -> int:
        """Width of the line ending at the position, 0 if there is none."""
        return self._line_ending_width_at(self._pos)

    def at_line_ending(self) -> bool:
        return self._line_ending_width_at(self._pos) > 0

    def accept_line_ending(self) -> bool:
        """Consume a line ending if one starts at the position."""
        width = self.line_ending_width()
        for _ in range(width):
            self.advance()
        return width > 0

    def accept_until_line_ending(self) -> int:
        """Consume inline characters up to the next line ending or end of input.

        Returns:
            Number of characters consumed.
        """
        count = 0
        while self._pos < self._source_len and not self.at_line_ending():
            self.advance()
            count += 1
        return count

    def has_hard_break_prefix(self) -> bool:
        """Remainder starts with two or more spaces followed by a line ending."""
        index = self._pos
        while index < self._source_len and self._source[index] == SPACE:
            index += 1
        return index - self._pos >= 2 and self._line_ending_width_at(index) > 0

    def trailing_spaces(self) -> int:
        """Number of spaces at the end of the pending span."""
        pending = self.pending
        return len(pending) - len(pending.rstrip(SPACE))

    # =========================================================================
    # Span management
    # =========================================================================

    def _mark_start(self) -> None:
        self._start = self._pos
        self._start_lineno = self._lineno
        self._start_col = self._col
        self._history.clear()

    def emit(self, token_type: TokenType) -> Token:
        """Cut the pending span into a token and start a new span."""
        token = Token(
            type=token_type,
            value=self._source[self._start : self._pos],
            raw=self._source[self._raw_start : self._pos],
            _lineno=self._start_lineno,
            _col=self._start_col,
            _start_offset=self._start,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
        self._raw_start = self._pos
        self._mark_start()
        return token

    def ignore(self) -> None:
        """Drop the pending span without emitting it."""
        self._mark_start()

    def skip(self, n: int) -> None:
        """Advance n characters, then ignore them."""
        for _ in range(n):
            self.advance()
        self.ignore()

    def error(self, message: str) -> Token:
        """Build an ERROR token carrying message at the current position."""
        return Token(
            type=TokenType.ERROR,
            value=message,
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )

    # =========================================================================
    # Checkpoints
    # =========================================================================

    def checkpoint(self) -> CursorCheckpoint:
        return CursorCheckpoint(
            pos=self._pos,
            lineno=self._lineno,
            col=self._col,
            start=self._start,
            depth=len(self._history),
        )

    def rewind(self, checkpoint: CursorCheckpoint) -> None:
        """Return to checkpoint, which must lie inside the pending span.

        Raises:
            CursorError: A token was emitted or the span ignored since the
                checkpoint was taken.
        """
        if checkpoint.start != self._start or checkpoint.depth > len(self._history):
            raise CursorError("cannot rewind past an emitted or ignored span")
        self._pos = checkpoint.pos
        self._lineno = checkpoint.lineno
        self._col = checkpoint.col
        del self._history[checkpoint.depth :]
