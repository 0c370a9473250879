"""Exception classes for marklex."""

from __future__ import annotations


class MarklexError(Exception):
    """Base exception for all marklex errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(MarklexError):
    """Malformed construct found while scanning.

    Only raised when ``LexConfig.raise_on_error`` is set; otherwise the
    scanner reports the problem as a terminal ERROR token.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class CursorError(MarklexError):
    """Cursor used outside its contract.

    Raised when backing up past the recorded history or rewinding past an
    emitted span. Always a scanner bug, never an input problem.
    """

    pass
