"""Source location tracking for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a token's value.

    All positions are 1-indexed (lineno and col_offset start at 1).
    Offsets are absolute positions in the source string.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(3, 5, source_file="docs/guide.md")
            >>> str(loc)
            'docs/guide.md:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        return self.end_offset - self.offset
