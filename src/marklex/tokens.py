"""Token and TokenType definitions for the marklex scanner.

The scanner produces a stream of Token objects that a consumer drains in
source order. Each Token has a type, a value, the raw source slice it
accounts for, and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marklex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the scanner.

    Organized by category:
    - Stream structure (EOF, ERROR)
    - Paragraph text and line breaks
    - Headings (ATX levels and setext underlines)
    - Other blocks (rules, list items)
    - Declared constructs no scanning routine produces yet

    """

    # Stream structure
    EOF = auto()
    ERROR = auto()

    # Paragraph text
    PARAGRAPH = auto()  # First line of a paragraph
    PARAGRAPH_CONTINUATION = auto()  # Following lines of the same paragraph

    # Line breaks
    SOFT_BREAK = auto()  # Plain line ending
    HARD_BREAK = auto()  # Two or more spaces before a line ending

    # Headings
    H1 = auto()
    H2 = auto()
    H3 = auto()
    H4 = auto()
    H5 = auto()
    H6 = auto()
    SETEXT_UNDERLINE = auto()  # === or --- under a paragraph line

    # Other blocks
    HORIZONTAL_RULE = auto()  # ---, ***, - - -
    LIST_ITEM = auto()  # - item, + item, * item

    # Declared, not produced
    BLOCK_QUOTE = auto()
    ORDERED_LIST_ITEM = auto()
    CODE = auto()


HEADING_TYPES: tuple[TokenType, ...] = (
    TokenType.H1,
    TokenType.H2,
    TokenType.H3,
    TokenType.H4,
    TokenType.H5,
    TokenType.H6,
)

TEXT_TYPES = frozenset({TokenType.PARAGRAPH, TokenType.PARAGRAPH_CONTINUATION})
BREAK_TYPES = frozenset({TokenType.SOFT_BREAK, TokenType.HARD_BREAK})
TERMINAL_TYPES = frozenset({TokenType.EOF, TokenType.ERROR})


def heading_type(level: int) -> TokenType:
    """Map a heading level (1-6) to its token type."""
    if not 1 <= level <= 6:
        raise ValueError(f"heading level must be between 1 and 6, got {level}")
    return HEADING_TYPES[level - 1]


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        value: The construct's content, e.g. ``"Title"`` for ``"# Title"``.
            For ERROR tokens this is the error message.
        raw: Every source character consumed since the previous token,
            including markers and line endings that were not part of value.
            Joining ``raw`` over a stream reproduces the source.
        _lineno: Line number where value starts (1-indexed)
        _col: Column where value starts (1-indexed)
        _start_offset: Absolute start position of value in source
        _end_offset: Absolute end position of value in source
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    raw: str = ""
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from marklex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def heading_level(self) -> int | None:
        """Heading level for H1-H6 and setext underlines, None otherwise."""
        if self.type in HEADING_TYPES:
            return HEADING_TYPES.index(self.type) + 1
        if self.type == TokenType.SETEXT_UNDERLINE:
            return 1 if self.value.startswith("=") else 2
        return None

    @property
    def is_terminal(self) -> bool:
        return self.type in TERMINAL_TYPES

    @property
    def is_break(self) -> bool:
        return self.type in BREAK_TYPES

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    def __str__(self) -> str:
        """Human-readable rendering for diagnostics."""
        match self.type:
            case TokenType.EOF:
                return "EOF"
            case TokenType.ERROR:
                return self.value
            case TokenType.HARD_BREAK:
                return "Hard return"
            case TokenType.SOFT_BREAK:
                return "Soft return"
            case TokenType.PARAGRAPH | TokenType.PARAGRAPH_CONTINUATION:
                return f"Text: {self.value!r}"
            case TokenType.LIST_ITEM:
                return f"UL Item: {self.value}"
            case TokenType.HORIZONTAL_RULE:
                return f"Rule: {self.value!r}"
            case TokenType.SETEXT_UNDERLINE:
                return f"Setext H{self.heading_level}: {self.value!r}"
        if self.type in HEADING_TYPES:
            return f"Header H{self.heading_level}: {self.value!r}"
        return f"{self.type.name}: {self.value!r}"
