"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

The empty string (the cursor's end-of-input marker) is never a member.
"""

CR = "\r"
LF = "\n"
CRLF = CR + LF

SPACE = " "
SPACES: frozenset[str] = frozenset(SPACE)

# Block-level markers
ATX_MARKER = "#"
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-+*")
HORIZONTAL_RULE_CHARS: frozenset[str] = frozenset("-*")
SETEXT_MARKERS: frozenset[str] = frozenset("=-")

# Markers that end a paragraph when they open the next line.
# "-" is absent: after paragraph text it is a setext candidate first.
PARAGRAPH_INTERRUPT_CHARS: frozenset[str] = frozenset("#+*")

# Two or more spaces before a line ending
HARD_BREAK_MIN_SPACES = 2

# Rules need at least this many marker characters
HORIZONTAL_RULE_MIN_COUNT = 3

MAX_HEADING_LEVEL = 6


def is_word_char(char: str) -> bool:
    """Letters, digits, and underscore open a paragraph at block level."""
    return char == "_" or char.isalnum()
