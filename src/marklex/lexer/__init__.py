"""Modular state-machine lexer for marklex.

The lexer walks the source once, left to right. A block dispatcher picks
the scanner for each line; scanners consume their construct, emit tokens,
and name the next state.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Cursor, ScanState
├── core.py              # Lexer class (mixin composition + state dispatch)
├── cursor.py            # Cursor (position, pending span, primitives)
├── modes.py             # ScanState enum
└── scanners/            # State-specific scanners
    ├── block.py         # Block dispatcher
    ├── paragraph.py     # Paragraph lines, line breaks, setext underlines
    ├── heading.py       # ATX headers
    └── rule.py          # Horizontal rules and list items

Usage:
    >>> from marklex.lexer import Lexer
    >>> for token in Lexer("# Hello\\r\\n\\r\\nWorld").tokenize():
    ...     print(repr(token))
    Token(H1, 'Hello', 1:3)
    Token(PARAGRAPH, 'World', 3:1)
    Token(EOF, '', 3:6)

"""

from marklex.lexer.core import Lexer
from marklex.lexer.cursor import Cursor, CursorCheckpoint
from marklex.lexer.modes import ScanState

__all__ = ["Cursor", "CursorCheckpoint", "Lexer", "ScanState"]
