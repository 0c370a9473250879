"""Scanner states.

The lexer is a finite state machine. Each state names the scanning
routine to run next; scanners set the following state before returning
control to the dispatch loop in Lexer.tokenize().
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Lexer scanning states.

    - BLOCK: At a line start, choosing the next construct
    - PARAGRAPH: Scanning the first line of a paragraph
    - CONTINUATION: Scanning a following line of an open paragraph
    - SETEXT_HEADER: Validating a setext underline under paragraph text
    - ATX_HEADER: Scanning a "#" heading line
    - RULE_OR_LIST: Disambiguating a "-", "+" or "*" line
    - DONE: Terminal; no further tokens

    """

    BLOCK = auto()
    PARAGRAPH = auto()
    CONTINUATION = auto()
    SETEXT_HEADER = auto()
    ATX_HEADER = auto()
    RULE_OR_LIST = auto()
    DONE = auto()
