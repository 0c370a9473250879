"""State-specific scanners for the marklex lexer.

Each scanner is a mixin that provides the scanning routine for one or
more lexer states (BLOCK, PARAGRAPH/CONTINUATION/SETEXT_HEADER,
ATX_HEADER, RULE_OR_LIST).
"""

from __future__ import annotations

from marklex.lexer.scanners.block import BlockScannerMixin
from marklex.lexer.scanners.heading import HeadingScannerMixin
from marklex.lexer.scanners.paragraph import ParagraphScannerMixin
from marklex.lexer.scanners.rule import RuleScannerMixin

__all__ = [
    "BlockScannerMixin",
    "HeadingScannerMixin",
    "ParagraphScannerMixin",
    "RuleScannerMixin",
]
