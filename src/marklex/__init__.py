"""
marklex: Streaming block-level Markdown scanner

Turns markdown source into an ordered stream of typed tokens: paragraphs,
ATX and setext headers, horizontal rules, unordered list items, and soft
and hard line breaks. Building a tree from the stream and rendering it are
left to the consumer.

Quick Start:
    >>> from marklex import lex
    >>> for token in lex("# Title\\r\\n- item\\r\\n"):
    ...     print(token)
    Header H1: 'Title'
    UL Item: item
    EOF

    >>> # Lazily, one token at a time
    >>> from marklex import tokenize
    >>> next(tokenize("---\\r\\n")).type
    <TokenType.HORIZONTAL_RULE: 14>

Every token carries ``raw``, the source text it accounts for, so
``"".join(t.raw for t in tokens) == source`` for any error-free stream.
"""

from collections.abc import Iterable, Iterator

from marklex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from marklex.errors import CursorError, MarklexError, ScanError
from marklex.lexer import Cursor, Lexer, ScanState
from marklex.location import SourceLocation
from marklex.profiling import LexAccumulator, get_lex_accumulator, profiled_lex
from marklex.stream import TokenStream
from marklex.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> Iterator[Token]:
    """Scan source lazily.

    Args:
        source: Markdown source text
        source_file: Optional source file path for error messages
        config: Scan configuration (defaults to the context's config)

    Returns:
        Iterator over tokens, ending with EOF or ERROR
    """
    return Lexer(source, source_file=source_file, config=config).tokenize()


def lex(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Scan source into a list of tokens.

    Records metrics into the active profiled_lex() accumulator, if any.

    Example:
        >>> [t.value for t in lex("line one\\r\\nline two\\r\\n")]
        ['line one', '\\r\\n', 'line two', '\\r\\n', '']
    """
    tokens = list(tokenize(source, source_file=source_file, config=config))

    acc = get_lex_accumulator()
    if acc is not None:
        acc.record_lex(len(source), tokens)

    return tokens


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens one per line in their diagnostic form."""
    return "\n".join(str(token) for token in tokens)


__all__ = [
    "Cursor",
    "CursorError",
    "LexAccumulator",
    "LexConfig",
    "Lexer",
    "MarklexError",
    "ScanError",
    "ScanState",
    "SourceLocation",
    "Token",
    "TokenStream",
    "TokenType",
    "__version__",
    "format_tokens",
    "get_lex_accumulator",
    "get_lex_config",
    "lex",
    "lex_config_context",
    "profiled_lex",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
]
