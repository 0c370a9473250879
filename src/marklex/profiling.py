"""marklex LexAccumulator: opt-in profiling for scanning.

This module provides accumulated metrics across lex() calls:
- Total profiling time
- Source length
- Token count, overall and per token type

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from marklex import lex
    from marklex.profiling import profiled_lex

    with profiled_lex() as metrics:
        tokens = lex("# Hello\\r\\n")

    print(metrics.summary())
    # {"total_ms": 0.1, "lex_calls": 1, "source_length": 9, "token_count": 2, ...}

"""

from collections import Counter
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token as ContextToken
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from marklex.tokens import Token


@dataclass
class LexAccumulator:
    """Accumulated metrics for lex() calls.

    Attributes:
        start_time: Profiling start timestamp.
        lex_calls: Number of lex() calls recorded.
        source_length: Total length of sources scanned.
        token_count: Total number of tokens produced.
        type_counts: Tokens produced per token type name.

    """

    start_time: float = field(default_factory=perf_counter)
    lex_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    type_counts: Counter[str] = field(default_factory=Counter)

    def record_lex(self, source_length: int, tokens: Iterable[Token]) -> None:
        """Record one lex() call.

        Args:
            source_length: Length of the source string scanned.
            tokens: Tokens produced for it.

        """
        self.lex_calls += 1
        self.source_length += source_length
        for token in tokens:
            self.token_count += 1
            self.type_counts[token.type.name] += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "lex_calls": self.lex_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "type_counts": dict(self.type_counts),
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_lex() -> Iterator[LexAccumulator]:
    """Context manager for profiled scanning.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block.

    Yields:
        LexAccumulator that will be populated during lex() calls.

    """
    acc = LexAccumulator()
    token: ContextToken[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
