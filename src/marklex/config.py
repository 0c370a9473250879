"""ContextVar-based scan configuration for marklex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the current config once, at construction, unless one is
passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. New threads start from the
    default config, so code that hands work to a thread must pass the
    config along (see marklex.stream.TokenStream).

Usage:
    from marklex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(crlf_only=True)):
        tokens = list(Lexer(source).tokenize())

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable scan configuration.

    Attributes:
        crlf_only: Only "\\r\\n" ends a line. When False (default), a bare
            "\\n" also ends a line.
        clamp_heading_level: Treat runs of seven or more "#" as level 6.
            When False, such a run ends the scan with an ERROR token.
        require_line_endings: A heading line at end of input without a line
            ending ends the scan with an ERROR token.
        raise_on_error: Raise ScanError instead of yielding the ERROR token.

    """

    crlf_only: bool = False
    clamp_heading_level: bool = True
    require_line_endings: bool = False
    raise_on_error: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"crlf_only": True, "other": 1})
            >>> config.crlf_only
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current scan configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set scan configuration for current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> from marklex import lex
        >>> with lex_config_context(LexConfig(clamp_heading_level=False)):
        ...     tokens = lex("####### too deep\\r\\n")
        >>> tokens[-1].type
        <TokenType.ERROR: 2>

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
