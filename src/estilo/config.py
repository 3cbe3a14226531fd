"""ContextVar-based parse configuration for estilo.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set by the caller (or the CLI) and read by every parser created
in that context.

Usage:
    from estilo.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(strict=True))
    try:
        stylesheet = estilo.parse(source)
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(strict=True)):
        stylesheet = estilo.parse(source)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded, it's per-call state.

    Attributes:
        strict: Make ``estilo.parse()`` raise the recorded ParseError
            instead of returning the partial stylesheet
        excerpt_width: Maximum length of the source excerpt stored on
            ParseError; longer lines are cut around the error column

    """

    strict: bool = False
    excerpt_width: int = 80

    def __post_init__(self) -> None:
        if self.excerpt_width < 1:
            raise ValueError(f"excerpt_width must be at least 1, got {self.excerpt_width}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({"strict": True, "color": "red"})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(strict=True)):
        ...     get_parse_config().strict
        True
        >>> get_parse_config().strict
        False

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
