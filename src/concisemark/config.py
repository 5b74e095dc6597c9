"""ContextVar-based parse configuration for ConciseMark.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is installed for the duration of one parse and read by the lexer,
the inline matchers and the block parser without being threaded through
every call.

Usage:
    from concisemark.config import ParseConfig, parse_config_context
    from concisemark.parser import Parser

    with parse_config_context(ParseConfig(strict=True)):
        root = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Extension tags accepted by the @tag[attrs]{value} syntax
DEFAULT_MARK_TAGS: frozenset[str] = frozenset(
    {"math", "sym", "plot", "img", "video", "emoji", "a", "char", "kbd"}
)


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        mark_tags: Extension names recognized by the mark matcher. Marks
            with any other tag degrade to literal text.
        front_matter: Extract a leading ``<!--- ... -->`` TOML block.
        strict: Raise ``ParseError`` instead of recording a diagnostic when
            the block tokenizer has to drop unconsumed input.

    """

    mark_tags: frozenset[str] = DEFAULT_MARK_TAGS
    front_matter: bool = True
    strict: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Unknown keys are silently ignored. ``mark_tags`` may be given as any
        iterable of names.

        Example:
            >>> config = ParseConfig.from_dict({"strict": True, "colour": "red"})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "mark_tags" in filtered:
            filtered["mark_tags"] = frozenset(filtered["mark_tags"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "concisemark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the parse configuration active in the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration (module-level singleton)."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(front_matter=False)):
        ...     get_parse_config().front_matter
        False
        >>> get_parse_config().front_matter
        True

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_MARK_TAGS",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
