"""ContextVar-based lexer configuration for modlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction; explicit
constructor arguments take precedence.

Usage:
    from modlex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(units=("px", "pt", "em"))):
        tokens = tokenize("width 2em;")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from modlex.color import ColorDecoder, color_from_hex
from modlex.errors import ConfigError

DEFAULT_UNITS: tuple[str, ...] = ("pt", "px")


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        units: Suffixes accepted after a number in UNIT tokens. Matched but
            not kept in the token value.
        color_decoder: Function turning a bare hex body into a color value

    """

    units: tuple[str, ...] = DEFAULT_UNITS
    color_decoder: ColorDecoder = field(default=color_from_hex)

    def __post_init__(self) -> None:
        units = tuple(self.units)
        for unit in units:
            if not unit or not all(c.isascii() and (c.isalpha() or c == "%") for c in unit):
                raise ConfigError(f"Invalid unit suffix: {unit!r}")
        object.__setattr__(self, "units", units)
        if not callable(self.color_decoder):
            raise ConfigError("color_decoder must be callable")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"units": ["px", "em"], "other": 1}).units
            ('px', 'em')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (context-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(units=("em",))):
        ...     lexer = Lexer("2em")
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "DEFAULT_UNITS",
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
