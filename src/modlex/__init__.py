"""
modlex — lexer for the Mod stylesheet language

Turns CSS-like Mod source into an ordered stream of typed tokens for a
downstream parser, with multi-token lookahead.

Quick Start:
    >>> from modlex import tokenize
    >>> [t.type.name for t in tokenize("#fff")]
    ['COLOR', 'EOS']

    >>> # Pull tokens one at a time
    >>> from modlex import Lexer
    >>> lexer = Lexer("label { font-size 12pt; }")
    >>> lexer.peek_token().value
    'label'
"""

from modlex.color import Color, ColorDecoder, color_from_hex
from modlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from modlex.errors import ColorError, ConfigError, LexError, ModlexError
from modlex.lexer import Lexer
from modlex.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    color_decoder: ColorDecoder | None = None,
) -> list[Token]:
    """Lex source into a list of tokens ending with EOS.

    Args:
        source: Stylesheet source text
        source_file: Optional source file path for error messages
        color_decoder: Overrides the configured hex color decoder

    Returns:
        All tokens, the last one being EOS.
    """
    lexer = Lexer(source, source_file=source_file, color_decoder=color_decoder)
    return list(lexer.tokenize())


__all__ = [
    "Color",
    "ColorDecoder",
    "ColorError",
    "ConfigError",
    "LexConfig",
    "LexError",
    "Lexer",
    "ModlexError",
    "Token",
    "TokenType",
    "__version__",
    "color_from_hex",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
]
