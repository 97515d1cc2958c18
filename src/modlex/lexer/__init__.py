"""Priority-ordered lexer for the Mod stylesheet language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, build_pattern_table
├── core.py              # Lexer class (dispatch + lookahead + normalization)
├── patterns.py          # Precompiled, cached pattern tables
└── recognizers/         # Recognizer mixins, composed by Lexer
    ├── structure.py     # EOS/OUTDENT, comments, newlines
    ├── punctuation.py   # `;`, braces, spaces/tabs
    ├── literal.py       # colors, strings, units, booleans
    └── name.py          # references, selector catch-all

Usage:
    >>> from modlex.lexer import Lexer
    >>> lexer = Lexer("width 12px;")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(REF, 'width', 0:5)
Token(SPACE, 5:6)
Token(UNIT, 12.0, 6:10)
Token(SEMICOLON, 10:11)
Token(EOS, 11:11)

"""

from modlex.lexer.core import Lexer, normalize_source
from modlex.lexer.patterns import PatternTable, build_pattern_table

__all__ = ["Lexer", "PatternTable", "build_pattern_table", "normalize_source"]
