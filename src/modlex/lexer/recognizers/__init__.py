"""Token recognizers for the modlex lexer.

Each recognizer is a mixin method that looks at the source at the
cursor and either consumes a match and returns a Token, declines with
None, or (for comments and newlines) consumes text and returns RESTART
so dispatch starts over on the shorter buffer.
"""

from modlex.lexer.recognizers.literal import LiteralRecognizerMixin
from modlex.lexer.recognizers.name import NameRecognizerMixin
from modlex.lexer.recognizers.punctuation import PunctuationRecognizerMixin
from modlex.lexer.recognizers.structure import (
    RESTART,
    Restart,
    StructureRecognizerMixin,
)

__all__ = [
    "RESTART",
    "LiteralRecognizerMixin",
    "NameRecognizerMixin",
    "PunctuationRecognizerMixin",
    "Restart",
    "StructureRecognizerMixin",
]
