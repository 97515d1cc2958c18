"""Token and TokenType definitions for the modlex lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, an optional decoded value, and the raw source span
that was consumed to produce it.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Structure (EOS, OUTDENT) - synthesized, no literal text of their own
    - Punctuation (SEMICOLON, BRACE, SPACE)
    - Literals (COLOR, STRING, UNIT, BOOLEAN)
    - Names (REF, SELECTOR)

    """

    # Structure
    EOS = auto()
    OUTDENT = auto()

    # Punctuation
    SEMICOLON = auto()  # ; (plus trailing blanks)
    BRACE = auto()  # { or }
    SPACE = auto()  # run of spaces/tabs

    # Literals
    COLOR = auto()  # #rgb, #rrggbb, #rrggbbaa
    STRING = auto()  # "..." or '...'
    UNIT = auto()  # 12, -1.5, .5pt, 10px
    BOOLEAN = auto()  # true | false | YES | NO

    # Names
    REF = auto()  # @var, -webkit-thing, $name
    SELECTOR = auto()  # catch-all selector text


# Token types that never carry a decoded value
VALUELESS_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.EOS,
        TokenType.OUTDENT,
        TokenType.SEMICOLON,
        TokenType.SPACE,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Decoded payload (str, bool, float or a decoded color);
            None for structural and punctuation-only tokens
        raw: Exact source text consumed to produce this token, including
            comments and newlines skipped before it and trailing blanks
            swallowed by its pattern
        start: Offset of ``raw`` in the normalized source
        end: Offset one past the end of ``raw``

    """

    type: TokenType
    value: Any = None
    raw: str = ""
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.value is None:
            return f"Token({self.type.name}, {self.start}:{self.end})"
        val = self.value
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.start}:{self.end})"

    @property
    def is_structural(self) -> bool:
        """True for synthesized tokens (end of stream, outdent)."""
        return self.type in (TokenType.EOS, TokenType.OUTDENT)
