"""Reference and selector recognizers."""

from __future__ import annotations

import re

from modlex.lexer.patterns import PatternTable
from modlex.tokens import Token, TokenType


class NameRecognizerMixin:
    """Mixin providing identifier-like recognizers.

    The selector recognizer is the catch-all and must be tried last.
    """

    _source: str
    _pos: int
    _patterns: PatternTable

    def _make_token(self, token_type: TokenType, value: object, start: int) -> Token:
        """Create token spanning start..cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _consume_match(self, patterns: tuple[re.Pattern[str], ...]) -> re.Match[str] | None:
        """Match patterns in order at the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_ref(self, start: int) -> Token | None:
        """``@name``, ``-vendor-name``, ``$var``; value keeps the ``@``."""
        match = self._consume_match(self._patterns.ref)
        if match is None:
            return None
        return self._make_token(TokenType.REF, match.group(0), start)

    def _scan_selector(self, start: int) -> Token | None:
        """Free text up to ``,`` newline ``{`` or an unbracketed ``//``.

        When the cursor already sits on a stop character the single
        character is taken instead, so every call makes progress.
        """
        pos = self._pos
        if pos >= len(self._source):
            return None
        match = self._consume_match(self._patterns.selector)
        if match is None or match.end() == pos:
            self._pos = pos + 1
            return self._make_token(TokenType.SELECTOR, self._source[pos], start)
        return self._make_token(TokenType.SELECTOR, match.group(0), start)
