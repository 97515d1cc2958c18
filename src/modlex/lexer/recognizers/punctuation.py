"""Separator, brace and whitespace recognizers."""

from __future__ import annotations

import re

from modlex.lexer.patterns import PatternTable
from modlex.tokens import Token, TokenType


class PunctuationRecognizerMixin:
    """Mixin providing single-purpose punctuation recognizers."""

    _patterns: PatternTable

    def _make_token(self, token_type: TokenType, value: object, start: int) -> Token:
        """Create token spanning start..cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _consume_match(self, patterns: tuple[re.Pattern[str], ...]) -> re.Match[str] | None:
        """Match patterns in order at the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_separator(self, start: int) -> Token | None:
        """``;`` plus trailing blanks."""
        if self._consume_match(self._patterns.semicolon) is None:
            return None
        return self._make_token(TokenType.SEMICOLON, None, start)

    def _scan_brace(self, start: int) -> Token | None:
        match = self._consume_match(self._patterns.brace)
        if match is None:
            return None
        return self._make_token(TokenType.BRACE, match.group(1), start)

    def _scan_space(self, start: int) -> Token | None:
        """Spaces and tabs are kept so the parser can see adjacency."""
        if self._consume_match(self._patterns.space) is None:
            return None
        return self._make_token(TokenType.SPACE, None, start)
