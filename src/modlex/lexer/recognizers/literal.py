"""Color, string, unit and boolean recognizers."""

from __future__ import annotations

import re

from modlex.color import ColorDecoder
from modlex.lexer.patterns import TRUE_WORDS, PatternTable
from modlex.tokens import Token, TokenType


class LiteralRecognizerMixin:
    """Mixin providing literal recognizers.

    Each literal pattern swallows trailing spaces/tabs, so the values
    below are always decoded from capture groups, never from the full
    match text.
    """

    _patterns: PatternTable
    _color_decoder: ColorDecoder

    def _make_token(self, token_type: TokenType, value: object, start: int) -> Token:
        """Create token spanning start..cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _consume_match(self, patterns: tuple[re.Pattern[str], ...]) -> re.Match[str] | None:
        """Match patterns in order at the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_color(self, start: int) -> Token | None:
        """``#rrggbbaa``, ``#rrggbb`` or ``#rgb``, longest first.

        The bare hex body goes to the injected decoder.
        """
        match = self._consume_match(self._patterns.color)
        if match is None:
            return None
        return self._make_token(TokenType.COLOR, self._color_decoder(match.group(1)), start)

    def _scan_string(self, start: int) -> Token | None:
        """Single or double quoted text. No escapes; quotes are stripped."""
        match = self._consume_match(self._patterns.string)
        if match is None:
            return None
        return self._make_token(TokenType.STRING, match.group(1)[1:-1], start)

    def _scan_unit(self, start: int) -> Token | None:
        """Signed decimal with an optional unit suffix.

        The suffix is matched so it is not lexed as a REF, but only the
        magnitude is kept.
        """
        match = self._consume_match(self._patterns.unit)
        if match is None:
            return None
        sign, number = match.group(1) or "", match.group(2)
        return self._make_token(TokenType.UNIT, float(sign + number), start)

    def _scan_boolean(self, start: int) -> Token | None:
        match = self._consume_match(self._patterns.boolean)
        if match is None:
            return None
        return self._make_token(TokenType.BOOLEAN, match.group(1) in TRUE_WORDS, start)
