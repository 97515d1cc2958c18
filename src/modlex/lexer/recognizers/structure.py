"""End-of-stream, comment and newline recognizers."""

from __future__ import annotations

from enum import Enum

from modlex.tokens import Token, TokenType
from modlex.utils.logger import get_logger

logger = get_logger(__name__)


class Restart(Enum):
    """Marker returned by recognizers that consumed text without a token."""

    RESTART = "restart"


RESTART = Restart.RESTART


class StructureRecognizerMixin:
    """Mixin providing the recognizers that shape the stream itself.

    Comments and newlines produce no token. Their text is consumed and
    ends up in the ``raw`` span of whatever token comes next, so the
    stream still covers the whole source.
    """

    _source: str
    _source_len: int
    _pos: int
    _indent_stack: list[int]

    def _make_token(self, token_type: TokenType, value: object, start: int) -> Token:
        """Create token spanning start..cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_eos(self, start: int) -> Token | None:
        """EOS, or one trailing OUTDENT per pending indent level."""
        if self._pos < self._source_len:
            return None
        if self._indent_stack:
            self._indent_stack.pop()
            return self._make_token(TokenType.OUTDENT, None, start)
        return self._make_token(TokenType.EOS, None, start)

    def _skip_comment(self, start: int) -> Restart | None:
        """Skip a ``//`` line comment or a ``/* */`` block comment.

        Line comments stop before the newline. Unterminated block comments
        run to the end of input.
        """
        source = self._source
        pos = self._pos

        if source.startswith("//", pos):
            end = source.find("\n", pos)
            self._pos = end if end != -1 else self._source_len
            return RESTART

        if source.startswith("/*", pos):
            close = source.find("*/", pos + 2)
            if close == -1:
                logger.debug("Unterminated block comment at offset %d", pos)
                self._pos = self._source_len
            else:
                self._pos = close + 2
            return RESTART

        return None

    def _skip_newlines(self, start: int) -> Restart | None:
        """Fold a run of newlines into the next token.

        There is no NEWLINE token and indentation is not tracked, so the
        indent stack is never pushed here.
        """
        pos = self._pos
        source = self._source
        while pos < self._source_len and source[pos] == "\n":
            pos += 1
        if pos == self._pos:
            return None
        self._pos = pos
        return RESTART
