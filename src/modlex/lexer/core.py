"""Pull-based lexer for the Mod stylesheet language.

The parser drives the lexer through peek_token()/next_token(). Each
call that needs a fresh token runs the recognizers in a fixed priority
order at the cursor; the first one that matches consumes its span and
wins.

The source is never copied or mutated after normalization. Consuming
text only advances the cursor, so lexing stays linear in the input.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All mutable state is instance-local; pattern tables are immutable
and shared.

"""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Callable, Iterator
from typing import NoReturn

from modlex.color import ColorDecoder
from modlex.config import LexConfig, get_lex_config
from modlex.errors import LexError
from modlex.lexer.patterns import PatternTable, build_pattern_table
from modlex.lexer.recognizers import (
    RESTART,
    LiteralRecognizerMixin,
    NameRecognizerMixin,
    PunctuationRecognizerMixin,
    Restart,
    StructureRecognizerMixin,
)
from modlex.tokens import Token, TokenType
from modlex.utils.logger import get_logger

logger = get_logger(__name__)

_LINE_ENDINGS = re.compile(r"\r\n?")


def normalize_source(source: str) -> str:
    """Collapse line endings to ``\\n`` and trailing whitespace to one ``\\n``."""
    source = _LINE_ENDINGS.sub("\n", source)
    stripped = source.rstrip()
    if len(stripped) != len(source):
        return stripped + "\n"
    return source


class Lexer(
    StructureRecognizerMixin,
    PunctuationRecognizerMixin,
    LiteralRecognizerMixin,
    NameRecognizerMixin,
):
    """Priority-ordered lexer with multi-token lookahead.

    Usage:
            >>> lexer = Lexer("button { color #fff; }")
            >>> lexer.peek_token(2)
            Token(SPACE, 6:7)
            >>> lexer.next_token()
            Token(REF, 'button', 0:6)

    Once the input is exhausted every further next_token() returns EOS
    (after one OUTDENT per pending indent level).

    """

    # Dispatch order is the disambiguation rule. Specific forms come
    # before the SELECTOR catch-all, which must stay last.
    RECOGNIZERS: tuple[str, ...] = (
        "_scan_eos",
        "_scan_separator",
        "_skip_comment",
        "_skip_newlines",
        "_scan_brace",
        "_scan_color",
        "_scan_string",
        "_scan_unit",
        "_scan_boolean",
        "_scan_ref",
        "_scan_space",
        "_scan_selector",
    )

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_source_file",
        "_lookahead",  # Produced but not yet consumed tokens (FIFO)
        "_indent_stack",
        "_previous",
        "_patterns",
        "_color_decoder",
        "_recognizers",
    )

    def __init__(
        self,
        source: str,
        *,
        source_file: str | None = None,
        color_decoder: ColorDecoder | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Stylesheet source text
            source_file: Optional source file path for error messages
            color_decoder: Overrides the configured hex color decoder
            config: Overrides the context-local LexConfig
        """
        if config is None:
            config = get_lex_config()

        self._source = normalize_source(source)
        self._source_len = len(self._source)
        self._pos = 0
        self._source_file = source_file
        self._lookahead: deque[Token] = deque()
        # Popped at end of input only; nothing pushes indentation yet
        self._indent_stack: list[int] = []
        self._previous: Token | None = None
        self._patterns: PatternTable = build_pattern_table(config.units)
        self._color_decoder: ColorDecoder = color_decoder or config.color_decoder
        self._recognizers: tuple[Callable[[int], Token | Restart | None], ...] = tuple(
            getattr(self, name) for name in self.RECOGNIZERS
        )

    @property
    def source(self) -> str:
        """Normalized source text."""
        return self._source

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def previous(self) -> Token | None:
        """Last token returned by next_token()."""
        return self._previous

    @property
    def at_end(self) -> bool:
        """True when all input is consumed and only EOS tokens are waiting."""
        if self._pos < self._source_len:
            return False
        return all(token.type == TokenType.EOS for token in self._lookahead)

    def peek_token(self, n: int = 1) -> Token:
        """Return the n-th upcoming token (1-based) without consuming it.

        Raises:
            ValueError: If n < 1
            LexError: If no recognizer matches the remaining input
        """
        if n < 1:
            raise ValueError("n must be >= 1")
        while len(self._lookahead) < n:
            self._lookahead.append(self._advance_token())
        return self._lookahead[n - 1]

    def next_token(self) -> Token:
        """Consume and return the next token; EOS forever once exhausted."""
        if self._lookahead:
            token = self._lookahead.popleft()
        else:
            token = self._advance_token()
        self._previous = token
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOS.

        Yields:
            Token objects one at a time
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOS:
                return

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _advance_token(self) -> Token:
        """Produce one token from the cursor.

        Comments and newlines restart dispatch from the top; they always
        consume at least one character, so the loop terminates.
        """
        start = self._pos
        while True:
            for recognize in self._recognizers:
                result = recognize(start)
                if result is RESTART:
                    break
                if result is not None:
                    return result
            else:
                self._fail()

    def _fail(self) -> NoReturn:
        snippet = self._source[self._pos : self._pos + 20]
        logger.error(
            "No recognizer matched at offset %d in %s",
            self._pos,
            self._source_file or "<string>",
        )
        raise LexError(
            "Could not lex token",
            offset=self._pos,
            source_file=self._source_file,
            snippet=snippet,
        )

    # =========================================================================
    # Helpers shared with recognizer mixins
    # =========================================================================

    def _consume_match(self, patterns: tuple[re.Pattern[str], ...]) -> re.Match[str] | None:
        """Try patterns in order at the cursor; consume the first match."""
        for pattern in patterns:
            match = pattern.match(self._source, self._pos)
            if match is not None:
                self._pos = match.end()
                return match
        return None

    def _make_token(self, token_type: TokenType, value: object, start: int) -> Token:
        """Create a token whose raw span runs from start to the cursor."""
        return Token(
            type=token_type,
            value=value,
            raw=self._source[start : self._pos],
            start=start,
            end=self._pos,
        )
