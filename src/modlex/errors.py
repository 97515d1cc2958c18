"""Exception classes for modlex.

Provides standardized exceptions for error handling throughout modlex.
"""

from __future__ import annotations


class ModlexError(Exception):
    """Base exception for all modlex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(ModlexError):
    """No recognizer could produce a token from the remaining input.

    The lexer's fallback recognizer accepts any character, so this signals
    a defect in recognizer ordering rather than bad input. It is never
    recovered from: skipping text would break the correspondence between
    the token stream and the source.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_file: str | None = None,
        snippet: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            offset: Offset into the normalized source where lexing stopped
            source_file: Path to source file (optional)
            snippet: Start of the unconsumed input (optional)
        """
        self.message = message
        self.offset = offset
        self.source_file = source_file
        self.snippet = snippet

        location = ""
        if source_file:
            location = f"{source_file}:"
        if offset is not None:
            location += f"{offset}:"
        if location:
            location = location.rstrip(":") + " "

        text = f"{location}{message}"
        if snippet is not None:
            text += f" near {snippet!r}"
        super().__init__(text)


class ColorError(ModlexError):
    """Invalid hex body passed to the color decoder."""

    def __init__(self, hex_string: str, message: str = "invalid hex color") -> None:
        self.hex_string = hex_string
        super().__init__(f"{message}: {hex_string!r}")


class ConfigError(ModlexError):
    """Invalid lexer configuration.

    Raised when a LexConfig is built with values the pattern table
    cannot use (e.g. an empty unit suffix).
    """

    pass
