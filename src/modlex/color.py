"""Default hex color decoder.

The lexer hands the bare hex body of a color literal (no ``#``, no
whitespace) to a decoder function. This module provides a toolkit-neutral
decoder; applications targeting a UI toolkit inject their own via
``LexConfig(color_decoder=...)`` or ``Lexer(color_decoder=...)``.

Example:
    >>> color_from_hex("f80")
    Color(red=1.0, green=0.5333333333333333, blue=0.0, alpha=1.0)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from modlex.errors import ColorError

ColorDecoder = Callable[[str], Any]

HEX_LENGTHS: frozenset[int] = frozenset({3, 6, 8})
HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA color with channels in [0.0, 1.0]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def to_hex(self) -> str:
        """Render as lowercase ``rrggbb`` or ``rrggbbaa`` when not opaque."""
        channels = [self.red, self.green, self.blue]
        if self.alpha != 1.0:
            channels.append(self.alpha)
        return "".join(f"{round(c * 255):02x}" for c in channels)


def color_from_hex(hex_string: str) -> Color:
    """Decode a 3, 6 or 8 digit hex body into a Color.

    Three digits expand each nibble (``f80`` is ``ff8800``). Eight digits
    are read as ``rrggbbaa``.

    Raises:
        ColorError: If the body has the wrong length or non-hex characters.
    """
    if len(hex_string) not in HEX_LENGTHS or not set(hex_string) <= HEX_DIGITS:
        raise ColorError(hex_string)

    if len(hex_string) == 3:
        hex_string = "".join(c * 2 for c in hex_string)

    values = [int(hex_string[i : i + 2], 16) / 255 for i in range(0, len(hex_string), 2)]
    return Color(*values)
