"""Precompiled pattern table for the modlex lexer.

Every token kind that is recognized by a regular expression gets an
ordered tuple of compiled patterns. Order inside a tuple is priority:
the first pattern that matches at the cursor wins (colors are listed
longest first so ``#aabbccdd`` is never read as ``#aabbcc`` + ``dd``).

Patterns carry no ``^`` anchor. Recognizers call ``pattern.match(source,
pos)``, which anchors at ``pos`` without slicing the source.

Tables are built once per unit-suffix set and cached; they are immutable
and safe to share between lexers and threads.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from modlex.config import DEFAULT_UNITS
from modlex.utils.logger import get_logger

logger = get_logger(__name__)

# Trailing horizontal whitespace swallowed by most literal patterns
_BLANKS = r"[ \t]*"

# Spellings accepted by the BOOLEAN recognizer (case-sensitive)
TRUE_WORDS: frozenset[str] = frozenset({"true", "YES"})
FALSE_WORDS: frozenset[str] = frozenset({"false", "NO"})


@dataclass(frozen=True, slots=True)
class PatternTable:
    """Per-kind ordered patterns, in recognizer priority order."""

    semicolon: tuple[re.Pattern[str], ...]
    brace: tuple[re.Pattern[str], ...]
    color: tuple[re.Pattern[str], ...]
    string: tuple[re.Pattern[str], ...]
    unit: tuple[re.Pattern[str], ...]
    boolean: tuple[re.Pattern[str], ...]
    ref: tuple[re.Pattern[str], ...]
    space: tuple[re.Pattern[str], ...]
    selector: tuple[re.Pattern[str], ...]
    units: tuple[str, ...] = DEFAULT_UNITS


@lru_cache(maxsize=32)
def build_pattern_table(units: tuple[str, ...] = DEFAULT_UNITS) -> PatternTable:
    """Compile the pattern table for a set of unit suffixes.

    Args:
        units: Accepted unit suffixes. Tried longest first so a suffix
            that prefixes another (``p`` / ``px``) cannot shadow it.

    Returns:
        Cached PatternTable for this unit set.
    """
    ordered = sorted(units, key=len, reverse=True)
    unit_alt = "|".join(re.escape(u) for u in ordered)
    unit_group = f"({unit_alt})?" if unit_alt else "()?"
    booleans = "|".join(sorted(TRUE_WORDS | FALSE_WORDS))

    logger.debug("Building pattern table for units %s", units)

    return PatternTable(
        semicolon=(re.compile(r";" + _BLANKS),),
        brace=(re.compile(r"([{}])"),),
        color=(
            re.compile(r"#([a-fA-F0-9]{8})" + _BLANKS),
            re.compile(r"#([a-fA-F0-9]{6})" + _BLANKS),
            re.compile(r"#([a-fA-F0-9]{3})" + _BLANKS),
        ),
        string=(re.compile(r"(\"[^\"]*\"|'[^']*')" + _BLANKS),),
        unit=(re.compile(r"(-)?(\d+\.\d+|\d+|\.\d+)" + unit_group + _BLANKS),),
        boolean=(re.compile(rf"({booleans})\b" + _BLANKS),),
        ref=(re.compile(r"(@)?(-*[_a-zA-Z$][-\w$]*)"),),
        space=(re.compile(r"[ \t]+"),),
        # Anything up to `,` newline `{` or a `//` that is not inside [...]
        selector=(re.compile(r".*?(?=//(?![^\[]*\])|[,\n{]|\Z)"),),
        units=tuple(units),
    )
