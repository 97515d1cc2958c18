"""Tests for recognizer priority and per-kind decoding.

Recognizer patterns overlap at the character level; dispatch order is
what decides between them. Each case pins the token kinds produced for
an input where a lower-priority recognizer could also have matched.
"""

import pytest

from modlex.color import Color
from modlex.lexer import Lexer
from modlex.tokens import TokenType


def lex(source: str) -> list:
    return list(Lexer(source).tokenize())


def kinds(source: str) -> list[TokenType]:
    return [t.type for t in lex(source)]


class TestColorPriority:
    """Colors win over references and selector text."""

    def test_short_hex_is_color(self) -> None:
        tokens = lex("#fff")
        assert [t.type for t in tokens] == [TokenType.COLOR, TokenType.EOS]
        assert tokens[0].value == Color(1.0, 1.0, 1.0, 1.0)

    def test_eight_digits_not_split(self) -> None:
        """#rrggbbaa is tried before #rrggbb."""
        tokens = lex("#aabbccdd")
        assert [t.type for t in tokens] == [TokenType.COLOR, TokenType.EOS]
        assert tokens[0].value.alpha == pytest.approx(0xDD / 255)

    def test_six_digits(self) -> None:
        tokens = lex("#ff0000")
        assert tokens[0].value == Color(1.0, 0.0, 0.0, 1.0)

    def test_seven_digits_leaves_remainder(self) -> None:
        tokens = lex("#aabbccd")
        assert [t.type for t in tokens] == [TokenType.COLOR, TokenType.REF, TokenType.EOS]
        assert tokens[1].value == "d"

    def test_trailing_blanks_swallowed(self) -> None:
        tokens = lex("#fff \tx")
        assert tokens[0].raw == "#fff \t"
        assert tokens[1].type == TokenType.REF

    def test_invalid_hex_falls_back_to_selector(self) -> None:
        tokens = lex("#ggg")
        assert tokens[0].type == TokenType.SELECTOR
        assert tokens[0].value == "#ggg"


class TestUnitPriority:
    """Numbers with unit suffixes stay a single UNIT token."""

    def test_px_suffix(self) -> None:
        tokens = lex("12px")
        assert [t.type for t in tokens] == [TokenType.UNIT, TokenType.EOS]
        assert tokens[0].value == 12

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("12", 12.0),
            ("-1.5pt", -1.5),
            (".5", 0.5),
            ("-.25px", -0.25),
            ("3.0", 3.0),
        ],
    )
    def test_number_forms(self, source: str, expected: float) -> None:
        tokens = lex(source)
        assert tokens[0].type == TokenType.UNIT
        assert tokens[0].value == expected
        assert len(tokens) == 2

    def test_value_is_float(self) -> None:
        assert isinstance(lex("7pt")[0].value, float)

    def test_unknown_suffix_becomes_ref(self) -> None:
        assert kinds("10em") == [TokenType.UNIT, TokenType.REF, TokenType.EOS]

    def test_space_before_suffix_is_swallowed(self) -> None:
        tokens = lex("12 px")
        assert tokens[0].raw == "12 "
        assert tokens[1].type == TokenType.REF
        assert tokens[1].value == "px"

    def test_negative_name_is_ref(self) -> None:
        tokens = lex("-webkit-box")
        assert tokens[0].type == TokenType.REF
        assert tokens[0].value == "-webkit-box"


class TestBooleanPriority:
    """Booleans are whole-word and case-sensitive."""

    @pytest.mark.parametrize(
        "source,expected",
        [("true", True), ("false", False), ("YES", True), ("NO", False)],
    )
    def test_spellings(self, source: str, expected: bool) -> None:
        tokens = lex(source)
        assert [t.type for t in tokens] == [TokenType.BOOLEAN, TokenType.EOS]
        assert tokens[0].value is expected

    @pytest.mark.parametrize("source", ["trueish", "True", "yes", "NOPE", "false_"])
    def test_not_whole_word_is_ref(self, source: str) -> None:
        tokens = lex(source)
        assert [t.type for t in tokens] == [TokenType.REF, TokenType.EOS]
        assert tokens[0].value == source

    def test_trailing_blanks(self) -> None:
        tokens = lex("YES  ;")
        assert tokens[0].raw == "YES  "
        assert tokens[1].type == TokenType.SEMICOLON


class TestComments:
    """Comments never produce tokens."""

    def test_line_comment_then_ref(self) -> None:
        tokens = lex("// comment\nfoo")
        assert tokens[0].type == TokenType.REF
        assert tokens[0].value == "foo"
        assert tokens[0].raw == "// comment\nfoo"

    def test_block_comment(self) -> None:
        tokens = lex("/* a\nb */foo")
        assert [t.type for t in tokens] == [TokenType.REF, TokenType.EOS]
        assert tokens[0].value == "foo"

    def test_consecutive_comments(self) -> None:
        tokens = lex("// one\n/* two */// three\nbar")
        assert tokens[0].value == "bar"

    def test_comment_only_source(self) -> None:
        tokens = lex("// nothing here")
        assert [t.type for t in tokens] == [TokenType.EOS]
        assert tokens[0].raw == "// nothing here"

    def test_trailing_comment_after_value(self) -> None:
        assert kinds("a // c") == [TokenType.REF, TokenType.SPACE, TokenType.EOS]

    def test_many_comments_do_not_recurse(self) -> None:
        source = "// c\n" * 5000 + "x"
        tokens = lex(source)
        assert tokens[0].value == "x"


class TestSelectors:
    """SELECTOR is the catch-all, stopping at `,` newline `{` and `//`."""

    def test_stops_before_comma(self) -> None:
        tokens = lex(".a, b { c: 1 }")
        assert tokens[0].type == TokenType.SELECTOR
        assert tokens[0].value == ".a"
        assert tokens[1].type == TokenType.SELECTOR
        assert tokens[1].value == ","

    def test_ref_then_comma(self) -> None:
        tokens = lex("a, b { c: 1 }")
        assert tokens[0].type == TokenType.REF
        assert tokens[0].value == "a"
        assert tokens[1].type == TokenType.SELECTOR
        assert tokens[1].value == ","

    def test_full_rule(self) -> None:
        assert kinds("a, b { c: 1 }") == [
            TokenType.REF,
            TokenType.SELECTOR,  # ,
            TokenType.SPACE,
            TokenType.REF,  # b
            TokenType.SPACE,
            TokenType.BRACE,
            TokenType.SPACE,
            TokenType.REF,  # c
            TokenType.SELECTOR,  # ": 1 }"
            TokenType.EOS,
        ]

    def test_stops_before_brace(self) -> None:
        tokens = lex("> p{")
        assert tokens[0].value == "> p"
        assert tokens[1].type == TokenType.BRACE

    def test_stops_before_comment(self) -> None:
        tokens = lex("> p // note")
        assert tokens[0].value == "> p "
        assert tokens[1].type == TokenType.EOS

    def test_double_slash_inside_brackets(self) -> None:
        tokens = lex("a[href=//x] b")
        assert tokens[1].type == TokenType.SELECTOR
        assert tokens[1].value == "[href=//x] b"

    def test_runs_to_end_of_input(self) -> None:
        tokens = lex("%")
        assert tokens[0].type == TokenType.SELECTOR
        assert tokens[0].value == "%"


class TestOtherKinds:
    """Strings, references, punctuation and whitespace."""

    @pytest.mark.parametrize(
        "source,expected",
        [('"hello"', "hello"), ("'a b'", "a b"), ('""', ""), ("'say \"hi\"'", 'say "hi"')],
    )
    def test_strings(self, source: str, expected: str) -> None:
        tokens = lex(source)
        assert tokens[0].type == TokenType.STRING
        assert tokens[0].value == expected

    def test_string_trailing_blanks(self) -> None:
        tokens = lex("'a b' x")
        assert tokens[0].raw == "'a b' "
        assert tokens[1].value == "x"

    @pytest.mark.parametrize("source", ["@primary", "$var", "_x1", "font-size", "@-x"])
    def test_refs(self, source: str) -> None:
        tokens = lex(source)
        assert [t.type for t in tokens] == [TokenType.REF, TokenType.EOS]
        assert tokens[0].value == source

    def test_separator_swallows_blanks(self) -> None:
        tokens = lex("; ;")
        assert [t.type for t in tokens] == [TokenType.SEMICOLON, TokenType.SEMICOLON, TokenType.EOS]
        assert tokens[0].raw == "; "
        assert tokens[0].value is None

    def test_braces(self) -> None:
        tokens = lex("{}")
        assert [t.value for t in tokens] == ["{", "}", None]

    def test_space_token_kept(self) -> None:
        tokens = lex("a\t b")
        assert tokens[1].type == TokenType.SPACE
        assert tokens[1].raw == "\t "
        assert tokens[1].value is None

    def test_newlines_fold_into_next_token(self) -> None:
        tokens = lex("a\n\nb")
        assert [t.type for t in tokens] == [TokenType.REF, TokenType.REF, TokenType.EOS]
        assert tokens[1].raw == "\n\nb"

    def test_declaration(self) -> None:
        tokens = lex("UIButton {\n  background-color #ff0000;\n}\n")
        assert [t.type for t in tokens] == [
            TokenType.REF,
            TokenType.SPACE,
            TokenType.BRACE,
            TokenType.SPACE,
            TokenType.REF,
            TokenType.SPACE,
            TokenType.COLOR,
            TokenType.SEMICOLON,
            TokenType.BRACE,
            TokenType.EOS,
        ]
