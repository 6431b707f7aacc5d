"""
Unit tests for SIMILAR TO pattern translation.

Tests cover:
- Wildcards and pass-through operators
- Bracket expressions and character classes
- ESCAPE clause handling
- Error conditions
"""

import pytest

from sqlpatterns.compiler.similar import SimilarTranslator, sql_to_regex_similar
from sqlpatterns.diagnostics.errors import (
    ErrorKind,
    InvalidEscapeCharacter,
    InvalidEscapeSequence,
    InvalidRegularExpression,
)
from sqlpatterns.grammar import NO_ESCAPE


class TestSimilarBasics:
    """Test wildcard and operator translation."""

    @pytest.mark.parametrize("pattern,expected", [
        ("a_b", "a.b"),
        ("a%", "a(?s:.*)"),
        ("(ab|cd)%", "(ab|cd)(?s:.*)"),
        ("a+b*c?", "a+b*c?"),
        ("x{2,3}", "x{2,3}"),
        ("", ""),
    ])
    def test_translation(self, pattern, expected):
        """Test operators pass through and wildcards are rewritten."""
        assert sql_to_regex_similar(pattern) == expected

    @pytest.mark.parametrize("pattern,expected", [
        ("a.b", "a\\.b"),
        ("$1", "\\$1"),
        ("a\\b", "a\\\\b"),
    ])
    def test_sql_literals_escaped(self, pattern, expected):
        """Test characters literal in SQL but special in regexes."""
        assert sql_to_regex_similar(pattern) == expected

    def test_alternation_matches(self, matches):
        """Test that alternation and wildcards combine."""
        regex = sql_to_regex_similar("(ab|cd)%")

        assert matches(regex, "ab")
        assert matches(regex, "cdxyz")
        assert not matches(regex, "xab")

    def test_dot_is_literal(self, matches):
        """Test that a dot only matches a dot."""
        regex = sql_to_regex_similar("v1.0")

        assert matches(regex, "v1.0")
        assert not matches(regex, "v1x0")


class TestSimilarBrackets:
    """Test bracket expressions."""

    @pytest.mark.parametrize("pattern,expected", [
        ("[a-c]{2}", "[a-c]{2}"),
        ("[^0-9]", "[^0-9]"),
        ("[[:ALPHA:]]+", "[a-zA-Z]+"),
        ("[[:alpha:]]+", "[a-zA-Z]+"),
        ("[[:DIGIT:][:UPPER:]]", "[0-9A-Z]"),
        ("[x[:lower:]]", "[xa-z]"),
        ("[[:SPACE:]]", "[ ]"),
        ("[[:WHITESPACE:]]", "[ \\t\\n\\x0b\\f\\r]"),
        ("[[:ALNUM:]]", "[a-zA-Z0-9]"),
        ("[a\\]", "[a\\\\]"),
        ("[a.$]", "[a.$]"),
    ])
    def test_bracket_translation(self, pattern, expected):
        """Test bracket contents are rewritten."""
        assert sql_to_regex_similar(pattern) == expected

    def test_standalone_class_marker(self, matches):
        """Test [:ALPHA:] used on its own as a whole set."""
        regex = sql_to_regex_similar("[:ALPHA:]+")

        assert regex == "[a-zA-Z]+"
        assert matches(regex, "abcXYZ")
        assert not matches(regex, "ab1")
        assert not matches(regex, "")

    def test_standalone_class_with_quantifier(self):
        """Test a standalone class followed by a bound."""
        assert sql_to_regex_similar("[:DIGIT:]{3}") == "[0-9]{3}"

    def test_whitespace_class_matches(self, matches):
        """Test the whitespace class against each whitespace character."""
        regex = sql_to_regex_similar("[[:WHITESPACE:]]")

        for ch in " \t\n\x0b\f\r":
            assert matches(regex, ch)
        assert not matches(regex, "x")

    def test_class_is_ascii_only(self, matches):
        """Test that letter classes do not match non-ASCII letters."""
        regex = sql_to_regex_similar("[[:ALPHA:]]")

        assert matches(regex, "q")
        assert not matches(regex, "é")

    def test_backslash_in_brackets_is_literal(self, matches):
        """Test that a backslash inside brackets does not escape ]."""
        regex = sql_to_regex_similar("[a\\]")

        assert matches(regex, "\\")
        assert matches(regex, "a")


class TestSimilarEscape:
    """Test the ESCAPE clause."""

    @pytest.mark.parametrize("pattern,expected", [
        ("a!%", "a%"),
        ("!_", "_"),
        ("!!", "!"),
        ("![x!]", "\\[x\\]"),
        ("[!]]", "[\\]]"),
        ("[!-a]", "[\\-a]"),
        ("a!(b!)", "a\\(b\\)"),
    ])
    def test_custom_escape(self, pattern, expected):
        """Test escaped special characters inside and outside brackets."""
        assert sql_to_regex_similar(pattern, "!") == expected

    def test_escaped_percent_is_literal(self, matches):
        """Test that an escaped % matches only a percent sign."""
        regex = sql_to_regex_similar("a!%", "!")

        assert matches(regex, "a%")
        assert not matches(regex, "abc")

    def test_special_escape_character(self):
        """Test a SIMILAR special character used as escape."""
        assert sql_to_regex_similar("%%", "%") == "%"
        assert sql_to_regex_similar("%%%_", "%") == "%_"

    def test_special_escape_checked_at_every_occurrence(self):
        """Test that an escaped escape still counts as an occurrence."""
        with pytest.raises(InvalidEscapeSequence) as exc_info:
            sql_to_regex_similar("%%a", "%")

        assert exc_info.value.index == 1

    def test_regex_special_escape_character(self, matches):
        """Test an escape character that is special only in regexes."""
        regex = sql_to_regex_similar("a$$", "$")

        assert regex == "a\\$"
        assert matches(regex, "a$")

    def test_colon_escape_with_class(self):
        """Test a : escape character alongside a class marker."""
        assert sql_to_regex_similar("[[:ALPHA:]]", ":") == "[a-zA-Z]"


class TestSimilarErrors:
    """Test SIMILAR error handling."""

    def test_unterminated_bracket(self):
        """Test error on a bracket expression that never closes."""
        with pytest.raises(InvalidRegularExpression) as exc_info:
            sql_to_regex_similar("[abc")

        assert exc_info.value.index == 4
        assert exc_info.value.kind == ErrorKind.INVALID_REGULAR_EXPRESSION
        assert str(exc_info.value) == "Invalid regular expression '[abc', index 4"

    def test_unmatched_closing_bracket(self):
        """Test error on ] without a matching [."""
        with pytest.raises(InvalidRegularExpression) as exc_info:
            sql_to_regex_similar("a]")

        assert exc_info.value.index == 1

    def test_unescaped_special_in_brackets(self):
        """Test error on a SIMILAR special character inside brackets."""
        with pytest.raises(InvalidRegularExpression) as exc_info:
            sql_to_regex_similar("[a|b]")

        assert exc_info.value.index == 2

    def test_unknown_class_name(self):
        """Test error on an unknown class inside brackets."""
        with pytest.raises(InvalidRegularExpression) as exc_info:
            sql_to_regex_similar("[[:FOO:]]")

        assert exc_info.value.index == 1

    def test_mixed_case_class_name(self):
        """Test that class names must be all upper or all lower case."""
        with pytest.raises(InvalidRegularExpression):
            sql_to_regex_similar("[[:Alpha:]]")

    def test_escape_before_ordinary_character(self):
        """Test error when a plain escape precedes a plain character."""
        with pytest.raises(InvalidEscapeSequence) as exc_info:
            sql_to_regex_similar("a!b", "!")

        assert exc_info.value.index == 1

    def test_escape_at_end(self):
        """Test error on a trailing escape character."""
        with pytest.raises(InvalidEscapeSequence) as exc_info:
            sql_to_regex_similar("ab!", "!")

        assert exc_info.value.index == 2

    def test_escape_at_end_inside_brackets(self):
        """Test error on an escape character that ends an open bracket."""
        with pytest.raises(InvalidRegularExpression) as exc_info:
            sql_to_regex_similar("[a!", "!")

        assert exc_info.value.index == 3

    def test_bad_escape_inside_brackets(self):
        """Test error on an escape of a plain character inside brackets."""
        with pytest.raises(InvalidRegularExpression) as exc_info:
            sql_to_regex_similar("[a!b]", "!")

        assert exc_info.value.index == 3

    def test_colon_escape_checked_before_translation(self):
        """Test that rule 3.c fires before the bracket error would."""
        with pytest.raises(InvalidEscapeSequence) as exc_info:
            sql_to_regex_similar("[abc", ":")

        assert exc_info.value.index == -1

    def test_colon_escape_marker_out_of_order(self):
        """Test that a :] before the [: does not satisfy rule 3.c."""
        with pytest.raises(InvalidEscapeSequence) as exc_info:
            sql_to_regex_similar(":][:", ":")

        assert exc_info.value.index == -1

    def test_escape_wrong_length(self):
        """Test error on a multi-character escape string."""
        with pytest.raises(InvalidEscapeCharacter):
            sql_to_regex_similar("abc", "**")


class TestSimilarTranslator:
    """Test the translator object directly."""

    def test_enumeration_state_cleared(self):
        """Test that the bracket flag is reset after ]."""
        translator = SimilarTranslator("[ab]c", NO_ESCAPE)

        assert translator.translate() == "[ab]c"
        assert translator.inside_enumeration is False

    def test_consecutive_brackets(self):
        """Test two bracket expressions in a row."""
        assert SimilarTranslator("[ab][cd]", NO_ESCAPE).translate() == "[ab][cd]"
