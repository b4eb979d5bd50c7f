"""Test character classification predicates and the keyword table."""

from langlex.stream import END
from langlex.tokens import (
    DEFAULT_KEYWORDS,
    Keyword,
    is_digit,
    is_ident_char,
    is_ident_start,
    is_operator_char,
    is_string_delimiter,
    is_whitespace,
)


class TestIsDigit:
    def test_digits(self):
        for ch in "0123456789":
            assert is_digit(ch)

    def test_non_digits(self):
        for ch in "a_+ \"":
            assert not is_digit(ch), f"Expected '{ch}' to NOT be a digit"

    def test_unicode_digit_rejected(self):
        assert not is_digit("٣")  # ARABIC-INDIC DIGIT THREE


class TestIdentifierChars:
    def test_lowercase_and_underscore_start(self):
        for ch in "az_m":
            assert is_ident_start(ch)

    def test_uppercase_not_start(self):
        assert not is_ident_start("A")
        assert not is_ident_start("Z")

    def test_digit_continues_but_does_not_start(self):
        assert not is_ident_start("7")
        assert is_ident_char("7")

    def test_letters_continue(self):
        assert is_ident_char("q")
        assert is_ident_char("_")


class TestOperatorChars:
    def test_operator_set(self):
        for ch in "+-*/%=&|<>!?":
            assert is_operator_char(ch), f"Expected '{ch}' to be an operator char"

    def test_non_operators(self):
        for ch in "()[]{};,.#^~":
            assert not is_operator_char(ch), f"Expected '{ch}' to NOT be an operator char"


class TestWhitespaceAndDelimiter:
    def test_whitespace(self):
        for ch in " \t\n\r\f\v":
            assert is_whitespace(ch)

    def test_not_whitespace(self):
        assert not is_whitespace("a")

    def test_delimiter(self):
        assert is_string_delimiter('"')
        assert not is_string_delimiter("'")


class TestEndMarker:
    def test_end_matches_nothing(self):
        for predicate in (
            is_digit,
            is_ident_start,
            is_ident_char,
            is_operator_char,
            is_whitespace,
            is_string_delimiter,
        ):
            assert not predicate(END), predicate.__name__


class TestKeywords:
    def test_default_set(self):
        assert DEFAULT_KEYWORDS == {"print", "var"}

    def test_enum_values(self):
        assert Keyword.VAR.value == "var"
        assert Keyword.PRINT.value == "print"
