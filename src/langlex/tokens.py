"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    NUMBER = "number"  # digit+
    IDENTIFIER = "identifier"  # [a-z_][a-z_0-9]*
    KEYWORD = "keyword"  # identifier found in the keyword set
    OPERATOR = "operator"  # run of + - * / % = & | < > ! ?
    STRING = "string"  # "..." including both quotes


class Keyword(Enum):
    """Reserved words recognized by default."""

    PRINT = "print"
    VAR = "var"


DEFAULT_KEYWORDS = frozenset(k.value for k in Keyword)


@dataclass(frozen=True, slots=True)
class Position:
    """Source position: 1-based line, 0-based column and character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start (inclusive) to end (exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A classified run of source text."""

    kind: TokenKind
    text: str
    span: Span


_OPERATOR_CHARS = frozenset("+-*/%=&|<>!?")
_WHITESPACE = frozenset(" \t\n\r\f\v")

STRING_DELIMITER = '"'


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9" and len(ch) == 1


def is_ident_start(ch: str) -> bool:
    """Return True if ch can begin an identifier (lowercase letter or underscore)."""
    return ("a" <= ch <= "z" and len(ch) == 1) or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return is_ident_start(ch) or is_digit(ch)


def is_operator_char(ch: str) -> bool:
    return ch in _OPERATOR_CHARS


def is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE


def is_string_delimiter(ch: str) -> bool:
    return ch == STRING_DELIMITER
