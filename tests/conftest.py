"""Shared test fixtures and helpers."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from langlex import tokenize
from langlex.tokens import DEFAULT_KEYWORDS, Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str, keywords: Iterable[str] = DEFAULT_KEYWORDS) -> list[Token]:
        return tokenize(source, keywords)

    return _lex


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def pairs(tokens: list[Token]) -> list[tuple[str, str]]:
    """Return (kind, text) tuples for compact comparisons."""
    return [(t.kind.value, t.text) for t in tokens]
