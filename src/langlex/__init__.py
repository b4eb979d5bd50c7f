"""Lexical analyzer for a small imperative language."""

from __future__ import annotations

from collections.abc import Iterable

from langlex.tokens import DEFAULT_KEYWORDS, Token

__version__ = "0.1.0"


def tokenize(source: str, keywords: Iterable[str] = DEFAULT_KEYWORDS) -> list[Token]:
    """Scan source text and return every token in order."""
    from langlex.lexer import Tokenizer

    return list(Tokenizer(source, keywords))
