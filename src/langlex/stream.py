"""Position-tracking character stream over in-memory source text."""

from __future__ import annotations

from typing import NoReturn

from langlex.errors import InvalidAdvance, LexError
from langlex.tokens import Position

# Returned by peek() past the end of input; never a real character.
END = ""


class CharStream:
    """Single-character lookahead over ``source`` with line/column bookkeeping."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 0

    @property
    def source(self) -> str:
        return self._source

    def position(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if 0 <= idx < len(self._source):
            return self._source[idx]
        return END

    def advance(self) -> str:
        """Consume the current character and return it."""
        if self.at_end():
            self.fail("unexpected end of input", InvalidAdvance)
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        return ch

    def at_end(self) -> bool:
        return self._pos >= len(self._source)

    def fail(self, message: str, error: type[LexError] = LexError) -> NoReturn:
        raise error(message, self.position(), self._source)
