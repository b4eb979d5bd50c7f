"""Pull-based tokenizer with one-token lookahead."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from langlex.errors import UnrecognizedCharacter, UnterminatedString
from langlex.stream import CharStream
from langlex.tokens import (
    DEFAULT_KEYWORDS,
    Span,
    Token,
    TokenKind,
    is_digit,
    is_ident_char,
    is_ident_start,
    is_operator_char,
    is_string_delimiter,
    is_whitespace,
)

# Marks an empty lookahead slot; a cached None means end of input.
_UNSET = object()


class Tokenizer:
    """Turn source text into tokens on demand.

    Tokens are scanned lazily from a :class:`CharStream`: nothing is read
    until :meth:`peek` or :meth:`next_token` asks for it. At most one token
    is held back for lookahead. Scanning errors propagate as
    :class:`~langlex.errors.LexError` and end the token sequence.
    """

    def __init__(self, source: str, keywords: Iterable[str] = DEFAULT_KEYWORDS) -> None:
        if isinstance(keywords, str):
            raise TypeError("keywords must be an iterable of words, not a single str")
        self._stream = CharStream(source)
        self._keywords = frozenset(keywords)
        self._lookahead: Token | None | object = _UNSET

    @property
    def keywords(self) -> frozenset[str]:
        return self._keywords

    def peek(self) -> Token | None:
        """Return the next token without consuming it, or None at end of input."""
        if self._lookahead is _UNSET:
            self._lookahead = self.read_next()
        return self._lookahead  # type: ignore[return-value]

    def next_token(self) -> Token | None:
        """Consume and return the next token, or None at end of input."""
        if self._lookahead is not _UNSET:
            tok = self._lookahead
            self._lookahead = _UNSET
            return tok  # type: ignore[return-value]
        return self.read_next()

    def at_end(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.next_token()) is not None:
            yield tok

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def read_next(self) -> Token | None:
        """Scan one token from the stream, bypassing the lookahead slot."""
        self._read_while(is_whitespace)
        if self._stream.at_end():
            return None

        start = self._stream.position()
        ch = self._stream.peek()

        if is_digit(ch):
            text = self._read_while(is_digit)
            kind = TokenKind.NUMBER
        elif is_ident_start(ch):
            text = self._read_while(is_ident_char)
            kind = TokenKind.KEYWORD if text in self._keywords else TokenKind.IDENTIFIER
        elif is_operator_char(ch):
            text = self._read_while(is_operator_char)
            kind = TokenKind.OPERATOR
        elif is_string_delimiter(ch):
            text = self._read_string()
            kind = TokenKind.STRING
        else:
            self._stream.fail(f"unrecognized character {ch!r}", UnrecognizedCharacter)

        return Token(kind, text, Span(start, self._stream.position()))

    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        chars = []
        while not self._stream.at_end() and predicate(self._stream.peek()):
            chars.append(self._stream.advance())
        return "".join(chars)

    def _read_string(self) -> str:
        start = self._stream.position()
        delimiter = self._stream.advance()
        chars = [delimiter]
        while True:
            if self._stream.at_end():
                self._stream.fail(
                    f"unterminated string literal (opened at {start.line}:{start.column})",
                    UnterminatedString,
                )
            ch = self._stream.advance()
            chars.append(ch)
            if ch == delimiter:
                return "".join(chars)
