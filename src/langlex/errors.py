"""Lexer error types with formatted source context."""

from __future__ import annotations

from langlex.tokens import Position


class LexError(Exception):
    """Raised on the first lexing error, with position and source context.

    ``str()`` gives the short diagnostic ``<message> (<line>:<column>)``;
    :meth:`format` renders the offending source line with a caret underline.
    """

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(f"{message} ({position.line}:{position.column})")

    def format(self, filename: str = "input.l") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {' ' * col}^"
        )


class UnterminatedString(LexError):
    """End of input reached inside a string literal."""


class UnrecognizedCharacter(LexError):
    """Character that starts no token and is not whitespace."""


class InvalidAdvance(LexError):
    """Attempt to consume past the end of input."""
