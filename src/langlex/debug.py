"""--debug token and tree dumps to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from langlex.ast import BinaryOp, IntLiteral, Node, Variable
from langlex.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: position, kind and text."""
    for tok in tokens:
        start = tok.span.start
        file.write(f"{start.line}:{start.column}\t{tok.kind.value}\t{tok.text!r}\n")


def dump_ast(node: Node, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable tree to *file*."""
    _dump_node(node, 0, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_node(node: Node, depth: int, f: TextIO) -> None:
    if isinstance(node, IntLiteral):
        f.write(f"{_indent(depth)}IntLiteral({node.type} {node.value})\n")
    elif isinstance(node, Variable):
        f.write(f"{_indent(depth)}Variable({node.name})\n")
    elif isinstance(node, BinaryOp):
        f.write(f"{_indent(depth)}BinaryOp {node.operator.value}\n")
        _dump_node(node.left, depth + 1, f)
        _dump_node(node.right, depth + 1, f)
