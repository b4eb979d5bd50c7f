"""Expression tree node types fed by the token stream.

The lexer never builds these; they fix the shapes a parser produces from
its tokens. Each variant carries only its own fields and every
:class:`BinaryOp` exclusively owns its two children.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BinaryOperator(Enum):
    PLUS = "+"
    ASSIGN = "="


@dataclass(frozen=True, slots=True)
class IntLiteral:
    """Integer literal."""

    value: int
    type: str = "int"


@dataclass(frozen=True, slots=True)
class Variable:
    """Reference to a variable by name."""

    name: str


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """Binary operator applied to two subtrees."""

    operator: BinaryOperator
    left: Node
    right: Node


Node = IntLiteral | Variable | BinaryOp
