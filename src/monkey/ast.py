"""AST node definitions for the Monkey language."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .token import Token


class Node:
    def token_literal(self) -> str:
        raise NotImplementedError


# Expressions
class Expression(Node):
    pass


@dataclass
class UnsupportedExpression(Expression):
    """Stand-in for an expression the parser cannot build yet.

    Carries the tokens that were skipped in its place. It is a distinct
    variant so later passes can tell it apart from a parsed expression.
    """

    tokens: Tuple[Token, ...] = ()

    def token_literal(self) -> str:
        if not self.tokens:
            return ""
        return self.tokens[-1].literal

    def __str__(self) -> str:
        return " ".join(t.literal for t in self.tokens)


@dataclass
class Identifier(Expression):
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value


# Statements
class Statement(Node):
    pass


@dataclass
class LetStatement(Statement):
    token: Token  # LET
    name: Identifier
    value: Expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {self.value};"


@dataclass
class ReturnStatement(Statement):
    token: Token  # RETURN
    return_value: Expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.return_value};"


@dataclass
class Program(Node):
    statements: List[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "\n".join(str(s) for s in self.statements)


__all__ = [
    "Node",
    "Expression",
    "Statement",
    "UnsupportedExpression",
    "Identifier",
    "LetStatement",
    "ReturnStatement",
    "Program",
]
