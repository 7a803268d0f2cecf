"""Token kinds and the keyword table for the Monkey language."""

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType


class TokenKind(Enum):
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers / literals
    IDENT = auto()
    INT = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    ASTERISK = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EQ = auto()
    NOT_EQ = auto()

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS = MappingProxyType(
    {
        "fn": TokenKind.FUNCTION,
        "let": TokenKind.LET,
        "true": TokenKind.TRUE,
        "false": TokenKind.FALSE,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
        "return": TokenKind.RETURN,
    }
)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    literal: str
    # position of the first character; not part of token identity
    line: int = field(default=1, compare=False)
    col: int = field(default=1, compare=False)

    def __str__(self) -> str:
        return f"{{Type: {self.kind}, Literal: {self.literal}}}"


def lookup_ident(ident: str) -> TokenKind:
    return KEYWORDS.get(ident, TokenKind.IDENT)


__all__ = ["TokenKind", "Token", "KEYWORDS", "lookup_ident"]
