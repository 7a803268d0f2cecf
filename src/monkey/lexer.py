"""
Monkey lexer.

Produces tokens one at a time on demand. The lexer keeps only a cursor into
the source, so draining it is the only way forward; once the end of input is
reached every further call returns another EOF token.
"""

import string
from typing import Iterator, List

from .token import Token, TokenKind, lookup_ident

WHITESPACE = " \t\n\r"
LETTERS = frozenset(string.ascii_letters + "_")
DIGITS = frozenset(string.digits)

SINGLE_CHAR_TOKENS = {
    "=": TokenKind.ASSIGN,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "!": TokenKind.BANG,
}

# first character -> kind when followed by '='
TWO_CHAR_TOKENS = {
    "=": TokenKind.EQ,
    "!": TokenKind.NOT_EQ,
}


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.start = 0
        self.line = 1
        self.col = 1

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the EOF token."""
        while True:
            tok = self.next_token()
            if tok.kind == TokenKind.EOF:
                return
            yield tok

    def next_token(self) -> Token:
        self._skip_whitespace()
        self.start = self.pos
        line, col = self.line, self.col

        if self._is_at_end():
            return Token(TokenKind.EOF, "", line, col)

        c = self._advance()

        if c in TWO_CHAR_TOKENS and self._match("="):
            return self._make(TWO_CHAR_TOKENS[c], line, col)
        if c in SINGLE_CHAR_TOKENS:
            return self._make(SINGLE_CHAR_TOKENS[c], line, col)

        if c in LETTERS:
            self._consume_while(LETTERS)
            text = self.source[self.start : self.pos]
            return Token(lookup_ident(text), text, line, col)

        if c in DIGITS:
            # raw digits only; no sign, no fraction, no conversion
            self._consume_while(DIGITS)
            return self._make(TokenKind.INT, line, col)

        return self._make(TokenKind.ILLEGAL, line, col)

    def _make(self, kind: TokenKind, line: int, col: int) -> Token:
        return Token(kind, self.source[self.start : self.pos], line, col)

    def _is_at_end(self) -> bool:
        return self.pos >= self.length

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.pos]

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.pos] != expected:
            return False
        self._advance()
        return True

    def _consume_while(self, chars) -> None:
        while not self._is_at_end() and self._peek() in chars:
            self._advance()

    def _skip_whitespace(self) -> None:
        while not self._is_at_end() and self._peek() in WHITESPACE:
            self._advance()


def tokenize(source: str) -> List[Token]:
    """Drain a fresh lexer over ``source``; the last token is always EOF."""
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens


__all__ = ["Lexer", "tokenize"]
