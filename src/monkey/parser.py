"""Statement parser for the Monkey language.

Works on a two-token window (``cur_token`` and ``peek_token``) pulled from
a lexer it owns. Only ``let`` and ``return`` statements are recognised, and
their right-hand sides are skipped up to the terminating semicolon.

Structural problems never abort the parse: a statement that fails is left
out of the program and the parser moves on by a single token. Messages for
missing tokens are collected in ``Parser.errors``.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Identifier,
    LetStatement,
    Program,
    ReturnStatement,
    Statement,
    UnsupportedExpression,
)
from .lexer import Lexer
from .token import Token, TokenKind


class ParseError(Exception):
    pass


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: List[str] = []
        self.cur_token: Optional[Token] = None
        self.peek_token: Optional[Token] = None
        self._next_token()
        self._next_token()

    @classmethod
    def from_source(cls, source: str) -> "Parser":
        return cls(Lexer(source))

    def parse_program(self) -> Program:
        program = Program()
        while not self._cur_token_is(TokenKind.EOF):
            try:
                program.statements.append(self._statement())
            except ParseError:
                # statement dropped; resume at the following token
                pass
            self._next_token()
        return program

    # --- statements ---
    def _statement(self) -> Statement:
        kind = self.cur_token.kind
        if kind == TokenKind.LET:
            return self._let_statement()
        if kind == TokenKind.RETURN:
            return self._return_statement()
        raise ParseError(f"unimplemented: {kind}")

    def _let_statement(self) -> LetStatement:
        let_tok = self.cur_token
        self._expect_peek(TokenKind.IDENT)
        name = Identifier(token=self.cur_token, value=self.cur_token.literal)
        self._expect_peek(TokenKind.ASSIGN)
        value = self._skip_expression()
        return LetStatement(token=let_tok, name=name, value=value)

    def _return_statement(self) -> ReturnStatement:
        ret_tok = self.cur_token
        value = self._skip_expression()
        return ReturnStatement(token=ret_tok, return_value=value)

    def _skip_expression(self) -> UnsupportedExpression:
        # TODO: replace with a real expression parser (prefix/infix rules)
        skipped: List[Token] = []
        self._next_token()
        while not self._cur_token_is(TokenKind.SEMICOLON) and not self._cur_token_is(
            TokenKind.EOF
        ):
            skipped.append(self.cur_token)
            self._next_token()
        return UnsupportedExpression(tokens=tuple(skipped))

    # --- helpers ---
    def _next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def _cur_token_is(self, kind: TokenKind) -> bool:
        return self.cur_token.kind == kind

    def _peek_token_is(self, kind: TokenKind) -> bool:
        return self.peek_token.kind == kind

    def _expect_peek(self, kind: TokenKind) -> None:
        if self._peek_token_is(kind):
            self._next_token()
            return
        msg = f"Expected: {kind}, Got: {self.peek_token.kind}"
        self.errors.append(msg)
        raise ParseError(msg)


__all__ = ["Parser", "ParseError"]
