from .token import KEYWORDS, Token, TokenKind, lookup_ident
from .lexer import Lexer, tokenize
from .parser import Parser, ParseError

__all__ = [
    "KEYWORDS",
    "Token",
    "TokenKind",
    "lookup_ident",
    "Lexer",
    "tokenize",
    "Parser",
    "ParseError",
]
