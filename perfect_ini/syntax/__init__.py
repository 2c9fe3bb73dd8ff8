"""
INI syntax: lexer and formatting-preserving parser.
"""

from .lexer import Lexer, Token, TokenType, tokenize
from .parser import IniParser, ParseError, normalize, parse_document

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "IniParser",
    "ParseError",
    "normalize",
    "parse_document",
]
