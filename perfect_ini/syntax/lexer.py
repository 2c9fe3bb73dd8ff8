"""
Lexer (tokenizer) for INI syntax.

Every character of the input becomes exactly one token, so nothing is
lost on the way to the parser:
- Structural characters: newline, '=', '[', ']'
- Comment marks: ';' and '#'
- Blanks: one token per space or tab (runs are not merged)
- Anything else is an OTHER character

The input must already be normalized (only '\\n' line endings).
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    """Token types for INI syntax."""

    # Structure
    NEWLINE = auto()       # \n
    EQUAL = auto()         # =
    LBRACKET = auto()      # [
    RBRACKET = auto()      # ]

    # Filler
    SPACE = auto()         # space or tab
    SEMICOLON = auto()     # ;
    HASH = auto()          # #

    # Data
    OTHER = auto()         # everything else

    # Special
    EOF = auto()           # end of input


# Human readable names used in error messages
TOKEN_LABELS = {
    TokenType.NEWLINE: "newline",
    TokenType.EQUAL: "'='",
    TokenType.LBRACKET: "'['",
    TokenType.RBRACKET: "']'",
    TokenType.SPACE: "space or tab",
    TokenType.SEMICOLON: "';'",
    TokenType.HASH: "'#'",
    TokenType.OTHER: "character",
    TokenType.EOF: "end of input",
}


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"

    @property
    def label(self) -> str:
        """Description of the token for error messages."""
        if self.type in (TokenType.OTHER, TokenType.SPACE):
            return repr(self.value)
        return TOKEN_LABELS[self.type]


class Lexer:
    """
    Tokenizer for INI syntax.

    Example:
        [server]
        ; comment
        host = localhost

    yields LBRACKET, OTHER x6, RBRACKET, NEWLINE, SEMICOLON, SPACE, ...
    """

    SINGLE_CHAR_TOKENS = {
        "\n": TokenType.NEWLINE,
        "=": TokenType.EQUAL,
        "[": TokenType.LBRACKET,
        "]": TokenType.RBRACKET,
        " ": TokenType.SPACE,
        "\t": TokenType.SPACE,
        ";": TokenType.SEMICOLON,
        "#": TokenType.HASH,
    }

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def _advance(self) -> str:
        """Advance position and return current character."""
        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def next_token(self) -> Token:
        """Get the next token from the source."""
        if self.pos >= len(self.source):
            return Token(TokenType.EOF, "", self.line, self.column)

        line = self.line
        column = self.column
        char = self._advance()
        token_type = self.SINGLE_CHAR_TOKENS.get(char, TokenType.OTHER)
        return Token(token_type, char, line, column)

    def tokenize(self) -> Iterator[Token]:
        """Generate all tokens from the source, ending with EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                break

    def __iter__(self) -> Iterator[Token]:
        """Allow iteration over tokens."""
        return self.tokenize()


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize a source string."""
    return list(Lexer(source))
