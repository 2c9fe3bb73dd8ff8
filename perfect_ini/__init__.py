"""
Lossless INI parser and editor.

Parses INI text into a tree that keeps every blank, comment and line
terminator, so that an unedited document is written back byte for byte
and an edited one changes only where it was edited.

Example:
    >>> data = parse("[hoge]\\n; comment\\nfuga=piyo\\n")
    >>> data.set("hoge", "fuga", "momo")
    >>> data.stringify()
    '[hoge]\\n; comment\\nfuga=momo\\n'
"""

from .const import APP_VERSION
from .edit import set_value
from .ini import IniData, parse
from .models import (
    Comment,
    Document,
    EmptyLine,
    Entry,
    Header,
    IgnorableLine,
    Section,
    to_object,
)
from .syntax import ParseError, Token, TokenType, normalize, parse_document, tokenize
from .writer import stringify

__version__ = APP_VERSION

__all__ = [
    "parse",
    "IniData",
    "ParseError",
    "Document",
    "Section",
    "Header",
    "Entry",
    "Comment",
    "EmptyLine",
    "IgnorableLine",
    "Token",
    "TokenType",
    "tokenize",
    "normalize",
    "parse_document",
    "stringify",
    "to_object",
    "set_value",
    "__version__",
]
