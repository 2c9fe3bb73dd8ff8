"""
Document model for formatting-preserving INI files.
"""

from .document import (
    Comment,
    Document,
    EmptyLine,
    Entry,
    Header,
    IgnorableLine,
    Section,
    to_object,
)

__all__ = [
    "Document",
    "Section",
    "Header",
    "Entry",
    "Comment",
    "EmptyLine",
    "IgnorableLine",
    "to_object",
]
