"""
Stringifier: turns a Document back into INI text.

The exact inverse of parsing for an unedited tree. Fragments are
concatenated in source order, then the trailing newline added during
parsing is removed and the original line ending is restored.
"""

from .const import LF
from .models.document import Comment, Document, Entry, IgnorableLine, Section


def stringify_ignorable_line(line: IgnorableLine) -> str:
    """Render an empty line or a comment line."""
    if isinstance(line, Comment):
        return "".join((
            line.space_before_mark,
            line.mark,
            line.space_after_mark,
            line.text,
            line.terminator,
        ))
    return line.text


def _stringify_lines(lines: tuple[IgnorableLine, ...]) -> str:
    return "".join(stringify_ignorable_line(line) for line in lines)


def stringify_entry(entry: Entry) -> str:
    """Render a key/value line followed by its trailing comments."""
    return "".join((
        entry.space_before_key,
        entry.key,
        "=",
        entry.space_after_equal,
        entry.value,
        entry.line_terminator,
        _stringify_lines(entry.trailing_comments),
    ))


def stringify_section(section: Section) -> str:
    """Render a header, the section comments and all entries."""
    header = section.header
    parts = [
        header.space_before,
        "[",
        header.name,
        "]",
        header.space_after,
        _stringify_lines(section.comments),
    ]
    parts.extend(stringify_entry(entry) for entry in section.entries)
    return "".join(parts)


def stringify(document: Document) -> str:
    """
    Render the whole document.

    Args:
        document: Parsed (and possibly edited) document

    Returns:
        INI text using the document's original line ending
    """
    text = _stringify_lines(document.leading_lines)
    text += "".join(stringify_section(section) for section in document.sections)

    # The synthetic newline is always a '\n' at this point
    if document.added_trailing_newline and text.endswith(LF):
        text = text[:-1]

    if document.line_ending != LF:
        text = text.replace(LF, document.line_ending)

    return text
