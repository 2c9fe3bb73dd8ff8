"""
Edit operations on a Document.

Only set-or-insert is supported. Existing nodes keep their formatting;
new nodes get canonical formatting (no extra blanks, '\\n' terminator).
Lookups act on the first matching section and the first matching key.
"""

from dataclasses import replace

from .const import CANONICAL_SPACE, CANONICAL_TERMINATOR
from .models.document import Document, Entry, Header, Section


def create_entry(key: str, value: str) -> Entry:
    """Create an entry with canonical formatting."""
    return Entry(
        key=key,
        value=value,
        space_before_key=CANONICAL_SPACE,
        space_after_equal=CANONICAL_SPACE,
        line_terminator=CANONICAL_TERMINATOR,
        trailing_comments=(),
    )


def create_section(name: str, key: str, value: str) -> Section:
    """Create a section holding a single canonical entry."""
    header = Header(
        name=name,
        space_before=CANONICAL_SPACE,
        space_after=CANONICAL_TERMINATOR,
    )
    return Section(header=header, comments=(), entries=(create_entry(key, value),))


def set_value(document: Document, section: str, key: str, value: str) -> Document:
    """
    Set ``key`` in ``section`` to ``value`` and return the new document.

    - Missing section: a new section is appended at the end.
    - Missing key: a new entry is appended to the section.
    - Existing key: only the value is replaced.

    The given document is not modified.
    """
    section_index = document.index_of(section)
    if section_index == -1:
        return replace(
            document,
            sections=document.sections + (create_section(section, key, value),),
        )

    target = document.sections[section_index]
    entry_index = target.index_of(key)
    if entry_index == -1:
        entries = target.entries + (create_entry(key, value),)
    else:
        entries = list(target.entries)
        entries[entry_index] = replace(entries[entry_index], value=value)
        entries = tuple(entries)

    sections = list(document.sections)
    sections[section_index] = replace(target, entries=entries)
    return replace(document, sections=tuple(sections))
