"""
Formatting-preserving document model for INI files.

Every piece of filler (blanks, comment marks, comment text, line
terminators) is stored next to the data it surrounds, so writing the
tree back out reproduces the source exactly.

All nodes are frozen; edits build new nodes with ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..const import DEFAULT_LINE_ENDING


@dataclass(frozen=True)
class EmptyLine:
    """
    A blank line, stored literally.

    Examples:
        "\\n"      -> EmptyLine(text="\\n")
        "  \\t\\n" -> EmptyLine(text="  \\t\\n")
    """
    text: str = "\n"


@dataclass(frozen=True)
class Comment:
    """
    A comment line split into its parts.

    Example:
        " ;  note\\n" -> Comment(space_before_mark=" ", mark=";",
                                space_after_mark="  ", text="note",
                                terminator="\\n")
    """
    mark: str
    text: str = ""
    space_before_mark: str = ""
    space_after_mark: str = ""
    terminator: str = "\n"


IgnorableLine = EmptyLine | Comment


@dataclass(frozen=True)
class Header:
    """
    A section header line.

    ``space_after`` holds everything after ``]`` including the line
    terminator.
    """
    name: str
    space_before: str = ""
    space_after: str = "\n"


@dataclass(frozen=True)
class Entry:
    """
    A ``key=value`` line and the ignorable lines that follow it.

    Examples:
        "host=localhost\\n"  -> Entry(key="host", value="localhost")
        "  a = b \\n"        -> Entry(key="a ", value="b ",
                                     space_before_key="  ",
                                     space_after_equal=" ")
    """
    key: str
    value: str
    space_before_key: str = ""
    space_after_equal: str = ""
    line_terminator: str = "\n"
    trailing_comments: tuple[IgnorableLine, ...] = ()

    def __repr__(self) -> str:
        return f"Entry({self.key!r}={self.value!r})"


@dataclass(frozen=True)
class Section:
    """A section: header, ignorable lines before the first entry, entries."""
    header: Header
    comments: tuple[IgnorableLine, ...] = ()
    entries: tuple[Entry, ...] = ()

    def __repr__(self) -> str:
        return f"Section({self.name!r}, entries={len(self.entries)})"

    @property
    def name(self) -> str:
        return self.header.name

    def get_entry(self, key: str) -> Entry | None:
        """Get first entry with given key."""
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def index_of(self, key: str) -> int:
        """Position of the first entry with given key, or -1."""
        for index, entry in enumerate(self.entries):
            if entry.key == key:
                return index
        return -1


@dataclass(frozen=True)
class Document:
    """
    Root of the tree: lines before the first section, the sections, and
    the metadata needed to restore the original line endings.
    """
    leading_lines: tuple[IgnorableLine, ...] = ()
    sections: tuple[Section, ...] = ()
    line_ending: str = DEFAULT_LINE_ENDING
    added_trailing_newline: bool = False

    def get_section(self, name: str) -> Section | None:
        """Get first section with given name."""
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def index_of(self, name: str) -> int:
        """Position of the first section with given name, or -1."""
        for index, section in enumerate(self.sections):
            if section.name == name:
                return index
        return -1


def to_object(document: Document) -> dict[str, dict[str, str]]:
    """
    Project the document onto plain data.

    Formatting is discarded. For duplicated section names and duplicated
    keys within a section the first occurrence is the one exposed.
    """
    result: dict[str, dict[str, str]] = {}
    for section in document.sections:
        if section.name in result:
            continue
        values: dict[str, str] = {}
        for entry in section.entries:
            values.setdefault(entry.key, entry.value)
        result[section.name] = values
    return result
