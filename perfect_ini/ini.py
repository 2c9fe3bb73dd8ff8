"""
Public entry point: parse INI text into an editable, lossless handle.

Usage:
    data = parse("[hoge]\\n; comment\\nfuga=piyo\\n")
    data.set("hoge", "fuga", "momo")
    data.stringify()   # "[hoge]\\n; comment\\nfuga=momo\\n"
"""

from .edit import set_value
from .models.document import Document, to_object
from .syntax.parser import parse_document
from .writer import stringify


class IniData:
    """
    A parsed INI document.

    The handle is mutable (``set`` replaces the document it holds); the
    document nodes themselves are frozen, so snapshots from ``raw`` and
    handles from ``clone`` are never affected by later edits.
    """

    def __init__(self, document: Document):
        self._document = document

    def __repr__(self) -> str:
        return f"IniData(sections={[s.name for s in self._document.sections]})"

    def __str__(self) -> str:
        return self.stringify()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniData):
            return NotImplemented
        return self._document == other._document

    __hash__ = None  # mutable handle

    def clone(self) -> "IniData":
        """Return an independent handle on the same content."""
        return IniData(self._document)

    def raw(self) -> Document:
        """Read-only snapshot of the document tree."""
        return self._document

    def to_object(self) -> dict[str, dict[str, str]]:
        """Plain ``{section: {key: value}}`` view without formatting."""
        return to_object(self._document)

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        """Value of the first matching key in the first matching section."""
        found = self._document.get_section(section)
        if found is None:
            return default
        entry = found.get_entry(key)
        if entry is None:
            return default
        return entry.value

    def sections(self) -> list[str]:
        """Section names in source order (duplicates included)."""
        return [s.name for s in self._document.sections]

    def set(self, section: str, key: str, value: str) -> None:
        """Set a value, inserting the section and/or key when missing."""
        self._document = set_value(self._document, section, key, value)

    def stringify(self) -> str:
        """Render the document back to INI text."""
        return stringify(self._document)


def parse(text: str) -> IniData:
    """
    Parse INI text.

    Args:
        text: INI text; '\\n', '\\r' and '\\r\\n' line endings are accepted

    Returns:
        IniData handle

    Raises:
        ParseError: If the text does not match the grammar
    """
    return IniData(parse_document(text))
