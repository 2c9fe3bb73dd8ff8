"""
Tests for edit operations.
"""

import pytest

from perfect_ini.edit import create_entry, create_section, set_value
from perfect_ini.models import Entry, Header
from perfect_ini.syntax.parser import parse_document
from perfect_ini.writer import stringify


@pytest.mark.parametrize(
    "source, section, key, value, expected",
    [
        # Existing key: only the value changes
        ("[hoge]\n ; test\nfuga=piyo\n", "hoge", "fuga", "mama", "[hoge]\n ; test\nfuga=mama\n"),
        # Missing key: appended after the last entry
        ("[hoge]\n ; test\nfuga=piyo\n", "hoge", "mono", "mama", "[hoge]\n ; test\nfuga=piyo\nmono=mama\n"),
        # Missing section: appended at the end
        ("[hoge]\nfuga=piyo\n", "java", "wawa", "poyo", "[hoge]\nfuga=piyo\n[java]\nwawa=poyo\n"),
        # Formatting of the edited line survives
        ("[s]\n  k =  old  \n", "s", "k ", "new", "[s]\n  k =  new\n"),
        # New entry goes after trailing comments of the last entry
        ("[s]\na=1\n; end\n\n", "s", "b", "2", "[s]\na=1\n; end\n\nb=2\n"),
        # Entry lands in the right section, not at the end of the file
        ("[a]\nx=1\n[b]\ny=2\n", "a", "z", "3", "[a]\nx=1\nz=3\n[b]\ny=2\n"),
        # Section without entries
        ("[a]\n; empty\n", "a", "k", "v", "[a]\n; empty\nk=v\n"),
        # Line endings of the source apply to inserted lines
        ("[a]\r\nb=c\r\n", "a", "d", "e", "[a]\r\nb=c\r\nd=e\r\n"),
        ("[a]\rb=c\r", "z", "d", "e", "[a]\rb=c\r[z]\rd=e\r"),
        # Missing trailing newline stays missing
        ("[a]\nb=c", "a", "d", "e", "[a]\nb=c\nd=e"),
        ("[a]\nb=c", "a", "b", "x", "[a]\nb=x"),
        ("[a]\r\nb=c", "n", "k", "v", "[a]\r\nb=c\r\n[n]\r\nk=v"),
    ],
)
def test_set_value(source: str, section: str, key: str, value: str, expected: str) -> None:
    """set_value changes or inserts exactly one line."""
    document = set_value(parse_document(source), section, key, value)

    assert stringify(document) == expected


def test_section_match_is_case_sensitive() -> None:
    """A section differing only in case is a different section."""
    document = set_value(parse_document("[Hoge]\na=1\n"), "hoge", "a", "2")

    assert stringify(document) == "[Hoge]\na=1\n[hoge]\na=2\n"


def test_first_section_and_key_win() -> None:
    """Edits act on the first matching section and the first matching key."""
    source = "[a]\nk=1\nk=2\n[a]\nk=3\n"

    document = set_value(parse_document(source), "a", "k", "x")

    assert stringify(document) == "[a]\nk=x\nk=2\n[a]\nk=3\n"


def test_set_value_does_not_modify_input() -> None:
    """The original document is left as it was."""
    original = parse_document("[a]\nb=c\n")

    set_value(original, "a", "b", "changed")
    set_value(original, "a", "new", "1")
    set_value(original, "z", "new", "1")

    assert stringify(original) == "[a]\nb=c\n"


def test_untouched_nodes_are_shared() -> None:
    """Sections other than the edited one are reused as-is."""
    original = parse_document("[a]\nb=c\n[d]\ne=f\n")

    edited = set_value(original, "d", "e", "g")

    assert edited.sections[0] is original.sections[0]
    assert edited.sections[1] is not original.sections[1]


def test_canonical_nodes() -> None:
    """Inserted nodes carry no extra blanks and a '\\n' terminator."""
    assert create_entry("k", "v") == Entry(
        key="k",
        value="v",
        space_before_key="",
        space_after_equal="",
        line_terminator="\n",
        trailing_comments=(),
    )

    section = create_section("s", "k", "v")
    assert section.header == Header(name="s", space_before="", space_after="\n")
    assert section.comments == ()
    assert section.entries == (create_entry("k", "v"),)
