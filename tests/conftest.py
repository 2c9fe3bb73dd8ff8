"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest


SIMPLE_INI = "[hoge]\nfuga=piyo\n"

COMMENTED_INI = (
    ";test\n"
    "[hoge]\n"
    " ;  exam\n"
    "foo=bar\n"
    " ;  java\n"
    "fuga=piyo\n"
    " ;  vavava\n"
    " ;  vava\n"
)


@pytest.fixture
def simple_ini() -> str:
    """Single section with a single key."""
    return SIMPLE_INI


@pytest.fixture
def commented_ini() -> str:
    """Document with comments before, inside and after the entries."""
    return COMMENTED_INI


@pytest.fixture
def ini_file(tmp_path: Path) -> Path:
    """An INI file on disk with CRLF line endings and no trailing newline."""
    path = tmp_path / "settings.ini"
    path.write_bytes(b"; settings\r\n[server]\r\nhost = localhost\r\nport=8080")
    return path
