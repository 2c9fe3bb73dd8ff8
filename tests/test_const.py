"""
Tests for constants.
"""

from perfect_ini import __version__
from perfect_ini.const import APP_NAME, APP_VERSION, DEFAULT_LINE_ENDING


def test_constants() -> None:
    """Test that constants are defined."""
    assert APP_NAME == "Perfect INI"
    assert __version__ == APP_VERSION
    assert DEFAULT_LINE_ENDING == "\n"
