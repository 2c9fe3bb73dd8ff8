"""
Reading and writing INI files.

Files are opened with ``newline=""`` so '\\r\\n' and '\\r' reach the
parser untranslated and are written back exactly as stringified.
"""

from pathlib import Path

from .const import DEFAULT_ENCODING
from .ini import IniData, parse
from .logging import get_logger
from .syntax.parser import ParseError


logger = get_logger("loader")


class IniFileError(Exception):
    """Exception raised when an INI file cannot be read, parsed or written."""

    def __init__(self, message: str, path: str | Path):
        self.path = Path(path)
        super().__init__(f"{path}: {message}")


def read_file(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read an INI file as text with its line endings untouched.

    Raises:
        IniFileError: If the file cannot be read
    """
    path = Path(path)

    if not path.is_file():
        raise IniFileError("not a file", path)

    try:
        with path.open("r", encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IniFileError(f"cannot read file: {e}", path) from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def parse_text(text: str, path: str | Path) -> IniData:
    """Parse text read from ``path``, reporting failures against that file."""
    try:
        data = parse(text)
    except ParseError as e:
        raise IniFileError(f"parse error: {e}", path) from e

    document = data.raw()
    logger.debug(
        f"Parsed {path}: {len(document.sections)} sections, "
        f"line ending {document.line_ending!r}, "
        f"trailing newline {'missing' if document.added_trailing_newline else 'present'}"
    )
    return data


def load_file(path: str | Path, encoding: str = DEFAULT_ENCODING) -> IniData:
    """
    Load an INI file.

    Args:
        path: Path to the file
        encoding: Text encoding of the file

    Returns:
        Parsed IniData

    Raises:
        IniFileError: If the file cannot be read or parsed
    """
    return parse_text(read_file(path, encoding), path)


def save_file(data: IniData, path: str | Path, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Write an IniData to a file.

    Args:
        data: Document to write
        path: Destination path (overwritten)
        encoding: Text encoding of the file

    Raises:
        IniFileError: If the file cannot be written
    """
    path = Path(path)
    text = data.stringify()

    try:
        with path.open("w", encoding=encoding, newline="") as f:
            f.write(text)
    except (OSError, UnicodeEncodeError) as e:
        raise IniFileError(f"cannot write file: {e}", path) from e

    logger.info(f"Wrote {len(text)} characters to {path}")
