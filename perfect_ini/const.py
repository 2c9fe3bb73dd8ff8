"""
Application constants and metadata.
"""

# Application info
APP_NAME = "Perfect INI"
APP_VERSION = "0.1.0"

# Line endings
LF = "\n"
CR = "\r"
CRLF = "\r\n"
DEFAULT_LINE_ENDING = LF

# Canonical filler for inserted nodes
CANONICAL_SPACE = ""
CANONICAL_TERMINATOR = LF

# Default file encoding
DEFAULT_ENCODING = "utf-8"
