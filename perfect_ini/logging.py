"""
Logging configuration for the perfect-ini command line tools.

The parse/edit/stringify core never logs; only the caller layer
(file loader, CLI) does.

Features:
- Console output on stderr (stdout carries command output), colored on a TTY
- Optional file output with rotation
"""

import copy
import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path


LOGGER_NAME = "perfect_ini"


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BRIGHT_RED = "\033[91m"


LEVEL_COLORS = {
    logging.DEBUG: Colors.DIM + Colors.CYAN,
    logging.INFO: Colors.GREEN,
    logging.WARNING: Colors.YELLOW,
    logging.ERROR: Colors.RED,
    logging.CRITICAL: Colors.BOLD + Colors.BRIGHT_RED,
}

# Logger name suffix -> color
COMPONENT_COLORS = {
    "loader": Colors.MAGENTA,
    "cli": Colors.BLUE,
}

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI colors to log output.

    Level names are colored by severity, logger names by component.
    The record handed to other handlers is left untouched.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        record = copy.copy(record)
        if not self.use_colors:
            record.levelname = f"{record.levelname:8}"
            return super().format(record)

        level_color = LEVEL_COLORS.get(record.levelno, "")
        record.levelname = f"{level_color}{record.levelname:8}{Colors.RESET}"

        component = record.name.rsplit(".", 1)[-1]
        if component in COMPONENT_COLORS:
            record.name = f"{COMPONENT_COLORS[component]}{record.name}{Colors.RESET}"

        return super().format(record)


class PlainFormatter(logging.Formatter):
    """Plain formatter without colors for file output."""

    def format(self, record: logging.LogRecord) -> str:
        record = copy.copy(record)
        record.levelname = f"{record.levelname:8}"
        return super().format(record)


@dataclass
class LogConfig:
    """Logging configuration."""

    # Console settings
    console_level: str = "warning"
    console_colors: bool = True

    # File settings
    file_enabled: bool = False
    file_path: str = "perfect-ini.log"
    file_level: str = "debug"
    file_max_bytes: int = 1024 * 1024  # 1 MB
    file_backup_count: int = 3

    # Format
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%H:%M:%S"

    @classmethod
    def from_flags(
        cls,
        verbose: bool = False,
        debug: bool = False,
        quiet: bool = False,
    ) -> "LogConfig":
        """Build a config from the usual -v/-d/-q command line flags."""
        if debug:
            return cls(console_level="debug")
        if verbose:
            return cls(console_level="info")
        if quiet:
            return cls(console_level="error")
        return cls()


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    return LEVELS.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Configure logging for the command line tools.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level(config.console_level))
    use_colors = config.console_colors and sys.stderr.isatty()
    console_handler.setFormatter(
        ColoredFormatter(fmt=config.format, datefmt=config.date_format, use_colors=use_colors)
    )
    root_logger.addHandler(console_handler)

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(PlainFormatter(fmt=config.format, datefmt=config.date_format))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with perfect_ini)

    Returns:
        Logger instance
    """
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
