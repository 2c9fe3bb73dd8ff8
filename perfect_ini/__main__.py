"""
Command line interface for perfect-ini.

Usage:
    python -m perfect_ini get settings.ini server host
    python -m perfect_ini set settings.ini server host example.org
    python -m perfect_ini dump settings.ini
    python -m perfect_ini check settings.ini
    python -m perfect_ini --help
"""

import argparse
import json
import sys

from . import __version__
from .const import DEFAULT_ENCODING
from .loader import IniFileError, load_file, parse_text, read_file, save_file
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("cli")

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


def cmd_get(args: argparse.Namespace) -> int:
    """Print the value of a key."""
    data = load_file(args.file, args.encoding)
    value = data.get(args.section, args.key)
    if value is None:
        logger.error(f"No key {args.key!r} in section {args.section!r}")
        return EXIT_NOT_FOUND
    print(value)
    return EXIT_OK


def cmd_set(args: argparse.Namespace) -> int:
    """Set a key and write the file back."""
    data = load_file(args.file, args.encoding)
    before = data.get(args.section, args.key)
    data.set(args.section, args.key, args.value)

    if before is None:
        logger.info(f"Added {args.section}.{args.key}")
    else:
        logger.info(f"Changed {args.section}.{args.key}: {before!r} -> {args.value!r}")

    save_file(data, args.output or args.file, args.encoding)
    return EXIT_OK


def cmd_dump(args: argparse.Namespace) -> int:
    """Print the plain section/key/value view as JSON."""
    data = load_file(args.file, args.encoding)
    print(json.dumps(data.to_object(), indent=args.indent, ensure_ascii=False))
    return EXIT_OK


def cmd_check(args: argparse.Namespace) -> int:
    """Verify that the file parses and regenerates byte for byte."""
    original = read_file(args.file, args.encoding)
    data = parse_text(original, args.file)

    if data.stringify() != original:
        logger.error(f"{args.file}: round trip changed the content (mixed line endings?)")
        return EXIT_ERROR

    document = data.raw()
    entries = sum(len(s.entries) for s in document.sections)
    print(f"{args.file}: OK ({len(document.sections)} sections, {entries} keys)")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="perfect-ini",
        description="Read and edit INI files without touching their formatting",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"File encoding (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    get_parser = commands.add_parser("get", help="Print the value of a key")
    get_parser.add_argument("file")
    get_parser.add_argument("section")
    get_parser.add_argument("key")
    get_parser.set_defaults(func=cmd_get)

    set_parser = commands.add_parser("set", help="Set a key, adding it if missing")
    set_parser.add_argument("file")
    set_parser.add_argument("section")
    set_parser.add_argument("key")
    set_parser.add_argument("value")
    set_parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Write the result here instead of modifying FILE",
    )
    set_parser.set_defaults(func=cmd_set)

    dump_parser = commands.add_parser("dump", help="Print sections and keys as JSON")
    dump_parser.add_argument("file")
    dump_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    dump_parser.set_defaults(func=cmd_dump)

    check_parser = commands.add_parser("check", help="Verify lossless round trip")
    check_parser.add_argument("file")
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_config = LogConfig.from_flags(verbose=args.verbose, debug=args.debug, quiet=args.quiet)
    if args.no_color:
        log_config.console_colors = False
    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file
    setup_logging(log_config)

    try:
        return args.func(args)
    except IniFileError as e:
        logger.error(str(e))
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
