#!/usr/bin/env python3
"""tablefmt - reflow markdown pipe tables.

Usage:
    # Print the formatted file to stdout
    python -m tablefmt README.md

    # Rewrite files in place
    python -m tablefmt -i docs/*.md

    # Fail (exit 1) when any file would change
    python -m tablefmt --check docs/*.md

    # Read stdin
    cat notes.md | python -m tablefmt --normalize-indentation --tab-size 2
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from tablefmt import __version__
from tablefmt.plugins.formatter_registry import create_registry
from tablefmt.plugins.table_formatter import LANGUAGE_ID, Document, activate, apply_edits, create_plugin
from tablefmt.plugins.table_formatter.config import DEFAULT_CONFIG_PATH
from tablefmt.trace import trace

logger = logging.getLogger(__name__)

STDIN = "-"

EXIT_OK = 0
EXIT_WOULD_CHANGE = 1
EXIT_READ_ERROR = 2

_EOL_FLAGS = {"lf": "\n", "crlf": "\r\n", "auto": "auto"}


def _read(path: str) -> str:
    if path == STDIN:
        return sys.stdin.read()
    # newline="" keeps \r\n intact so edits line up with the original text
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.tab_size is not None:
        overrides["tab_size"] = args.tab_size
    if args.normalize_indentation is not None:
        overrides["normalize_indentation"] = args.normalize_indentation
    if args.eol is not None:
        overrides["eol"] = _EOL_FLAGS[args.eol]
    if args.wide_chars is not None:
        overrides["wide_chars"] = args.wide_chars
    return overrides


def format_file(registry, path: str) -> Optional[Tuple[str, str]]:
    """Format one file.

    Returns:
        (original, formatted) text, or None if the file is unreadable.
    """
    try:
        text = _read(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        trace("cli", f"cannot read {path}", include_traceback=True)
        return None

    # The formatter reads its options fresh for each document
    document = Document(text, uri=path)
    edits = registry.provide_edits(LANGUAGE_ID, document)
    logger.info("%s: %d table(s)", path, len(edits))
    return text, apply_edits(document, edits)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tablefmt",
        description="Reflow markdown pipe tables so their columns line up",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tablefmt README.md
  python -m tablefmt -i docs/*.md
  python -m tablefmt --check docs/*.md
        """,
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=[STDIN],
        help="Markdown files to format ('-' or nothing reads stdin)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--in-place", "-i",
        action="store_true",
        help="Rewrite files instead of printing to stdout",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if any file would be reformatted",
    )

    # Formatting options (override settings file and environment)
    parser.add_argument(
        "--tab-size",
        type=int,
        metavar="N",
        help="Indentation unit for --normalize-indentation",
    )
    parser.add_argument(
        "--normalize-indentation",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Round table indentation to a multiple of the tab size",
    )
    parser.add_argument(
        "--eol",
        choices=sorted(_EOL_FLAGS),
        help="Line terminator for reflowed tables (default: match the file)",
    )
    parser.add_argument(
        "--wide-chars",
        choices=["heuristic", "unicode"],
        help="How wide (double-width) characters are recognized",
    )

    # Configuration
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Settings file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if os.path.exists(args.env_file):
        load_dotenv(args.env_file)

    if args.in_place and STDIN in args.files:
        print("Error: --in-place cannot be used with stdin", file=sys.stderr)
        return EXIT_READ_ERROR

    registry = create_registry()
    activate(registry, create_plugin(args.config, _overrides(args)))

    status = EXIT_OK
    for path in args.files:
        result = format_file(registry, path)
        if result is None:
            status = EXIT_READ_ERROR
            continue
        original, formatted = result

        if args.check:
            if formatted != original:
                print(f"would reformat {path}", file=sys.stderr)
                if status == EXIT_OK:
                    status = EXIT_WOULD_CHANGE
        elif args.in_place:
            if formatted != original:
                _write(path, formatted)
                logger.info("Reformatted %s", path)
        else:
            sys.stdout.write(formatted)

    return status


if __name__ == "__main__":
    sys.exit(main())
