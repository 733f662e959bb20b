#!/usr/bin/env python3
"""
Sanitize a filename from the command line.

The name is taken from the positional argument, or read from STDIN when it
is missing or "-". A single unrecognised dash argument is taken as the name,
so "-notes.txt" works; names that look like one of the flags below need a
"--" in front of them. The sanitized name is printed to STDOUT.

Usage:
    sanitize-filename "con.txt" --windows          # .txt
    sanitize-filename -r _ "a/b"                   # a_b
    sanitize-filename -- -r.txt                    # -r.txt
    echo "../../etc/passwd" | sanitize-filename    # ....etcpasswd
"""

import argparse
import logging
import sys
from typing import List, Optional

from sanitize_filename.config import Config
from sanitize_filename.sanitize import sanitize_with_options

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sanitize-filename",
        description="Make a string safe to use as a filename",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        default=None,
        help="Name to sanitize (default: read from STDIN, also with '-')",
    )
    parser.add_argument(
        "-r", "--replace",
        dest="replacement",
        default=None,
        help="Replacement for removed characters (default: empty)",
    )
    parser.add_argument(
        "--windows",
        dest="windows",
        action="store_const",
        const=True,
        default=None,
        help="Apply Windows reserved-name and trailing-character rules",
    )
    parser.add_argument(
        "--no-windows",
        dest="windows",
        action="store_const",
        const=False,
        help="Skip Windows rules (default on non-Windows hosts)",
    )
    parser.add_argument(
        "--truncate",
        dest="truncate",
        action="store_const",
        const=True,
        default=None,
        help="Cap the result at 255 characters (default)",
    )
    parser.add_argument(
        "--no-truncate",
        dest="truncate",
        action="store_const",
        const=False,
        help="Do not cap the result length",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to STDERR")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse flags; one leftover dash argument becomes the name."""
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if len(extras) == 1 and args.filename is None:
        args.filename = extras[0]
    elif extras:
        parser.error("unrecognized arguments: %s" % " ".join(extras))
    return args


def read_input(filename: Optional[str]) -> str:
    """Return the positional name, or all of STDIN."""
    if filename is not None and filename != "-":
        return filename
    logger.debug("Reading name from STDIN")
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = Config()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        name = read_input(args.filename)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read STDIN: %s", e)
        return 1

    options = config.options(
        replacement=args.replacement,
        windows=args.windows,
        truncate=args.truncate,
    )
    logger.debug(
        "Options: windows=%s truncate=%s replacement=%r",
        options.windows, options.truncate, options.replacement,
    )

    output = sanitize_with_options(name, options)
    if output != name:
        logger.debug("Sanitized %r -> %r", name, output)

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
