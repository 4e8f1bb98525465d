"""Command-line front door for dirlist.

Parses CLI options, merges them onto persisted defaults, and builds one
``DisplayOptions`` value. Listings go to stdout, failures to stderr.
"""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .config import load_default_flags
from .listing import render_targets
from .log import configure_logging
from .options import BOOLEAN_FLAG_FIELDS, DisplayOptions, SortKey

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirlist",
        description="List directory contents with optional icons, colors, and attributes.",
    )
    parser.add_argument("-a", "--all", action="store_true", help="Display all files, including hidden.")
    parser.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="Display file attributes, one file per line. Columns: permissions, owner, group, links, size, date, time, name.",
    )
    parser.add_argument("-r", "--recurse", action="store_true", help="Recurse into directories.")
    parser.add_argument("-c", "--color", action="store_true", help="Colorize the output.")
    parser.add_argument("-i", "--icons", action="store_true", help="Display icons denoting file type.")
    parser.add_argument("-o", "--one-line", action="store_true", help="Display each file on its own line.")
    parser.add_argument("--human-readable", action="store_true", help="Display human readable file sizes.")
    parser.add_argument(
        "-d",
        "--directory",
        action="store_true",
        help="List directories themselves, not their contents.",
    )
    parser.add_argument("-F", "--classify", action="store_true", help="Append indicator (/, *) to entries.")

    sort_group = parser.add_mutually_exclusive_group()
    sort_group.add_argument(
        "-t",
        "--sort-time",
        dest="sort",
        action="store_const",
        const=SortKey.TIME.value,
        help="Sort by modification time, newest first.",
    )
    sort_group.add_argument(
        "-S",
        "--sort-size",
        dest="sort",
        action="store_const",
        const=SortKey.SIZE.value,
        help="Sort by file size, largest first.",
    )
    sort_group.add_argument(
        "--sort",
        dest="sort",
        choices=[key.value for key in SortKey],
        help="Sort key (default: name).",
    )

    parser.add_argument("--no-config", action="store_true", help="Ignore persisted default flags.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries and lookups to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "paths",
        nargs="*",
        help="List files at one or more paths, omit for current directory.",
    )
    return parser


def options_from_args(args: argparse.Namespace, defaults: dict[str, object]) -> DisplayOptions:
    """Merge parsed flags onto persisted defaults.

    Boolean flags can only switch a default on; an explicit sort flag replaces
    the persisted sort key.
    """
    values: dict[str, object] = {}
    for flag in BOOLEAN_FLAG_FIELDS:
        values[flag] = bool(getattr(args, flag)) or defaults.get(flag) is True
    values["sort"] = args.sort if args.sort is not None else defaults.get("sort")
    return DisplayOptions.from_mapping(values)


def _write_undecodable_names_verbatim() -> None:
    # Names os.scandir could not decode carry surrogate escapes; emit their original bytes.
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def _use_environment_collation() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("falling back to default collation locale")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and print listings; returns the process exit status.

    Status is 1 when any target could not be listed, 0 otherwise.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _write_undecodable_names_verbatim()
    configure_logging(verbose=args.verbose)
    _use_environment_collation()

    defaults = {} if args.no_config else load_default_flags()
    options = options_from_args(args, defaults)

    status = 0
    for result in render_targets([Path(path) for path in args.paths], options):
        if result.error is not None:
            sys.stdout.flush()
            sys.stderr.write(f"dirlist: {result.error}\n")
            status = 1
            continue
        sys.stdout.write(result.output)
    sys.stdout.flush()
    return status


if __name__ == "__main__":
    sys.exit(main())
