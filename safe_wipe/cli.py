"""
Command-line interface for safe-wipe.

This module is responsible for argument parsing and delegating to the
guarded wipe in the api module. It is the only place that turns
failures into exit codes.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional

from .api import wipe
from .logging_utils import configure_logging


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="safe-wipe",
        description=(
            "Recursively delete a directory, asking for confirmation first "
            "unless it is empty."
        ),
    )

    parser.add_argument("directory", help="Directory to wipe.")
    parser.add_argument(
        "--parent",
        help="Refuse to wipe DIRECTORY if it contains (or is) this path.",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        metavar="NAME",
        help=(
            "File name to disregard when deciding whether the directory is "
            "empty (can be specified multiple times; replaces the defaults)."
        ),
    )
    parser.add_argument(
        "--no-ignore",
        action="store_true",
        help="Do not disregard any file names.",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Wipe a non-empty directory without asking.",
    )
    parser.add_argument(
        "--no-interactive",
        dest="interactive",
        action="store_false",
        help="Never prompt; abort if the directory is not empty.",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Do not print failure messages to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    return parser


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {
        "parent": args.parent,
        "interactive": args.interactive,
        "force": args.force,
        "silent": args.silent,
    }
    if args.no_ignore:
        overrides["ignore"] = []
    elif args.ignore:
        overrides["ignore"] = args.ignore
    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(verbosity=args.verbose, stream=sys.stderr)

    try:
        asyncio.run(wipe(args.directory, _overrides_from_args(args)))
    except KeyboardInterrupt:
        return 130
    except Exception:  # noqa: BLE001
        # The failure message has already been written to stderr unless
        # --silent was given.
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
