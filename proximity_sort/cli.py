"""Command-line interface for proximity-sort."""

from __future__ import annotations

import argparse
import os
import sys
from typing import BinaryIO

from proximity_sort.pipeline import SortPipeline
from proximity_sort.utils.config import CONFIG_ENV_VAR, ProximitySortConfig, load_config

HELP_FLAGS = ("-h", "--help")
KNOWN_FLAGS = HELP_FLAGS + ("--print0", "-0", "--read0")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proximity-sort",
        description="Sort paths read from stdin by their proximity to PATH",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "path",
        metavar="PATH",
        nargs="*",
        help="Compute the proximity to this path",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Print help",
    )
    parser.add_argument(
        "--print0",
        action="store_true",
        help="Print output delimited by ASCII NUL characters instead of newline characters",
    )
    parser.add_argument(
        "-0",
        "--read0",
        action="store_true",
        help="Read input delimited by ASCII NUL characters instead of newline characters",
    )
    return parser


def main(
    argv: list[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    """CLI entry point for proximity-sort.

    Returns:
        Process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    # Dash arguments must match a flag exactly and are taken in order, so
    # help wins only if it comes before anything unrecognized.
    for arg in argv:
        if not arg.startswith("-"):
            continue
        if arg in HELP_FLAGS:
            parser.print_help(sys.stdout)
            return 0
        if arg not in KNOWN_FLAGS:
            print(f"unrecognized argument: '{arg}'", file=sys.stderr)
            return 1

    args = parser.parse_intermixed_args(argv)

    paths = args.path or []
    path = paths[-1] if paths else ""
    if not path:
        print("<PATH> cannot be empty.\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    config_path = os.environ.get(CONFIG_ENV_VAR)
    config = load_config(config_path) if config_path else ProximitySortConfig()

    if args.read0:
        config.sort.read0 = True
    if args.print0:
        config.sort.print0 = True

    pipeline = SortPipeline(config)
    pipeline.run(
        path,
        stdin if stdin is not None else sys.stdin.buffer,
        stdout if stdout is not None else sys.stdout.buffer,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
