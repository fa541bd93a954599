from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import SOURCE_SUFFIX, RunOptions, run_file
from .errors import ArgumentError, BFError
from .report import Colors, format_report, paint

HELP_EPILOG = f"""
Source files may be documented with // line comments and /* block comments */,
which are stripped before execution along with all whitespace.

The memory is 30,000 blocks, and each block cannot leave the inclusive range
0-255. Moving the pointer off either end of the tape is an error too.

Files must have the {SOURCE_SUFFIX} extension.
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(
            message=f"{message}.",
            hint="If this is meant to be a file path, wrap it in \"quotation marks\".",
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="bfstrict",
        description="Strict brainfuck interpreter (no cell or pointer wrapping).",
        epilog=HELP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", help=f"program to run ({SOURCE_SUFFIX})")
    parser.add_argument("-d", "--debug", action="store_true", help="print the memory breakdown after the run")
    parser.add_argument("-v", "--verbose", action="store_true", help="log interpreter activity to stderr")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    return parser


def _report_error(e: BFError, *, color: bool) -> None:
    print(paint(str(e), Colors.RED, enabled=color))
    if e.context:
        print(e.context)
    if e.hint:
        print(paint(f"Hint: {e.hint}", Colors.CYAN, enabled=color))


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        argv = sys.argv[1:] if argv is None else argv
        _report_error(e, color="--no-color" not in argv)
        return 1

    if args.file is None:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)5s %(name)s: %(message)s")

    color = not args.no_color
    print()
    try:
        result = run_file(args.file, options=RunOptions(show_memory=args.debug), stdout=sys.stdout)
    except BFError as e:
        print()
        _report_error(e, color=color)
        return 1

    if result.notice:
        print(paint(result.notice, Colors.RED, enabled=color))
    print()

    if result.memory is not None:
        print()
        print(format_report(result.memory, color=color))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
