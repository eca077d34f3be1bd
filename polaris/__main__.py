"""Command-line driver: run a script, or start a REPL when none is given."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from polaris import __version__
from polaris.config import get_include_dirs
from polaris.errors import PolarisError
from polaris.interpreter import Interpreter

PROMPT = "polaris> "


def _split_dirs(value: str) -> list[str]:
    return [d for d in value.split(os.pathsep) if d]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polaris", description="Polaris Lisp interpreter")
    parser.add_argument("file", nargs="?", help="script to run; omit to enter the REPL")
    parser.add_argument(
        "-i", "--include", action="append", default=[], type=_split_dirs,
        help=f"'{os.pathsep}'-separated list of include directories",
    )
    parser.add_argument("-v", "--version", action="version", version=f"polaris version {__version__}")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def repl(itp: Interpreter) -> None:
    show_prompt = True
    while True:
        try:
            line = input(PROMPT if show_prompt else "")
        except EOFError:
            print()
            return
        show_prompt = itp.feed(line, print_result=True)


def execute(itp: Interpreter, file: str) -> int:
    if not os.path.isfile(file):
        print(f"Item: {file} does not exist", file=sys.stderr)
        return 1
    with open(file, encoding="utf-8") as fh:
        for line in fh:
            try:
                itp.feed(line.rstrip("\r\n"))
            except PolarisError:
                # already reported through the error callback
                return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    include_dirs = get_include_dirs(d for group in args.include for d in group)

    if args.file is None:
        repl(Interpreter(include_dirs, recoverable=True))
        return 0
    return execute(Interpreter(include_dirs), args.file)


if __name__ == "__main__":
    sys.exit(main())
