"""Command-line entry point: interpret files, or standard input with '-'."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from cinder import __version__
from cinder.config import get_log_level
from cinder.interpreter import Interpreter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cinder", description="Run Cinder programs.")
    parser.add_argument(
        "files",
        nargs="*",
        default=["-"],
        help="source files to interpret in order; '-' reads standard input",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print results")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interpreter = Interpreter()
    echo = None if args.quiet else sys.stdout
    for filename in args.files:
        if filename == "-":
            ok = interpreter.run_source(sys.stdin, echo=echo)
        else:
            ok = interpreter.run_file(filename, echo=echo)
        if not ok:
            return 1
    return 0
