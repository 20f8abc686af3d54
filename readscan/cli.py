"""Tokenizer driver: split a file into tokens with a Scanner."""

from __future__ import annotations

import argparse
import sys

import regex
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from readscan.core.config import DEFAULT_CAPACITY
from readscan.core.errors import ScannerError
from readscan.core.scanner import Scanner
from readscan.io.setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="readscan", description="Print every token matching PATTERN")
    parser.add_argument("pattern", help="regex each token must match")
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    parser.add_argument("--skip", metavar="REGEX", help="regex discarded before each token")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="initial buffer capacity")
    parser.add_argument("--verbose", action="store_true", help="report buffer growth and refills")
    return parser


def tokenize(scanner: Scanner, pattern: str, skip: str | None, console: Console) -> int:
    """Print tokens until the input is used up. Returns the exit status."""
    while True:
        if skip is not None:
            scanner.skip(skip)
        if scanner.at_end():
            break
        token = scanner.read(pattern)
        if not token:
            console.print(f"[red]no token at offset {scanner.offset}[/] (next: {escape(repr(scanner.peek()))})", highlight=False)
            return 1
        console.print(token, markup=False, highlight=False)
    return 0


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    if args.verbose:
        setup_logging(console)

    try:
        if args.file is None:
            scanner = Scanner.from_stream(sys.stdin, args.capacity)
            return tokenize(scanner, args.pattern, args.skip, console)
        with open(args.file, encoding="utf-8") as stream:
            scanner = Scanner.from_stream(stream, args.capacity)
            return tokenize(scanner, args.pattern, args.skip, console)
    except (OSError, ScannerError, ValidationError, regex.error) as e:
        console.print(f"[red]error:[/] {escape(str(e))}", highlight=False)
        return 1
