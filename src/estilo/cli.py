"""Command-line entry point: parse a stylesheet and print it.

    estilo theme.css
    estilo --json theme.css
    estilo --strict theme.css
    cat theme.css | estilo -
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from estilo import __version__
from estilo.config import ParseConfig, parse_config_context
from estilo.parser import Parser
from estilo.printer import format_stylesheet
from estilo.serialization import to_json


def _excerpt_width(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="estilo",
        description="Parse a CSS-like stylesheet and print its rules",
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("path", help="stylesheet file, or - to read from stdin")
    p.add_argument("--json", action="store_true", help="print the stylesheet as JSON")
    p.add_argument(
        "--strict",
        action="store_true",
        help="print nothing but the error when the stylesheet has a syntax error",
    )
    p.add_argument(
        "--excerpt-width",
        type=_excerpt_width,
        default=ParseConfig().excerpt_width,
        metavar="N",
        help="maximum width of the source excerpt in error messages",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return p


def _read_source(path: str) -> tuple[str, str | None]:
    if path == "-":
        return sys.stdin.read(), None
    return Path(path).read_text(encoding="utf-8"), path


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source, source_file = _read_source(args.path)
    except OSError as e:
        sys.stderr.write(f"estilo: cannot read {args.path}: {e.strerror or e}\n")
        return 2

    config = ParseConfig(strict=args.strict, excerpt_width=args.excerpt_width)
    with parse_config_context(config):
        parser = Parser(source, source_file=source_file)
        stylesheet = parser.parse()

    error = parser.last_error
    if error is not None:
        error.print(file=sys.stderr)
        if config.strict:
            return 1

    # Lenient mode still prints whatever parsed before the error
    if args.json:
        sys.stdout.write(to_json(stylesheet, indent=2) + "\n")
    elif stylesheet:
        sys.stdout.write(format_stylesheet(stylesheet) + "\n")
    return 0 if error is None else 1


if __name__ == "__main__":
    raise SystemExit(main())
