"""Command line entry point for ``tomlsh`` / ``python -m tomlsh.cli``."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import IO

from . import __version__
from .errors import TomlshError
from .getter import get_path, split_path
from .reader import TOMLDecodeError, parse, read_input
from .shell import fmt_bash

_logger = logging.getLogger(__name__)

PROG = "tomlsh"

HEADER = """\
Extract a value from a TOML document and print it in a form the shell can use.

  scalars  print bare:               port=$(tomlsh -f app.toml server.port)
  arrays   print space separated:    hosts=($(tomlsh -f app.toml server.hosts))
  tables   print [key]=value pairs:  eval "declare -A env=($(tomlsh -f app.toml env))"
"""


@dataclass
class Options:
    pattern: str
    input: str | None = None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Command line TOML processor.",
    )
    parser.add_argument("pattern", nargs="?", help="dotted key path, e.g. server.port")
    parser.add_argument(
        "-f", "--file", dest="input", metavar="FILE",
        help="read the document from FILE instead of stdin",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"{PROG} {__version__}")
    return parser


def run(opts: Options, out: IO[str]) -> None:
    """Read, resolve and render one document according to *opts*."""
    root = parse(read_input(opts.input))
    path = split_path(opts.pattern)
    _logger.debug("resolving %s", path)
    out.write(fmt_bash(get_path(root, path)))


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.pattern is None:
        print(f"{PROG} - command line TOML processor [version {__version__}]\n", file=sys.stderr)
        print(HEADER, file=sys.stderr)
        parser.print_help(sys.stderr)
        return 0

    try:
        run(Options(pattern=args.pattern, input=args.input), sys.stdout)
    except (TomlshError, TOMLDecodeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
