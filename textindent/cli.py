"""Command-line front end for :mod:`textindent.indentation`."""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from .config import load_config
from .indentation import (
    IndentDepthError,
    blocks,
    get_indents,
    indent,
    set_indents,
    unindent,
)

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textindent", description="Text indentation tools.")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path", nargs="?", help="input file (default: stdin)")
        return cmd

    add("blocks", "group indented continuation lines with their line numbers")
    add("unindent", "remove common indentation from all lines but the first")
    cmd = add("indent", "indent every line")
    cmd.add_argument("-n", "--size", type=int, default=None)
    cmd.add_argument("--tabs", action="store_true", help="indent with TAB characters")
    cmd = add("set-indents", "set the indentation of each line")
    cmd.add_argument(
        "-d", "--depth", dest="depths", type=int, action="append", default=[], metavar="N"
    )
    cmd.add_argument("--append", action="store_true", help="add to existing indentation")
    add("get-indents", "print the indentation depth of each line")
    return parser


def _read_input(path: str | None, stdin: TextIO) -> str:
    if path is None:
        text = stdin.read()
    else:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    if text.endswith("\r\n"):
        return text[:-2]
    return text[:-1] if text.endswith("\n") else text


def _format_blocks(text: str) -> str:
    out: list[str] = []
    for block in blocks(text):
        first, *rest = block.text.split("\n")
        out.append(f"{block.line_number}: {first}")
        out.extend(rest)
    return "\n".join(out)


def _run(args: argparse.Namespace, text: str) -> str:
    if args.command == "blocks":
        return _format_blocks(text)
    if args.command == "unindent":
        return unindent(text)
    if args.command == "indent":
        cfg = load_config()
        size = cfg["indent_size"] if args.size is None else args.size
        ws = "\t" if args.tabs else cfg["indent_char"]
        return indent(text, size, ws)
    if args.command == "set-indents":
        return set_indents(text, args.depths, append=args.append)
    return "\n".join(str(depth) for depth in get_indents(text))


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = _build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    try:
        text = _read_input(args.path, stdin)
        log.debug("Running %s on %d characters", args.command, len(text))
        result = _run(args, text)
    except OSError as exc:
        log.error("Cannot read %s: %s", args.path, exc)
        return 1
    except (IndentDepthError, ValueError) as exc:
        log.error("%s: %s", args.command, exc)
        return 1

    stdout.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
