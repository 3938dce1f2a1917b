"""Generic text indentation helpers.

All helpers are pure functions over multiline strings (LF separated), except
:func:`blocks`, which also accepts an already split sequence of lines.

Only space and TAB count as indentation and each counts as one column, so
text mixing both is hard to reason about. Use one or the other.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import NamedTuple

_LEADING_WS_RE = re.compile(r"[ \t]*")
_INDENT_CHARS = (" ", "\t")
# space, TAB, LF, CR, NUL and VT; other whitespace is content
_TRIM_CHARS = " \t\n\r\0\x0b"


class IndentDepthError(IndexError):
    """Raised when ``set_indents`` receives fewer depths than there are lines."""

    def __init__(self, line_index: int, line_count: int) -> None:
        super().__init__(
            f"no indentation depth for line index {line_index} "
            f"({line_count} lines need {line_count} depths)"
        )
        self.line_index = line_index
        self.line_count = line_count


class Block(NamedTuple):
    """A line merged with its indented continuation lines."""

    line_number: int
    text: str

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + 1

    @property
    def end_line(self) -> int:
        """Line number of the last physical line in the block.

        Blank lines skipped after the block make the next block start later
        than ``end_line + 1``.
        """
        return self.line_number + self.line_count - 1


def leading_whitespace(line: str) -> str:
    match = _LEADING_WS_RE.match(line)
    return match.group(0) if match else ""


def _depth(line: str) -> int:
    return len(leading_whitespace(line))


def blocks(raw_lines: str | Iterable[str]) -> list[Block]:
    """Group indented continuation lines with the line before them.

    A string is split on LF after CRLF is folded to LF. Blank lines are
    dropped but still counted, so every ``line_number`` matches the full
    input. Trailing whitespace (CR included) is removed from every line.
    """

    if isinstance(raw_lines, str):
        raw_lines = raw_lines.replace("\r\n", "\n").split("\n")

    result: list[Block] = []
    for lineno, line in enumerate(raw_lines, start=1):
        if len(line.strip(_TRIM_CHARS)) == 0:
            continue
        if result and line.startswith(_INDENT_CHARS):
            last = result[-1]
            result[-1] = last._replace(text=f"{last.text}\n{line.rstrip(_TRIM_CHARS)}")
            continue
        result.append(Block(lineno, line.rstrip(_TRIM_CHARS)))
    return result


def unindent(text: str) -> str:
    """Shift lines left until at least one of them starts at column 0.

    The first line is neither measured nor shifted, which suits literals
    written right after an opening quote::

        unindent('''First
            Second
            Third''')  # -> "First\\nSecond\\nThird"

    To keep nested indentation relative to the first item, start the text
    with a blank line instead. The result is stripped as a whole.
    """

    first, *rest = text.split("\n")
    if rest:
        shift = min(_depth(line) for line in rest)
        rest = [line[shift:] for line in rest]
    return "\n".join([first, *rest]).strip(_TRIM_CHARS)


def indent(text: str, size: int = 2, ws: str = " ") -> str:
    """Prefix every line with ``size`` copies of ``ws``.

    ``ws`` is repeated as given; a TAB gets no special treatment.
    """

    if size < 0:
        raise ValueError(f"indent size must be non-negative, got {size}")
    prefix = ws * size
    return "\n".join(f"{prefix}{line}" for line in text.split("\n"))


def set_indents(text: str, depths: Sequence[int], append: bool = False) -> str:
    """Give each line its own indentation, ``depths[i]`` spaces for line ``i``.

    By default existing indentation is replaced. With ``append=True`` the new
    spaces go in front of whatever indentation the line already has. Extra
    depths are ignored; missing ones raise :class:`IndentDepthError`.
    """

    lines = text.split("\n")
    if len(depths) < len(lines):
        raise IndentDepthError(len(depths), len(lines))

    result: list[str] = []
    for idx, line in enumerate(lines):
        depth = depths[idx]
        if depth < 0:
            raise ValueError(f"indentation depth for line index {idx} is negative: {depth}")
        body = line if append else line[_depth(line) :]
        result.append(" " * depth + body)
    return "\n".join(result)


def get_indents(text: str) -> list[int]:
    """Return the number of leading space/TAB characters on each line."""
    return [_depth(line) for line in text.split("\n")]


__all__ = [
    "Block",
    "IndentDepthError",
    "blocks",
    "get_indents",
    "indent",
    "leading_whitespace",
    "set_indents",
    "unindent",
]
