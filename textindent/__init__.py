"""Text indentation utilities."""
from __future__ import annotations

from .indentation import (
    Block,
    IndentDepthError,
    blocks,
    get_indents,
    indent,
    leading_whitespace,
    set_indents,
    unindent,
)

__version__ = "1.0.0"

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
