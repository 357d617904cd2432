"""Parser contract and the default JavaScript parser."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from .javascript import JavaScriptParser
from .tree import SyntaxTree, Visitor, iter_nodes, traverse


class SourceParser(Protocol):
    """Contract for parsers plugged into the extractor."""

    def read(self, file_path: Path) -> str:
        """Return the source text of ``file_path``."""

    def parse(self, file_path: Path, code: Optional[str] = None) -> SyntaxTree:
        """Parse source text into a syntax tree, raising ``ParseError`` when malformed."""


__all__ = [
    "JavaScriptParser",
    "SourceParser",
    "SyntaxTree",
    "Visitor",
    "iter_nodes",
    "traverse",
]
