"""Tree-sitter backed JavaScript parser."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import tree_sitter
import tree_sitter_javascript

from ..errors import ParseError
from ..logging import get_logger
from .tree import SyntaxTree, iter_nodes


class JavaScriptParser:
    """Parses ES2015+ sources into :class:`SyntaxTree` objects.

    tree-sitter recovers from syntax errors by inserting ``ERROR`` and missing
    nodes; any such node makes the file invalid and raises :class:`ParseError`.
    """

    language_name = "javascript"

    def __init__(self) -> None:
        self._language = tree_sitter.Language(tree_sitter_javascript.language())
        self._parser = tree_sitter.Parser(self._language)
        self.logger = get_logger("parser")

    def read(self, file_path: Path) -> str:
        """Return the file's source text, raising :class:`ParseError` when unreadable."""
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(file_path, f"file is not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise ParseError(file_path, f"unable to read file: {exc}") from exc

    def parse(self, file_path: Path, code: Optional[str] = None) -> SyntaxTree:
        """Parse ``code`` (or the file contents) and return its syntax tree."""
        if code is None:
            code = self.read(file_path)
        source = code.encode("utf-8")
        tree = self._parser.parse(source)
        syntax_tree = SyntaxTree(
            root=tree.root_node,
            source=source,
            file_path=file_path,
            language=self.language_name,
        )
        if tree.root_node.has_error:
            self._raise_for_error(syntax_tree)
        self.logger.debug("Parsed %s (%d bytes)", file_path, len(source))
        return syntax_tree

    @staticmethod
    def _raise_for_error(syntax_tree: SyntaxTree) -> None:
        for node, _parent in iter_nodes(syntax_tree):
            if node.type == "ERROR" or node.is_missing:
                raise ParseError(
                    syntax_tree.file_path,
                    _describe(node, syntax_tree),
                    line=node.start_point[0] + 1,
                    column=node.start_point[1] + 1,
                )
        raise ParseError(syntax_tree.file_path, "syntax error")


def _describe(node: Any, syntax_tree: SyntaxTree) -> str:
    if node.is_missing:
        return f"missing {node.type!r}"
    snippet = syntax_tree.node_text(node).strip().splitlines()
    token = snippet[0][:40] if snippet else ""
    return f"unexpected token {token!r}" if token else "unexpected end of input"


__all__ = ["JavaScriptParser"]
