"""Syntax tree wrapper and pre-order walker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

Visitor = Callable[[Any, Optional[Any]], None]


@dataclass
class SyntaxTree:
    """A parsed source file: the tree-sitter tree plus the bytes it was parsed from."""

    root: Any
    source: bytes
    file_path: Path
    language: str = "javascript"

    def node_text(self, node: Any) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable rendering of the whole tree."""
        return {
            "type": "File",
            "language": self.language,
            "program": self._node_to_dict(self.root),
        }

    def _node_to_dict(self, node: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": node.type,
            "start": _point(node.start_point),
            "end": _point(node.end_point),
        }
        if not node.children:
            payload["text"] = self.node_text(node)
            return payload
        payload["children"] = [self._node_to_dict(child) for child in node.children]
        return payload


def iter_nodes(tree: SyntaxTree) -> Iterator[Tuple[Any, Optional[Any]]]:
    """Yield ``(node, parent)`` for every node exactly once, in pre-order."""
    stack: List[Tuple[Any, Optional[Any]]] = [(tree.root, None)]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        for child in reversed(node.children):
            stack.append((child, node))


def traverse(tree: SyntaxTree, visit: Visitor) -> None:
    """Call ``visit(node, parent)`` for every node of ``tree`` in pre-order."""
    for node, parent in iter_nodes(tree):
        visit(node, parent)


def _point(point: Any) -> Dict[str, int]:
    row, column = point[0], point[1]
    return {"line": row + 1, "column": column}


__all__ = ["SyntaxTree", "Visitor", "iter_nodes", "traverse"]
