"""Tree-to-doc extraction: the default factory and its contract."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from ..models import DocObject
from ..parsing.tree import SyntaxTree
from .comments import DocComment, parse_doc_comment
from .doc_factory import DocFactory
from .path_resolver import PathResolver


class DocExtractor(Protocol):
    """Contract for per-file extractors driven by the tree walker."""

    results: List[DocObject]

    def push(self, node: Any, parent: Optional[Any]) -> None:
        """Inspect ``node`` and append any doc objects it declares."""


class DocExtractorFactory(Protocol):
    def __call__(self, tree: SyntaxTree, path_resolver: PathResolver) -> DocExtractor:
        ...


__all__ = [
    "DocComment",
    "DocExtractor",
    "DocExtractorFactory",
    "DocFactory",
    "PathResolver",
    "parse_doc_comment",
]
