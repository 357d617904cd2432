"""Core data models shared across apidoc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .parsing.tree import SyntaxTree

# Field name -> key written to index.json, in output order.
_OUTPUT_KEYS = (
    ("doc_id", "__docId__"),
    ("kind", "kind"),
    ("name", "name"),
    ("memberof", "memberof"),
    ("longname", "longname"),
    ("access", "access"),
    ("static", "static"),
    ("export", "export"),
    ("import_path", "importPath"),
    ("import_style", "importStyle"),
    ("description", "description"),
    ("params", "params"),
    ("return_type", "return"),
    ("file_path", "filePath"),
    ("line_number", "lineNumber"),
    ("undocumented", "undocumented"),
    ("content", "content"),
)


@dataclass
class DocParam:
    """A documented function or method parameter."""

    name: str
    types: List[str] = field(default_factory=list)
    description: str = ""
    optional: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "types": list(self.types),
            "description": self.description,
            "optional": self.optional,
        }


@dataclass
class DocObject:
    """One normalized documentation entry.

    ``doc_id`` is assigned by the pipeline in creation order and is only used to
    break ties during duplicate resolution.
    """

    kind: str
    longname: str
    name: str
    static: bool = False
    access: str = "public"
    content: Optional[str] = None
    doc_id: Optional[int] = None
    memberof: Optional[str] = None
    export: Optional[bool] = None
    import_path: Optional[str] = None
    import_style: Optional[str] = None
    description: Optional[str] = None
    params: Optional[List[DocParam]] = None
    return_type: Optional[List[str]] = None
    file_path: Optional[str] = None
    line_number: Optional[int] = None
    undocumented: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON payload for this doc, omitting unset optional fields."""
        payload: Dict[str, Any] = {}
        for attribute, key in _OUTPUT_KEYS:
            value = getattr(self, attribute)
            if value is None:
                continue
            if attribute == "params":
                value = [param.to_dict() for param in value]
            elif attribute == "return_type":
                value = {"types": list(value)}
            payload[key] = value
        return payload


@dataclass
class SourceAst:
    """Syntax tree of one parsed file, keyed by its path relative to the source root."""

    relative_path: str
    tree: SyntaxTree


@dataclass
class GenerationResult:
    """Outcome of a full generation run."""

    docs: List[DocObject]
    asts: List[SourceAst]
    skipped: List[str] = field(default_factory=list)


__all__ = ["DocObject", "DocParam", "GenerationResult", "SourceAst"]
