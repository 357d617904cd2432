"""Base class for apidoc plugins."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from ..config import GenerationConfig
    from ..models import DocObject
    from ..parsing.tree import SyntaxTree


class PublishPrimitives(Protocol):
    """The three destination-bound operations handed to ``on_publish``."""

    def write(self, file_path: str, content: str | bytes, encoding: str = "utf-8") -> Path:
        ...

    def copy(self, source_path: Path | str, dest_path: str) -> Path:
        ...

    def read(self, file_path: str) -> str:
        ...


class Plugin:
    """Observes and rewrites pipeline stages.

    Each hook defaults to an identity passthrough, so subclasses override only
    the stages they care about. Hooks that take a value must return the value
    (possibly rewritten) for the next plugin in the chain.
    """

    name: str = ""

    def __init__(self, option: Optional[Mapping[str, Any]] = None) -> None:
        self.option: Dict[str, Any] = dict(option or {})

    def on_start(self) -> None:
        """Called once before the configuration is normalized."""

    def on_handle_config(self, config: "GenerationConfig") -> "GenerationConfig":
        return config

    def on_handle_code(self, code: str, file_path: Path) -> str:
        return code

    def on_handle_ast(self, tree: "SyntaxTree", file_path: Path) -> "SyntaxTree":
        return tree

    def on_handle_docs(self, docs: List["DocObject"]) -> List["DocObject"]:
        return docs

    def on_handle_content(self, content: str | bytes, file_path: Path) -> str | bytes:
        return content

    def on_publish(self, writer: PublishPrimitives) -> None:
        """Render final output through ``writer``; failures abort the run."""

    def on_complete(self) -> None:
        """Called once after publishing finished."""


__all__ = ["Plugin", "PublishPrimitives"]
