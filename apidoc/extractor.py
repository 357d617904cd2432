"""Per-file parse and extraction with failure isolation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from .diagnostics import report_invalid_file, report_invalid_node
from .errors import ParseError
from .factory import DocExtractorFactory, DocFactory, PathResolver
from .logging import get_logger
from .models import DocObject
from .parsing import JavaScriptParser, SourceParser, SyntaxTree, iter_nodes
from .plugins import PluginHost


@dataclass
class Extracted:
    """The file parsed and every node was offered to the extractor."""

    file_path: Path
    docs: List[DocObject]
    tree: SyntaxTree


@dataclass
class Recoverable:
    """The file could not be parsed; it contributes nothing and the run continues."""

    file_path: Path
    error: ParseError


@dataclass
class Fatal:
    """The extractor raised on a node; the run must abort."""

    file_path: Path
    node: Any
    cause: BaseException


FileOutcome = Union[Extracted, Recoverable, Fatal]


class Extractor:
    """Runs the parser and the tree-to-doc extractor over single files."""

    def __init__(
        self,
        host: PluginHost,
        parser: Optional[SourceParser] = None,
        factory: DocExtractorFactory = DocFactory,
    ) -> None:
        self.host = host
        self.parser = parser if parser is not None else JavaScriptParser()
        self.factory = factory
        self.logger = get_logger("extractor")

    def extract(
        self,
        root: Path,
        file_path: Path,
        package_name: Optional[str] = None,
        main_file_path: Optional[str] = None,
    ) -> FileOutcome:
        """Parse ``file_path`` and collect its doc objects."""
        self.logger.info("parse: %s", file_path)
        try:
            code = self.parser.read(file_path)
            code = self.host.on_handle_code(code, file_path)
            tree = self.parser.parse(file_path, code)
        except ParseError as exc:
            report_invalid_file(exc)
            return Recoverable(file_path=file_path, error=exc)

        tree = self.host.on_handle_ast(tree, file_path)

        path_resolver = PathResolver(root, file_path, package_name, main_file_path)
        factory = self.factory(tree, path_resolver)
        for node, parent in iter_nodes(tree):
            try:
                factory.push(node, parent)
            except Exception as exc:
                report_invalid_node(file_path, node)
                return Fatal(file_path=file_path, node=node, cause=exc)

        self.logger.debug("Extracted %d docs from %s", len(factory.results), file_path)
        return Extracted(file_path=file_path, docs=list(factory.results), tree=tree)


def read_package_metadata(package_path: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(name, main)`` from a package manifest, or ``(None, None)``."""
    if not package_path:
        return None, None
    try:
        payload = json.loads(Path(package_path).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None, None
    if not isinstance(payload, dict):
        return None, None
    name = payload.get("name")
    main = payload.get("main")
    if isinstance(main, str):
        # "main" is relative to the directory holding the manifest.
        main = str(Path(package_path).parent / main)
    else:
        main = None
    return (name if isinstance(name, str) else None), main


__all__ = [
    "Extracted",
    "Extractor",
    "Fatal",
    "FileOutcome",
    "Recoverable",
    "read_package_metadata",
]
