"""Writes the doc corpus and syntax trees, then hands output over to plugins."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Iterable, Sequence

from .logging import get_logger
from .models import DocObject, SourceAst
from .plugins import PluginHost

INDEX_FILENAME = "index.json"
AST_DIRNAME = "ast"
AST_SOURCE_DIRNAME = "source"


class PublishWriter:
    """Destination-bound write/copy/read primitives given to ``on_publish``."""

    def __init__(self, destination: Path, host: PluginHost) -> None:
        self.destination = destination
        self.host = host
        self.logger = get_logger("publisher")

    def write(self, file_path: str, content: str | bytes, encoding: str = "utf-8") -> Path:
        """Persist ``content`` after ``on_handle_content``; parent directories are created."""
        target = self._resolve(file_path)
        content = self.host.on_handle_content(content, target)
        self.logger.info("output: %s", target)
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding=encoding)
        return target

    def copy(self, source_path: Path | str, dest_path: str) -> Path:
        """Copy a file or a whole directory tree into the destination."""
        source = Path(source_path)
        target = self._resolve(dest_path)
        self.logger.info("output: %s", target)
        if source.is_dir():
            shutil.copytree(source, target, dirs_exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
        return target

    def read(self, file_path: str) -> str:
        """Return the text of a file previously written to the destination."""
        return self._resolve(file_path).read_text(encoding="utf-8")

    def _resolve(self, file_path: str) -> Path:
        return (self.destination / file_path).resolve()


class Publisher:
    """Serializes run results under the destination directory."""

    def __init__(self, destination: Path | str, host: PluginHost) -> None:
        self.destination = Path(destination).expanduser().resolve()
        self.host = host
        self.logger = get_logger("publisher")

    def dump_docs(self, docs: Sequence[DocObject]) -> Path:
        payload = json.dumps([doc.to_dict() for doc in docs], indent=2, ensure_ascii=False)
        return self._output(self.destination / INDEX_FILENAME, payload)

    def dump_asts(self, asts: Iterable[SourceAst]) -> list[Path]:
        written: list[Path] = []
        base = self.destination / AST_DIRNAME / AST_SOURCE_DIRNAME
        for source_ast in asts:
            payload = json.dumps(source_ast.tree.to_dict(), indent=2, ensure_ascii=False)
            written.append(self._output(base / f"{source_ast.relative_path}.json", payload))
        return written

    def publish(self) -> None:
        """Let plugins render the final output; a failure raises ``PublishError``."""
        writer = PublishWriter(self.destination, self.host)
        self.host.on_publish(writer)

    def _output(self, path: Path, payload: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")
        self.logger.debug("Wrote %s", path)
        return path


__all__ = ["AST_DIRNAME", "INDEX_FILENAME", "PublishWriter", "Publisher"]
