"""Exception hierarchy for apidoc generation runs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ApidocError(RuntimeError):
    """Base class for every error raised by the generation pipeline."""


class ConfigError(ApidocError):
    """Raised when the configuration is incomplete or cannot be parsed."""


class PluginError(ApidocError):
    """Raised when a plugin descriptor cannot be loaded."""


class ParseError(ApidocError):
    """Raised by parsers when a source file is malformed.

    Parse errors are isolated per file: the pipeline logs them and skips the file.
    """

    def __init__(
        self,
        file_path: Path | str,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.file_path = Path(file_path)
        self.line = line
        self.column = column
        self.message = message
        location = f"{self.file_path}"
        if line is not None:
            location += f":{line}"
            if column is not None:
                location += f":{column}"
        super().__init__(f"{location}: {message}")


class ExtractionError(ApidocError):
    """Raised when tree-to-doc extraction fails; aborts the whole run."""

    def __init__(self, file_path: Path | str, message: str) -> None:
        self.file_path = Path(file_path)
        super().__init__(f"{self.file_path}: {message}")


class PublishError(ApidocError):
    """Raised when a plugin fails while rendering the final output."""


__all__ = [
    "ApidocError",
    "ConfigError",
    "ExtractionError",
    "ParseError",
    "PluginError",
    "PublishError",
]
