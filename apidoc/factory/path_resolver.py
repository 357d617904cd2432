"""Maps source files to display and import paths."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Optional


class PathResolver:
    """Resolves the paths a doc object records for the file it came from."""

    def __init__(
        self,
        root: Path | str,
        file_path: Path | str,
        package_name: Optional[str] = None,
        main_file_path: Optional[str] = None,
    ) -> None:
        self.root = Path(root)
        self.file_path = Path(file_path)
        self.package_name = package_name
        self.main_file_path = main_file_path

    @property
    def relative_path(self) -> str:
        """File path relative to the source root, with POSIX separators.

        Computed lexically so files reached through symlinks keep their place
        under the root.
        """
        root = self.root.resolve()
        candidate = Path(os.path.abspath(self.file_path))
        if not candidate.is_relative_to(root):
            candidate = self.file_path.resolve()
        return Path(os.path.relpath(candidate, root)).as_posix()

    @property
    def display_path(self) -> str:
        """File path as written in longnames: the configured root joined with the relative path."""
        return Path(os.path.normpath(self.root / self.relative_path)).as_posix()

    @property
    def import_path(self) -> str:
        """Module specifier a consumer would import this file with."""
        display = self.display_path
        if not self.package_name:
            return _strip_extension(display)

        if self.main_file_path:
            main = Path(self.main_file_path)
            if main.resolve() == self.file_path.resolve():
                return self.package_name
        return f"{self.package_name}/{_strip_extension(display)}"


def _strip_extension(path: str) -> str:
    pure = PurePosixPath(path)
    return pure.with_suffix("").as_posix() if pure.suffix else path


__all__ = ["PathResolver"]
