"""Source file discovery with include/exclude filtering."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, List, Pattern, Sequence

from .errors import ConfigError
from .logging import get_logger


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every plain file below ``root``.

    Directories are always descended into. Entries are visited in sorted order
    so repeated runs see files, and therefore assign doc ids, identically.
    """
    stack: List[Path] = [root]
    while stack:
        directory = stack.pop()
        with os.scandir(directory) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
        subdirectories: List[Path] = []
        for entry in ordered:
            path = Path(entry.path)
            if entry.is_file():
                yield path
            elif entry.is_dir():
                subdirectories.append(path)
        # Pushed in reverse so the first subdirectory is walked next.
        stack.extend(reversed(subdirectories))


class FileDiscoverer:
    """Yields source files under a root whose relative path passes the filters.

    A file is a candidate when any include pattern matches its path relative to
    the root and no exclude pattern does. Patterns are searched, not anchored.
    """

    def __init__(
        self,
        root: Path | str,
        includes: Sequence[Pattern[str]],
        excludes: Sequence[Pattern[str]] = (),
    ) -> None:
        self.root = Path(root).expanduser().resolve()
        self.includes = tuple(includes)
        self.excludes = tuple(excludes)
        self.logger = get_logger("discovery")

    def accepts(self, relative_path: str) -> bool:
        if not any(pattern.search(relative_path) for pattern in self.includes):
            return False
        return not any(pattern.search(relative_path) for pattern in self.excludes)

    def __iter__(self) -> Iterator[Path]:
        if not self.root.exists():
            raise ConfigError(f"Source directory not found: {self.root}")
        if not self.root.is_dir():
            raise ConfigError(f"Source path is not a directory: {self.root}")

        for path in iter_files(self.root):
            relative_path = path.relative_to(self.root).as_posix()
            if self.accepts(relative_path):
                yield path
            else:
                self.logger.debug("Skipping %s (filtered)", relative_path)

    def walk(self, visit: Callable[[Path], None]) -> None:
        """Call ``visit`` with the absolute path of every candidate file."""
        for path in self:
            visit(path)


__all__ = ["FileDiscoverer", "iter_files"]
