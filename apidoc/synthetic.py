"""Doc objects that do not come from parsing: the index document and package manifest."""

from __future__ import annotations

import os
from pathlib import Path

from .logging import get_logger
from .models import DocObject

logger = get_logger("synthetic")


def build_index_doc(index_path: str) -> DocObject:
    """Wrap the project's overview document; unreadable files yield empty content."""
    try:
        content = Path(index_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Index document %s unreadable: %s", index_path, exc)
        content = ""

    return DocObject(
        kind="index",
        content=content,
        longname=str(Path(index_path).resolve()),
        name=index_path,
        static=True,
        access="public",
    )


def build_package_doc(package_path: str) -> DocObject:
    """Wrap the package manifest; unreadable files yield empty content and longname."""
    content = ""
    longname = ""
    try:
        content = Path(package_path).read_text(encoding="utf-8")
        longname = str(Path(package_path).resolve())
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Package manifest %s unreadable: %s", package_path, exc)

    return DocObject(
        kind="packageJSON",
        content=content,
        longname=longname,
        name=os.path.basename(longname),
        static=True,
        access="public",
    )


__all__ = ["build_index_doc", "build_package_doc"]
