"""Diagnostics for source files that could not be processed."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

from .errors import ParseError
from .logging import get_logger

_CONTEXT_LINES = 2

logger = get_logger("diagnostics")


def report_invalid_file(error: ParseError) -> None:
    """Log a parse failure with an excerpt around the offending line."""
    excerpt = _excerpt(error.file_path, error.line)
    if excerpt:
        logger.warning("[SyntaxError] %s\n%s", error, excerpt)
    else:
        logger.warning("[SyntaxError] %s", error)


def report_invalid_node(file_path: Path, node: Any) -> None:
    """Log the node an extractor failed on, for diagnosing extractor bugs."""
    line = node.start_point[0] + 1
    excerpt = _excerpt(file_path, line)
    logger.error(
        "Extraction failed at %s:%d (%s node)\n%s",
        file_path,
        line,
        node.type,
        excerpt,
    )


def report_error(error: BaseException) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.exception("%s", error)
    else:
        logger.error("%s", error)


def _excerpt(file_path: Path, line: Optional[int]) -> str:
    if line is None:
        return ""
    try:
        lines = file_path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return ""
    start = max(line - 1 - _CONTEXT_LINES, 0)
    end = min(line + _CONTEXT_LINES, len(lines))
    rendered: List[str] = []
    for number in range(start, end):
        marker = ">" if number + 1 == line else " "
        rendered.append(f"{marker} {number + 1:>4}| {lines[number]}")
    return "\n".join(rendered)


__all__ = ["report_error", "report_invalid_file", "report_invalid_node"]
