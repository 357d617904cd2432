"""Logging setup for the apidoc logger hierarchy."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

_LOGGER_NAME = "apidoc"
CONSOLE_FORMAT = "[apidoc] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``apidoc.<name>``, or the root ``apidoc`` logger."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console (and optionally file) handlers for a CLI invocation.

    Progress lines such as ``parse: <file>`` and ``output: <file>`` are INFO;
    ``verbose`` also shows per-hook and per-file DEBUG records.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    # Repeated invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)

    return logger


@contextmanager
def debug_logging(enabled: bool) -> Iterator[None]:
    """Lower the apidoc hierarchy to DEBUG while the block runs.

    Logger and handler levels are put back on exit, so a ``debug: true`` run
    does not leak verbosity into later runs in the same process.
    """
    if not enabled:
        yield
        return

    logger = get_logger()
    saved: List[Tuple[logging.Handler, int]] = [(handler, handler.level) for handler in logger.handlers]
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    for handler, _ in saved:
        handler.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        logger.setLevel(previous)
        for handler, level in saved:
            handler.setLevel(level)


__all__ = ["CONSOLE_FORMAT", "FILE_FORMAT", "configure_logging", "debug_logging", "get_logger"]
