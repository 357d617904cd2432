"""Tests for apidoc.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from apidoc.logging import configure_logging, debug_logging, get_logger


def test_get_logger_nests_under_apidoc() -> None:
    assert get_logger("pipeline").name == "apidoc.pipeline"
    assert get_logger().name == "apidoc"


def test_configure_logging_does_not_stack_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(verbose=True, log_file=tmp_path / "logs" / "run.log")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert (tmp_path / "logs" / "run.log").exists()


def test_debug_logging_restores_levels() -> None:
    logger = configure_logging()

    with debug_logging(True):
        assert logger.level == logging.DEBUG
        assert all(handler.level == logging.DEBUG for handler in logger.handlers)

    assert logger.level == logging.INFO
    assert all(handler.level == logging.INFO for handler in logger.handlers)


def test_debug_logging_disabled_leaves_levels_alone() -> None:
    logger = configure_logging()

    with debug_logging(False):
        assert logger.level == logging.INFO
