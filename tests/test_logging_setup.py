"""Tests for proximity_sort.utils.logging (setup_logging + get_logger)."""

from __future__ import annotations

import logging
import sys

from proximity_sort.utils.config import LoggingConfig
from proximity_sort.utils.logging import get_logger, setup_logging


class TestSetupLogging:
    def test_console_handler_on_stderr(self):
        """Console logs never share stdout with sorted output."""
        config = LoggingConfig(level="INFO", file="", console=True)
        logger = setup_logging(config)
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_file_handler_added(self, tmp_path):
        log_file = str(tmp_path / "sort.log")
        config = LoggingConfig(level="DEBUG", file=log_file, console=False)
        logger = setup_logging(config)
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert (tmp_path / "sort.log").exists()

    def test_no_handlers_when_both_disabled(self):
        config = LoggingConfig(level="WARNING", file="", console=False)
        logger = setup_logging(config)
        assert len(logger.handlers) == 0

    def test_level_applied(self):
        config = LoggingConfig(level="debug", file="", console=False)
        logger = setup_logging(config)
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        config = LoggingConfig(level="chatty", file="", console=False)
        assert setup_logging(config).level == logging.WARNING

    def test_handlers_cleared_on_each_call(self):
        config = LoggingConfig(level="INFO", file="", console=True)
        setup_logging(config)
        logger = setup_logging(config)
        assert len(logger.handlers) == 1


class TestGetLogger:
    def test_returns_child_logger(self):
        logger = get_logger("ranking.ranker")
        assert logger.name == "proximity_sort.ranking.ranker"
        assert isinstance(logger, logging.Logger)
