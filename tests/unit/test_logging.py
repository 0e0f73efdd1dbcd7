"""Tests for logging setup."""

import sys

from loguru import logger

from settings.logging import setup_logging


class TestSetupLogging:
    def test_file_sink(self, tmp_path):
        log_dir = tmp_path / "logs"
        try:
            setup_logging(level="warning", to_file=True, log_dir=log_dir)
            logger.debug("Caching progress study S1: 50.0%")
        finally:
            logger.remove()
            logger.add(sys.stderr)

        files = list(log_dir.glob("lineage_cache_*.log"))
        assert len(files) == 1
        assert "Caching progress study S1" in files[0].read_text()

    def test_console_only(self, tmp_path):
        log_dir = tmp_path / "logs"
        try:
            setup_logging(level="INFO", to_file=False, log_dir=log_dir)
        finally:
            logger.remove()
            logger.add(sys.stderr)
        assert not log_dir.exists()
