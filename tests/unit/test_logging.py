"""Tests for logging setup."""

import pytest
from loguru import logger

from settings.logging import log_file_pattern, setup_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()


class TestSetupLogging:
    def test_file_pattern(self, tmp_path):
        assert log_file_pattern(tmp_path, "stats").name == "stats_{time:YYYY-MM-DD}.log"

    def test_writes_prefixed_file(self, tmp_path, restore_logger):
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(level="WARNING", log_dir=log_dir, prefix="stats")
        logger.debug("cache hit")

        files = list(log_dir.glob("stats_*.log"))
        assert len(files) == 1
        text = files[0].read_text()
        assert "cache hit" in text
        assert "Logging to" in text

    def test_console_only(self, tmp_path, restore_logger):
        setup_logging(to_file=False, log_dir=tmp_path / "logs")
        logger.info("console")
        assert not (tmp_path / "logs").exists()
