"""
Unit tests for the logging setup.
"""

import sys

import pytest
from loguru import logger

from localize.core.config import ConfigManager
from localize.core.logger import LogManager, setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def restore_loguru():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestLogManager:
    """Test sink configuration."""

    def test_file_sinks(self, tmp_path):
        manager = LogManager(str(tmp_path / "logs"))

        assert manager.setup_logging(level="INFO", console_enabled=False, file_enabled=True)
        logger.error("something failed")
        logger.complete()

        assert "something failed" in manager.lastlog_path.read_text(encoding="utf-8")
        assert "something failed" in manager.error_log_path.read_text(encoding="utf-8")
        assert manager.session_log_path.exists()

    def test_no_files_without_file_sinks(self, tmp_path):
        manager = LogManager(str(tmp_path / "logs"))

        assert manager.setup_logging(console_enabled=False, file_enabled=False)

        assert not manager.log_dir.exists()


class TestSetupLogging:
    """Test the module level helpers."""

    def test_file_sinks_in_log_dir(self, tmp_path):
        assert setup_logging(console_enabled=False, file_enabled=True, log_dir=str(tmp_path))
        logger.error("disk full")
        logger.complete()

        assert "disk full" in (tmp_path / "error.log").read_text(encoding="utf-8")

    def test_from_config(self, tmp_path):
        path = tmp_path / "localize.yml"
        path.write_text(
            f"logging:\n  console_enabled: false\n  file_enabled: true\n  log_dir: {tmp_path / 'out'}\n",
            encoding="utf-8",
        )

        assert setup_logging_from_config(ConfigManager(str(path)))

        assert (tmp_path / "out" / "latest.log").exists()
