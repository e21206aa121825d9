# tests/test_logging_conf.py
"""
Logging Configuration Tests - Unit Tests for setup_logging

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- stockperf.shared.logging_conf (setup_logging)
- pytest (testing framework, tmp_path fixture)
"""
import logging
import pytest  # Testing framework for writing and running tests

from logging.handlers import RotatingFileHandler

from stockperf.shared.logging_conf import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_stream_only(self, restore_root_logger):
        setup_logging(level="warning")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert not isinstance(restore_root_logger.handlers[0], RotatingFileHandler)

    def test_log_dir(self, restore_root_logger, tmp_path):
        setup_logging(level=logging.DEBUG, log_dir=tmp_path / "logs")
        logging.getLogger("stockperf.test").info("hello")

        file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        file_handlers[0].flush()
        assert "stockperf.test :: hello" in (tmp_path / "logs" / "stockperf.log").read_text(encoding="utf-8")

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging(level="chatty")
        assert restore_root_logger.level == logging.INFO
