"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest


@pytest.fixture
def logger_name():
    name = "feedscan.test"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestSetupLogger:
    """Tests for setup_logger()."""

    def test_console_only_by_default(self, logger_name):
        """Test a logger without a file gets one console handler."""
        from feedscan.utils.logger import setup_logger

        logger = setup_logger(logger_name, level=logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RotatingFileHandler)

    def test_file_handler_added(self, logger_name, tmp_path):
        """Test a log file adds a rotating handler and creates its directory."""
        from feedscan.utils.logger import setup_logger

        log_file = tmp_path / "logs" / "feedscan.log"
        logger = setup_logger(logger_name, log_file=str(log_file), max_bytes=1024, backup_count=2)
        logger.info("hello from the feed")

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 1024
        assert file_handlers[0].backupCount == 2

        file_handlers[0].flush()
        assert "hello from the feed" in log_file.read_text()

    def test_repeated_setup_does_not_stack_handlers(self, logger_name):
        """Test calling setup twice replaces handlers."""
        from feedscan.utils.logger import setup_logger

        setup_logger(logger_name)
        logger = setup_logger(logger_name)

        assert len(logger.handlers) == 1


class TestParseLevel:
    """Tests for parse_level()."""

    @pytest.mark.parametrize("value,expected", [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" warning ", logging.WARNING),
        ("ERROR", logging.ERROR),
    ])
    def test_known_levels(self, value, expected):
        """Test level names in any case."""
        from feedscan.utils.logger import parse_level
        assert parse_level(value) == expected

    def test_unknown_or_missing_uses_default(self):
        """Test bad values fall back to the default."""
        from feedscan.utils.logger import parse_level

        assert parse_level(None) == logging.INFO
        assert parse_level("") == logging.INFO
        assert parse_level("chatty") == logging.INFO
        assert parse_level("chatty", default=logging.WARNING) == logging.WARNING
