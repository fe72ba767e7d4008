"""Tests for the logging module."""

import logging

from rich.logging import RichHandler

from printflags.logging import LogContext, configure_logging, get_logger, set_level


class TestConfigureLogging:
    """Test configure_logging function."""

    def test_defaults(self):
        logger = configure_logging()

        assert logger.name == "printflags"
        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0], RichHandler)

    def test_debug_level(self):
        assert configure_logging(level="debug").level == logging.DEBUG

    def test_int_level(self):
        assert configure_logging(level=logging.ERROR).level == logging.ERROR

    def test_plain_handler(self):
        logger = configure_logging(use_rich=False)

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RichHandler)
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_no_console(self):
        assert configure_logging(console=False).handlers == []

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "printflags.log"
        logger = configure_logging(level="info", console=False, file_path=log_file)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.FileHandler)

        get_logger("cli").info("selected printer")
        logger.handlers[0].flush()
        assert "selected printer" in log_file.read_text()

    def test_reconfigure_replaces_handlers(self):
        configure_logging()
        logger = configure_logging()
        assert len(logger.handlers) == 1


class TestGetLogger:
    """Test get_logger function."""

    def test_package_logger(self):
        assert get_logger().name == "printflags"

    def test_child_logger(self):
        assert get_logger("cli").name == "printflags.cli"


class TestSetLevel:
    """Test set_level function."""

    def test_updates_logger_and_handlers(self):
        logger = configure_logging(level="warning")
        set_level("debug")

        assert logger.level == logging.DEBUG
        assert all(handler.level == logging.DEBUG for handler in logger.handlers)


class TestLogContext:
    """Test LogContext context manager."""

    def test_temporary_level(self):
        logger = configure_logging(level="warning")

        with LogContext("debug"):
            assert logger.level == logging.DEBUG
        assert logger.level == logging.WARNING
