"""
Tests for logging helpers.

Run with: pytest tests/ -v
"""
import logging

from pipe_bender import config
from pipe_bender.lib.general_utils import handle_error, log, setup_logging


class TestSetupLogging:
    """Test setup_logging() function."""

    def test_default_level_info(self, package_logger) -> None:
        logger = setup_logging()
        assert logger is package_logger
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_debug_flag_sets_debug_level(self, package_logger, monkeypatch) -> None:
        monkeypatch.setattr(config, 'DEBUG', True)
        logger = setup_logging()
        assert logger.level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate_handlers(self, package_logger) -> None:
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_log_file(self, package_logger, tmp_path) -> None:
        log_path = tmp_path / 'pipe.log'
        logger = setup_logging(logging.INFO, log_file=str(log_path))
        assert len(logger.handlers) == 2

        log("Pipe assembled")
        for handler in logger.handlers:
            handler.flush()

        content = log_path.read_text(encoding='utf-8')
        assert "Pipe assembled" in content
        assert "INFO" in content


class TestLog:
    """Test log() and handle_error() functions."""

    def test_log_level(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger=config.LOGGER_NAME):
            log("fitted", logging.DEBUG)
        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].name == config.LOGGER_NAME

    def test_handle_error_includes_traceback(self, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger=config.LOGGER_NAME):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                handle_error('test_operation')

        text = caplog.text
        assert "===== Error =====" in text
        assert "test_operation" in text
        assert "RuntimeError: boom" in text
