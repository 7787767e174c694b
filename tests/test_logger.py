"""Tests for the project logger setup."""

import logging

import pytest
from uvicorn.logging import DefaultFormatter

import logger as logger_module


@pytest.fixture
def fresh_logger(monkeypatch, tmp_path):
    """Rebuild the logger against a temporary log dir, restore it afterwards."""
    monkeypatch.setattr(logger_module, "LOG_DIR", tmp_path)
    yield tmp_path
    monkeypatch.undo()
    for handler in logging.getLogger("gmv_bot").handlers:
        handler.close()
    logger_module.setup_logging()


class TestSetupLogging:

    def test_writes_dated_file_and_console(self, fresh_logger):
        log = logger_module.setup_logging()

        kinds = [type(h) for h in log.handlers]
        assert kinds == [logging.FileHandler, logging.StreamHandler]
        assert isinstance(log.handlers[1].formatter, DefaultFormatter)
        assert list(fresh_logger.glob("*.log"))
        assert log.propagate is False

    def test_level_from_config(self, fresh_logger, monkeypatch):
        monkeypatch.setattr(logger_module, "LOG_LEVEL", "debug")

        assert logger_module.setup_logging().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, fresh_logger, monkeypatch):
        monkeypatch.setattr(logger_module, "LOG_LEVEL", "chatty")

        assert logger_module.setup_logging().level == logging.INFO

    def test_httpx_request_lines_are_quiet(self, fresh_logger):
        """httpx logs request URLs at INFO, and Telegram URLs carry the bot token."""
        logging.getLogger("httpx").setLevel(logging.NOTSET)

        logger_module.setup_logging()

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_repeat_setup_does_not_stack_handlers(self, fresh_logger):
        logger_module.setup_logging()
        log = logger_module.setup_logging()

        assert len(log.handlers) == 2
