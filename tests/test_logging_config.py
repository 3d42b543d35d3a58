"""Tests for logging setup."""

import logging

import pytest

from roomease_api.app.core.logging_config import APP_LOGGERS, LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging("INFO")


@pytest.mark.unit
def test_log_file_directory_is_created(tmp_path):
    logfile = tmp_path / "logs" / "nested" / "roomease.log"
    setup_logging("info", str(logfile))

    logging.getLogger("roomease_api.app.services").info("booking created")
    logging.getLogger("uvicorn.error").info("server started")

    lines = logfile.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "[INFO] roomease_api.app.services: booking created" in lines[0]
    assert "[INFO] uvicorn.error: server started" in lines[1]


@pytest.mark.unit
def test_app_and_server_loggers_share_handlers():
    setup_logging("debug")
    handlers = [logging.getLogger(name).handlers for name in APP_LOGGERS]
    assert all(h == handlers[0] for h in handlers)
    assert handlers[0][0].formatter._fmt == LOG_FORMAT
    for name in APP_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG


@pytest.mark.unit
def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logging("INFO", str(tmp_path / "app.log"))
    setup_logging("INFO", str(tmp_path / "app.log"))
    setup_logging("WARNING")
    logger = logging.getLogger("roomease_api")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


@pytest.mark.unit
def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger("roomease_api").level == logging.INFO
