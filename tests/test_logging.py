"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from walletapi.config import BaseConfig
from walletapi.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.setenv("WALLETAPI_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("WALLETAPI_LOG_LEVEL", raising=False)
    return BaseConfig()


def _record(**kwargs) -> logging.LogRecord:
    defaults = dict(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    defaults.update(kwargs)
    record = logging.LogRecord(**defaults)
    record.module = "test_module"
    record.funcName = "test_function"
    return record


def test_json_formatter():
    """JSONFormatter emits the core record fields."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.user_id = "abc"
    record.duration_ms = 1.5

    log_data = json.loads(JSONFormatter().format(record))
    assert log_data["extra"] == {"user_id": "abc", "duration_ms": 1.5}


def test_setup_logging(config, tmp_path):
    """setup_logging writes JSON lines to a rotating file under DATA_DIR."""
    logger = setup_logging(config)

    assert logger.name == "walletapi"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "walletapi.log"
    assert log_file.exists()

    logger.warning("Test warning message", extra={"user_id": "u-1"})
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert len(lines) >= 2
    for line in lines:
        entry = json.loads(line)
        assert {"timestamp", "level", "message"} <= set(entry)
    assert json.loads(lines[-1])["extra"]["user_id"] == "u-1"


def test_setup_logging_is_repeatable(config):
    setup_logging(config)
    logger = setup_logging(config)
    assert len(logger.handlers) == 2


def test_get_logger():
    assert get_logger("module1").name == "walletapi.module1"
    assert get_logger("walletapi.services.users").name == "walletapi.services.users"
    assert get_logger("walletapi").name == "walletapi"


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(config, dev_mode):
    """Console logging level adjusts based on dev mode."""
    config.DEV_MODE = dev_mode
    logger = setup_logging(config)

    console_handlers = [
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    ]
    assert len(console_handlers) == 1

    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handlers[0].level == expected_level


def test_requests_are_logged(app, client, tmp_path):
    client.get("/health")
    for handler in logging.getLogger("walletapi").handlers:
        handler.flush()

    entries = [
        json.loads(line)
        for line in (tmp_path / "logs" / "walletapi.log").read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]
    request_entries = [entry for entry in entries if entry["logger"] == "walletapi.http"]
    assert request_entries
    assert request_entries[-1]["message"] == "GET /health -> 200"
    assert "duration_ms" in request_entries[-1]["extra"]
