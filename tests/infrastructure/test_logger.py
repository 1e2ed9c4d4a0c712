"""Tests for structlog configuration and log level parsing."""

import json
import logging

import pytest
import structlog

from stockroom.infrastructure import logger as logger_module
from stockroom.infrastructure.logger import _coerce_level, configure_logging


@pytest.fixture
def isolated_logging(monkeypatch):
    """Let a test configure logging, then restore the global state."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(logger_module, "_configured", False)
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("INFO", logging.INFO),
        ("debug", logging.DEBUG),
        ("30", 30),
        ("nonsense", logging.INFO),
    ],
)
def test_coerce_level(raw, expected):
    assert _coerce_level(raw) == expected


def test_json_output_renders_one_line_per_event(isolated_logging, capsys):
    configure_logging(level="INFO", json_output=True)

    log = structlog.get_logger("stockroom.tests")
    log.debug("too_quiet")
    log.info("stock_checked", product_id="X", quantity=3)

    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["event"] == "stock_checked"
    assert payload["product_id"] == "X"
    assert payload["quantity"] == 3
    assert payload["level"] == "info"
    assert "timestamp" in payload


def test_configure_twice_installs_one_handler(isolated_logging):
    configure_logging(level="WARNING", json_output=False)
    configure_logging(level="DEBUG", json_output=True)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
