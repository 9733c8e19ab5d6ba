"""Tests for the structlog setup."""

import json
import logging

import pytest
import structlog

from storeorders.application.remove_order import DeleteMode
from storeorders.infrastructure.config import Settings
from storeorders.infrastructure.logging_config import bind_context, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _settings(tmp_path, log_format: str) -> Settings:
    return Settings(
        data_dir=tmp_path,
        catalog_url="sqlite://",
        delete_mode=DeleteMode.HARD,
        page_size=10,
        log_level="INFO",
        log_format=log_format,
    )


def test_json_events_go_to_stderr(tmp_path, capsys, restore_root_logger):
    configure_logging(_settings(tmp_path, "json"))
    bind_context(command="create")

    structlog.get_logger("storeorders.test").info("stock_reserved", order_id="abc")

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "stock_reserved"
    assert event["order_id"] == "abc"
    assert event["command"] == "create"
    assert event["level"] == "info"


def test_level_filters_debug(tmp_path, capsys, restore_root_logger):
    configure_logging(_settings(tmp_path, "console"))

    structlog.get_logger("storeorders.test").debug("noise")

    assert "noise" not in capsys.readouterr().err
