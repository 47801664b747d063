"""
Tests for logging setup.
"""

import json
import logging

import pytest
import structlog

from progress_mcp.utils.logging import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


def test_file_logging_writes_json_lines(tmp_path, restore_logging):
    result = setup_logging(app_name="unit", log_level="debug", log_dir=tmp_path)

    get_logger("unit.test").info("tool_completed", seconds=3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = (tmp_path / "unit.log").read_text().splitlines()
    records = [json.loads(line) for line in lines]

    assert result["log_dir"] == tmp_path
    assert result["config"]["log_level"] == "debug"
    assert any("tool_completed" in r["message"] for r in records)


def test_no_file_without_directory(tmp_path, restore_logging):
    setup_logging(app_name="unit")

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)


def test_json_formatter_serializes_extras():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hi", None, None)
    record.tool_name = "test_long_running"
    record.unserializable = object()

    data = json.loads(JSONFormatter().format(record))

    assert data["message"] == "hi"
    assert data["tool_name"] == "test_long_running"
    assert isinstance(data["unserializable"], str)
