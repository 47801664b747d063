"""
Tests for the progress-mcp command line entry point.
"""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from progress_mcp.server import main
from progress_mcp.utils.errors import StartupError


pytestmark = pytest.mark.usefixtures("clean_env")


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("progress_mcp.server.setup_logging") as setup:
        yield setup


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == "test-mcp-server v1.0.0"


def test_startup_failure_exits_nonzero(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with patch(
        "progress_mcp.server.ProgressMCPServer.run",
        new=AsyncMock(side_effect=StartupError("Failed to connect stdio transport: closed")),
    ):
        result = runner.invoke(main, [])

    assert result.exit_code == 1
    assert "Server error: Failed to connect stdio transport: closed" in result.output


def test_invalid_config_exits_nonzero(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config_path = tmp_path / "bad.json"
    config_path.write_text('{"tool": {"tick_interval": -1}}')

    result = runner.invoke(main, ["--config", str(config_path)])

    assert result.exit_code == 1
    assert "Server error: Configuration validation failed" in result.output


def test_log_level_and_config_are_applied(runner, tmp_path, monkeypatch, quiet_logging):
    monkeypatch.chdir(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("tool:\n  tick_interval: 0.5\n")

    with patch("progress_mcp.server.ProgressMCPServer") as server_cls:
        server_cls.return_value.run = AsyncMock()
        result = runner.invoke(main, ["--config", str(config_path), "--log-level", "debug"])

    assert result.exit_code == 0
    config = server_cls.call_args.args[0]
    assert config.tool.tick_interval == 0.5
    assert config.logging.level == "DEBUG"
    assert quiet_logging.call_args_list[0].kwargs["log_level"].upper() == "DEBUG"
    assert quiet_logging.call_args.kwargs["log_level"] == "DEBUG"
    server_cls.return_value.run.assert_awaited_once()
