"""
Tests for the server process's use of stdout and stderr.

These start ``python -m progress_mcp`` for real, so stdout is the actual
JSON-RPC channel rather than a captured stream.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from progress_mcp.server import STARTUP_MESSAGE


SRC_DIR = Path(__file__).parent.parent / "src"


@pytest.fixture
def process_env(tmp_path):
    env = {k: v for k, v in os.environ.items() if not k.startswith("PROGRESS_MCP_")}
    env["HOME"] = str(tmp_path)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(SRC_DIR), env.get("PYTHONPATH")) if p
    )
    return env


def run_server(args, env, cwd, stdin=b""):
    return subprocess.run(
        [sys.executable, "-m", "progress_mcp", *args],
        input=stdin,
        capture_output=True,
        env=env,
        cwd=cwd,
        timeout=60,
    )


def test_clean_start_keeps_stdout_empty(process_env, tmp_path):
    proc = run_server([], process_env, tmp_path)

    assert proc.stdout == b""
    assert STARTUP_MESSAGE.encode() in proc.stderr


def test_missing_config_file_warns_on_stderr(process_env, tmp_path):
    proc = run_server(
        ["--config", str(tmp_path / "missing.yaml"), "--log-level", "DEBUG"],
        process_env,
        tmp_path,
    )

    assert proc.stdout == b""
    assert b"config_file_not_found" in proc.stderr


def test_config_error_reported_on_stderr(process_env, tmp_path):
    config_path = tmp_path / "bad.json"
    config_path.write_text('{"tool": {"tick_interval": -1}}')

    proc = run_server(
        ["--config", str(config_path), "--log-level", "DEBUG"],
        process_env,
        tmp_path,
    )

    assert proc.returncode == 1
    assert proc.stdout == b""
    assert b"Server error: Configuration validation failed" in proc.stderr
    assert STARTUP_MESSAGE.encode() not in proc.stderr
