"""
Pytest configuration and shared fixtures for progress MCP tests.
"""

import pytest
from pathlib import Path
from typing import Any, List

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from progress_mcp.tools import (
    LongRunningTool,
    ProgressEvent,
    ToolCatalog,
    ToolInvoker,
)
from progress_mcp.utils.config import ServerConfig


class RecordingNotifier:
    """Collects progress events in emission order."""

    def __init__(self):
        self.events: List[ProgressEvent] = []

    async def __call__(self, event: ProgressEvent) -> None:
        self.events.append(event)

    @property
    def progress_values(self) -> List[int]:
        return [e.progress for e in self.events]


class FakeSleeper:
    """Records requested delays and returns immediately."""

    def __init__(self, notifier: Any = None):
        self.calls: List[float] = []
        self._notifier = notifier
        # Number of events already emitted when each sleep started.
        self.events_seen: List[int] = []

    async def __call__(self, delay: float) -> None:
        self.calls.append(delay)
        if self._notifier is not None:
            self.events_seen.append(len(self._notifier.events))


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Recording progress channel."""
    return RecordingNotifier()


@pytest.fixture
def sleeper(notifier: RecordingNotifier) -> FakeSleeper:
    """Instant sleep that tracks calls."""
    return FakeSleeper(notifier)


@pytest.fixture
def long_running_tool(sleeper: FakeSleeper) -> LongRunningTool:
    """The long-running tool with a fake clock."""
    return LongRunningTool(sleep=sleeper)


@pytest.fixture
def catalog(long_running_tool: LongRunningTool) -> ToolCatalog:
    """Catalog holding only the long-running tool."""
    catalog = ToolCatalog()
    catalog.register(long_running_tool)
    return catalog


@pytest.fixture
def invoker(catalog: ToolCatalog) -> ToolInvoker:
    """Invoker over the test catalog."""
    return ToolInvoker(catalog)


@pytest.fixture
def server_config() -> ServerConfig:
    """Default configuration with a short tick."""
    return ServerConfig(tool={"tick_interval": 0.01})


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PROGRESS_MCP_* variables from the environment."""
    import os
    for key in list(os.environ):
        if key.startswith("PROGRESS_MCP_"):
            monkeypatch.delenv(key)
