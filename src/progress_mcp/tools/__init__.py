"""
Tools components for the progress MCP server.

This package provides the tool catalog, the invoker and the
``test_long_running`` tool.
"""

from .base import (
    ToolDescriptor,
    InvocationRequest,
    InvocationResult,
    ProgressEvent,
    ProgressNotifier,
    Sleeper,
)
from .catalog import Tool, ToolCatalog
from .invoker import ToolInvoker, discard_progress
from .long_running import TOOL_NAME, LongRunningTool, long_running_descriptor, parse_seconds

__all__ = [
    'ToolDescriptor',
    'InvocationRequest',
    'InvocationResult',
    'ProgressEvent',
    'ProgressNotifier',
    'Sleeper',
    'Tool',
    'ToolCatalog',
    'ToolInvoker',
    'discard_progress',
    'TOOL_NAME',
    'LongRunningTool',
    'long_running_descriptor',
    'parse_seconds',
]
