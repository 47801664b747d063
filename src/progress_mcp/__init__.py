"""
Progress MCP - a test MCP server for progress-driven timeout resets.

This package provides a Model Context Protocol server with a single tool,
``test_long_running``, that waits a given number of seconds and emits a
progress notification every second while it waits.
"""

__version__ = "1.0.0"

__all__ = [
    '__version__',
]
