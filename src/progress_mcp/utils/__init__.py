"""
Shared utilities for the progress MCP server.

This package provides:
- Structured logging setup
- The error hierarchy
- Argument validators
- Configuration loading
"""
