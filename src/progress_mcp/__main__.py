#!/usr/bin/env python3
"""
Progress MCP Server - Main entry point for python -m progress_mcp
"""

from progress_mcp.server import main


if __name__ == "__main__":
    main()
