"""
Progress MCP Server - low-level MCP server exposing ``test_long_running``.

Clients use this server to check that a request timeout is reset whenever a
progress notification arrives during a long-running tool call.
"""

import asyncio
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import click
from mcp.server import Server
import mcp.types as types
import mcp.server.stdio

from . import __version__
from .tools import (
    InvocationRequest,
    LongRunningTool,
    Sleeper,
    ToolCatalog,
    ToolInvoker,
)
from .utils.config import ServerConfig, load_config
from .utils.errors import StartupError
from .utils.logging import setup_logging, get_logger
from .utils.notifications import SessionProgressNotifier


logger = get_logger("progress-mcp.server")

STARTUP_MESSAGE = "Test long-running MCP server started"


def progress_token_of(request_context: Any) -> Optional[Any]:
    """Progress token from the request's _meta, if the client sent one."""
    meta = getattr(request_context, "meta", None)
    if meta is None:
        return None
    return getattr(meta, "progressToken", None)


class ProgressMCPServer:
    """MCP server wiring the tool catalog and invoker to the SDK."""

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        sleep: Sleeper = asyncio.sleep,
    ):
        self.config = config or ServerConfig()
        self.catalog = ToolCatalog()
        self.catalog.register(LongRunningTool(
            default_seconds=self.config.tool.default_seconds,
            tick_interval=self.config.tool.tick_interval,
            sleep=sleep,
        ))
        self.invoker = ToolInvoker(self.catalog)
        self.server = Server(self.config.app_name, version=self.config.version)

        self._register_handlers()

    def _register_handlers(self):
        """Register MCP handlers using decorators."""

        @self.server.list_tools()
        async def handle_list_tools() -> List[types.Tool]:
            """List all available tools."""
            return [descriptor.to_mcp() for descriptor in self.catalog.list_tools()]

        # Arguments are checked by the tool itself so that error messages
        # stay the same whatever the SDK's schema validator would report.
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: dict) -> List[types.TextContent]:
            """Handle tool execution."""
            ctx = self.server.request_context
            request = InvocationRequest(
                tool_name=name,
                arguments=arguments or {},
                progress_token=progress_token_of(ctx),
            )
            result = await self.invoker.invoke(
                request, SessionProgressNotifier(ctx.session)
            )
            return result.to_content()

    async def run(self) -> None:
        """
        Serve over stdio until the client disconnects.

        Raises:
            StartupError: if the stdio transport cannot be connected
        """
        init_options = self.server.create_initialization_options()
        started = False

        try:
            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                started = True
                self._announce_started()
                await self.server.run(read_stream, write_stream, init_options)
        except Exception as e:
            if started:
                raise
            raise StartupError(f"Failed to connect stdio transport: {e}", cause=e) from e

    def _announce_started(self) -> None:
        # stdout carries JSON-RPC; the banner goes to stderr.
        click.echo(STARTUP_MESSAGE, err=True)
        logger.debug(
            "server_started",
            server_name=self.config.app_name,
            version=self.config.version,
            tools=[d.name for d in self.catalog.list_tools()],
        )


@click.command()
@click.option(
    '--config', 'config_paths',
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Configuration file (JSON, YAML or TOML). May be repeated.'
)
@click.option(
    '--log-level',
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help='Override the configured log level.'
)
@click.option('--version', is_flag=True, help='Show version')
def main(config_paths: Tuple[Path, ...], log_level: Optional[str], version: bool):
    """Test MCP server with a single long-running, progress-reporting tool."""
    if version:
        click.echo(f"test-mcp-server v{__version__}")
        return

    # Config loading logs too; route it to stderr before the real setup.
    setup_logging(log_level=log_level or "INFO")

    try:
        extra = {"logging": {"level": log_level}} if log_level else None
        config = load_config(list(config_paths), extra_config=extra)
        setup_logging(
            app_name=config.app_name,
            log_level=config.logging.level,
            log_dir=config.logging.directory,
            enable_json=config.logging.format == "json",
            max_bytes=config.logging.max_size,
            backup_count=config.logging.backup_count,
        )
        asyncio.run(ProgressMCPServer(config).run())
    except KeyboardInterrupt:
        logger.info("received_interrupt_signal")
    except Exception as e:
        logger.debug("server_error", error=str(e), exc_info=True)
        click.echo(f"Server error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
