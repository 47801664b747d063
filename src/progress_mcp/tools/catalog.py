"""
Tool catalog answering MCP tool discovery.
"""

from typing import Dict, List, Protocol

from .base import InvocationRequest, InvocationResult, ProgressNotifier, ToolDescriptor
from ..utils.errors import UnknownToolError
from ..utils.logging import get_logger


logger = get_logger("progress-mcp.tools.catalog")


class Tool(Protocol):
    """Anything the catalog can hold and the invoker can run."""

    descriptor: ToolDescriptor

    @property
    def name(self) -> str: ...

    async def run(
        self,
        request: InvocationRequest,
        notify: ProgressNotifier,
    ) -> InvocationResult: ...


class ToolCatalog:
    """
    Registry of available tools.

    Keeps registration order so tools/list output is stable.
    """

    def __init__(self):
        self.tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """
        Register a tool.

        Args:
            tool: Tool to register; replaces any tool with the same name
        """
        logger.debug("registering_tool", tool_name=tool.name)
        self.tools[tool.name] = tool

    def get(self, tool_name: str) -> Tool:
        """
        Get a tool by name.

        Raises:
            UnknownToolError: if no tool has that name
        """
        try:
            return self.tools[tool_name]
        except KeyError:
            raise UnknownToolError(tool_name) from None

    def list_tools(self) -> List[ToolDescriptor]:
        """Descriptors of all registered tools."""
        return [tool.descriptor for tool in self.tools.values()]


__all__ = [
    'Tool',
    'ToolCatalog',
]
