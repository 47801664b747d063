"""
Tool invoker: routes a tools/call request to the matching catalog entry.
"""

from .base import InvocationRequest, InvocationResult, ProgressEvent, ProgressNotifier
from .catalog import ToolCatalog
from ..utils.errors import error_context


async def discard_progress(event: ProgressEvent) -> None:
    """Notifier used when the caller has no progress channel."""


class ToolInvoker:
    """Runs one invocation at a time per call; holds no per-call state."""

    def __init__(self, catalog: ToolCatalog):
        self.catalog = catalog

    async def invoke(
        self,
        request: InvocationRequest,
        notify: ProgressNotifier = discard_progress,
    ) -> InvocationResult:
        """
        Invoke the tool named by the request.

        Args:
            request: Tool name, arguments and optional progress token
            notify: Channel for progress events emitted while the tool runs

        Returns:
            The tool's terminal result

        Raises:
            UnknownToolError: if the tool is not in the catalog
            InvalidArgumentError: if the tool rejects its arguments
        """
        with error_context("invoker", "call_tool", tool_name=request.tool_name):
            tool = self.catalog.get(request.tool_name)
            return await tool.run(request, notify)


__all__ = [
    'ToolInvoker',
    'discard_progress',
]
