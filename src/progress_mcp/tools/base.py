"""
Core tool types shared by the catalog, the invoker and the server.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol

import mcp.types as types


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and JSON input schema of a tool."""
    name: str
    description: str
    input_schema: Dict[str, Any]

    def to_mcp(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


@dataclass
class InvocationRequest:
    """A single tools/call request as seen by the invoker."""
    tool_name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    progress_token: Optional[Any] = None

    @property
    def wants_progress(self) -> bool:
        return self.progress_token is not None


@dataclass(frozen=True)
class ProgressEvent:
    """One progress update for an in-flight invocation."""
    progress: int
    total: int
    message: str
    progress_token: Any

    def to_params(self) -> Dict[str, Any]:
        """Params of the notifications/progress message."""
        return {
            "progress": self.progress,
            "total": self.total,
            "message": self.message,
            "progressToken": self.progress_token,
        }


@dataclass(frozen=True)
class InvocationResult:
    """Terminal result of a tool invocation."""
    text: str

    def to_content(self) -> List[types.TextContent]:
        return [types.TextContent(type="text", text=self.text)]


class ProgressNotifier(Protocol):
    """Channel that delivers progress events to the caller."""

    async def __call__(self, event: ProgressEvent) -> None: ...


Sleeper = Callable[[float], Awaitable[None]]


__all__ = [
    'ToolDescriptor',
    'InvocationRequest',
    'ProgressEvent',
    'InvocationResult',
    'ProgressNotifier',
    'Sleeper',
]
