"""
The ``test_long_running`` tool.

The tool waits a requested number of whole seconds and, when the caller
supplied a progress token, reports progress once per second so that a client
resetting its request timeout on progress keeps the call alive.
"""

import asyncio
import math
from typing import Any, Dict, Optional

from .base import (
    InvocationRequest,
    InvocationResult,
    ProgressEvent,
    ProgressNotifier,
    Sleeper,
    ToolDescriptor,
)
from ..utils.logging import get_logger
from ..utils.validators import non_negative_number_validator


logger = get_logger("progress-mcp.tools.long_running")

TOOL_NAME = "test_long_running"

seconds_validator = non_negative_number_validator("seconds")


def long_running_descriptor(default_seconds: int = 5) -> ToolDescriptor:
    """Build the descriptor advertised on tools/list."""
    return ToolDescriptor(
        name=TOOL_NAME,
        description="Waits N seconds, sending a progress notification each second.",
        input_schema={
            "type": "object",
            "required": ["seconds"],
            "properties": {
                "seconds": {
                    "type": "number",
                    "description": "Number of seconds to wait (integer, >= 0)",
                    "default": default_seconds,
                },
            },
        },
    )


def parse_seconds(arguments: Optional[Dict[str, Any]]) -> int:
    """
    Validate the ``seconds`` argument and truncate it to whole seconds.

    Raises:
        InvalidArgumentError: if ``seconds`` is missing, not a number,
            not finite, or negative
    """
    seconds = seconds_validator.validate((arguments or {}).get("seconds"))
    return math.floor(seconds)


class LongRunningTool:
    """Waits ``seconds`` ticks, emitting one progress event per tick."""

    def __init__(
        self,
        default_seconds: int = 5,
        tick_interval: float = 1.0,
        sleep: Sleeper = asyncio.sleep,
    ):
        self.descriptor = long_running_descriptor(default_seconds)
        self.tick_interval = tick_interval
        self._sleep = sleep

    @property
    def name(self) -> str:
        return self.descriptor.name

    async def run(
        self,
        request: InvocationRequest,
        notify: ProgressNotifier,
    ) -> InvocationResult:
        whole_seconds = parse_seconds(request.arguments)
        token = request.progress_token

        logger.info(
            "tool_invoked",
            tool_name=self.name,
            seconds=whole_seconds,
            progress=request.wants_progress,
        )

        if request.wants_progress:
            await notify(ProgressEvent(
                progress=0,
                total=whole_seconds,
                message=f"Starting long running tool: {whole_seconds} second(s)",
                progress_token=token,
            ))

        for elapsed in range(1, whole_seconds + 1):
            await self._sleep(self.tick_interval)
            if request.wants_progress:
                await notify(ProgressEvent(
                    progress=elapsed,
                    total=whole_seconds,
                    message=f"Progress: {elapsed}/{whole_seconds} second(s) elapsed",
                    progress_token=token,
                ))
                logger.debug("progress_emitted", progress=elapsed, total=whole_seconds)

        logger.info("tool_completed", tool_name=self.name, seconds=whole_seconds)
        return InvocationResult(text=f"Completed after {whole_seconds} second(s).")


__all__ = [
    'TOOL_NAME',
    'LongRunningTool',
    'long_running_descriptor',
    'parse_seconds',
]
