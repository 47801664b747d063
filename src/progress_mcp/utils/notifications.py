"""
Progress notification channel backed by an MCP server session.
"""

from typing import Any

from ..tools.base import ProgressEvent
from .logging import get_logger


logger = get_logger("progress-mcp.notifications")


class SessionProgressNotifier:
    """Sends each ProgressEvent as a notifications/progress message."""

    def __init__(self, session: Any):
        self.session = session

    async def __call__(self, event: ProgressEvent) -> None:
        await self.session.send_progress_notification(
            progress_token=event.progress_token,
            progress=event.progress,
            total=event.total,
            message=event.message,
        )
        logger.debug("progress_notification_sent", **event.to_params())


__all__ = [
    'SessionProgressNotifier',
]
