"""
Error handling framework for the progress MCP server.

This module provides:
- Hierarchical exception classes with machine-readable codes
- Error context preservation
- Structured error payloads for logging
"""

from typing import Optional, Dict, Any
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from contextlib import contextmanager

from .logging import get_logger


logger = get_logger("progress-mcp.errors")


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context information for an error."""
    timestamp: datetime = field(default_factory=datetime.utcnow)
    component: Optional[str] = None
    operation: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


class ProgressMCPError(Exception):
    """Base exception for all progress MCP errors."""

    code: str = "PROGRESS_MCP_ERROR"
    default_message: str = "An error occurred in the progress MCP server"
    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        self.message = message or self.default_message
        self.context = context or ErrorContext()
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "cause": str(self.cause) if self.cause else None,
                "context": {
                    "timestamp": self.context.timestamp.isoformat(),
                    "component": self.context.component,
                    "operation": self.context.operation,
                    "metadata": self.context.metadata,
                }
            }
        }


class InvalidArgumentError(ProgressMCPError):
    """A tool argument failed validation."""
    code = "INVALID_ARGUMENT"
    default_message = "Invalid argument"
    category = ErrorCategory.VALIDATION

    def __init__(self, field: str, value: Any, constraint: str, **kwargs):
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(constraint, **kwargs)


class UnknownToolError(ProgressMCPError):
    """The requested tool is not registered."""
    code = "UNKNOWN_TOOL"
    default_message = "Unknown tool"
    category = ErrorCategory.NOT_FOUND

    def __init__(self, tool_name: str, **kwargs):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}", **kwargs)


class ConfigurationError(ProgressMCPError):
    """Configuration errors."""
    code = "CONFIG_ERROR"
    default_message = "Configuration error"
    category = ErrorCategory.CONFIGURATION


class StartupError(ProgressMCPError):
    """The server could not connect its transport or start serving."""
    code = "STARTUP_ERROR"
    default_message = "Server failed to start"
    category = ErrorCategory.TRANSPORT


@contextmanager
def error_context(component: str, operation: str, **metadata):
    """
    Attach component/operation context to errors raised inside the block.

    Project errors are logged and re-raised unchanged apart from their
    context. Anything else is wrapped in ProgressMCPError.
    """
    context = ErrorContext(
        component=component,
        operation=operation,
        metadata=metadata
    )

    try:
        yield context
    except ProgressMCPError as e:
        e.context.component = e.context.component or component
        e.context.operation = e.context.operation or operation
        e.context.metadata.update(metadata)
        logger.warning("progress_mcp_error", error=e.to_dict())
        raise
    except Exception as e:
        wrapped = ProgressMCPError(message=str(e), context=context, cause=e)
        logger.error(
            "unexpected_error_in_context",
            error=wrapped.to_dict(),
            exc_info=True
        )
        raise wrapped from e


__all__ = [
    'ErrorCategory',
    'ErrorContext',
    'ProgressMCPError',
    'InvalidArgumentError',
    'UnknownToolError',
    'ConfigurationError',
    'StartupError',
    'error_context',
]
