"""Core utilities for Proxmox MCP - logging and tool result envelopes."""

import json
import logging
from typing import Any

from mcp.types import CallToolResult, TextContent

logger = logging.getLogger(__name__)


# =============================================================================
# LOGGING UTILITIES
# =============================================================================


class LoggingUtility:
    """Simple logging utility."""

    @staticmethod
    def log_info(operation: str, message: str) -> None:
        """Log an info message."""
        logger.info(f"{operation}: {message}")

    @staticmethod
    def log_error(operation: str, error: Exception) -> None:
        """Log an error message."""
        logger.error(f"{operation}: {str(error)}")

    @staticmethod
    def log_warning(operation: str, message: str) -> None:
        """Log a warning message."""
        logger.warning(f"{operation}: {message}")

    @staticmethod
    def log_debug(operation: str, message: str) -> None:
        """Log a debug message."""
        logger.debug(f"{operation}: {message}")


# =============================================================================
# RESPONSE UTILITIES
# =============================================================================


def format_payload(payload: Any) -> str:
    """Pretty-print an API payload as JSON text."""
    return json.dumps(payload, indent=2)


def success_result(payload: Any) -> CallToolResult:
    """Create a success result holding the JSON payload."""
    return CallToolResult(
        content=[TextContent(type="text", text=format_payload(payload))],
        isError=False,
    )


def error_result(message: str) -> CallToolResult:
    """Create an error result; the text always starts with ``Error: ``."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )
