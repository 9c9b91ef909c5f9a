"""Test helpers package for Proxmox MCP tests."""

# Import commonly used items for convenience
from .utils import (
    get_text_content,
    make_http_response,
    minimal_arguments,
    parse_tool_result,
    patched_http_session,
)

__all__ = [
    "get_text_content",
    "make_http_response",
    "minimal_arguments",
    "parse_tool_result",
    "patched_http_session",
]
