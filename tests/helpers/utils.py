"""Test utilities for Proxmox MCP tests."""

from contextlib import contextmanager
import json
from typing import Any, Dict, Iterator, Optional, Union
from unittest.mock import AsyncMock, MagicMock, patch

from mcp.types import CallToolResult, TextContent

from proxmox_mcp.tool_registry import ToolSpec

SAMPLE_VALUES = {"string": "pve1", "number": 100, "boolean": True}


def get_text_content(result: CallToolResult) -> str:
    """Extract the single text item of a tool result."""
    assert len(result.content) == 1
    content = result.content[0]
    assert isinstance(content, TextContent)
    return content.text


def parse_tool_result(result: CallToolResult) -> Any:
    """Decode the JSON payload of a successful tool result."""
    assert not result.isError
    return json.loads(get_text_content(result))


def minimal_arguments(spec: ToolSpec) -> Dict[str, Any]:
    """Build arguments holding only the required fields of a tool."""
    properties = spec.schema.get("properties", {})
    arguments = {}
    for name in spec.schema.get("required", []):
        json_type = properties[name]["type"]
        if isinstance(json_type, list):
            json_type = json_type[0]
        arguments[name] = SAMPLE_VALUES[json_type]
    return arguments


def make_http_response(status: int, body: Union[str, bytes, dict, list]) -> MagicMock:
    """Fake ``aiohttp.ClientResponse`` with a buffered body."""
    if isinstance(body, (dict, list)):
        raw = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        raw = body.encode("utf-8")
    else:
        raw = body
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=raw)
    return response


@contextmanager
def patched_http_session(
    response: Optional[MagicMock] = None, error: Optional[BaseException] = None
) -> Iterator[MagicMock]:
    """Patch ``aiohttp.ClientSession`` in the client module.

    Yields the fake session so tests can inspect ``session.request`` calls.
    """
    with patch("proxmox_mcp.foundation.proxmox_client.aiohttp.ClientSession") as session_cls:
        session = MagicMock()
        session_cls.return_value.__aenter__.return_value = session
        session_cls.return_value.__aexit__.return_value = False

        if error is not None:
            session.request.side_effect = error
        else:
            request_context = session.request.return_value
            request_context.__aenter__.return_value = response
            request_context.__aexit__.return_value = False

        yield session
