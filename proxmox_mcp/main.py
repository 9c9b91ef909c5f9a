"""Proxmox MCP Server - tools and resources for a Proxmox VE cluster."""

import asyncio
import logging
import sys
from typing import List, Optional

from mcp import stdio_server
from mcp.server import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.types import CallToolResult, Resource, ResourceTemplate, Tool
from pydantic import AnyUrl

from . import __version__
from .config import Config, ConfigError
from .core_utils import LoggingUtility
from .foundation.proxmox_client import ProxmoxClient
from .resources import JSON_MIME_TYPE, ResourceCatalog
from .tool_registry import ToolRegistry
from .tools import build_tool_registry

SERVER_NAME = "proxmox-mcp"

# Configure logging; stdout is reserved for the stdio transport
logging.basicConfig(level=logging.INFO, stream=sys.stderr)
logger = logging.getLogger(__name__)


def create_server(registry: ToolRegistry, resources: ResourceCatalog) -> Server:
    """Build an MCP server whose handlers delegate to the given registries."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return registry.get_tool_list()

    # Arguments are validated by the registry so failures come back as error results
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[dict] = None) -> CallToolResult:
        return await registry.execute_tool(name, arguments)

    @server.list_resources()
    async def list_resources() -> List[Resource]:
        return resources.list_resources()

    @server.list_resource_templates()
    async def list_resource_templates() -> List[ResourceTemplate]:
        return resources.list_resource_templates()

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> List[ReadResourceContents]:
        text = await resources.read(str(uri))
        return [ReadResourceContents(content=text, mime_type=JSON_MIME_TYPE)]

    return server


async def main(config: Optional[Config] = None):
    """Run the Proxmox MCP server over stdio."""
    config = config or Config.from_env()
    logging.getLogger().setLevel(config.log_level)

    client = ProxmoxClient(config)
    registry = build_tool_registry(client)
    server = create_server(registry, ResourceCatalog(client))

    LoggingUtility.log_info(
        "server", f"Serving {len(registry)} tools for {client.base_url}"
    )
    if config.allow_self_signed_certs:
        LoggingUtility.log_warning(
            "server", "TLS certificate verification is disabled for the Proxmox API"
        )

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=__version__,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def run_server():
    """Entry point for the Proxmox MCP server."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        LoggingUtility.log_info("server", "Server stopped by user")
    except ConfigError as e:
        LoggingUtility.log_error("config", e)
        sys.exit(1)
    except Exception as e:
        LoggingUtility.log_error("server", e)
        sys.exit(1)


if __name__ == "__main__":
    run_server()
