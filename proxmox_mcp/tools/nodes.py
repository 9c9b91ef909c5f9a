"""Node tools."""

from typing import Any

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import READ_ONLY, get_string_property, object_schema


def register_node_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_nodes() -> Any:
        return await client.fetch("/nodes")

    async def get_node_status(node: str) -> Any:
        return await client.fetch(f"/nodes/{node}/status")

    registry.register_tool(
        name="list_nodes",
        description="List all nodes in the Proxmox cluster",
        schema=object_schema(),
        handler=list_nodes,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_node_status",
        description="Get detailed status of a specific node",
        schema=object_schema(
            {"node": get_string_property("The name of the node")}, required=["node"]
        ),
        handler=get_node_status,
        annotations=READ_ONLY,
    )
