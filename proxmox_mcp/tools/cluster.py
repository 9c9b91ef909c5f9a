"""Cluster-wide status tools."""

from typing import Any

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import READ_ONLY, get_string_property, object_schema, pick


def register_cluster_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def get_cluster_status() -> Any:
        return await client.fetch("/cluster/status")

    async def get_cluster_resources(**filters: Any) -> Any:
        return await client.fetch("/cluster/resources", pick(filters, "type"))

    registry.register_tool(
        name="get_cluster_status",
        description="Get cluster status",
        schema=object_schema(),
        handler=get_cluster_status,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_cluster_resources",
        description="Get all cluster resources",
        schema=object_schema(
            {"type": get_string_property("Resource type filter: vm, storage, node, sdn")}
        ),
        handler=get_cluster_resources,
        annotations=READ_ONLY,
    )
