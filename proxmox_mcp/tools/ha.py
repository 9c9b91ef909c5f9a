"""High-availability tools."""

from typing import Any

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import (
    DESTRUCTIVE,
    READ_ONLY,
    WRITE,
    get_number_property,
    get_string_property,
    object_schema,
)


def register_ha_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_ha_resources() -> Any:
        return await client.fetch("/cluster/ha/resources")

    async def create_ha_resource(**body: Any) -> Any:
        return await client.create("/cluster/ha/resources", body)

    async def delete_ha_resource(sid: str) -> Any:
        return await client.remove(f"/cluster/ha/resources/{sid}")

    async def list_ha_groups() -> Any:
        return await client.fetch("/cluster/ha/groups")

    registry.register_tool(
        name="list_ha_resources",
        description="List HA managed resources",
        schema=object_schema(),
        handler=list_ha_resources,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="create_ha_resource",
        description="Add a resource to HA management",
        schema=object_schema(
            {
                "sid": get_string_property('Resource ID, e.g. "vm:100"'),
                "group": get_string_property("HA group to assign the resource to"),
                "max_restart": get_number_property("Maximum number of restart attempts"),
                "max_relocate": get_number_property("Maximum number of relocate attempts"),
                "state": get_string_property(
                    'Requested resource state: "started", "stopped", "enabled", "disabled"'
                ),
            },
            required=["sid"],
        ),
        handler=create_ha_resource,
        annotations=WRITE,
    )
    registry.register_tool(
        name="delete_ha_resource",
        description="Remove resource from HA",
        schema=object_schema(
            {"sid": get_string_property('Resource ID to remove, e.g. "vm:100"')},
            required=["sid"],
        ),
        handler=delete_ha_resource,
        annotations=DESTRUCTIVE,
    )
    registry.register_tool(
        name="list_ha_groups",
        description="List HA groups",
        schema=object_schema(),
        handler=list_ha_groups,
        annotations=READ_ONLY,
    )
