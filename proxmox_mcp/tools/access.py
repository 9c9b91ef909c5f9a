"""Access control tools: users, groups, roles and permissions."""

from typing import Any

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import (
    READ_ONLY,
    get_boolean_property,
    get_string_property,
    object_schema,
    pick,
)


def register_access_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_users(**filters: Any) -> Any:
        return await client.fetch("/access/users", pick(filters, "enabled"))

    async def list_groups() -> Any:
        return await client.fetch("/access/groups")

    async def list_roles() -> Any:
        return await client.fetch("/access/roles")

    async def get_permissions(**filters: Any) -> Any:
        return await client.fetch("/access/permissions", pick(filters, "path"))

    registry.register_tool(
        name="list_users",
        description="List users",
        schema=object_schema({"enabled": get_boolean_property("Filter by enabled status")}),
        handler=list_users,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="list_groups",
        description="List groups",
        schema=object_schema(),
        handler=list_groups,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="list_roles",
        description="List roles",
        schema=object_schema(),
        handler=list_roles,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_permissions",
        description="Get permissions for a path",
        schema=object_schema(
            {"path": get_string_property('Path to get permissions for (e.g. "/vms/100")')}
        ),
        handler=get_permissions,
        annotations=READ_ONLY,
    )
