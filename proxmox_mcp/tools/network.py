"""Node network interface tools."""

from typing import Any

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import (
    DESTRUCTIVE,
    IDEMPOTENT_WRITE,
    READ_ONLY,
    WRITE,
    get_boolean_property,
    get_string_property,
    object_schema,
    pick,
)

INTERFACE_PROPERTIES = {
    "node": get_string_property("The name of the node"),
    "iface": get_string_property("The network interface name"),
}

INTERFACE_SETTINGS = {
    "type": get_string_property("Interface type: bridge, bond, vlan, OVSBridge, etc."),
    "address": get_string_property("IP address"),
    "netmask": get_string_property("Network mask"),
    "gateway": get_string_property("Default gateway"),
    "bridge_ports": get_string_property("Bridge ports"),
    "autostart": get_boolean_property("Start interface on boot"),
}


def register_network_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_networks(node: str, **filters: Any) -> Any:
        return await client.fetch(f"/nodes/{node}/network", pick(filters, "type"))

    async def create_network(node: str, **body: Any) -> Any:
        return await client.create(f"/nodes/{node}/network", body)

    async def update_network(node: str, iface: str, **body: Any) -> Any:
        return await client.replace(f"/nodes/{node}/network/{iface}", body)

    async def delete_network(node: str, iface: str) -> Any:
        return await client.remove(f"/nodes/{node}/network/{iface}")

    registry.register_tool(
        name="list_networks",
        description="List network interfaces",
        schema=object_schema(
            {
                "node": get_string_property("The name of the node"),
                "type": get_string_property("Filter by interface type"),
            },
            required=["node"],
        ),
        handler=list_networks,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="create_network",
        description="Create network interface",
        schema=object_schema(
            {**INTERFACE_PROPERTIES, **INTERFACE_SETTINGS},
            required=["node", "iface", "type"],
        ),
        handler=create_network,
        annotations=WRITE,
    )
    registry.register_tool(
        name="update_network",
        description="Update network interface",
        schema=object_schema(
            {**INTERFACE_PROPERTIES, **INTERFACE_SETTINGS},
            required=["node", "iface", "type"],
        ),
        handler=update_network,
        annotations=IDEMPOTENT_WRITE,
    )
    registry.register_tool(
        name="delete_network",
        description="Delete network interface",
        schema=object_schema(INTERFACE_PROPERTIES, required=["node", "iface"]),
        handler=delete_network,
        annotations=DESTRUCTIVE,
    )
