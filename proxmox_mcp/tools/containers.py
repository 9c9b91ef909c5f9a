"""LXC container tools."""

from typing import Any, List, Optional

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .power import PowerAction, register_power_actions
from .schema_utils import (
    DESTRUCTIVE,
    IDEMPOTENT_WRITE,
    READ_ONLY,
    WRITE,
    get_boolean_property,
    get_node_property,
    get_number_property,
    get_string_property,
    get_vmid_property,
    object_schema,
    pick,
)

CONTAINER_POWER_ACTIONS: List[PowerAction] = [
    PowerAction("start_container", "start", "Start a container"),
    PowerAction("stop_container", "stop", "Stop a container (immediate)"),
    PowerAction("shutdown_container", "shutdown", "Gracefully shutdown a container"),
    PowerAction("reboot_container", "reboot", "Reboot a container"),
]

CONTAINER_PROPERTIES = {
    "node": get_node_property(),
    "vmid": get_vmid_property("The container VMID"),
}

SNAPSHOT_PROPERTIES = {
    **CONTAINER_PROPERTIES,
    "snapname": get_string_property("The snapshot name"),
}


def register_container_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    # Query tools

    async def list_containers(node: Optional[str] = None) -> Any:
        if node:
            return await client.fetch(f"/nodes/{node}/lxc")
        resources = await client.fetch("/cluster/resources", {"type": "vm"})
        return [r for r in resources or [] if r.get("type") == "lxc"]

    async def get_container_status(node: str, vmid: int) -> Any:
        return await client.fetch(f"/nodes/{node}/lxc/{vmid}/status/current")

    async def get_container_config(node: str, vmid: int) -> Any:
        return await client.fetch(f"/nodes/{node}/lxc/{vmid}/config")

    registry.register_tool(
        name="list_containers",
        description="List LXC containers",
        schema=object_schema(
            {
                "node": get_string_property(
                    "Node name; if omitted, lists containers across the entire cluster"
                )
            }
        ),
        handler=list_containers,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_container_status",
        description="Get container status",
        schema=object_schema(CONTAINER_PROPERTIES, required=["node", "vmid"]),
        handler=get_container_status,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_container_config",
        description="Get container config",
        schema=object_schema(CONTAINER_PROPERTIES, required=["node", "vmid"]),
        handler=get_container_config,
        annotations=READ_ONLY,
    )

    # CRUD tools

    async def create_container(node: str, **body: Any) -> Any:
        return await client.create(f"/nodes/{node}/lxc", body)

    async def update_container_config(node: str, vmid: int, **body: Any) -> Any:
        return await client.replace(f"/nodes/{node}/lxc/{vmid}/config", body)

    async def delete_container(node: str, vmid: int, **options: Any) -> Any:
        return await client.remove(
            f"/nodes/{node}/lxc/{vmid}", pick(options, "purge", "force")
        )

    registry.register_tool(
        name="create_container",
        description="Create LXC container",
        schema=object_schema(
            {
                **CONTAINER_PROPERTIES,
                "ostemplate": get_string_property(
                    'OS template (e.g. "local:vztmpl/debian-12-standard_12.2-1_amd64.tar.zst")'
                ),
                "hostname": get_string_property("Container hostname"),
                "memory": get_number_property("Memory in MB"),
                "swap": get_number_property("Swap in MB"),
                "cores": get_number_property("Number of CPU cores"),
                "rootfs": get_string_property('Root filesystem (e.g. "local-lvm:8")'),
                "password": get_string_property("Root password"),
                "ssh-public-keys": get_string_property("SSH public keys"),
                "net0": get_string_property(
                    'Network config (e.g. "name=eth0,bridge=vmbr0,ip=dhcp")'
                ),
                "storage": get_string_property("Default storage"),
                "unprivileged": get_boolean_property("Create as unprivileged container"),
            },
            required=["node", "vmid", "ostemplate"],
        ),
        handler=create_container,
        annotations=WRITE,
    )
    registry.register_tool(
        name="update_container_config",
        description="Update container config",
        schema=object_schema(
            {
                **CONTAINER_PROPERTIES,
                "hostname": get_string_property("Container hostname"),
                "memory": get_number_property("Memory in MB"),
                "swap": get_number_property("Swap in MB"),
                "cores": get_number_property("Number of CPU cores"),
                "description": get_string_property("Container description"),
            },
            required=["node", "vmid"],
        ),
        handler=update_container_config,
        annotations=IDEMPOTENT_WRITE,
    )
    registry.register_tool(
        name="delete_container",
        description="Delete container",
        schema=object_schema(
            {
                **CONTAINER_PROPERTIES,
                "purge": get_boolean_property(
                    "Remove container from all related configurations"
                ),
                "force": get_boolean_property("Force destruction even if running"),
            },
            required=["node", "vmid"],
        ),
        handler=delete_container,
        annotations=DESTRUCTIVE,
    )

    # Power tools
    register_power_actions(
        registry, client, "lxc", CONTAINER_POWER_ACTIONS, "The container VMID"
    )

    # Snapshot tools

    async def list_container_snapshots(node: str, vmid: int) -> Any:
        return await client.fetch(f"/nodes/{node}/lxc/{vmid}/snapshot")

    async def create_container_snapshot(node: str, vmid: int, **body: Any) -> Any:
        return await client.create(f"/nodes/{node}/lxc/{vmid}/snapshot", body)

    async def delete_container_snapshot(node: str, vmid: int, snapname: str) -> Any:
        return await client.remove(f"/nodes/{node}/lxc/{vmid}/snapshot/{snapname}")

    async def rollback_container_snapshot(node: str, vmid: int, snapname: str) -> Any:
        return await client.create(
            f"/nodes/{node}/lxc/{vmid}/snapshot/{snapname}/rollback"
        )

    registry.register_tool(
        name="list_container_snapshots",
        description="List container snapshots",
        schema=object_schema(CONTAINER_PROPERTIES, required=["node", "vmid"]),
        handler=list_container_snapshots,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="create_container_snapshot",
        description="Create a container snapshot",
        schema=object_schema(
            {
                **SNAPSHOT_PROPERTIES,
                "description": get_string_property("Snapshot description"),
            },
            required=["node", "vmid", "snapname"],
        ),
        handler=create_container_snapshot,
        annotations=WRITE,
    )
    registry.register_tool(
        name="delete_container_snapshot",
        description="Delete a container snapshot",
        schema=object_schema(SNAPSHOT_PROPERTIES, required=["node", "vmid", "snapname"]),
        handler=delete_container_snapshot,
        annotations=DESTRUCTIVE,
    )
    registry.register_tool(
        name="rollback_container_snapshot",
        description="Rollback a container to a snapshot",
        schema=object_schema(SNAPSHOT_PROPERTIES, required=["node", "vmid", "snapname"]),
        handler=rollback_container_snapshot,
        annotations=DESTRUCTIVE,
    )
