"""QEMU virtual machine tools."""

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

VM_POWER_ACTIONS: List[PowerAction] = [
    PowerAction("start_vm", "start", "Start a VM"),
    PowerAction("stop_vm", "stop", "Stop a VM (immediate)"),
    PowerAction("shutdown_vm", "shutdown", "Gracefully shutdown a VM"),
    PowerAction("reboot_vm", "reboot", "Reboot a VM"),
    PowerAction("suspend_vm", "suspend", "Suspend a VM"),
    PowerAction("resume_vm", "resume", "Resume a suspended VM"),
    PowerAction("reset_vm", "reset", "Reset a VM (immediate)"),
]

GUEST_PROPERTIES = {
    "node": get_node_property(),
    "vmid": get_vmid_property(),
}

SNAPSHOT_PROPERTIES = {
    **GUEST_PROPERTIES,
    "snapname": get_string_property("The snapshot name"),
}


def register_vm_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    # Query tools

    async def list_vms(node: Optional[str] = None) -> Any:
        if node:
            return await client.fetch(f"/nodes/{node}/qemu")
        resources = await client.fetch("/cluster/resources", {"type": "vm"})
        return [r for r in resources or [] if r.get("type") == "qemu"]

    async def get_vm_status(node: str, vmid: int) -> Any:
        return await client.fetch(f"/nodes/{node}/qemu/{vmid}/status/current")

    async def get_vm_config(node: str, vmid: int) -> Any:
        return await client.fetch(f"/nodes/{node}/qemu/{vmid}/config")

    registry.register_tool(
        name="list_vms",
        description="List all VMs across all nodes or on a specific node",
        schema=object_schema(
            {"node": get_string_property("Node name to list VMs from (omit for all nodes)")}
        ),
        handler=list_vms,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_vm_status",
        description="Get current status of a VM",
        schema=object_schema(GUEST_PROPERTIES, required=["node", "vmid"]),
        handler=get_vm_status,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_vm_config",
        description="Get VM configuration",
        schema=object_schema(GUEST_PROPERTIES, required=["node", "vmid"]),
        handler=get_vm_config,
        annotations=READ_ONLY,
    )

    # CRUD tools

    async def create_vm(node: str, **body: Any) -> Any:
        return await client.create(f"/nodes/{node}/qemu", body)

    async def update_vm_config(node: str, vmid: int, **body: Any) -> Any:
        return await client.replace(f"/nodes/{node}/qemu/{vmid}/config", body)

    async def delete_vm(node: str, vmid: int, **options: Any) -> Any:
        return await client.remove(
            f"/nodes/{node}/qemu/{vmid}",
            pick(options, "purge", "destroy-unreferenced-disks"),
        )

    registry.register_tool(
        name="create_vm",
        description="Create a new VM",
        schema=object_schema(
            {
                **GUEST_PROPERTIES,
                "name": get_string_property("The VM name"),
                "memory": get_number_property("Memory in MB"),
                "cores": get_number_property("Number of CPU cores"),
                "sockets": get_number_property("Number of CPU sockets"),
                "ostype": get_string_property("OS type (e.g. l26, win10)"),
                "cdrom": get_string_property("CD-ROM device"),
                "scsi0": get_string_property("SCSI disk 0 configuration"),
                "net0": get_string_property("Network device 0 configuration"),
                "ide2": get_string_property("IDE device 2 configuration"),
                "boot": get_string_property("Boot order"),
                "scsihw": get_string_property("SCSI controller type"),
            },
            required=["node", "vmid"],
        ),
        handler=create_vm,
        annotations=WRITE,
    )
    registry.register_tool(
        name="update_vm_config",
        description="Update VM configuration",
        schema=object_schema(
            {
                **GUEST_PROPERTIES,
                "name": get_string_property("The VM name"),
                "memory": get_number_property("Memory in MB"),
                "cores": get_number_property("Number of CPU cores"),
                "sockets": get_number_property("Number of CPU sockets"),
                "description": get_string_property("VM description"),
            },
            required=["node", "vmid"],
        ),
        handler=update_vm_config,
        annotations=IDEMPOTENT_WRITE,
    )
    registry.register_tool(
        name="delete_vm",
        description="Delete a VM",
        schema=object_schema(
            {
                **GUEST_PROPERTIES,
                "purge": get_boolean_property("Purge VM from configurations"),
                "destroy-unreferenced-disks": get_boolean_property(
                    "Destroy unreferenced disks owned by the VM"
                ),
            },
            required=["node", "vmid"],
        ),
        handler=delete_vm,
        annotations=DESTRUCTIVE,
    )

    # Power tools
    register_power_actions(registry, client, "qemu", VM_POWER_ACTIONS)

    # Operation tools

    async def clone_vm(node: str, vmid: int, **body: Any) -> Any:
        return await client.create(f"/nodes/{node}/qemu/{vmid}/clone", body)

    async def migrate_vm(node: str, vmid: int, **body: Any) -> Any:
        return await client.create(f"/nodes/{node}/qemu/{vmid}/migrate", body)

    async def resize_vm_disk(node: str, vmid: int, disk: str, size: str) -> Any:
        return await client.replace(
            f"/nodes/{node}/qemu/{vmid}/resize", {"disk": disk, "size": size}
        )

    registry.register_tool(
        name="clone_vm",
        description="Clone a VM",
        schema=object_schema(
            {
                "node": get_node_property(),
                "vmid": get_vmid_property("The source VM ID"),
                "newid": get_number_property("The new VM ID for the clone"),
                "name": get_string_property("Name for the cloned VM"),
                "full": get_boolean_property("Full clone (true) or linked clone (false)"),
                "target": get_string_property("Target node for the clone"),
                "storage": get_string_property("Target storage for the clone"),
            },
            required=["node", "vmid", "newid"],
        ),
        handler=clone_vm,
        annotations=WRITE,
    )
    registry.register_tool(
        name="migrate_vm",
        description="Migrate a VM to another node",
        schema=object_schema(
            {
                "node": get_node_property("The current node name"),
                "vmid": get_vmid_property(),
                "target": get_string_property("The target node name"),
                "online": get_boolean_property("Online migration (true for live migration)"),
            },
            required=["node", "vmid", "target"],
        ),
        handler=migrate_vm,
        annotations=WRITE,
    )
    registry.register_tool(
        name="resize_vm_disk",
        description="Resize a VM disk",
        schema=object_schema(
            {
                **GUEST_PROPERTIES,
                "disk": get_string_property("The disk to resize (e.g. scsi0, virtio0)"),
                "size": get_string_property('New size or size increment (e.g. "+10G")'),
            },
            required=["node", "vmid", "disk", "size"],
        ),
        handler=resize_vm_disk,
        annotations=WRITE,
    )

    # Snapshot tools

    async def list_vm_snapshots(node: str, vmid: int) -> Any:
        return await client.fetch(f"/nodes/{node}/qemu/{vmid}/snapshot")

    async def create_vm_snapshot(node: str, vmid: int, **body: Any) -> Any:
        return await client.create(f"/nodes/{node}/qemu/{vmid}/snapshot", body)

    async def delete_vm_snapshot(node: str, vmid: int, snapname: str) -> Any:
        return await client.remove(f"/nodes/{node}/qemu/{vmid}/snapshot/{snapname}")

    async def rollback_vm_snapshot(node: str, vmid: int, snapname: str) -> Any:
        return await client.create(
            f"/nodes/{node}/qemu/{vmid}/snapshot/{snapname}/rollback"
        )

    registry.register_tool(
        name="list_vm_snapshots",
        description="List all snapshots of a VM",
        schema=object_schema(GUEST_PROPERTIES, required=["node", "vmid"]),
        handler=list_vm_snapshots,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="create_vm_snapshot",
        description="Create a snapshot of a VM",
        schema=object_schema(
            {
                **SNAPSHOT_PROPERTIES,
                "description": get_string_property("Snapshot description"),
            },
            required=["node", "vmid", "snapname"],
        ),
        handler=create_vm_snapshot,
        annotations=WRITE,
    )
    registry.register_tool(
        name="delete_vm_snapshot",
        description="Delete a snapshot of a VM",
        schema=object_schema(SNAPSHOT_PROPERTIES, required=["node", "vmid", "snapname"]),
        handler=delete_vm_snapshot,
        annotations=DESTRUCTIVE,
    )
    registry.register_tool(
        name="rollback_vm_snapshot",
        description="Rollback a VM to a snapshot",
        schema=object_schema(SNAPSHOT_PROPERTIES, required=["node", "vmid", "snapname"]),
        handler=rollback_vm_snapshot,
        annotations=DESTRUCTIVE,
    )

    # Guest agent tools

    async def get_vm_agent_info(node: str, vmid: int) -> Any:
        return await client.fetch(f"/nodes/{node}/qemu/{vmid}/agent/info")

    async def execute_vm_command(node: str, vmid: int, command: str) -> Any:
        return await client.create(
            f"/nodes/{node}/qemu/{vmid}/agent/exec", {"command": command}
        )

    registry.register_tool(
        name="get_vm_agent_info",
        description="Get QEMU guest agent info",
        schema=object_schema(GUEST_PROPERTIES, required=["node", "vmid"]),
        handler=get_vm_agent_info,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="execute_vm_command",
        description="Execute command via QEMU guest agent",
        schema=object_schema(
            {
                **GUEST_PROPERTIES,
                "command": get_string_property("The command to execute"),
            },
            required=["node", "vmid", "command"],
        ),
        handler=execute_vm_command,
        annotations=DESTRUCTIVE,
    )
