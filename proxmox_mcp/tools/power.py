"""Table-driven power actions for VMs and containers.

Each row of a power table becomes one tool that POSTs, without a body, to
``/nodes/{node}/{guest_type}/{vmid}/status/{action}``. Adding a lifecycle
action means adding a row, not a handler.
"""

from typing import Any, NamedTuple, Sequence

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolHandler, ToolRegistry
from .schema_utils import WRITE, get_node_property, get_vmid_property, object_schema


class PowerAction(NamedTuple):
    name: str
    action: str
    description: str


def _power_handler(client: ProxmoxClient, guest_type: str, action: str) -> ToolHandler:
    async def handler(node: str, vmid: int) -> Any:
        return await client.create(f"/nodes/{node}/{guest_type}/{vmid}/status/{action}")

    return handler


def register_power_actions(
    registry: ToolRegistry,
    client: ProxmoxClient,
    guest_type: str,
    actions: Sequence[PowerAction],
    vmid_description: str = "The VM ID",
) -> None:
    """Register one tool per row of ``actions`` for the given guest type."""
    schema = object_schema(
        {
            "node": get_node_property(),
            "vmid": get_vmid_property(vmid_description),
        },
        required=["node", "vmid"],
    )
    for power_action in actions:
        registry.register_tool(
            name=power_action.name,
            description=power_action.description,
            schema=schema,
            handler=_power_handler(client, guest_type, power_action.action),
            annotations=WRITE,
        )
