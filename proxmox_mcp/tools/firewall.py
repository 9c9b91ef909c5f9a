"""Firewall rule tools for the cluster or a single node."""

from typing import Any, Optional

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import (
    DESTRUCTIVE,
    READ_ONLY,
    WRITE,
    get_number_property,
    get_string_property,
    get_union_property,
    object_schema,
)

CLUSTER_SCOPE = "cluster"

SCOPE_PROPERTY = get_string_property(
    'Scope: "cluster" for cluster-level rules, or a node name for node-level rules. '
    "Defaults to cluster."
)


def rules_path(scope: Optional[str] = None) -> str:
    """Rules endpoint for a scope; anything but "cluster" is a node name."""
    if scope is None or scope == CLUSTER_SCOPE:
        return "/cluster/firewall/rules"
    return f"/nodes/{scope}/firewall/rules"


def register_firewall_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_firewall_rules(scope: Optional[str] = None) -> Any:
        return await client.fetch(rules_path(scope))

    async def create_firewall_rule(scope: Optional[str] = None, **body: Any) -> Any:
        return await client.create(rules_path(scope), body)

    async def delete_firewall_rule(pos: int, scope: Optional[str] = None) -> Any:
        return await client.remove(f"{rules_path(scope)}/{pos}")

    registry.register_tool(
        name="list_firewall_rules",
        description="List firewall rules",
        schema=object_schema({"scope": SCOPE_PROPERTY}),
        handler=list_firewall_rules,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="create_firewall_rule",
        description="Create a firewall rule",
        schema=object_schema(
            {
                "action": get_string_property('Rule action: "ACCEPT", "DROP", or "REJECT"'),
                "type": get_string_property('Rule type: "in", "out", or "group"'),
                "scope": SCOPE_PROPERTY,
                "enable": get_union_property(
                    ["boolean", "number"],
                    "Whether the rule is enabled (1/true or 0/false)",
                ),
                "source": get_string_property("Source address or network (CIDR)"),
                "dest": get_string_property("Destination address or network (CIDR)"),
                "proto": get_string_property('Protocol (e.g. "tcp", "udp", "icmp")'),
                "dport": get_string_property("Destination port or port range"),
                "sport": get_string_property("Source port or port range"),
                "comment": get_string_property("Rule comment"),
            },
            required=["action", "type"],
        ),
        handler=create_firewall_rule,
        annotations=WRITE,
    )
    registry.register_tool(
        name="delete_firewall_rule",
        description="Delete a firewall rule",
        schema=object_schema(
            {
                "pos": get_number_property("Rule position to delete"),
                "scope": SCOPE_PROPERTY,
            },
            required=["pos"],
        ),
        handler=delete_firewall_rule,
        annotations=DESTRUCTIVE,
    )
