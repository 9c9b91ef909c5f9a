"""Proxmox MCP tools organized by API domain."""

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .access import register_access_tools
from .backup import register_backup_tools
from .cluster import register_cluster_tools
from .containers import register_container_tools
from .firewall import register_firewall_tools
from .ha import register_ha_tools
from .network import register_network_tools
from .nodes import register_node_tools
from .pools import register_pool_tools
from .storage import register_storage_tools
from .tasks import register_task_tools
from .vms import register_vm_tools

DOMAIN_REGISTRARS = [
    register_node_tools,
    register_vm_tools,
    register_container_tools,
    register_storage_tools,
    register_network_tools,
    register_cluster_tools,
    register_ha_tools,
    register_backup_tools,
    register_firewall_tools,
    register_access_tools,
    register_pool_tools,
    register_task_tools,
]


def build_tool_registry(client: ProxmoxClient) -> ToolRegistry:
    """Register every domain's tools against ``client`` and freeze the registry."""
    registry = ToolRegistry()
    for register in DOMAIN_REGISTRARS:
        register(registry, client)
    return registry.freeze()


__all__ = [
    "DOMAIN_REGISTRARS",
    "build_tool_registry",
]
