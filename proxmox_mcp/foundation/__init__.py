"""Foundation layer for Proxmox MCP: the Proxmox VE API client."""

from .proxmox_client import ProxmoxApiError, ProxmoxClient, ProxmoxDecodeError

__all__ = [
    "ProxmoxClient",
    "ProxmoxApiError",
    "ProxmoxDecodeError",
]
