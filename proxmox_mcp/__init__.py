"""Proxmox MCP Server - Model Context Protocol server for Proxmox VE clusters.

This package provides a Model Context Protocol (MCP) server that lets LLM agents
query and manage a Proxmox VE cluster through the Proxmox REST API. Each API
operation is exposed as a tool with a declared input schema and side-effect
hints (read-only, destructive, idempotent).

Key Features:
    - Nodes, VMs and LXC containers: status, configuration, power actions,
      snapshots, cloning and migration
    - Storage, network interfaces, firewall rules and HA resources
    - Backup jobs, access control, resource pools and task history
    - Read-only resources for nodes, guests and cluster status

Usage:
    The server communicates over stdio and returns JSON text for every tool
    call. Failed calls are reported as error results, never as protocol errors.

Environment Variables:
    - PROXMOX_HOST: Proxmox VE host name or address (required)
    - PROXMOX_PORT: API port (default 8006)
    - PROXMOX_TOKEN_ID: API token id, e.g. "root@pam!mcp" (required)
    - PROXMOX_TOKEN_SECRET: API token secret (required)
    - PROXMOX_ALLOW_SELF_SIGNED_CERTS: "true"/"false" (default "true")
    - PROXMOX_MCP_LOG_LEVEL: logging level (default "INFO")
"""

# Get version dynamically from package metadata
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("proxmox-mcp")
except PackageNotFoundError:
    # Fallback when package not installed (e.g., development mode)
    __version__ = "dev"

__author__ = "proxmox-mcp authors"
__email__ = "proxmox-mcp@example.com"
