"""Read-only MCP resources exposing cluster snapshots.

Each resource maps a ``proxmox://`` URI (or URI template) to one GET against
the Proxmox API; the payload is returned as pretty-printed JSON.
"""

import re
from typing import Any, Dict, List, NamedTuple, Optional, Pattern, Tuple

from mcp.types import Resource, ResourceTemplate

from .core_utils import LoggingUtility, format_payload
from .foundation.proxmox_client import ProxmoxClient

JSON_MIME_TYPE = "application/json"


class ResourceDefinition(NamedTuple):
    name: str
    uri: str
    description: str
    api_path: str

    @property
    def is_template(self) -> bool:
        return "{" in self.uri


RESOURCE_DEFINITIONS: List[ResourceDefinition] = [
    ResourceDefinition(
        "nodes", "proxmox://nodes", "List of all Proxmox cluster nodes", "/nodes"
    ),
    ResourceDefinition(
        "node-vms",
        "proxmox://nodes/{node}/vms",
        "List VMs on a specific node",
        "/nodes/{node}/qemu",
    ),
    ResourceDefinition(
        "node-containers",
        "proxmox://nodes/{node}/containers",
        "List containers on a specific node",
        "/nodes/{node}/lxc",
    ),
    ResourceDefinition(
        "cluster-status",
        "proxmox://cluster/status",
        "Proxmox cluster status",
        "/cluster/status",
    ),
]


def _compile_uri_pattern(uri_template: str) -> Pattern[str]:
    parts = re.split(r"\{(\w+)\}", uri_template)
    # odd indexes hold placeholder names
    regex = "".join(
        f"(?P<{part}>[^/]+)" if index % 2 else re.escape(part)
        for index, part in enumerate(parts)
    )
    return re.compile(f"^{regex}$")


class ResourceCatalog:
    """Resolves resource URIs to Proxmox API reads."""

    def __init__(
        self,
        client: ProxmoxClient,
        definitions: Optional[List[ResourceDefinition]] = None,
    ):
        self.client = client
        self._definitions = list(definitions or RESOURCE_DEFINITIONS)
        self._patterns: List[Tuple[Pattern[str], ResourceDefinition]] = [
            (_compile_uri_pattern(d.uri), d) for d in self._definitions
        ]

    def list_resources(self) -> List[Resource]:
        return [
            Resource(
                uri=d.uri,
                name=d.name,
                description=d.description,
                mimeType=JSON_MIME_TYPE,
            )
            for d in self._definitions
            if not d.is_template
        ]

    def list_resource_templates(self) -> List[ResourceTemplate]:
        return [
            ResourceTemplate(
                uriTemplate=d.uri,
                name=d.name,
                description=d.description,
                mimeType=JSON_MIME_TYPE,
            )
            for d in self._definitions
            if d.is_template
        ]

    def resolve(self, uri: str) -> Tuple[ResourceDefinition, Dict[str, str]]:
        """Find the definition matching ``uri`` and its placeholder values."""
        normalized = str(uri).rstrip("/")
        for pattern, definition in self._patterns:
            match = pattern.match(normalized)
            if match:
                return definition, match.groupdict()
        raise ValueError(f"Unknown resource: {uri}")

    async def read(self, uri: str) -> str:
        """Fetch the resource and return it as JSON text."""
        definition, variables = self.resolve(uri)
        LoggingUtility.log_debug("read resource", str(uri))
        payload: Any = await self.client.fetch(definition.api_path.format(**variables))
        return format_payload(payload)
