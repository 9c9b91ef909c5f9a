"""Storage tools."""

from typing import Any, Optional

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import READ_ONLY, WRITE, get_string_property, object_schema, pick

STORAGE_PROPERTIES = {
    "node": get_string_property("The name of the node"),
    "storage": get_string_property("The name of the storage"),
}


def register_storage_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_storage(node: Optional[str] = None) -> Any:
        path = f"/nodes/{node}/storage" if node else "/storage"
        return await client.fetch(path)

    async def get_storage_content(node: str, storage: str, **filters: Any) -> Any:
        return await client.fetch(
            f"/nodes/{node}/storage/{storage}/content", pick(filters, "content")
        )

    async def download_url_to_storage(node: str, storage: str, **body: Any) -> Any:
        return await client.create(
            f"/nodes/{node}/storage/{storage}/download-url",
            pick(body, "url", "content", "filename"),
        )

    registry.register_tool(
        name="list_storage",
        description="List storage",
        schema=object_schema(
            {
                "node": get_string_property(
                    "Node name to list storage for. If omitted, lists cluster-wide storage."
                )
            }
        ),
        handler=list_storage,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_storage_content",
        description="List content of a storage",
        schema=object_schema(
            {
                **STORAGE_PROPERTIES,
                "content": get_string_property(
                    "Content type filter: iso, vztmpl, backup, images, etc."
                ),
            },
            required=["node", "storage"],
        ),
        handler=get_storage_content,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="download_url_to_storage",
        description="Download from URL to storage",
        schema=object_schema(
            {
                **STORAGE_PROPERTIES,
                "url": get_string_property("The URL to download from"),
                "content": get_string_property("Content type: iso or vztmpl"),
                "filename": get_string_property("The filename to save as"),
            },
            required=["node", "storage", "url", "content", "filename"],
        ),
        handler=download_url_to_storage,
        annotations=WRITE,
    )
