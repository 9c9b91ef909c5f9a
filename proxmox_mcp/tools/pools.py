"""Resource pool tools."""

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
)

POOL_ID = {"poolid": get_string_property("The pool ID")}
POOL_COMMENT = get_string_property("Pool comment/description")


def register_pool_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_pools() -> Any:
        return await client.fetch("/pools")

    async def create_pool(**body: Any) -> Any:
        return await client.create("/pools", body)

    async def get_pool(poolid: str) -> Any:
        return await client.fetch(f"/pools/{poolid}")

    async def update_pool(poolid: str, **body: Any) -> Any:
        return await client.replace(f"/pools/{poolid}", body)

    async def delete_pool(poolid: str) -> Any:
        return await client.remove(f"/pools/{poolid}")

    registry.register_tool(
        name="list_pools",
        description="List resource pools",
        schema=object_schema(),
        handler=list_pools,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="create_pool",
        description="Create a resource pool",
        schema=object_schema({**POOL_ID, "comment": POOL_COMMENT}, required=["poolid"]),
        handler=create_pool,
        annotations=WRITE,
    )
    registry.register_tool(
        name="get_pool",
        description="Get pool details",
        schema=object_schema(POOL_ID, required=["poolid"]),
        handler=get_pool,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="update_pool",
        description="Update pool (add/remove members)",
        schema=object_schema(
            {
                **POOL_ID,
                "comment": POOL_COMMENT,
                "vms": get_string_property("Comma-separated list of VMIDs to add/remove"),
                "storage": get_string_property(
                    "Comma-separated list of storage IDs to add/remove"
                ),
                "delete": get_boolean_property(
                    "If true, remove the specified vms/storage instead of adding"
                ),
            },
            required=["poolid"],
        ),
        handler=update_pool,
        annotations=IDEMPOTENT_WRITE,
    )
    registry.register_tool(
        name="delete_pool",
        description="Delete a resource pool",
        schema=object_schema(POOL_ID, required=["poolid"]),
        handler=delete_pool,
        annotations=DESTRUCTIVE,
    )
