"""Task history tools."""

from typing import Any

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import READ_ONLY, get_number_property, get_string_property, object_schema, pick


def register_task_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_tasks(node: str, **filters: Any) -> Any:
        return await client.fetch(
            f"/nodes/{node}/tasks", pick(filters, "start", "limit", "vmid")
        )

    async def get_task_status(node: str, upid: str) -> Any:
        return await client.fetch(f"/nodes/{node}/tasks/{upid}/status")

    registry.register_tool(
        name="list_tasks",
        description="List recent tasks",
        schema=object_schema(
            {
                "node": get_string_property("The node name"),
                "start": get_number_property("List result offset (for pagination)"),
                "limit": get_number_property("Maximum number of tasks to return"),
                "vmid": get_number_property("Filter by VMID"),
            },
            required=["node"],
        ),
        handler=list_tasks,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="get_task_status",
        description="Get status of a specific task",
        schema=object_schema(
            {
                "node": get_string_property("The node name"),
                "upid": get_string_property("The unique task UPID"),
            },
            required=["node", "upid"],
        ),
        handler=get_task_status,
        annotations=READ_ONLY,
    )
