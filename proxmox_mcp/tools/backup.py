"""Backup job and vzdump tools."""

from typing import Any

from ..foundation.proxmox_client import ProxmoxClient
from ..tool_registry import ToolRegistry
from .schema_utils import (
    READ_ONLY,
    WRITE,
    get_boolean_property,
    get_string_property,
    object_schema,
)

BACKUP_MODE = get_string_property('Backup mode: "snapshot", "suspend", or "stop"')
BACKUP_COMPRESS = get_string_property('Compression algorithm: "zstd", "lzo", or "gzip"')


def register_backup_tools(registry: ToolRegistry, client: ProxmoxClient) -> None:
    async def list_backup_jobs() -> Any:
        return await client.fetch("/cluster/backup")

    async def create_backup_job(**body: Any) -> Any:
        return await client.create("/cluster/backup", body)

    async def run_backup(node: str, **body: Any) -> Any:
        return await client.create(f"/nodes/{node}/vzdump", body)

    registry.register_tool(
        name="list_backup_jobs",
        description="List scheduled backup jobs",
        schema=object_schema(),
        handler=list_backup_jobs,
        annotations=READ_ONLY,
    )
    registry.register_tool(
        name="create_backup_job",
        description="Create a scheduled backup job",
        schema=object_schema(
            {
                "schedule": get_string_property(
                    "Backup schedule in cron or systemd timer format"
                ),
                "storage": get_string_property("Storage location for backups"),
                "mode": BACKUP_MODE,
                "compress": BACKUP_COMPRESS,
                "mailnotification": get_string_property("Email notification setting"),
                "vmid": get_string_property(
                    'Comma-separated list of VM IDs to back up, or "all"'
                ),
                "enabled": get_boolean_property("Whether the backup job is enabled"),
            },
            required=["schedule", "storage"],
        ),
        handler=create_backup_job,
        annotations=WRITE,
    )
    registry.register_tool(
        name="run_backup",
        description="Run an immediate backup (vzdump)",
        schema=object_schema(
            {
                "node": get_string_property("Node on which to run the backup"),
                "vmid": get_string_property("VM ID to back up"),
                "storage": get_string_property("Storage location for the backup"),
                "mode": BACKUP_MODE,
                "compress": BACKUP_COMPRESS,
            },
            required=["node", "vmid", "storage"],
        ),
        handler=run_backup,
        annotations=WRITE,
    )
