#!/usr/bin/env python3
"""Unit tests for MCP server wiring and process lifecycle."""

from contextlib import asynccontextmanager
import logging
from unittest.mock import AsyncMock, MagicMock, patch

from mcp import types
import pytest

from proxmox_mcp.config import ConfigError
from proxmox_mcp.main import SERVER_NAME, create_server, main, run_server
from proxmox_mcp.resources import ResourceCatalog


@pytest.fixture
def server(registry, mock_client):
    return create_server(registry, ResourceCatalog(mock_client))


@pytest.mark.unit
class TestServerHandlers:
    """Test that MCP requests are routed to the registries."""

    def test_server_name(self, server):
        assert server.name == SERVER_NAME

    @pytest.mark.asyncio
    async def test_list_tools(self, server):
        handler = server.request_handlers[types.ListToolsRequest]
        result = await handler(types.ListToolsRequest(method="tools/list"))

        assert len(result.root.tools) == 68
        assert {t.name for t in result.root.tools} >= {"list_nodes", "start_vm"}

    @pytest.mark.asyncio
    async def test_call_tool(self, server, mock_client):
        mock_client.fetch.return_value = [{"node": "pve1"}]
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(
            types.CallToolRequest(
                method="tools/call",
                params=types.CallToolRequestParams(name="list_nodes", arguments={}),
            )
        )

        assert result.root.isError is False
        assert '"node": "pve1"' in result.root.content[0].text
        mock_client.fetch.assert_awaited_once_with("/nodes")

    @pytest.mark.asyncio
    async def test_call_tool_with_invalid_arguments(self, server, mock_client):
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(
            types.CallToolRequest(
                method="tools/call",
                params=types.CallToolRequestParams(
                    name="get_vm_status", arguments={"node": "pve1", "vmid": "100"}
                ),
            )
        )

        assert result.root.isError is True
        assert result.root.content[0].text.startswith("Error: Invalid arguments")
        mock_client.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_resources_and_templates(self, server):
        resources = await server.request_handlers[types.ListResourcesRequest](
            types.ListResourcesRequest(method="resources/list")
        )
        templates = await server.request_handlers[types.ListResourceTemplatesRequest](
            types.ListResourceTemplatesRequest(method="resources/templates/list")
        )

        assert [r.name for r in resources.root.resources] == ["nodes", "cluster-status"]
        assert [t.name for t in templates.root.resourceTemplates] == [
            "node-vms",
            "node-containers",
        ]

    @pytest.mark.asyncio
    async def test_read_resource(self, server, mock_client):
        mock_client.fetch.return_value = {"quorate": 1}
        handler = server.request_handlers[types.ReadResourceRequest]

        result = await handler(
            types.ReadResourceRequest(
                method="resources/read",
                params=types.ReadResourceRequestParams(uri="proxmox://cluster/status"),
            )
        )

        (contents,) = result.root.contents
        assert contents.mimeType == "application/json"
        assert '"quorate": 1' in contents.text
        mock_client.fetch.assert_awaited_once_with("/cluster/status")


@pytest.mark.unit
class TestLifecycle:
    """Test startup and shutdown paths."""

    @pytest.mark.asyncio
    async def test_main_serves_over_stdio(self, proxmox_config):
        read_stream, write_stream = MagicMock(), MagicMock()

        @asynccontextmanager
        async def fake_stdio_server():
            yield read_stream, write_stream

        root_logger = logging.getLogger()
        previous_level = root_logger.level
        try:
            with patch("proxmox_mcp.main.stdio_server", fake_stdio_server), patch(
                "proxmox_mcp.main.Server.run", new_callable=AsyncMock
            ) as run:
                await main(proxmox_config)
        finally:
            root_logger.setLevel(previous_level)

        run.assert_awaited_once()
        args = run.await_args.args
        assert args[0] is read_stream
        assert args[1] is write_stream
        assert args[2].server_name == SERVER_NAME

    def test_run_server_keyboard_interrupt_exits_cleanly(self):
        with patch("proxmox_mcp.main.main", MagicMock()), patch(
            "proxmox_mcp.main.asyncio.run", side_effect=KeyboardInterrupt
        ):
            run_server()

    def test_run_server_config_error_exits_nonzero(self):
        with patch("proxmox_mcp.main.main", MagicMock()), patch(
            "proxmox_mcp.main.asyncio.run",
            side_effect=ConfigError(["PROXMOX_HOST is required"]),
        ):
            with pytest.raises(SystemExit) as exc_info:
                run_server()

        assert exc_info.value.code == 1

    def test_run_server_unexpected_error_exits_nonzero(self):
        with patch("proxmox_mcp.main.main", MagicMock()), patch(
            "proxmox_mcp.main.asyncio.run", side_effect=RuntimeError("boom")
        ):
            with pytest.raises(SystemExit) as exc_info:
                run_server()

        assert exc_info.value.code == 1
