#!/usr/bin/env python3
"""Unit tests for the tool registry.

Test Focus:
- Registration rules (duplicates, frozen registry)
- Argument validation against the declared input schema
- Error result envelopes for every failure path
"""

from unittest.mock import AsyncMock

import pytest

from proxmox_mcp.foundation.proxmox_client import ProxmoxApiError
from proxmox_mcp.tool_registry import (
    ToolRegistrationError,
    ToolRegistry,
    ToolValidationError,
    build_arguments_model,
)
from proxmox_mcp.tools.schema_utils import (
    READ_ONLY,
    get_boolean_property,
    get_number_property,
    get_string_property,
    get_union_property,
    object_schema,
)
from tests.helpers import get_text_content, parse_tool_result

ECHO_SCHEMA = object_schema(
    {
        "node": get_string_property("The node name"),
        "vmid": get_number_property("The VM ID"),
        "force": get_boolean_property("Force it"),
    },
    required=["node", "vmid"],
)


@pytest.fixture
def echo_handler():
    return AsyncMock(return_value={"ok": True})


@pytest.fixture
def echo_registry(echo_handler):
    registry = ToolRegistry()
    registry.register_tool(
        name="echo",
        description="Echo arguments",
        schema=ECHO_SCHEMA,
        handler=echo_handler,
        annotations=READ_ONLY,
    )
    return registry


@pytest.mark.unit
class TestRegistration:
    """Test tool registration and lookup."""

    def test_registered_tool_is_listed(self, echo_registry, echo_handler):
        assert "echo" in echo_registry
        assert len(echo_registry) == 1
        assert echo_registry.list_tool_names() == ["echo"]
        assert echo_registry.get_tool_handler("echo") is echo_handler
        assert echo_registry.get_tool_handler("missing") is None
        assert echo_registry.get_tool("missing") is None

    def test_tool_list_carries_schema_and_annotations(self, echo_registry):
        (tool,) = echo_registry.get_tool_list()
        assert tool.name == "echo"
        assert tool.description == "Echo arguments"
        assert tool.inputSchema == ECHO_SCHEMA
        assert tool.annotations.readOnlyHint is True

    def test_duplicate_name_is_rejected(self, echo_registry, echo_handler):
        with pytest.raises(ToolRegistrationError, match="already registered: echo"):
            echo_registry.register_tool(
                "echo", "Again", ECHO_SCHEMA, echo_handler, READ_ONLY
            )
        assert len(echo_registry) == 1

    def test_frozen_registry_rejects_new_tools(self, echo_registry, echo_handler):
        assert echo_registry.freeze() is echo_registry
        assert echo_registry.frozen
        with pytest.raises(ToolRegistrationError, match="frozen"):
            echo_registry.register_tool(
                "echo2", "Another", ECHO_SCHEMA, echo_handler, READ_ONLY
            )

    def test_unsupported_schema_type_is_rejected(self, echo_handler):
        registry = ToolRegistry()
        schema = object_schema({"items": {"type": "array", "description": "Items"}})
        with pytest.raises(ToolRegistrationError, match="Unsupported schema type"):
            registry.register_tool("bad", "Bad", schema, echo_handler, READ_ONLY)


@pytest.mark.unit
class TestArgumentModel:
    """Test the pydantic model generated from an input schema."""

    def test_hyphenated_property_round_trips_by_alias(self):
        model = build_arguments_model(
            "delete_vm",
            object_schema(
                {"destroy-unreferenced-disks": get_boolean_property("Destroy disks")}
            ),
        )
        validated = model.model_validate({"destroy-unreferenced-disks": True})
        assert validated.model_dump(by_alias=True, exclude_none=True) == {
            "destroy-unreferenced-disks": True
        }

    def test_unknown_properties_are_ignored(self):
        model = build_arguments_model("list_nodes", object_schema())
        validated = model.model_validate({"surprise": 1})
        assert validated.model_dump(by_alias=True, exclude_none=True) == {}

    def test_union_accepts_each_member_type(self):
        model = build_arguments_model(
            "create_firewall_rule",
            object_schema({"enable": get_union_property(["boolean", "number"], "On")}),
        )
        assert model.model_validate({"enable": True}).model_dump(by_alias=True) == {
            "enable": True
        }
        assert model.model_validate({"enable": 0}).model_dump(by_alias=True) == {
            "enable": 0
        }


@pytest.mark.unit
class TestExecuteTool:
    """Test tool execution and result envelopes."""

    @pytest.mark.asyncio
    async def test_success_wraps_payload(self, echo_registry, echo_handler):
        result = await echo_registry.execute_tool("echo", {"node": "pve1", "vmid": 100})

        assert result.isError is False
        assert parse_tool_result(result) == {"ok": True}
        echo_handler.assert_awaited_once_with(node="pve1", vmid=100)

    @pytest.mark.asyncio
    async def test_none_payload_is_json_null(self, echo_registry, echo_handler):
        echo_handler.return_value = None
        result = await echo_registry.execute_tool("echo", {"node": "pve1", "vmid": 100})

        assert get_text_content(result) == "null"

    @pytest.mark.asyncio
    async def test_explicit_none_is_omitted(self, echo_registry, echo_handler):
        await echo_registry.execute_tool(
            "echo", {"node": "pve1", "vmid": 100, "force": None}
        )

        echo_handler.assert_awaited_once_with(node="pve1", vmid=100)

    @pytest.mark.asyncio
    async def test_false_is_passed_through(self, echo_registry, echo_handler):
        await echo_registry.execute_tool(
            "echo", {"node": "pve1", "vmid": 100, "force": False}
        )

        echo_handler.assert_awaited_once_with(node="pve1", vmid=100, force=False)

    @pytest.mark.asyncio
    async def test_unknown_tool(self, echo_registry):
        result = await echo_registry.execute_tool("reticulate_splines", {})

        assert result.isError is True
        assert get_text_content(result) == "Error: Unknown tool: reticulate_splines"

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, echo_registry, echo_handler):
        result = await echo_registry.execute_tool("echo", {"node": "pve1"})

        assert result.isError is True
        text = get_text_content(result)
        assert text.startswith("Error: Invalid arguments for tool 'echo'")
        assert "vmid" in text
        echo_handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_arguments_object(self, echo_registry, echo_handler):
        result = await echo_registry.execute_tool("echo", None)

        assert result.isError is True
        echo_handler.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("vmid", ["100", True, None])
    async def test_wrong_type_is_rejected(self, echo_registry, echo_handler, vmid):
        result = await echo_registry.execute_tool("echo", {"node": "pve1", "vmid": vmid})

        assert result.isError is True
        assert "vmid" in get_text_content(result)
        echo_handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_api_error_becomes_error_result(self, echo_registry, echo_handler):
        echo_handler.side_effect = ProxmoxApiError(500, {"vmid": "does not exist"})
        result = await echo_registry.execute_tool("echo", {"node": "pve1", "vmid": 100})

        assert result.isError is True
        assert get_text_content(result) == (
            'Error: Proxmox API error 500: {"vmid": "does not exist"}'
        )

    @pytest.mark.asyncio
    async def test_exception_without_message_uses_type_name(
        self, echo_registry, echo_handler
    ):
        echo_handler.side_effect = TimeoutError()
        result = await echo_registry.execute_tool("echo", {"node": "pve1", "vmid": 100})

        assert result.isError is True
        assert get_text_content(result) == "Error: TimeoutError"

    def test_validation_error_type(self, echo_registry):
        spec = echo_registry.get_tool("echo")
        with pytest.raises(ToolValidationError):
            spec.validate_arguments({"node": 7, "vmid": 100})

    @pytest.mark.asyncio
    async def test_whole_number_float_is_passed_as_int(self, echo_registry, echo_handler):
        await echo_registry.execute_tool("echo", {"node": "pve1", "vmid": 100.0})

        echo_handler.assert_awaited_once_with(node="pve1", vmid=100)
        assert type(echo_handler.await_args.kwargs["vmid"]) is int

    @pytest.mark.asyncio
    async def test_fractional_float_is_kept(self, echo_registry, echo_handler):
        await echo_registry.execute_tool("echo", {"node": "pve1", "vmid": 1.5})

        echo_handler.assert_awaited_once_with(node="pve1", vmid=1.5)
