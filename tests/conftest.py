"""Pytest configuration and fixtures for Proxmox MCP tests."""

from unittest.mock import AsyncMock

import pytest

from proxmox_mcp.config import Config
from proxmox_mcp.foundation.proxmox_client import ProxmoxClient
from proxmox_mcp.tools import build_tool_registry


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as fast, fully mocked unit test")
    config.addinivalue_line("markers", "smoke: mark test as quick validation test")


@pytest.fixture
def proxmox_config():
    """Connection config matching a default lab install."""
    return Config(
        host="pve.local",
        port=8006,
        token_id="root@pam!mcp",
        token_secret="abcd",
        allow_self_signed_certs=True,
    )


@pytest.fixture
def proxmox_client(proxmox_config):
    return ProxmoxClient(proxmox_config)


@pytest.fixture
def mock_client():
    """A ProxmoxClient double whose four verbs are AsyncMocks."""
    client = AsyncMock(spec=ProxmoxClient)
    client.fetch.return_value = None
    client.create.return_value = None
    client.replace.return_value = None
    client.remove.return_value = None
    return client


@pytest.fixture
def registry(mock_client):
    """The full tool registry wired to the mock client."""
    return build_tool_registry(mock_client)
