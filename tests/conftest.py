"""Shared test fixtures."""

from __future__ import annotations

import pytest

from logic_gates_mcp.server import MCPServer
from logic_gates_mcp_server.tools import build_server


@pytest.fixture()
def server() -> MCPServer:
    """Provide a dispatcher with the three gate tools registered."""
    return build_server()


@pytest.fixture()
def valid_arguments() -> dict[str, int]:
    """Provide a valid gate payload."""
    return {"leftHand": 1, "rightHand": 0}


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the event loop FastMCP targets."""
    return "asyncio"
