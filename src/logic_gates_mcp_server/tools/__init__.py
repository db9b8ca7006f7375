"""Tool registration helpers for the logic gates MCP server."""

from __future__ import annotations

from typing import Any

from logic_gates_mcp.server import MCPServer, ToolRegistry
from logic_gates_mcp.tools import ToolDefinition
from logic_gates_mcp_server.tools.gates import (
    and_gate_tool,
    or_gate_tool,
    xor_gate_tool,
)


def build_tools() -> list[ToolDefinition[Any]]:
    """Instantiate all tool definitions in discovery order."""
    return [
        and_gate_tool(),
        or_gate_tool(),
        xor_gate_tool(),
    ]


def build_server() -> MCPServer:
    """Create the dispatcher with every gate registered."""
    return MCPServer(ToolRegistry(build_tools()))
