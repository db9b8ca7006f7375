"""Adapters for exposing the logic gate tools via FastMCP."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from logic_gates_mcp.server import MCPServer
from logic_gates_mcp.tools import ToolDefinition
from logic_gates_mcp_server.tools import build_server


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool.

    Calls are routed through the dispatcher so validation and error envelopes
    match the offline dispatcher exactly.
    """

    def __init__(self, definition: ToolDefinition[Any], server: MCPServer) -> None:
        """Create a FastMCP tool wrapper for the provided definition."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            tags=set(),
        )
        self._definition = definition
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Dispatch the call and translate the envelope for FastMCP."""
        result = self._server.call_tool(self._definition.name, arguments)
        if result.is_error:
            raise ToolError(result.first_text)
        return ToolResult(
            content=[
                TextContent(type="text", text=block.text) for block in result.content
            ]
        )


def to_fastmcp_tools(server: MCPServer) -> list[Tool]:
    """Wrap every registered tool for FastMCP."""
    return [ToolDefinitionAdapter(tool, server) for tool in server.registry]


def build_fastmcp_app(server: MCPServer | None = None) -> tuple[FastMCP, MCPServer]:
    """Create a FastMCP server instance with all gate tools registered."""
    dispatcher = server or build_server()
    app = FastMCP(
        name=dispatcher.name,
        instructions="Boolean logic gates exposed over the Model Context Protocol.",
    )
    for tool in to_fastmcp_tools(dispatcher):
        app.add_tool(tool)
    return app, dispatcher
