"""logic_gates_mcp package initialization."""

from logic_gates_mcp.errors import (
    HandlerError,
    InvalidArgumentsError,
    MCPError,
    UnknownToolError,
)
from logic_gates_mcp.server import CallResult, MCPServer, TextContent, ToolRegistry
from logic_gates_mcp.tools import ParseResult, ToolDefinition, ToolParameters

__all__ = [
    "CallResult",
    "HandlerError",
    "InvalidArgumentsError",
    "MCPError",
    "MCPServer",
    "ParseResult",
    "TextContent",
    "ToolDefinition",
    "ToolParameters",
    "ToolRegistry",
    "UnknownToolError",
]
