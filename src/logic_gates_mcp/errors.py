"""Custom error types for MCP tool dispatch."""

from __future__ import annotations

from typing import TypedDict


class MCPErrorPayload(TypedDict):
    """Structured JSON payload for MCP errors."""

    error: dict[str, object | None]


class MCPError(Exception):
    """Structured MCP error containing a JSON-friendly payload."""

    error_type = "MCPError"

    def __init__(self, message: str, details: object | None = None) -> None:
        """Create a structured MCP error payload."""
        super().__init__(message)
        self.message = message
        self.error: MCPErrorPayload = {
            "error": {
                "type": self.error_type,
                "message": message,
                "details": details,
            }
        }

    def to_dict(self) -> MCPErrorPayload:
        """Return the structured error payload."""
        return self.error


class UnknownToolError(MCPError):
    """Raised when a tool name is not present in the registry."""

    error_type = "UnknownTool"

    def __init__(self, name: object) -> None:
        """Create an error for the unrecognized tool ``name``."""
        super().__init__(f"Unknown tool: {name}", details={"name": str(name)})


class InvalidArgumentsError(MCPError):
    """Raised when tool arguments do not satisfy the input schema."""

    error_type = "InvalidArguments"

    def __init__(self, tool_name: str, violations: str, details: object = None):
        super().__init__(
            f"Invalid arguments for {tool_name}: {violations}", details=details
        )


class HandlerError(MCPError):
    """Raised by tool handlers for faults during execution."""

    error_type = "HandlerFailure"
