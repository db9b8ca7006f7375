"""Tool registry and dispatcher for the logic gates MCP server.

The dispatcher is the single failure boundary of the server: discovery and tool
calls always produce a well-formed envelope, and no exception raised during
lookup, validation or handler execution escapes :meth:`MCPServer.call_tool`.
Transport concerns live in :mod:`logic_gates_mcp_server.fastmcp_adapter`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Literal

from logic_gates_mcp.errors import (
    InvalidArgumentsError,
    MCPError,
    UnknownToolError,
)
from logic_gates_mcp.tools import ToolDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextContent:
    """Plain text content block."""

    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class CallResult:
    """Envelope returned for every tool call.

    Attributes:
        content: Ordered content blocks; a single text block for every call.
        is_error: Whether the content describes a reported failure.

    """

    content: list[TextContent] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text(cls, text: str) -> CallResult:
        """Build a successful result carrying ``text``."""
        return cls(content=[TextContent(text)])

    @classmethod
    def error(cls, message: str) -> CallResult:
        """Build a reported-error result carrying ``message``."""
        return cls(content=[TextContent(message)], is_error=True)

    @property
    def first_text(self) -> str:
        """Text of the first content block, or an empty string."""
        return self.content[0].text if self.content else ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape; ``isError`` only appears on failures."""
        payload: dict[str, Any] = {
            "content": [block.to_dict() for block in self.content]
        }
        if self.is_error:
            payload["isError"] = True
        return payload

    def to_json(self) -> str:
        """Serialize the result to JSON."""
        return json.dumps(self.to_dict())


class ToolRegistry:
    """Read-only, ordered collection of tool definitions.

    The registry is populated once from a fixed sequence and exposes no way to
    add or remove tools afterwards, so it can be shared between concurrent
    requests without locking.
    """

    def __init__(self, tools: Iterable[ToolDefinition[Any]]) -> None:
        """Build the registry.

        Raises:
            ValueError: If two tools share the same name.

        """
        self._tools: dict[str, ToolDefinition[Any]] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Tool '{tool.name}' is already registered")
            self._tools[tool.name] = tool

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return self.lookup(name) is not None

    def __iter__(self) -> Iterator[ToolDefinition[Any]]:
        return iter(self._tools.values())

    def names(self) -> list[str]:
        """Registered tool names in registration order."""
        return list(self._tools)

    def lookup(self, name: object) -> ToolDefinition[Any] | None:
        """Return the tool registered under ``name``, or ``None``."""
        if not isinstance(name, str):
            return None
        return self._tools.get(name)

    def describe_all(self) -> list[dict[str, Any]]:
        """Discovery descriptors for every tool in registration order."""
        return [dict(tool.metadata()) for tool in self._tools.values()]


class MCPServer:
    """Dispatcher answering discovery and tool-call requests.

    Holds no per-request state; one instance is built at start-up and handed
    to the transport binding.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        name: str = "logic-gates",
        version: str = "1.0.0",
    ) -> None:
        self.registry = registry
        self.name = name
        self.version = version

    @classmethod
    def from_tools(cls, *tools: ToolDefinition[Any], **kwargs: Any) -> MCPServer:
        """Create a server whose registry holds ``tools``."""
        return cls(ToolRegistry(tools), **kwargs)

    def available_tools(self) -> list[str]:
        """List the names of registered tools."""
        return self.registry.names()

    def list_tools(self) -> dict[str, list[dict[str, Any]]]:
        """Answer a ``ListTools`` request."""
        tools = self.registry.describe_all()
        logger.debug("Listing %d tools", len(tools))
        return {"tools": tools}

    def call_tool(self, name: object, arguments: object = None) -> CallResult:
        """Answer a ``CallTool`` request.

        Args:
            name: Name of the tool to execute.
            arguments: Raw, unvalidated arguments for the tool.

        Returns:
            CallResult with the handler's text, or a reported error describing
            an unknown tool, invalid arguments or an unexpected failure.

        """
        try:
            return self._dispatch(name, arguments)
        except (UnknownToolError, InvalidArgumentsError) as error:
            logger.warning("Tool call %r rejected: %s", name, error.message)
            return CallResult.error(error.message)
        except MCPError as error:
            logger.error("Tool call %r failed: %s", name, error.message)
            return CallResult.error(f"Error: {error.message}")
        except Exception as exc:
            logger.exception("Tool call %r failed", name)
            return CallResult.error(f"Error: {exc}")

    def _dispatch(self, name: object, arguments: object) -> CallResult:
        tool = self.registry.lookup(name)
        if tool is None:
            raise UnknownToolError(name)

        parsed = tool.parse(arguments)
        if parsed.data is None:
            raise InvalidArgumentsError(tool.name, str(parsed.error), parsed.details)

        logger.debug("Calling tool %s", tool.name)
        text = tool.handler(parsed.data)
        return CallResult.text(str(text))
