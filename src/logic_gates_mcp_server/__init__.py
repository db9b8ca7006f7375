"""Model Context Protocol server exposing boolean logic gates."""

from logic_gates_mcp_server.config import ServerConfig
from logic_gates_mcp_server.tools import build_server, build_tools

__all__ = [
    "ServerConfig",
    "build_server",
    "build_tools",
]
