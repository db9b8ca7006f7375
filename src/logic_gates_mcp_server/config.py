"""Server configuration loaded from the environment."""

from __future__ import annotations

import os
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

Transport = Literal["stdio", "http", "sse", "streamable-http"]
TRANSPORTS: tuple[str, ...] = ("stdio", "http", "sse", "streamable-http")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_PREFIX = "LOGIC_GATES_"


class ServerConfig(BaseModel):
    """Transport and logging settings for the MCP server.

    Attributes:
        transport: FastMCP transport name.
        host: Bind address for network transports.
        port: Bind port for network transports.
        path: URL path for HTTP transports.
        log_level: Root logging level.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    transport: Transport = "stdio"
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    path: str = "/mcp"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_network(self) -> bool:
        """Whether the transport binds a host and port."""
        return self.transport != "stdio"

    def run_options(self) -> dict[str, object]:
        """Keyword arguments for ``FastMCP.run``."""
        if not self.is_network:
            return {"transport": self.transport}
        return {
            "transport": self.transport,
            "host": self.host,
            "port": self.port,
            "path": self.path,
        }

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Load configuration from ``LOGIC_GATES_*`` environment variables.

        Unset variables fall back to defaults.

        Raises:
            ValueError: If any variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values = {
            name: env[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in env
        }
        try:
            return cls.model_validate(values)
        except ValidationError as error:
            raise ValueError(f"Invalid server configuration: {error}") from error
