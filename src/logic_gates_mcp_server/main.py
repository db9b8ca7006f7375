"""Entry point for the logic gates MCP server."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from logic_gates_mcp_server.config import LOG_LEVELS, TRANSPORTS, ServerConfig
from logic_gates_mcp_server.fastmcp_adapter import build_fastmcp_app

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdio transports keep stdout clean."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser(defaults: ServerConfig) -> argparse.ArgumentParser:
    """Create the argument parser, seeded with environment defaults."""
    parser = argparse.ArgumentParser(description="Logic gates MCP server")
    parser.add_argument(
        "--transport", choices=TRANSPORTS, default=defaults.transport
    )
    parser.add_argument("--host", default=defaults.host)
    parser.add_argument("--port", type=int, default=defaults.port)
    parser.add_argument("--path", default=defaults.path)
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=defaults.log_level,
    )
    parser.add_argument("--catalog", action="store_true", help="Print the tool catalog")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse settings, then serve the gate tools over the chosen transport."""
    parser = build_parser(ServerConfig.from_env())
    args = parser.parse_args(argv)
    try:
        config = ServerConfig(
            transport=args.transport,
            host=args.host,
            port=args.port,
            path=args.path,
            log_level=args.log_level,
        )
    except ValueError as error:
        parser.error(str(error))

    configure_logging(config.log_level)
    app, server = build_fastmcp_app()

    if args.catalog:
        print(json.dumps(server.list_tools(), indent=2))
        return 0

    logger.info(
        "Starting %s %s with %s transport", server.name, server.version, config.transport
    )
    app.run(**config.run_options())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
