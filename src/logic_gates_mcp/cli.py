"""Command-line access to the tool dispatcher without a transport."""

from __future__ import annotations

import argparse
import json

from logic_gates_mcp_server.tools import build_server


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="Call logic gate tools directly.")
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON.",
    )
    parser.add_argument("--tool", help="Name of the tool to call.")
    parser.add_argument(
        "--arguments",
        default="{}",
        help="Tool arguments as a JSON object.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    server = build_server()

    if args.catalog or args.tool is None:
        print(json.dumps(server.list_tools(), indent=2))
        return 0

    try:
        arguments = json.loads(args.arguments)
    except json.JSONDecodeError as error:
        parser.error(f"--arguments is not valid JSON: {error}")

    result = server.call_tool(args.tool, arguments)
    print(result.to_json())
    return 1 if result.is_error else 0


if __name__ == "__main__":
    raise SystemExit(main())
