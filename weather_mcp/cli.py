"""Command line entry point for the weather MCP server."""

import argparse
import json
import logging
import sys

from .client import MCPClientError, MCPStdIOClient
from .config import load_config

logger = logging.getLogger(__name__)


def _parse_arguments(pairs: list[str]) -> dict[str, str]:
    arguments = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"expected key=value, got {pair!r}")
        arguments[key] = value
    return arguments


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weather-mcp",
        description="Weather alerts, forecasts and sunrise/sunset over MCP stdio",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="Run the MCP server on stdio (default)")

    tools_p = sub.add_parser("tools", help="Print the tool specs as JSON")
    tools_p.add_argument("--output", help="Write the specs to this file instead of stdout")

    call_p = sub.add_parser("call", help="Start the server and call one tool")
    call_p.add_argument("tool", help="Tool name, e.g. get_forecast")
    call_p.add_argument("arguments", nargs="*", help="Tool arguments as key=value")
    call_p.add_argument("--timeout", type=float, default=60.0, help="Seconds to wait for the server")

    args = parser.parse_args(argv)
    command = args.command or "serve"

    if command == "serve":
        return _cmd_serve()
    if command == "tools":
        return _cmd_tools(args)
    return _cmd_call(args)


def _cmd_serve() -> int:
    from .server import configure_logging, run_server

    try:
        weather_config, server_config = load_config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    configure_logging(server_config.log_dir)
    try:
        run_server(weather_config, server_config)
    except Exception:
        logger.exception("Fatal error starting the weather MCP server")
        return 1
    return 0


def _cmd_tools(args) -> int:
    from .server import export_tools_json, get_tool_specs

    if args.output:
        export_tools_json(args.output)
        print(f"Wrote {len(get_tool_specs())} tool specs to {args.output}")
    else:
        print(json.dumps(get_tool_specs(), indent=2))
    return 0


def _cmd_call(args) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        arguments = _parse_arguments(args.arguments)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        with MCPStdIOClient(timeout=args.timeout) as client:
            print(client.call_tool(args.tool, arguments))
    except MCPClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
