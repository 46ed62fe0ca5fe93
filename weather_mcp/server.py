import json
import logging
import os
from typing import Annotated

from pydantic import Field

from .config import ServerConfig, WeatherConfig, load_config
from .handlers import handle_get_alerts, handle_get_forecast, handle_get_sunrise_sunset
from .service import WeatherService

logger = logging.getLogger("weather_mcp.server")

# A small registry to export tool metadata (server-first source of truth)
_TOOL_SPECS: list[dict] = []
# Functions (and args/kwargs for mcp.tool) waiting for the MCP server to be
# initialized, so importing this module does not pull in the `mcp` package.
_REGISTERED_FUNCS: list[tuple] = []

# Created lazily via `get_mcp()`.
mcp = None
_service: WeatherService | None = None


def get_mcp(server_config: ServerConfig | None = None):
    """Lazily initialize and return the FastMCP server instance."""
    global mcp
    if mcp is not None:
        return mcp
    from mcp.server.fastmcp import FastMCP
    mcp = FastMCP((server_config or ServerConfig()).name)
    return mcp


def get_service() -> WeatherService:
    """Return the service the tools delegate to, building one from the environment if needed."""
    global _service
    if _service is None:
        _service = WeatherService(WeatherConfig.from_env())
    return _service


def set_service(service: WeatherService | None) -> None:
    global _service
    _service = service


def register_tools_with_mcp(server_config: ServerConfig | None = None):
    """Register all previously-decorated functions with the MCP instance."""
    m = get_mcp(server_config)
    for fn, args, kwargs in _REGISTERED_FUNCS:
        m.tool(*args, **kwargs)(fn)
    return m


def tool(*args, schema: dict | None = None, **kwargs):
    """Record tool metadata without initializing MCP.

    Use as `@tool(schema={...})`. Functions are handed to FastMCP when
    `register_tools_with_mcp()` runs (e.g. inside `run_server`).
    """
    def decorator(fn):
        spec = {
            "name": fn.__name__,
            "description": (fn.__doc__ or "").strip().split("\n")[0],
            "input_schema": schema or {},
        }
        _TOOL_SPECS.append(spec)
        _REGISTERED_FUNCS.append((fn, args, kwargs))
        setattr(fn, "__tool_spec__", spec)
        return fn
    return decorator


def get_tool_specs() -> list[dict]:
    """Return copies of the registered tool specs."""
    return [dict(s) for s in _TOOL_SPECS]


def export_tools_json(path: str = "tools.json") -> None:
    """Write the exported tool metadata to a JSON file."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(get_tool_specs(), fh, indent=2)


_STATE_DESCRIPTION = "The two-letter state code to get alerts for (e.g. 'CA', NY)"
_LOCATION_DESCRIPTION = (
    "The location to {what} (e.g., 'California', 'Los Angeles', 'San Francisco, CA')"
)
_FORECAST_DESCRIPTION = _LOCATION_DESCRIPTION.format(what="get a forecast for")
_SUN_DESCRIPTION = _LOCATION_DESCRIPTION.format(what="get sunrise/sunset times for")

# FastMCP builds the served input schema (and validates calls) from these.
StateCode = Annotated[str, Field(min_length=2, max_length=2, description=_STATE_DESCRIPTION)]
ForecastLocation = Annotated[str, Field(min_length=1, description=_FORECAST_DESCRIPTION)]
SunLocation = Annotated[str, Field(min_length=1, description=_SUN_DESCRIPTION)]


@tool(schema={
    "type": "object",
    "properties": {
        "state": {
            "type": "string",
            "minLength": 2,
            "maxLength": 2,
            "description": _STATE_DESCRIPTION,
        },
    },
    "required": ["state"],
    "additionalProperties": False,
})
async def get_alerts(state: StateCode) -> str:
    """Get weather alerts for a state.

    Args:
        state: Two-letter US state code (e.g. CA, NY)
    """
    return await handle_get_alerts(get_service(), state)


@tool(schema={
    "type": "object",
    "properties": {
        "location": {"type": "string", "minLength": 1, "description": _FORECAST_DESCRIPTION},
    },
    "required": ["location"],
    "additionalProperties": False,
})
async def get_forecast(location: ForecastLocation) -> str:
    """Get weather forecast for a location.

    Args:
        location: City, region or address, e.g. "San Francisco, CA"
    """
    return await handle_get_forecast(get_service(), location)


@tool(schema={
    "type": "object",
    "properties": {
        "location": {"type": "string", "minLength": 1, "description": _SUN_DESCRIPTION},
    },
    "required": ["location"],
    "additionalProperties": False,
})
async def get_sunrise_sunset(location: SunLocation) -> str:
    """Get sunrise and sunset times for a location.

    Args:
        location: City, region or address, e.g. "San Francisco, CA"
    """
    return await handle_get_sunrise_sunset(get_service(), location)


def configure_logging(log_dir: str) -> None:
    """Send server logs to `<log_dir>/weather_server.log`; stdout carries the protocol."""
    os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        filename=os.path.join(log_dir, "weather_server.log"),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )


def run_server(
    config: WeatherConfig | None = None,
    server_config: ServerConfig | None = None,
    transport: str = "stdio",
) -> None:
    """Build the service, register the tools and run the MCP server."""
    server_config = server_config or ServerConfig()
    set_service(WeatherService(config or WeatherConfig.from_env()))
    m = register_tools_with_mcp(server_config)
    logger.info(f"{server_config.name} {server_config.version} running on {transport}")
    m.run(transport=transport)


if __name__ == "__main__":
    weather_config, server_config = load_config()
    configure_logging(server_config.log_dir)
    try:
        run_server(weather_config, server_config)
    except Exception:
        logger.exception("Fatal error starting the weather MCP server")
        raise SystemExit(1)
