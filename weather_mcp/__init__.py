"""Weather MCP server package with lazy server imports to avoid runpy warnings.

`weather_mcp.server` is not imported at package import time, so starting the
server with `python -m weather_mcp.server` does not trigger a `RuntimeWarning`.
"""

from importlib import import_module

from .client import MCPClientError, MCPStdIOClient
from .config import ServerConfig, WeatherConfig, load_config
from .result import FailureReason, Result
from .service import WeatherService

__all__ = [
    "MCPStdIOClient",
    "MCPClientError",
    "ServerConfig",
    "WeatherConfig",
    "load_config",
    "FailureReason",
    "Result",
    "WeatherService",
    "get_tool_specs",
    "export_tools_json",
    "run_server",
]

# Attributes provided by the server module, imported on first access.
_server_attrs = {
    "get_tool_specs",
    "export_tools_json",
    "run_server",
}


def _load_server():
    return import_module(".server", __package__)


def __getattr__(name: str):
    if name in _server_attrs:
        return getattr(_load_server(), name)
    raise AttributeError(f"module {__name__} has no attribute {name}")


def __dir__():
    return sorted(list(globals().keys()) + list(_server_attrs))
