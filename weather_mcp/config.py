"""Fixed configuration for the weather MCP server.

Values are built once at process start by `load_config()` and handed to the
components that need them; nothing here is mutated afterwards.
"""

from dataclasses import dataclass
import os
from typing import Mapping

# Constants
NWS_API_BASE = "https://api.weather.gov"
GEOCODING_BASE = "https://nominatim.openstreetmap.org"
USER_AGENT = "weather-mcp/1.0"
DEFAULT_TIMEOUT = 30.0

SERVER_NAME = "weather-mcp"
SERVER_VERSION = "1.0"


@dataclass(frozen=True)
class WeatherConfig:
    nws_api_base: str = NWS_API_BASE
    geocoding_base: str = GEOCODING_BASE
    user_agent: str = USER_AGENT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "WeatherConfig":
        """Build a config from `WEATHER_*` environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        timeout = env.get("WEATHER_HTTP_TIMEOUT")
        return cls(
            nws_api_base=env.get("WEATHER_NWS_API_BASE", NWS_API_BASE).rstrip("/"),
            geocoding_base=env.get("WEATHER_GEOCODING_BASE", GEOCODING_BASE).rstrip("/"),
            user_agent=env.get("WEATHER_USER_AGENT", USER_AGENT),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )

    @property
    def nws_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

    @property
    def geocoding_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}


@dataclass(frozen=True)
class ServerConfig:
    name: str = SERVER_NAME
    version: str = SERVER_VERSION
    log_dir: str = "logs"


def load_config(environ: Mapping[str, str] | None = None) -> tuple[WeatherConfig, ServerConfig]:
    env = os.environ if environ is None else environ
    return WeatherConfig.from_env(env), ServerConfig(log_dir=env.get("LOG_DIR", "logs"))
