"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- RMAP_GRAPH_DATA_DIR=/path/to/data
- RMAP_GEO_USER_AGENT=my-app
- RMAP_ROUTING_BASE_URL=http://localhost:5000
- RMAP_MAP_OPEN_BROWSER=false
- RMAP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Bundled graph data configuration.

    Environment variables prefixed with RMAP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RMAP_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    cities_file: str = "cities.csv"
    routes_file: str = "routes.csv"

    @property
    def cities_path(self) -> Path:
        """Full path to the cities CSV file."""
        return self.data_dir / self.cities_file

    @property
    def routes_path(self) -> Path:
        """Full path to the routes CSV file."""
        return self.data_dir / self.routes_file


class GeocodingConfig(BaseSettings):
    """Geocoding configuration.

    Environment variables prefixed with RMAP_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="RMAP_GEO_")

    user_agent: str = "route-mapper"
    timeout_seconds: int = 10
    rate_limit_delay: float = 1.0
    max_retries: int = 2
    error_wait_seconds: float = 2.0
    language: str = "en"


class RoutingConfig(BaseSettings):
    """Driving route service (OSRM) configuration.

    Environment variables prefixed with RMAP_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="RMAP_ROUTING_")

    base_url: str = "https://router.project-osrm.org"
    profile: str = "driving"
    timeout_seconds: float = 15.0
    user_agent: str = "route-mapper"
    cost_per_km: float = 10.0

    # Waypoint sampling used to guess the settlements a route passes through
    sample_start_index: int = 10
    min_sample_step: int = 30
    sample_divisions: int = 10

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("min_sample_step", "sample_divisions")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value


class MapConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with RMAP_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="RMAP_MAP_")

    zoom_start: int = 6
    output_file: str = "route.html"
    open_browser: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RMAP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RMAP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.cities_path)
        print(config.routing.base_url)

    Environment variables prefixed with RMAP_.
    """

    model_config = SettingsConfigDict(env_prefix="RMAP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)

    @property
    def map_output_path(self) -> Path:
        """Default location of the rendered HTML map."""
        return self.output_dir / self.map.output_file


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
