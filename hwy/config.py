"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- HWY_GRAPH_DATA_DIR=/path/to/data
- HWY_GRAPH_GRAPH_FILE=highways.txt
- HWY_GEO_USER_AGENT=my-agent
- HWY_DIST_AVERAGE_SPEED_KMH=90
- HWY_LOG_LEVEL=DEBUG

Adapters receive their section of the configuration explicitly; nothing
in the graph core reads it.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with HWY_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="HWY_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    graph_file: str = "highways.txt"

    @property
    def graph_path(self) -> Path:
        """Full path to the graph text file."""
        return self.data_dir / self.graph_file


class GeocodingConfig(BaseSettings):
    """Geocoding configuration.

    Environment variables prefixed with HWY_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="HWY_GEO_")

    user_agent: str = "hwy-graph"
    timeout_seconds: int = 10
    rate_limit_delay: float = 1.0
    max_retries: int = 2
    error_wait_seconds: float = 2.0


class DistanceConfig(BaseSettings):
    """Offline distance matrix configuration.

    Environment variables prefixed with HWY_DIST_.
    """

    model_config = SettingsConfigDict(env_prefix="HWY_DIST_")

    average_speed_kmh: float = Field(default=88.0, gt=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with HWY_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="HWY_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.graph_path)
        print(config.geocoding.user_agent)

    Environment variables prefixed with HWY_.
    """

    model_config = SettingsConfigDict(env_prefix="HWY_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    distance: DistanceConfig = Field(default_factory=DistanceConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Raises:
        ConfigurationError: If a setting from the environment is invalid.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        errors = e.errors()
        setting = ".".join(str(part) for part in errors[0]["loc"]) if errors else ""
        raise ConfigurationError(
            f"Invalid configuration for {e.title}",
            cause=e,
            setting_name=setting,
        ) from e


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
