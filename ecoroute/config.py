"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file locations, batch file names and logging.

Configuration can be overridden via environment variables:
- ECOROUTE_GRAPH_DATA_DIR=/path/to/data
- ECOROUTE_BATCH_INPUT_FILE=queries.txt
- ECOROUTE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with ECOROUTE_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ECOROUTE_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    locations_file: str = "Locations.csv"
    distances_file: str = "Distances.csv"
    unavailable_marker: str = "X"

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def distances_path(self) -> Path:
        """Full path to distances CSV file."""
        return self.data_dir / self.distances_file


class BatchConfig(BaseSettings):
    """Batch mode configuration.

    Environment variables prefixed with ECOROUTE_BATCH_.
    """

    model_config = SettingsConfigDict(env_prefix="ECOROUTE_BATCH_")

    input_file: Path = Path("input.txt")
    output_file: Path = Path("output.txt")


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with ECOROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ECOROUTE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.locations_path)
        print(config.batch.output_file)

    Environment variables prefixed with ECOROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="ECOROUTE_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
