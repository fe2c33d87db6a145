"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the settings used by
the host graph loader, the query driver and the command-line front-end.

Configuration can be overridden via environment variables:
- GRAPHPATH_GRAPH_DATA_DIR=/path/to/graph
- GRAPHPATH_QUERY_ECHO_EDGES=false
- GRAPHPATH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class HostGraphConfig(BaseSettings):
    """Host graph data configuration.

    Environment variables prefixed with GRAPHPATH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHPATH_GRAPH_")

    data_dir: Path = Field(default_factory=lambda: Path.cwd() / "data")
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"

    @property
    def vertices_path(self) -> Path:
        """Full path to the vertices CSV file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to the edges CSV file."""
        return self.data_dir / self.edges_file


class QueryConfig(BaseSettings):
    """Shortest-path query configuration.

    Environment variables prefixed with GRAPHPATH_QUERY_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHPATH_QUERY_")

    echo_edges: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GRAPHPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHPATH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.edges_path)

    Environment variables prefixed with GRAPHPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPHPATH_")

    graph: HostGraphConfig = Field(default_factory=HostGraphConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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


def configure_logging(config: ObservabilityConfig) -> None:
    """Route log records to stderr using the configured level and format.

    Standard output is reserved for query results.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
        )
    logging.basicConfig(level=level, format=config.format, force=True)
