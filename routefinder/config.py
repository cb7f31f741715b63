"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
where the route table lives, where answered queries are appended, and
how logging is set up.

Configuration can be overridden via environment variables:
- RF_GRAPH_DATA_DIR=/path/to/data
- RF_GRAPH_ROUTES_FILE=routes.csv
- RF_OUTPUT_RESULTS_FILE=/tmp/results.csv
- RF_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Optional

from pydantic import AfterValidator, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _check_delimiter(value: str) -> str:
    if len(value) != 1:
        raise ValueError(f"Delimiter must be a single character, got {value!r}")
    return value


Delimiter = Annotated[str, AfterValidator(_check_delimiter)]


class GraphConfig(BaseSettings):
    """Route table configuration.

    Environment variables prefixed with RF_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    routes_file: str = "input-routes.csv"
    delimiter: Delimiter = ","
    skip_header: bool = False

    @property
    def routes_path(self) -> Path:
        """Full path to the route table file."""
        return self.data_dir / self.routes_file


class OutputConfig(BaseSettings):
    """Result output configuration.

    Environment variables prefixed with RF_OUTPUT_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_OUTPUT_")

    results_file: Optional[Path] = None
    delimiter: Delimiter = ","


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RF_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def level_number(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.level)


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.routes_path)
        print(config.output.results_file)

    Environment variables prefixed with RF_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
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
