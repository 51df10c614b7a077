"""
netdiagram configuration

Settings are loaded from:
1. Environment variables (prefixed with NETDIAGRAM_)
2. ~/.netdiagram/.env file

Key settings:
- NETDIAGRAM_LOG_LEVEL: logging level used by the CLI (default: WARNING)
- NETDIAGRAM_CANVAS_HEIGHT: height of the network diagram canvas (default: 500px)
- NETDIAGRAM_STABILIZATION_ITERATIONS: physics stabilization iterations (default: 50)
- NETDIAGRAM_SCALE_EDGES: scale edge width by the value column range (default: false)
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """netdiagram settings."""

    log_level: str = "WARNING"

    # Network diagram canvas and physics
    canvas_height: str = "500px"
    stabilization_iterations: int = Field(default=50, ge=0)
    stabilization_update_interval: int = Field(default=50, ge=1)
    scale_edges: bool = False

    # HTML export
    vis_network_url: str = "https://unpkg.com/vis-network@9.1.9/standalone/umd/vis-network.min.js"

    model_config = SettingsConfigDict(
        env_prefix="NETDIAGRAM_",
        env_file=Path.home() / ".netdiagram" / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings."""
    return Settings()


def reload_settings() -> Settings:
    """Clear cached settings (useful for tests) and reload."""
    get_settings.cache_clear()
    return get_settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for command line use."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
    )


__all__ = ["Settings", "get_settings", "reload_settings", "configure_logging"]
