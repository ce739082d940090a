"""Lightweight configuration for the hexsight tools."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the map-backed helpers and the command line tool.

    The field of view iterator itself takes no configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEXSIGHT_", env_file=".env", env_file_encoding="utf-8"
    )

    default_radius: int = Field(
        default=8, ge=0, description="Sight radius used when the caller gives none"
    )
    max_radius: int = Field(
        default=64,
        ge=1,
        description="Largest sight radius the map-backed helpers accept",
    )
    fake_isometric_corners: bool = Field(
        default=True,
        description="Reveal acute corners of fake isometric walls by default",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level for the CLI"
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
