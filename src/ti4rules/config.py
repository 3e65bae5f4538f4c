"""Lightweight configuration for the rules core."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime knobs shared by the dice and reporting layers."""

    model_config = SettingsConfigDict(
        env_prefix="TI4RULES_", env_file=".env", env_file_encoding="utf-8"
    )

    dice_sides: int = Field(default=10, description="Faces on a combat die", gt=1)
    dice_delete_after_seconds: float = Field(
        default=30.0,
        description="Seconds a spawned die stays on the table before cleanup",
        ge=0.0,
    )
    rng_seed: str = Field(
        default="table",
        description="Base seed for the in-process dice roller",
    )
    log_level: str = Field(default="INFO", description="Root log level for the dev entrypoint")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
