"""
Runtime configuration for the game shell.
Uses pydantic-settings for environment variable parsing.

Gameplay numbers are fixed in gameplay/constants.py; only the way the
game is run (frame rate, window, logging, seeding) is configurable.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Shell settings loaded from RVR_* environment variables."""

    # Display
    target_fps: int = Field(
        default=60,
        gt=0,
        description="Frames per second the loop is capped at"
    )
    window_title: str = Field(default="Roots vs Robots")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level"
    )

    # Randomness
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for robot spawns. None means seed from the OS"
    )

    class Config:
        env_prefix = "RVR_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
