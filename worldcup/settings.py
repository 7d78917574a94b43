"""
Application configuration using pydantic-settings.

Environment variables (prefix: WORLDCUP_):
    WORLDCUP_ROUNDS    - Round budget for a game (default: 100)
    WORLDCUP_SEED      - Seed for the random dice (default: unset)
    WORLDCUP_LOG_LEVEL - Python logging level name (default: INFO)
    WORLDCUP_LOG_DIR   - Directory for JSONL game logs (default: .)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from worldcup.config import GameConfig


class GameSettings(BaseSettings):
    """Runtime settings for simulated games."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="WORLDCUP_",
    )

    rounds: int = Field(default=100, ge=0, description="Maximum number of rounds to play.")
    seed: Optional[int] = Field(default=None, description="Seed for the random dice.")
    log_level: str = Field(default="INFO", description="Logging level name.")
    log_dir: Path = Field(default=Path("."), description="Directory for JSONL game logs.")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any case, reject names the logging module does not know."""
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def to_game_config(self, seed: Optional[int] = None) -> GameConfig:
        """Build a game config, with an explicit seed taking precedence."""
        return GameConfig(seed=self.seed if seed is None else seed)


@lru_cache
def get_settings() -> GameSettings:
    """Return cached settings instance."""
    return GameSettings()
