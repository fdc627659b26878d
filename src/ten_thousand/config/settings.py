"""
Ten Thousand - Application Settings

Loads configuration from environment variables (prefix TEN_THOUSAND_) or a
.env file using Pydantic Settings.
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from ten_thousand.engine.base import DifficultyTier


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Rules
    target_score: int = Field(default=10000, gt=0)
    entry_threshold: int = Field(default=500, ge=0)

    # Bot
    default_difficulty: DifficultyTier = DifficultyTier.INTERMEDIATE
    rng_seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "TEN_THOUSAND_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("default_difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, value: object) -> object:
        # Accept tier names ("expert") as well as enum values
        if isinstance(value, str) and not value.isdigit():
            try:
                return DifficultyTier[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown difficulty {value!r}.") from None
        if isinstance(value, str):
            return int(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    @model_validator(mode="after")
    def _check_threshold(self) -> "Settings":
        if self.entry_threshold > self.target_score:
            raise ValueError("entry_threshold cannot exceed target_score.")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
