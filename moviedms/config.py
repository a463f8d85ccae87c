"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the CLI works with no environment at all
    - Environment variables use the MOVIEDMS_ prefix (e.g. MOVIEDMS_LOG_LEVEL)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Default log level WARNING: interactive output stays clean unless asked
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOVIEDMS_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Only json and text exist; anything else falls back to text."""
        if isinstance(v, str) and v.strip().lower() == "json":
            return "json"
        return "text"

    # CSV auto-detection (ENTER at the load prompt)
    default_csv_name: str = "movies_sample.csv"
    csv_search_dirs: list[str] = [
        ".", "src", "..", "../src", "../..", "../../src",
    ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
