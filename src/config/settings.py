"""Runtime settings for the career engine CLI."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings read from the environment or a `.env` file.

    Scoring itself is configured per call through the component config
    models; these values only shape how the CLI runs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output_indent: int = Field(
        default=2,
        ge=0,
        description="Indent width for JSON printed by the CLI",
    )
    forecast_seed: int | None = Field(
        default=None,
        description="Seed for simulated forecast variance; unset keeps projections deterministic",
    )
    log_level: str = Field(default="INFO", description=f"One of {', '.join(LOG_LEVELS)}")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}. Must be one of {LOG_LEVELS}")
        return level


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _settings
    _settings = None
