"""Configuration settings for weighted matching and clustering."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchingConfig(BaseSettings):
    """Weighted matching configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `MATCHING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Scoring formula
    neutral_score: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=50.0,
        description="Score assumed for attributes the candidate was never measured on",
    )
    excess_cap: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=50.0,
        description="Maximum bonus points for exceeding a requirement",
    )
    penalty_cap: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=50.0,
        description="Maximum penalty points for falling short of a requirement",
    )

    # Reasons
    majority_ratio: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.7,
        description="Share of met requirements that earns the 'majority' reason",
    )
    growth_highlight_threshold: float = Field(
        default=10.0,
        description="Projected growth (%) above which a holder is called high growth",
    )

    # Gap extraction
    top_gap_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of gaps extracted per match result",
    )

    # Clustering
    cluster_score_window: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=10.0,
        description="Results closer than this many points to a seed join its cluster",
    )

    # Skill name matching (job-skill vocabulary)
    skill_fuzzy_match: bool = Field(
        default=True,
        description="Enable fuzzy skill matching",
    )
    skill_fuzzy_threshold: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.85,
        description="Similarity threshold for fuzzy matching",
    )


# Singleton instance for easy import
_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
