"""Configuration settings for gap, shortage and trend analysis."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Percent = Annotated[float, Field(ge=0.0, le=100.0)]


class InsightsConfig(BaseSettings):
    """Threshold settings for market insight scoring.

    All settings have sensible defaults and can be overridden via
    environment variables with `INSIGHTS_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="INSIGHTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Importance of a skill by share of postings requiring it (%)
    importance_critical: Percent = Field(default=50.0)
    importance_important: Percent = Field(default=30.0)

    # Severity of a gap or shortage (points)
    severity_critical: Percent = Field(default=70.0)
    severity_high: Percent = Field(default=50.0)
    severity_medium: Percent = Field(default=30.0)

    # Impact of a gap (points)
    gap_impact_high: Percent = Field(default=70.0)
    gap_impact_medium: Percent = Field(default=40.0)

    # Impact of a local shortage (points)
    shortage_impact_high: Percent = Field(default=60.0)
    shortage_impact_medium: Percent = Field(default=40.0)

    # Trend direction (% change between windows)
    trend_threshold: Annotated[float, Field(gt=0.0)] = Field(
        default=20.0,
        description="Growth above +X% accelerates, below -X% decelerates",
    )

    # Momentum score terms
    volume_reference: Annotated[float, Field(gt=0.0)] = Field(
        default=100.0,
        description="Total postings that earn half the volume term",
    )
    volume_cap: Percent = Field(default=100.0)
    velocity_reference: Annotated[float, Field(gt=0.0)] = Field(
        default=20.0,
        description="Recent postings that earn the full velocity term",
    )
    velocity_cap: Percent = Field(default=50.0)

    @model_validator(mode="after")
    def validate_band_order(self) -> InsightsConfig:
        """Ensure every threshold chain is strictly descending."""
        chains = {
            "importance": (self.importance_critical, self.importance_important),
            "severity": (self.severity_critical, self.severity_high, self.severity_medium),
            "gap_impact": (self.gap_impact_high, self.gap_impact_medium),
            "shortage_impact": (self.shortage_impact_high, self.shortage_impact_medium),
        }
        for name, values in chains.items():
            if any(upper <= lower for upper, lower in zip(values, values[1:])):
                raise ValueError(
                    f"{name} thresholds must be strictly descending (got {values})"
                )
        return self

    @property
    def importance_bands(self) -> tuple[tuple[float, str], ...]:
        return (
            (self.importance_critical, "critical"),
            (self.importance_important, "important"),
        )

    @property
    def severity_bands(self) -> tuple[tuple[float, str], ...]:
        return (
            (self.severity_critical, "critical"),
            (self.severity_high, "high"),
            (self.severity_medium, "medium"),
        )

    @property
    def gap_impact_bands(self) -> tuple[tuple[float, str], ...]:
        return ((self.gap_impact_high, "high"), (self.gap_impact_medium, "medium"))

    @property
    def shortage_impact_bands(self) -> tuple[tuple[float, str], ...]:
        return (
            (self.shortage_impact_high, "high"),
            (self.shortage_impact_medium, "medium"),
        )


# Singleton instance for easy import
_insights_config: InsightsConfig | None = None


def get_insights_config() -> InsightsConfig:
    """Get the insights configuration singleton."""
    global _insights_config
    if _insights_config is None:
        _insights_config = InsightsConfig()
    return _insights_config


def reset_insights_config() -> None:
    """Reset the insights configuration singleton (useful for testing)."""
    global _insights_config
    _insights_config = None
