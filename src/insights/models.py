"""Data models for gap, shortage and trend analysis."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Literal

Direction = Literal["accelerating", "decelerating", "stable"]


@dataclass(frozen=True)
class FrequencyTable:
    """Skill occurrence counts over a reference population of postings."""

    counts: dict[str, int]
    total: int

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {"counts": dict(self.counts), "total": self.total}


@dataclass(frozen=True)
class SkillDemand:
    """How often a skill is asked for across a reference population."""

    name: str
    count: int
    frequency: int
    importance: str

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class GapRecord:
    """A shortfall between a candidate's level and the level required."""

    name: str
    current_level: float
    required_level: float
    gap_size: float
    severity: str
    impact: str
    frequency: int | None = None
    importance: str | None = None

    def __post_init__(self) -> None:
        expected = max(0.0, self.required_level - self.current_level)
        if abs(self.gap_size - expected) > 1e-9:
            raise ValueError(
                f"gap_size must equal max(0, required - current) (got {self.gap_size}, "
                f"expected {expected})"
            )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class StrengthRecord:
    """An in-demand skill the candidate already has."""

    name: str
    matched_attribute: str
    frequency: int
    importance: str
    advantage: str

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class GapAnalysis:
    """Gaps, strengths and a headline gap score (lower is better)."""

    gaps: tuple[GapRecord, ...] = field(default_factory=tuple)
    strengths: tuple[StrengthRecord, ...] = field(default_factory=tuple)
    demand: tuple[SkillDemand, ...] = field(default_factory=tuple)
    overall_gap_score: int = 0
    recommendations: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not (0 <= self.overall_gap_score <= 100):
            raise ValueError(
                f"overall_gap_score must be between 0 and 100 (got {self.overall_gap_score})"
            )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "gaps": [gap.to_dict() for gap in self.gaps],
            "strengths": [strength.to_dict() for strength in self.strengths],
            "demand": [entry.to_dict() for entry in self.demand],
            "overall_gap_score": self.overall_gap_score,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class ShortageRecord:
    """Local demand for a skill outrunning its supply."""

    name: str
    demand_level: int
    supply_level: int
    shortage_score: int
    severity: str
    impact: str
    postings: int

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class TrendRecord:
    """Change between two equal-length time windows."""

    current_count: int
    previous_count: int
    growth_rate: float
    direction: Direction

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class MomentumRecord:
    """Volume plus velocity of hiring activity, capped at 100."""

    score: int
    volume_score: float
    velocity_score: float
    direction: Direction
    change_rate: float
    growth_trend: str

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class EmergingSkill:
    name: str
    growth: float
    frequency: int

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class YearProjection:
    year: int
    demand_score: int
    expected_openings: int
    salary_projection: int
    growth_rate: float

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class DemandForecast:
    """Multi-year demand projection for a role in an industry."""

    job_title: str
    industry: str
    projections: tuple[YearProjection, ...]
    overall_trend: str
    simulated: bool

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "job_title": self.job_title,
            "industry": self.industry,
            "projections": [p.to_dict() for p in self.projections],
            "overall_trend": self.overall_trend,
            "simulated": self.simulated,
        }
