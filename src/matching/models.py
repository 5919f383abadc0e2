"""Data models for weighted matching."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator

from src.matching.matchers import normalize_name
from src.utils.numeric import clamp, coerce_number

NEUTRAL_SCORE = 50.0


class Importance(str, Enum):
    """Importance tier of a requirement.

    Two vocabularies are in use: assessment roles speak
    essential/important/preferred, market analytics speak
    critical/important/nice-to-have.
    """

    ESSENTIAL = "essential"
    IMPORTANT = "important"
    PREFERRED = "preferred"
    CRITICAL = "critical"
    NICE_TO_HAVE = "nice-to-have"


class Attribute(BaseModel):
    """A candidate's measured standing on one dimension."""

    name: str = Field(
        ...,
        validation_alias=AliasChoices("name", "trait", "skill"),
        description="Dimension name (trait, skill, keyword)",
    )
    score: float = Field(
        default=NEUTRAL_SCORE,
        validation_alias=AliasChoices("score", "level"),
        description="Normalized 0-100 score",
    )

    @field_validator("score", mode="before")
    @classmethod
    def coerce_score(cls, v: object) -> float:
        return clamp(coerce_number(v, NEUTRAL_SCORE))


class Requirement(BaseModel):
    """A weighted threshold a candidate is scored against."""

    name: str = Field(
        ...,
        validation_alias=AliasChoices("name", "trait", "skill"),
        description="Attribute the requirement applies to",
    )
    min_score: float = Field(
        default=NEUTRAL_SCORE,
        validation_alias=AliasChoices("min_score", "minScore"),
        description="Minimum 0-100 score for the requirement to count as met",
    )
    weight: float = Field(default=1.0, description="Relative weight (> 0)")
    importance: Importance = Field(
        default=Importance.IMPORTANT, description="Importance tier"
    )

    @field_validator("min_score", mode="before")
    @classmethod
    def coerce_min_score(cls, v: object) -> float:
        return clamp(coerce_number(v, NEUTRAL_SCORE))

    @field_validator("weight", mode="before")
    @classmethod
    def coerce_weight(cls, v: object) -> float:
        weight = coerce_number(v, 1.0)
        return weight if weight > 0 else 1.0

    @field_validator("importance", mode="before")
    @classmethod
    def coerce_importance(cls, v: object) -> Importance:
        if isinstance(v, Importance):
            return v
        try:
            return Importance(str(v).strip().lower())
        except ValueError:
            return Importance.IMPORTANT


class RequirementSet(BaseModel):
    """Anything a candidate can be matched against: a role, a job, a mentor."""

    id: str | None = Field(default=None, description="Opaque identifier")
    title: str = Field(default="", description="Display title")
    category: str | None = Field(default=None, description="Cluster/category label")
    description: str = Field(default="", description="Free-text description")
    requirements: list[Requirement] = Field(default_factory=list)
    growth_projection: float | None = Field(
        default=None,
        validation_alias=AliasChoices("growth_projection", "growthProjection"),
        description="Projected growth (%) of the field, if known",
    )
    highlights: list[str] = Field(
        default_factory=list,
        description="Facts about this pairing, appended to match reasons",
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> str | None:
        return None if v is None else str(v)

    @field_validator("growth_projection", mode="before")
    @classmethod
    def coerce_growth(cls, v: object) -> float | None:
        if v is None:
            return None
        return coerce_number(v, 0.0)


class CareerRole(BaseModel):
    """A career role with the personality traits it calls for."""

    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    title: str = Field(..., description="Role title")
    description: str = Field(default="", description="Role description")
    cluster: str | None = Field(default=None, description="Career cluster label")
    required_traits: list[Requirement] = Field(
        default_factory=list,
        validation_alias=AliasChoices("required_traits", "requiredTraits"),
    )
    growth_projection: float | None = Field(
        default=None,
        validation_alias=AliasChoices("growth_projection", "growthProjection"),
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> str | None:
        return None if v is None else str(v)


class MenteeProfile(BaseModel):
    """The person looking for a mentor."""

    skills: list[str] = Field(default_factory=list)
    industry: str = Field(default="")
    current_role: str = Field(default="")
    target_role: str = Field(default="")
    years_of_experience: float = Field(default=0.0)

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def coerce_years(cls, v: object) -> float:
        return max(0.0, coerce_number(v, 0.0))


class MentorProfile(BaseModel):
    """A mentor available for matching."""

    id: str | None = Field(default=None)
    name: str = Field(default="")
    expertise: list[str] = Field(default_factory=list)
    industry: str = Field(default="")
    current_role: str = Field(default="")
    years_of_experience: float | None = Field(default=None)
    rating: float | None = Field(default=None, description="Average rating out of 5")

    @field_validator("years_of_experience", "rating", mode="before")
    @classmethod
    def coerce_optional_number(cls, v: object) -> float | None:
        if v is None:
            return None
        number = coerce_number(v, -1.0)
        return number if number >= 0 else None


class JobPosting(BaseModel):
    """A job posting with the skills it asks for."""

    id: str | None = Field(default=None)
    title: str = Field(default="")
    company: str = Field(default="")
    category: str | None = Field(default=None, description="Industry or job family")
    required_skills: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("required_skills", "requiredSkills"),
    )
    preferred_skills: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("preferred_skills", "preferredSkills"),
    )

    @field_validator("required_skills", "preferred_skills", mode="before")
    @classmethod
    def coerce_skill_list(cls, v: object) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return [str(skill) for skill in v if skill is not None]  # type: ignore[union-attr]


def attribute_levels(attributes: object) -> dict[str, float]:
    """Collapse any supported attribute collection into {normalized name: score}.

    Accepts a mapping of name to score, or an iterable of `Attribute`,
    dicts, or `(name, score)` pairs. Entries without a usable name are
    skipped and missing scores fall back to the neutral score.
    """
    levels: dict[str, float] = {}
    if attributes is None:
        return levels

    if isinstance(attributes, Mapping):
        items: Iterable[Any] = attributes.items()
    elif isinstance(attributes, Iterable) and not isinstance(attributes, (str, bytes)):
        items = attributes
    else:
        return levels

    for item in items:
        if isinstance(item, Attribute):
            name, score = item.name, item.score
        elif isinstance(item, Mapping):
            raw_name = item.get("name", item.get("trait", item.get("skill")))
            if raw_name is None:
                continue
            name = str(raw_name)
            score = item.get("score", item.get("level"))
        elif isinstance(item, tuple) and len(item) == 2:
            name, score = str(item[0]), item[1]
        elif isinstance(item, str):
            name, score = item, None
        else:
            continue

        key = normalize_name(name)
        if not key:
            continue
        levels[key] = clamp(coerce_number(score, NEUTRAL_SCORE))

    return levels


@dataclass(frozen=True)
class AttributeMatch:
    """How a candidate fared on one requirement."""

    name: str
    candidate_score: float
    required_score: float
    weight: float
    importance: Importance
    status: Literal["met", "gap"]
    gap: float = 0.0

    @property
    def margin(self) -> float:
        return self.candidate_score - self.required_score


@dataclass(frozen=True)
class MatchResult:
    """Score, matched/missing attributes and reasons for one pairing."""

    candidate_id: str | None
    score: int
    matched: tuple[AttributeMatch, ...] = field(default_factory=tuple)
    missing: tuple[AttributeMatch, ...] = field(default_factory=tuple)
    reasons: tuple[str, ...] = field(default_factory=tuple)
    label: str = ""
    category: str | None = None
    requirement_count: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")
        if len(self.matched) + len(self.missing) != self.requirement_count:
            raise ValueError(
                "matched + missing must cover every requirement "
                f"({len(self.matched)} + {len(self.missing)} != {self.requirement_count})"
            )

    @property
    def met_ratio(self) -> float:
        if not self.requirement_count:
            return 0.0
        return len(self.matched) / self.requirement_count

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        payload = asdict(self)
        for key in ("matched", "missing"):
            for entry in payload[key]:
                entry["importance"] = entry["importance"].value
        payload["matched"] = list(payload["matched"])
        payload["missing"] = list(payload["missing"])
        payload["reasons"] = list(payload["reasons"])
        return payload


@dataclass(frozen=True)
class SkillGap:
    """A shortfall on one requirement, prioritised for follow-up."""

    name: str
    current_level: float
    required_level: float
    gap: float
    priority: Literal["high", "medium", "low"]

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class ClusterGroup:
    """A greedily formed group of match results."""

    label: str
    members: tuple[MatchResult, ...]
    avg_score: int

    def __post_init__(self) -> None:
        if not self.members:
            raise ValueError("ClusterGroup requires at least one member")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "label": self.label,
            "avg_score": self.avg_score,
            "members": [member.to_dict() for member in self.members],
        }
