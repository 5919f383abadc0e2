"""Data models for content and profile quality scoring."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from src.utils.numeric import coerce_number


@dataclass(frozen=True)
class SectionScore:
    """One weighted component of a quality score."""

    score: float
    max_score: float
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not (0 <= self.score <= self.max_score):
            raise ValueError(
                f"score must be between 0 and {self.max_score} (got {self.score})"
            )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class ContentScore:
    """ATS-style quality score of a piece of text."""

    score: int
    grade: str
    breakdown: dict[str, SectionScore]
    max_score: int = 100

    def __post_init__(self) -> None:
        if not (0 <= self.score <= self.max_score):
            raise ValueError(f"score must be between 0 and {self.max_score} (got {self.score})")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "score": self.score,
            "max_score": self.max_score,
            "grade": self.grade,
            "breakdown": {name: section.to_dict() for name, section in self.breakdown.items()},
        }


@dataclass(frozen=True)
class AlignmentResult:
    """How well a resume's vocabulary covers a job description's."""

    alignment_score: int
    grade: str
    matched_keywords: tuple[str, ...] = ()
    missing_keywords: tuple[str, ...] = ()
    found_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        return data


@dataclass(frozen=True)
class Suggestion:
    category: str
    suggestion: str
    priority: str

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class CompletenessResult:
    """How complete a candidate's public profile is."""

    score: int
    grade: str
    breakdown: dict[str, SectionScore]
    suggestions: tuple[Suggestion, ...] = ()
    max_score: int = 100

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "score": self.score,
            "max_score": self.max_score,
            "grade": self.grade,
            "breakdown": {name: section.to_dict() for name, section in self.breakdown.items()},
            "suggestions": [suggestion.to_dict() for suggestion in self.suggestions],
        }


class Location(BaseModel):
    city: str = Field(default="")
    country: str = Field(default="")


class UserProfile(BaseModel):
    """Account-level profile fields that count towards completeness."""

    first_name: str = Field(default="", validation_alias=AliasChoices("first_name", "firstName"))
    last_name: str = Field(default="", validation_alias=AliasChoices("last_name", "lastName"))
    email: str = Field(default="")
    location: Location | None = Field(default=None)
    phone_number: str = Field(
        default="", validation_alias=AliasChoices("phone_number", "phoneNumber", "phone")
    )
    profile_image: str = Field(
        default="", validation_alias=AliasChoices("profile_image", "profileImage")
    )
    linkedin_url: str = Field(
        default="", validation_alias=AliasChoices("linkedin_url", "linkedInUrl")
    )
    github_url: str = Field(default="", validation_alias=AliasChoices("github_url", "githubUrl"))
    portfolio_url: str = Field(
        default="", validation_alias=AliasChoices("portfolio_url", "portfolioUrl")
    )
    is_email_verified: bool = Field(
        default=False, validation_alias=AliasChoices("is_email_verified", "isEmailVerified")
    )

    @field_validator(
        "first_name",
        "last_name",
        "email",
        "phone_number",
        "profile_image",
        "linkedin_url",
        "github_url",
        "portfolio_url",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: object) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("is_email_verified", mode="before")
    @classmethod
    def coerce_flag(cls, v: object) -> bool:
        return bool(v)

    @property
    def has_location(self) -> bool:
        return self.location is not None and bool(self.location.city or self.location.country)


class SocialProfile(BaseModel):
    """Headline and summary from a professional networking profile."""

    headline: str = Field(default="")
    summary: str = Field(default="")
    completeness_score: float = Field(
        default=0.0,
        validation_alias=AliasChoices("completeness_score", "completenessScore"),
    )

    @field_validator("headline", "summary", mode="before")
    @classmethod
    def coerce_text(cls, v: object) -> str:
        return "" if v is None else str(v)

    @field_validator("completeness_score", mode="before")
    @classmethod
    def coerce_score(cls, v: object) -> float:
        return coerce_number(v, 0.0)


class ResumeSnapshot(BaseModel):
    """A stored resume's extracted text and last ATS score."""

    raw_text: str = Field(default="", validation_alias=AliasChoices("raw_text", "rawText", "text"))
    ats_score: float = Field(default=0.0, validation_alias=AliasChoices("ats_score", "atsScore"))

    @field_validator("raw_text", mode="before")
    @classmethod
    def coerce_text(cls, v: object) -> str:
        return "" if v is None else str(v)

    @field_validator("ats_score", mode="before")
    @classmethod
    def coerce_score(cls, v: object) -> float:
        return coerce_number(v, 0.0)
