"""Data models for personality trait scoring."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from pydantic import AliasChoices, BaseModel, Field, field_validator

from src.utils.numeric import clamp, coerce_number

LIKERT_MIN = 1.0
LIKERT_MAX = 5.0


def _coerce_weight(v: object) -> float:
    weight = coerce_number(v, 1.0)
    return weight if weight > 0 else 1.0


class TraitResponse(BaseModel):
    """One survey answer already resolved to the trait it measures."""

    trait: str = Field(
        ...,
        validation_alias=AliasChoices("trait", "name", "type"),
        description="Trait (dimension) the answer measures",
    )
    answer: float = Field(..., description="Likert answer, 1 (disagree) to 5 (agree)")
    weight: float = Field(default=1.0, description="Relative weight of the question")

    @field_validator("answer", mode="before")
    @classmethod
    def clamp_answer(cls, v: object) -> float:
        return clamp(coerce_number(v, 3.0), LIKERT_MIN, LIKERT_MAX)

    @field_validator("weight", mode="before")
    @classmethod
    def coerce_weight(cls, v: object) -> float:
        return _coerce_weight(v)


class AssessmentQuestion(BaseModel):
    """A survey question and the trait its answers feed."""

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"))
    trait: str = Field(..., validation_alias=AliasChoices("trait", "type"))
    text: str = Field(default="")
    weight: float = Field(default=1.0)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> str:
        return str(v)

    @field_validator("weight", mode="before")
    @classmethod
    def coerce_weight(cls, v: object) -> float:
        return _coerce_weight(v)


class Answer(BaseModel):
    """A raw answer referencing a question by id."""

    question_id: str = Field(
        ..., validation_alias=AliasChoices("question_id", "questionId")
    )
    answer: float = Field(...)

    @field_validator("question_id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> str:
        return str(v)

    @field_validator("answer", mode="before")
    @classmethod
    def coerce_answer(cls, v: object) -> float:
        return coerce_number(v, 3.0)


class ArchetypeDefinition(BaseModel):
    """A named personality archetype defined by a subset of traits."""

    label: str
    traits: list[str]
    description: str = ""


@dataclass(frozen=True)
class ArchetypeResult:
    """The archetype that best fits a trait profile."""

    label: str
    confidence: int
    description: str

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)
