"""Requirement vocabularies for the weighted matcher.

Role, mentor and job-skill matching all run through the same
`WeightedMatcher.match`. What differs is how a (subject, holder) pair is
turned into candidate attribute scores plus a `RequirementSet`; each adapter
below owns one of those translations and is tagged with a `kind`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from src.matching.config import MatchingConfig, get_matching_config
from src.matching.matchers import best_level, expand_skills, normalize_name
from src.matching.models import (
    CareerRole,
    Importance,
    JobPosting,
    MenteeProfile,
    MentorProfile,
    Requirement,
    RequirementSet,
    attribute_levels,
)
from src.utils.numeric import clamp

LISTED_SKILL_LEVEL = 100.0


class RequirementAdapter(ABC):
    """Turns a subject and a requirement holder into matcher inputs."""

    kind: ClassVar[str]

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()

    @abstractmethod
    def adapt(self, subject: Any, holder: Any) -> tuple[dict[str, float], RequirementSet]:
        """Return (candidate attribute scores, requirement set) for one pairing."""


class RoleAdapter(RequirementAdapter):
    """Personality trait scores against a career role's required traits."""

    kind = "role"

    def adapt(
        self, subject: Any, holder: CareerRole | Mapping[str, Any]
    ) -> tuple[dict[str, float], RequirementSet]:
        role = holder if isinstance(holder, CareerRole) else CareerRole.model_validate(holder)
        requirement_set = RequirementSet(
            id=role.id,
            title=role.title,
            category=role.cluster,
            description=role.description,
            requirements=role.required_traits,
            growth_projection=role.growth_projection,
        )
        return attribute_levels(subject), requirement_set


# Mentor compatibility factors: (attribute, min_score, weight, importance).
MENTOR_FACTORS: tuple[tuple[str, float, float, Importance], ...] = (
    ("expertise_overlap", 50.0, 40.0, Importance.ESSENTIAL),
    ("industry_alignment", 100.0, 25.0, Importance.IMPORTANT),
    ("role_alignment", 100.0, 20.0, Importance.IMPORTANT),
    ("experience_proximity", 50.0, 10.0, Importance.PREFERRED),
    ("mentor_rating", 80.0, 5.0, Importance.PREFERRED),
)
RELATED_INDUSTRY_SCORE = 40.0


def _overlaps(left: str, right: str) -> bool:
    a = normalize_name(left)
    b = normalize_name(right)
    if not a or not b:
        return False
    return a == b or a in b or b in a


class MentorAdapter(RequirementAdapter):
    """A mentee against a mentor, scored on five compatibility factors.

    Factors the pair cannot be measured on (no skills listed, no industry on
    either side, ...) are left out of the attribute map and fall back to the
    matcher's neutral score.
    """

    kind = "mentor"

    def adapt(
        self,
        subject: MenteeProfile | Mapping[str, Any],
        holder: MentorProfile | Mapping[str, Any],
    ) -> tuple[dict[str, float], RequirementSet]:
        mentee = (
            subject
            if isinstance(subject, MenteeProfile)
            else MenteeProfile.model_validate(subject or {})
        )
        mentor = (
            holder
            if isinstance(holder, MentorProfile)
            else MentorProfile.model_validate(holder)
        )

        attributes: dict[str, float] = {}
        highlights: list[str] = []

        if mentee.skills:
            shared = [
                skill
                for skill in mentee.skills
                if any(_overlaps(skill, expertise) for expertise in mentor.expertise)
            ]
            denominator = max(len(mentee.skills), len(mentor.expertise), 1)
            attributes["expertise_overlap"] = clamp(len(shared) / denominator * 100)
            if shared:
                highlights.append(f"Shared expertise in: {', '.join(shared[:3])}")

        industry = mentee.industry or mentee.current_role
        if mentor.industry and industry:
            if _overlaps(mentor.industry, industry):
                attributes["industry_alignment"] = 100.0
                highlights.append(f"Same industry: {mentor.industry}")
            else:
                attributes["industry_alignment"] = RELATED_INDUSTRY_SCORE

        target_role = mentee.target_role or mentee.current_role
        if mentor.current_role and target_role:
            if _overlaps(mentor.current_role, target_role):
                attributes["role_alignment"] = 100.0
                highlights.append(f"Target role alignment: {mentor.current_role}")
            else:
                attributes["role_alignment"] = 0.0

        if mentor.years_of_experience is not None:
            difference = abs(mentor.years_of_experience - mentee.years_of_experience)
            if difference <= 2:
                attributes["experience_proximity"] = 100.0
                highlights.append("Similar experience level")
            elif difference <= 5:
                attributes["experience_proximity"] = 50.0
            else:
                attributes["experience_proximity"] = 0.0

        if mentor.rating is not None:
            attributes["mentor_rating"] = clamp(mentor.rating / 5 * 100)
            if mentor.rating >= 4:
                highlights.append(f"Highly rated mentor ({mentor.rating:g}/5)")

        requirement_set = RequirementSet(
            id=mentor.id,
            title=mentor.name,
            category=mentor.industry or None,
            requirements=[
                Requirement(name=name, min_score=min_score, weight=weight, importance=importance)
                for name, min_score, weight, importance in MENTOR_FACTORS
            ],
            highlights=highlights,
        )
        return attributes, requirement_set


# Job skill thresholds: (min_score, weight, importance).
REQUIRED_SKILL = (70.0, 2.0, Importance.ESSENTIAL)
PREFERRED_SKILL = (50.0, 1.0, Importance.PREFERRED)


def skill_inventory(skills: Any) -> dict[str, float]:
    """Build {skill: level} from a plain skill list or a leveled collection.

    Skills listed without a level count as fully present, and so do the
    fundamentals they imply.
    """
    if skills is None:
        return {}
    if isinstance(skills, (list, tuple, set)) and all(isinstance(s, str) for s in skills):
        return {skill: LISTED_SKILL_LEVEL for skill in expand_skills(skills)}
    return attribute_levels(skills)


class JobSkillAdapter(RequirementAdapter):
    """A candidate's skills against a job posting's required/preferred skills."""

    kind = "job"

    def adapt(
        self, subject: Any, holder: JobPosting | Mapping[str, Any]
    ) -> tuple[dict[str, float], RequirementSet]:
        job = holder if isinstance(holder, JobPosting) else JobPosting.model_validate(holder)
        inventory = skill_inventory(subject)

        attributes: dict[str, float] = {}
        requirements: list[Requirement] = []
        seen: set[str] = set()

        for skills, (min_score, weight, importance) in (
            (job.required_skills, REQUIRED_SKILL),
            (job.preferred_skills, PREFERRED_SKILL),
        ):
            for skill in skills:
                key = normalize_name(skill)
                if not key or key in seen:
                    continue
                seen.add(key)
                level = best_level(
                    skill,
                    inventory,
                    fuzzy=self.config.skill_fuzzy_match,
                    threshold=self.config.skill_fuzzy_threshold,
                )
                attributes[key] = level if level is not None else 0.0
                requirements.append(
                    Requirement(
                        name=skill,
                        min_score=min_score,
                        weight=weight,
                        importance=importance,
                    )
                )

        title = f"{job.title} at {job.company}" if job.company else job.title
        requirement_set = RequirementSet(
            id=job.id,
            title=title,
            category=job.category,
            requirements=requirements,
        )
        return attributes, requirement_set


ADAPTERS: dict[str, type[RequirementAdapter]] = {
    RoleAdapter.kind: RoleAdapter,
    MentorAdapter.kind: MentorAdapter,
    JobSkillAdapter.kind: JobSkillAdapter,
}


def get_adapter(kind: str, config: MatchingConfig | None = None) -> RequirementAdapter:
    """Return the adapter registered for `kind` ("role", "mentor" or "job")."""
    try:
        adapter_cls = ADAPTERS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown requirement vocabulary: {kind!r}. "
            f"Expected one of: {', '.join(sorted(ADAPTERS))}"
        ) from None
    return adapter_cls(config=config)
