"""Weighted requirement matching."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

from src.matching.adapters import RequirementAdapter, get_adapter
from src.matching.config import MatchingConfig, get_matching_config
from src.matching.matchers import normalize_name
from src.matching.models import (
    AttributeMatch,
    MatchResult,
    Requirement,
    RequirementSet,
    SkillGap,
    attribute_levels,
)
from src.utils.errors import InvalidInputError, require, validate_as
from src.utils.numeric import bandify, clamp, round_half_up, safe_divide

logger = logging.getLogger(__name__)

GAP_PRIORITY_BANDS = ((30, "high"), (15, "medium"))


def _weight_scale(requirements: Sequence[Requirement]) -> float:
    """Divisor applied to every weight; above 1 only when the raw sum overflows."""
    if math.isfinite(sum(100 * r.weight for r in requirements)):
        return 1.0
    return max(r.weight for r in requirements)


def _format_score(value: float) -> str:
    return f"{value:g}"


class WeightedMatcher:
    """Scores a candidate's attributes against weighted requirements.

    Every requirement contributes up to `100 * weight` points. Meeting it
    earns the threshold plus a capped bonus for the excess; missing it earns
    the threshold minus a capped penalty for the gap. The final score is the
    share of the maximum, rounded and clamped to 0-100.
    """

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()

    def match(
        self,
        attributes: Any,
        requirements: Iterable[Requirement | dict] | None,
        *,
        candidate_id: str | None = None,
        label: str = "",
        category: str | None = None,
        growth_projection: float | None = None,
        highlights: Sequence[str] = (),
    ) -> MatchResult:
        """Match attributes against a list of requirements."""
        require(requirements, "requirements")
        parsed = [
            validate_as(Requirement, r, "requirements")
            for r in requirements  # type: ignore[union-attr]
        ]
        levels = attribute_levels(attributes)
        scale = _weight_scale(parsed)

        total = 0.0
        max_possible = 0.0
        matched: list[AttributeMatch] = []
        missing: list[AttributeMatch] = []

        for requirement in parsed:
            candidate_score = levels.get(
                normalize_name(requirement.name), self.config.neutral_score
            )
            minimum = requirement.min_score
            weight = requirement.weight / scale
            max_possible += 100 * weight

            if candidate_score >= minimum:
                excess = min(candidate_score - minimum, self.config.excess_cap)
                total += (minimum + excess) * weight
                matched.append(
                    AttributeMatch(
                        name=requirement.name,
                        candidate_score=candidate_score,
                        required_score=minimum,
                        weight=requirement.weight,
                        importance=requirement.importance,
                        status="met",
                    )
                )
            else:
                gap = minimum - candidate_score
                penalty = min(gap, self.config.penalty_cap)
                total += (minimum - penalty) * weight
                missing.append(
                    AttributeMatch(
                        name=requirement.name,
                        candidate_score=candidate_score,
                        required_score=minimum,
                        weight=requirement.weight,
                        importance=requirement.importance,
                        status="gap",
                        gap=gap,
                    )
                )

        score = int(clamp(round_half_up(safe_divide(total, max_possible) * 100)))
        reasons = self._reasons(
            matched=matched,
            requirement_count=len(parsed),
            growth_projection=growth_projection,
            highlights=highlights,
        )

        logger.debug(
            "Matched %s: score=%d met=%d gaps=%d",
            label or candidate_id or "<anonymous>",
            score,
            len(matched),
            len(missing),
        )
        return MatchResult(
            candidate_id=candidate_id,
            score=score,
            matched=tuple(matched),
            missing=tuple(missing),
            reasons=tuple(reasons),
            label=label,
            category=category,
            requirement_count=len(parsed),
        )

    def match_set(self, attributes: Any, requirement_set: RequirementSet | dict) -> MatchResult:
        """Match attributes against a requirement holder (role, job, mentor)."""
        require(requirement_set, "requirement_set")
        holder = validate_as(RequirementSet, requirement_set, "requirement_set")
        return self.match(
            attributes,
            holder.requirements,
            candidate_id=holder.id,
            label=holder.title,
            category=holder.category,
            growth_projection=holder.growth_projection,
            highlights=holder.highlights,
        )

    def rank(
        self,
        subject: Any,
        holders: Iterable[Any] | None,
        adapter: RequirementAdapter | str | None = None,
    ) -> list[MatchResult]:
        """Match `subject` against every holder and rank by descending score.

        Without an adapter, holders are `RequirementSet`s and `subject` is
        the attribute collection. Ties keep input order.
        """
        require(holders, "holders")
        if isinstance(adapter, str):
            adapter = get_adapter(adapter, config=self.config)

        results: list[MatchResult] = []
        for holder in holders:  # type: ignore[union-attr]
            if adapter is None:
                results.append(self.match_set(subject, holder))
            else:
                attributes, requirement_set = adapter.adapt(subject, holder)
                results.append(self.match_set(attributes, requirement_set))

        ranked = sort_results(results)
        logger.debug(
            "Ranked %d holders (%s)",
            len(ranked),
            adapter.kind if adapter is not None else "requirement sets",
        )
        return ranked

    def top_gaps(self, result: MatchResult, limit: int | None = None) -> list[SkillGap]:
        """Return the largest gaps of a match result, biggest first."""
        count = self.config.top_gap_count if limit is None else limit
        ordered = sorted(result.missing, key=lambda entry: entry.gap, reverse=True)
        return [
            SkillGap(
                name=entry.name,
                current_level=entry.candidate_score,
                required_level=entry.required_score,
                gap=entry.gap,
                priority=gap_priority(entry.gap),  # type: ignore[arg-type]
            )
            for entry in ordered[: max(0, count)]
        ]

    def _reasons(
        self,
        *,
        matched: list[AttributeMatch],
        requirement_count: int,
        growth_projection: float | None,
        highlights: Sequence[str],
    ) -> list[str]:
        reasons: list[str] = []

        if matched:
            # max() keeps the first of equal margins, i.e. requirement order.
            strongest = max(matched, key=lambda entry: entry.margin)
            reasons.append(
                f"Strong {strongest.name} alignment "
                f"({_format_score(strongest.candidate_score)}% vs "
                f"{_format_score(strongest.required_score)}% required)"
            )

        if requirement_count and len(matched) >= requirement_count * self.config.majority_ratio:
            reasons.append("Meets majority of required traits")

        if (
            growth_projection is not None
            and growth_projection > self.config.growth_highlight_threshold
        ):
            reasons.append(
                f"High growth field ({_format_score(growth_projection)}% projected growth)"
            )

        reasons.extend(highlight for highlight in highlights if highlight)
        return reasons


def gap_priority(gap: float) -> str:
    return bandify(gap, GAP_PRIORITY_BANDS, "low")


def sort_results(results: Iterable[MatchResult]) -> list[MatchResult]:
    """Sort by descending score; `sorted` is stable so ties keep input order."""
    return sorted(results, key=lambda result: result.score, reverse=True)


def top_k(results: Sequence[MatchResult], k: int) -> list[MatchResult]:
    """Return the first `k` results of an already ranked list."""
    if k < 0:
        raise InvalidInputError("k must not be negative", field="k")
    return list(results[:k])


class MatchingService:
    """Domain entry points over the single weighted matcher."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()
        self.matcher = WeightedMatcher(config=self.config)

    def match_roles(self, trait_scores: Any, roles: Iterable[Any] | None) -> list[MatchResult]:
        """Rank career roles for a set of personality trait scores."""
        return self.matcher.rank(trait_scores, roles, adapter=get_adapter("role", self.config))

    def match_mentors(self, mentee: Any, mentors: Iterable[Any] | None) -> list[MatchResult]:
        """Rank mentors for a mentee."""
        return self.matcher.rank(mentee, mentors, adapter=get_adapter("mentor", self.config))

    def match_jobs(self, skills: Any, jobs: Iterable[Any] | None) -> list[MatchResult]:
        """Rank job postings for a candidate's skills."""
        return self.matcher.rank(skills, jobs, adapter=get_adapter("job", self.config))
