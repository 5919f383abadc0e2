"""Skill gap, strength and shortage analysis against a reference population."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from src.insights.config import InsightsConfig, get_insights_config
from src.insights.models import (
    FrequencyTable,
    GapAnalysis,
    GapRecord,
    ShortageRecord,
    SkillDemand,
    StrengthRecord,
)
from src.matching.config import MatchingConfig, get_matching_config
from src.matching.matchers import normalize_name, skills_match
from src.matching.models import Attribute, JobPosting
from src.utils.errors import require
from src.utils.numeric import bandify, clamp, coerce_number, round_half_up, safe_divide

logger = logging.getLogger(__name__)

SEVERITY_RANK = {"critical": 4, "high": 3, "medium": 2, "low": 1}


def _posting_skills(posting: Any) -> list[str]:
    if isinstance(posting, JobPosting):
        return posting.required_skills
    if isinstance(posting, Mapping):
        return JobPosting.model_validate(posting).required_skills
    if isinstance(posting, str):
        return [posting]
    return [str(skill) for skill in posting or [] if skill is not None]


def candidate_names(attributes: Any) -> list[str]:
    """Return the names a candidate claims, keeping their original spelling.

    Accepts a list of names, a name-to-level mapping, a list of attribute
    records, or a profile mapping with a `skills` list.
    """
    if attributes is None:
        return []
    if isinstance(attributes, Mapping) and isinstance(attributes.get("skills"), list):
        attributes = attributes["skills"]
    if isinstance(attributes, str):
        return [attributes] if attributes.strip() else []
    if isinstance(attributes, Mapping):
        return [str(name) for name in attributes if str(name).strip()]

    names: list[str] = []
    for item in attributes:
        if isinstance(item, Attribute):
            name: Any = item.name
        elif isinstance(item, Mapping):
            name = item.get("name", item.get("skill", item.get("trait")))
        elif isinstance(item, tuple) and item:
            name = item[0]
        else:
            name = item
        if name is not None and str(name).strip():
            names.append(str(name))
    return names


def _levels(values: Mapping[str, Any] | None) -> dict[str, float]:
    return {
        normalize_name(name): clamp(coerce_number(level, 0.0))
        for name, level in (values or {}).items()
        if normalize_name(name)
    }


class GapAnalyzer:
    """Compares a candidate against population demand or required levels."""

    def __init__(
        self,
        config: InsightsConfig | None = None,
        matching_config: MatchingConfig | None = None,
    ) -> None:
        self.config = config or get_insights_config()
        self.matching_config = matching_config or get_matching_config()

    def frequency_table(self, postings: Iterable[Any] | None) -> FrequencyTable:
        """Count how many postings ask for each skill.

        Names are compared case-insensitively and a skill counts once per
        posting; the first spelling seen is kept for display.
        """
        require(postings, "postings")
        counts: dict[str, int] = {}
        display: dict[str, str] = {}
        total = 0

        for posting in postings:  # type: ignore[union-attr]
            total += 1
            seen: set[str] = set()
            for skill in _posting_skills(posting):
                key = normalize_name(skill)
                if not key or key in seen:
                    continue
                seen.add(key)
                name = display.setdefault(key, skill.strip())
                counts[name] = counts.get(name, 0) + 1

        return FrequencyTable(counts=counts, total=total)

    def importance(self, count: float, total_population: float) -> str:
        ratio = safe_divide(count, total_population) * 100
        return bandify(ratio, self.config.importance_bands, "nice-to-have")

    def severity(self, gap_size: float) -> str:
        return bandify(gap_size, self.config.severity_bands, "low")

    def impact(self, gap_size: float) -> str:
        return bandify(gap_size, self.config.gap_impact_bands, "low")

    def analyze_gaps(
        self,
        attributes: Any,
        frequency_table: FrequencyTable | Mapping[str, Any] | None,
        total_population: float | None = None,
        *,
        sector: str | None = None,
    ) -> GapAnalysis:
        """Split population demand into gaps and strengths for a candidate.

        Every name in the frequency table lands in exactly one of `gaps` or
        `strengths`. When `total_population` is missing it comes from the
        table itself; a population of zero is treated as one.

        Args:
            attributes: Skill names the candidate has (any shape accepted by
                `candidate_names`).
            frequency_table: A `FrequencyTable` or a {name: count} mapping.
            total_population: Number of postings the counts were taken over.
            sector: Optional sector name used in advantage and
                recommendation text.

        Returns:
            GapAnalysis with gaps sorted by severity then size.
        """
        require(frequency_table, "frequency_table")
        if isinstance(frequency_table, FrequencyTable):
            counts: Mapping[str, Any] = frequency_table.counts
            if total_population is None:
                total_population = frequency_table.total
        else:
            counts = frequency_table  # type: ignore[assignment]

        population = coerce_number(total_population, 0.0)
        if population <= 0:
            population = 1.0

        names = candidate_names(attributes)
        fuzzy = self.matching_config.skill_fuzzy_match
        threshold = self.matching_config.skill_fuzzy_threshold

        demand: list[SkillDemand] = []
        gaps: list[GapRecord] = []
        strengths: list[StrengthRecord] = []

        for name, raw_count in counts.items():
            count = max(0, int(coerce_number(raw_count, 0.0)))
            frequency = int(clamp(round_half_up(count / population * 100)))
            importance = self.importance(count, population)
            demand.append(
                SkillDemand(name=name, count=count, frequency=frequency, importance=importance)
            )

            owned = next(
                (
                    candidate
                    for candidate in names
                    if skills_match(name, candidate, fuzzy=fuzzy, threshold=threshold)
                ),
                None,
            )
            if owned is not None:
                where = f" in {sector} sector" if sector else ""
                strengths.append(
                    StrengthRecord(
                        name=name,
                        matched_attribute=owned,
                        frequency=frequency,
                        importance=importance,
                        advantage=f"High demand{where} ({frequency}% of postings)",
                    )
                )
                continue

            gaps.append(
                GapRecord(
                    name=name,
                    current_level=0.0,
                    required_level=float(frequency),
                    gap_size=float(frequency),
                    severity=self.severity(frequency),
                    impact=self.impact(frequency),
                    frequency=frequency,
                    importance=importance,
                )
            )

        demand.sort(key=lambda entry: entry.frequency, reverse=True)
        strengths.sort(key=lambda entry: entry.frequency, reverse=True)
        gaps = sort_gaps(gaps)

        total_gap = sum(gap.gap_size for gap in gaps)
        overall = round_half_up(safe_divide(total_gap, len(counts) * 100) * 100)

        logger.debug(
            "Gap analysis: %d demanded, %d gaps, %d strengths",
            len(counts),
            len(gaps),
            len(strengths),
        )
        return GapAnalysis(
            gaps=tuple(gaps),
            strengths=tuple(strengths),
            demand=tuple(demand),
            overall_gap_score=int(clamp(overall)),
            recommendations=tuple(self._recommendations(gaps, strengths, sector)),
        )

    def level_gaps(
        self,
        current_levels: Mapping[str, Any] | None,
        required_levels: Mapping[str, Any] | None,
    ) -> list[GapRecord]:
        """One record per required name, comparing measured levels directly."""
        require(required_levels, "required_levels")
        current = _levels(current_levels)

        records: list[GapRecord] = []
        for name, raw_required in required_levels.items():  # type: ignore[union-attr]
            key = normalize_name(name)
            if not key:
                continue
            required = clamp(coerce_number(raw_required, 0.0))
            level = current.get(key, 0.0)
            gap_size = max(0.0, required - level)
            records.append(
                GapRecord(
                    name=name,
                    current_level=level,
                    required_level=required,
                    gap_size=gap_size,
                    severity=self.severity(gap_size),
                    impact=self.impact(gap_size),
                )
            )
        return sort_gaps(records)

    def detect_shortages(
        self,
        demand_counts: Mapping[str, Any] | FrequencyTable | None,
        supply_levels: Mapping[str, Any] | None = None,
    ) -> list[ShortageRecord]:
        """Score where local demand for a skill outruns its supply.

        Demand is each skill's count relative to the most requested skill.
        Supply defaults to the inverse of demand when the caller has no
        candidate data for a skill.
        """
        require(demand_counts, "demand_counts")
        if isinstance(demand_counts, FrequencyTable):
            demand_counts = demand_counts.counts

        counts = {
            name: max(0, int(coerce_number(count, 0.0)))
            for name, count in demand_counts.items()  # type: ignore[union-attr]
        }
        peak = max([*counts.values(), 1])
        supply = _levels(supply_levels)

        records: list[ShortageRecord] = []
        for name, count in counts.items():
            demand_level = round_half_up(count / peak * 100)
            supply_level = supply.get(normalize_name(name), 100 - demand_level)
            shortage = max(0.0, demand_level - supply_level)
            records.append(
                ShortageRecord(
                    name=name,
                    demand_level=demand_level,
                    supply_level=round_half_up(supply_level),
                    shortage_score=round_half_up(shortage),
                    severity=self.severity(shortage),
                    impact=bandify(shortage, self.config.shortage_impact_bands, "low"),
                    postings=count,
                )
            )

        records.sort(key=lambda record: record.shortage_score, reverse=True)
        return records

    def _recommendations(
        self,
        gaps: list[GapRecord],
        strengths: list[StrengthRecord],
        sector: str | None,
    ) -> list[str]:
        recommendations: list[str] = []
        target = f"{sector} roles" if sector else "this field"

        if gaps:
            critical = next((gap for gap in gaps if gap.importance == "critical"), None)
            if critical is not None:
                recommendations.append(
                    f"Focus on developing {critical.name} - it's critical for {target}"
                )
            top = ", ".join(gap.name for gap in gaps[:3])
            recommendations.append(f"Consider upskilling in {top}")

        if strengths:
            best = " and ".join(strength.name for strength in strengths[:2])
            recommendations.append(f"Leverage your strengths in {best}")

        return recommendations


def sort_gaps(gaps: Iterable[GapRecord]) -> list[GapRecord]:
    """Sort by severity, then gap size, both descending; ties keep input order."""
    return sorted(
        gaps,
        key=lambda gap: (SEVERITY_RANK.get(gap.severity, 0), gap.gap_size),
        reverse=True,
    )
