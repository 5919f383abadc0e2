"""Plain-function entry points for the scoring engine.

These wrap the component classes with their default configuration so a
service layer can call them without wiring anything up. Every result exposes
`to_dict()` for serialization.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from src.content.ats import ContentQualityScorer
from src.content.models import ContentScore
from src.insights.gaps import GapAnalyzer
from src.insights.models import FrequencyTable, GapAnalysis, TrendRecord
from src.insights.trends import TrendScorer
from src.matching.clustering import SimilarityClusterer
from src.matching.models import ClusterGroup, MatchResult, Requirement
from src.matching.service import WeightedMatcher
from src.traits.models import ArchetypeDefinition, ArchetypeResult, TraitResponse
from src.traits.service import TraitScorer
from src.traits.vocabulary import DEFAULT_ARCHETYPES, DEFAULT_TRAITS


def score_traits(
    responses: Iterable[TraitResponse | Mapping[str, Any]] | None,
    vocabulary: Sequence[str] = DEFAULT_TRAITS,
) -> dict[str, int]:
    return TraitScorer(vocabulary).score_traits(responses)


def classify_archetype(
    trait_scores: Mapping[str, float] | None,
    archetypes: Sequence[ArchetypeDefinition | Mapping[str, Any]] = DEFAULT_ARCHETYPES,
) -> ArchetypeResult:
    return TraitScorer().classify_archetype(trait_scores, archetypes)


def match(
    attributes: Any,
    requirements: Iterable[Requirement | Mapping[str, Any]] | None,
    **context: Any,
) -> MatchResult:
    """Score attributes against requirements; `context` is passed to `WeightedMatcher.match`."""
    return WeightedMatcher().match(attributes, requirements, **context)


def analyze_gaps(
    attributes: Any,
    frequency_table: FrequencyTable | Mapping[str, Any] | None,
    total_population: float | None = None,
) -> GapAnalysis:
    return GapAnalyzer().analyze_gaps(attributes, frequency_table, total_population)


def score_content(text: str | None) -> ContentScore:
    return ContentQualityScorer().score_content(text)


def cluster(
    results: Sequence[MatchResult] | None,
    score_window: float | None = None,
) -> list[ClusterGroup]:
    return SimilarityClusterer().cluster(results, score_window=score_window)


def trend(recent: Any, previous: Any) -> TrendRecord:
    return TrendScorer().trend(recent, previous)
