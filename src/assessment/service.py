"""End-to-end career assessment: traits, archetype, roles, clusters, gaps."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from src.assessment.models import AssessmentReport
from src.matching.clustering import SimilarityClusterer
from src.matching.config import MatchingConfig, get_matching_config
from src.matching.models import SkillGap
from src.matching.service import MatchingService, top_k
from src.traits.service import TraitScorer
from src.traits.vocabulary import DEFAULT_ARCHETYPES
from src.utils.errors import require

logger = logging.getLogger(__name__)

DEFAULT_TOP_ROLES = 10
SKILL_GAP_LIMIT = 5
PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}


def roll_up_gaps(gaps: Iterable[SkillGap], limit: int = SKILL_GAP_LIMIT) -> list[SkillGap]:
    """Keep the largest gap per skill, then order by priority.

    Ties in priority keep first-seen order.
    """
    largest: dict[str, SkillGap] = {}
    for gap in gaps:
        current = largest.get(gap.name)
        if current is None or gap.gap > current.gap:
            largest[gap.name] = gap

    ordered = sorted(
        largest.values(),
        key=lambda gap: PRIORITY_RANK.get(gap.priority, 0),
        reverse=True,
    )
    return ordered[: max(0, limit)]


class AssessmentService:
    """Runs the assessment pipeline over a fixed set of career roles."""

    def __init__(
        self,
        config: MatchingConfig | None = None,
        trait_scorer: TraitScorer | None = None,
    ) -> None:
        self.config = config or get_matching_config()
        self.trait_scorer = trait_scorer or TraitScorer()
        self.matching = MatchingService(config=self.config)
        self.clusterer = SimilarityClusterer(config=self.config)

    def run(
        self,
        answers: Iterable[Any] | None,
        roles: Iterable[Any] | None,
        questions: Iterable[Any] | None = None,
        top_n: int = DEFAULT_TOP_ROLES,
        archetypes: Iterable[Any] = DEFAULT_ARCHETYPES,
    ) -> AssessmentReport:
        """Score an assessment and recommend career roles.

        Args:
            answers: Question answers when `questions` is given, otherwise
                trait responses carrying their own trait and weight.
            roles: Career roles with required traits.
            questions: Question bank the answers refer to.
            top_n: How many ranked roles to keep.
            archetypes: Archetype definitions to classify against.

        Returns:
            AssessmentReport with the top roles, their clusters and the
            five most pressing trait gaps across them.
        """
        require(answers, "answers")
        require(roles, "roles")

        if questions is not None:
            responses: Iterable[Any] = self.trait_scorer.resolve_responses(answers, questions)
        else:
            responses = answers

        trait_scores = self.trait_scorer.score_traits(responses)
        archetype = self.trait_scorer.classify_archetype(trait_scores, list(archetypes))

        ranked = self.matching.match_roles(trait_scores, roles)
        top_roles = top_k(ranked, top_n)
        clusters = self.clusterer.cluster(top_roles)

        skill_gaps = roll_up_gaps(
            gap for result in top_roles for gap in self.matching.matcher.top_gaps(result)
        )

        logger.info(
            "Assessment complete: archetype=%s roles=%d clusters=%d gaps=%d",
            archetype.label,
            len(top_roles),
            len(clusters),
            len(skill_gaps),
        )
        return AssessmentReport(
            trait_scores=trait_scores,
            archetype=archetype,
            matches=tuple(top_roles),
            clusters=tuple(clusters),
            skill_gaps=tuple(skill_gaps),
        )
