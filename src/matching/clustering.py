"""Greedy grouping of ranked match results."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.matching.config import MatchingConfig, get_matching_config
from src.matching.models import ClusterGroup, MatchResult
from src.utils.errors import require
from src.utils.numeric import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_CLUSTER_LABEL = "General"


class SimilarityClusterer:
    """Single-pass greedy clustering by category or score proximity.

    Each result not yet placed seeds a new cluster and pulls in every later
    unplaced result that shares the seed's category or scores within the
    configured window of the seed. This is a greedy pass, not a global
    optimum; the outcome depends on input order.
    """

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()

    def cluster(
        self,
        results: Sequence[MatchResult] | None,
        score_window: float | None = None,
    ) -> list[ClusterGroup]:
        """Group results and return clusters by descending average score."""
        require(results, "results")
        window = self.config.cluster_score_window if score_window is None else score_window

        ordered = list(results)  # type: ignore[arg-type]
        processed = [False] * len(ordered)
        clusters: list[ClusterGroup] = []

        for seed_index, seed in enumerate(ordered):
            if processed[seed_index]:
                continue
            processed[seed_index] = True

            members = [seed]
            avg_score = seed.score
            for other_index in range(seed_index + 1, len(ordered)):
                if processed[other_index]:
                    continue
                other = ordered[other_index]
                same_category = bool(seed.category) and other.category == seed.category
                close_score = abs(other.score - seed.score) < window
                if same_category or close_score:
                    members.append(other)
                    processed[other_index] = True
                    avg_score = round_half_up(
                        sum(member.score for member in members) / len(members)
                    )

            clusters.append(
                ClusterGroup(
                    label=seed.category or DEFAULT_CLUSTER_LABEL,
                    members=tuple(members),
                    avg_score=avg_score,
                )
            )

        clusters.sort(key=lambda group: group.avg_score, reverse=True)
        logger.debug("Formed %d clusters from %d results", len(clusters), len(ordered))
        return clusters
