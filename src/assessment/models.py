"""Result model for a full career assessment."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.matching.models import ClusterGroup, MatchResult, SkillGap
from src.traits.models import ArchetypeResult


@dataclass(frozen=True)
class AssessmentReport:
    """Everything a completed assessment produces for one person."""

    trait_scores: dict[str, int]
    archetype: ArchetypeResult
    matches: tuple[MatchResult, ...] = field(default_factory=tuple)
    clusters: tuple[ClusterGroup, ...] = field(default_factory=tuple)
    skill_gaps: tuple[SkillGap, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "archetype": self.archetype.to_dict(),
            "traits": [
                {"name": name, "score": score} for name, score in self.trait_scores.items()
            ],
            "matches": [match.to_dict() for match in self.matches],
            "clusters": [
                {
                    "label": cluster.label,
                    "avg_score": cluster.avg_score,
                    "members": [member.label for member in cluster.members],
                }
                for cluster in self.clusters
            ],
            "skill_gaps": [gap.to_dict() for gap in self.skill_gaps],
        }
