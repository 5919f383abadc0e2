"""Weighted requirement matching and clustering.

One scoring algorithm (`WeightedMatcher`) serves role, mentor and job-skill
matching; the requirement vocabulary for each lives in an adapter.

Public API:
    - WeightedMatcher: Core requirement-vs-attribute scorer
    - MatchingService: Role / mentor / job entry points
    - SimilarityClusterer: Greedy grouping of ranked results
    - MatchResult, ClusterGroup, SkillGap: Result models
    - MatchingConfig: Configuration settings
"""

from src.matching.adapters import (
    JobSkillAdapter,
    MentorAdapter,
    RequirementAdapter,
    RoleAdapter,
    get_adapter,
)
from src.matching.clustering import SimilarityClusterer
from src.matching.config import (
    MatchingConfig,
    get_matching_config,
    reset_matching_config,
)
from src.matching.models import (
    Attribute,
    AttributeMatch,
    CareerRole,
    ClusterGroup,
    Importance,
    JobPosting,
    MatchResult,
    MenteeProfile,
    MentorProfile,
    Requirement,
    RequirementSet,
    SkillGap,
)
from src.matching.service import MatchingService, WeightedMatcher, top_k

__all__ = [
    "WeightedMatcher",
    "MatchingService",
    "SimilarityClusterer",
    "RequirementAdapter",
    "RoleAdapter",
    "MentorAdapter",
    "JobSkillAdapter",
    "get_adapter",
    "top_k",
    "Attribute",
    "AttributeMatch",
    "CareerRole",
    "ClusterGroup",
    "Importance",
    "JobPosting",
    "MatchResult",
    "MenteeProfile",
    "MentorProfile",
    "Requirement",
    "RequirementSet",
    "SkillGap",
    "MatchingConfig",
    "get_matching_config",
    "reset_matching_config",
]
