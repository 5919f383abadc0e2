"""Personality trait scoring.

Public API:
    - TraitScorer: Survey responses to 0-100 trait scores and archetypes
    - TraitResponse, Answer, AssessmentQuestion: Input models
    - ArchetypeDefinition, ArchetypeResult: Archetype models
"""

from src.traits.models import (
    Answer,
    ArchetypeDefinition,
    ArchetypeResult,
    AssessmentQuestion,
    TraitResponse,
)
from src.traits.service import TraitScorer
from src.traits.vocabulary import DEFAULT_ARCHETYPES, DEFAULT_TRAITS

__all__ = [
    "TraitScorer",
    "TraitResponse",
    "Answer",
    "AssessmentQuestion",
    "ArchetypeDefinition",
    "ArchetypeResult",
    "DEFAULT_ARCHETYPES",
    "DEFAULT_TRAITS",
]
