"""Default trait vocabulary and personality archetypes."""

from __future__ import annotations

from src.traits.models import ArchetypeDefinition

DEFAULT_TRAITS: tuple[str, ...] = (
    "analytical",
    "creative",
    "leadership",
    "detail-oriented",
    "communicative",
    "collaborative",
    "independent",
    "structured",
)

DEFAULT_ARCHETYPES: tuple[ArchetypeDefinition, ...] = (
    ArchetypeDefinition(
        label="Analytical Thinker",
        traits=["analytical", "detail-oriented", "structured"],
        description=(
            "You excel at data-driven decision making and systematic problem-solving."
        ),
    ),
    ArchetypeDefinition(
        label="Creative Innovator",
        traits=["creative", "independent"],
        description=(
            "You thrive in environments that value innovation and original thinking."
        ),
    ),
    ArchetypeDefinition(
        label="Natural Leader",
        traits=["leadership", "communicative", "collaborative"],
        description=(
            "You are skilled at guiding teams and inspiring others to achieve goals."
        ),
    ),
    ArchetypeDefinition(
        label="Detail Specialist",
        traits=["detail-oriented", "structured", "analytical"],
        description=(
            "You excel at precision work and maintaining high quality standards."
        ),
    ),
    ArchetypeDefinition(
        label="Team Collaborator",
        traits=["collaborative", "communicative"],
        description=(
            "You work best in team environments and value interpersonal connections."
        ),
    ),
    ArchetypeDefinition(
        label="Independent Professional",
        traits=["independent", "structured"],
        description="You prefer autonomous work and self-directed projects.",
    ),
)

FALLBACK_ARCHETYPE = ArchetypeDefinition(
    label="Balanced Professional",
    traits=[],
    description="You have a well-rounded professional profile.",
)
FALLBACK_CONFIDENCE = 50
