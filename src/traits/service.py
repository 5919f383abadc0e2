"""Personality trait scoring and archetype classification."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from src.traits.models import (
    LIKERT_MAX,
    LIKERT_MIN,
    Answer,
    ArchetypeDefinition,
    ArchetypeResult,
    AssessmentQuestion,
    TraitResponse,
)
from src.traits.vocabulary import (
    DEFAULT_ARCHETYPES,
    DEFAULT_TRAITS,
    FALLBACK_ARCHETYPE,
    FALLBACK_CONFIDENCE,
)
from src.utils.errors import require
from src.utils.numeric import clamp, coerce_number, round_half_up

logger = logging.getLogger(__name__)

NEUTRAL_TRAIT_SCORE = 50


def _as_model(model: type, value: Any) -> Any:
    return value if isinstance(value, model) else model.model_validate(value)


class TraitScorer:
    """Turns Likert-scale survey responses into 0-100 trait scores."""

    def __init__(self, vocabulary: Sequence[str] = DEFAULT_TRAITS) -> None:
        self.vocabulary = tuple(vocabulary)

    def resolve_responses(
        self,
        answers: Iterable[Answer | Mapping[str, Any]] | None,
        questions: Iterable[AssessmentQuestion | Mapping[str, Any]] | None,
    ) -> list[TraitResponse]:
        """Attach each answer to its question's trait and weight.

        Answers to questions that are not in `questions` are skipped.
        """
        require(answers, "answers")
        by_id = {
            question.id: question
            for question in (
                _as_model(AssessmentQuestion, q) for q in (questions or [])
            )
        }

        responses: list[TraitResponse] = []
        for raw in answers:  # type: ignore[union-attr]
            answer = _as_model(Answer, raw)
            question = by_id.get(answer.question_id)
            if question is None:
                logger.debug("Skipping answer to unknown question %s", answer.question_id)
                continue
            responses.append(
                TraitResponse(
                    trait=question.trait, answer=answer.answer, weight=question.weight
                )
            )
        return responses

    def score_traits(
        self,
        responses: Iterable[TraitResponse | Mapping[str, Any]] | None,
        vocabulary: Sequence[str] | None = None,
    ) -> dict[str, int]:
        """Score every trait in the vocabulary.

        Each trait is the weighted mean of its answers mapped from 1-5 onto
        0-100. Traits nobody answered for score a neutral 50 rather than 0.
        """
        require(responses, "responses")
        traits = tuple(vocabulary) if vocabulary is not None else self.vocabulary

        weighted_sum = dict.fromkeys(traits, 0.0)
        weight_total = dict.fromkeys(traits, 0.0)

        for raw in responses:  # type: ignore[union-attr]
            response = _as_model(TraitResponse, raw)
            if response.trait not in weighted_sum:
                continue
            weighted_sum[response.trait] += response.answer * response.weight
            weight_total[response.trait] += response.weight

        scores: dict[str, int] = {}
        span = LIKERT_MAX - LIKERT_MIN
        for trait in traits:
            if weight_total[trait] > 0:
                mean = weighted_sum[trait] / weight_total[trait]
                scores[trait] = round_half_up((mean - LIKERT_MIN) / span * 100)
            else:
                scores[trait] = NEUTRAL_TRAIT_SCORE

        logger.debug("Scored %d traits", len(scores))
        return scores

    def classify_archetype(
        self,
        trait_scores: Mapping[str, float] | None,
        archetypes: Sequence[ArchetypeDefinition | Mapping[str, Any]] = DEFAULT_ARCHETYPES,
    ) -> ArchetypeResult:
        """Pick the archetype whose traits average highest.

        Ties go to the archetype listed first. The baseline to beat is 0, so
        the fallback archetype only comes back when no archetype averages
        above zero (or none are defined).
        """
        scores = trait_scores or {}
        best: ArchetypeDefinition | None = None
        best_average = 0.0

        for raw in archetypes:
            archetype = _as_model(ArchetypeDefinition, raw)
            if not archetype.traits:
                continue
            total = sum(
                clamp(coerce_number(scores.get(trait), NEUTRAL_TRAIT_SCORE))
                for trait in archetype.traits
            )
            average = total / len(archetype.traits)
            if average > best_average:
                best = archetype
                best_average = average

        if best is None:
            return ArchetypeResult(
                label=FALLBACK_ARCHETYPE.label,
                confidence=FALLBACK_CONFIDENCE,
                description=FALLBACK_ARCHETYPE.description,
            )

        return ArchetypeResult(
            label=best.label,
            confidence=round_half_up(best_average),
            description=best.description,
        )
