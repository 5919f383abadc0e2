"""ATS-style content quality scoring."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from src.content.models import ContentScore, SectionScore
from src.content.vocabulary import (
    ACHIEVEMENT_INDICATORS,
    ACTION_VERBS,
    ATS_KEYWORDS,
    REQUIRED_SECTIONS,
)
from src.utils.numeric import clamp, grade, round_half_up

logger = logging.getLogger(__name__)

SECTION_POINTS = 25
KEYWORD_POINTS = 30
FORMATTING_POINTS = 20
ACHIEVEMENT_POINTS = 15
ACTION_VERB_POINTS = 10

OPTIMAL_WORDS = (200, 800)
SHORT_WORDS = 150
LONG_WORDS = 1200
MISSING_LIMIT = 5

BULLET_PATTERN = re.compile(r"[•\-\*]")
NUMBER_PATTERN = re.compile(r"\d+")
PERCENT_PATTERN = re.compile(r"\d+%")


def _present(vocabulary: Sequence[str], text: str) -> list[str]:
    return [term for term in vocabulary if term in text]


def length_points(word_count: int) -> int:
    low, high = OPTIMAL_WORDS
    if low <= word_count <= high:
        return 10
    if SHORT_WORDS <= word_count < low or high < word_count <= LONG_WORDS:
        return 7
    return 3


def length_status(word_count: int) -> str:
    low, high = OPTIMAL_WORDS
    if low <= word_count <= high:
        return "optimal"
    return "too-short" if word_count < low else "too-long"


class ContentQualityScorer:
    """Scores raw resume text on five weighted components summing to 100."""

    def score_content(self, text: str | None) -> ContentScore:
        """Score text for section coverage, keywords, formatting,
        quantified achievements and action verbs.

        `None` is scored as empty text.
        """
        content = "" if text is None else str(text)
        lowered = content.lower()

        breakdown = {
            "sections": self._sections(lowered),
            "keywords": self._keywords(lowered),
            "formatting": self._formatting(content),
            "achievements": self._achievements(content, lowered),
            "action_verbs": self._action_verbs(lowered),
        }
        total = sum(section.score for section in breakdown.values())
        score = int(clamp(round_half_up(total)))

        logger.debug("Content score %d from %d characters", score, len(content))
        return ContentScore(score=score, grade=grade(score), breakdown=breakdown)

    def _sections(self, lowered: str) -> SectionScore:
        # Singular headings such as "Skill" also count.
        found = [
            section
            for section in REQUIRED_SECTIONS
            if section in lowered or section[:-1] in lowered
        ]
        return SectionScore(
            score=len(found) / len(REQUIRED_SECTIONS) * SECTION_POINTS,
            max_score=SECTION_POINTS,
            details={
                "found": found,
                "missing": [s for s in REQUIRED_SECTIONS if s not in found],
            },
        )

    def _keywords(self, lowered: str) -> SectionScore:
        found = _present(ATS_KEYWORDS, lowered)
        density = len(found) / len(ATS_KEYWORDS)
        return SectionScore(
            score=min(density * KEYWORD_POINTS, KEYWORD_POINTS),
            max_score=KEYWORD_POINTS,
            details={
                "found": found,
                "missing": [k for k in ATS_KEYWORDS if k not in found][:MISSING_LIMIT],
                "density": round_half_up(density * 100),
            },
        )

    def _formatting(self, content: str) -> SectionScore:
        word_count = len(content.split())
        bullets = len(BULLET_PATTERN.findall(content))
        score = length_points(word_count) + min(bullets / 10 * 10, 10)
        return SectionScore(
            score=score,
            max_score=FORMATTING_POINTS,
            details={
                "word_count": word_count,
                "bullet_points": bullets,
                "status": length_status(word_count),
            },
        )

    def _achievements(self, content: str, lowered: str) -> SectionScore:
        indicators = _present(ACHIEVEMENT_INDICATORS, lowered)
        numbers = NUMBER_PATTERN.findall(content)
        percentages = PERCENT_PATTERN.findall(content)

        has_achievements = bool(indicators)
        has_numbers = len(numbers) >= 3
        has_percentages = len(percentages) >= 1

        if has_achievements and has_numbers and has_percentages:
            score = 15
        elif has_achievements and (has_numbers or has_percentages):
            score = 10
        elif has_achievements or has_numbers:
            score = 5
        else:
            score = 0

        return SectionScore(
            score=score,
            max_score=ACHIEVEMENT_POINTS,
            details={
                "has_achievements": has_achievements,
                "number_count": len(numbers),
                "percentage_count": len(percentages),
                "indicators": indicators,
            },
        )

    def _action_verbs(self, lowered: str) -> SectionScore:
        found = _present(ACTION_VERBS, lowered)
        return SectionScore(
            score=min(len(found) / len(ACTION_VERBS) * ACTION_VERB_POINTS, ACTION_VERB_POINTS),
            max_score=ACTION_VERB_POINTS,
            details={
                "found": found,
                "missing": [v for v in ACTION_VERBS if v not in found][:MISSING_LIMIT],
            },
        )
