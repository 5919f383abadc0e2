"""Keyword and skill extraction, and resume-to-job alignment."""

from __future__ import annotations

import logging
import re

from src.content.models import AlignmentResult
from src.content.vocabulary import KNOWN_SKILLS, STOP_WORDS
from src.utils.numeric import MATCH_GRADE_BANDS, grade, round_half_up, safe_divide

logger = logging.getLogger(__name__)

KEYWORD_LIMIT = 30
SKILL_PHRASE_LIMIT = 15
LISTED_LIMIT = 10
ALIGNMENT_TARGET = 70

WORD_PATTERN = re.compile(r"\b[a-z]{4,}\b")
SKILL_PHRASE_PATTERNS = (
    re.compile(r"(?:proficient|skilled|experienced)\s+in\s+([^.,]+)", re.IGNORECASE),
    re.compile(r"(?:knowledge|expertise)\s+(?:in|of)\s+([^.,]+)", re.IGNORECASE),
)
SKILL_LIST_SPLIT = re.compile(r"[,\s]+and\s+", re.IGNORECASE)
REQUIREMENTS_BLOCK = re.compile(
    r"(?:required|must have|skills?).*?(?=preferred|qualifications|$)",
    re.IGNORECASE | re.DOTALL,
)


def extract_keywords(text: str | None, limit: int = KEYWORD_LIMIT) -> list[str]:
    """Return the first `limit` distinct words of four or more letters."""
    keywords: list[str] = []
    for word in WORD_PATTERN.findall((text or "").lower()):
        if word in STOP_WORDS or word in keywords:
            continue
        keywords.append(word)
        if len(keywords) == limit:
            break
    return keywords


def extract_skill_phrases(text: str | None) -> list[str]:
    """Pull skills out of phrases like "proficient in X and Y"."""
    skills: list[str] = []
    for pattern in SKILL_PHRASE_PATTERNS:
        for match in pattern.finditer(text or ""):
            skills.extend(part.strip() for part in SKILL_LIST_SPLIT.split(match.group(1).strip()))
    return [skill for skill in skills if len(skill) > 2][:SKILL_PHRASE_LIMIT]


def extract_skills(text: str | None) -> list[str]:
    """Scan text for known technologies, in vocabulary order."""
    lowered = (text or "").lower()
    return [
        skill
        for skill in KNOWN_SKILLS
        if re.search(rf"(?<![\w.]){re.escape(skill)}(?![\w])", lowered)
    ]


def align_with_job(resume_text: str | None, job_text: str | None) -> AlignmentResult:
    """Measure how much of a job description's vocabulary a resume covers."""
    resume = resume_text or ""
    job = job_text or ""
    resume_lower = resume.lower()

    job_keywords = extract_keywords(job)
    resume_keywords = set(extract_keywords(resume))
    matched = [keyword for keyword in job_keywords if keyword in resume_keywords]
    missing = [keyword for keyword in job_keywords if keyword not in resume_keywords]

    score = round_half_up(safe_divide(len(matched), len(job_keywords)) * 100)

    block = REQUIREMENTS_BLOCK.search(job)
    required_skills = extract_skill_phrases(block.group(0)) if block else []
    found_skills = [skill for skill in required_skills if skill.lower() in resume_lower]
    missing_skills = [skill for skill in required_skills if skill.lower() not in resume_lower]

    suggestions: list[str] = []
    if missing:
        suggestions.append(f"Add these keywords: {', '.join(missing[:5])}")
    if missing_skills:
        suggestions.append(f"Highlight these skills: {', '.join(missing_skills[:3])}")
    if score < ALIGNMENT_TARGET:
        suggestions.append("Consider tailoring your resume to better match the job requirements")

    logger.debug("Alignment %d%% over %d job keywords", score, len(job_keywords))
    return AlignmentResult(
        alignment_score=score,
        grade=grade(score, MATCH_GRADE_BANDS),
        matched_keywords=tuple(matched[:LISTED_LIMIT]),
        missing_keywords=tuple(missing[:LISTED_LIMIT]),
        found_skills=tuple(found_skills),
        missing_skills=tuple(missing_skills),
        suggestions=tuple(suggestions),
    )
