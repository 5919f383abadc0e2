"""Profile completeness scoring."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from src.content.models import (
    CompletenessResult,
    ResumeSnapshot,
    SectionScore,
    SocialProfile,
    Suggestion,
    UserProfile,
)
from src.utils.errors import require
from src.utils.numeric import PROFILE_GRADE_BANDS, clamp, grade, round_half_up

logger = logging.getLogger(__name__)

CONTENT_CAP = 25
OPTIMIZED_SCORE = 70
HEADLINE_MIN_CHARS = 20
SUMMARY_MIN_CHARS = 100
RESUME_MIN_CHARS = 200


def _model(model: type, value: Any) -> Any:
    if value is None or isinstance(value, model):
        return value
    return model.model_validate(value)


def score_profile_completeness(
    user: UserProfile | Mapping[str, Any] | None,
    social: SocialProfile | Mapping[str, Any] | None = None,
    resume: ResumeSnapshot | Mapping[str, Any] | None = None,
) -> CompletenessResult:
    """Score how complete a profile is out of 100.

    Points come from basic info (25), contact details (15), professional
    links (20), written content (25, capped) and verification or optimized
    documents (15).
    """
    require(user, "user")
    profile: UserProfile = _model(UserProfile, user)
    social_profile: SocialProfile | None = _model(SocialProfile, social)
    resume_snapshot: ResumeSnapshot | None = _model(ResumeSnapshot, resume)

    has_name = bool(profile.first_name and profile.last_name)
    basic = SectionScore(
        score=(10 if has_name else 0)
        + (10 if profile.email else 0)
        + (5 if profile.has_location else 0),
        max_score=25,
        details={
            "has_name": has_name,
            "has_email": bool(profile.email),
            "has_location": profile.has_location,
        },
    )

    contact = SectionScore(
        score=(8 if profile.phone_number else 0) + (7 if profile.profile_image else 0),
        max_score=15,
        details={
            "has_phone": bool(profile.phone_number),
            "has_profile_image": bool(profile.profile_image),
        },
    )

    links = SectionScore(
        score=(8 if profile.linkedin_url else 0)
        + (6 if profile.github_url else 0)
        + (6 if profile.portfolio_url else 0),
        max_score=20,
        details={
            "has_linkedin": bool(profile.linkedin_url),
            "has_github": bool(profile.github_url),
            "has_portfolio": bool(profile.portfolio_url),
        },
    )

    has_headline = bool(social_profile and len(social_profile.headline) > HEADLINE_MIN_CHARS)
    has_summary = bool(social_profile and len(social_profile.summary) > SUMMARY_MIN_CHARS)
    has_resume = bool(resume_snapshot and len(resume_snapshot.raw_text) > RESUME_MIN_CHARS)
    content = SectionScore(
        score=min(
            (10 if has_headline else 0) + (15 if has_summary else 0) + (10 if has_resume else 0),
            CONTENT_CAP,
        ),
        max_score=CONTENT_CAP,
        details={
            "has_headline": has_headline,
            "has_summary": has_summary,
            "has_resume": has_resume,
        },
    )

    resume_optimized = bool(resume_snapshot and resume_snapshot.ats_score >= OPTIMIZED_SCORE)
    social_optimized = bool(
        social_profile and social_profile.completeness_score >= OPTIMIZED_SCORE
    )
    additional = SectionScore(
        score=(5 if profile.is_email_verified else 0)
        + (5 if resume_optimized else 0)
        + (5 if social_optimized else 0),
        max_score=15,
        details={
            "email_verified": profile.is_email_verified,
            "resume_optimized": resume_optimized,
            "social_optimized": social_optimized,
        },
    )

    breakdown = {
        "basic_info": basic,
        "contact_info": contact,
        "professional_links": links,
        "profile_content": content,
        "additional_info": additional,
    }
    score = int(clamp(round_half_up(sum(section.score for section in breakdown.values()))))

    suggestions: list[Suggestion] = []
    if not profile.has_location:
        suggestions.append(Suggestion("Basic Info", "Add your location", "high"))
    if not profile.phone_number:
        suggestions.append(Suggestion("Contact", "Add your phone number", "medium"))
    if not profile.linkedin_url:
        suggestions.append(Suggestion("Links", "Add your LinkedIn profile URL", "high"))
    if not has_headline:
        suggestions.append(Suggestion("Content", "Create a professional headline", "high"))
    if not has_summary:
        suggestions.append(Suggestion("Content", "Write a compelling profile summary", "high"))
    if not has_resume:
        suggestions.append(Suggestion("Content", "Upload your resume", "medium"))

    logger.debug("Profile completeness %d with %d suggestions", score, len(suggestions))
    return CompletenessResult(
        score=score,
        grade=grade(score, PROFILE_GRADE_BANDS),
        breakdown=breakdown,
        suggestions=tuple(suggestions),
    )
