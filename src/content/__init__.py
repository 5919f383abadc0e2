"""Content and profile quality scoring.

Public API:
    - ContentQualityScorer: ATS-style resume text score
    - align_with_job: Resume vs job description keyword coverage
    - extract_keywords, extract_skills: Text scanning helpers
    - score_profile_completeness: Profile completeness score
"""

from src.content.alignment import (
    align_with_job,
    extract_keywords,
    extract_skill_phrases,
    extract_skills,
)
from src.content.ats import ContentQualityScorer
from src.content.completeness import score_profile_completeness
from src.content.models import (
    AlignmentResult,
    CompletenessResult,
    ContentScore,
    ResumeSnapshot,
    SectionScore,
    SocialProfile,
    Suggestion,
    UserProfile,
)

__all__ = [
    "ContentQualityScorer",
    "align_with_job",
    "extract_keywords",
    "extract_skill_phrases",
    "extract_skills",
    "score_profile_completeness",
    "AlignmentResult",
    "CompletenessResult",
    "ContentScore",
    "ResumeSnapshot",
    "SectionScore",
    "SocialProfile",
    "Suggestion",
    "UserProfile",
]
