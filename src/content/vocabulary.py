"""Fixed vocabularies used by resume and profile scoring."""

from __future__ import annotations

REQUIRED_SECTIONS: tuple[str, ...] = ("experience", "education", "skills", "summary")

ATS_KEYWORDS: tuple[str, ...] = (
    "leadership",
    "management",
    "team",
    "project",
    "develop",
    "design",
    "implement",
    "analyze",
    "strategic",
    "communication",
    "collaboration",
    "problem-solving",
    "innovation",
    "results",
    "achievement",
    "improve",
    "optimize",
    "execute",
)

ACHIEVEMENT_INDICATORS: tuple[str, ...] = (
    "increased",
    "decreased",
    "improved",
    "reduced",
    "achieved",
    "exceeded",
)

ACTION_VERBS: tuple[str, ...] = (
    "led",
    "managed",
    "developed",
    "designed",
    "implemented",
    "created",
    "improved",
    "increased",
    "achieved",
    "delivered",
    "executed",
    "optimized",
    "analyzed",
    "collaborated",
    "coordinated",
    "established",
    "launched",
    "transformed",
)

# Technologies recognised when scanning free text for skills.
KNOWN_SKILLS: tuple[str, ...] = (
    "javascript",
    "python",
    "java",
    "react",
    "node.js",
    "sql",
    "aws",
    "docker",
    "kubernetes",
    "git",
    "agile",
    "scrum",
    "api",
    "rest",
    "graphql",
    "mongodb",
    "postgresql",
    "machine learning",
    "data analysis",
    "project management",
)

STOP_WORDS: frozenset[str] = frozenset(
    {
        "about",
        "also",
        "been",
        "from",
        "have",
        "into",
        "more",
        "such",
        "that",
        "their",
        "them",
        "then",
        "there",
        "these",
        "they",
        "this",
        "those",
        "were",
        "what",
        "when",
        "which",
        "will",
        "with",
        "would",
        "your",
    }
)
