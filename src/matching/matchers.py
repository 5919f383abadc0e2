"""Name matching utilities shared by the requirement adapters."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from difflib import SequenceMatcher

# canonical skill -> spellings that mean the same thing
_SKILL_VARIANTS: dict[str, tuple[str, ...]] = {
    "javascript": ("js",),
    "typescript": ("ts",),
    "python": ("python3",),
    "node.js": ("node", "nodejs", "node js"),
    "react": ("reactjs", "react.js", "react js"),
    "postgresql": ("postgres",),
    "mongodb": ("mongo db",),
    "machine learning": ("ml",),
    "artificial intelligence": ("ai",),
    "kubernetes": ("k8s",),
}

_SKILL_ALIASES: dict[str, str] = {
    variant: canonical
    for canonical, variants in _SKILL_VARIANTS.items()
    for variant in variants
}

# skill -> fundamentals it cannot be practised without
_SKILL_IMPLICATIONS: dict[str, tuple[str, ...]] = {
    "react": ("javascript",),
    "node.js": ("javascript",),
    "typescript": ("javascript",),
    "django": ("python",),
    "flask": ("python",),
    "kubernetes": ("docker",),
}


def normalize_name(name: str) -> str:
    """Normalize an attribute or skill name for comparison.

    Lowercases, collapses whitespace, drops parenthesised qualifiers and trims
    surrounding punctuation while preserving "+", "#", "." and "-"
    (e.g. "C++", "C#", "Node.js", "detail-oriented").
    """
    value = str(name).strip().lower()
    value = re.sub(r"\([^)]*\)", "", value)
    value = re.sub(r"\s+", " ", value)
    return value.strip(" ,;")


def canonicalize(name: str) -> str:
    normalized = normalize_name(name)
    return _SKILL_ALIASES.get(normalized, normalized)


def skills_match(
    skill1: str, skill2: str, fuzzy: bool = True, threshold: float = 0.85
) -> bool:
    """Return True if two skills name the same thing.

    Exact matches are compared after alias resolution. With `fuzzy`, names
    whose SequenceMatcher ratio reaches `threshold` also match; a threshold
    of 0 accepts any pair and one above 1 accepts none.
    """
    left, right = canonicalize(skill1), canonicalize(skill2)
    if not (left and right):
        return False
    if left == right:
        return True
    if not fuzzy or threshold > 1.0:
        return False
    return threshold <= 0.0 or SequenceMatcher(None, left, right).ratio() >= threshold


def best_level(
    skill: str,
    levels: Mapping[str, float],
    fuzzy: bool = True,
    threshold: float = 0.85,
) -> float | None:
    """Return the highest level among candidate skills matching `skill`."""
    matching = [
        level
        for name, level in levels.items()
        if skills_match(skill, name, fuzzy=fuzzy, threshold=threshold)
    ]
    return max(matching) if matching else None


def expand_skills(skills: Iterable[str]) -> list[str]:
    """Return the sorted canonical skills plus everything they imply.

    "React" brings in "javascript", "Kubernetes" brings in "docker".
    """
    expanded: set[str] = set()
    pending = [canonicalize(s) for s in skills if str(s).strip()]

    while pending:
        skill = pending.pop()
        if skill in expanded:
            continue
        expanded.add(skill)
        pending.extend(canonicalize(i) for i in _SKILL_IMPLICATIONS.get(skill, ()))

    return sorted(expanded)
