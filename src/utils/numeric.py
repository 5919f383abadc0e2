"""Numeric helpers shared by every scorer.

`bandify` is the single place threshold chains live: importance tiers,
gap severity, impact, grade labels and priorities all go through it.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Band = tuple[float, str]

# Grade labels for 0-100 quality scores.
CONTENT_GRADE_BANDS: tuple[Band, ...] = (
    (80, "Excellent"),
    (60, "Good"),
    (40, "Fair"),
)
PROFILE_GRADE_BANDS: tuple[Band, ...] = (
    (90, "Excellent"),
    (75, "Good"),
    (60, "Fair"),
)
MATCH_GRADE_BANDS: tuple[Band, ...] = (
    (80, "Excellent Match"),
    (60, "Good Match"),
    (40, "Fair Match"),
)
DEFAULT_GRADE = "Needs Improvement"


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, substituting `default` when the denominator is zero."""
    if not denominator:
        return default
    return numerator / denominator


def round_half_up(value: float) -> int:
    """Round halves upwards (2.5 -> 3, -2.5 -> -2); round() would give 2."""
    return int(math.floor(value + 0.5))


def round_tenths(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def coerce_number(value: object, default: float) -> float:
    """Return `value` as a float, or `default` when it is missing or malformed."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def bandify(
    value: float,
    bands: Sequence[Band],
    default: str,
    *,
    inclusive: bool = False,
) -> str:
    """Map a value onto the first band whose threshold it passes.

    Bands must be ordered from the highest threshold down. With
    `inclusive=False` a value must exceed the threshold (`>`), otherwise it
    only needs to reach it (`>=`).
    """
    for threshold, label in bands:
        if value > threshold or (inclusive and value == threshold):
            return label
    return default


def grade(
    score: float,
    bands: Sequence[Band] = CONTENT_GRADE_BANDS,
    default: str = DEFAULT_GRADE,
) -> str:
    """Grade a 0-100 score; grade thresholds are inclusive."""
    return bandify(score, bands, default, inclusive=True)
