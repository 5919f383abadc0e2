"""Posting trend, momentum and emerging-skill scoring."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta, timezone
from typing import Any

from src.insights.config import InsightsConfig, get_insights_config
from src.insights.models import Direction, EmergingSkill, MomentumRecord, TrendRecord
from src.utils.errors import InvalidInputError, require
from src.utils.numeric import bandify, coerce_number, round_half_up, round_tenths, safe_divide

logger = logging.getLogger(__name__)

EMERGING_GROWTH_FACTOR = 1.2
UNSEEN_SKILL_GROWTH = 100.0

OUTLOOK_BANDS = ((15, "strong-growth"), (5, "moderate-growth"))


def _count(value: Any) -> int:
    return max(0, int(coerce_number(value, 0.0)))


def _growth_rate(current: int, previous: int) -> float:
    """Unrounded percent change; thresholds compare against this value."""
    return safe_divide(current - previous, previous) * 100


def _as_naive_utc(value: Any) -> datetime | None:
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return None


class TrendScorer:
    """Compares activity across two equal time windows."""

    def __init__(self, config: InsightsConfig | None = None) -> None:
        self.config = config or get_insights_config()

    def trend(self, recent: Any, previous: Any) -> TrendRecord:
        """Growth between a recent and a previous window.

        Growth is zero when the previous window is empty, so the direction
        of a brand-new series is always "stable". Negative counts are read
        as zero.
        """
        current_count = _count(recent)
        previous_count = _count(previous)
        growth = _growth_rate(current_count, previous_count)
        return TrendRecord(
            current_count=current_count,
            previous_count=previous_count,
            growth_rate=round_tenths(growth),
            direction=self.direction(growth),
        )

    def direction(self, growth_rate: float) -> Direction:
        threshold = self.config.trend_threshold
        if growth_rate > threshold:
            return "accelerating"
        if growth_rate < -threshold:
            return "decelerating"
        return "stable"

    def momentum(
        self,
        total_postings: Any,
        recent_count: Any,
        previous_count: Any,
    ) -> MomentumRecord:
        """Score hiring momentum from overall volume and recent velocity."""
        total = _count(total_postings)
        trend = self.trend(recent_count, previous_count)

        volume_score = min(
            self.config.volume_cap, total / self.config.volume_reference * 50
        )
        velocity_score = min(
            self.config.velocity_cap,
            trend.current_count / self.config.velocity_reference * 50,
        )
        score = min(100, round_half_up(volume_score + velocity_score))
        change = _growth_rate(trend.current_count, trend.previous_count)

        if score > 75 and change > 10:
            growth_trend = "rapid-growth"
        elif score > 60 and change > 5:
            growth_trend = "steady-growth"
        elif change < -10:
            growth_trend = "declining"
        else:
            growth_trend = "stable"

        logger.debug(
            "Momentum: total=%d recent=%d previous=%d score=%d",
            total,
            trend.current_count,
            trend.previous_count,
            score,
        )
        return MomentumRecord(
            score=score,
            volume_score=round_tenths(volume_score),
            velocity_score=round_tenths(velocity_score),
            direction=trend.direction,
            change_rate=trend.growth_rate,
            growth_trend=growth_trend,
        )

    def count_windows(
        self,
        dates: Iterable[Any] | None,
        now: datetime | date,
        window_days: int = 30,
    ) -> tuple[int, int]:
        """Count dates in the last window and in the one before it.

        The recent window is `[now - window, ...)`; the previous window is
        `[now - 2*window, now - window)`. Unparseable dates are skipped.
        """
        require(dates, "dates")
        if window_days <= 0:
            raise InvalidInputError("window_days must be positive", field="window_days")
        reference = _as_naive_utc(now)
        if reference is None:
            raise InvalidInputError("now must be a date or datetime", field="now")

        recent_start = reference - timedelta(days=window_days)
        previous_start = reference - timedelta(days=2 * window_days)

        recent = previous = 0
        for raw in dates:  # type: ignore[union-attr]
            moment = _as_naive_utc(raw)
            if moment is None:
                continue
            if moment >= recent_start:
                recent += 1
            elif moment >= previous_start:
                previous += 1
        return recent, previous

    def emerging_skills(
        self,
        recent_counts: Mapping[str, Any] | None,
        previous_counts: Mapping[str, Any] | None = None,
        limit: int = 5,
    ) -> list[EmergingSkill]:
        """Skills whose recent count grew more than 20% on the previous window."""
        require(recent_counts, "recent_counts")
        previous = {name: _count(count) for name, count in (previous_counts or {}).items()}

        emerging: list[EmergingSkill] = []
        for name, raw in recent_counts.items():  # type: ignore[union-attr]
            count = _count(raw)
            before = previous.get(name, 0)
            if count <= before * EMERGING_GROWTH_FACTOR:
                continue
            growth = (
                round_tenths((count - before) / before * 100)
                if before > 0
                else UNSEEN_SKILL_GROWTH
            )
            emerging.append(EmergingSkill(name=name, growth=growth, frequency=count))

        emerging.sort(key=lambda skill: skill.growth, reverse=True)
        return emerging[: max(0, limit)]

    def demand_outlook(self, growth_rate: float) -> str:
        rate = coerce_number(growth_rate, 0.0)
        if rate < -10:
            return "declining"
        return bandify(rate, OUTLOOK_BANDS, "stable")
