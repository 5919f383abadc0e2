"""Five-year demand projection for a role in an industry."""

from __future__ import annotations

import logging
import random
from typing import NamedTuple

from src.insights.models import DemandForecast, YearProjection
from src.utils.numeric import bandify, round_half_up, round_tenths

logger = logging.getLogger(__name__)

FORECAST_YEARS = 5
BASE_OPENINGS = 1000
BASE_SALARY = 80000
BASE_DEMAND_RANGE = (70.0, 90.0)
DEMAND_GROWTH_SHARE = 0.8
SALARY_GROWTH_SHARE = 0.6

TREND_BANDS = ((8, "strong-growth"), (5, "moderate-growth"))
DECLINING_BELOW = 2


class GrowthProfile(NamedTuple):
    base: float
    variance: float


INDUSTRY_GROWTH: dict[str, GrowthProfile] = {
    "technology": GrowthProfile(8, 4),
    "finance": GrowthProfile(5, 3),
    "healthcare": GrowthProfile(6, 2),
    "education": GrowthProfile(3, 2),
    "marketing": GrowthProfile(4, 3),
    "sales": GrowthProfile(5, 3),
}
DEFAULT_GROWTH = GrowthProfile(5, 3)


def overall_trend(final_growth: float) -> str:
    if final_growth < DECLINING_BELOW:
        return "declining"
    return bandify(final_growth, TREND_BANDS, "stable")


def forecast_demand(
    job_title: str,
    industry: str = "",
    rng: random.Random | int | None = None,
) -> DemandForecast:
    """Project demand, openings and salary over the next five years.

    Without `rng` the yearly growth rate is exactly the industry base rate
    and the starting demand is the middle of its range, so the result is
    reproducible. Pass a `random.Random` (or a seed) to draw the starting
    demand and a per-year variance instead.
    """
    if isinstance(rng, bool):
        rng = None
    elif isinstance(rng, int):
        rng = random.Random(rng)
    profile = INDUSTRY_GROWTH.get((industry or "").strip().lower(), DEFAULT_GROWTH)

    low, high = BASE_DEMAND_RANGE
    demand = rng.uniform(low, high) if rng is not None else (low + high) / 2
    openings = BASE_OPENINGS
    salary = BASE_SALARY

    projections: list[YearProjection] = []
    for year in range(1, FORECAST_YEARS + 1):
        variance = (
            rng.uniform(-profile.variance, profile.variance) if rng is not None else 0.0
        )
        growth = profile.base + variance

        demand = min(100.0, demand + growth * DEMAND_GROWTH_SHARE)
        openings = round_half_up(openings * (1 + growth / 100))
        salary = round_half_up(salary * (1 + growth * SALARY_GROWTH_SHARE / 100))

        projections.append(
            YearProjection(
                year=year,
                demand_score=round_half_up(demand),
                expected_openings=openings,
                salary_projection=salary,
                growth_rate=round_tenths(growth),
            )
        )

    logger.debug(
        "Forecast for %s (%s): simulated=%s", job_title, industry or "any", rng is not None
    )
    return DemandForecast(
        job_title=job_title,
        industry=industry,
        projections=tuple(projections),
        overall_trend=overall_trend(projections[-1].growth_rate),
        simulated=rng is not None,
    )
