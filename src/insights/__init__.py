"""Market insight scoring: skill gaps, shortages, trends and forecasts.

Public API:
    - GapAnalyzer: Population demand vs candidate skills
    - TrendScorer: Window growth, momentum and emerging skills
    - forecast_demand: Five-year demand projection
    - InsightsConfig: Configuration settings
"""

from src.insights.config import (
    InsightsConfig,
    get_insights_config,
    reset_insights_config,
)
from src.insights.forecast import forecast_demand
from src.insights.gaps import GapAnalyzer
from src.insights.models import (
    DemandForecast,
    EmergingSkill,
    FrequencyTable,
    GapAnalysis,
    GapRecord,
    MomentumRecord,
    ShortageRecord,
    SkillDemand,
    StrengthRecord,
    TrendRecord,
    YearProjection,
)
from src.insights.trends import TrendScorer

__all__ = [
    "GapAnalyzer",
    "TrendScorer",
    "forecast_demand",
    "DemandForecast",
    "EmergingSkill",
    "FrequencyTable",
    "GapAnalysis",
    "GapRecord",
    "MomentumRecord",
    "ShortageRecord",
    "SkillDemand",
    "StrengthRecord",
    "TrendRecord",
    "YearProjection",
    "InsightsConfig",
    "get_insights_config",
    "reset_insights_config",
]
