"""
Dashboard Summary — Anonymous Period Overview for Managers

Reduces all organization self-assessments over the last N days into totals,
rounded averages and per-level distributions. No user is identified.

No data: zeros and empty distribution lists (never five zero entries).
"""

import logging
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mindwork.assessments.aggregator import aggregate, distribution_items
from mindwork.assessments.schemas import LevelCount, WellnessRecord
from mindwork.config import settings
from mindwork.errors import InputContractError


logger = logging.getLogger(__name__)

MAX_PERIOD_DAYS = 365


class DashboardSummary(BaseModel):
    """Aggregated self-assessments over a period (camelCase on the wire)."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    period_days: int = Field(..., ge=1, le=MAX_PERIOD_DAYS)
    total_assessments: int = Field(..., ge=0)
    average_mood: float = 0.0
    average_stress: float = 0.0
    average_workload: float = 0.0
    mood_distribution: List[LevelCount] = Field(default_factory=list)
    stress_distribution: List[LevelCount] = Field(default_factory=list)
    workload_distribution: List[LevelCount] = Field(default_factory=list)


def summarize_period(
    records: Iterable[WellnessRecord],
    period_days: Optional[int] = None
) -> DashboardSummary:
    """
    Summarize the records of a trailing period.

    Args:
        records: Organization records within lookback_bounds(period_days)
        period_days: 1..365 (default: settings.DASHBOARD_DEFAULT_DAYS)

    Raises:
        InputContractError: period_days outside 1..365, or bad ordinals
    """
    if period_days is None:
        period_days = settings.DASHBOARD_DEFAULT_DAYS
    if not 1 <= period_days <= MAX_PERIOD_DAYS:
        raise InputContractError(
            "period_days",
            period_days,
            f"period_days must be in 1..{MAX_PERIOD_DAYS}, got {period_days!r}",
        )

    window = aggregate(records)
    logger.debug(f"[Dashboard] {period_days}d window: {window.count} assessments")

    return DashboardSummary(
        period_days=period_days,
        total_assessments=window.count,
        average_mood=window.mean_mood,
        average_stress=window.mean_stress,
        average_workload=window.mean_workload,
        mood_distribution=distribution_items(window.mood_distribution),
        stress_distribution=distribution_items(window.stress_distribution),
        workload_distribution=distribution_items(window.workload_distribution),
    )
