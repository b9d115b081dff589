"""
Assessments Module — Metric Aggregation Layer

Public API:
- WellnessRecord: One self-assessment (mood, stress, workload)
- AggregateWindow: Means + per-level distributions over a set of records
- aggregate: Stateless reduction of records into an AggregateWindow
- month_bounds / lookback_bounds: Half-open UTC ranges for storage queries
"""

from .schemas import (
    WellnessRecord,
    AggregateWindow,
    LevelCount,
    METRIC_FIELDS,
    MIN_LEVEL,
    MAX_LEVEL,
)
from .aggregator import (
    aggregate,
    validate_record,
    round_half_up,
    distribution_items,
)
from .windows import (
    month_bounds,
    lookback_bounds,
    in_window,
    validate_year_month,
)

__all__ = [
    "WellnessRecord",
    "AggregateWindow",
    "LevelCount",
    "METRIC_FIELDS",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "aggregate",
    "validate_record",
    "round_half_up",
    "distribution_items",
    "month_bounds",
    "lookback_bounds",
    "in_window",
    "validate_year_month",
]
