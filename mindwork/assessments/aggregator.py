"""
Metric Aggregator — Reduce Self-Assessments to an Aggregate Window

Uses Pandas for the reduction (sums and value counts per metric).
Empty input is a valid, expected case: count 0, means 0.0, no distributions.

All calculations are stateless and idempotent.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List

import pandas as pd

from mindwork.errors import OrdinalRangeError

from .schemas import (
    AggregateWindow,
    LevelCount,
    WellnessRecord,
    METRIC_FIELDS,
    MIN_LEVEL,
    MAX_LEVEL,
)


logger = logging.getLogger(__name__)

# Decimal places kept on every mean
MEAN_PRECISION = Decimal("0.01")


def validate_record(record: WellnessRecord) -> None:
    """
    Fail fast on ordinals outside 1..5.

    Raises:
        OrdinalRangeError: naming the first offending field
    """
    for field in METRIC_FIELDS:
        value = getattr(record, field)
        if isinstance(value, bool) or not isinstance(value, int):
            raise OrdinalRangeError(field, value, record_id=record.id)
        if not MIN_LEVEL <= value <= MAX_LEVEL:
            raise OrdinalRangeError(field, value, record_id=record.id)


def round_half_up(total: int, count: int) -> float:
    """
    Exact mean of integer ordinals, rounded half-up to 2 decimals.

    Works on the exact fraction so 2.345 rounds to 2.35 (float round() and
    pandas round() would both go to even).
    """
    if count == 0:
        return 0.0
    mean = Decimal(int(total)) / Decimal(count)
    return float(mean.quantize(MEAN_PRECISION, rounding=ROUND_HALF_UP))


def records_to_frame(records: Iterable[WellnessRecord]) -> pd.DataFrame:
    """Validated records as a DataFrame with one integer column per metric."""
    rows = []
    for record in records:
        validate_record(record)
        rows.append({field: getattr(record, field) for field in METRIC_FIELDS})

    if not rows:
        return pd.DataFrame(columns=list(METRIC_FIELDS), dtype="int64")

    return pd.DataFrame(rows, columns=list(METRIC_FIELDS)).astype("int64")


def level_counts(series: pd.Series) -> Dict[int, int]:
    """Observed level -> count, keys ascending."""
    counts = series.value_counts().sort_index()
    return {int(level): int(n) for level, n in counts.items()}


def distribution_items(distribution: Dict[int, int]) -> List[LevelCount]:
    """Mapping form -> list form used by dashboard payloads."""
    return [
        LevelCount(level=level, count=count)
        for level, count in sorted(distribution.items())
    ]


def aggregate(records: Iterable[WellnessRecord]) -> AggregateWindow:
    """
    Reduce records into means and per-level distributions.

    Args:
        records: Self-assessments already filtered to the window of interest

    Returns:
        AggregateWindow (count 0 and means 0.0 for empty input)

    Raises:
        OrdinalRangeError: If any mood/stress/workload is outside 1..5
    """
    df = records_to_frame(records)
    count = len(df)

    if count == 0:
        logger.debug("[Aggregator] No records in window")
        return AggregateWindow(count=0)

    totals = df.sum()

    window = AggregateWindow(
        count=count,
        mean_mood=round_half_up(totals["mood"], count),
        mean_stress=round_half_up(totals["stress"], count),
        mean_workload=round_half_up(totals["workload"], count),
        mood_distribution=level_counts(df["mood"]),
        stress_distribution=level_counts(df["stress"]),
        workload_distribution=level_counts(df["workload"]),
    )

    logger.debug(
        f"[Aggregator] count={count} mood={window.mean_mood} "
        f"stress={window.mean_stress} workload={window.mean_workload}"
    )
    return window
