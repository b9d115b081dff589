"""
Assessment Schemas — Self-Assessment Records and Aggregate Windows

WellnessRecord is handed over by the storage collaborator, already filtered
by user and time range. AggregateWindow is the statistical summary every
downstream stage reads.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Ordinal scale shared by mood, stress and workload
MIN_LEVEL = 1
MAX_LEVEL = 5

METRIC_FIELDS = ("mood", "stress", "workload")


class WellnessRecord(BaseModel):
    """
    One self-assessment (mood, stress, workload) submitted by a user.

    Ordinals are NOT range-checked here: upstream validates them and the
    aggregator treats anything outside 1..5 as a contract violation.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque record identifier")
    user_id: Optional[str] = Field(None, description="Owner of the record")
    occurred_at: datetime = Field(..., description="When the assessment was made (UTC)")
    mood: int = Field(..., description="1 (very bad) to 5 (very good)")
    stress: int = Field(..., description="1 (very low) to 5 (very high)")
    workload: int = Field(..., description="1 (very light) to 5 (very heavy)")
    notes: Optional[str] = None

    @field_validator('occurred_at')
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class LevelCount(BaseModel):
    """Occurrences of one ordinal level."""
    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=MIN_LEVEL, le=MAX_LEVEL)
    count: int = Field(..., gt=0)


class AggregateWindow(BaseModel):
    """
    Summary statistics over a collection of records.

    Output guarantees:
    - Means rounded half-up to 2 decimals, exactly 0.0 when count == 0
    - Distributions contain observed levels only (no zero padding)
    """
    model_config = ConfigDict(frozen=True)

    count: int
    mean_mood: float = 0.0
    mean_stress: float = 0.0
    mean_workload: float = 0.0

    mood_distribution: Dict[int, int] = Field(default_factory=dict)
    stress_distribution: Dict[int, int] = Field(default_factory=dict)
    workload_distribution: Dict[int, int] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def distribution(self, metric: str) -> Dict[int, int]:
        """Level -> count mapping for 'mood', 'stress' or 'workload'."""
        return getattr(self, f"{metric}_distribution")
