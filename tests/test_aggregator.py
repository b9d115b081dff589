"""
Metric Aggregator Tests — Math Correctness & Constraints

Tests verify:
- Empty input: count 0, means exactly 0.0, empty distributions
- Means rounded half-up to 2 decimals
- Distributions only contain observed levels
- Means within [1, 5] and distribution sums == count
- Out-of-range ordinals fail fast (never clamped)
- Idempotency (same input = same output)
"""

from datetime import datetime, timezone, timedelta

import numpy as np
import pytest

from mindwork.assessments import (
    AggregateWindow,
    WellnessRecord,
    aggregate,
    distribution_items,
    round_half_up,
)
from mindwork.errors import InputContractError, OrdinalRangeError


def create_test_record(
    mood: int = 3,
    stress: int = 3,
    workload: int = 3,
    record_id: str = "rec-1",
    user_id: str = "user-1",
    occurred_at: datetime = None
) -> WellnessRecord:
    """Create a self-assessment with sensible defaults."""
    if occurred_at is None:
        occurred_at = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)
    return WellnessRecord(
        id=record_id,
        user_id=user_id,
        occurred_at=occurred_at,
        mood=mood,
        stress=stress,
        workload=workload,
    )


def create_random_records(n: int, seed: int = 42) -> list:
    """Seeded synthetic records."""
    rng = np.random.default_rng(seed)  # Deterministic
    levels = rng.integers(1, 6, size=(n, 3))
    start = datetime(2025, 3, 1, tzinfo=timezone.utc)
    return [
        create_test_record(
            mood=int(m), stress=int(s), workload=int(w),
            record_id=f"rec-{i}",
            occurred_at=start + timedelta(hours=i),
        )
        for i, (m, s, w) in enumerate(levels)
    ]


class TestEmptyInput:
    """Empty input is valid, not an error."""

    def test_empty_list_gives_zero_window(self):
        window = aggregate([])

        assert window.count == 0
        assert window.mean_mood == 0.0
        assert window.mean_stress == 0.0
        assert window.mean_workload == 0.0
        assert window.is_empty

    def test_empty_distributions(self):
        """Empty mappings, not five zero entries."""
        window = aggregate([])

        assert window.mood_distribution == {}
        assert window.stress_distribution == {}
        assert window.workload_distribution == {}

    def test_accepts_generator(self):
        window = aggregate(r for r in [])
        assert window.count == 0


class TestMeans:
    """Test mean computation and rounding."""

    def test_two_record_means(self):
        records = [
            create_test_record(mood=3, stress=5, workload=3, record_id="a"),
            create_test_record(mood=4, stress=5, workload=4, record_id="b"),
        ]

        window = aggregate(records)

        assert window.count == 2
        assert window.mean_mood == 3.5
        assert window.mean_stress == 5.0
        assert window.mean_workload == 3.5

    def test_rounds_to_two_decimals(self):
        """7 / 3 = 2.333... -> 2.33."""
        records = [
            create_test_record(mood=2, record_id="a"),
            create_test_record(mood=2, record_id="b"),
            create_test_record(mood=3, record_id="c"),
        ]

        assert aggregate(records).mean_mood == 2.33

    def test_rounds_half_up(self):
        """17 / 8 = 2.125 -> 2.13 (banker's rounding would give 2.12)."""
        records = [create_test_record(mood=2, record_id=f"r{i}") for i in range(7)]
        records.append(create_test_record(mood=3, record_id="r7"))

        assert aggregate(records).mean_mood == 2.13

    def test_round_half_up_helper(self):
        assert round_half_up(17, 8) == 2.13
        assert round_half_up(0, 0) == 0.0
        assert round_half_up(5, 1) == 5.0

    def test_means_within_scale(self):
        """Every mean of a non-empty window lies in [1, 5]."""
        window = aggregate(create_random_records(50))

        for mean in (window.mean_mood, window.mean_stress, window.mean_workload):
            assert 1.0 <= mean <= 5.0


class TestDistributions:
    """Test per-level distributions."""

    def test_only_observed_levels(self):
        records = [
            create_test_record(mood=3, stress=5, workload=3, record_id="a"),
            create_test_record(mood=4, stress=5, workload=4, record_id="b"),
        ]

        window = aggregate(records)

        assert window.mood_distribution == {3: 1, 4: 1}
        assert window.stress_distribution == {5: 2}
        assert window.workload_distribution == {3: 1, 4: 1}

    def test_distribution_sums_equal_count(self):
        window = aggregate(create_random_records(80, seed=7))

        for metric in ("mood", "stress", "workload"):
            assert sum(window.distribution(metric).values()) == window.count

    def test_distribution_keys_ascending(self):
        records = [
            create_test_record(stress=5, record_id="a"),
            create_test_record(stress=1, record_id="b"),
            create_test_record(stress=3, record_id="c"),
        ]

        window = aggregate(records)

        assert list(window.stress_distribution) == [1, 3, 5]

    def test_distribution_items_list_form(self):
        items = distribution_items({4: 2, 1: 1})

        assert [(i.level, i.count) for i in items] == [(1, 1), (4, 2)]


class TestContractViolations:
    """Out-of-range ordinals fail fast."""

    @pytest.mark.parametrize("field,value", [
        ("mood", 0),
        ("mood", 6),
        ("stress", -1),
        ("workload", 10),
    ])
    def test_out_of_range_raises(self, field, value):
        kwargs = {"mood": 3, "stress": 3, "workload": 3, field: value}
        record = create_test_record(record_id="bad", **kwargs)

        with pytest.raises(OrdinalRangeError) as exc_info:
            aggregate([create_test_record(record_id="ok"), record])

        assert exc_info.value.field == field
        assert exc_info.value.value == value
        assert exc_info.value.record_id == "bad"

    def test_error_is_input_contract_error(self):
        record = create_test_record(stress=7)

        with pytest.raises(InputContractError):
            aggregate([record])

        with pytest.raises(ValueError):
            aggregate([record])

    def test_first_offending_field_named(self):
        record = create_test_record(mood=9, stress=9)

        with pytest.raises(OrdinalRangeError, match="'mood'"):
            aggregate([record])


class TestDeterminism:
    """Same input = same output."""

    def test_idempotent(self):
        records = create_random_records(30)

        first = aggregate(records)
        second = aggregate(records)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_order_independent(self):
        records = create_random_records(30)

        assert aggregate(records) == aggregate(list(reversed(records)))


class TestRecordSchema:
    """Test WellnessRecord model."""

    def test_naive_timestamp_becomes_utc(self):
        record = create_test_record(occurred_at=datetime(2025, 3, 10, 12, 0))

        assert record.occurred_at.tzinfo == timezone.utc

    def test_record_is_immutable(self):
        record = create_test_record()

        with pytest.raises(Exception):
            record.mood = 5

    def test_window_model_round_trip_fields(self):
        window = AggregateWindow(count=1, mean_mood=4.0, mood_distribution={4: 1})

        assert window.distribution("mood") == {4: 1}
        assert window.stress_distribution == {}
