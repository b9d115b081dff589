"""
Time Window Tests

Tests verify:
- Lookback windows end at `now` (exclusive) and span `days`
- Naive timestamps are treated as UTC
- Half-open membership
"""

from datetime import datetime, timezone, timedelta

import pytest

from mindwork.assessments import in_window, lookback_bounds, month_bounds
from mindwork.errors import InputContractError


class TestLookback:

    def test_span(self):
        now = datetime(2025, 3, 31, 18, 0, tzinfo=timezone.utc)

        start, end = lookback_bounds(30, now=now)

        assert end == now
        assert start == datetime(2025, 3, 1, 18, 0, tzinfo=timezone.utc)

    def test_naive_now_is_utc(self):
        start, end = lookback_bounds(1, now=datetime(2025, 3, 2))

        assert end.tzinfo == timezone.utc
        assert start == datetime(2025, 3, 1, tzinfo=timezone.utc)

    def test_defaults_to_current_time(self):
        before = datetime.now(timezone.utc)
        _, end = lookback_bounds(7)
        after = datetime.now(timezone.utc)

        assert before <= end <= after

    def test_zero_days_rejected(self):
        with pytest.raises(InputContractError) as exc_info:
            lookback_bounds(0)

        assert exc_info.value.field == "days"


class TestMembership:

    def test_half_open(self):
        bounds = month_bounds(2025, 3)

        assert in_window(datetime(2025, 3, 1, tzinfo=timezone.utc), bounds)
        assert in_window(datetime(2025, 3, 31, 23, 59, 59, tzinfo=timezone.utc), bounds)
        assert not in_window(datetime(2025, 4, 1, tzinfo=timezone.utc), bounds)
        assert not in_window(datetime(2025, 2, 28, 23, 59, tzinfo=timezone.utc), bounds)

    def test_other_timezone_converted(self):
        bounds = month_bounds(2025, 3)
        brt = timezone(timedelta(hours=-3))

        # 2025-03-31 22:00 BRT is 2025-04-01 01:00 UTC
        assert not in_window(datetime(2025, 3, 31, 22, 0, tzinfo=brt), bounds)
