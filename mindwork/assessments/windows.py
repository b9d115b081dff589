"""
Time Windows — Half-Open UTC Ranges for Querying Storage

The core never filters records itself. These helpers give the storage
collaborator the exact range to fetch:
- lookback_bounds: [now - days, now) for per-user recommendations
- month_bounds:    [start_of_month, start_of_next_month) for monthly reports
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from mindwork.errors import InputContractError


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def validate_year_month(year: int, month: int) -> None:
    """
    Raises:
        InputContractError: year <= 0 or month outside 1..12
    """
    if year <= 0:
        raise InputContractError("year", year, f"year must be a positive integer, got {year!r}")
    if not 1 <= month <= 12:
        raise InputContractError("month", month, f"month must be in 1..12, got {month!r}")


def month_bounds(year: int, month: int) -> Tuple[datetime, datetime]:
    """
    Calendar month in UTC as a half-open range.

    December rolls over into January of the following year.
    """
    validate_year_month(year, month)

    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end


def lookback_bounds(
    days: int,
    now: Optional[datetime] = None
) -> Tuple[datetime, datetime]:
    """
    Trailing window of `days` ending at `now` (exclusive).

    Args:
        days: Window length, at least 1
        now: Reference instant (defaults to current UTC time)
    """
    if days < 1:
        raise InputContractError("days", days, f"lookback must be at least 1 day, got {days!r}")

    end = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    return end - timedelta(days=days), end


def in_window(ts: datetime, bounds: Tuple[datetime, datetime]) -> bool:
    """True if ts falls inside the half-open range."""
    start, end = bounds
    return start <= _as_utc(ts) < end
