"""Whole-range meeting statistics for the dashboard.

Aggregates the cost snapshot stored on each meeting; costs are never
recomputed from current rates here.
"""

from collections.abc import Sequence
from datetime import UTC, datetime, time, timedelta
from enum import Enum

import structlog

from src.analytics.periods import Granularity, calculate_cost_trends
from src.analytics.schemas import (
    PeriodBucket,
    SavingsPotential,
    StatsSnapshot,
    TypeBreakdown,
)
from src.models.meeting import Meeting, MeetingType

logger = structlog.get_logger()


class DateRange(str, Enum):
    """Named look-back windows."""

    LAST_WEEK = "last-week"
    LAST_MONTH = "last-month"
    LAST_QUARTER = "last-quarter"


DEFAULT_DATE_RANGE = DateRange.LAST_MONTH

DATE_RANGE_WINDOWS = {
    DateRange.LAST_WEEK: timedelta(days=7),
    DateRange.LAST_MONTH: timedelta(days=30),
    DateRange.LAST_QUARTER: timedelta(days=90),
}


def resolve_window(date_range: str | None) -> timedelta:
    """Look-back window for a range key; unknown keys mean last month."""
    try:
        return DATE_RANGE_WINDOWS[DateRange(date_range)]
    except ValueError:
        return DATE_RANGE_WINDOWS[DEFAULT_DATE_RANGE]


def filter_by_date_range(
    meetings: Sequence[Meeting],
    date_range: str | None,
    now: datetime | None = None,
) -> list[Meeting]:
    """Meetings dated on or after ``now - window``.

    A meeting date counts from midnight UTC of that day.
    """
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    start = now - resolve_window(date_range)
    return [
        m for m in meetings if datetime.combine(m.date, time.min, tzinfo=UTC) >= start
    ]


def cost_by_type(meetings: Sequence[Meeting]) -> dict[str, TypeBreakdown]:
    """Cost, count and hours per meeting type, in first-seen order."""
    breakdown: dict[str, TypeBreakdown] = {}
    for meeting in meetings:
        key = (meeting.meeting_type or MeetingType.AD_HOC).value
        bucket = breakdown.setdefault(key, TypeBreakdown())
        bucket.cost += meeting.calculated_cost
        bucket.count += 1
        bucket.hours += meeting.hours
    return breakdown


def trend_percentage(trends: Sequence[PeriodBucket]) -> float:
    """Relative change between the two latest buckets, in percent.

    Zero with fewer than two buckets or a zero-cost previous bucket.
    """
    if len(trends) < 2:
        return 0.0
    current = trends[-1].total_cost
    previous = trends[-2].total_cost
    if previous <= 0:
        return 0.0
    return (current - previous) / previous * 100


def summarize_meetings(meetings: Sequence[Meeting]) -> StatsSnapshot:
    """Totals and type breakdown over meetings as given (no filter, no trends)."""
    return StatsSnapshot(
        total_cost=sum(m.calculated_cost for m in meetings),
        total_hours=sum(m.hours for m in meetings),
        meeting_count=len(meetings),
        cost_by_type=cost_by_type(meetings),
    )


def compute_stats(
    meetings: Sequence[Meeting],
    date_range: str | None = DEFAULT_DATE_RANGE.value,
    now: datetime | None = None,
    granularity: Granularity | str = Granularity.WEEK,
) -> StatsSnapshot:
    """Compute the dashboard snapshot for a date range.

    Args:
        meetings: Full meeting collection (not mutated)
        date_range: last-week, last-month or last-quarter; anything else is
            treated as last-month
        now: Reference time for the window (default: current UTC time)
        granularity: Trend bucket size (day, week, iso-week or month; unknown
            values mean day)

    Returns:
        StatsSnapshot; a zeroed snapshot if anything goes wrong
    """
    date_range_label = date_range or DEFAULT_DATE_RANGE.value
    granularity = Granularity.coerce(granularity)
    try:
        filtered = filter_by_date_range(meetings, date_range, now)
        snapshot = summarize_meetings(filtered)
        snapshot.trends = calculate_cost_trends(filtered, granularity)
        snapshot.trend_percentage = trend_percentage(snapshot.trends)
        snapshot.date_range = date_range_label
        snapshot.granularity = granularity.value
    except Exception as e:
        logger.error(
            "stats computation failed",
            date_range=date_range_label,
            meeting_count=len(meetings) if meetings is not None else 0,
            error=str(e),
        )
        return StatsSnapshot(date_range=date_range_label, granularity=granularity.value)

    logger.debug(
        "stats computed",
        date_range=date_range_label,
        meeting_count=snapshot.meeting_count,
        total_cost=round(snapshot.total_cost, 2),
    )
    return snapshot


def calculate_savings_potential(
    meetings: Sequence[Meeting],
    target_reduction: float = 0.2,
) -> SavingsPotential:
    """Cost and hours recovered by cutting meeting load by ``target_reduction``."""
    total_cost = sum(m.calculated_cost for m in meetings)
    total_hours = sum(m.hours for m in meetings)
    return SavingsPotential(
        current_monthly_cost=total_cost,
        current_monthly_hours=total_hours,
        potential_savings=total_cost * target_reduction,
        potential_hours_saved=total_hours * target_reduction,
        target_reduction_percent=target_reduction * 100,
    )
