"""Period bucketing of meetings for cost trends.

Week keys use the dashboard's historical week numbering: weeks start on
Sunday and week 1 is the week containing 1 January. This approximates ISO
weeks but differs around year boundaries; use ``Granularity.ISO_WEEK`` for
calendar-exact ISO-8601 weeks.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from enum import Enum

from src.analytics.schemas import PeriodBucket
from src.models.meeting import Meeting


class Granularity(str, Enum):
    """Supported bucket sizes."""

    DAY = "day"
    WEEK = "week"
    ISO_WEEK = "iso-week"
    MONTH = "month"

    @classmethod
    def coerce(cls, value: "Granularity | str") -> "Granularity":
        """Resolve a granularity, falling back to day for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.DAY


def week_number(d: date) -> int:
    """Sunday-based week of year, week 1 containing 1 January."""
    jan1 = date(d.year, 1, 1)
    jan1_offset = (jan1.weekday() + 1) % 7  # Sunday = 0
    day_of_year = (d - jan1).days
    return math.ceil((day_of_year + jan1_offset + 1) / 7)


def period_key(d: date, granularity: Granularity | str) -> str:
    """Bucket key for a date at the given granularity."""
    granularity = Granularity.coerce(granularity)

    if granularity is Granularity.WEEK:
        return f"{d.year}-W{week_number(d):02d}"
    if granularity is Granularity.ISO_WEEK:
        iso_year, iso_week, _ = d.isocalendar()
        return f"{iso_year}-W{iso_week:02d}"
    if granularity is Granularity.MONTH:
        return f"{d.year}-{d.month:02d}"
    return d.isoformat()


def group_by_period(
    meetings: Iterable[Meeting],
    granularity: Granularity | str = Granularity.WEEK,
) -> dict[str, list[Meeting]]:
    """Group meetings by period key, preserving input order within a group."""
    grouped: dict[str, list[Meeting]] = {}
    for meeting in meetings:
        key = period_key(meeting.date, granularity)
        grouped.setdefault(key, []).append(meeting)
    return grouped


def summarize(grouped: Mapping[str, Sequence[Meeting]]) -> list[PeriodBucket]:
    """Per-period totals, sorted ascending by key.

    Keys of one granularity are fixed-width and zero-padded, so
    lexicographic order is chronological order.
    """
    buckets = []
    for period, period_meetings in grouped.items():
        total_cost = sum(m.calculated_cost for m in period_meetings)
        count = len(period_meetings)
        buckets.append(
            PeriodBucket(
                period=period,
                total_cost=total_cost,
                meeting_count=count,
                total_hours=sum(m.hours for m in period_meetings),
                avg_cost_per_meeting=total_cost / count if count else 0.0,
            )
        )
    return sorted(buckets, key=lambda b: b.period)


def calculate_cost_trends(
    meetings: Sequence[Meeting],
    granularity: Granularity | str = Granularity.WEEK,
) -> list[PeriodBucket]:
    """Group then summarize; empty input gives an empty list."""
    if not meetings:
        return []
    return summarize(group_by_period(meetings, granularity))
