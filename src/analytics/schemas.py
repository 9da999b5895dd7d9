"""Schemas for derived cost analytics.

These models are computed on read and never persisted:
- Cost calculation output for a single meeting
- Period buckets and whole-range stats snapshots
- Optimization suggestions
- Sprint snapshots for velocity correlation
"""

from enum import Enum

from pydantic import Field

from src.models.base import DomainModel


class CostLineItem(DomainModel):
    """One line of a meeting cost breakdown."""

    role: str = Field(description="Role display name")
    role_id: str | None = Field(default=None, description="Role key (None for estimates)")
    hourly_rate: float
    hours: float
    cost: float
    attendee_count: int | None = Field(
        default=None,
        description="Headcount used for average-rate estimates",
    )


class CostResult(DomainModel):
    """Cost of a single meeting."""

    total_cost: float = 0.0
    breakdown: list[CostLineItem] = Field(default_factory=list)
    cost_per_minute: float = 0.0
    cost_per_hour: float = 0.0
    formatted_cost: str = ""


class TypeBreakdown(DomainModel):
    """Running totals for one meeting type."""

    cost: float = 0.0
    count: int = 0
    hours: float = 0.0


class PeriodBucket(DomainModel):
    """Aggregated totals for the meetings falling in one period key."""

    period: str = Field(description="YYYY-MM-DD, YYYY-Www or YYYY-MM")
    total_cost: float = 0.0
    meeting_count: int = 0
    total_hours: float = 0.0
    avg_cost_per_meeting: float = 0.0


class StatsSnapshot(DomainModel):
    """Whole-range summary statistics.

    Invariant: ``total_cost`` and ``total_hours`` equal the sums over
    ``cost_by_type`` within floating-point tolerance.
    """

    total_cost: float = 0.0
    total_hours: float = 0.0
    meeting_count: int = 0
    cost_by_type: dict[str, TypeBreakdown] = Field(default_factory=dict)
    trends: list[PeriodBucket] = Field(default_factory=list)
    trend_percentage: float = 0.0
    date_range: str | None = None
    granularity: str = Field(default="week", description="Bucket size of ``trends``")


class SavingsPotential(DomainModel):
    """Savings from cutting meeting load by a target fraction."""

    current_monthly_cost: float = 0.0
    current_monthly_hours: float = 0.0
    potential_savings: float = 0.0
    potential_hours_saved: float = 0.0
    target_reduction_percent: float = 0.0


class SuggestionPriority(str, Enum):
    """Priority tier of an optimization suggestion."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    SuggestionPriority.HIGH: 0,
    SuggestionPriority.MEDIUM: 1,
    SuggestionPriority.LOW: 2,
}


class Suggestion(DomainModel):
    """Heuristic recommendation with an estimated savings figure."""

    priority: SuggestionPriority
    category: str
    title: str
    description: str
    potential_savings: float = 0.0


class OptimizationReport(DomainModel):
    """Ranked suggestions and their (overlapping) savings estimate."""

    suggestions: list[Suggestion] = Field(default_factory=list)
    total_potential_savings: float = 0.0
    summary: str = ""


class SprintSnapshot(DomainModel):
    """Meeting load and delivery for one sprint."""

    sprint_name: str | None = None
    total_meeting_hours: float = Field(default=0.0, ge=0.0)
    completed_points: float = Field(default=0.0, ge=0.0)
    total_meeting_cost: float = Field(default=0.0, ge=0.0)


class SprintEfficiency(DomainModel):
    """Delivery per meeting hour for one sprint."""

    sprint_name: str | None = None
    points_per_meeting_hour: float | None = None
    cost_per_point: float | None = None
    efficiency: str = "unknown"


class SprintOutliers(DomainModel):
    """Best, worst and median sprints by points per meeting hour."""

    best: SprintSnapshot | None = None
    worst: SprintSnapshot | None = None
    median: SprintSnapshot | None = None
