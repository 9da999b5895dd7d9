"""Tagged result objects returned by the service facade.

Every result carries ``success`` and, on failure, an ``error`` message next
to a safe empty/default payload so callers can render an empty state
without special-casing the failure.
"""

from pydantic import Field

from src.analytics.schemas import (
    CostResult,
    SavingsPotential,
    SprintEfficiency,
    SprintOutliers,
    SprintSnapshot,
    StatsSnapshot,
    Suggestion,
)
from src.models.base import DomainModel
from src.models.meeting import Meeting
from src.models.rates import DashboardSettings, RoleRate


class ServiceResult(DomainModel):
    """Base tagged result."""

    success: bool = True
    error: str | None = None


class OperationResult(ServiceResult):
    """Result of a write with no payload."""


class DeleteResult(ServiceResult):
    deleted: bool = Field(default=False, description="False when the id was unknown")


class MeetingListResult(ServiceResult):
    meetings: list[Meeting] = Field(default_factory=list)


class MeetingResult(ServiceResult):
    meeting: Meeting | None = None
    cost: CostResult | None = None


class DashboardStatsResult(ServiceResult):
    stats: StatsSnapshot = Field(default_factory=StatsSnapshot)


class RoleRatesResult(ServiceResult):
    rates: list[RoleRate] = Field(default_factory=list)


class ConfigResult(ServiceResult):
    settings: DashboardSettings = Field(default_factory=DashboardSettings)


class OptimizationResult(ServiceResult):
    suggestions: list[Suggestion] = Field(default_factory=list)
    total_potential_savings: float = 0.0
    summary: str = ""


class CostSummaryResult(ServiceResult):
    """Natural-language friendly cost summary for the agent facade."""

    total_cost: float = 0.0
    total_hours: float = 0.0
    meeting_count: int = 0
    avg_cost_per_meeting: float = 0.0
    date_range: str = ""
    summary: str = ""


class VelocityCorrelationResult(ServiceResult):
    correlation: float = 0.0
    interpretation: str = ""
    recommendation: str = ""
    data_points: str = ""
    efficiency_score: int | None = None
    sprint_efficiency: list[SprintEfficiency] = Field(default_factory=list)
    outliers: SprintOutliers | None = None
    sample: bool = Field(
        default=False,
        description="True when the figures are sample output, not computed",
    )


class SavingsPotentialResult(ServiceResult):
    savings: SavingsPotential = Field(default_factory=SavingsPotential)
    date_range: str = ""


class RoleRatesUpdate(DomainModel):
    """Request payload replacing the whole rate set."""

    rates: list[RoleRate] = Field(default_factory=list)


class SettingsUpdate(DomainModel):
    """Request payload replacing the dashboard settings."""

    settings: DashboardSettings = Field(default_factory=DashboardSettings)


class VelocityCorrelationRequest(DomainModel):
    sprints: list[SprintSnapshot] | None = None
