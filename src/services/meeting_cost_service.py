"""Meeting cost service: the operations behind the dashboard and agent.

Each operation reads what it needs from the key-value store, runs the
analytics engine over it and returns a tagged result. No state is kept
between calls; rates and meetings are re-read on every invocation.
"""

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

import structlog

from src.analytics.correlation import (
    calculate_efficiency_score,
    calculate_sprint_efficiency,
    find_sprint_outliers,
    interpret_correlation,
    pearson,
)
from src.analytics.cost_calculator import compute_cost
from src.analytics.formatting import format_currency, format_date_range
from src.analytics.optimization import generate_optimizations
from src.analytics.periods import Granularity
from src.analytics.schemas import SprintSnapshot, StatsSnapshot
from src.analytics.stats import (
    DEFAULT_DATE_RANGE,
    calculate_savings_potential,
    compute_stats,
    filter_by_date_range,
    summarize_meetings,
)
from src.config import settings
from src.models.meeting import Meeting, MeetingDraft
from src.models.rates import (
    DashboardSettings,
    RateTable,
    RoleRate,
    find_duplicate_role_ids,
)
from src.repositories.config_repo import ConfigRepository
from src.repositories.kv_store import KeyValueStore
from src.repositories.meeting_repo import MeetingRepository
from src.services.schemas import (
    ConfigResult,
    CostSummaryResult,
    DashboardStatsResult,
    DeleteResult,
    MeetingListResult,
    MeetingResult,
    OperationResult,
    OptimizationResult,
    RoleRatesResult,
    SavingsPotentialResult,
    VelocityCorrelationResult,
)

logger = structlog.get_logger()

# Placeholder insight until sprint data is wired in from the tracker
SAMPLE_CORRELATION = -0.35
SAMPLE_DATA_POINTS = "Based on available meeting data"


def _range_key(date_range: object) -> str:
    """Range label to echo back; non-string or blank input means the default."""
    if isinstance(date_range, str) and date_range.strip():
        return date_range.strip()
    return DEFAULT_DATE_RANGE.value


class MeetingCostService:
    """Facade implementing every dashboard and agent operation.

    Never raises: failures are logged and returned as ``success=False``
    results carrying an error message and an empty/default payload.
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the service.

        Args:
            store: Key-value store holding meetings and configuration
            clock: Source of "now" for date-range windows (default: UTC now)
        """
        self._meetings = MeetingRepository(store)
        self._config = ConfigRepository(store)
        self._clock = clock or (lambda: datetime.now(UTC))

    # Meetings

    async def list_meetings(self, limit: int | None = None) -> MeetingListResult:
        """Meetings sorted by date (newest first), truncated to ``limit``."""
        limit = settings.default_meeting_limit if limit is None else max(limit, 0)
        try:
            meetings = await self._meetings.list_all()
        except Exception as e:
            logger.error("error fetching meetings", error=str(e))
            return MeetingListResult(success=False, error=str(e))

        ordered = sorted(meetings, key=lambda m: m.date, reverse=True)
        return MeetingListResult(meetings=ordered[:limit])

    async def add_meeting(self, draft: MeetingDraft) -> MeetingResult:
        """Price a new meeting with the current rates and append it.

        The cost computed here is stored on the meeting and is never
        recomputed when rates change later.
        """
        try:
            rate_table = RateTable.from_rates(await self._config.get_role_rates())
            cost = compute_cost(draft, rate_table)
            meeting = Meeting.from_draft(draft, calculated_cost=cost.total_cost)
            await self._meetings.add(meeting)
        except Exception as e:
            logger.error("error adding meeting", title=draft.title, error=str(e))
            return MeetingResult(success=False, error=str(e))

        logger.info(
            "meeting added",
            meeting_id=meeting.id,
            meeting_type=meeting.meeting_type.value,
            cost=round(meeting.calculated_cost, 2),
        )
        return MeetingResult(meeting=meeting, cost=cost)

    async def delete_meeting(self, meeting_id: str) -> DeleteResult:
        """Remove a meeting; unknown ids succeed without changes."""
        try:
            deleted = await self._meetings.delete(meeting_id)
        except Exception as e:
            logger.error("error deleting meeting", meeting_id=meeting_id, error=str(e))
            return DeleteResult(success=False, error=str(e))

        logger.info("meeting deleted", meeting_id=meeting_id, found=deleted)
        return DeleteResult(deleted=deleted)

    # Dashboard

    async def get_dashboard_stats(
        self,
        date_range: str | None = DEFAULT_DATE_RANGE.value,
        granularity: Granularity | str = Granularity.WEEK,
    ) -> DashboardStatsResult:
        """Stats snapshot for the requested date range, trends bucketed by ``granularity``."""
        date_range = _range_key(date_range)
        granularity = Granularity.coerce(granularity)
        try:
            meetings = await self._meetings.list_all()
        except Exception as e:
            logger.error("error getting dashboard stats", error=str(e))
            return DashboardStatsResult(
                success=False,
                error=str(e),
                stats=StatsSnapshot(date_range=date_range, granularity=granularity.value),
            )

        return DashboardStatsResult(
            stats=compute_stats(
                meetings, date_range, now=self._clock(), granularity=granularity
            )
        )

    async def suggest_optimizations(self) -> OptimizationResult:
        """Suggestions over the full, unfiltered meeting collection.

        No trend is computed for the full collection, so the rising-cost
        rule never fires here.
        """
        try:
            meetings = await self._meetings.list_all()
            currency = (await self._config.get_settings()).currency
        except Exception as e:
            logger.error("error in suggest optimizations", error=str(e))
            return OptimizationResult(success=False, error=str(e))

        report = generate_optimizations(summarize_meetings(meetings), currency=currency)
        return OptimizationResult(
            suggestions=report.suggestions,
            total_potential_savings=report.total_potential_savings,
            summary=report.summary,
        )

    # Configuration

    async def get_role_rates(self) -> RoleRatesResult:
        try:
            rates = await self._config.get_role_rates()
        except Exception as e:
            logger.error("error getting role rates", error=str(e))
            return RoleRatesResult(success=False, error=str(e))
        return RoleRatesResult(rates=rates)

    async def save_role_rates(self, rates: Sequence[RoleRate]) -> OperationResult:
        """Replace the whole rate set. Duplicate role ids are rejected."""
        duplicates = find_duplicate_role_ids(rates)
        if duplicates:
            error = f"Duplicate role ids: {', '.join(duplicates)}"
            logger.warning("rejected role rates", duplicates=duplicates)
            return OperationResult(success=False, error=error)

        try:
            await self._config.save_role_rates(list(rates))
        except Exception as e:
            logger.error("error saving role rates", error=str(e))
            return OperationResult(success=False, error=str(e))

        logger.info("role rates saved", role_count=len(rates))
        return OperationResult()

    async def get_config(self) -> ConfigResult:
        try:
            dashboard_settings = await self._config.get_settings()
        except Exception as e:
            logger.error("error getting config", error=str(e))
            return ConfigResult(success=False, error=str(e))
        return ConfigResult(settings=dashboard_settings)

    async def save_config(self, dashboard_settings: DashboardSettings) -> OperationResult:
        try:
            await self._config.save_settings(dashboard_settings)
        except Exception as e:
            logger.error("error saving config", error=str(e))
            return OperationResult(success=False, error=str(e))

        logger.info("config saved", currency=dashboard_settings.currency)
        return OperationResult()

    # Agent actions

    async def get_meeting_cost_summary(
        self,
        date_range: str | None = DEFAULT_DATE_RANGE.value,
    ) -> CostSummaryResult:
        """Totals for a date range with a one-sentence summary."""
        date_range = _range_key(date_range)
        try:
            meetings = await self._meetings.list_all()
            currency = (await self._config.get_settings()).currency

            filtered = filter_by_date_range(meetings, date_range, now=self._clock())
            totals = summarize_meetings(filtered)
            count = totals.meeting_count
            summary = (
                f"Over the {format_date_range(date_range)}, your team spent "
                f"{format_currency(totals.total_cost, currency, places=0)} on "
                f"{count} meetings ({totals.total_hours:.1f} hours total)."
            )
        except Exception as e:
            logger.error("error in meeting cost summary", error=str(e))
            return CostSummaryResult(success=False, error=str(e), date_range=date_range)

        return CostSummaryResult(
            total_cost=totals.total_cost,
            total_hours=totals.total_hours,
            meeting_count=count,
            avg_cost_per_meeting=totals.total_cost / count if count else 0.0,
            date_range=date_range,
            summary=summary,
        )

    async def get_velocity_correlation(
        self,
        sprints: Sequence[SprintSnapshot] | None = None,
    ) -> VelocityCorrelationResult:
        """Meeting hours vs. sprint velocity.

        Without sprint data this returns sample figures (``sample=True``);
        there is no sprint-data source wired in yet. Caller-supplied sprint
        snapshots are analysed for real, with per-sprint efficiency and (from
        three sprints) the best, worst and median sprint.
        """
        if not sprints:
            interpretation, recommendation = interpret_correlation(SAMPLE_CORRELATION)
            return VelocityCorrelationResult(
                correlation=SAMPLE_CORRELATION,
                interpretation=interpretation,
                recommendation=recommendation,
                data_points=SAMPLE_DATA_POINTS,
                sample=True,
            )

        if len(sprints) < 3:
            return VelocityCorrelationResult(
                correlation=0.0,
                interpretation=(
                    "Not enough sprint data - at least 3 sprints are needed to "
                    "estimate a correlation."
                ),
                recommendation="Keep logging meetings and sprint results.",
                data_points=f"Based on {len(sprints)} sprints",
                efficiency_score=calculate_efficiency_score(sprints),
                sprint_efficiency=[calculate_sprint_efficiency(s) for s in sprints],
            )

        correlation = pearson(sprints)
        interpretation, recommendation = interpret_correlation(correlation)
        logger.info(
            "velocity correlation computed",
            sprint_count=len(sprints),
            correlation=round(correlation, 3),
        )
        return VelocityCorrelationResult(
            correlation=correlation,
            interpretation=interpretation,
            recommendation=recommendation,
            data_points=f"Based on {len(sprints)} sprints",
            efficiency_score=calculate_efficiency_score(sprints),
            sprint_efficiency=[calculate_sprint_efficiency(s) for s in sprints],
            outliers=find_sprint_outliers(sprints),
        )

    async def get_savings_potential(
        self,
        date_range: str | None = DEFAULT_DATE_RANGE.value,
        target_reduction: float = 0.2,
    ) -> SavingsPotentialResult:
        """What cutting meeting load by ``target_reduction`` would save."""
        date_range = _range_key(date_range)
        try:
            meetings = await self._meetings.list_all()
            filtered = filter_by_date_range(meetings, date_range, now=self._clock())
            savings = calculate_savings_potential(filtered, target_reduction)
        except Exception as e:
            logger.error("error in savings potential", error=str(e))
            return SavingsPotentialResult(success=False, error=str(e), date_range=date_range)

        return SavingsPotentialResult(savings=savings, date_range=date_range)
