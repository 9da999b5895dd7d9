"""Dashboard API endpoints: stats snapshot and optimization suggestions."""

from fastapi import APIRouter, Depends, Query

from src.analytics.periods import Granularity
from src.analytics.stats import DEFAULT_DATE_RANGE
from src.api.dependencies import get_cost_service
from src.services.meeting_cost_service import MeetingCostService
from src.services.schemas import DashboardStatsResult, OptimizationResult

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResult)
async def get_dashboard_stats(
    date_range: str = Query(
        default=DEFAULT_DATE_RANGE.value,
        alias="dateRange",
        description="last-week, last-month or last-quarter",
    ),
    granularity: str = Query(
        default=Granularity.WEEK.value,
        description="Trend buckets: day, week, iso-week or month",
    ),
    service: MeetingCostService = Depends(get_cost_service),
) -> DashboardStatsResult:
    """Cost totals, cost by meeting type and cost trends for a date range."""
    return await service.get_dashboard_stats(date_range, granularity)


@router.get("/optimizations", response_model=OptimizationResult)
async def get_optimizations(
    service: MeetingCostService = Depends(get_cost_service),
) -> OptimizationResult:
    """Ranked optimization suggestions over all logged meetings."""
    return await service.suggest_optimizations()
