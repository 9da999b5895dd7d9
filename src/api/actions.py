"""Agent action endpoints.

Natural-language assistants invoke named actions with a free-form payload
object (``{"dateRange": "last-week"}``). Each action maps onto one service
operation and returns its tagged result.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from src.analytics.stats import DEFAULT_DATE_RANGE
from src.api.dependencies import get_cost_service
from src.services.meeting_cost_service import MeetingCostService
from src.services.schemas import ServiceResult, VelocityCorrelationRequest

router = APIRouter(prefix="/actions", tags=["actions"])

ActionHandler = Callable[[MeetingCostService, dict[str, Any]], Awaitable[ServiceResult]]


def _date_range(payload: dict) -> str:
    """Range key from the payload; anything but a non-empty string means the default."""
    value = payload.get("dateRange")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return DEFAULT_DATE_RANGE.value


async def _cost_summary(service: MeetingCostService, payload: dict) -> ServiceResult:
    return await service.get_meeting_cost_summary(_date_range(payload))


async def _velocity_correlation(
    service: MeetingCostService, payload: dict
) -> ServiceResult:
    try:
        request = VelocityCorrelationRequest.model_validate(payload)
    except ValidationError as e:
        return ServiceResult(
            success=False,
            error=f"Invalid sprint data ({e.error_count()} errors)",
        )
    return await service.get_velocity_correlation(request.sprints)


async def _optimizations(service: MeetingCostService, payload: dict) -> ServiceResult:
    return await service.suggest_optimizations()


async def _savings_potential(service: MeetingCostService, payload: dict) -> ServiceResult:
    target = payload.get("targetReduction", 0.2)
    if not isinstance(target, int | float) or isinstance(target, bool) or not 0 <= target <= 1:
        return ServiceResult(
            success=False,
            error="targetReduction must be a number between 0 and 1",
        )
    return await service.get_savings_potential(_date_range(payload), float(target))


ACTIONS: dict[str, ActionHandler] = {
    "getMeetingCostSummary": _cost_summary,
    "getVelocityCorrelation": _velocity_correlation,
    "suggestOptimizations": _optimizations,
    "getSavingsPotential": _savings_potential,
}


@router.get("")
async def list_actions() -> dict[str, list[str]]:
    """Names of the available actions."""
    return {"actions": sorted(ACTIONS)}


@router.post("/{action_name}")
async def invoke_action(
    action_name: str,
    payload: dict[str, Any] | None = Body(default=None),
    service: MeetingCostService = Depends(get_cost_service),
) -> dict[str, Any]:
    """Invoke a named agent action with its payload.

    Raises:
        HTTPException: 404 for unknown action names
    """
    handler = ACTIONS.get(action_name)
    if handler is None:
        raise HTTPException(status_code=404, detail=f"Unknown action: {action_name}")

    result = await handler(service, payload or {})
    return result.model_dump(mode="json", by_alias=True)
