"""Admin API endpoints for role rates and dashboard settings.

Both documents are replaced wholesale; there is no partial update.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_cost_service
from src.services.meeting_cost_service import MeetingCostService
from src.services.schemas import (
    ConfigResult,
    OperationResult,
    RoleRatesResult,
    RoleRatesUpdate,
    SettingsUpdate,
)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/role-rates", response_model=RoleRatesResult)
async def get_role_rates(
    service: MeetingCostService = Depends(get_cost_service),
) -> RoleRatesResult:
    """Configured role rates, or the built-in defaults when none are saved."""
    return await service.get_role_rates()


@router.put("/role-rates", response_model=OperationResult)
async def save_role_rates(
    body: RoleRatesUpdate,
    service: MeetingCostService = Depends(get_cost_service),
) -> OperationResult:
    """Replace the role rate set. Existing meeting costs are not recomputed."""
    return await service.save_role_rates(body.rates)


@router.get("/config", response_model=ConfigResult)
async def get_config(
    service: MeetingCostService = Depends(get_cost_service),
) -> ConfigResult:
    return await service.get_config()


@router.put("/config", response_model=OperationResult)
async def save_config(
    body: SettingsUpdate,
    service: MeetingCostService = Depends(get_cost_service),
) -> OperationResult:
    return await service.save_config(body.settings)
