"""Health checks for the dashboard deployment."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from src.config import settings

router = APIRouter(prefix="/health", tags=["health"])

OK = "ok"


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    environment: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class CheckResponse(BaseModel):
    """Liveness/readiness payload; ``checks`` is empty for liveness."""

    status: str
    checks: dict[str, str] = Field(default_factory=dict)


async def _store_check(request: Request) -> str:
    db = getattr(request.app.state, "db", None)
    if db is None:
        return "not_configured"
    try:
        return OK if await db.is_healthy() else "failed"
    except Exception:
        return "failed"


async def _rates_check(request: Request) -> str:
    """The cost service can read the rate table it prices meetings with."""
    service = getattr(request.app.state, "cost_service", None)
    if service is None:
        return "not_configured"
    result = await service.get_role_rates()
    return OK if result.success else "failed"


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.app_env,
    )


@router.get("/live", response_model=CheckResponse)
async def liveness() -> CheckResponse:
    """Process is up; touches no dependencies."""
    return CheckResponse(status="alive")


@router.get("/ready", response_model=CheckResponse)
async def readiness(request: Request) -> CheckResponse:
    """Ready once the store answers and role rates can be loaded.

    Always HTTP 200; orchestrators read ``status``.
    """
    checks = {
        "api": OK,
        "store": await _store_check(request),
        "rates": await _rates_check(request),
    }
    status = "ready" if all(v == OK for v in checks.values()) else "not_ready"
    return CheckResponse(status=status, checks=checks)
