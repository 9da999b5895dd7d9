"""FastAPI dependencies for shared services."""

from fastapi import HTTPException, Request

from src.services.meeting_cost_service import MeetingCostService


def get_cost_service(request: Request) -> MeetingCostService:
    """Get MeetingCostService from app state."""
    if not hasattr(request.app.state, "cost_service"):
        raise HTTPException(status_code=500, detail="MeetingCostService not initialized")
    return request.app.state.cost_service
