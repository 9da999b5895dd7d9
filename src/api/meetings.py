"""Meetings API endpoints for logging and removing meetings."""

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_cost_service
from src.models.meeting import MeetingDraft
from src.services.meeting_cost_service import MeetingCostService
from src.services.schemas import DeleteResult, MeetingListResult, MeetingResult

router = APIRouter(prefix="/meetings", tags=["meetings"])


@router.get("", response_model=MeetingListResult)
async def list_meetings(
    limit: int | None = Query(default=None, ge=1, le=500, description="Maximum meetings"),
    service: MeetingCostService = Depends(get_cost_service),
) -> MeetingListResult:
    """List meetings, newest first."""
    return await service.list_meetings(limit)


@router.post("", response_model=MeetingResult)
async def add_meeting(
    draft: MeetingDraft,
    service: MeetingCostService = Depends(get_cost_service),
) -> MeetingResult:
    """Log a meeting.

    All fields are optional; missing or malformed values fall back to
    defaults (30 minutes, 1 attendee, ad-hoc, today). The cost is
    computed from the current role rates and stored with the meeting.
    """
    return await service.add_meeting(draft)


@router.delete("/{meeting_id}", response_model=DeleteResult)
async def delete_meeting(
    meeting_id: str,
    service: MeetingCostService = Depends(get_cost_service),
) -> DeleteResult:
    """Delete a meeting by id. Unknown ids succeed with ``deleted: false``."""
    return await service.delete_meeting(meeting_id)
