"""Event endpoints — all scoped to the authenticated user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from eventbook.domain.models import (
    CreateEventRequest,
    DeleteEventRequest,
    EventListResponse,
    Interval,
    UpdateEventRequest,
)
from eventbook.domain.results import DeleteOutcome, WriteOutcome, WriteResult
from eventbook.routes.dependencies import current_user_id, get_scheduling, is_valid_uuid
from eventbook.services.scheduling import SchedulingService

router = APIRouter(prefix="/events", tags=["events"])


def _written_or_raise(result: WriteResult) -> Interval:
    """Map a workflow result onto the HTTP response."""
    match result.outcome:
        case WriteOutcome.CREATED:
            return result.interval
        case WriteOutcome.INVALID:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=result.validation_error.message,
            )
        case WriteOutcome.CONFLICT:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Event overlaps another event",
            )
        case WriteOutcome.NOT_FOUND:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
        case WriteOutcome.UNKNOWN_ERROR:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unknown error while saving event",
            )


@router.post("", response_model=Interval, status_code=status.HTTP_201_CREATED)
def create_event(
    body: CreateEventRequest,
    user_id: str = Depends(current_user_id),
    scheduling: SchedulingService = Depends(get_scheduling),
) -> Interval:
    """Create an event unless it overlaps one of the caller's events."""
    result = scheduling.create_with_conflict_check(
        user_id, body.begin, body.end, body.description
    )
    return _written_or_raise(result)


@router.get("", response_model=EventListResponse)
def list_events(
    user_id: str = Depends(current_user_id),
    scheduling: SchedulingService = Depends(get_scheduling),
) -> EventListResponse:
    """Return the caller's events, latest first."""
    return EventListResponse(events=scheduling.list_for_owner(user_id))


@router.put("", response_model=Interval, status_code=status.HTTP_201_CREATED)
def update_event(
    body: UpdateEventRequest,
    user_id: str = Depends(current_user_id),
    scheduling: SchedulingService = Depends(get_scheduling),
) -> Interval:
    """Replace an event's bounds and description."""
    if not is_valid_uuid(body.id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid event id")
    result = scheduling.update_with_conflict_check(
        body.id, user_id, body.begin, body.end, body.description
    )
    return _written_or_raise(result)


@router.delete("")
def delete_event(
    body: DeleteEventRequest,
    user_id: str = Depends(current_user_id),
    scheduling: SchedulingService = Depends(get_scheduling),
) -> dict:
    if not is_valid_uuid(body.eventId):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid event id")
    match scheduling.delete(body.eventId, user_id):
        case DeleteOutcome.DELETED:
            return {"status": "deleted"}
        case DeleteOutcome.NOT_FOUND:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
        case DeleteOutcome.UNKNOWN_ERROR:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unknown error when trying to delete event",
            )
