"""Conflict-checked create/update workflows for a user's intervals."""

from __future__ import annotations

import logging
from datetime import datetime

import pydantic

from eventbook.domain.models import EventListing, Interval
from eventbook.domain.results import (
    DeleteOutcome,
    StoreStatus,
    ValidationError,
    WriteOutcome,
    WriteResult,
)
from eventbook.repos.base import IntervalStore, UserStore
from eventbook.services.conflicts import overlaps

logger = logging.getLogger(__name__)


def validate(candidate: Interval) -> ValidationError | None:
    """Return a ValidationError unless ``begin`` is strictly before ``end``.

    Zero-length intervals are rejected along with inverted ones.
    """
    if candidate.begin >= candidate.end:
        return ValidationError("Event beginning is greater than or equal to event ending")
    return None


def _build_candidate(**fields) -> Interval | ValidationError:
    """Build an Interval from raw input, reporting field problems as a value."""
    try:
        return Interval(**fields)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        return ValidationError(f"{field}: {first['msg']}")


class SchedulingService:
    """Validate -> fetch -> overlap check -> persist, for one owner at a time.

    The fetch and the persist are separate store calls, so two concurrent
    writes for the same owner can both pass the overlap check.
    """

    def __init__(self, intervals: IntervalStore, users: UserStore) -> None:
        self.intervals = intervals
        self.users = users

    def create_with_conflict_check(
        self,
        owner_id: str,
        begin: datetime,
        end: datetime,
        description: str = "",
    ) -> WriteResult:
        candidate = _build_candidate(
            owner_id=owner_id, begin=begin, end=end, description=description
        )
        if isinstance(candidate, ValidationError):
            return WriteResult(WriteOutcome.INVALID, validation_error=candidate)
        error = validate(candidate)
        if error is not None:
            return WriteResult(WriteOutcome.INVALID, validation_error=error)

        try:
            existing = self.intervals.list_by_owner(owner_id)
            if overlaps(candidate, existing):
                logger.info("Rejected overlapping interval for owner %s", owner_id)
                return WriteResult(WriteOutcome.CONFLICT)
            interval_id = self.intervals.add(candidate)
        except Exception as exc:
            logger.exception("Storage failure while creating interval for owner %s", owner_id)
            return WriteResult(WriteOutcome.UNKNOWN_ERROR, error=exc)

        logger.info("Created interval %s for owner %s", interval_id, owner_id)
        return WriteResult(
            WriteOutcome.CREATED, interval=candidate.model_copy(update={"id": interval_id})
        )

    def update_with_conflict_check(
        self,
        interval_id: str,
        owner_id: str,
        begin: datetime,
        end: datetime,
        description: str = "",
    ) -> WriteResult:
        candidate = _build_candidate(
            id=interval_id, owner_id=owner_id, begin=begin, end=end, description=description
        )
        if isinstance(candidate, ValidationError):
            return WriteResult(WriteOutcome.INVALID, validation_error=candidate)
        error = validate(candidate)
        if error is not None:
            return WriteResult(WriteOutcome.INVALID, validation_error=error)

        try:
            # exclude the interval being replaced
            others = self.intervals.list_by_owner_excluding(owner_id, interval_id)
            if overlaps(candidate, others):
                logger.info("Rejected overlapping update of %s for owner %s", interval_id, owner_id)
                return WriteResult(WriteOutcome.CONFLICT)
            status = self.intervals.replace(
                interval_id, owner_id, candidate.begin, candidate.end, candidate.description
            )
        except Exception as exc:
            logger.exception("Storage failure while updating interval %s", interval_id)
            return WriteResult(WriteOutcome.UNKNOWN_ERROR, error=exc)

        match status:
            case StoreStatus.OK:
                logger.info("Updated interval %s for owner %s", interval_id, owner_id)
                return WriteResult(WriteOutcome.CREATED, interval=candidate)
            case StoreStatus.NOT_FOUND:
                logger.info("Interval %s not found for owner %s", interval_id, owner_id)
                return WriteResult(WriteOutcome.NOT_FOUND)
            case _:
                raise AssertionError(f"Unexpected store status {status!r}")

    def list_for_owner(self, owner_id: str) -> list[EventListing]:
        """Return the owner's events, latest beginning first."""
        user = self.users.get(owner_id)
        username = user.username if user is not None else ""
        intervals = sorted(
            self.intervals.list_by_owner(owner_id), key=lambda i: i.begin, reverse=True
        )
        return [
            EventListing(
                id=i.id,
                begin=i.begin,
                end=i.end,
                description=i.description,
                creator_username=username,
            )
            for i in intervals
        ]

    def delete(self, interval_id: str, owner_id: str) -> DeleteOutcome:
        try:
            status = self.intervals.delete(interval_id, owner_id)
        except Exception:
            logger.exception("Storage failure while deleting interval %s", interval_id)
            return DeleteOutcome.UNKNOWN_ERROR
        if status is StoreStatus.OK:
            logger.info("Deleted interval %s for owner %s", interval_id, owner_id)
            return DeleteOutcome.DELETED
        return DeleteOutcome.NOT_FOUND
