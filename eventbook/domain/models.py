"""Domain models for the event booking system."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

DESCRIPTION_MAX_LENGTH = 100


def _new_id() -> str:
    return str(uuid.uuid4())


def as_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Interval(BaseModel):
    """A half-open ``[begin, end)`` time span owned by a user.

    Ordering of ``begin`` and ``end`` is deliberately not enforced here so a
    candidate can be built from raw input and then checked with
    :func:`eventbook.services.scheduling.validate`.
    """

    id: str | None = None
    owner_id: str
    begin: datetime
    end: datetime
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("begin", "end")
    @classmethod
    def _normalise_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class User(BaseModel):
    id: str = Field(default_factory=_new_id)
    username: str
    password_hash: str


class EventListing(BaseModel):
    """An interval as shown to its owner, with the owner's username."""

    id: str
    begin: datetime
    end: datetime
    description: str
    creator_username: str


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class Credentials(BaseModel):
    username: str = Field(min_length=3, max_length=20)
    password: str = Field(min_length=8, max_length=64)


class TokenResponse(BaseModel):
    token: str


class CreateEventRequest(BaseModel):
    begin: datetime
    end: datetime
    description: str = Field(max_length=DESCRIPTION_MAX_LENGTH)


class UpdateEventRequest(CreateEventRequest):
    id: str


class DeleteEventRequest(BaseModel):
    eventId: str


class EventListResponse(BaseModel):
    events: list[EventListing] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    version: str
    storage: str
