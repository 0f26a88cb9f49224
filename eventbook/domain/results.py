"""Outcome values returned by stores and workflows.

Stores and workflows report expected failures (missing rows, duplicate
usernames, overlaps, invalid ranges) as values rather than exceptions so the
HTTP layer can match them exhaustively.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from eventbook.domain.models import Interval


class StoreStatus(StrEnum):
    OK = "ok"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"


class WriteOutcome(StrEnum):
    CREATED = "created"
    CONFLICT = "conflict"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    UNKNOWN_ERROR = "unknown_error"


class DeleteOutcome(StrEnum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    UNKNOWN_ERROR = "unknown_error"


class RegistrationOutcome(StrEnum):
    CREATED = "created"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class ValidationError:
    """Intrinsic problem with a candidate interval."""

    message: str


@dataclass(frozen=True)
class WriteResult:
    outcome: WriteOutcome
    interval: Interval | None = None
    validation_error: ValidationError | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is WriteOutcome.CREATED
