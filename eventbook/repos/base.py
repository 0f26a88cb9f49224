"""Storage capabilities the services depend on."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from eventbook.domain.models import Interval, User
from eventbook.domain.results import StoreStatus


class IntervalStore(Protocol):
    def list_by_owner(self, owner_id: str) -> list[Interval]:
        """Return every interval of *owner_id*, in no particular order."""
        ...

    def list_by_owner_excluding(self, owner_id: str, exclude_id: str) -> list[Interval]:
        """Like :meth:`list_by_owner` minus the interval with *exclude_id*."""
        ...

    def get(self, interval_id: str) -> Interval | None: ...

    def add(self, interval: Interval) -> str:
        """Store a new interval, assigning an id if it has none, and return the id."""
        ...

    def replace(
        self,
        interval_id: str,
        owner_id: str,
        begin: datetime,
        end: datetime,
        description: str,
    ) -> StoreStatus:
        """Overwrite bounds and description; NOT_FOUND unless id and owner both match."""
        ...

    def delete(self, interval_id: str, owner_id: str) -> StoreStatus: ...


class UserStore(Protocol):
    def add(self, user: User) -> StoreStatus:
        """Store *user*; DUPLICATE when the username is already taken."""
        ...

    def get(self, user_id: str) -> User | None: ...

    def get_by_username(self, username: str) -> User | None: ...

    def exists(self, user_id: str) -> bool: ...
