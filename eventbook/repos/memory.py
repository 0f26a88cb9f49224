"""In-memory repositories for users and intervals."""

from __future__ import annotations

import threading
import uuid
from datetime import datetime

from eventbook.domain.models import Interval, User, as_utc
from eventbook.domain.results import StoreStatus


class IntervalRepository:
    """Dict-backed store for Interval instances, keyed by id.

    Stored intervals are copies, so callers cannot mutate them behind the
    store's back.
    """

    def __init__(self) -> None:
        self._store: dict[str, Interval] = {}
        self._lock = threading.Lock()

    def list_by_owner(self, owner_id: str) -> list[Interval]:
        with self._lock:
            return [i.model_copy() for i in self._store.values() if i.owner_id == owner_id]

    def list_by_owner_excluding(self, owner_id: str, exclude_id: str) -> list[Interval]:
        return [i for i in self.list_by_owner(owner_id) if i.id != exclude_id]

    def get(self, interval_id: str) -> Interval | None:
        with self._lock:
            interval = self._store.get(interval_id)
        return interval.model_copy() if interval is not None else None

    def add(self, interval: Interval) -> str:
        interval_id = interval.id or str(uuid.uuid4())
        with self._lock:
            if interval_id in self._store:
                raise KeyError(f"Interval {interval_id} already exists")
            self._store[interval_id] = interval.model_copy(update={"id": interval_id})
        return interval_id

    def replace(
        self,
        interval_id: str,
        owner_id: str,
        begin: datetime,
        end: datetime,
        description: str,
    ) -> StoreStatus:
        with self._lock:
            current = self._store.get(interval_id)
            if current is None or current.owner_id != owner_id:
                return StoreStatus.NOT_FOUND
            self._store[interval_id] = current.model_copy(
                update={"begin": as_utc(begin), "end": as_utc(end), "description": description}
            )
        return StoreStatus.OK

    def delete(self, interval_id: str, owner_id: str) -> StoreStatus:
        with self._lock:
            current = self._store.get(interval_id)
            if current is None or current.owner_id != owner_id:
                return StoreStatus.NOT_FOUND
            del self._store[interval_id]
        return StoreStatus.OK


class UserRepository:
    """Dict-backed store for User instances, keyed by id; hands out copies."""

    def __init__(self) -> None:
        self._store: dict[str, User] = {}
        self._lock = threading.Lock()

    def add(self, user: User) -> StoreStatus:
        with self._lock:
            if any(u.username == user.username for u in self._store.values()):
                return StoreStatus.DUPLICATE
            self._store[user.id] = user.model_copy()
        return StoreStatus.OK

    def get(self, user_id: str) -> User | None:
        with self._lock:
            user = self._store.get(user_id)
        return user.model_copy() if user is not None else None

    def get_by_username(self, username: str) -> User | None:
        with self._lock:
            user = next((u for u in self._store.values() if u.username == username), None)
        return user.model_copy() if user is not None else None

    def exists(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._store
