"""
SQLite repositories for users and intervals.
"""

from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime
from pathlib import Path

from eventbook.domain.models import Interval, User, as_utc
from eventbook.domain.results import StoreStatus

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    username TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS events (
    id TEXT PRIMARY KEY,
    creator_id TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    begin_time TEXT NOT NULL,
    end_time TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT ''
);
CREATE INDEX IF NOT EXISTS idx_events_creator ON events(creator_id);
"""


def _timestamp(value: datetime) -> str:
    return as_utc(value).isoformat()


def init_db(db_path: Path) -> None:
    """Create the database file and tables if they don't exist."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    try:
        conn.executescript(SCHEMA)
        conn.commit()
    finally:
        conn.close()


class SqliteRepository:
    """Shared connection handling; one connection per operation."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn


class SqliteIntervalRepository(SqliteRepository):
    """Intervals stored in the ``events`` table."""

    @staticmethod
    def _from_row(row: sqlite3.Row) -> Interval:
        return Interval(
            id=row["id"],
            owner_id=row["creator_id"],
            begin=datetime.fromisoformat(row["begin_time"]),
            end=datetime.fromisoformat(row["end_time"]),
            description=row["description"],
        )

    def list_by_owner(self, owner_id: str) -> list[Interval]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT * FROM events WHERE creator_id = ?", (owner_id,)
            ).fetchall()
        finally:
            conn.close()
        return [self._from_row(row) for row in rows]

    def list_by_owner_excluding(self, owner_id: str, exclude_id: str) -> list[Interval]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT * FROM events WHERE creator_id = ? AND id != ?",
                (owner_id, exclude_id),
            ).fetchall()
        finally:
            conn.close()
        return [self._from_row(row) for row in rows]

    def get(self, interval_id: str) -> Interval | None:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT * FROM events WHERE id = ?", (interval_id,)
            ).fetchone()
        finally:
            conn.close()
        return self._from_row(row) if row is not None else None

    def add(self, interval: Interval) -> str:
        interval_id = interval.id or str(uuid.uuid4())
        conn = self._connect()
        try:
            conn.execute(
                """
                INSERT INTO events (id, creator_id, begin_time, end_time, description)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    interval_id,
                    interval.owner_id,
                    _timestamp(interval.begin),
                    _timestamp(interval.end),
                    interval.description,
                ),
            )
            conn.commit()
        finally:
            conn.close()
        return interval_id

    def replace(
        self,
        interval_id: str,
        owner_id: str,
        begin: datetime,
        end: datetime,
        description: str,
    ) -> StoreStatus:
        conn = self._connect()
        try:
            cursor = conn.execute(
                """
                UPDATE events SET begin_time = ?, end_time = ?, description = ?
                WHERE id = ? AND creator_id = ?
                """,
                (_timestamp(begin), _timestamp(end), description, interval_id, owner_id),
            )
            conn.commit()
        finally:
            conn.close()
        return StoreStatus.OK if cursor.rowcount == 1 else StoreStatus.NOT_FOUND

    def delete(self, interval_id: str, owner_id: str) -> StoreStatus:
        conn = self._connect()
        try:
            cursor = conn.execute(
                "DELETE FROM events WHERE id = ? AND creator_id = ?",
                (interval_id, owner_id),
            )
            conn.commit()
        finally:
            conn.close()
        return StoreStatus.OK if cursor.rowcount == 1 else StoreStatus.NOT_FOUND


class SqliteUserRepository(SqliteRepository):
    """Users stored in the ``users`` table; usernames are unique."""

    @staticmethod
    def _from_row(row: sqlite3.Row) -> User:
        return User(id=row["id"], username=row["username"], password_hash=row["password"])

    def add(self, user: User) -> StoreStatus:
        conn = self._connect()
        try:
            conn.execute(
                "INSERT INTO users (id, username, password) VALUES (?, ?, ?)",
                (user.id, user.username, user.password_hash),
            )
            conn.commit()
        except sqlite3.IntegrityError:
            return StoreStatus.DUPLICATE
        finally:
            conn.close()
        return StoreStatus.OK

    def get(self, user_id: str) -> User | None:
        conn = self._connect()
        try:
            row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        finally:
            conn.close()
        return self._from_row(row) if row is not None else None

    def get_by_username(self, username: str) -> User | None:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT * FROM users WHERE username = ?", (username,)
            ).fetchone()
        finally:
            conn.close()
        return self._from_row(row) if row is not None else None

    def exists(self, user_id: str) -> bool:
        return self.get(user_id) is not None
