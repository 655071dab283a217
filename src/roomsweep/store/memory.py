"""In-memory implementations of the stores."""

from __future__ import annotations

import logging
from datetime import timedelta

from roomsweep.core.errors import RecordingNotFoundError, UserNotFoundError
from roomsweep.core.readiness import Clock, system_clock
from roomsweep.models.recording import Recording
from roomsweep.models.session import SessionEntry
from roomsweep.models.user import User
from roomsweep.store.base import RecordingStore, SessionStore, UserStore

logger = logging.getLogger("roomsweep.store")


class InMemorySessionStore(SessionStore):
    """Dict-based session table for development and testing."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or system_clock
        self._sessions: dict[str, SessionEntry] = {}

    def add(self, entry: SessionEntry) -> SessionEntry:
        self._sessions[entry.id] = entry
        return entry

    def get(self, session_id: str) -> SessionEntry | None:
        entry = self._sessions.get(session_id)
        return entry.model_copy() if entry is not None else None

    def touch(self, session_id: str) -> None:
        entry = self._sessions.get(session_id)
        if entry is not None:
            entry.last_activity_at = self._clock()

    async def purge_older_than(self, timeout: timedelta) -> int:
        cutoff = self._clock() - timeout
        stale = [sid for sid, e in self._sessions.items() if e.last_activity_at < cutoff]
        for sid in stale:
            del self._sessions[sid]
        if stale:
            logger.debug("Purged %d sessions idle since before %s", len(stale), cutoff)
        return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)


class InMemoryUserStore(UserStore):
    """Dict-based user table for development and testing."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or system_clock
        self._users: dict[int, User] = {}

    def add(self, user: User) -> User:
        self._users[user.id] = user
        return user

    def get(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user is not None else None

    async def get_by_expired_hash(self, ttl: timedelta) -> list[User]:
        cutoff = self._clock() - ttl
        return [
            u.model_copy()
            for u in self._users.values()
            if u.reset_hash is not None and u.reset_date is not None and u.reset_date < cutoff
        ]

    async def update(self, user: User) -> User:
        if user.id not in self._users:
            raise UserNotFoundError(f"User {user.id} not found")
        self._users[user.id] = user.model_copy()
        return user


class InMemoryRecordingStore(RecordingStore):
    """Dict-based recording table for development and testing."""

    def __init__(self) -> None:
        self._recordings: dict[int, Recording] = {}

    def add(self, recording: Recording) -> Recording:
        self._recordings[recording.id] = recording
        return recording

    async def get(self, recording_id: int) -> Recording | None:
        rec = self._recordings.get(recording_id)
        return rec.model_copy() if rec is not None else None

    async def list_by_group(self, group_id: int, *, personal: bool) -> list[Recording]:
        return [
            r.model_copy()
            for r in self._recordings.values()
            if r.group_id == group_id and r.personal == personal
        ]

    async def delete(self, recording: Recording) -> None:
        if self._recordings.pop(recording.id, None) is None:
            raise RecordingNotFoundError(f"Recording {recording.id} not found")

    def __len__(self) -> int:
        return len(self._recordings)
