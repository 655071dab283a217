"""Session, user and recording persistence."""

from roomsweep.store.base import RecordingStore, SessionStore, UserStore
from roomsweep.store.memory import (
    InMemoryRecordingStore,
    InMemorySessionStore,
    InMemoryUserStore,
)

__all__ = [
    "InMemoryRecordingStore",
    "InMemorySessionStore",
    "InMemoryUserStore",
    "RecordingStore",
    "SessionStore",
    "UserStore",
]
