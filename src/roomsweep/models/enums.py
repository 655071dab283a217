"""All string enums for roomsweep."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class CleanupTask(StrEnum):
    TEST_SETUP = "test_setup"
    ROOM_FILES = "room_files"
    SESSIONS = "sessions"
    EXPIRED_RECORDINGS = "expired_recordings"
    EXPIRED_RESET_HASH = "expired_reset_hash"
