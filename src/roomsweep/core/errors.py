"""Exception hierarchy for roomsweep."""

from __future__ import annotations

__all__ = [
    "RecordingNotFoundError",
    "RoomSweepError",
    "StorageError",
    "UserNotFoundError",
]


class RoomSweepError(Exception):
    """Base exception for all roomsweep errors."""


class StorageError(RoomSweepError):
    """A filesystem operation on the storage root failed."""

    def __init__(self, message: str, path: object = None) -> None:
        super().__init__(message)
        self.path = path


class UserNotFoundError(RoomSweepError):
    """User does not exist in the user store."""


class RecordingNotFoundError(RoomSweepError):
    """Recording does not exist in the recording store."""
