"""Cleanup and scheduling configuration."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, field_validator

from roomsweep.models.enums import CleanupTask


def _require_positive(value: timedelta) -> timedelta:
    if value <= timedelta(0):
        raise ValueError(f"duration must be positive, got {value}")
    return value


class CleanupConfig(BaseModel):
    """Age thresholds used by the cleanup tasks.

    Built once at process start and shared by every task. Values accept a
    ``timedelta``, a number of seconds, or an ISO-8601 duration string.
    """

    model_config = ConfigDict(frozen=True)

    session_timeout: timedelta = timedelta(minutes=30)
    test_setup_timeout: timedelta = timedelta(hours=1)
    room_files_ttl: timedelta = timedelta(hours=1)
    reset_hash_ttl: timedelta = timedelta(days=1)

    @field_validator(
        "session_timeout", "test_setup_timeout", "room_files_ttl", "reset_hash_ttl"
    )
    @classmethod
    def validate_positive(cls, v: timedelta) -> timedelta:
        return _require_positive(v)

    @classmethod
    def from_millis(cls, **values: int) -> CleanupConfig:
        """Build a config from millisecond values, e.g. ``session_timeout=1_800_000``."""
        return cls(**{k: timedelta(milliseconds=v) for k, v in values.items()})


class ScheduleConfig(BaseModel):
    """How often the in-process scheduler runs each cleanup task."""

    model_config = ConfigDict(frozen=True)

    test_setup: timedelta = timedelta(minutes=30)
    room_files: timedelta = timedelta(minutes=30)
    sessions: timedelta = timedelta(minutes=5)
    expired_recordings: timedelta = timedelta(hours=1)
    expired_reset_hash: timedelta = timedelta(hours=1)
    recording_mode: bool = True
    """Evaluator mode passed to the scheduled expired-recording run."""

    @field_validator(
        "test_setup", "room_files", "sessions", "expired_recordings", "expired_reset_hash"
    )
    @classmethod
    def validate_positive(cls, v: timedelta) -> timedelta:
        return _require_positive(v)

    def interval(self, task: CleanupTask) -> timedelta:
        return getattr(self, task.value)
