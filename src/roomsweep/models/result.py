"""Outcome of a single cleanup task invocation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from roomsweep.models.enums import CleanupTask


class CleanupResult(BaseModel):
    """Work done by one cleanup pass.

    Failures are never reported here; they only reach the logs and the
    telemetry provider.
    """

    task: CleanupTask
    skipped: bool = False
    """``True`` when the readiness gate was closed and nothing was touched."""
    examined: int = Field(default=0, ge=0)
    removed: int = Field(default=0, ge=0)
    duration_ms: float = 0.0

    @classmethod
    def not_ready(cls, task: CleanupTask) -> CleanupResult:
        return cls(task=task, skipped=True)
