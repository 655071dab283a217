"""Telemetry provider ABC, Span dataclass, SpanKind enum, and Attr constants."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from roomsweep.models.enums import CleanupTask


class SpanKind(StrEnum):
    """Span classifications for telemetry."""

    CLEANUP_TEST_SETUP = "cleanup.test_setup"
    CLEANUP_ROOM_FILES = "cleanup.room_files"
    CLEANUP_SESSIONS = "cleanup.sessions"
    CLEANUP_EXPIRED_RECORDINGS = "cleanup.expired_recordings"
    CLEANUP_EXPIRED_RESET_HASH = "cleanup.expired_reset_hash"
    CLEANUP_ROOM = "cleanup.room"

    @classmethod
    def for_task(cls, task: CleanupTask) -> SpanKind:
        return cls(f"cleanup.{task.value}")


class Attr:
    """Well-known attribute key constants for telemetry spans and metrics."""

    ROOM_ID = "room_id"
    DURATION_MS = "duration_ms"

    CLEANUP_TASK = "cleanup.task"
    CLEANUP_EXAMINED = "cleanup.examined"
    CLEANUP_REMOVED = "cleanup.removed"
    CLEANUP_FAILURES = "cleanup.failures"
    CLEANUP_OUTCOME = "cleanup.outcome"


@dataclass
class Span:
    """Represents a telemetry span."""

    kind: SpanKind
    name: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:16])
    parent_id: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None
    status: str = "ok"
    error_message: str | None = None

    @property
    def duration_ms(self) -> float | None:
        """Duration in milliseconds, or None if not yet ended."""
        if self.end_time is None:
            return None
        delta = self.end_time - self.start_time
        return delta.total_seconds() * 1000


class TelemetryProvider(ABC):
    """Abstract base class for telemetry providers.

    Providers collect span and metric data from cleanup runs.
    The default ``NoopTelemetryProvider`` has zero overhead.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for identification."""
        ...

    @abstractmethod
    def start_span(
        self,
        kind: SpanKind,
        name: str,
        *,
        parent_id: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> str:
        """Start a new telemetry span, optionally nested under *parent_id*.

        Returns:
            A unique span ID string.
        """
        ...

    @abstractmethod
    def end_span(
        self,
        span_id: str,
        *,
        status: str = "ok",
        error_message: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        """End a previously started span."""
        ...

    @abstractmethod
    def set_attribute(self, span_id: str, key: str, value: Any) -> None:
        """Set an attribute on an active span."""
        ...

    @abstractmethod
    def record_metric(
        self,
        name: str,
        value: float,
        *,
        unit: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> None:
        """Record a metric value."""
        ...
