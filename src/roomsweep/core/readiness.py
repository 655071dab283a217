"""Readiness gate consulted by every cleanup task before touching anything."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now(UTC)


def as_utc(moment: datetime) -> datetime:
    """Return *moment* as an aware UTC datetime.

    Naive values are read as local time, which is what ``datetime.now()``
    returns.
    """
    return moment.astimezone(UTC)


class ReadinessGate(ABC):
    """Process-wide "initialisation complete" flag plus the current time.

    Implement this to tie cleanup to your application's startup sequence.
    The library ships with ``InitCompleteGate`` for explicit signalling.
    """

    @abstractmethod
    def is_ready(self) -> bool:
        """Return ``True`` once the application has finished starting up."""
        ...

    def now(self) -> datetime:
        """Return the current UTC time."""
        return system_clock()


class InitCompleteGate(ReadinessGate):
    """Gate flipped by the application once startup has completed."""

    def __init__(self, *, ready: bool = False, clock: Clock | None = None) -> None:
        self._ready = ready
        self._clock = clock or system_clock

    def is_ready(self) -> bool:
        return self._ready

    def now(self) -> datetime:
        return as_utc(self._clock())

    def mark_complete(self) -> None:
        self._ready = True

    def reset(self) -> None:
        self._ready = False
