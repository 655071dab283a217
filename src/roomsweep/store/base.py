"""Abstract base classes for the persistent stores the cleanup touches."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta

from roomsweep.models.recording import Recording
from roomsweep.models.user import User


class SessionStore(ABC):
    """The session table.

    Implement this against your database; the library ships with
    ``InMemorySessionStore`` for development and testing.
    """

    @abstractmethod
    async def purge_older_than(self, timeout: timedelta) -> int:
        """Delete every session idle for longer than *timeout*.

        Returns:
            The number of rows removed.
        """
        ...


class UserStore(ABC):
    """User accounts, as far as password-reset tokens are concerned."""

    @abstractmethod
    async def get_by_expired_hash(self, ttl: timedelta) -> list[User]:
        """Return users holding a reset hash issued more than *ttl* ago."""
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist *user*. Raises ``UserNotFoundError`` for an unknown id."""
        ...


class RecordingStore(ABC):
    """Recording metadata rows."""

    @abstractmethod
    async def get(self, recording_id: int) -> Recording | None:
        """Get a recording by ID, or ``None`` if it doesn't exist."""
        ...

    @abstractmethod
    async def list_by_group(self, group_id: int, *, personal: bool) -> list[Recording]:
        """List a group's recordings made in personal or in regular rooms."""
        ...

    @abstractmethod
    async def delete(self, recording: Recording) -> None:
        """Delete a recording row. Raises ``RecordingNotFoundError`` if absent."""
        ...
