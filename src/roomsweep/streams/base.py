"""Abstract base class for the live stream registry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from roomsweep.models.stream import StreamClient


class StreamClientManager(ABC):
    """Which media clients are connected to which room right now."""

    @abstractmethod
    async def list(self, room_id: int) -> list[StreamClient]:
        """Return the clients currently connected to *room_id*."""
        ...
