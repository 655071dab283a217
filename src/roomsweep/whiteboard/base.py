"""Abstract base class for whiteboard state."""

from __future__ import annotations

from abc import ABC, abstractmethod

from roomsweep.models.whiteboard import Whiteboards


class WhiteboardManager(ABC):
    """Read access to the boards of each room.

    Implement this on top of your whiteboard service (Hazelcast map,
    Redis, etc.). The library ships with ``InMemoryWhiteboardManager``.
    """

    @abstractmethod
    async def get(self, room_id: int) -> Whiteboards:
        """Return every board of *room_id*; an empty aggregate if it has none."""
        ...
