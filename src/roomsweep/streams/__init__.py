"""Live stream client registry."""

from roomsweep.streams.base import StreamClientManager
from roomsweep.streams.memory import InMemoryStreamClientManager

__all__ = ["InMemoryStreamClientManager", "StreamClientManager"]
