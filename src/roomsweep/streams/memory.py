"""In-memory implementation of StreamClientManager."""

from __future__ import annotations

from roomsweep.models.stream import StreamClient
from roomsweep.streams.base import StreamClientManager


class InMemoryStreamClientManager(StreamClientManager):
    """Dict-based stream registry for development and testing."""

    def __init__(self) -> None:
        self._clients: dict[str, StreamClient] = {}

    async def list(self, room_id: int) -> list[StreamClient]:
        return [c.model_copy() for c in self._clients.values() if c.room_id == room_id]

    def add(self, client: StreamClient) -> StreamClient:
        self._clients[client.uid] = client
        return client

    def remove(self, uid: str) -> bool:
        return self._clients.pop(uid, None) is not None

    @property
    def count(self) -> int:
        return len(self._clients)
