"""Live stream client model."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class StreamClient(BaseModel):
    """A client currently publishing or receiving media in a room."""

    uid: str = Field(default_factory=lambda: uuid4().hex)
    room_id: int
    user_id: int | None = None
    connected_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
