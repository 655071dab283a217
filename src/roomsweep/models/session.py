"""Session table model."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class SessionEntry(BaseModel):
    """A row of the session table, keyed by session id."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    user_id: int | None = None
    room_id: int | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    last_activity_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
