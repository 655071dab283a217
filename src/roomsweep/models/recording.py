"""Recording and retention group models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field


class Group(BaseModel):
    """An organisational group whose settings drive recording retention."""

    id: int
    name: str = ""
    recording_ttl_days: int = Field(default=0, ge=0)
    """Days a recording is kept; ``0`` disables expiry for the group."""


class Recording(BaseModel):
    """A stored room recording whose media lives under the storage root."""

    id: int
    name: str = ""
    room_id: int | None = None
    group_id: int | None = None
    personal: bool = False
    """Whether the recording was made in a personal room."""
    is_folder: bool = False
    inserted_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
