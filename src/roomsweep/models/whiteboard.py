"""Whiteboard models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Whiteboard(BaseModel):
    """A single board of a room, holding drawn objects keyed by object id."""

    id: int
    name: str = ""
    items: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.items


class Whiteboards(BaseModel):
    """Every board belonging to one room."""

    room_id: int
    whiteboards: dict[int, Whiteboard] = Field(default_factory=dict)

    def all_empty(self) -> bool:
        """Return ``True`` when no board in the room holds anything.

        A room without any board counts as empty.
        """
        return all(wb.is_empty() for wb in self.whiteboards.values())
