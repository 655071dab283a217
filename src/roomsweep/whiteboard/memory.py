"""In-memory implementation of WhiteboardManager."""

from __future__ import annotations

from typing import Any

from roomsweep.models.whiteboard import Whiteboard, Whiteboards
from roomsweep.whiteboard.base import WhiteboardManager


class InMemoryWhiteboardManager(WhiteboardManager):
    """Dict-based whiteboard state for development and testing."""

    def __init__(self) -> None:
        self._rooms: dict[int, dict[int, Whiteboard]] = {}

    async def get(self, room_id: int) -> Whiteboards:
        boards = self._rooms.get(room_id, {})
        return Whiteboards(
            room_id=room_id,
            whiteboards={wb_id: wb.model_copy(deep=True) for wb_id, wb in boards.items()},
        )

    def set(self, room_id: int, whiteboard: Whiteboard) -> None:
        self._rooms.setdefault(room_id, {})[whiteboard.id] = whiteboard

    def add_item(
        self, room_id: int, wb_id: int, item_id: str, item: dict[str, Any] | None = None
    ) -> None:
        """Draw an object on a board, creating the board if needed."""
        boards = self._rooms.setdefault(room_id, {})
        board = boards.get(wb_id)
        if board is None:
            board = Whiteboard(id=wb_id)
            boards[wb_id] = board
        board.items[item_id] = item or {}

    def clear(self, room_id: int, wb_id: int) -> None:
        board = self._rooms.get(room_id, {}).get(wb_id)
        if board is not None:
            board.items.clear()

    def remove(self, room_id: int) -> None:
        self._rooms.pop(room_id, None)
