"""Whiteboard state per room."""

from roomsweep.whiteboard.base import WhiteboardManager
from roomsweep.whiteboard.memory import InMemoryWhiteboardManager

__all__ = ["InMemoryWhiteboardManager", "WhiteboardManager"]
