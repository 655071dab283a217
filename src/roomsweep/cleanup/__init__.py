"""Periodic housekeeping of rooms, recordings, sessions and reset tokens."""

from roomsweep.cleanup.job import CleanupJob, parse_room_id
from roomsweep.cleanup.scheduler import CleanupScheduler

__all__ = ["CleanupJob", "CleanupScheduler", "parse_room_id"]
