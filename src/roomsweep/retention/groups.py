"""Group-driven retention: each group sets how long its recordings are kept."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from roomsweep.core.readiness import Clock, system_clock
from roomsweep.models.recording import Group, Recording
from roomsweep.retention.base import ExpiringAction, RetentionEvaluator
from roomsweep.store.base import RecordingStore

logger = logging.getLogger("roomsweep.retention")

DEFAULT_REMIND_DAYS = 7


class GroupRetentionEvaluator(RetentionEvaluator):
    """Evaluates recordings against their group's ``recording_ttl_days``.

    ``mode`` selects recordings made in personal rooms (``True``) or in
    regular rooms (``False``). Groups with a TTL of zero keep recordings
    forever. Only recordings with at most ``remind_days`` left are handed to
    the action, so expired ones are always included.
    """

    def __init__(
        self,
        groups: Iterable[Group],
        recordings: RecordingStore,
        *,
        remind_days: int = DEFAULT_REMIND_DAYS,
        clock: Clock | None = None,
    ) -> None:
        self._groups = {g.id: g for g in groups}
        self._recordings = recordings
        self._remind_days = remind_days
        self._clock = clock or system_clock

    def add_group(self, group: Group) -> None:
        self._groups[group.id] = group

    def days_remaining(self, recording: Recording, ttl_days: int) -> int:
        age = self._clock() - recording.inserted_at
        return ttl_days - age.days

    async def process_expiring(self, mode: bool, action: ExpiringAction) -> None:
        for group in list(self._groups.values()):
            if group.recording_ttl_days <= 0:
                continue
            recordings = await self._recordings.list_by_group(group.id, personal=mode)
            for rec in recordings:
                if rec.is_folder:
                    continue
                days = self.days_remaining(rec, group.recording_ttl_days)
                if days > self._remind_days:
                    continue
                logger.debug(
                    "Recording %d of group %d has %d day(s) left", rec.id, group.id, days
                )
                await action(rec, days)
