"""In-process periodic trigger for the cleanup tasks."""

from __future__ import annotations

import asyncio
import contextlib
import logging

from roomsweep.cleanup.job import CleanupJob
from roomsweep.config import ScheduleConfig
from roomsweep.models.enums import CleanupTask
from roomsweep.models.result import CleanupResult

logger = logging.getLogger("roomsweep.scheduler")


class CleanupScheduler:
    """Runs every cleanup task on its own cadence as an asyncio background task.

    Each loop awaits its task before sleeping again, so a slow run is never
    re-entered by the loop. ``trigger()`` allows an extra, immediate run
    that is skipped while the same task is already in flight.

    Example::

        scheduler = CleanupScheduler(job, ScheduleConfig(sessions=timedelta(minutes=1)))
        scheduler.start()
        ...
        await scheduler.stop()
    """

    def __init__(self, job: CleanupJob, schedule: ScheduleConfig | None = None) -> None:
        self._job = job
        self._schedule = schedule or ScheduleConfig()
        self._loops: dict[CleanupTask, asyncio.Task[None]] = {}
        self._in_flight: set[CleanupTask] = set()

    @property
    def is_running(self) -> bool:
        return bool(self._loops)

    def in_flight(self, task: CleanupTask) -> bool:
        return task in self._in_flight

    def start(self) -> None:
        """Start one loop per task. Must be called from a running event loop."""
        if self._loops:
            return
        for task in CleanupTask:
            loop = asyncio.create_task(self._loop(task), name=f"cleanup:{task.value}")
            loop.add_done_callback(self._loop_done)
            self._loops[task] = loop
        logger.info("Cleanup scheduler started with %d tasks", len(self._loops))

    async def stop(self) -> None:
        """Cancel all loops and wait for them to finish."""
        loops = list(self._loops.values())
        self._loops.clear()
        for loop in loops:
            loop.cancel()
        for loop in loops:
            with contextlib.suppress(asyncio.CancelledError):
                await loop
        if loops:
            logger.info("Cleanup scheduler stopped")

    async def trigger(self, task: CleanupTask) -> CleanupResult | None:
        """Run *task* now. Returns ``None`` if it is already running."""
        if task in self._in_flight:
            logger.debug("Cleanup task %s already running, skipping trigger", task.value)
            return None
        return await self._run_once(task)

    async def _run_once(self, task: CleanupTask) -> CleanupResult:
        self._in_flight.add(task)
        try:
            return await self._job.run(task, recording_mode=self._schedule.recording_mode)
        finally:
            self._in_flight.discard(task)

    async def _loop(self, task: CleanupTask) -> None:
        interval = self._schedule.interval(task).total_seconds()
        while True:
            await asyncio.sleep(interval)
            if task in self._in_flight:
                continue
            try:
                await self._run_once(task)
            except Exception:
                # CleanupJob contains its own failures; this guards the loop itself
                logger.exception("Cleanup loop for %s failed, continuing", task.value)

    @staticmethod
    def _loop_done(loop: asyncio.Task[None]) -> None:
        if loop.cancelled():
            return
        exc = loop.exception()
        if exc is not None:
            logger.error("Cleanup loop %s exited: %s", loop.get_name(), exc)
