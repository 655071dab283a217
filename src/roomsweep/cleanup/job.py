"""CleanupJob: periodic housekeeping of the storage root and the stores."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager, nullcontext
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from roomsweep.config import CleanupConfig
from roomsweep.core.errors import StorageError
from roomsweep.core.locks import RoomLockManager
from roomsweep.core.readiness import ReadinessGate, as_utc
from roomsweep.models.enums import CleanupTask
from roomsweep.models.recording import Recording
from roomsweep.models.result import CleanupResult
from roomsweep.retention.base import RetentionEvaluator
from roomsweep.storage.base import FileStorage, StoredFile
from roomsweep.storage.layout import EXTENSION_MP4, TEST_SETUP_PREFIX, StorageLayout
from roomsweep.store.base import RecordingStore, SessionStore, UserStore
from roomsweep.streams.base import StreamClientManager
from roomsweep.telemetry.base import Attr, SpanKind, TelemetryProvider
from roomsweep.telemetry.noop import NoopTelemetryProvider
from roomsweep.whiteboard.base import WhiteboardManager

logger = logging.getLogger("roomsweep.cleanup")

_ROOM_DIR_RE = re.compile(r"[0-9]+", re.ASCII)

REMOVED_METRIC = "roomsweep.cleanup.removed"

_DELETE_FAILED = "delete_failed"


def parse_room_id(name: str) -> int | None:
    """Return the room id a storage directory is named after, or ``None``.

    Only plain decimal names belong to rooms; anything else (signs,
    decimals, hex, words) is a foreign directory.
    """
    if _ROOM_DIR_RE.fullmatch(name) is None:
        return None
    return int(name)


@dataclass
class _Pass:
    """Counters for one task invocation."""

    examined: int = 0
    removed: int = 0
    failures: int = 0
    span_id: str = ""


class CleanupJob:
    """Reclaims stale files, session rows, recordings and reset tokens.

    Each ``clean_*`` coroutine is an independent entry point meant to be
    triggered on its own cadence. None of them ever raises: failures are
    logged to ``roomsweep.cleanup`` and reported to the telemetry
    provider, and the next scheduled run tries again. Every task is a
    no-op until the readiness gate opens.
    """

    def __init__(
        self,
        *,
        storage: FileStorage,
        layout: StorageLayout,
        gate: ReadinessGate,
        whiteboards: WhiteboardManager,
        streams: StreamClientManager,
        sessions: SessionStore,
        users: UserStore,
        recordings: RecordingStore,
        retention: RetentionEvaluator,
        config: CleanupConfig | None = None,
        lock_manager: RoomLockManager | None = None,
        telemetry: TelemetryProvider | None = None,
    ) -> None:
        self._storage = storage
        self._layout = layout
        self._gate = gate
        self._whiteboards = whiteboards
        self._streams = streams
        self._sessions = sessions
        self._users = users
        self._recordings = recordings
        self._retention = retention
        self._config = config or CleanupConfig()
        self._lock_manager = lock_manager
        self._telemetry = telemetry or NoopTelemetryProvider()

    @property
    def config(self) -> CleanupConfig:
        return self._config

    # Task entry points

    async def clean_test_setup(self) -> CleanupResult:
        """Delete test-setup captures older than ``test_setup_timeout``."""
        return await self._run(CleanupTask.TEST_SETUP, self._clean_test_setup)

    async def clean_room_files(self) -> CleanupResult:
        """Delete working directories of idle rooms holding stale files."""
        return await self._run(CleanupTask.ROOM_FILES, self._clean_room_files)

    async def clean_sessions(self) -> CleanupResult:
        """Purge session rows idle for longer than ``session_timeout``."""
        return await self._run(CleanupTask.SESSIONS, self._clean_sessions)

    async def clean_expired_recordings(self, mode: bool = True) -> CleanupResult:
        """Delete recordings whose retention period is over.

        Args:
            mode: Recording class to evaluate, passed through to the
                retention evaluator untouched.
        """

        async def body(stats: _Pass, now: datetime) -> None:
            await self._clean_expired_recordings(stats, mode)

        return await self._run(CleanupTask.EXPIRED_RECORDINGS, body)

    async def clean_expired_reset_hash(self) -> CleanupResult:
        """Clear password-reset tokens older than ``reset_hash_ttl``."""
        return await self._run(CleanupTask.EXPIRED_RESET_HASH, self._clean_expired_reset_hash)

    async def run(self, task: CleanupTask, *, recording_mode: bool = True) -> CleanupResult:
        """Run a single task by name."""
        if task is CleanupTask.EXPIRED_RECORDINGS:
            return await self.clean_expired_recordings(recording_mode)
        runners: dict[CleanupTask, Callable[[], Awaitable[CleanupResult]]] = {
            CleanupTask.TEST_SETUP: self.clean_test_setup,
            CleanupTask.ROOM_FILES: self.clean_room_files,
            CleanupTask.SESSIONS: self.clean_sessions,
            CleanupTask.EXPIRED_RESET_HASH: self.clean_expired_reset_hash,
        }
        return await runners[task]()

    async def run_all(self, *, recording_mode: bool = True) -> list[CleanupResult]:
        """Run every task once, in declaration order."""
        return [await self.run(task, recording_mode=recording_mode) for task in CleanupTask]

    # Shared task envelope

    async def _run(
        self,
        task: CleanupTask,
        body: Callable[[_Pass, datetime], Awaitable[None]],
    ) -> CleanupResult:
        logger.debug("CleanupJob.%s", task.value)
        try:
            if not self._gate.is_ready():
                return CleanupResult.not_ready(task)
            now = as_utc(self._gate.now())
        except Exception:
            logger.exception("Readiness check failed, skipping cleanup task %s", task.value)
            return CleanupResult.not_ready(task)

        stats = _Pass()
        start = time.monotonic()
        stats.span_id = (
            self._emit(
                self._telemetry.start_span,
                SpanKind.for_task(task),
                f"cleanup.{task.value}",
                attributes={Attr.CLEANUP_TASK: task.value},
            )
            or ""
        )
        status = "ok"
        error: str | None = None
        try:
            await body(stats, now)
        except Exception as exc:
            logger.exception("Unexpected exception while running cleanup task %s", task.value)
            status = "error"
            error = str(exc)

        elapsed = (time.monotonic() - start) * 1000
        self._emit(
            self._telemetry.end_span,
            stats.span_id,
            status=status,
            error_message=error,
            attributes={
                Attr.CLEANUP_EXAMINED: stats.examined,
                Attr.CLEANUP_REMOVED: stats.removed,
                Attr.CLEANUP_FAILURES: stats.failures,
                Attr.DURATION_MS: elapsed,
            },
        )
        self._emit(
            self._telemetry.record_metric,
            REMOVED_METRIC,
            stats.removed,
            attributes={Attr.CLEANUP_TASK: task.value},
        )
        return CleanupResult(
            task=task, examined=stats.examined, removed=stats.removed, duration_ms=elapsed
        )

    def _emit(self, call: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Invoke a telemetry provider method, logging instead of raising."""
        try:
            return call(*args, **kwargs)
        except Exception:
            logger.warning(
                "Telemetry provider call %s failed",
                getattr(call, "__name__", call),
                exc_info=True,
            )
            return None

    # Task bodies

    async def _clean_test_setup(self, stats: _Pass, now: datetime) -> None:
        cutoff = now - self._config.test_setup_timeout

        def expired(f: StoredFile) -> bool:
            return f.name.startswith(TEST_SETUP_PREFIX) and f.is_older_than(cutoff)

        for folder in self._storage.list_subdirectories(self._layout.streams_dir):
            for file in self._storage.list_files(folder.path, expired):
                stats.examined += 1
                logger.debug("Expired test setup found: %s", file.path)
                try:
                    if self._storage.delete(file):
                        stats.removed += 1
                except (StorageError, OSError) as exc:
                    stats.failures += 1
                    logger.warning("Failed to delete test setup file %s: %s", file.path, exc)

    async def _clean_room_files(self, stats: _Pass, now: datetime) -> None:
        cutoff = now - self._config.room_files_ttl
        for folder in self._storage.list_subdirectories(self._layout.streams_dir):
            room_id = parse_room_id(folder.name)
            if room_id is None:
                continue
            stats.examined += 1
            lock: AbstractAsyncContextManager[None] = (
                self._lock_manager.locked(str(room_id))
                if self._lock_manager is not None
                else nullcontext()
            )
            room_span = (
                self._emit(
                    self._telemetry.start_span,
                    SpanKind.CLEANUP_ROOM,
                    "cleanup.room",
                    parent_id=stats.span_id or None,
                    attributes={Attr.ROOM_ID: room_id},
                )
                or ""
            )
            try:
                async with lock:
                    outcome = await self._sweep_room(room_id, folder, cutoff, stats)
            except Exception as exc:
                self._emit(
                    self._telemetry.end_span, room_span, status="error", error_message=str(exc)
                )
                raise
            self._emit(self._telemetry.set_attribute, room_span, Attr.CLEANUP_OUTCOME, outcome)
            self._emit(
                self._telemetry.end_span,
                room_span,
                status="error" if outcome == _DELETE_FAILED else "ok",
            )

    async def _sweep_room(
        self, room_id: int, folder: StoredFile, cutoff: datetime, stats: _Pass
    ) -> str:
        """Remove *folder* if the room is idle and holds a stale file.

        Returns the outcome recorded on the room's span.
        """
        boards = await self._whiteboards.get(room_id)
        if not boards.all_empty():
            return "whiteboard_active"
        if await self._streams.list(room_id):
            return "clients_connected"

        stale = self._storage.list_files(folder.path, lambda f: f.is_older_than(cutoff))
        if not stale:
            return "no_stale_files"

        logger.debug("Room files are too old and no users in the room: %d", room_id)
        try:
            self._storage.delete_recursive(folder)
        except (StorageError, OSError) as exc:
            stats.failures += 1
            logger.warning(
                "Failed to delete files of room %d at %s: %s", room_id, folder.path, exc
            )
            return _DELETE_FAILED
        stats.removed += 1
        return "removed"

    async def _clean_sessions(self, stats: _Pass, now: datetime) -> None:
        removed = await self._sessions.purge_older_than(self._config.session_timeout)
        stats.examined += removed
        stats.removed += removed

    async def _clean_expired_recordings(self, stats: _Pass, mode: bool) -> None:
        async def remove_if_expired(recording: Recording, days: int) -> None:
            stats.examined += 1
            if days >= 0:
                return
            logger.debug(
                "Expired recording will be deleted: %d (%s)", recording.id, recording.name
            )
            media = self._layout.recording_file(recording, EXTENSION_MP4)
            try:
                self._storage.delete(media)
            except (StorageError, OSError) as exc:
                stats.failures += 1
                logger.warning(
                    "Keeping recording %d, its media file %s could not be deleted: %s",
                    recording.id,
                    media,
                    exc,
                )
                return
            await self._recordings.delete(recording)
            stats.removed += 1

        await self._retention.process_expiring(mode, remove_if_expired)

    async def _clean_expired_reset_hash(self, stats: _Pass, now: datetime) -> None:
        users = await self._users.get_by_expired_hash(self._config.reset_hash_ttl)
        if not users:
            return
        logger.debug("... %d expired hashes were found", len(users))
        for user in users:
            stats.examined += 1
            user.clear_reset_hash()
            try:
                await self._users.update(user)
            except Exception as exc:
                stats.failures += 1
                logger.warning("Failed to clear expired reset hash of user %d: %s", user.id, exc)
                continue
            stats.removed += 1
        logger.debug("... DONE CleanupJob.clean_expired_reset_hash")
