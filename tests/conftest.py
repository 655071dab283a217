"""Shared test fixtures and helpers."""

from __future__ import annotations

import os
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from roomsweep.cleanup.job import CleanupJob
from roomsweep.config import CleanupConfig
from roomsweep.core.readiness import InitCompleteGate
from roomsweep.models.recording import Group
from roomsweep.retention.groups import GroupRetentionEvaluator
from roomsweep.storage.layout import StorageLayout
from roomsweep.storage.local import LocalFileStorage
from roomsweep.store.memory import (
    InMemoryRecordingStore,
    InMemorySessionStore,
    InMemoryUserStore,
)
from roomsweep.streams.memory import InMemoryStreamClientManager
from roomsweep.telemetry.mock import MockTelemetryProvider
from roomsweep.whiteboard.memory import InMemoryWhiteboardManager

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)


def fixed_clock() -> datetime:
    return NOW


def make_file(path: Path, age: timedelta, content: bytes = b"data") -> Path:
    """Create *path* (and its parents) with a modification time *age* before NOW."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    ts = (NOW - age).timestamp()
    os.utime(path, (ts, ts))
    return path


@pytest.fixture
def gate() -> InitCompleteGate:
    return InitCompleteGate(ready=True, clock=fixed_clock)


@pytest.fixture
def layout(tmp_path: Path) -> StorageLayout:
    return StorageLayout(tmp_path / "data")


@pytest.fixture
def storage() -> LocalFileStorage:
    return LocalFileStorage()


@pytest.fixture
def whiteboards() -> InMemoryWhiteboardManager:
    return InMemoryWhiteboardManager()


@pytest.fixture
def streams() -> InMemoryStreamClientManager:
    return InMemoryStreamClientManager()


@pytest.fixture
def sessions() -> InMemorySessionStore:
    return InMemorySessionStore(clock=fixed_clock)


@pytest.fixture
def users() -> InMemoryUserStore:
    return InMemoryUserStore(clock=fixed_clock)


@pytest.fixture
def recordings() -> InMemoryRecordingStore:
    return InMemoryRecordingStore()


@pytest.fixture
def retention(recordings: InMemoryRecordingStore) -> GroupRetentionEvaluator:
    return GroupRetentionEvaluator(
        [Group(id=1, name="default", recording_ttl_days=30)], recordings, clock=fixed_clock
    )


@pytest.fixture
def telemetry() -> MockTelemetryProvider:
    return MockTelemetryProvider()


@pytest.fixture
def config() -> CleanupConfig:
    return CleanupConfig()


@pytest.fixture
def job(
    storage: LocalFileStorage,
    layout: StorageLayout,
    gate: InitCompleteGate,
    whiteboards: InMemoryWhiteboardManager,
    streams: InMemoryStreamClientManager,
    sessions: InMemorySessionStore,
    users: InMemoryUserStore,
    recordings: InMemoryRecordingStore,
    retention: GroupRetentionEvaluator,
    config: CleanupConfig,
    telemetry: MockTelemetryProvider,
) -> CleanupJob:
    return CleanupJob(
        storage=storage,
        layout=layout,
        gate=gate,
        whiteboards=whiteboards,
        streams=streams,
        sessions=sessions,
        users=users,
        recordings=recordings,
        retention=retention,
        config=config,
        telemetry=telemetry,
    )
