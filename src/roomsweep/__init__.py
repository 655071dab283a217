"""roomsweep - async housekeeping reaper for conferencing rooms."""

from roomsweep._version import __version__
from roomsweep.cleanup import CleanupJob, CleanupScheduler, parse_room_id
from roomsweep.config import CleanupConfig, ScheduleConfig
from roomsweep.core.errors import (
    RecordingNotFoundError,
    RoomSweepError,
    StorageError,
    UserNotFoundError,
)
from roomsweep.core.locks import InMemoryLockManager, RoomLockManager
from roomsweep.core.readiness import InitCompleteGate, ReadinessGate
from roomsweep.models.enums import CleanupTask
from roomsweep.models.recording import Group, Recording
from roomsweep.models.result import CleanupResult
from roomsweep.models.session import SessionEntry
from roomsweep.models.stream import StreamClient
from roomsweep.models.user import User
from roomsweep.models.whiteboard import Whiteboard, Whiteboards
from roomsweep.retention import ExpiringAction, GroupRetentionEvaluator, RetentionEvaluator
from roomsweep.storage import (
    EXTENSION_MP4,
    TEST_SETUP_PREFIX,
    FileStorage,
    LocalFileStorage,
    StorageLayout,
    StoredFile,
)
from roomsweep.store import (
    InMemoryRecordingStore,
    InMemorySessionStore,
    InMemoryUserStore,
    RecordingStore,
    SessionStore,
    UserStore,
)
from roomsweep.streams import InMemoryStreamClientManager, StreamClientManager
from roomsweep.telemetry import (
    ConsoleTelemetryProvider,
    MockTelemetryProvider,
    NoopTelemetryProvider,
    TelemetryProvider,
)
from roomsweep.whiteboard import InMemoryWhiteboardManager, WhiteboardManager

__all__ = [
    "EXTENSION_MP4",
    "TEST_SETUP_PREFIX",
    "CleanupConfig",
    "CleanupJob",
    "CleanupResult",
    "CleanupScheduler",
    "CleanupTask",
    "ConsoleTelemetryProvider",
    "ExpiringAction",
    "FileStorage",
    "Group",
    "GroupRetentionEvaluator",
    "InMemoryLockManager",
    "InMemoryRecordingStore",
    "InMemorySessionStore",
    "InMemoryStreamClientManager",
    "InMemoryUserStore",
    "InMemoryWhiteboardManager",
    "InitCompleteGate",
    "LocalFileStorage",
    "MockTelemetryProvider",
    "NoopTelemetryProvider",
    "ReadinessGate",
    "Recording",
    "RecordingNotFoundError",
    "RecordingStore",
    "RetentionEvaluator",
    "RoomLockManager",
    "RoomSweepError",
    "ScheduleConfig",
    "SessionEntry",
    "SessionStore",
    "StorageError",
    "StorageLayout",
    "StoredFile",
    "StreamClient",
    "StreamClientManager",
    "TelemetryProvider",
    "User",
    "UserNotFoundError",
    "UserStore",
    "Whiteboard",
    "WhiteboardManager",
    "Whiteboards",
    "__version__",
]
