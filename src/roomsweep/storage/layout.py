"""Where things live under the application data directory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roomsweep.models.recording import Recording

TEST_SETUP_PREFIX = "TEST_SETUP_"
"""Name prefix of files written by the audio/video test-setup page."""

EXTENSION_MP4 = "mp4"

STREAMS_DIR = "streams"
RECORDINGS_DIR = "hibernate"
RECORDING_FILE_PREFIX = "recording_"


class StorageLayout:
    """Resolves the directories and files the cleanup tasks operate on.

    ``<data_dir>/streams/<room id>/`` holds a room's working files,
    ``<data_dir>/streams/hibernate/`` holds finished recordings.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def streams_dir(self) -> Path:
        return self._data_dir / STREAMS_DIR

    @property
    def recordings_dir(self) -> Path:
        return self.streams_dir / RECORDINGS_DIR

    def room_dir(self, room_id: int) -> Path:
        return self.streams_dir / str(room_id)

    def recording_file(self, recording: Recording, extension: str = EXTENSION_MP4) -> Path:
        return self.recordings_dir / f"{RECORDING_FILE_PREFIX}{recording.id}.{extension}"

    def __repr__(self) -> str:
        return f"StorageLayout({str(self._data_dir)!r})"
