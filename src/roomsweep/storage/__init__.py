"""Filesystem access for the storage root."""

from roomsweep.storage.base import FileFilter, FileStorage, StoredFile
from roomsweep.storage.layout import EXTENSION_MP4, TEST_SETUP_PREFIX, StorageLayout
from roomsweep.storage.local import LocalFileStorage

__all__ = [
    "EXTENSION_MP4",
    "TEST_SETUP_PREFIX",
    "FileFilter",
    "FileStorage",
    "LocalFileStorage",
    "StorageLayout",
    "StoredFile",
]
