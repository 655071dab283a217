"""Abstract base class and types for storage-root access."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class StoredFile:
    """A snapshot of one directory entry taken while listing."""

    path: Path
    modified_at: datetime
    is_file: bool = True

    @property
    def name(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        return self.path.exists()

    def is_older_than(self, cutoff: datetime) -> bool:
        """Return ``True`` if the entry was last modified before *cutoff*."""
        return self.modified_at < cutoff


FileFilter = Callable[[StoredFile], bool]


class FileStorage(ABC):
    """Listing and deletion primitives used by the cleanup tasks.

    Listings never raise for a missing or unreadable path; they return an
    empty list instead. Deletions raise ``StorageError`` on failure.
    """

    @abstractmethod
    def list_subdirectories(self, root: Path) -> list[StoredFile]:
        """Return the immediate child directories of *root*."""
        ...

    @abstractmethod
    def list_files(self, directory: Path, predicate: FileFilter | None = None) -> list[StoredFile]:
        """Return regular files directly inside *directory* accepted by *predicate*."""
        ...

    @abstractmethod
    def delete(self, file: StoredFile | Path) -> bool:
        """Delete a single file. Returns ``False`` if it was already gone."""
        ...

    @abstractmethod
    def delete_recursive(self, directory: StoredFile | Path) -> None:
        """Delete *directory* and everything below it."""
        ...
