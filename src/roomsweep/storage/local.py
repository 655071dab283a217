"""Local-disk implementation of FileStorage."""

from __future__ import annotations

import logging
import os
import shutil
from datetime import UTC, datetime
from pathlib import Path

from roomsweep.core.errors import StorageError
from roomsweep.storage.base import FileFilter, FileStorage, StoredFile

logger = logging.getLogger("roomsweep.storage")


def _path_of(entry: StoredFile | Path) -> Path:
    return entry.path if isinstance(entry, StoredFile) else Path(entry)


def _snapshot(entry: os.DirEntry[str]) -> StoredFile | None:
    try:
        st = entry.stat()
        is_file = entry.is_file()
    except OSError:
        # Vanished between scandir() and stat()
        return None
    return StoredFile(
        path=Path(entry.path),
        modified_at=datetime.fromtimestamp(st.st_mtime, UTC),
        is_file=is_file,
    )


class LocalFileStorage(FileStorage):
    """``os.scandir``/``shutil`` backed storage for a single host."""

    def _scan(self, directory: Path) -> list[os.DirEntry[str]]:
        try:
            with os.scandir(directory) as it:
                return list(it)
        except FileNotFoundError:
            return []
        except OSError as exc:
            logger.debug("Cannot list %s: %s", directory, exc)
            return []

    def list_subdirectories(self, root: Path) -> list[StoredFile]:
        result: list[StoredFile] = []
        for entry in self._scan(Path(root)):
            try:
                if not entry.is_dir():
                    continue
            except OSError:
                continue
            snap = _snapshot(entry)
            if snap is not None:
                result.append(snap)
        return sorted(result, key=lambda f: f.name)

    def list_files(self, directory: Path, predicate: FileFilter | None = None) -> list[StoredFile]:
        result: list[StoredFile] = []
        for entry in self._scan(Path(directory)):
            snap = _snapshot(entry)
            if snap is None or not snap.is_file:
                continue
            if predicate is None or predicate(snap):
                result.append(snap)
        return sorted(result, key=lambda f: f.name)

    def delete(self, file: StoredFile | Path) -> bool:
        path = _path_of(file)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Failed to delete {path}: {exc}", path) from exc
        return True

    def delete_recursive(self, directory: StoredFile | Path) -> None:
        path = _path_of(directory)
        if path.is_symlink():
            # Remove the link itself, never what it points at
            try:
                path.unlink()
            except OSError as exc:
                raise StorageError(f"Failed to delete {path}: {exc}", path) from exc
            return
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StorageError(f"Failed to delete directory {path}: {exc}", path) from exc
