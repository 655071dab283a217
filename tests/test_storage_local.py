"""Tests for LocalFileStorage and StorageLayout."""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path

import pytest

from roomsweep.core.errors import StorageError
from roomsweep.models.recording import Recording
from roomsweep.storage.layout import EXTENSION_MP4, StorageLayout
from roomsweep.storage.local import LocalFileStorage
from tests.conftest import NOW, make_file


class TestStorageLayout:
    def test_paths(self, tmp_path: Path) -> None:
        layout = StorageLayout(tmp_path)
        assert layout.streams_dir == tmp_path / "streams"
        assert layout.recordings_dir == tmp_path / "streams" / "hibernate"
        assert layout.room_dir(12) == tmp_path / "streams" / "12"

    def test_recording_file(self, tmp_path: Path) -> None:
        layout = StorageLayout(tmp_path)
        path = layout.recording_file(Recording(id=31), EXTENSION_MP4)
        assert path == tmp_path / "streams" / "hibernate" / "recording_31.mp4"


class TestListing:
    def test_missing_root_lists_nothing(self, tmp_path: Path) -> None:
        storage = LocalFileStorage()
        assert storage.list_subdirectories(tmp_path / "absent") == []
        assert storage.list_files(tmp_path / "absent") == []

    def test_lists_only_directories(self, tmp_path: Path) -> None:
        (tmp_path / "1").mkdir()
        (tmp_path / "b").mkdir()
        (tmp_path / "file.txt").write_text("x")

        names = [d.name for d in LocalFileStorage().list_subdirectories(tmp_path)]

        assert names == ["1", "b"]

    def test_lists_only_regular_files(self, tmp_path: Path) -> None:
        make_file(tmp_path / "a.flv", timedelta(minutes=1))
        (tmp_path / "sub").mkdir()

        files = LocalFileStorage().list_files(tmp_path)

        assert [f.name for f in files] == ["a.flv"]
        assert files[0].is_file

    def test_modified_at_reflects_mtime(self, tmp_path: Path) -> None:
        make_file(tmp_path / "a.flv", timedelta(hours=2))
        (entry,) = LocalFileStorage().list_files(tmp_path)
        assert entry.modified_at == NOW - timedelta(hours=2)
        assert entry.is_older_than(NOW - timedelta(hours=1))
        assert not entry.is_older_than(NOW - timedelta(hours=3))

    def test_predicate_filters(self, tmp_path: Path) -> None:
        make_file(tmp_path / "keep.flv", timedelta(minutes=1))
        make_file(tmp_path / "drop.flv", timedelta(minutes=1))

        files = LocalFileStorage().list_files(tmp_path, lambda f: f.name.startswith("keep"))

        assert [f.name for f in files] == ["keep.flv"]


class TestDeletion:
    def test_delete_file(self, tmp_path: Path) -> None:
        path = make_file(tmp_path / "a.flv", timedelta(minutes=1))
        (entry,) = LocalFileStorage().list_files(tmp_path)

        assert LocalFileStorage().delete(entry) is True
        assert not path.exists()
        assert not entry.exists()

    def test_delete_missing_file_returns_false(self, tmp_path: Path) -> None:
        assert LocalFileStorage().delete(tmp_path / "nope") is False

    def test_delete_directory_as_file_raises(self, tmp_path: Path) -> None:
        (tmp_path / "dir").mkdir()
        with pytest.raises(StorageError) as exc_info:
            LocalFileStorage().delete(tmp_path / "dir")
        assert exc_info.value.path == tmp_path / "dir"

    def test_delete_recursive(self, tmp_path: Path) -> None:
        root = tmp_path / "42"
        make_file(root / "a.flv", timedelta(minutes=1))
        make_file(root / "deep" / "b.png", timedelta(minutes=1))

        LocalFileStorage().delete_recursive(root)

        assert not root.exists()

    def test_delete_recursive_missing_is_noop(self, tmp_path: Path) -> None:
        LocalFileStorage().delete_recursive(tmp_path / "absent")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_delete_recursive_does_not_follow_symlink(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere"
        keep = make_file(target / "precious.flv", timedelta(days=1))
        link = tmp_path / "streams" / "42"
        link.parent.mkdir()
        link.symlink_to(target, target_is_directory=True)

        LocalFileStorage().delete_recursive(link)

        assert not link.exists()
        assert keep.exists()
