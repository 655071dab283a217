"""Tests for the in-memory stores, whiteboards and stream registry."""

from __future__ import annotations

from datetime import timedelta

import pytest

from roomsweep.core.errors import RecordingNotFoundError, UserNotFoundError
from roomsweep.models.recording import Recording
from roomsweep.models.session import SessionEntry
from roomsweep.models.stream import StreamClient
from roomsweep.models.user import User
from roomsweep.models.whiteboard import Whiteboard
from roomsweep.store.memory import (
    InMemoryRecordingStore,
    InMemorySessionStore,
    InMemoryUserStore,
)
from roomsweep.streams.memory import InMemoryStreamClientManager
from roomsweep.whiteboard.memory import InMemoryWhiteboardManager
from tests.conftest import NOW


class TestSessionStore:
    async def test_purge_counts_removed_rows(self, sessions: InMemorySessionStore) -> None:
        for minutes in (10, 40, 50):
            sessions.add(SessionEntry(last_activity_at=NOW - timedelta(minutes=minutes)))

        removed = await sessions.purge_older_than(timedelta(minutes=30))

        assert removed == 2
        assert len(sessions) == 1

    async def test_purge_empty(self, sessions: InMemorySessionStore) -> None:
        assert await sessions.purge_older_than(timedelta(minutes=30)) == 0


class TestUserStore:
    async def test_expired_query(self, users: InMemoryUserStore) -> None:
        users.add(User(id=1, login="a", reset_hash="x", reset_date=NOW - timedelta(days=2)))
        users.add(User(id=2, login="b", reset_hash="y", reset_date=NOW - timedelta(hours=2)))
        users.add(User(id=3, login="c"))
        # Date without hash never matches
        users.add(User(id=4, login="d", reset_date=NOW - timedelta(days=9)))

        found = await users.get_by_expired_hash(timedelta(days=1))

        assert [u.id for u in found] == [1]

    async def test_update_unknown_user(self, users: InMemoryUserStore) -> None:
        with pytest.raises(UserNotFoundError):
            await users.update(User(id=99, login="ghost"))

    async def test_returned_users_are_copies(self, users: InMemoryUserStore) -> None:
        users.add(User(id=1, login="a", reset_hash="x", reset_date=NOW - timedelta(days=2)))
        (found,) = await users.get_by_expired_hash(timedelta(days=1))
        found.clear_reset_hash()
        stored = users.get(1)
        assert stored is not None
        assert stored.reset_hash == "x"


class TestRecordingStore:
    async def test_list_by_group(self, recordings: InMemoryRecordingStore) -> None:
        recordings.add(Recording(id=1, group_id=1, personal=True))
        recordings.add(Recording(id=2, group_id=1, personal=False))
        recordings.add(Recording(id=3, group_id=2, personal=True))

        personal = await recordings.list_by_group(1, personal=True)

        assert [r.id for r in personal] == [1]

    async def test_delete_unknown(self, recordings: InMemoryRecordingStore) -> None:
        with pytest.raises(RecordingNotFoundError):
            await recordings.delete(Recording(id=5))


class TestWhiteboards:
    async def test_unknown_room_is_empty(self) -> None:
        wbs = await InMemoryWhiteboardManager().get(7)
        assert wbs.room_id == 7
        assert wbs.whiteboards == {}
        assert wbs.all_empty()

    async def test_one_drawn_board_makes_room_busy(self) -> None:
        mgr = InMemoryWhiteboardManager()
        mgr.set(7, Whiteboard(id=1, name="blank"))
        mgr.add_item(7, 2, "txt-1", {"type": "text"})

        wbs = await mgr.get(7)

        assert wbs.whiteboards[1].is_empty()
        assert not wbs.whiteboards[2].is_empty()
        assert not wbs.all_empty()

    async def test_get_returns_snapshot(self) -> None:
        mgr = InMemoryWhiteboardManager()
        mgr.add_item(7, 1, "a")
        wbs = await mgr.get(7)
        mgr.clear(7, 1)
        assert not wbs.all_empty()
        assert (await mgr.get(7)).all_empty()

    async def test_remove_room(self) -> None:
        mgr = InMemoryWhiteboardManager()
        mgr.add_item(7, 1, "a")
        mgr.remove(7)
        assert (await mgr.get(7)).all_empty()


class TestStreamClients:
    async def test_list_by_room(self) -> None:
        mgr = InMemoryStreamClientManager()
        a = mgr.add(StreamClient(room_id=1))
        mgr.add(StreamClient(room_id=2))

        assert [c.uid for c in await mgr.list(1)] == [a.uid]
        assert mgr.remove(a.uid)
        assert await mgr.list(1) == []
        assert not mgr.remove(a.uid)
        assert mgr.count == 1
