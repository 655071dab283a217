"""Tests for CleanupJob.clean_expired_reset_hash."""

from __future__ import annotations

from datetime import timedelta

from roomsweep.cleanup.job import CleanupJob
from roomsweep.core.errors import UserNotFoundError
from roomsweep.core.readiness import InitCompleteGate
from roomsweep.models.user import User
from roomsweep.store.memory import InMemoryUserStore
from tests.conftest import NOW, fixed_clock


def _user(user_id: int, age: timedelta | None) -> User:
    if age is None:
        return User(id=user_id, login=f"user{user_id}")
    return User(id=user_id, login=f"user{user_id}", reset_hash=f"h{user_id}", reset_date=NOW - age)


class TestCleanExpiredResetHash:
    async def test_clears_expired_hash_and_date_together(
        self, job: CleanupJob, users: InMemoryUserStore
    ) -> None:
        users.add(_user(1, timedelta(hours=25)))
        users.add(_user(2, timedelta(hours=1)))

        result = await job.clean_expired_reset_hash()

        expired = users.get(1)
        assert expired is not None
        assert expired.reset_hash is None
        assert expired.reset_date is None
        recent = users.get(2)
        assert recent is not None
        assert recent.reset_hash == "h2"
        assert recent.reset_date == NOW - timedelta(hours=1)
        assert result.removed == 1

    async def test_second_run_finds_nothing(
        self, job: CleanupJob, users: InMemoryUserStore
    ) -> None:
        users.add(_user(1, timedelta(days=3)))

        first = await job.clean_expired_reset_hash()
        second = await job.clean_expired_reset_hash()

        assert first.removed == 1
        assert second.examined == 0
        assert second.removed == 0

    async def test_users_without_token_are_ignored(
        self, job: CleanupJob, users: InMemoryUserStore
    ) -> None:
        users.add(_user(1, None))
        result = await job.clean_expired_reset_hash()
        assert result.examined == 0

    async def test_one_failing_update_does_not_stop_the_batch(self, job: CleanupJob) -> None:
        class FlakyUsers(InMemoryUserStore):
            async def update(self, user: User) -> User:
                if user.id == 1:
                    raise UserNotFoundError("User 1 not found")
                return await super().update(user)

        store = FlakyUsers(clock=fixed_clock)
        store.add(_user(1, timedelta(days=2)))
        store.add(_user(2, timedelta(days=2)))
        job._users = store

        result = await job.clean_expired_reset_hash()

        first = store.get(1)
        second = store.get(2)
        assert first is not None and first.reset_hash == "h1"
        assert second is not None and second.reset_hash is None
        assert result.examined == 2
        assert result.removed == 1

    async def test_not_ready_does_not_touch_store(
        self, job: CleanupJob, gate: InitCompleteGate, users: InMemoryUserStore
    ) -> None:
        gate.reset()
        users.add(_user(1, timedelta(days=2)))

        result = await job.clean_expired_reset_hash()

        assert result.skipped
        stored = users.get(1)
        assert stored is not None
        assert stored.reset_hash == "h1"


class TestUserModel:
    def test_clear_reset_hash_is_idempotent(self) -> None:
        user = User(id=1, login="a")
        user.clear_reset_hash()
        assert user.reset_hash is None
        assert user.reset_date is None
        assert not user.has_reset_hash
