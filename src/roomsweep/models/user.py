"""User model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class User(BaseModel):
    """A user account, reduced to the fields the password-reset flow touches."""

    id: int
    login: str
    reset_hash: str | None = None
    reset_date: datetime | None = None

    @property
    def has_reset_hash(self) -> bool:
        return self.reset_hash is not None

    def clear_reset_hash(self) -> None:
        """Drop the pending password-reset token.

        Hash and date are always cleared together; calling this on a user
        without a token changes nothing.
        """
        self.reset_hash = None
        self.reset_date = None
