"""Abstract base class for recording retention evaluation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from roomsweep.models.recording import Recording

ExpiringAction = Callable[[Recording, int], Awaitable[None]]
"""Called with a recording and the whole days left before it expires."""


class RetentionEvaluator(ABC):
    """Finds recordings whose retention period is over or about to be."""

    @abstractmethod
    async def process_expiring(self, mode: bool, action: ExpiringAction) -> None:
        """Invoke *action* for each expiring recording of the class *mode* selects.

        A negative day count means the recording has already expired.
        Exceptions raised by *action* propagate to the caller.
        """
        ...
