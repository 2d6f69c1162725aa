"""
Cooperative cancellation for a single research invocation.

The orchestrator checks the scope before every external call so that a
cancelled or expired invocation never starts a new page fetch or LLM call.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from .exceptions import ResearchCancelled

T = TypeVar("T")


class CancellationScope:
    """Cancellation signal plus an optional absolute deadline (event loop time)."""

    def __init__(
        self, event: asyncio.Event | None = None, deadline: float | None = None
    ):
        self.event = event
        self.deadline = deadline

    @classmethod
    def with_timeout(
        cls, timeout: float | None, event: asyncio.Event | None = None
    ) -> "CancellationScope":
        deadline = None
        if timeout is not None:
            deadline = asyncio.get_running_loop().time() + timeout
        return cls(event=event, deadline=deadline)

    def remaining(self) -> float | None:
        if self.deadline is None:
            return None
        return self.deadline - asyncio.get_running_loop().time()

    def check(self, stage: str) -> None:
        """Raise ResearchCancelled if the invocation must stop before `stage`."""
        if self.event is not None and self.event.is_set():
            raise ResearchCancelled(f"Research cancelled before {stage}")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise ResearchCancelled(f"Research deadline exceeded before {stage}")

    async def guard(self, awaitable: Awaitable[T], stage: str) -> T:
        """Await an external call, bounded by the time left on the deadline.

        Callers run check() before creating the awaitable.
        """
        remaining = self.remaining()
        if remaining is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, timeout=remaining)
        except asyncio.TimeoutError as e:
            raise ResearchCancelled(
                f"Research deadline exceeded during {stage}"
            ) from e
