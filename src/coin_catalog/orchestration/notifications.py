"""Zero-payload "dataset replaced" broadcast.

Subscribers get no diff: on notification they re-read the full dataset
from the store. Nothing is replayed to subscribers that join later.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable

from coin_catalog.infrastructure.observability import get_orchestration_logger

ChangeCallback = Callable[[], Awaitable[None] | None]

log = get_orchestration_logger("change-notifier")


class ChangeNotifier:
    """Multi-subscriber broadcast with no backpressure."""

    def __init__(self) -> None:
        self._callbacks: list[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register a callback; returns a function that unsubscribes it."""
        self._callbacks.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        self._callbacks = [cb for cb in self._callbacks if cb is not callback]

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    async def notify(self) -> None:
        """Call every subscriber once. A failing subscriber does not affect the rest."""
        pending = []
        for callback in list(self._callbacks):
            try:
                result = callback()
            except Exception as e:
                log.error("subscriber_failed", callback=repr(callback), error=repr(e))
                continue
            if inspect.isawaitable(result):
                pending.append(result)

        if not pending:
            return

        results = await asyncio.gather(*pending, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                log.error("subscriber_failed", error=repr(result))
