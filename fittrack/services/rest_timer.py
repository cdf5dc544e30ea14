"""Fixed-cadence ticker for the rest countdown shown between sets."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class RestTimer:
    """Calls ``on_tick`` every ``interval`` seconds on the running event loop.

    The task stops by itself once ``on_tick`` returns False. ``start`` cancels
    any task still running, so a timer never drives two countdowns at once.
    """

    def __init__(self, on_tick: Callable[[], bool], interval: float = 1.0, name: str = "rest-countdown"):
        self._on_tick = on_tick
        self._interval = interval
        self._name = name
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(), name=self._name)

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            if not self._on_tick():
                logger.debug("%s finished", self._name)
                return
