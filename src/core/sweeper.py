"""
Periodic cleanup driver.

The store never sweeps on its own. Callers that want expired entries
reclaimed on a schedule create a Sweeper and run it as a task in their own
event loop, stopping it through an asyncio.Event. Each pass runs in a worker
thread because cleanup() blocks on the store's threading lock.
"""

from __future__ import annotations

import asyncio
import math

from loguru import logger

from core.errors import ValidationError
from core.interfaces import SupportsCleanup


class Sweeper:
    def __init__(self, target: SupportsCleanup, *, interval_seconds: float) -> None:
        interval = float(interval_seconds)
        if not math.isfinite(interval) or interval <= 0:
            raise ValidationError(f"interval_seconds must be a positive finite number, got {interval_seconds!r}")

        self._target = target
        self._interval = interval
        self._passes = 0

    @property
    def passes(self) -> int:
        return self._passes

    def sweep_once(self) -> None:
        self._target.cleanup()
        self._passes += 1

    async def run(self, stop: asyncio.Event) -> None:
        logger.info("Sweeper started, interval {}s", self._interval)
        while not stop.is_set():
            # Wake early when stop is set; a timeout means the interval elapsed.
            try:
                await asyncio.wait_for(stop.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                await asyncio.to_thread(self.sweep_once)
        logger.info("Sweeper stopped after {} passes", self._passes)
