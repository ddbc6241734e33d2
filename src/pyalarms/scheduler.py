"""Fixed-interval driver for fetch cycles."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any

_logger = logging.getLogger(__name__)


class SchedulerState(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class PollingScheduler:
    """Runs *cycle* once immediately and then every *interval* seconds.

    Cycles are started on the timer without waiting for earlier ones, so a
    slow cycle may overlap the next. ``stop()`` only cancels the timer;
    cycles already in flight run to completion.

    Usage::

        scheduler = PollingScheduler(monitor.run_cycle, interval=30.0)
        scheduler.start()
        ...
        scheduler.stop()
    """

    def __init__(
        self,
        cycle: Callable[[], Awaitable[Any]],
        *,
        interval: float,
        name: str = "alarms",
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._cycle = cycle
        self._interval = interval
        self._name = name
        self._state = SchedulerState.IDLE
        self._ticker: asyncio.Task[None] | None = None
        self._in_flight: set[asyncio.Task[None]] = set()
        self._cycles_started = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def in_flight(self) -> int:
        """Number of cycles currently running."""
        return len(self._in_flight)

    @property
    def cycles_started(self) -> int:
        return self._cycles_started

    def start(self) -> None:
        """Start polling. Must be called from a running event loop."""
        if self._state is SchedulerState.RUNNING:
            _logger.debug("Scheduler %s already running", self._name)
            return
        if self._state is SchedulerState.STOPPED:
            raise RuntimeError(f"Scheduler {self._name} was stopped and cannot be restarted")

        loop = asyncio.get_running_loop()
        self._state = SchedulerState.RUNNING
        self._spawn_cycle()
        self._ticker = loop.create_task(self._tick(), name=f"{self._name}-ticker")
        _logger.info("Scheduler %s started (interval=%ss)", self._name, self._interval)

    def stop(self) -> None:
        """Cancel the repeating timer. Safe to call at any time."""
        if self._state is not SchedulerState.RUNNING:
            return
        self._state = SchedulerState.STOPPED
        ticker = self._ticker
        self._ticker = None
        if ticker is not None:
            ticker.cancel()
        _logger.info("Scheduler %s stopped (%d cycles in flight)", self._name, len(self._in_flight))

    async def wait_for_cycles(self) -> None:
        """Wait until every cycle started so far has finished."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    async def _tick(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            if self._state is not SchedulerState.RUNNING:
                return
            self._spawn_cycle()

    def _spawn_cycle(self) -> None:
        self._cycles_started += 1
        task = asyncio.get_running_loop().create_task(
            self._run_cycle(),
            name=f"{self._name}-cycle-{self._cycles_started}",
        )
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _run_cycle(self) -> None:
        try:
            await self._cycle()
        except Exception:
            # A failing cycle must never stop the timer.
            _logger.exception("Scheduler %s cycle failed", self._name)
