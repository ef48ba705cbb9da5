"""Countdown between sets, ticking once per interval on the running event loop."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

log = logging.getLogger(__name__)

CompleteCallback = Callable[[], None]
SleepFn = Callable[[float], Awaitable[None]]


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class RestTimer:
    """Single-owner rest countdown.

    At most one tick task exists per timer. `start`, `pause`, `stop` cancel
    the current task before anything else happens, so a replaced timer
    never ticks again. `start` and `resume` need a running event loop.
    """

    def __init__(
        self,
        duration: int = 90,
        *,
        on_complete: Optional[CompleteCallback] = None,
        interval: float = 1.0,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._duration = duration
        self._remaining = duration
        self._state = TimerState.IDLE
        self._on_complete = on_complete
        self._interval = interval
        self._sleep = sleep
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def is_resting(self) -> bool:
        return self._state is not TimerState.IDLE

    @property
    def has_tick_source(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, duration: int) -> None:
        if duration <= 0:
            raise ValueError("rest duration must be positive")
        self._cancel_task()
        self._duration = duration
        self._remaining = duration
        self._spawn()
        self._state = TimerState.RUNNING

    def pause(self) -> None:
        if self._state is not TimerState.RUNNING:
            return
        self._cancel_task()
        self._state = TimerState.PAUSED

    def resume(self) -> None:
        if self._state is not TimerState.PAUSED:
            return
        self._spawn()
        self._state = TimerState.RUNNING

    def stop(self) -> None:
        self._cancel_task()
        self._state = TimerState.IDLE
        self._remaining = self._duration

    def tick(self) -> None:
        """Advance one interval; expiring returns the timer to idle."""
        if self._state is not TimerState.RUNNING:
            return
        self._remaining -= 1
        if self._remaining > 0:
            return
        # reset first so the completion callback may start the next rest
        self.stop()
        self._notify()

    def _notify(self) -> None:
        if self._on_complete is None:
            return
        try:
            self._on_complete()
        except Exception:
            log.warning("rest timer completion signal failed", exc_info=True)

    def _spawn(self) -> None:
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def _run(self) -> None:
        me = asyncio.current_task()
        while self._state is TimerState.RUNNING and self._task is me:
            await self._sleep(self._interval)
            if self._task is not me:
                return
            self.tick()

    def _cancel_task(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        # expiry runs inside the task itself; it leaves the loop on its own
        if task is not current:
            task.cancel()
