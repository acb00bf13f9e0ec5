"""Beat cycle engine — the metronome that walks through a tāl's matras.

The engine runs on the asyncio event loop. While running it owns exactly one
task that sleeps for ``60 / tempo`` seconds and then advances the beat index
modulo the tāl's matra count. Tempo and matras are captured when the task is
scheduled; changing either while running tears the task down and schedules a
new one.

States::

    Stopped --start()--> Running --stop()--> Stopped
    Running --tick--> Running   (beat_index advances)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from lotus_riyaaz.tala.models import TaalDefinition

logger = logging.getLogger(__name__)

TickHandler = Callable[[int], None]
SleepFn = Callable[[float], Awaitable[object]]


class BeatCycleEngine:
    """Periodic beat counter bound to a tāl and a tempo."""

    def __init__(
        self,
        taal: TaalDefinition,
        tempo: int,
        *,
        sleep: SleepFn = asyncio.sleep,
    ):
        self._taal = taal
        self._tempo = tempo
        self._sleep = sleep
        self._beat_index = 0
        self._handlers: list[TickHandler] = []
        self._task: asyncio.Task | None = None

    # -- state ---------------------------------------------------------------

    @property
    def beat_index(self) -> int:
        return self._beat_index

    @property
    def running(self) -> bool:
        return self._task is not None

    @property
    def taal(self) -> TaalDefinition:
        return self._taal

    @property
    def tempo(self) -> int:
        return self._tempo

    @property
    def period_s(self) -> float:
        """Seconds between ticks at the current tempo."""
        if self._tempo <= 0:
            raise ValueError(f"Tempo must be positive, got {self._tempo}")
        return 60.0 / self._tempo

    # -- subscriptions -------------------------------------------------------

    def on_tick(self, handler: TickHandler) -> TickHandler:
        """Register a callback receiving the new beat index after each tick."""
        self._handlers.append(handler)
        return handler

    def remove_handler(self, handler: TickHandler) -> None:
        self._handlers.remove(handler)

    # -- control -------------------------------------------------------------

    def tick(self) -> int:
        """Advance one beat and notify handlers. Returns the new index."""
        self._beat_index = (self._beat_index + 1) % self._taal.matras
        for handler in list(self._handlers):
            handler(self._beat_index)
        return self._beat_index

    def start(self) -> None:
        """Begin ticking. A no-op if already running.

        Must be called from within a running event loop.

        Raises:
            ValueError: If the tempo is not positive.
        """
        if self._task is not None:
            return
        period = self.period_s
        self._task = asyncio.get_running_loop().create_task(self._run(period))
        self._task.add_done_callback(self._on_task_done)
        logger.debug(
            "Beat cycle started: %s at %d bpm (%.3fs per beat)",
            self._taal.name, self._tempo, period,
        )

    def stop(self) -> None:
        """Stop ticking. The beat index keeps its last value."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        logger.debug("Beat cycle stopped at beat %d", self._beat_index)

    def toggle(self) -> bool:
        """Start if stopped, stop if running. Returns the new running state."""
        if self.running:
            self.stop()
        else:
            self.start()
        return self.running

    def reconfigure(
        self,
        *,
        tempo: int | None = None,
        taal: TaalDefinition | None = None,
    ) -> None:
        """Change tempo and/or tāl, rescheduling if currently running."""
        if tempo is not None and tempo <= 0:
            raise ValueError(f"Tempo must be positive, got {tempo}")
        was_running = self.running
        if was_running:
            self.stop()

        if tempo is not None:
            self._tempo = tempo
        if taal is not None:
            self._taal = taal
            self._beat_index %= taal.matras

        if was_running:
            self.start()
            logger.info(
                "Beat cycle rescheduled: %s at %d bpm", self._taal.name, self._tempo,
            )

    # -- internals -----------------------------------------------------------

    async def _run(self, period: float) -> None:
        while True:
            await self._sleep(period)
            self.tick()

    def _on_task_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        if self._task is task:
            self._task = None
        exc = task.exception()
        if exc is not None:
            logger.error("Beat cycle stopped by a tick handler error", exc_info=exc)
