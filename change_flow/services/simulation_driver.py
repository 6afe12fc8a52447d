"""Background cadence for the scheduler: pause, speed and the tick loop."""

import asyncio
from typing import Any, Dict, Optional

import structlog

from ..core.config import Config, get_config
from ..core.exceptions import AlreadyBusy, ServiceError, ValidationError
from .scheduler import Scheduler, TickReport


logger = structlog.get_logger(__name__)


class SimulationDriver:
    """Calls ``scheduler.tick()`` on an asyncio timer.

    The scheduler owns no timing at all; pausing and speed only change how
    often this loop calls it. Ticks run on the event loop thread, so API
    reads never observe a half-applied tick.
    """

    def __init__(self, scheduler: Scheduler, config: Optional[Config] = None):
        self.scheduler = scheduler
        self.config = config or get_config()
        self.speed = self.config.default_speed
        self.paused = False
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self.last_report: Optional[TickReport] = None
        self.failure: Optional[ServiceError] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def interval(self) -> float:
        """Seconds between ticks at the current speed."""
        return 1.0 / (self.config.max_fps * self.speed)

    async def start(self):
        """Start the tick loop."""
        if self._running:
            logger.warning("Simulation driver already running")
            return

        self.failure = None
        self._running = True
        self._task = asyncio.create_task(self._tick_loop())
        logger.info("Simulation driver started", speed=self.speed)

    async def stop(self):
        """Stop the tick loop."""
        if not self._running:
            return

        self._running = False

        if self._task:
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
            self._task = None

        logger.info("Simulation driver stopped", tick=self.scheduler.tick_count)

    def pause(self) -> bool:
        """Toggle the paused flag; returns the new value."""
        self.paused = not self.paused
        logger.info("Simulation paused" if self.paused else "Simulation resumed")
        return self.paused

    def resume(self) -> None:
        self.paused = False

    def set_speed(self, factor: float) -> None:
        if factor <= 0:
            raise ValidationError(f"Speed factor must be positive, got {factor}", field="factor")
        self.speed = factor
        logger.info("Simulation speed changed", speed=factor)

    def step(self, count: int = 1) -> TickReport:
        """Run ``count`` ticks immediately, regardless of pause; returns the last report."""
        if count < 1:
            raise ValidationError("Tick count must be at least 1", field="count")
        report = None
        for _ in range(count):
            report = self.scheduler.tick()
        self.last_report = report
        return report

    def status(self) -> Dict[str, Any]:
        return {
            "running": self._running,
            "paused": self.paused,
            "speed": self.speed,
            "interval_seconds": self.interval,
            "tick": self.scheduler.tick_count,
            "failure": self.failure.to_dict() if self.failure else None,
        }

    async def _tick_loop(self):
        while self._running:
            try:
                await asyncio.sleep(self.interval)

                if not self._running:
                    break
                if self.paused:
                    continue

                self.last_report = self.scheduler.tick()

            except asyncio.CancelledError:
                logger.info("Tick loop cancelled")
                break
            except AlreadyBusy as e:
                logger.exception("Scheduler invariant broken, tick loop stopped",
                                 tick=self.scheduler.tick_count, worker_id=e.worker_id, job_id=e.job_id)
                self.failure = e
                self._running = False
                break
            except Exception as e:
                logger.error("Tick failed", error=str(e), tick=self.scheduler.tick_count)
