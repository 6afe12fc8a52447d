"""Dependency injection container."""

from typing import Optional
import structlog

from .config import Config


class Dependencies:
    """Holds the single scheduler and the driver that paces it."""

    def __init__(self, config: Config):
        from ..services import Scheduler, SimulationDriver

        self.config = config
        self.logger = structlog.get_logger(__name__)
        self.scheduler = Scheduler(config)
        self.driver = SimulationDriver(self.scheduler, config)

    async def initialize(self):
        """Load the starting roster and start ticking if configured to."""
        if self.config.load_defaults_on_start:
            self.scheduler.run()
        if self.config.autostart_driver:
            await self.driver.start()
        self.logger.info("Dependencies initialized", autostart=self.config.autostart_driver)

    async def cleanup(self):
        await self.driver.stop()
        self.logger.info("Dependencies cleaned up")


# Global dependencies instance
_dependencies: Optional[Dependencies] = None


def get_dependencies() -> Dependencies:
    """Get the global dependencies instance."""
    global _dependencies
    if _dependencies is None:
        from .config import get_config
        _dependencies = Dependencies(get_config())
    return _dependencies


def reset_dependencies() -> None:
    global _dependencies
    _dependencies = None
