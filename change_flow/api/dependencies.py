"""FastAPI dependency injection helpers."""

from ..core.dependencies import get_dependencies
from ..services import Scheduler, SimulationDriver


async def get_scheduler() -> Scheduler:
    """Get the scheduler instance."""
    return get_dependencies().scheduler


async def get_driver() -> SimulationDriver:
    """Get the simulation driver instance."""
    return get_dependencies().driver
