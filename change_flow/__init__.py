"""Change flow: a discrete-step scheduler for typed task sequences and skilled workers."""

from .services.scheduler import Scheduler, TickReport
from .services.simulation_driver import SimulationDriver
from .core.config import Config, get_config

__version__ = "1.0.0"

__all__ = ["Scheduler", "TickReport", "SimulationDriver", "Config", "get_config"]
