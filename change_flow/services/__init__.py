"""Scheduling services."""

from .worker_registry import WorkerRegistry
from .slot_queue import SlotQueue
from .metrics_service import MetricsAggregator, MetricsRecord, MetricsSummary
from .scheduler import Scheduler, TickReport
from .simulation_driver import SimulationDriver

__all__ = [
    "WorkerRegistry",
    "SlotQueue",
    "MetricsAggregator",
    "MetricsRecord",
    "MetricsSummary",
    "Scheduler",
    "TickReport",
    "SimulationDriver"
]
