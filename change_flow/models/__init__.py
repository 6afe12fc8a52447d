"""Request and response schemas for the HTTP surface."""

from .schemas import (
    PositionIn,
    JobCreate,
    RandomJobCreate,
    WorkerCreate,
    TextLoad,
    SimulationRun,
    SpeedUpdate,
    JobResponse,
    WorkerResponse,
    CreatedResponse,
    LoadedResponse,
    MetricsResponse,
    TickResponse,
    DriverStatus,
    SnapshotResponse
)

__all__ = [
    "PositionIn",
    "JobCreate",
    "RandomJobCreate",
    "WorkerCreate",
    "TextLoad",
    "SimulationRun",
    "SpeedUpdate",
    "JobResponse",
    "WorkerResponse",
    "CreatedResponse",
    "LoadedResponse",
    "MetricsResponse",
    "TickResponse",
    "DriverStatus",
    "SnapshotResponse"
]
