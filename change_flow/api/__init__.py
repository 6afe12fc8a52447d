"""API routes and handlers."""

from .jobs import router as jobs_router
from .workers import router as workers_router
from .simulation import router as simulation_router
from .metrics import router as metrics_router
from .health import router as health_router

__all__ = [
    "jobs_router",
    "workers_router",
    "simulation_router",
    "metrics_router",
    "health_router"
]
