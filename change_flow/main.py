"""
Change flow scheduler service.

Exposes the discrete-step office simulation to a rendering client:
- Scheduler core (jobs, workers, completion slots, metrics) with no timing
- Driver that paces ticks and owns pause / speed
- Thin HTTP layer for snapshots and commands
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .core.config import get_config
from .core.dependencies import get_dependencies
from .core.exceptions import ServiceError, service_error_handler
from .core.logging import configure_logging

from .api.jobs import router as jobs_router
from .api.workers import router as workers_router
from .api.simulation import router as simulation_router
from .api.metrics import router as metrics_router
from .api.health import router as health_router


logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting change flow scheduler", version=app.version)

    deps = get_dependencies()
    await deps.initialize()

    logger.info("Application started successfully")

    yield

    await deps.cleanup()
    logger.info("Application shutdown completed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_config()
    configure_logging(config.log_level, config.log_json)

    app = FastAPI(
        title="Change Flow Scheduler",
        version="1.0.0",
        description="Resource-constrained task-sequence scheduler for the change flow simulation",
        lifespan=lifespan
    )

    # The rendering client is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request, exc: ServiceError):
        http_exc = service_error_handler(exc)
        return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})

    app.include_router(health_router)
    app.include_router(simulation_router)
    app.include_router(jobs_router)
    app.include_router(workers_router)
    app.include_router(metrics_router)

    return app


app = create_app()


def run():
    """Console entry point."""
    config = get_config()
    uvicorn.run(
        "change_flow.main:app",
        host=config.host,
        port=config.port,
        reload=config.reload,
        log_config=None  # Use our custom logging
    )


if __name__ == "__main__":
    run()
