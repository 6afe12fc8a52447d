"""Simulation control endpoints: snapshot, ticking, reset and cadence."""

from fastapi import APIRouter, Depends, Query

from ..core.exceptions import ServiceError, service_error_handler
from ..models.schemas import DriverStatus, SimulationRun, SnapshotResponse, SpeedUpdate, TickResponse
from ..services import Scheduler, SimulationDriver
from ..services.defaults import DEFAULT_CHANGES_TEXT, DEFAULT_PEOPLE_TEXT
from .dependencies import get_driver, get_scheduler


router = APIRouter(prefix="/simulation", tags=["simulation"])


@router.get("", response_model=SnapshotResponse)
async def get_snapshot(
    scheduler: Scheduler = Depends(get_scheduler),
    driver: SimulationDriver = Depends(get_driver)
):
    """Full read-only state for rendering."""
    snapshot = scheduler.snapshot()
    snapshot["driver"] = driver.status()
    return snapshot


@router.post("/tick", response_model=TickResponse)
async def tick(
    count: int = Query(default=1, ge=1, le=10000),
    driver: SimulationDriver = Depends(get_driver)
):
    """Advance the simulation by ``count`` ticks right away; returns the last tick's report."""
    try:
        return driver.step(count).to_dict()
    except ServiceError as e:
        raise service_error_handler(e)


@router.post("/reset", response_model=DriverStatus)
async def reset_simulation(
    scheduler: Scheduler = Depends(get_scheduler),
    driver: SimulationDriver = Depends(get_driver)
):
    """Reset to the default changes and people and unpause."""
    scheduler.run()
    driver.resume()
    return driver.status()


@router.post("/run", response_model=DriverStatus)
async def run_simulation(
    run_data: SimulationRun,
    scheduler: Scheduler = Depends(get_scheduler),
    driver: SimulationDriver = Depends(get_driver)
):
    """Restart from text definitions; blank text falls back to the defaults."""
    scheduler.run(run_data.jobs_text, run_data.workers_text)
    driver.resume()
    return driver.status()


@router.post("/pause", response_model=DriverStatus)
async def toggle_pause(driver: SimulationDriver = Depends(get_driver)):
    driver.pause()
    return driver.status()


@router.post("/resume", response_model=DriverStatus)
async def resume(driver: SimulationDriver = Depends(get_driver)):
    driver.resume()
    return driver.status()


@router.post("/speed", response_model=DriverStatus)
async def set_speed(speed_data: SpeedUpdate, driver: SimulationDriver = Depends(get_driver)):
    try:
        driver.set_speed(speed_data.factor)
    except ServiceError as e:
        raise service_error_handler(e)
    return driver.status()


@router.post("/start", response_model=DriverStatus)
async def start_driver(driver: SimulationDriver = Depends(get_driver)):
    await driver.start()
    return driver.status()


@router.post("/stop", response_model=DriverStatus)
async def stop_driver(driver: SimulationDriver = Depends(get_driver)):
    await driver.stop()
    return driver.status()


@router.get("/defaults")
async def get_default_definitions():
    """Default definitions in the bulk text format."""
    return {"jobs_text": DEFAULT_CHANGES_TEXT, "workers_text": DEFAULT_PEOPLE_TEXT}
