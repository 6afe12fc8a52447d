"""Job (change) endpoints."""

from typing import List, Optional
from fastapi import APIRouter, Depends

from ..core.exceptions import ServiceError, service_error_handler
from ..domain import Position, parse_skill_code
from ..models.schemas import (
    CreatedResponse, JobCreate, JobResponse, LoadedResponse, RandomJobCreate, TextLoad
)
from ..services import Scheduler
from .dependencies import get_scheduler


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=List[JobResponse])
async def list_jobs(scheduler: Scheduler = Depends(get_scheduler)):
    """Active jobs in priority order."""
    return [job.to_dict() for job in scheduler.jobs]


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, scheduler: Scheduler = Depends(get_scheduler)):
    try:
        return scheduler.get_job(job_id).to_dict()
    except ServiceError as e:
        raise service_error_handler(e)


@router.post("", response_model=CreatedResponse)
async def create_job(job_data: JobCreate, scheduler: Scheduler = Depends(get_scheduler)):
    """Append a job given as a letter code."""
    position = Position(job_data.position.x, job_data.position.y) if job_data.position else None
    try:
        job_id = scheduler.add_job(parse_skill_code(job_data.tasks), job_data.name, position)
    except ServiceError as e:
        raise service_error_handler(e)
    return {"id": job_id}


@router.post("/random", response_model=CreatedResponse)
async def create_random_job(
    job_data: Optional[RandomJobCreate] = None,
    scheduler: Scheduler = Depends(get_scheduler)
):
    """Append a job with random tasks drawn from the current staff's skills."""
    try:
        job_id = scheduler.add_random_job(job_data.length if job_data else None)
    except ServiceError as e:
        raise service_error_handler(e)
    return {"id": job_id}


@router.post("/load", response_model=LoadedResponse)
async def load_jobs(load_data: TextLoad, scheduler: Scheduler = Depends(get_scheduler)):
    """Append jobs from 'Name: Code' lines; malformed lines are skipped."""
    ids = scheduler.load_jobs_from_text(load_data.text)
    return {"created": len(ids), "ids": ids}
