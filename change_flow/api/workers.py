"""Worker (person) endpoints."""

from typing import List
from fastapi import APIRouter, Depends

from ..core.exceptions import ServiceError, service_error_handler
from ..domain import Position, parse_skill_code
from ..models.schemas import CreatedResponse, LoadedResponse, TextLoad, WorkerCreate, WorkerResponse
from ..services import Scheduler
from .dependencies import get_scheduler


router = APIRouter(prefix="/workers", tags=["workers"])


@router.get("", response_model=List[WorkerResponse])
async def list_workers(scheduler: Scheduler = Depends(get_scheduler)):
    """Workers in registration (matching priority) order."""
    return [worker.to_dict() for worker in scheduler.workers]


@router.get("/{worker_id}", response_model=WorkerResponse)
async def get_worker(worker_id: int, scheduler: Scheduler = Depends(get_scheduler)):
    try:
        return scheduler.workers.get(worker_id).to_dict()
    except ServiceError as e:
        raise service_error_handler(e)


@router.post("", response_model=CreatedResponse)
async def create_worker(worker_data: WorkerCreate, scheduler: Scheduler = Depends(get_scheduler)):
    position = Position(worker_data.position.x, worker_data.position.y) if worker_data.position else None
    try:
        worker_id = scheduler.add_worker(worker_data.name, parse_skill_code(worker_data.skills), position)
    except ServiceError as e:
        raise service_error_handler(e)
    return {"id": worker_id}


@router.post("/load", response_model=LoadedResponse)
async def load_workers(load_data: TextLoad, scheduler: Scheduler = Depends(get_scheduler)):
    """Append workers from 'Name: Code' lines; malformed lines are skipped."""
    ids = scheduler.load_workers_from_text(load_data.text)
    return {"created": len(ids), "ids": ids}
