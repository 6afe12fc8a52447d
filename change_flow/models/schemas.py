"""Pydantic schemas for request/response validation."""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


# Request schemas
class PositionIn(BaseModel):
    x: float
    y: float


class JobCreate(BaseModel):
    tasks: str = Field(..., min_length=1, description="Letter code of the task sequence, e.g. BBFFDTTO")
    name: Optional[str] = Field(default=None, description="Display name; defaults to 'Change <id>'")
    position: Optional[PositionIn] = None


class RandomJobCreate(BaseModel):
    length: Optional[int] = Field(default=None, ge=1, le=50, description="Number of tasks")


class WorkerCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Worker name")
    skills: str = Field(..., min_length=1, description="Letter code of the skill set, e.g. FBO")
    position: Optional[PositionIn] = None


class TextLoad(BaseModel):
    text: str = Field(default="", description="Newline-delimited 'Name: LetterCode' records")


class SimulationRun(BaseModel):
    jobs_text: str = Field(default="", description="Change definitions; blank means defaults")
    workers_text: str = Field(default="", description="People definitions; blank means defaults")


class SpeedUpdate(BaseModel):
    factor: float = Field(..., gt=0, description="Cadence multiplier (2 = fast, 0.5 = slow)")


# Response schemas
class PositionOut(BaseModel):
    x: float
    y: float


class JobResponse(BaseModel):
    id: int
    name: str
    status: str
    task_sequence: List[str]
    task_code: str
    completed_count: int
    progress: str
    task_progress: int
    current_task: Optional[str] = None
    current_worker_id: Optional[int] = None
    position: PositionOut
    destination: Optional[PositionOut] = None
    state_start_tick: int
    color: str


class WorkerResponse(BaseModel):
    id: int
    name: str
    skills: List[str]
    skill_code: str
    busy: bool
    current_task: Optional[str] = None
    current_job_id: Optional[int] = None
    progress: int
    position: PositionOut
    color: str


class CreatedResponse(BaseModel):
    id: int


class LoadedResponse(BaseModel):
    created: int
    ids: List[int]


class MetricsRowResponse(BaseModel):
    job_id: int
    name: str
    not_started: int
    waiting: int
    in_progress: int
    completed: int
    total: int
    status: str


class MetricsResponse(BaseModel):
    rows: List[MetricsRowResponse]
    overall_total: int


class TickResponse(BaseModel):
    tick: int
    started: List[int]
    finished_tasks: List[int]
    completed: List[int]
    removed: List[int]
    errors: List[Dict[str, Any]]


class DriverStatus(BaseModel):
    running: bool
    paused: bool
    speed: float
    interval_seconds: float
    tick: int
    failure: Optional[Dict[str, Any]] = None


class SnapshotResponse(BaseModel):
    tick: int
    jobs: List[JobResponse]
    workers: List[WorkerResponse]
    slots: Dict[str, int]
    metrics: MetricsResponse
    driver: DriverStatus
