"""Domain entities: jobs (changes) and workers (people)."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .skills import Skill, COMPLETED_COLOR, FALLBACK_COLOR, format_skill_code, skill_color
from .value_objects import Position


class JobStatus(str, Enum):
    """Job lifecycle status."""
    NOT_STARTED = "notStarted"
    WAITING = "waiting"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"
    COMPLETED_NO_SLOT = "completedNoSlot"
    DONE = "done"


FINISHED_STATUSES = (JobStatus.COMPLETED, JobStatus.COMPLETED_NO_SLOT, JobStatus.DONE)


@dataclass
class Worker:
    """A person with a fixed skill set, exclusively assignable to one task."""
    id: int
    name: str
    skills: List[Skill]
    position: Position = field(default_factory=lambda: Position(0.0, 0.0))
    busy: bool = False
    current_task: Optional[Skill] = None
    current_job_id: Optional[int] = None
    progress: int = 0

    def can_perform(self, skill: Skill) -> bool:
        return skill in self.skills

    def is_available_for(self, skill: Skill) -> bool:
        return not self.busy and self.can_perform(skill)

    def assign(self, job_id: int, task: Skill) -> None:
        self.busy = True
        self.current_task = task
        self.current_job_id = job_id
        self.progress = 0

    def release(self) -> None:
        self.busy = False
        self.current_task = None
        self.current_job_id = None
        self.progress = 0

    @property
    def color(self) -> str:
        return skill_color(self.skills[0]) if self.skills else FALLBACK_COLOR

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "skills": [skill.value for skill in self.skills],
            "skill_code": format_skill_code(self.skills),
            "busy": self.busy,
            "current_task": self.current_task.value if self.current_task else None,
            "current_job_id": self.current_job_id,
            "progress": self.progress,
            "position": self.position.to_dict(),
            "color": self.color,
        }


@dataclass
class Job:
    """A change needing an ordered sequence of tasks performed in turn.

    Workers are referenced by id only; the scheduler resolves them.
    """
    id: int
    name: str
    task_sequence: List[Skill]
    position: Position = field(default_factory=lambda: Position(0.0, 0.0))
    status: JobStatus = JobStatus.NOT_STARTED
    completed_count: int = 0
    current_task: Optional[Skill] = None
    current_worker_id: Optional[int] = None
    task_progress: int = 0
    destination: Optional[Position] = None
    state_start_tick: int = 0

    @property
    def next_task(self) -> Optional[Skill]:
        """Skill required next, or None once every task is done."""
        if self.completed_count < len(self.task_sequence):
            return self.task_sequence[self.completed_count]
        return None

    @property
    def is_finished(self) -> bool:
        return self.completed_count == len(self.task_sequence)

    @property
    def progress_label(self) -> str:
        return f"{self.completed_count}/{len(self.task_sequence)}"

    def _set_status(self, status: JobStatus, tick: int) -> None:
        if status != self.status:
            self.status = status
            self.state_start_tick = tick

    def start_task(self, worker_id: int, anchor: Position, tick: int) -> None:
        """Begin the next task with the given worker."""
        self.current_task = self.next_task
        self.current_worker_id = worker_id
        self.task_progress = 0
        self.position = anchor
        # every task start restarts the state clock, even straight from another task
        self.status = JobStatus.IN_PROGRESS
        self.state_start_tick = tick

    def wait(self, tick: int) -> None:
        self.current_task = None
        self.current_worker_id = None
        self._set_status(JobStatus.WAITING, tick)

    def advance(self, threshold: int) -> bool:
        """Add one unit of progress; True when the current task reached the threshold."""
        self.task_progress += 1
        return self.task_progress >= threshold

    def finish_task(self) -> None:
        self.completed_count += 1
        self.current_task = None
        self.current_worker_id = None
        self.task_progress = 0

    def complete(self, destination: Position, tick: int) -> None:
        self.destination = destination
        self._set_status(JobStatus.COMPLETED, tick)

    def pin_without_slot(self, tick: int) -> None:
        self.destination = None
        self._set_status(JobStatus.COMPLETED_NO_SLOT, tick)

    def move(self, speed: float, tick: int) -> bool:
        """Travel toward the destination; True once it has arrived and is done."""
        if self.position.distance_to(self.destination) > speed:
            self.position = self.position.step_towards(self.destination, speed)
            return False
        self.position = self.destination
        self._set_status(JobStatus.DONE, tick)
        return True

    @property
    def color(self) -> str:
        if self.status in FINISHED_STATUSES:
            return COMPLETED_COLOR
        if self.status == JobStatus.IN_PROGRESS and self.current_task:
            return skill_color(self.current_task)
        return skill_color(self.next_task)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "task_sequence": [skill.value for skill in self.task_sequence],
            "task_code": format_skill_code(self.task_sequence),
            "completed_count": self.completed_count,
            "progress": self.progress_label,
            "task_progress": self.task_progress,
            "current_task": self.current_task.value if self.current_task else None,
            "current_worker_id": self.current_worker_id,
            "position": self.position.to_dict(),
            "destination": self.destination.to_dict() if self.destination else None,
            "state_start_tick": self.state_start_tick,
            "color": self.color,
        }
