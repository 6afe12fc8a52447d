"""Discrete-step scheduler driving changes through their task sequences."""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
import structlog

from ..core.config import Config, get_config
from ..core.exceptions import InvalidSkillSet, NotFoundError, SlotPoolExhausted, ValidationError
from ..domain import IdGenerator, Job, JobStatus, Position, Skill
from . import defaults
from .metrics_service import MetricsAggregator
from .slot_queue import SlotQueue
from .text_loader import parse_definitions
from .worker_registry import WorkerRegistry


logger = structlog.get_logger(__name__)


@dataclass
class TickReport:
    """What happened during one tick."""
    tick: int
    started: List[int] = field(default_factory=list)
    finished_tasks: List[int] = field(default_factory=list)
    completed: List[int] = field(default_factory=list)
    removed: List[int] = field(default_factory=list)
    errors: List[SlotPoolExhausted] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick": self.tick,
            "started": self.started,
            "finished_tasks": self.finished_tasks,
            "completed": self.completed,
            "removed": self.removed,
            "errors": [error.to_dict() for error in self.errors],
        }


class Scheduler:
    """Owns jobs, workers, completion slots and metrics; advanced by ``tick()``.

    Jobs are stepped in insertion order and that order is the assignment
    priority: an earlier job always gets first pick of free workers, and
    workers are offered in registration order. Nothing here is fair under
    contention; a late job can wait forever while earlier ones keep
    re-taking the same worker.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        slot_queue: Optional[SlotQueue] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or get_config()
        self._job_ids = IdGenerator()
        self.workers = WorkerRegistry(IdGenerator())
        self.slots = slot_queue or SlotQueue(
            self.config.slot_x, self.config.slot_top_y, self.config.slot_spacing
        )
        self.metrics = MetricsAggregator()
        self._rng = rng or random.Random()
        self._jobs: List[Job] = []
        self.tick_count = 0
        self._dynamic_counter = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def jobs(self) -> List[Job]:
        return list(self._jobs)

    def get_job(self, job_id: int) -> Job:
        for job in self._jobs:
            if job.id == job_id:
                return job
        raise NotFoundError("Job", job_id)

    def snapshot(self) -> Dict[str, Any]:
        """Read-only view of the whole simulation for the rendering side."""
        return {
            "tick": self.tick_count,
            "jobs": [job.to_dict() for job in self._jobs],
            "workers": [worker.to_dict() for worker in self.workers],
            "slots": {
                "remaining": self.slots.remaining,
                "capacity": self.slots.capacity,
            },
            "metrics": self.metrics.summary().to_dict(),
        }

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_job(
        self,
        task_sequence: Iterable[Skill],
        name: Optional[str] = None,
        position: Optional[Position] = None,
    ) -> int:
        """Create a job at the end of the priority list and return its id."""
        tasks = [Skill(task) for task in task_sequence]
        if not tasks:
            raise InvalidSkillSet("Job", name)

        job_id = self._job_ids.next()
        job = Job(
            id=job_id,
            name=name or f"Change {job_id}",
            task_sequence=tasks,
            position=position or defaults.DYNAMIC_CHANGE_POSITION,
            state_start_tick=self.tick_count,
        )
        self._jobs.append(job)
        self.metrics.register(job)
        logger.info("Job added", job_id=job_id, name=job.name, tasks=len(tasks))
        return job_id

    def add_worker(
        self,
        name: str,
        skills: Iterable[Skill],
        position: Optional[Position] = None,
    ) -> int:
        if position is None:
            position = Position(
                defaults.PEOPLE_START_X + defaults.PEOPLE_SPACING_X * len(self.workers),
                defaults.PEOPLE_ROW_Y,
            )
        worker_id = self.workers.add_worker(name, skills, position)
        logger.info("Worker added", worker_id=worker_id, name=name)
        return worker_id

    def add_random_job(self, length: Optional[int] = None) -> int:
        """Add a "Dynamic N" job drawn from the skills the current staff hold."""
        skills = self.workers.skills_in_use()
        if not skills:
            raise InvalidSkillSet("Job", f"Dynamic {self._dynamic_counter + 1}")

        if length is None:
            length = self.config.random_job_length
        if length < 1:
            raise ValidationError("Random job length must be at least 1", field="length")
        self._dynamic_counter += 1
        sequence = [self._rng.choice(skills) for _ in range(length)]
        return self.add_job(sequence, f"Dynamic {self._dynamic_counter}", defaults.DYNAMIC_CHANGE_POSITION)

    def load_jobs_from_text(self, text: str) -> List[int]:
        """Append one job per well-formed ``Name: Code`` line."""
        job_ids = []
        for index, definition in enumerate(parse_definitions(text)):
            position = Position(
                defaults.CHANGES_START_X,
                defaults.CHANGES_START_Y + index * defaults.CHANGES_SPACING_Y,
            )
            job_ids.append(self.add_job(definition.skills, definition.name, position))
        return job_ids

    def load_workers_from_text(self, text: str) -> List[int]:
        """Append one worker per well-formed ``Name: Code`` line."""
        return [
            self.add_worker(definition.name, definition.skills)
            for definition in parse_definitions(text)
        ]

    def load_defaults(self) -> None:
        self._add_default_changes()
        self._add_default_people()

    def _add_default_changes(self) -> None:
        for index, (name, tasks) in enumerate(defaults.DEFAULT_CHANGES):
            self.add_job(tasks, name, defaults.default_change_position(index))

    def _add_default_people(self) -> None:
        for name, skills, x in defaults.DEFAULT_PEOPLE:
            self.add_worker(name, skills, Position(x, defaults.PEOPLE_ROW_Y))

    def run(self, jobs_text: str = "", workers_text: str = "") -> None:
        """Start over from text definitions, falling back to defaults for blank text."""
        self.reset()

        if jobs_text and jobs_text.strip():
            self.load_jobs_from_text(jobs_text)
        else:
            self._add_default_changes()

        if workers_text and workers_text.strip():
            self.load_workers_from_text(workers_text)
        else:
            self._add_default_people()

        logger.info("Simulation loaded", jobs=len(self._jobs), workers=len(self.workers))

    def reset(self) -> None:
        """Clear every job, worker and metric and refill the slot pool."""
        self._jobs = []
        self.workers.clear()
        self.metrics.reset()
        self.slots.reseed()
        self._job_ids.reset()
        self.tick_count = 0
        self._dynamic_counter = 0
        logger.info("Scheduler reset")

    # ------------------------------------------------------------------
    # Tick loop
    # ------------------------------------------------------------------

    def tick(self) -> TickReport:
        """Advance every active job by one step.

        Slot exhaustion does not abort the tick; it is reported in
        ``TickReport.errors`` and the job is parked in COMPLETED_NO_SLOT.
        """
        self.tick_count += 1
        report = TickReport(tick=self.tick_count)

        for job in self._jobs:
            self._step(job, report)

        self.metrics.record_tick(self._jobs)

        remaining = []
        for job in self._jobs:
            if job.status == JobStatus.DONE:
                self.metrics.finalize(job.id)
                report.removed.append(job.id)
            else:
                remaining.append(job)
        self._jobs = remaining

        for error in report.errors:
            logger.warning("Completion slot pool exhausted", job_id=error.job_id,
                           capacity=error.capacity, tick=self.tick_count)
        return report

    def _step(self, job: Job, report: TickReport) -> None:
        tick = self.tick_count

        if job.status == JobStatus.COMPLETED:
            if job.move(self.config.move_speed, tick):
                logger.debug("Job done", job_id=job.id, tick=tick)
            return

        if job.status in (JobStatus.COMPLETED_NO_SLOT, JobStatus.DONE):
            return

        if job.status == JobStatus.IN_PROGRESS:
            worker_id = job.current_worker_id
            self.workers.record_progress(worker_id)
            if not job.advance(self.config.step_threshold):
                return

            job.finish_task()
            self.workers.release(worker_id)
            report.finished_tasks.append(job.id)

            if job.is_finished:
                self._complete(job, report)
            elif not self._try_start(job, report):
                job.wait(tick)
            return

        # NOT_STARTED or WAITING
        if not self._try_start(job, report) and job.status == JobStatus.NOT_STARTED:
            job.wait(tick)

    def _try_start(self, job: Job, report: TickReport) -> bool:
        """Match the job's next task against the first free capable worker."""
        task = job.next_task
        worker_id = self.workers.find_available(task)
        if worker_id is None:
            return False

        self.workers.assign(worker_id, job.id, task)
        worker = self.workers.get(worker_id)
        job.start_task(worker_id, worker.position.offset(dy=self.config.job_anchor_offset), self.tick_count)
        report.started.append(job.id)
        logger.debug("Task started", job_id=job.id, worker_id=worker_id,
                     task=task.value, tick=self.tick_count)
        return True

    def _complete(self, job: Job, report: TickReport) -> None:
        try:
            destination = self.slots.pop()
        except SlotPoolExhausted:
            job.pin_without_slot(self.tick_count)
            report.errors.append(SlotPoolExhausted(self.slots.capacity, job_id=job.id))
            return

        job.complete(destination, self.tick_count)
        report.completed.append(job.id)
        logger.info("Job completed", job_id=job.id, name=job.name, tick=self.tick_count,
                    destination=destination.to_dict())
