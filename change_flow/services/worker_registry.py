"""Worker (person) registry and assignment bookkeeping."""

from typing import Dict, Iterable, List, Optional
import structlog

from ..core.exceptions import AlreadyBusy, InvalidSkillSet, NotFoundError
from ..domain import IdGenerator, Position, Skill, Worker


logger = structlog.get_logger(__name__)


class WorkerRegistry:
    """Holds workers in registration order and flips their busy state.

    Registration order is the matching priority: ``find_available`` always
    returns the earliest registered free worker holding the skill.
    """

    def __init__(self, id_generator: Optional[IdGenerator] = None):
        self._ids = id_generator or IdGenerator()
        self._workers: Dict[int, Worker] = {}

    def add_worker(self, name: str, skills: Iterable[Skill], position: Optional[Position] = None) -> int:
        """Register a worker and return its id."""
        unique_skills: List[Skill] = []
        for skill in skills:
            skill = Skill(skill)
            if skill not in unique_skills:
                unique_skills.append(skill)

        if not unique_skills:
            raise InvalidSkillSet("Worker", name)

        worker_id = self._ids.next()
        self._workers[worker_id] = Worker(
            id=worker_id,
            name=name,
            skills=unique_skills,
            position=position or Position(0.0, 0.0),
        )
        logger.debug("Worker registered", worker_id=worker_id, name=name,
                     skills=[s.value for s in unique_skills])
        return worker_id

    def get(self, worker_id: int) -> Worker:
        try:
            return self._workers[worker_id]
        except KeyError:
            raise NotFoundError("Worker", worker_id)

    def all(self) -> List[Worker]:
        return list(self._workers.values())

    def find_available(self, skill: Skill) -> Optional[int]:
        """First free worker, in registration order, that holds ``skill``."""
        for worker in self._workers.values():
            if worker.is_available_for(skill):
                return worker.id
        return None

    def assign(self, worker_id: int, job_id: int, task: Skill) -> None:
        worker = self.get(worker_id)
        if worker.busy:
            logger.error("Worker already busy", worker_id=worker_id,
                         current_job_id=worker.current_job_id, job_id=job_id)
            raise AlreadyBusy(worker_id, worker.current_job_id)
        worker.assign(job_id, task)

    def release(self, worker_id: int) -> None:
        self.get(worker_id).release()

    def record_progress(self, worker_id: int) -> None:
        self.get(worker_id).progress += 1

    def skills_in_use(self) -> List[Skill]:
        """Union of all registered skills, in first-seen order."""
        seen: List[Skill] = []
        for worker in self._workers.values():
            for skill in worker.skills:
                if skill not in seen:
                    seen.append(skill)
        return seen

    def clear(self) -> None:
        self._workers.clear()
        self._ids.reset()

    def __len__(self) -> int:
        return len(self._workers)

    def __iter__(self):
        return iter(self._workers.values())
