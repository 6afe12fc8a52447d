"""Domain models for the change flow scheduler."""

from .skills import Skill, parse_skill_code, format_skill_code, skill_letter
from .entities import Job, Worker, JobStatus
from .value_objects import Position, IdGenerator

__all__ = [
    "Skill",
    "parse_skill_code",
    "format_skill_code",
    "skill_letter",
    "Job",
    "Worker",
    "JobStatus",
    "Position",
    "IdGenerator"
]
