"""Parsing of the ``Name: LetterCode`` bulk definition format."""

from dataclasses import dataclass
from typing import List
import structlog

from ..domain import Skill, parse_skill_code


logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Definition:
    name: str
    skills: List[Skill]


def parse_line(line: str):
    """Parse one record; returns None for anything malformed."""
    parts = line.split(":")
    if len(parts) != 2:
        return None
    name = parts[0].strip()
    skills = parse_skill_code(parts[1])
    if not name or not skills:
        return None
    return Definition(name=name, skills=skills)


def parse_definitions(text: str) -> List[Definition]:
    """Parse newline-delimited records, silently skipping malformed lines."""
    definitions = []
    for line in (text or "").splitlines():
        if not line.strip():
            continue
        definition = parse_line(line)
        if definition is None:
            logger.debug("Skipping malformed definition line", line=line)
            continue
        definitions.append(definition)
    return definitions
