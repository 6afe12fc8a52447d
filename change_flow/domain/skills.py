"""Skill (task type) enumeration and the letter-code shorthand."""

from enum import Enum
from typing import Iterable, List


class Skill(str, Enum):
    """Closed set of task categories; also used as worker capability tags."""
    FRONT_END = "Front-End"
    BACK_END = "Back-End"
    DB = "DB"
    TESTING = "Testing"
    OPS = "Ops"


SKILL_LETTERS = {
    "F": Skill.FRONT_END,
    "B": Skill.BACK_END,
    "D": Skill.DB,
    "T": Skill.TESTING,
    "O": Skill.OPS,
}

_LETTER_BY_SKILL = {skill: letter for letter, skill in SKILL_LETTERS.items()}

SKILL_COLORS = {
    Skill.FRONT_END: "lightblue",
    Skill.BACK_END: "lightcoral",
    Skill.DB: "lightgreen",
    Skill.TESTING: "lightgoldenrodyellow",
    Skill.OPS: "plum",
}

COMPLETED_COLOR = "gray"
FALLBACK_COLOR = "lightgray"


def parse_skill_code(code: str) -> List[Skill]:
    """Parse a letter code such as ``"BBFFDTTO"`` into an ordered skill list.

    Whitespace is ignored and unknown letters are dropped silently, so the
    result may be empty.
    """
    return [
        SKILL_LETTERS[char.upper()]
        for char in code
        if not char.isspace() and char.upper() in SKILL_LETTERS
    ]


def skill_letter(skill: Skill) -> str:
    """Return the single-letter code of a skill."""
    return _LETTER_BY_SKILL[Skill(skill)]


def format_skill_code(skills: Iterable[Skill]) -> str:
    """Inverse of :func:`parse_skill_code`."""
    return "".join(skill_letter(skill) for skill in skills)


def skill_color(skill) -> str:
    return SKILL_COLORS.get(skill, FALLBACK_COLOR)
