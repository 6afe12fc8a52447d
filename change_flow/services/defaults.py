"""Default roster and change set of the office simulation."""

from ..domain import Position, Skill


F, B, D, T, O = Skill.FRONT_END, Skill.BACK_END, Skill.DB, Skill.TESTING, Skill.OPS

_BOTH = [F, F, B, B, D, T, T, O]
_BACK = [B, B, D, D, T, T, O, O]
_DB_ONLY = [D, D, D, T, O]

DEFAULT_CHANGES = [
    ("Both 1", _BOTH),
    ("Back 1", _BACK),
    ("DB-only 1", _DB_ONLY),
    ("Both 2", _BOTH),
    ("Back 2", _BACK),
    ("DB-only 2", _DB_ONLY),
    ("Both 3", _BOTH),
    ("Back 3", _BACK),
    ("DB-only 3", _DB_ONLY),
]

# (name, skills, x); people stand in one row
DEFAULT_PEOPLE = [
    ("Al", [F], 150),
    ("Alice", [F], 250),
    ("Bob", [B], 400),
    ("Charlie", [D], 600),
    ("Dana", [T], 800),
    ("Dan", [T], 900),
    ("Ellen", [O], 1000),
]

PEOPLE_ROW_Y = 100
PEOPLE_START_X = 150
PEOPLE_SPACING_X = 100

CHANGES_START_X = 50
CHANGES_START_Y = 150
CHANGES_SPACING_Y = 80

DYNAMIC_CHANGE_POSITION = Position(50, 40)

DEFAULT_CHANGES_TEXT = """Both 1: BBFFDTTO
Back 1: BBDBTTOO
DB-only 1: DDDTO
Both 2: BBFFDTTO
Back 2: BBDBTTOO
DB-only 2: DDDTO
Both 3: BBFFDTTO
Back 3: BBDBTTOO
DB-only 3: DDDTO"""

DEFAULT_PEOPLE_TEXT = """Al: F
Alice: F
Bob: B
Charlie: D
Dana: T
Dan: T
Ellen: O"""


def default_change_position(index: int) -> Position:
    """Three-column grid used for the built-in change set."""
    return Position(50 + (index % 3) * 50, 50 + (index // 3) * 80 + 100)
