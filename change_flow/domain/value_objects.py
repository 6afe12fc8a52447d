"""Domain value objects."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Point on the simulation plane, as read by the rendering collaborator."""
    x: float
    y: float

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def distance_to(self, other: "Position") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def step_towards(self, target: "Position", distance: float) -> "Position":
        """Move ``distance`` units along the straight line to ``target``."""
        angle = math.atan2(target.y - self.y, target.x - self.x)
        return Position(self.x + math.cos(angle) * distance, self.y + math.sin(angle) * distance)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


class IdGenerator:
    """Autoincrementing id source owned by the scheduler.

    Replaces a module-level counter; ``reset()`` restarts numbering.
    """

    def __init__(self, start: int = 1):
        if start < 0:
            raise ValueError("Id generator start cannot be negative")
        self._start = start
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def reset(self) -> None:
        self._next = self._start
