"""Bounded pool of destination slots for completed jobs."""

from collections import deque
from typing import Deque, List

from ..core.exceptions import SlotPoolExhausted
from ..domain import Position


def build_slots(x: float, top_y: float, spacing: float) -> List[Position]:
    """Descending column of slots: ``top_y``, ``top_y - spacing`` ... while above zero."""
    if spacing <= 0:
        raise ValueError("Slot spacing must be positive")
    slots = []
    y = top_y
    while y > 0:
        slots.append(Position(x, y))
        y -= spacing
    return slots


class SlotQueue:
    """FIFO of pre-seeded slots, one per completed job, never replenished.

    Only ``reseed()`` refills the pool, which the scheduler does on reset.
    """

    def __init__(self, x: float = 1250.0, top_y: float = 680.0, spacing: float = 80.0):
        self._template = build_slots(x, top_y, spacing)
        self._slots: Deque[Position] = deque(self._template)

    @property
    def capacity(self) -> int:
        return len(self._template)

    @property
    def remaining(self) -> int:
        return len(self._slots)

    def pop(self) -> Position:
        if not self._slots:
            raise SlotPoolExhausted(self.capacity)
        return self._slots.popleft()

    def peek_all(self) -> List[Position]:
        return list(self._slots)

    def reseed(self) -> None:
        self._slots = deque(self._template)

    def __len__(self) -> int:
        return len(self._slots)
