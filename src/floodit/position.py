"""
A coordinate on the board

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """0-based (x, y) coordinate. (0, 0) is the top-left corner, x grows to the right and y grows downwards."""

    x: int
    y: int

    def is_within_bounds(self, size: int) -> bool:
        return (0 <= self.x < size) and (0 <= self.y < size)


# The cell every game starts capturing from
SEED_POSITION = Position(0, 0)
