"""A single cell of the board"""

from dataclasses import dataclass
from typing import Self

from src.core.shared_types import Color
from src.floodit.position import Position


@dataclass
class Cell:
    """
    Stores the initial color of the cell at `position` and whether it belongs to the captured region.

    NOTE: `color` is the color the cell received when the board was (re)initialised. A captured cell is *displayed*
    in the game's current color, but the flood fill always compares against this initial color.
    """

    position: Position
    color: Color
    captured: bool = False

    def capture(self) -> None:
        self.captured = True

    def copy(self) -> Self:
        """Copy by value. Position is frozen, so it can be shared safely."""
        return type(self)(self.position, self.color, self.captured)
