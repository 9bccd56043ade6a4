"""The Board holds every Cell of the game and answers questions about (groups of) cells."""

from dataclasses import dataclass
from random import Random
from typing import Self, Sequence

from src.core.shared_types import Color
from src.floodit.cell import Cell
from src.floodit.position import Position


@dataclass
class Board:
    size: int
    cells: dict[Position, Cell]

    @classmethod
    def random(cls, size: int, rng: Random) -> Self:
        """Every cell gets an independent, uniformly drawn color."""
        cells = {
            Position(x, y): Cell(Position(x, y), Color(rng.randrange(len(Color))))
            for x in range(size)
            for y in range(size)
        }
        return cls(size, cells)

    @classmethod
    def from_colors(cls, rows: Sequence[Sequence[int]]) -> Self:
        """
        Construct a board with predetermined colors. Mostly convenient to set up a specific situation.

        rows[y][x] is the color of the cell at (x, y), i.e. the rows read top to bottom as they are displayed.
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError(
                f"Board must be square. Got {size} rows of lengths {[len(row) for row in rows]}"
            )
        cells = {
            Position(x, y): Cell(Position(x, y), Color(color))
            for y, row in enumerate(rows)
            for x, color in enumerate(row)
        }
        return cls(size, cells)

    def cell(self, position: Position) -> Cell:
        # The topology rules never hand out coordinates outside of the board
        assert position.is_within_bounds(
            self.size
        ), f"{position} is not on a {self.size}x{self.size} board"
        return self.cells[position]

    def captured_cells(self) -> list[Cell]:
        return [cell for cell in self.cells.values() if cell.captured]

    def count_captured(self) -> int:
        return len(self.captured_cells())

    def copy(self) -> Self:
        """Deep copy: every Cell is copied by value, so the copy never aliases this board."""
        return type(self)(
            self.size,
            {position: cell.copy() for position, cell in self.cells.items()},
        )
