"""
The GameState is the entrypoint into the domain layer for the service layer.
It owns the board together with everything else needed to continue a game (step count, current color, topology settings),
and knows how to convert itself from/to the GameModel that the service layer passes around.
"""

from dataclasses import dataclass, field
from random import Random
from typing import Optional, Self

from src.core.exceptions import CorruptedSaveError
from src.core.models import GameModel
from src.core.shared_types import Color
from src.floodit.board import Board
from src.floodit.notation import board_from_notation, board_to_notation
from src.floodit.position import SEED_POSITION, Position


@dataclass
class GameState:
    board: Board
    # -1: no move yet. The first selection auto-captures the top-left region, which counts as step 0.
    step_count: int = -1
    captured_count: int = 0
    current_color: Optional[Color] = None
    torus_mode: bool = False
    diagonal_mode: bool = False
    rng: Random = field(default_factory=Random, compare=False, repr=False)

    @classmethod
    def new(cls, size: int, rng: Optional[Random] = None) -> Self:
        """Fresh game on a randomly colored board. Pass a seeded `rng` for reproducible boards."""
        rng = rng if rng is not None else Random()
        return cls(board=Board.random(size, rng), rng=rng)

    @classmethod
    def from_model(cls, model: GameModel, rng: Optional[Random] = None) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""
        board = board_from_notation(model.board)
        if board.size != model.board_size:
            raise CorruptedSaveError(
                f"Stored board is {board.size}x{board.size}, but the record claims size {model.board_size}."
            )

        current_color = _parse_color(model.current_color)
        if model.step_count >= 0 and current_color is None:
            raise CorruptedSaveError("A move has been played, but no current color is stored.")

        captured_count = board.count_captured()
        if model.step_count < 0 and captured_count > 0:
            raise CorruptedSaveError("Cells are captured, but no move has been played yet.")
        if model.step_count >= 0 and not board.cell(SEED_POSITION).captured:
            raise CorruptedSaveError("A move has been played, but the seed cell is not captured.")

        return cls(
            board=board,
            step_count=model.step_count,
            captured_count=captured_count,
            current_color=current_color,
            torus_mode=model.torus_mode,
            diagonal_mode=model.diagonal_mode,
            rng=rng if rng is not None else Random(),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board_size=self.size,
            board=board_to_notation(self.board),
            step_count=self.step_count,
            current_color=self.current_color.value if self.current_color is not None else None,
            torus_mode=self.torus_mode,
            diagonal_mode=self.diagonal_mode,
        )

    @property
    def size(self) -> int:
        return self.board.size

    def reset(self, size: Optional[int] = None) -> None:
        """Start over on a freshly colored board (optionally of a new size). Topology settings are kept."""
        self.board = Board.random(size if size is not None else self.size, self.rng)
        self.step_count = -1
        self.captured_count = 0
        self.current_color = None

    def clone(self) -> Self:
        """
        Independent copy of the full state, used as history snapshot.

        NOTE: the random source is shared on purpose: it is not part of the game's content, only the supply of new boards.
        """
        return type(self)(
            board=self.board.copy(),
            step_count=self.step_count,
            captured_count=self.captured_count,
            current_color=self.current_color,
            torus_mode=self.torus_mode,
            diagonal_mode=self.diagonal_mode,
            rng=self.rng,
        )

    def is_finished(self) -> bool:
        return self.captured_count == self.size * self.size

    def display_color(self, x: int, y: int) -> Color:
        """Captured cells take on the current color, the others still show their initial color."""
        cell = self.board.cell(Position(x, y))
        if cell.captured and self.current_color is not None:
            return self.current_color
        return cell.color

    def capture(self, position: Position) -> None:
        """Add a cell to the captured region. Only the flood fill should call this."""
        cell = self.board.cell(position)
        if cell.captured:
            return
        cell.capture()
        self.captured_count += 1

    def step(self) -> None:
        self.step_count += 1

    def set_topology(self, torus_mode: bool, diagonal_mode: bool) -> None:
        self.torus_mode = torus_mode
        self.diagonal_mode = diagonal_mode

    def __str__(self) -> str:
        """Display colors row by row, followed by the step count."""
        rows = [
            " ".join(str(self.display_color(x, y).value) for x in range(self.size))
            for y in range(self.size)
        ]
        rows.append(f"Steps: {self.step_count}")
        return "\n".join(rows)


def _parse_color(value: Optional[int]) -> Optional[Color]:
    if value is None:
        return None
    try:
        return Color(value)
    except ValueError as error:
        raise CorruptedSaveError(f"Invalid color index: {value!r}") from error
