"""
Compact text encoding of a board, in the spirit of a FEN string.

Rows are read top (y = 0) to bottom and separated by slashes. Every cell is a single character:
* '0' - '5': a free cell with that initial color
* 'a' - 'f': a captured cell whose initial color is 0 - 5

ex. a 3x3 board where the top-left L-shape is captured (initial color 2) and the rest is free:
cc1/c40/523
"""

from src.core.exceptions import CorruptedSaveError
from src.core.shared_types import Color
from src.floodit.board import Board
from src.floodit.cell import Cell
from src.floodit.position import Position

ROW_SEPARATOR = "/"
FREE_CHARACTERS = "012345"
CAPTURED_CHARACTERS = "abcdef"


def cell_to_notation(cell: Cell) -> str:
    characters = CAPTURED_CHARACTERS if cell.captured else FREE_CHARACTERS
    return characters[cell.color.value]


def cell_from_notation(character: str, position: Position) -> Cell:
    if character in FREE_CHARACTERS:
        return Cell(position, Color(FREE_CHARACTERS.index(character)))
    if character in CAPTURED_CHARACTERS:
        return Cell(position, Color(CAPTURED_CHARACTERS.index(character)), captured=True)
    raise CorruptedSaveError(f"Unknown cell character {character!r} at {position}.")


def board_to_notation(board: Board) -> str:
    return ROW_SEPARATOR.join(
        "".join(cell_to_notation(board.cell(Position(x, y))) for x in range(board.size))
        for y in range(board.size)
    )


def board_from_notation(notation: str) -> Board:
    """Parse the notation back into a Board. Anything that does not describe a square board is considered corrupted."""
    rows = notation.split(ROW_SEPARATOR)
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise CorruptedSaveError(
            f"Board notation does not describe a square board: {size} rows of lengths {[len(row) for row in rows]}."
        )

    cells: dict[Position, Cell] = {}
    for y, row in enumerate(rows):
        for x, character in enumerate(row):
            position = Position(x, y)
            cells[position] = cell_from_notation(character, position)
    return Board(size, cells)
