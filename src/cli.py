"""
Command line entrypoint: `floodit [size]`

Reads one command per line from stdin and prints the board after each change.
Commands: 0-5 (select color), u (undo), r (redo), reset, plane, torus, orth, diag, q (save and quit)
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from src.api.models import BoardView, SelectColorRequest
from src.core.config import resolve_board_size
from src.core.exceptions import EmptyHistoryError, InvalidColorError, RepositoryError
from src.core.shared_types import Connectivity, Topology
from src.db.database import SessionLocal, init_db
from src.db.sql_repository import SQLSaveRepository
from src.services.session_controller import Command, CommandType, SessionController

logger = logging.getLogger(__name__)

KEYWORD_COMMANDS: dict[str, Command] = {
    "u": Command(CommandType.UNDO),
    "r": Command(CommandType.REDO),
    "reset": Command(CommandType.RESET),
    "plane": Command(CommandType.TOGGLE_TOPOLOGY, topology=Topology.PLANE),
    "torus": Command(CommandType.TOGGLE_TOPOLOGY, topology=Topology.TORUS),
    "orth": Command(CommandType.TOGGLE_CONNECTIVITY, connectivity=Connectivity.ORTHOGONAL),
    "diag": Command(CommandType.TOGGLE_CONNECTIVITY, connectivity=Connectivity.DIAGONAL),
    "q": Command(CommandType.QUIT),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floodit",
        description="Flood-It: capture the whole board in as few steps as possible.",
    )
    parser.add_argument(
        "size", nargs="?", default=None, help="board size (at least 10, default 12)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug logging")
    return parser


def parse_command(text: str) -> Optional[Command]:
    """Translate a line of user input into a Command. None if the input is not understood."""
    token = text.strip().lower()
    if token in KEYWORD_COMMANDS:
        return KEYWORD_COMMANDS[token]
    if token.isdigit():
        request = SelectColorRequest(color=int(token))
        return Command(CommandType.SELECT_COLOR, color=request.color)
    return None


def render(view: BoardView, out: TextIO) -> None:
    for y in range(view.size):
        row = view.cells[y * view.size : (y + 1) * view.size]
        print(" ".join(str(cell.display_color.value) for cell in row), file=out)
    topology = Topology.TORUS if view.torus_mode else Topology.PLANE
    connectivity = Connectivity.DIAGONAL if view.diagonal_mode else Connectivity.ORTHOGONAL
    print(f"Steps: {max(view.step_count, 0)} ({topology}, {connectivity})", file=out)
    if view.finished:
        print(
            f"You won in {view.step_count} steps. Type 'reset' to play again or 'q' to quit.",
            file=out,
        )


def run(controller: SessionController, lines: TextIO, out: TextIO) -> None:
    """Command loop. Ends on 'q' (which saves the game) or at the end of the input."""
    controller.subscribe(lambda view: render(view, out))
    render(controller.view(), out)

    for line in lines:
        try:
            command = parse_command(line)
        except InvalidColorError as error:
            print(error, file=out)
            continue
        if command is None:
            print(f"Unknown command: {line.strip()!r}", file=out)
            continue

        try:
            keep_running = controller.dispatch(command)
        except EmptyHistoryError as error:
            print(error, file=out)
            continue
        except RepositoryError as error:
            logger.error("Could not save the game: %s", error)
            print("Error saving the game.", file=out)
            return
        if not keep_running:
            print("Game saved.", file=out)
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    board_size = resolve_board_size(args.size)
    logger.info("Starting a %dx%d game.", board_size, board_size)

    init_db()
    with SessionLocal() as db:
        controller = SessionController(SQLSaveRepository(db), board_size, restore=True)
        run(controller, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
