"""Orchestration of communication from the UI collaborator to the game logic, history and persistence layers (and the reverse direction)."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from threading import RLock
from typing import Callable, Optional

from src.api.models import BoardView, CellView
from src.core.exceptions import CorruptedSaveError
from src.core.models import GameModel
from src.core.shared_types import Color, Connectivity, Topology
from src.db.repository import SaveRepository
from src.floodit.flood_fill import apply_color_selection, is_effective_selection
from src.floodit.game_state import GameState
from src.floodit.history import HistoryManager

logger = logging.getLogger(__name__)

Observer = Callable[[BoardView], None]


class CommandType(Enum):
    SELECT_COLOR = auto()
    TOGGLE_TOPOLOGY = auto()
    TOGGLE_CONNECTIVITY = auto()
    UNDO = auto()
    REDO = auto()
    RESET = auto()
    QUIT = auto()


@dataclass(frozen=True)
class Command:
    """A user event. Only the payload field matching the command type is used."""

    type: CommandType
    color: Optional[Color] = None
    topology: Optional[Topology] = None
    connectivity: Optional[Connectivity] = None


class SessionController:
    """Owns the single live GameState. All mutating entry points are serialized."""

    def __init__(
        self,
        repository: SaveRepository,
        board_size: int,
        rng: Optional[Random] = None,
        restore: bool = False,
    ) -> None:
        self.repo = repository
        self.board_size = board_size
        self.rng = rng if rng is not None else Random()
        self.state = GameState.new(board_size, self.rng)
        self.history = HistoryManager()
        self._observers: list[Observer] = []
        self._lock = RLock()
        self._handlers: dict[CommandType, Callable[[Command], bool]] = {
            CommandType.SELECT_COLOR: self._handle_select_color,
            CommandType.TOGGLE_TOPOLOGY: self._handle_toggle_topology,
            CommandType.TOGGLE_CONNECTIVITY: self._handle_toggle_connectivity,
            CommandType.UNDO: self._handle_undo,
            CommandType.REDO: self._handle_redo,
            CommandType.RESET: self._handle_reset,
            CommandType.QUIT: self._handle_quit,
        }

        if restore:
            self.on_load_requested()

    # -- Observers --
    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def view(self) -> BoardView:
        """Read-only view of the live state for the renderer."""
        with self._lock:
            state = self.state
            return BoardView(
                size=state.size,
                cells=[
                    CellView(x=x, y=y, display_color=state.display_color(x, y))
                    for y in range(state.size)
                    for x in range(state.size)
                ],
                step_count=state.step_count,
                torus_mode=state.torus_mode,
                diagonal_mode=state.diagonal_mode,
                finished=state.is_finished(),
                can_undo=self.history.can_undo,
                can_redo=self.history.can_redo,
            )

    # -- UI entry points --
    def dispatch(self, command: Command) -> bool:
        """Route a user event to its handler. Returns False once the session should end."""
        with self._lock:
            return self._handlers[command.type](command)

    def on_color_selected(self, color: Color) -> None:
        with self._lock:
            if not is_effective_selection(self.state, color):
                logger.debug("Selecting %s changes nothing.", color.name.lower())
                return
            self._record_new_action()
            apply_color_selection(self.state, color)
            self._notify()

            if self.state.is_finished():
                logger.info("Board flooded in %d steps.", self.state.step_count)

    def on_topology_toggle(self, torus_mode: bool, diagonal_mode: bool) -> None:
        """Only future captures are affected. Cells captured so far stay captured."""
        with self._lock:
            if (torus_mode, diagonal_mode) == (self.state.torus_mode, self.state.diagonal_mode):
                return
            self._record_new_action()
            self.state.set_topology(torus_mode, diagonal_mode)
            logger.debug("Topology set to torus=%s, diagonal=%s.", torus_mode, diagonal_mode)
            self._notify()

    def on_undo(self) -> None:
        """Raises EmptyHistoryError when there is nothing to undo (the UI should have disabled the action)."""
        with self._lock:
            self.state = self.history.undo(self.state)
            self._notify()

    def on_redo(self) -> None:
        """Raises EmptyHistoryError when there is nothing to redo (the UI should have disabled the action)."""
        with self._lock:
            self.state = self.history.redo(self.state)
            self._notify()

    def on_reset(self) -> None:
        """New board of the same size. History is cleared, topology settings are kept."""
        with self._lock:
            self.history.clear_all()
            self.state.reset(self.board_size)
            self._notify()

    def on_save_requested(self) -> GameModel:
        with self._lock:
            return self.repo.store_save(self.state.to_model())

    def on_load_requested(self) -> Optional[GameState]:
        """
        Continue a game saved for this board size.
        ----
        A save that cannot be restored is discarded and the current game simply continues (never fatal).
        A restored save is consumed: it gets removed from the repository.
        """
        with self._lock:
            stored = self.repo.get_save(self.board_size)
            if stored is None:
                return None

            try:
                if stored.board_size != self.board_size:
                    raise CorruptedSaveError(
                        f"Save is for a {stored.board_size}x{stored.board_size} board, not {self.board_size}x{self.board_size}."
                    )
                restored = GameState.from_model(stored, self.rng)
            except CorruptedSaveError as error:
                logger.warning("Discarding saved game: %s Starting a new game instead.", error)
                self.repo.delete_save(self.board_size)
                return None

            self.repo.delete_save(self.board_size)
            logger.info("Restoring saved game.")
            self.state = restored
            self.history.clear_all()
            self._notify()
            return restored

    def on_quit(self) -> GameModel:
        """Save, so the next session for this board size can pick up where this one ends."""
        return self.on_save_requested()

    # -- Command handlers --
    def _handle_select_color(self, command: Command) -> bool:
        if command.color is None:
            raise ValueError("SELECT_COLOR command requires a color.")
        self.on_color_selected(command.color)
        return True

    def _handle_toggle_topology(self, command: Command) -> bool:
        if command.topology is None:
            raise ValueError("TOGGLE_TOPOLOGY command requires a topology.")
        self.on_topology_toggle(
            command.topology == Topology.TORUS, self.state.diagonal_mode
        )
        return True

    def _handle_toggle_connectivity(self, command: Command) -> bool:
        if command.connectivity is None:
            raise ValueError("TOGGLE_CONNECTIVITY command requires a connectivity.")
        self.on_topology_toggle(
            self.state.torus_mode, command.connectivity == Connectivity.DIAGONAL
        )
        return True

    def _handle_undo(self, command: Command) -> bool:
        self.on_undo()
        return True

    def _handle_redo(self, command: Command) -> bool:
        self.on_redo()
        return True

    def _handle_reset(self, command: Command) -> bool:
        self.on_reset()
        return True

    def _handle_quit(self, command: Command) -> bool:
        self.on_quit()
        return False

    # -- Internal helpers --
    def _record_new_action(self) -> None:
        """Snapshot before the mutation; a fresh action also invalidates whatever could be redone."""
        self.history.record_before_mutation(self.state)
        self.history.clear_redo()

    def _notify(self) -> None:
        view = self.view()
        for observer in self._observers:
            observer(view)
