"""
Undo / redo bookkeeping.

Two stacks of full GameState snapshots. Every snapshot is an independent copy, and no snapshot instance ever lives in
both stacks at once.
"""

from src.core.exceptions import EmptyHistoryError
from src.floodit.game_state import GameState


class SnapshotStack:
    """Last-in-first-out stack of snapshots. Unbounded: only limited by memory."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: list[GameState] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, snapshot: GameState) -> None:
        self._items.append(snapshot)

    def peek(self) -> GameState:
        if self.is_empty():
            raise EmptyHistoryError(f"Nothing to {self.name}.")
        return self._items[-1]

    def pop(self) -> GameState:
        if self.is_empty():
            raise EmptyHistoryError(f"Nothing to {self.name}.")
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()


class HistoryManager:
    def __init__(self) -> None:
        self.undo_stack = SnapshotStack("undo")
        self.redo_stack = SnapshotStack("redo")

    @property
    def can_undo(self) -> bool:
        return not self.undo_stack.is_empty()

    @property
    def can_redo(self) -> bool:
        return not self.redo_stack.is_empty()

    def record_before_mutation(self, state: GameState) -> None:
        """Must be called right before a mutating action is applied to `state`."""
        self.undo_stack.push(state.clone())

    def undo(self, current: GameState) -> GameState:
        """Return the previous state. `current` is kept (as is) to be redone later."""
        previous = self.undo_stack.pop()
        self.redo_stack.push(current)
        return previous

    def redo(self, current: GameState) -> GameState:
        """Return the undone state. A redo can itself be undone, so `current` is recorded as a fresh snapshot."""
        following = self.redo_stack.pop()
        self.undo_stack.push(current.clone())
        return following

    def clear_redo(self) -> None:
        """A new action outside of undo/redo invalidates the redo future."""
        self.redo_stack.clear()

    def clear_all(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()
