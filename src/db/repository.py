"""Protocol repository (implemented with SQLAlchemy, but a file based version would fit just as well)"""

from typing import Protocol

from src.core.models import GameModel


class SaveRepository(Protocol):
    """Persistence layer orchestration. Saves are keyed by board size."""

    def get_save(self, board_size: int) -> GameModel | None:
        """Get the save for this board size, if a record exists."""
        ...

    def store_save(self, game: GameModel) -> GameModel:
        """Store the game, replacing any earlier save of the same board size."""
        ...

    def delete_save(self, board_size: int) -> GameModel | None:
        """Remove the save for this board size."""
        ...
