"""Implementation of (Save)Repository using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.schema import DBSavedGame

logger = logging.getLogger(__name__)


class SQLSaveRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_save(self, board_size: int) -> GameModel | None:
        """Get the save for this board size, if a record exists."""
        save_db = self._fetch_save(board_size)
        if save_db:
            return self._to_model(save_db)
        return None

    def store_save(self, game: GameModel) -> GameModel:
        """Store the game, replacing any earlier save of the same board size."""
        save_db = self._fetch_save(game.board_size)
        if save_db is None:
            save_db = DBSavedGame(board_size=game.board_size)
            self.db.add(save_db)
        save_db.board = game.board
        save_db.step_count = game.step_count
        save_db.current_color = game.current_color
        save_db.torus_mode = game.torus_mode
        save_db.diagonal_mode = game.diagonal_mode
        self._commit()
        self.db.refresh(save_db)
        logger.info("Saved game for board size %d.", game.board_size)
        return self._to_model(save_db)

    def delete_save(self, board_size: int) -> GameModel | None:
        """Remove the save for this board size."""
        save_db = self._fetch_save(board_size)
        if not save_db:
            return None
        game_model = self._to_model(save_db)
        self.db.delete(save_db)
        self._commit()
        return game_model

    def _fetch_save(self, board_size: int) -> DBSavedGame | None:
        query = select(DBSavedGame).where(DBSavedGame.board_size == board_size)
        return self.db.scalar(query)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as error:
            self.db.rollback()
            raise RepositoryError(f"Could not write to the database: {error}") from error

    def _to_model(self, save_db: DBSavedGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            board_size=save_db.board_size,
            board=save_db.board,
            step_count=save_db.step_count,
            current_color=save_db.current_color,
            torus_mode=save_db.torus_mode,
            diagonal_mode=save_db.diagonal_mode,
        )
