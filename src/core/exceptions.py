"""Custom exceptions shared by all layers"""


class FloodItError(Exception):
    """Top-level exception of the application. Every other custom exception derives from it."""


class GameError(FloodItError):
    """Something went wrong in the domain layer."""


class EmptyHistoryError(GameError):
    """Undo/redo requested while the respective stack holds no snapshot."""


class InvalidColorError(GameError):
    """A color index outside of the available colors was selected."""


class InvalidBoardSizeError(FloodItError):
    """Requested board size is too small (or not a number at all)."""


class CorruptedSaveError(FloodItError):
    """A stored snapshot could not be turned back into a game."""


class RepositoryError(FloodItError):
    """Persistence layer could not fulfill the request."""
