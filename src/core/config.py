"""Application settings. Values can be overridden through environment variables where noted."""

import logging
import os
from typing import Optional

from src.core.exceptions import InvalidBoardSizeError

logger = logging.getLogger(__name__)

MIN_BOARD_SIZE = 10
DEFAULT_BOARD_SIZE = 12
NUMBER_OF_COLORS = 6

DATABASE_URL = os.environ.get("FLOODIT_DATABASE_URL", "sqlite:///floodit.db")
DATABASE_ECHO = os.environ.get("FLOODIT_DATABASE_ECHO", "0") == "1"


def validate_board_size(size: int) -> int:
    """Boards smaller than MIN_BOARD_SIZE are not playable."""
    if size < MIN_BOARD_SIZE:
        raise InvalidBoardSizeError(
            f"Board size must be at least {MIN_BOARD_SIZE}, got {size}."
        )
    return size


def resolve_board_size(raw: Optional[str]) -> int:
    """Turn the (optional) command line argument into a board size, falling back to the default."""
    if raw is None:
        return DEFAULT_BOARD_SIZE
    try:
        return validate_board_size(int(raw))
    except ValueError:
        logger.warning(
            "Board size %r is not a number. Using default size %d.",
            raw,
            DEFAULT_BOARD_SIZE,
        )
    except InvalidBoardSizeError as error:
        logger.warning("%s Using default size %d.", error, DEFAULT_BOARD_SIZE)
    return DEFAULT_BOARD_SIZE
