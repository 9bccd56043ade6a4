"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the persistence layer (lower) and the domain layer use the model defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameModel:
    """Transport-safe representation of a Flood-It game used between Service, DB, and Game layers.

    `board` is the compact board notation (see src/floodit/notation.py).
    """

    board_size: int
    board: str
    step_count: int
    current_color: Optional[int]
    torus_mode: bool
    diagonal_mode: bool
