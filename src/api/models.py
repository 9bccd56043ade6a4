"""Requests and Response models exchanged with the UI collaborator"""

from pydantic import BaseModel, ConfigDict, field_validator

from src.core.exceptions import InvalidColorError
from src.core.shared_types import Color


# --- REQUEST MODELS ---
class SelectColorRequest(BaseModel):
    color: Color

    @field_validator("color", mode="before")
    @classmethod
    def validate_color_index(cls, value: object) -> object:
        if isinstance(value, int) and value not in set(Color):
            raise InvalidColorError(
                f"Color index must be between 0 and {len(Color) - 1}, got {value}."
            )
        return value


# --- RESPONSE MODELS ---
class CellView(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    display_color: Color


class BoardView(BaseModel):
    """Read-only snapshot handed to the renderer after every state change."""

    model_config = ConfigDict(frozen=True)

    size: int
    cells: list[CellView]
    step_count: int
    torus_mode: bool
    diagonal_mode: bool
    finished: bool
    can_undo: bool
    can_redo: bool
