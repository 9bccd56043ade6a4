"""
Capture rules: selecting a color grows the captured region by every connected cell of that color.

The propagation uses an explicit work list instead of recursion, so large boards cannot exhaust the call stack.
"""

import logging

from src.core.shared_types import Color
from src.floodit.game_state import GameState
from src.floodit.position import SEED_POSITION
from src.floodit.topology import neighbors

logger = logging.getLogger(__name__)


def is_effective_selection(state: GameState, color: Color) -> bool:
    """
    A selection changes the state on the very first move, or when it differs from the current color.
    Once the whole board is captured, nothing changes anymore.
    """
    if state.is_finished():
        return False
    return state.step_count < 0 or color != state.current_color


def apply_color_selection(state: GameState, new_color: Color) -> None:
    """
    Let the player select `new_color`.
    ----

    1. First move only: capture the seed cell (top-left) and flood its own color. This is step 0.
    2. Nothing to do if the (remaining) selection equals the current color.
    3. Otherwise flood the new color from the captured region. This counts as one step.
    """
    if state.step_count < 0:
        seed_color = state.board.cell(SEED_POSITION).color
        state.capture(SEED_POSITION)
        _flood(state, seed_color)

    if new_color == state.current_color:
        return

    _flood(state, new_color)


def _flood(state: GameState, color: Color) -> None:
    """Switch to `color` and capture every free cell of that color connected to the captured region."""
    state.current_color = color
    captured_before = state.captured_count

    work_list = state.board.captured_cells()
    while work_list:
        cell = work_list.pop()
        for position in neighbors(
            cell.position.x,
            cell.position.y,
            state.size,
            state.torus_mode,
            state.diagonal_mode,
        ):
            neighbor = state.board.cell(position)
            if neighbor.color == color and not neighbor.captured:
                state.capture(position)
                work_list.append(neighbor)

    state.step()
    logger.debug(
        "Step %d: %s captured %d cell(s), %d/%d in total.",
        state.step_count,
        color.name.lower(),
        state.captured_count - captured_before,
        state.captured_count,
        state.size * state.size,
    )
