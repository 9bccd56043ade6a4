"""Unit tests for /src/floodit/flood_fill.py"""

from random import Random
from typing import Callable, Sequence

import pytest

from src.core.shared_types import Color
from src.floodit.board import Board
from src.floodit.flood_fill import apply_color_selection, is_effective_selection
from src.floodit.game_state import GameState
from src.floodit.position import Position

StateFactory = Callable[[Sequence[Sequence[int]]], GameState]

L_SHAPE_ROWS = [
    [0, 0, 1],
    [2, 0, 1],
    [2, 3, 1],
]
DIAGONAL_ROWS = [
    [0, 1, 2],
    [1, 0, 2],
    [2, 2, 0],
]
CORNERS_ROWS = [
    [0, 1, 0],
    [1, 1, 1],
    [0, 1, 0],
]


def captured_positions(state: GameState) -> set[Position]:
    return {cell.position for cell in state.board.captured_cells()}


# -- FIRST MOVE --
def test_fresh_board_has_nothing_captured(state_from_colors: StateFactory) -> None:
    state = state_from_colors(L_SHAPE_ROWS)
    assert state.step_count == -1
    assert state.captured_count == 0


def test_first_move_captures_seed_region(state_from_colors: StateFactory) -> None:
    """Selecting the seed's own color: the auto-capture is the whole move (step 0)."""
    state = state_from_colors(L_SHAPE_ROWS)
    apply_color_selection(state, Color.GREY)
    assert captured_positions(state) == {Position(0, 0), Position(1, 0), Position(1, 1)}
    assert state.captured_count == 3
    assert state.step_count == 0
    assert state.current_color == Color.GREY


def test_first_move_with_other_color_applies_both(state_from_colors: StateFactory) -> None:
    """Auto-capture of the seed region (step 0), then the selected color (step 1)."""
    state = state_from_colors(L_SHAPE_ROWS)
    apply_color_selection(state, Color.ORANGE)
    assert captured_positions(state) == {
        Position(0, 0),
        Position(1, 0),
        Position(1, 1),
        Position(2, 0),
        Position(2, 1),
        Position(2, 2),
    }
    assert state.captured_count == 6
    assert state.step_count == 1
    assert state.current_color == Color.ORANGE


def test_seed_is_captured_even_when_isolated(state_from_colors: StateFactory) -> None:
    state = state_from_colors([[3, 1], [1, 1]])
    apply_color_selection(state, Color.GREEN)
    assert captured_positions(state) == {Position(0, 0)}
    assert state.step_count == 0


# -- END TO END --
def test_single_odd_cell_board(
    state_from_colors: StateFactory, single_odd_cell_rows: list[list[int]]
) -> None:
    state = state_from_colors(single_odd_cell_rows)

    apply_color_selection(state, Color.GREY)
    assert state.captured_count == 99
    assert state.step_count == 0
    assert not state.is_finished()
    assert not state.board.cell(Position(5, 5)).captured

    apply_color_selection(state, Color.ORANGE)
    assert state.captured_count == 100
    assert state.step_count == 1
    assert state.is_finished()


def test_captured_cells_keep_initial_color(state_from_colors: StateFactory) -> None:
    """Matching is done on the initial color: a captured cell does not change what it matches."""
    state = state_from_colors(L_SHAPE_ROWS)
    apply_color_selection(state, Color.GREY)
    apply_color_selection(state, Color.BLUE)
    assert state.board.cell(Position(0, 0)).color == Color.GREY
    assert state.display_color(0, 0) == Color.BLUE
    assert captured_positions(state) == {
        Position(0, 0),
        Position(1, 0),
        Position(1, 1),
        Position(0, 1),
        Position(0, 2),
    }
    assert state.step_count == 1


# -- NO-OP --
def test_selecting_current_color_is_a_no_op(state_from_colors: StateFactory) -> None:
    state = state_from_colors(L_SHAPE_ROWS)
    apply_color_selection(state, Color.ORANGE)
    before = state.clone()

    apply_color_selection(state, Color.ORANGE)
    assert state == before
    assert state.step_count == 1


def test_is_effective_selection(state_from_colors: StateFactory) -> None:
    state = state_from_colors(L_SHAPE_ROWS)
    # every color does something on the very first move, including the seed color
    assert all(is_effective_selection(state, color) for color in Color)

    apply_color_selection(state, Color.GREY)
    assert not is_effective_selection(state, Color.GREY)
    assert is_effective_selection(state, Color.RED)


def test_finished_board_ignores_selections(
    state_from_colors: StateFactory, single_odd_cell_rows: list[list[int]]
) -> None:
    state = state_from_colors(single_odd_cell_rows)
    apply_color_selection(state, Color.GREY)
    apply_color_selection(state, Color.ORANGE)
    assert state.is_finished()
    assert not any(is_effective_selection(state, color) for color in Color)


def test_unconnected_color_still_counts_as_step(state_from_colors: StateFactory) -> None:
    state = state_from_colors(L_SHAPE_ROWS)
    apply_color_selection(state, Color.GREY)
    apply_color_selection(state, Color.RED)
    assert state.captured_count == 3
    assert state.step_count == 1
    assert state.current_color == Color.RED


# -- TOPOLOGY --
def test_orthogonal_does_not_cross_diagonals(state_from_colors: StateFactory) -> None:
    state = state_from_colors(DIAGONAL_ROWS)
    apply_color_selection(state, Color.GREY)
    assert captured_positions(state) == {Position(0, 0)}


def test_diagonal_mode_crosses_diagonals(state_from_colors: StateFactory) -> None:
    state = state_from_colors(DIAGONAL_ROWS)
    state.set_topology(torus_mode=False, diagonal_mode=True)
    apply_color_selection(state, Color.GREY)
    assert captured_positions(state) == {Position(0, 0), Position(1, 1), Position(2, 2)}


def test_plane_does_not_wrap(state_from_colors: StateFactory) -> None:
    state = state_from_colors(CORNERS_ROWS)
    apply_color_selection(state, Color.GREY)
    assert captured_positions(state) == {Position(0, 0)}


def test_torus_wraps_around(state_from_colors: StateFactory) -> None:
    state = state_from_colors(CORNERS_ROWS)
    state.set_topology(torus_mode=True, diagonal_mode=False)
    apply_color_selection(state, Color.GREY)
    assert captured_positions(state) == {
        Position(0, 0),
        Position(2, 0),
        Position(0, 2),
        Position(2, 2),
    }


def test_topology_change_only_affects_future_moves(state_from_colors: StateFactory) -> None:
    state = state_from_colors(DIAGONAL_ROWS)
    apply_color_selection(state, Color.GREY)
    before = captured_positions(state)

    state.set_topology(torus_mode=False, diagonal_mode=True)
    assert captured_positions(state) == before
    assert state.captured_count == 1

    # (1, 1) is a diagonal neighbor of the seed, but it is not orange
    apply_color_selection(state, Color.ORANGE)
    assert captured_positions(state) == {Position(0, 0), Position(1, 0), Position(0, 1)}
    apply_color_selection(state, Color.BLUE)
    assert state.captured_count == 7
    apply_color_selection(state, Color.GREY)
    assert state.is_finished()


# -- PROPERTIES --
@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("torus_mode", [True, False])
@pytest.mark.parametrize("diagonal_mode", [True, False])
def test_captured_count_is_monotonic_and_bounded(
    seed: int, torus_mode: bool, diagonal_mode: bool
) -> None:
    rng = Random(seed)
    state = GameState.new(10, rng)
    state.set_topology(torus_mode, diagonal_mode)

    previous = state.captured_count
    for _ in range(40):
        apply_color_selection(state, Color(rng.randrange(len(Color))))
        assert previous <= state.captured_count <= 100
        assert state.captured_count == state.board.count_captured()
        previous = state.captured_count


def test_cycling_colors_finishes_the_board() -> None:
    """Going through every color over and over always floods the board eventually."""
    state = GameState.new(12, Random(9))
    for _ in range(144):
        for color in Color:
            apply_color_selection(state, color)
        if state.is_finished():
            break
    assert state.is_finished()


def test_large_board_does_not_recurse() -> None:
    size = 150
    state = GameState(board=Board.from_colors([[0] * size for _ in range(size)]))
    apply_color_selection(state, Color.GREY)
    assert state.captured_count == size * size
    assert state.is_finished()

