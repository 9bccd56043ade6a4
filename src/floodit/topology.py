"""
Adjacency rules of the board.

The board is either a plane (edges are hard borders) or a torus (leaving one edge means entering on the opposite edge),
and cells are connected either orthogonally (4 neighbors) or also diagonally (8 neighbors).
"""

from src.floodit.position import Position

Offset = tuple[int, int]

# Order matters for reproducible traversal: left, right, up, down
ORTHOGONAL_OFFSETS: tuple[Offset, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# up-left, down-right, down-left, up-right
DIAGONAL_OFFSETS: tuple[Offset, ...] = ((-1, -1), (1, 1), (-1, 1), (1, -1))


def neighbors(
    x: int, y: int, size: int, torus_mode: bool, diagonal_mode: bool
) -> list[Position]:
    """
    Enumerate the coordinates adjacent to (x, y).

    ---
    * plane: candidates outside of the board are dropped
    * torus: candidates are wrapped around to the other side of the board

    NOTE on small tori, different offsets can wrap onto the same cell (or onto (x, y) itself).
    Those duplicates are removed, keeping the first occurrence, so every neighbor is listed exactly once.
    """
    offsets = ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS if diagonal_mode else ORTHOGONAL_OFFSETS
    origin = Position(x, y)

    found: list[Position] = []
    for dx, dy in offsets:
        candidate = Position(x + dx, y + dy)
        if not candidate.is_within_bounds(size):
            if not torus_mode:
                continue
            candidate = Position((candidate.x + size) % size, (candidate.y + size) % size)

        if candidate == origin or candidate in found:
            continue
        found.append(candidate)
    return found
