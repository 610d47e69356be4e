"""Weighted neighbour counting over a state snapshot.

Orthogonal neighbours count fully, diagonal neighbours count half, so
an interior cell surrounded by matching cells scores 6.0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from islandgen.errors import OutOfRangeError

if TYPE_CHECKING:
    from islandgen.world.cell import CellState
    from islandgen.world.grid import StateSnapshot

ORTHOGONAL_WEIGHT = 1.0
DIAGONAL_WEIGHT = 0.5
MAX_INFLUENCE = 4 * ORTHOGONAL_WEIGHT + 4 * DIAGONAL_WEIGHT


def neighbour_influence(
    snapshot: StateSnapshot,
    x: int,
    y: int,
    target: CellState,
) -> float:
    """Return the weighted count of neighbours of ``(x, y)`` in ``target`` state.

    Only the eight cells of the surrounding 3x3 block that lie inside the
    snapshot are examined; there is no wraparound.  The snapshot is the
    only state read, so callers mutating the live grid during a pass do
    not affect the result.

    Args:
        snapshot: State copy indexed ``[y][x]``.
        x: Column index of the centre cell.
        y: Row index of the centre cell.
        target: State a neighbour must hold to count.

    Returns:
        A value between 0.0 and ``MAX_INFLUENCE``.

    Raises:
        OutOfRangeError: If ``(x, y)`` lies outside the snapshot.
    """
    height = len(snapshot)
    width = len(snapshot[0]) if height else 0
    if not (0 <= x < width and 0 <= y < height):
        raise OutOfRangeError(x, y, width, height)

    influence = 0.0
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if snapshot[ny][nx] is target:
                influence += DIAGONAL_WEIGHT if dx and dy else ORTHOGONAL_WEIGHT
    return influence
