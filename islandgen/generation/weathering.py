"""Weathering and cleanup passes over the grid.

Both passes read neighbour state from a snapshot taken at the start of
the pass and write to the live grid, so a cell changed early in a pass
never influences another cell in the same pass.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from islandgen.world.cell import CellState
from islandgen.world.neighbours import neighbour_influence

if TYPE_CHECKING:
    from numpy.random import Generator

    from islandgen.world.grid import Grid

logger = logging.getLogger(__name__)

_FLIPS: dict[CellState, CellState] = {
    CellState.LAND: CellState.WATER,
    CellState.WATER: CellState.LAND,
}


def weather(
    grid: Grid,
    passes: int,
    from_state: CellState,
    to_state: CellState,
    rng: Generator,
    *,
    neighbour_chance: float,
) -> int:
    """Convert ``from_state`` cells to ``to_state`` based on their neighbours.

    Each pass gives every interior ``from_state`` cell a chance of
    ``neighbour_chance`` per unit of ``to_state`` neighbour influence to
    switch over.  One random draw is consumed per candidate cell, in
    ``Grid.interior()`` order, so results are reproducible for a seeded
    generator.

    Args:
        grid: Grid to weather in place.
        passes: Number of passes to run.
        from_state: State of the cells that may change.
        to_state: State they change into, and the neighbour state counted.
        rng: Seeded random generator.
        neighbour_chance: Conversion probability per unit of influence.

    Returns:
        Total number of cells changed across all passes.
    """
    changed = 0
    for i in range(passes):
        snapshot = grid.snapshot_states()
        pass_changed = 0
        for x, y in grid.interior():
            if snapshot[y][x] is not from_state:
                continue
            influence = neighbour_influence(snapshot, x, y, to_state)
            if rng.random() < neighbour_chance * influence:
                grid.set_state(x, y, to_state)
                pass_changed += 1
        logger.debug(
            "Weathering pass %d (%s -> %s) changed %d cells",
            i + 1,
            from_state.value,
            to_state.value,
            pass_changed,
        )
        changed += pass_changed
    return changed


def clean(grid: Grid, *, min_neighbours: float) -> int:
    """Flip stray land and water cells that have too few like neighbours.

    A cell whose influence from same-state neighbours is below
    ``min_neighbours`` flips between land and water.  Tree cells are
    left alone.

    Returns:
        The number of cells flipped.
    """
    snapshot = grid.snapshot_states()
    flipped = 0
    for x, y in grid.interior():
        state = snapshot[y][x]
        flipped_state = _FLIPS.get(state)
        if flipped_state is None:
            continue
        if neighbour_influence(snapshot, x, y, state) < min_neighbours:
            grid.set_state(x, y, flipped_state)
            flipped += 1
    logger.debug("Cleanup flipped %d cells", flipped)
    return flipped
