"""Vegetation overlay — trees placed on and spread across finished land.

Trees are only ever grown from land, and nothing turns a tree back, so
this runs after the island pipeline has settled the coastline.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from islandgen.errors import require
from islandgen.generation.islands import stop_chance
from islandgen.generation.weathering import weather
from islandgen.world.cell import CellState

if TYPE_CHECKING:
    from numpy.random import Generator

    from islandgen.world.grid import Grid

logger = logging.getLogger(__name__)


def place_trees(
    grid: Grid,
    min_trees: int,
    max_trees: int,
    rng: Generator,
    *,
    break_chance: float,
) -> int:
    """Turn up to ``max_trees`` random interior land cells into trees.

    After ``min_trees`` placements each further tree may end placement
    early, with the same ramping chance used for islands.  Placement
    also ends when no land is left.

    Args:
        grid: Grid to plant on.
        min_trees: Trees always placed when enough land exists.
        max_trees: Upper bound on trees placed.
        rng: Seeded random generator.
        break_chance: Base chance of stopping once ``min_trees`` is passed.

    Returns:
        The number of trees placed.
    """
    require(
        0 <= min_trees <= max_trees,
        f"tree counts must satisfy 0 <= min ({min_trees}) <= max ({max_trees})",
    )
    snapshot = grid.snapshot_states()
    land = [(x, y) for x, y in grid.interior() if snapshot[y][x] is CellState.LAND]

    placed = 0
    for index in range(max_trees):
        if not land:
            logger.debug("No land left after %d trees", placed)
            break
        x, y = land.pop(int(rng.integers(0, len(land))))
        grid.set_state(x, y, CellState.TREE)
        placed += 1

        if min_trees < index < max_trees:
            chance = stop_chance(index, min_trees, max_trees, break_chance)
            if rng.random() < chance:
                break
    logger.debug("Placed %d trees", placed)
    return placed


def spread_trees(grid: Grid, spread_chance: float, rng: Generator) -> int:
    """Grow trees into neighbouring land for one pass.

    Each land cell converts with probability ``spread_chance`` times its
    tree neighbour influence, so a cell ringed by trees is up to six times
    as likely to convert.

    Returns:
        The number of land cells that became trees.
    """
    return weather(
        grid,
        1,
        CellState.LAND,
        CellState.TREE,
        rng,
        neighbour_chance=spread_chance,
    )
