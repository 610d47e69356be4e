"""Pipeline — builds a finished island map from an empty grid.

Runs the generation stages in their fixed order:

1. Place islands
2. Weather water into land (grow coastlines outward)
3. Weather land into water (erode coastlines back)
4. Clean up stray cells

Each stage sees only the committed output of the previous one.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.random import Generator

from islandgen.generation.islands import IslandProperties, generate_islands
from islandgen.generation.weathering import clean, weather
from islandgen.simulation.config import WorldConfig
from islandgen.world.cell import CellState
from islandgen.world.grid import Grid

logger = logging.getLogger(__name__)


def build_world(
    grid_size: int,
    margin: int,
    weathering_passes: int,
    island_properties: IslandProperties,
    break_chance: float,
    neighbour_chance: float,
    min_neighbours: float,
    *,
    rng: Generator,
) -> Grid:
    """Generate, weather, and clean a new island grid.

    Args:
        grid_size: Cells per row and column.
        margin: Border width kept as water.
        weathering_passes: Passes run in each weathering direction.
        island_properties: Island size and count limits.
        break_chance: Base chance of ending island placement early.
        neighbour_chance: Per-neighbour conversion chance while weathering.
        min_neighbours: Same-state influence below which cleanup flips a
            cell.
        rng: Seeded random generator; the only source of randomness.

    Returns:
        The finished grid.

    Raises:
        InvalidConfigurationError: If the geometry is degenerate.
    """
    grid = Grid(size=grid_size, margin=margin)

    islands = generate_islands(
        grid,
        island_properties,
        rng,
        break_chance=break_chance,
    )
    grown = weather(
        grid,
        weathering_passes,
        CellState.WATER,
        CellState.LAND,
        rng,
        neighbour_chance=neighbour_chance,
    )
    eroded = weather(
        grid,
        weathering_passes,
        CellState.LAND,
        CellState.WATER,
        rng,
        neighbour_chance=neighbour_chance,
    )
    cleaned = clean(grid, min_neighbours=min_neighbours)

    logger.info(
        "Built %dx%d world: %d islands, %d grown, %d eroded, %d cleaned, %d land",
        grid.width,
        grid.height,
        islands,
        grown,
        eroded,
        cleaned,
        grid.count(CellState.LAND),
    )
    return grid


def build_world_from_config(config: WorldConfig, rng: Generator | None = None) -> Grid:
    """Run ``build_world`` with parameters taken from ``config``.

    Args:
        config: Generator configuration.
        rng: Random generator to draw from; seeded from ``config.seed``
            when omitted.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)
    return build_world(
        config.grid_size,
        config.margin,
        config.weathering_passes,
        config.islands,
        config.break_chance,
        config.neighbour_chance,
        config.min_neighbours,
        rng=rng,
    )
