"""Island placement — rectangular chunks of land dropped onto the grid.

Islands are placed one after another and may overlap each other or
existing land.  Once ``min_count`` islands exist, each further island
carries a growing chance of ending generation early, reaching certainty
on the last slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from islandgen.errors import require
from islandgen.world.cell import CellState

if TYPE_CHECKING:
    from numpy.random import Generator

    from islandgen.world.grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class IslandProperties:
    """Size and count limits for generated islands.

    Attributes:
        min_dim: Smallest island side length, in cells.
        max_dim: Largest island side length, in cells (inclusive).
        min_count: Islands always placed before early stopping is allowed.
        max_count: Upper bound on islands placed.
    """

    min_dim: int = 5
    max_dim: int = 25
    min_count: int = 6
    max_count: int = 15

    def __post_init__(self) -> None:
        require(self.min_dim >= 1, f"min_dim must be >= 1, got {self.min_dim}")
        require(
            self.min_dim <= self.max_dim,
            f"min_dim ({self.min_dim}) exceeds max_dim ({self.max_dim})",
        )
        require(self.min_count >= 0, f"min_count must be >= 0, got {self.min_count}")
        require(
            self.min_count <= self.max_count,
            f"min_count ({self.min_count}) exceeds max_count ({self.max_count})",
        )


@dataclass(frozen=True)
class Island:
    """A rectangle of land with its upper-left corner at ``(x, y)``."""

    x: int
    y: int
    width: int
    height: int

    def clamped(self, high_x: int, high_y: int) -> Island:
        """Shrink the rectangle so it ends before ``high_x`` / ``high_y``.

        The corner never moves; only width and height are reduced.
        """
        return Island(
            x=self.x,
            y=self.y,
            width=min(self.width, high_x - self.x),
            height=min(self.height, high_y - self.y),
        )


def place_island(grid: Grid, island: Island) -> None:
    """Set every cell covered by ``island`` to land.

    The island is clamped to the grid's upper margins first.
    """
    island = island.clamped(grid.high_x_margin, grid.high_y_margin)
    for x in range(island.x, island.x + island.width):
        for y in range(island.y, island.y + island.height):
            grid.set_state(x, y, CellState.LAND)


def stop_chance(index: int, min_count: int, max_count: int, break_chance: float) -> float:
    """Probability of stopping after the island at ``index``.

    Ramps from ``break_chance`` toward 1.0 as ``index`` nears
    ``max_count``.  With no slots remaining the stop is certain.
    """
    remaining = (max_count - min_count) - (index - min_count)
    if remaining <= 0:
        return 1.0
    return break_chance + (1.0 - break_chance) / remaining


def generate_islands(
    grid: Grid,
    properties: IslandProperties,
    rng: Generator,
    *,
    break_chance: float,
) -> int:
    """Place between ``min_count`` and ``max_count`` random islands.

    Corners are drawn inside the margins with room left for a minimally
    sized island; sides are drawn from ``[min_dim, max_dim]`` and clamped
    to the margins.

    Args:
        grid: Grid to draw land onto.
        properties: Island size and count limits.
        rng: Seeded random generator.
        break_chance: Base chance of stopping once ``min_count`` is passed.

    Returns:
        The number of islands placed.

    Raises:
        InvalidConfigurationError: If a ``min_dim`` island is wider than
            the space inside the margins.
    """
    high_x = grid.high_x_margin - properties.min_dim
    high_y = grid.high_y_margin - properties.min_dim
    require(
        high_x >= grid.low_margin and high_y >= grid.low_margin,
        f"islands of min_dim {properties.min_dim} do not fit a "
        f"{grid.size}x{grid.size} grid with margin {grid.margin}",
    )

    # An island that exactly fills the usable band has a single corner
    high_x = max(high_x, grid.low_margin + 1)
    high_y = max(high_y, grid.low_margin + 1)

    placed = 0
    for index in range(properties.max_count):
        island = Island(
            x=int(rng.integers(grid.low_margin, high_x)),
            y=int(rng.integers(grid.low_margin, high_y)),
            width=int(rng.integers(properties.min_dim, properties.max_dim + 1)),
            height=int(rng.integers(properties.min_dim, properties.max_dim + 1)),
        )
        place_island(grid, island)
        placed += 1

        if properties.min_count < index < properties.max_count:
            chance = stop_chance(
                index,
                properties.min_count,
                properties.max_count,
                break_chance,
            )
            if rng.random() < chance:
                logger.debug("Stopped after %d islands", placed)
                break
    return placed


def randomize(grid: Grid, on_chance: float, rng: Generator) -> int:
    """Turn each interior cell to land independently with ``on_chance``.

    Pure noise with no spatial structure; useful as a baseline to compare
    island placement against.

    Returns:
        The number of cells set to land.
    """
    changed = 0
    for x, y in grid.interior():
        if rng.random() < on_chance:
            grid.set_state(x, y, CellState.LAND)
            changed += 1
    return changed
