"""Cell — a single tile in the island grid.

A cell only stores its position and terrain state.  Its display colour
is derived from the state on every read so the two can never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Colour = tuple[int, int, int]


class CellState(Enum):
    """Terrain a cell can hold."""

    WATER = "water"
    LAND = "land"
    TREE = "tree"


_STATE_COLOURS: dict[CellState, Colour] = {
    CellState.WATER: (0, 112, 236),
    CellState.LAND: (128, 208, 16),
    CellState.TREE: (0, 168, 0),
}


def colour_for(state: CellState) -> Colour:
    """Return the RGB colour used to draw ``state``."""
    return _STATE_COLOURS[state]


@dataclass
class Cell:
    """A single tile in the grid.

    Attributes:
        x: Column position.
        y: Row position.
        state: Current terrain state.
    """

    x: int
    y: int
    state: CellState = CellState.WATER

    @property
    def colour(self) -> Colour:
        """RGB colour for the current state."""
        return colour_for(self.state)
