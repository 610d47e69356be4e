"""Grid — the square container of cells the generator works on.

The Grid owns one Cell per coordinate and keeps track of the margin, a
border of cells that generation stages leave as water.  Stages that read
neighbour state while writing cell state take a ``snapshot_states()``
copy first so a pass always evaluates against one consistent prior state.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from islandgen.errors import OutOfRangeError, require
from islandgen.world.cell import Cell, CellState

StateSnapshot = tuple[tuple[CellState, ...], ...]
"""Immutable copy of every cell state, indexed ``[y][x]``."""


@dataclass
class Grid:
    """A ``size`` x ``size`` grid of cells, all water on creation.

    Attributes:
        size: Number of cells per row and per column.
        margin: Border width, in cells, kept out of generation.
        cells: 2D list of Cell objects indexed as ``cells[y][x]``.
    """

    size: int
    margin: int = 0
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the geometry and fill the grid with water cells."""
        require(self.size > 0, f"grid size must be positive, got {self.size}")
        require(
            0 <= self.margin and 2 * self.margin < self.size,
            f"margin must lie in [0, {self.size}/2), got {self.margin}",
        )
        self.cells = [
            [Cell(x=x, y=y) for x in range(self.size)] for y in range(self.size)
        ]

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size

    @property
    def low_margin(self) -> int:
        """First usable index on either axis."""
        return self.margin

    @property
    def high_x_margin(self) -> int:
        """Exclusive upper bound of usable columns."""
        return self.width - self.margin

    @property
    def high_y_margin(self) -> int:
        """Exclusive upper bound of usable rows."""
        return self.height - self.margin

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at grid coordinates ``(x, y)``.

        Args:
            x: Column index.
            y: Row index.

        Raises:
            OutOfRangeError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            raise OutOfRangeError(x, y, self.width, self.height)
        return self.cells[y][x]

    def set_state(self, x: int, y: int, state: CellState) -> None:
        """Change the state of the cell at ``(x, y)``.

        Raises:
            OutOfRangeError: If coordinates are out of bounds.
        """
        self.cell_at(x, y).state = state

    def snapshot_states(self) -> StateSnapshot:
        """Return a read-only copy of every cell state, indexed ``[y][x]``."""
        return tuple(tuple(cell.state for cell in row) for row in self.cells)

    def interior(self) -> Iterator[tuple[int, int]]:
        """Yield every ``(x, y)`` inside the margins, column by column."""
        for x in range(self.low_margin, self.high_x_margin):
            for y in range(self.low_margin, self.high_y_margin):
                yield x, y

    def count(self, state: CellState) -> int:
        """Return how many cells currently hold ``state``."""
        return sum(1 for row in self.cells for cell in row if cell.state is state)
