"""Pygame 2D visualization for the island generator.

Draws the current grid as coloured squares next to a small info panel.
Keys regenerate the map, plant trees, and spread existing trees; every
action calls into the generator core and redraws its resulting state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pygame

from islandgen.generation.islands import randomize
from islandgen.generation.vegetation import place_trees, spread_trees
from islandgen.simulation.pipeline import build_world_from_config
from islandgen.world.cell import CellState, colour_for
from islandgen.world.grid import Grid

if TYPE_CHECKING:
    from islandgen.simulation.config import WorldConfig

logger = logging.getLogger(__name__)

# Colour palette
_BG = (0, 0, 0)
_PANEL_TEXT = (200, 200, 200)

_MAX_SEED = 2**31 - 1


class PygameRenderer:
    """Renders a generated island grid into a Pygame window.

    Attributes:
        config: Generator configuration.
        seed: Seed the current grid was built from.
        grid: The grid being displayed.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    def __init__(self, config: WorldConfig, seed: int | None = None) -> None:
        """Build the first grid and open the window.

        Args:
            config: Generator configuration.
            seed: Seed for the first grid; defaults to ``config.seed``.
        """
        self.config = config
        self.cell_size = max(1, config.canvas_size // config.grid_size)
        self.seed = config.seed if seed is None else seed
        # Independent stream for the seeds of later regenerations
        self._seeds = np.random.default_rng(self.seed).spawn(1)[0]
        self.rng = np.random.default_rng(self.seed)
        self.grid: Grid = self._build()

        canvas = config.grid_size * self.cell_size
        self._panel_width = 220
        self._win_w = canvas + self._panel_width
        self._win_h = canvas

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Islandgen")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True

    def _build(self) -> Grid:
        """Generate a fresh grid from the current seed and plant trees."""
        grid = build_world_from_config(self.config, self.rng)
        place_trees(
            grid,
            self.config.vegetation.min_trees,
            self.config.vegetation.max_trees,
            self.rng,
            break_chance=self.config.break_chance,
        )
        return grid

    def regenerate(self) -> None:
        """Replace the grid with one built from a new seed."""
        self.seed = int(self._seeds.integers(0, _MAX_SEED))
        self.rng = np.random.default_rng(self.seed)
        logger.info("Regenerating with seed %d", self.seed)
        self.grid = self._build()

    def show_noise(self) -> None:
        """Replace the grid with pure random land for comparison."""
        grid = Grid(size=self.config.grid_size, margin=self.config.margin)
        randomize(grid, self.config.on_chance, self.rng)
        self.grid = grid

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            self.clock.tick(fps)
            self._handle_events()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        vegetation = self.config.vegetation
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self.regenerate()
                elif event.key == pygame.K_n:
                    self.show_noise()
                elif event.key == pygame.K_t:
                    place_trees(
                        self.grid,
                        vegetation.min_trees,
                        vegetation.max_trees,
                        self.rng,
                        break_chance=self.config.break_chance,
                    )
            # Spread once per press, not once per frame while held
            elif event.type == pygame.KEYUP and event.key == pygame.K_SPACE:
                spread_trees(self.grid, vegetation.spread_chance, self.rng)

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_cells()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_cells(self) -> None:
        """Draw every cell in the colour of its state."""
        cs = self.cell_size
        snapshot = self.grid.snapshot_states()
        for y, row in enumerate(snapshot):
            for x, state in enumerate(row):
                pygame.draw.rect(
                    self.screen,
                    colour_for(state),
                    (x * cs, y * cs, cs, cs),
                )

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.grid.width * self.cell_size + 10
        y = 10

        lines = [
            f"Seed: {self.seed}",
            f"Grid: {self.grid.width}x{self.grid.height}",
            "",
            "--- Terrain ---",
        ]
        lines += [
            f"{state.value.capitalize()}: {self.grid.count(state)}"
            for state in CellState
        ]
        lines += [
            "",
            "--- Controls ---",
            "SPACE: spread trees",
            "T: plant trees",
            "R: regenerate",
            "N: random noise",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _PANEL_TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
