"""Tests for the UI module, run against SDL's dummy video driver."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import pygame
import pytest

from islandgen.generation.islands import IslandProperties
from islandgen.simulation.config import VegetationConfig, WorldConfig
from islandgen.ui.pygame_client import PygameRenderer
from islandgen.world.cell import CellState
from islandgen.world.grid import Grid


def test_pygame_renderer_importable() -> None:
    """PygameRenderer class is importable without initialising pygame."""
    assert PygameRenderer is not None


def test_main_module_importable() -> None:
    """The __main__ module is importable and exposes main()."""
    from islandgen.__main__ import main

    assert callable(main)


class TestPygameRenderer:
    """Drives the renderer's key handling on a headless display."""

    @pytest.fixture
    def renderer(self, monkeypatch: pytest.MonkeyPatch) -> Iterator[PygameRenderer]:
        monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
        config = WorldConfig(
            seed=3,
            grid_size=10,
            margin=2,
            weathering_passes=1,
            islands=IslandProperties(min_dim=2, max_dim=4, min_count=1, max_count=2),
            on_chance=1.0,
            vegetation=VegetationConfig(min_trees=0, max_trees=0, spread_chance=1.0),
            canvas_size=100,
        )
        renderer = PygameRenderer(config=config)
        pygame.event.clear()
        yield renderer
        pygame.quit()

    def test_space_release_spreads_trees(self, renderer: PygameRenderer) -> None:
        grid = Grid(size=10, margin=2)
        for x, y in grid.interior():
            grid.set_state(x, y, CellState.LAND)
        grid.set_state(5, 5, CellState.TREE)
        renderer.grid = grid

        pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
        renderer._handle_events()

        for x, y in [(4, 5), (6, 5), (5, 4), (5, 6)]:
            assert grid.cell_at(x, y).state is CellState.TREE

    def test_n_key_shows_random_noise(self, renderer: PygameRenderer) -> None:
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_n))
        renderer._handle_events()
        # Full on_chance turns the whole interior to land
        assert renderer.grid.count(CellState.LAND) == 36
        assert renderer.grid.count(CellState.TREE) == 0

    def test_r_key_regenerates(self, renderer: PygameRenderer) -> None:
        old_grid = renderer.grid
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
        renderer._handle_events()
        assert renderer.grid is not old_grid

    def test_regeneration_seed_is_independent_of_map_stream(
        self,
        renderer: PygameRenderer,
    ) -> None:
        # Drawn from the stream that built the first map, the seed would repeat
        same_stream_seed = int(np.random.default_rng(3).integers(0, 2**31 - 1))
        renderer.regenerate()
        assert renderer.seed != same_stream_seed

    def test_escape_stops_loop(self, renderer: PygameRenderer) -> None:
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        renderer._handle_events()
        assert renderer.running is False
