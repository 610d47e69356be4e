"""Tests for islandgen.simulation — config loading and the build pipeline."""

from pathlib import Path

import numpy as np
import pytest

from islandgen.errors import InvalidConfigurationError
from islandgen.generation.islands import IslandProperties
from islandgen.simulation.config import VegetationConfig, WorldConfig
from islandgen.simulation.pipeline import build_world, build_world_from_config
from islandgen.world.cell import CellState
from islandgen.world.grid import Grid

_DEFAULT_YAML = Path(__file__).resolve().parent.parent / "config" / "default.yaml"


class TestWorldConfig:
    """Tests for YAML config loading and validation."""

    def test_defaults(self) -> None:
        cfg = WorldConfig()
        assert cfg.seed == 42
        assert cfg.grid_size == 50
        assert cfg.margin == 2
        assert cfg.weathering_passes == 10
        assert cfg.break_chance == 0.1
        assert cfg.neighbour_chance == 0.05
        assert cfg.min_neighbours == 1.5
        assert cfg.islands == IslandProperties()
        assert cfg.vegetation == VegetationConfig()

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text(
            "seed: 99\n"
            "grid_size: 16\n"
            "islands:\n"
            "  min_dim: 2\n"
            "  max_dim: 6\n"
            "vegetation:\n"
            "  spread_chance: 0.3\n",
        )
        cfg = WorldConfig.from_yaml(yaml_file)
        assert cfg.seed == 99
        assert cfg.grid_size == 16
        assert cfg.islands.min_dim == 2
        assert cfg.islands.max_dim == 6
        assert cfg.islands.min_count == 6
        assert cfg.vegetation.spread_chance == 0.3
        assert cfg.vegetation.max_trees == 8
        assert cfg.margin == 2

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert WorldConfig.from_yaml(yaml_file) == WorldConfig()

    def test_shipped_default_matches_defaults(self) -> None:
        assert WorldConfig.from_yaml(_DEFAULT_YAML) == WorldConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            WorldConfig.from_yaml(tmp_path / "nope.yaml")

    def test_margin_too_large(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            WorldConfig(grid_size=10, margin=5)

    def test_probability_out_of_range(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            WorldConfig(neighbour_chance=1.5)

    def test_invalid_island_limits_in_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("islands:\n  min_count: 9\n  max_count: 3\n")
        with pytest.raises(InvalidConfigurationError):
            WorldConfig.from_yaml(yaml_file)

    def test_invalid_tree_limits(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            VegetationConfig(min_trees=4, max_trees=1)


class TestBuildWorld:
    """Tests for the full generation pipeline."""

    def test_returns_grid_of_requested_size(self, small_config: WorldConfig) -> None:
        grid = build_world_from_config(small_config)
        assert isinstance(grid, Grid)
        assert grid.width == 20
        assert grid.margin == 2

    def test_margin_stays_water(self, small_config: WorldConfig) -> None:
        grid = build_world_from_config(small_config)
        snapshot = grid.snapshot_states()
        interior = set(grid.interior())
        for y, row in enumerate(snapshot):
            for x, state in enumerate(row):
                if (x, y) not in interior:
                    assert state is CellState.WATER

    def test_no_trees_in_core_output(self, default_config: WorldConfig) -> None:
        grid = build_world_from_config(default_config)
        assert grid.count(CellState.TREE) == 0

    def test_determinism(self) -> None:
        """Same seed must produce identical grids."""
        props = IslandProperties(min_dim=3, max_dim=10, min_count=3, max_count=8)
        grids = [
            build_world(
                30,
                2,
                5,
                props,
                0.1,
                0.05,
                1.5,
                rng=np.random.default_rng(2024),
            )
            for _ in range(2)
        ]
        assert grids[0].snapshot_states() == grids[1].snapshot_states()

    def test_config_seed_is_default_rng(self, small_config: WorldConfig) -> None:
        a = build_world_from_config(small_config)
        b = build_world_from_config(small_config, np.random.default_rng(small_config.seed))
        assert a.snapshot_states() == b.snapshot_states()

    def test_degenerate_margin_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            build_world(
                10,
                5,
                1,
                IslandProperties(min_dim=1, max_dim=2, min_count=1, max_count=2),
                0.1,
                0.05,
                1.5,
                rng=np.random.default_rng(0),
            )
