"""Shared fixtures for the Islandgen test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from islandgen.simulation.config import WorldConfig
from islandgen.world.grid import Grid


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_grid() -> Grid:
    """A 10x10 grid with a 2-cell water margin."""
    return Grid(size=10, margin=2)


@pytest.fixture
def default_config() -> WorldConfig:
    """Default generator config (no YAML file needed)."""
    return WorldConfig()


@pytest.fixture
def small_config() -> WorldConfig:
    """A fast 20x20 config for pipeline tests."""
    from islandgen.generation.islands import IslandProperties

    return WorldConfig(
        seed=777,
        grid_size=20,
        margin=2,
        weathering_passes=3,
        islands=IslandProperties(min_dim=2, max_dim=6, min_count=2, max_count=5),
    )
