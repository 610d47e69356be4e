"""Config — load generator parameters from YAML files.

All tunable constants (grid size, island limits, weathering rates,
vegetation) live in YAML and are parsed into typed dataclasses here.
The resulting ``WorldConfig`` is passed explicitly to every pipeline
stage; nothing reads module-level settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from islandgen.errors import require
from islandgen.generation.islands import IslandProperties


def _probability(value: float, name: str) -> None:
    require(0.0 <= value <= 1.0, f"{name} must lie in [0, 1], got {value}")


@dataclass
class VegetationConfig:
    """Tree overlay settings.

    Attributes:
        min_trees: Trees always placed when enough land exists.
        max_trees: Upper bound on trees placed at once.
        spread_chance: Per-neighbour chance for land to become a tree
            during one spread pass.
    """

    min_trees: int = 3
    max_trees: int = 8
    spread_chance: float = 0.15

    def __post_init__(self) -> None:
        require(
            0 <= self.min_trees <= self.max_trees,
            f"tree counts must satisfy 0 <= min ({self.min_trees}) "
            f"<= max ({self.max_trees})",
        )
        _probability(self.spread_chance, "spread_chance")


@dataclass
class WorldConfig:
    """Top-level generator configuration.

    Attributes:
        seed: RNG seed for deterministic generation.
        grid_size: Number of cells per row and column.
        margin: Border width kept as water.
        weathering_passes: Passes run in each weathering direction.
        islands: Island size and count limits.
        break_chance: Base chance of stopping island or tree placement
            early.
        neighbour_chance: Per-neighbour conversion chance while weathering.
        min_neighbours: Same-state influence below which cleanup flips a
            cell.
        on_chance: Land probability per cell for pure random noise.
        vegetation: Tree overlay settings.
        canvas_size: Window width and height in pixels.
    """

    seed: int = 42
    grid_size: int = 50
    margin: int = 2
    weathering_passes: int = 10
    islands: IslandProperties = field(default_factory=IslandProperties)
    break_chance: float = 0.1
    neighbour_chance: float = 0.05
    min_neighbours: float = 1.5
    on_chance: float = 0.2
    vegetation: VegetationConfig = field(default_factory=VegetationConfig)
    canvas_size: int = 500

    def __post_init__(self) -> None:
        require(self.grid_size > 0, f"grid_size must be positive, got {self.grid_size}")
        require(
            0 <= self.margin and 2 * self.margin < self.grid_size,
            f"margin must lie in [0, {self.grid_size}/2), got {self.margin}",
        )
        require(
            self.weathering_passes >= 0,
            f"weathering_passes must be >= 0, got {self.weathering_passes}",
        )
        _probability(self.break_chance, "break_chance")
        _probability(self.neighbour_chance, "neighbour_chance")
        _probability(self.on_chance, "on_chance")
        require(
            self.min_neighbours >= 0,
            f"min_neighbours must be >= 0, got {self.min_neighbours}",
        )
        require(
            self.canvas_size > 0,
            f"canvas_size must be positive, got {self.canvas_size}",
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> WorldConfig:
        """Load configuration from a YAML file.

        Missing keys keep their defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated WorldConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            InvalidConfigurationError: If the values are inconsistent.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WorldConfig:
        """Build a config from an already-parsed mapping."""
        islands = data.get("islands") or {}
        vegetation = data.get("vegetation") or {}
        island_defaults = IslandProperties()
        vegetation_defaults = VegetationConfig()

        return cls(
            seed=data.get("seed", cls.seed),
            grid_size=data.get("grid_size", cls.grid_size),
            margin=data.get("margin", cls.margin),
            weathering_passes=data.get("weathering_passes", cls.weathering_passes),
            islands=IslandProperties(
                min_dim=islands.get("min_dim", island_defaults.min_dim),
                max_dim=islands.get("max_dim", island_defaults.max_dim),
                min_count=islands.get("min_count", island_defaults.min_count),
                max_count=islands.get("max_count", island_defaults.max_count),
            ),
            break_chance=data.get("break_chance", cls.break_chance),
            neighbour_chance=data.get("neighbour_chance", cls.neighbour_chance),
            min_neighbours=data.get("min_neighbours", cls.min_neighbours),
            on_chance=data.get("on_chance", cls.on_chance),
            vegetation=VegetationConfig(
                min_trees=vegetation.get("min_trees", vegetation_defaults.min_trees),
                max_trees=vegetation.get("max_trees", vegetation_defaults.max_trees),
                spread_chance=vegetation.get(
                    "spread_chance",
                    vegetation_defaults.spread_chance,
                ),
            ),
            canvas_size=data.get("canvas_size", cls.canvas_size),
        )
