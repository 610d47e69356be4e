"""Entry point for ``python -m islandgen``.

Loads the default YAML config, generates an island map, and opens a
Pygame window to view and regrow it.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib

from islandgen.simulation.config import WorldConfig
from islandgen.ui.pygame_client import PygameRenderer

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main() -> None:
    """Parse CLI args, load config, launch renderer."""
    parser = argparse.ArgumentParser(
        prog="islandgen",
        description="Islandgen - procedural island map generator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the first map (default: from config)",
    )
    parser.add_argument(
        "--canvas-size",
        type=int,
        default=None,
        help="Window width/height in pixels (default: from config)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = WorldConfig.from_yaml(args.config)
    if args.canvas_size is not None:
        config = dataclasses.replace(config, canvas_size=args.canvas_size)

    renderer = PygameRenderer(config=config, seed=args.seed)
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
