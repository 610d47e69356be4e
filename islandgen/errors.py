"""Errors raised by the island generator.

Both are programming or configuration mistakes surfaced to the caller
immediately.  Stochastic outcomes (no islands changed, no land for
trees, overlapping islands) are never errors.
"""

from __future__ import annotations


class OutOfRangeError(IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"({x}, {y}) out of bounds for {width}x{height}")


class InvalidConfigurationError(ValueError):
    """Raised when parameters would produce undefined grid geometry."""


def require(cond: bool, msg: str) -> None:
    """Raise ``InvalidConfigurationError`` with ``msg`` unless ``cond``."""
    if not cond:
        raise InvalidConfigurationError(msg)
