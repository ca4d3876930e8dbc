"""
Point: a location on the world map.

Coordinates are non-negative integers of any size. Which way the axes point
is up to the host; a right-handed system is assumed.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable 2D coordinate with structural equality and hashing."""

    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Point coordinates must be non-negative, got ({self.x}, {self.y})")

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y
