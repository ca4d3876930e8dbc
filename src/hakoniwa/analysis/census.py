"""
Census: population counts and spatial density of a world.

Reads the Context between ticks; never modifies it.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from hakoniwa.core.context import Context


def count_by_type(ctx: "Context") -> dict[str, int]:
    """Number of live objects per ObjectType name."""
    return dict(Counter(obj.object_type.name() for obj in ctx.objects.values()))


@dataclass
class PopulationHistory:
    """
    Population counts recorded over time.

    Call record() once per tick (or per sampling interval), then pull the
    series out with as_array().
    """

    _ticks: list[int] = field(default_factory=list, init=False)
    _counts: list[dict[str, int]] = field(default_factory=list, init=False)

    def record(self, ctx: "Context") -> None:
        """Append the current counts."""
        self._ticks.append(ctx.time.all)
        self._counts.append(count_by_type(ctx))

    def __len__(self) -> int:
        return len(self._ticks)

    @property
    def ticks(self) -> np.ndarray:
        """Tick of each record."""
        return np.array(self._ticks, dtype=np.int64)

    def names(self) -> list[str]:
        """Every type name seen in any record, sorted."""
        return sorted({name for counts in self._counts for name in counts})

    def as_array(self, names: Sequence[str] | None = None) -> np.ndarray:
        """
        Counts as a [n_records, n_names] array.

        Args:
            names: Column order (defaults to names())

        Returns:
            Integer array; names absent from a record count as zero
        """
        if names is None:
            names = self.names()
        result = np.zeros((len(self._counts), len(names)), dtype=np.int64)
        for i, counts in enumerate(self._counts):
            for j, name in enumerate(names):
                result[i, j] = counts.get(name, 0)
        return result

    def totals(self) -> np.ndarray:
        """Total population at each record."""
        return np.array([sum(c.values()) for c in self._counts], dtype=np.int64)


def density_grid(ctx: "Context", width: int, height: int, cell: int = 10) -> np.ndarray:
    """
    Count objects per square cell of the map.

    Objects outside [0, width) x [0, height) are ignored.

    Args:
        ctx: World to sample
        width, height: Map size
        cell: Cell edge length

    Returns:
        [ny_cells, nx_cells] integer array, indexed [y, x]
    """
    if cell <= 0:
        raise ValueError(f"cell must be positive, got {cell}")

    nx_cells = -(-width // cell)
    ny_cells = -(-height // cell)
    grid = np.zeros((ny_cells, nx_cells), dtype=np.int64)
    # Filter before converting: coordinates can exceed int64
    inside = [
        obj.point.as_tuple() for obj in ctx.objects.values()
        if obj.point.x < width and obj.point.y < height
    ]
    if not inside:
        return grid

    points = np.array(inside, dtype=np.int64)
    np.add.at(grid, (points[:, 1] // cell, points[:, 0] // cell), 1)
    return grid
