"""
Analysis layer: derived quantities for inspecting a world.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- count_by_type: live objects per type name
- PopulationHistory: counts recorded over time
- density_grid: objects per map cell
"""

from hakoniwa.analysis.census import count_by_type, PopulationHistory, density_grid

__all__ = [
    "count_by_type",
    "PopulationHistory",
    "density_grid",
]
