"""
Scenarios: host worlds built on the kernel.

Scenarios supply object and event variants and the generators that act on
them. The kernel never imports from here.
- forest: trees that seed, crowd and die
"""

from hakoniwa.scenarios.forest import (
    TreeType,
    TreeTypeInfo,
    TreeInfo,
    GenerateChildren,
    DeadTree,
    SeedDispersal,
    Senescence,
    ForestConfig,
    plant_tree,
    create_forest,
)

__all__ = [
    "TreeType",
    "TreeTypeInfo",
    "TreeInfo",
    "GenerateChildren",
    "DeadTree",
    "SeedDispersal",
    "Senescence",
    "ForestConfig",
    "plant_tree",
    "create_forest",
]
