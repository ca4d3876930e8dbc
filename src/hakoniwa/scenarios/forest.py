"""
Forest: trees that seed, crowd each other out, and die of old age.

Each species has:
- a mean lifetime and spread (years); each tree draws its own lifetime
- a required space around it that grows with age
- an age at which it starts seeding
- a seeding season (from 3/4 to 7/8 of the year) with a daily maximum seed count
- a scatter range for its seeds

Rules are applied once per day (when remainder_time == 0):
- SeedDispersal: mature trees in season drop seeds nearby; a seed only
  takes root where no existing tree claims the space
- Senescence: trees past their lifetime die and are removed
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from hakoniwa.core.context import Context, GeneratedData
from hakoniwa.core.engine import Simulation, SimulationConfig
from hakoniwa.core.entities import Object
from hakoniwa.core.point import Point
from hakoniwa.core.time import CalendarConfig, Time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeTypeInfo:
    """Per-species parameters."""

    lifetime: int  # Mean lifetime in years
    life_mu: float  # Spread of the lifetime in years
    space_steps: tuple[tuple[int, int], ...]  # (below this age in years, required space)
    final_space: int  # Required space once older than every step
    can_generate_children_year: int  # Age in years at which seeding starts
    max_children_per_day: int
    children_range_x: int
    children_range_y: int

    def required_space(self, year: int) -> int:
        """Space a tree of this species claims at the given age in years."""
        for below, space in self.space_steps:
            if year < below:
                return space
        return self.final_space

    def children_quantity(self, day_of_year: int, one_year_of_day: int, rng: np.random.Generator) -> int:
        """Number of seeds dropped today; zero outside the seeding season."""
        season_start = one_year_of_day // 4 * 3
        season_end = one_year_of_day // 8 * 7
        if season_start <= day_of_year < season_end:
            return int(rng.random() * self.max_children_per_day)
        return 0


class TreeType(Enum):
    PINE = "pine"
    SAKURA = "sakura"
    GINKGO = "ginkgo"
    CEDAR = "cedar"

    @property
    def info(self) -> TreeTypeInfo:
        return SPECIES[self]


SPECIES: dict[TreeType, TreeTypeInfo] = {
    TreeType.PINE: TreeTypeInfo(
        lifetime=60, life_mu=15.0,
        space_steps=((15, 10), (30, 20)), final_space=30,
        can_generate_children_year=25, max_children_per_day=30,
        children_range_x=75, children_range_y=75,
    ),
    TreeType.SAKURA: TreeTypeInfo(
        lifetime=50, life_mu=5.0,
        space_steps=((20, 20),), final_space=30,
        can_generate_children_year=30, max_children_per_day=10,
        children_range_x=30, children_range_y=30,
    ),
    TreeType.GINKGO: TreeTypeInfo(
        lifetime=70, life_mu=20.0,
        space_steps=((20, 10), (40, 30)), final_space=40,
        can_generate_children_year=20, max_children_per_day=30,
        children_range_x=100, children_range_y=100,
    ),
    TreeType.CEDAR: TreeTypeInfo(
        lifetime=65, life_mu=25.0,
        space_steps=((10, 10), (40, 25)), final_space=30,
        can_generate_children_year=20, max_children_per_day=45,
        children_range_x=80, children_range_y=80,
    ),
}


@dataclass(frozen=True)
class TreeInfo:
    """An individual tree (an ObjectType)."""

    tree_type: TreeType
    lifetime: Time  # This tree's own lifespan
    point: Point  # Where the seed took root

    def name(self) -> str:
        return self.tree_type.value

    def generated_point(self) -> Point:
        return self.point


@dataclass(frozen=True)
class GenerateChildren:
    """A tree dropped a seed that took root at `point`."""

    parent: str
    point: Point
    span: Time  # How long the event is remembered

    def do_object(self) -> str:
        return self.parent

    def target_object(self) -> Optional[str]:
        return None

    def lifetime(self) -> Optional[Time]:
        return self.span

    def move_object(self) -> Optional[tuple[str, Point]]:
        return None


@dataclass(frozen=True)
class DeadTree:
    """A tree reached the end of its life."""

    id: str
    span: Time

    def do_object(self) -> str:
        return self.id

    def target_object(self) -> Optional[str]:
        return None

    def lifetime(self) -> Optional[Time]:
        return self.span

    def move_object(self) -> Optional[tuple[str, Point]]:
        return None


def plant_tree(
    tree_type: TreeType,
    point: Point,
    rng: np.random.Generator,
    calendar: CalendarConfig,
) -> TreeInfo:
    """
    Create a tree with a lifetime drawn from its species distribution.

    The drawn lifetime is at least one year.
    """
    info = tree_type.info
    years = max(1.0, rng.normal(info.lifetime, info.life_mu))
    lifetime = calendar.at(int(years * calendar.one_year_of_time))
    return TreeInfo(tree_type=tree_type, lifetime=lifetime, point=point)


def _age_years(obj: Object, now: Time, calendar: CalendarConfig) -> int:
    return obj.age(now) // calendar.one_year_of_time


@dataclass
class SeedDispersal:
    """Generator: mature trees scatter seeds during their season."""

    rng: np.random.Generator
    calendar: CalendarConfig
    width: int
    height: int

    def produce(self, ctx: Context) -> GeneratedData:
        now = ctx.time
        data = GeneratedData()
        if now.remainder_time != 0:
            return data

        trees = list(ctx.objects_of_type(TreeInfo))
        if not trees:
            return data

        xs = np.array([obj.point.x for _, obj in trees], dtype=np.int64)
        ys = np.array([obj.point.y for _, obj in trees], dtype=np.int64)
        spaces = np.array(
            [obj.object_type.tree_type.info.required_space(_age_years(obj, now, self.calendar))
             for _, obj in trees],
            dtype=np.int64,
        )
        span = self.calendar.days(1)

        for parent_id, parent in trees:
            tree_type = parent.object_type.tree_type
            info = tree_type.info
            if _age_years(parent, now, self.calendar) < info.can_generate_children_year:
                continue

            quantity = info.children_quantity(now.remainder_day, self.calendar.one_year_of_day, self.rng)
            for _ in range(quantity):
                x = int(np.clip(
                    parent.point.x + self.rng.integers(-info.children_range_x, info.children_range_x + 1),
                    0, self.width - 1,
                ))
                y = int(np.clip(
                    parent.point.y + self.rng.integers(-info.children_range_y, info.children_range_y + 1),
                    0, self.height - 1,
                ))
                dist_sq = (xs - x) ** 2 + (ys - y) ** 2
                if np.any(dist_sq < spaces ** 2):
                    continue

                point = Point(x, y)
                data.events.append(GenerateChildren(parent=parent_id, point=point, span=span))
                data.generate_objects.append(plant_tree(tree_type, point, self.rng, self.calendar))
                # Seedlings claim space for the rest of this tick
                xs = np.append(xs, x)
                ys = np.append(ys, y)
                spaces = np.append(spaces, tree_type.info.required_space(0))

        return data


@dataclass
class Senescence:
    """Generator: trees past their lifetime die."""

    calendar: CalendarConfig

    def produce(self, ctx: Context) -> GeneratedData:
        now = ctx.time
        data = GeneratedData()
        if now.remainder_time != 0:
            return data

        span = self.calendar.days(1)
        for object_id, obj in ctx.objects_of_type(TreeInfo):
            if obj.age(now) >= obj.object_type.lifetime.all:
                data.events.append(DeadTree(id=object_id, span=span))
                data.remove_objects.append(object_id)
        return data


@dataclass
class ForestConfig:
    """Configuration for a forest world."""

    width: int = 200
    height: int = 200
    initial_trees: int = 20
    max_initial_age: int = 40  # Years; initial trees get a uniform random age below this
    start_year: int = 100  # The clock starts here so initial trees can be older than zero
    seed: int = 42
    species: tuple[TreeType, ...] = tuple(TreeType)
    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)


def create_forest(config: Optional[ForestConfig] = None) -> Simulation:
    """
    Build a forest simulation with randomly placed initial trees.

    Args:
        config: Forest parameters (defaults if None)

    Returns:
        Simulation with SeedDispersal and Senescence registered, in that order
    """
    if config is None:
        config = ForestConfig()
    if config.max_initial_age > config.start_year:
        raise ValueError("max_initial_age cannot exceed start_year")

    rng = np.random.default_rng(seed=config.seed)
    calendar = config.calendar
    start = calendar.years(config.start_year)

    objects = []
    for i in range(config.initial_trees):
        tree_type = config.species[int(rng.integers(len(config.species)))]
        point = Point(int(rng.integers(config.width)), int(rng.integers(config.height)))
        tree = plant_tree(tree_type, point, rng, calendar)
        age = int(rng.integers(config.max_initial_age * calendar.one_year_of_time + 1))
        born = calendar.at(start.all - age)
        objects.append((f"{tree_type.value}-{i}", Object(generated_time=born, point=point, object_type=tree)))

    logger.info("Planted %d initial trees on a %dx%d map", len(objects), config.width, config.height)

    context = Context.new(start, objects)
    return Simulation(
        context=context,
        generators=[
            SeedDispersal(rng=rng, calendar=calendar, width=config.width, height=config.height),
            Senescence(calendar=calendar),
        ],
        config=config.simulation,
    )
