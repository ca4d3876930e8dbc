"""
The tick engine: advance a world by one unit-tick.

One call to run() does, in order:
1. Advance time by one unit-tick
2. Forget expired events
3. Ask every generator, in registration order, what happens now.
   All generators see the same state; none sees another's output.
4. Remove the requested objects (unknown ids are ignored)
5. Append the new events to memory
6. Apply relocations carried by the new events (missing objects are skipped)
7. Remove the requested objects again
8. Insert the newly generated objects under fresh ids
9. Return each generator's raw output

Removal happens before insertion so a generator can retire an object and
replace it in the same tick.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

from hakoniwa.core.context import (
    Context,
    GeneratedData,
    Generator,
    GeneratorFunction,
    as_generator,
)
from hakoniwa.core.entities import Event, Object
from hakoniwa.core.ids import IdAssigner, IdScheme, create_id_assigner

logger = logging.getLogger(__name__)


def _remove_all(ctx: Context, object_ids: Iterable[str]) -> int:
    removed = 0
    for object_id in object_ids:
        if ctx.objects.pop(object_id, None) is not None:
            removed += 1
    return removed


@dataclass
class TickStats:
    """What one tick changed."""

    evicted: int = 0  # Events forgotten
    events: int = 0  # Events appended
    created: int = 0  # Objects inserted, superseding ones included
    removed: int = 0  # Objects dropped, superseded ones included
    superseded: int = 0  # Insertions that replaced an object under the same id


def run(
    ctx: Context,
    generators: Sequence[Union[Generator, GeneratorFunction]],
    id_assigner: Optional[IdAssigner] = None,
) -> list[GeneratedData]:
    """
    Advance the world by one unit-tick and fold in everything that happens.

    Args:
        ctx: World state, mutated in place
        generators: Rules to apply, in order
        id_assigner: Source of ids for new objects (a fresh counter if None)

    Returns:
        The GeneratedData of each generator, in the same order
    """
    outputs, _ = run_with_stats(ctx, generators, id_assigner)
    return outputs


def run_with_stats(
    ctx: Context,
    generators: Sequence[Union[Generator, GeneratorFunction]],
    id_assigner: Optional[IdAssigner] = None,
) -> tuple[list[GeneratedData], TickStats]:
    """Same as run(), also returning what the tick changed."""
    if id_assigner is None:
        id_assigner = create_id_assigner("counter")

    ctx.time = ctx.time.plus_one()
    now = ctx.time
    evicted = ctx.evict_expired()

    new_events: list[Event] = []
    new_objects: list[tuple[str, Object]] = []
    remove_ids: list[str] = []
    outputs: list[GeneratedData] = []

    for generator in generators:
        data = as_generator(generator).produce(ctx)
        outputs.append(data)

        new_events.extend(Event.from_contents(contents, now) for contents in data.events)
        remove_ids.extend(data.remove_objects)
        for object_type in data.generate_objects:
            obj = Object.from_type(object_type, now)
            object_id = id_assigner.assign(object_type.name(), obj.point, now.all)
            new_objects.append((object_id, obj))

    removed = _remove_all(ctx, remove_ids)
    ctx.memory.extend(new_events)

    for event in new_events:
        move = event.contents.move_object()
        if move is None:
            continue
        object_id, point = move
        obj = ctx.objects.get(object_id)
        if obj is None:
            logger.debug("Tick %d: relocation of missing object %r dropped", now.all, object_id)
            continue
        ctx.objects[object_id] = obj.moved_to(point)

    removed += _remove_all(ctx, remove_ids)

    superseded = 0
    for object_id, obj in new_objects:
        if object_id in ctx.objects:
            logger.debug("Tick %d: object %r superseded", now.all, object_id)
            superseded += 1
        ctx.objects[object_id] = obj

    stats = TickStats(
        evicted=evicted,
        events=len(new_events),
        created=len(new_objects),
        removed=removed + superseded,
        superseded=superseded,
    )
    logger.debug(
        "Tick %d: evicted=%d events=%d created=%d removed=%d",
        now.all, stats.evicted, stats.events, stats.created, stats.removed,
    )
    return outputs, stats


@dataclass
class SimulationConfig:
    """Configuration for a Simulation."""

    id_scheme: IdScheme = "counter"  # How new objects are named
    log_interval: int = 0  # Ticks between progress log lines (0 = never)


@dataclass
class Simulation:
    """
    A world together with its rules.

    Owns the Context, the ordered generator list and the id assigner, and
    drives the tick engine.
    """

    context: Context
    generators: list = field(default_factory=list)
    config: SimulationConfig = field(default_factory=SimulationConfig)

    # Simulation state
    current_tick: int = field(default=0, init=False)
    last_stats: TickStats = field(default_factory=TickStats, init=False)
    _id_assigner: IdAssigner = field(default=None, init=False)

    def __post_init__(self):
        self.generators = [as_generator(g) for g in self.generators]
        self._id_assigner = create_id_assigner(self.config.id_scheme)

    def add_generator(self, generator: Union[Generator, GeneratorFunction]):
        """Register a generator after those already present."""
        self.generators.append(as_generator(generator))

    def step(self) -> list[GeneratedData]:
        """Run exactly one tick."""
        outputs, self.last_stats = run_with_stats(self.context, self.generators, self._id_assigner)
        self.current_tick += 1
        return outputs

    def run(self, n_ticks: int) -> dict:
        """
        Run simulation for n ticks.

        Returns:
            Statistics dictionary
        """
        created = 0
        removed = 0
        for _ in range(n_ticks):
            self.step()
            created += self.last_stats.created
            removed += self.last_stats.removed

            interval = self.config.log_interval
            if interval > 0 and self.current_tick % interval == 0:
                logger.info(
                    "tick=%d objects=%d events=%d",
                    self.context.time.all,
                    len(self.context.objects),
                    len(self.context.memory),
                )

        return {
            "n_ticks": n_ticks,
            "time": self.context.time.all,
            "n_objects": len(self.context.objects),
            "n_events": len(self.context.memory),
            "created": created,
            "removed": removed,
        }
