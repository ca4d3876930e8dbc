"""
Core kernel primitives.

This layer knows NOTHING about trees, animals or any other domain.
It only knows:
- Time with nested units (ticks, days, years)
- Points on a map
- Objects registered under ids
- Events that objects cause, and how long they are remembered
- How to advance a world by one tick using host-supplied generators
"""

from hakoniwa.core.time import Time, CalendarConfig
from hakoniwa.core.point import Point
from hakoniwa.core.contracts import ObjectType, EventContents
from hakoniwa.core.entities import Object, Event
from hakoniwa.core.context import Context, GeneratedData, Generator, FunctionGenerator, as_generator
from hakoniwa.core.ids import CounterIdAssigner, WallClockIdAssigner, create_id_assigner
from hakoniwa.core.engine import run, run_with_stats, TickStats, Simulation, SimulationConfig

__all__ = [
    "Time",
    "CalendarConfig",
    "Point",
    "ObjectType",
    "EventContents",
    "Object",
    "Event",
    "Context",
    "GeneratedData",
    "Generator",
    "FunctionGenerator",
    "as_generator",
    "CounterIdAssigner",
    "WallClockIdAssigner",
    "create_id_assigner",
    "run",
    "run_with_stats",
    "TickStats",
    "Simulation",
    "SimulationConfig",
]
