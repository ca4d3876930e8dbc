"""
Capability contracts for host-defined variants.

The kernel knows nothing about trees, people or machines. A host describes
its domain with two families of types:
- ObjectType: what a thing is and where it first appeared
- EventContents: who caused something, to whom, for how long it is
  remembered, and whether it moves someone

The kernel only ever calls the methods below.
"""

from __future__ import annotations
from typing import Optional, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from hakoniwa.core.point import Point
    from hakoniwa.core.time import Time


@runtime_checkable
class ObjectType(Protocol):
    """Protocol for the contents of a registry entry."""

    def name(self) -> str:
        """Human-readable name of this kind of object."""
        ...

    def generated_point(self) -> "Point":
        """Point at which this object came into existence."""
        ...


@runtime_checkable
class EventContents(Protocol):
    """Protocol for the contents of an event."""

    def do_object(self) -> str:
        """Id of the object that caused the event."""
        ...

    def target_object(self) -> Optional[str]:
        """Id of the object the event was aimed at, for events between objects."""
        ...

    def lifetime(self) -> Optional["Time"]:
        """
        How long the event is remembered.

        None means the event is never forgotten.
        """
        ...

    def move_object(self) -> Optional[tuple[str, "Point"]]:
        """
        Relocation caused by the event: (object id, destination).

        None when the event moves nothing.
        """
        ...
