"""
Registry entries (Object) and log records (Event).

Both are created only by the tick engine from generator output and stamped
with the tick that produced them.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Generic, Optional, TypeVar

from hakoniwa.core.contracts import EventContents, ObjectType
from hakoniwa.core.point import Point
from hakoniwa.core.time import Time

O = TypeVar("O", bound=ObjectType)
E = TypeVar("E", bound=EventContents)


@dataclass
class Object(Generic[O]):
    """
    A thing that exists in the world.

    Only `point` ever changes after creation, and only through relocation.
    """

    generated_time: Time
    point: Point  # Current location
    object_type: O

    @classmethod
    def from_type(cls, object_type: O, now: Time) -> Object[O]:
        """Stamp a freshly generated object at its declared origin."""
        return cls(
            generated_time=now,
            point=object_type.generated_point(),
            object_type=object_type,
        )

    def moved_to(self, point: Point) -> Object[O]:
        """Copy of this object at a new location, provenance unchanged."""
        return replace(self, point=point)

    def age(self, now: Time) -> int:
        """Unit-ticks elapsed since this object was generated."""
        return now.all - self.generated_time.all


@dataclass(frozen=True)
class Event(Generic[E]):
    """Something that happened, remembered until its lifetime runs out."""

    generated_time: Time
    lifetime: Optional[Time]  # None = never forgotten
    contents: E
    do_object: str  # Id of the causing object
    target_object: Optional[str] = None

    @classmethod
    def from_contents(cls, contents: E, now: Time) -> Event[E]:
        """Stamp event contents with the current tick and its causal fields."""
        return cls(
            generated_time=now,
            lifetime=contents.lifetime(),
            contents=contents,
            do_object=contents.do_object(),
            target_object=contents.target_object(),
        )

    def expired(self, now: Time) -> bool:
        """True once generated_time + lifetime < now; never for lifetime None."""
        if self.lifetime is None:
            return False
        return self.generated_time.all + self.lifetime.all < now.all
