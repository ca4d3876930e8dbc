"""
Context: the whole state of one world, plus the generator seam.

A Context holds:
- time: the current tick
- memory: the event log, in insertion order
- objects: the registry of live objects by id

Hosts read these fields between ticks. All mutation goes through the tick
engine in hakoniwa.core.engine.

Generators are the host's rules. Each one looks at the Context and returns a
GeneratedData: new event contents, new object types, and ids to remove.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, Protocol, TypeVar, Union

from hakoniwa.core.contracts import EventContents, ObjectType
from hakoniwa.core.entities import Event, Object
from hakoniwa.core.time import Time

O = TypeVar("O", bound=ObjectType)
E = TypeVar("E", bound=EventContents)


@dataclass
class Context(Generic[E, O]):
    """State of the world."""

    time: Time
    memory: list[Event[E]] = field(default_factory=list)
    objects: dict[str, Object[O]] = field(default_factory=dict)

    @classmethod
    def new(cls, time: Time, objects: Iterable[tuple[str, Object[O]]] = ()) -> Context[E, O]:
        """
        Create a world at `time` holding the given (id, object) pairs.

        The event log starts empty.
        """
        return cls(time=time, memory=[], objects=dict(objects))

    def evict_expired(self) -> int:
        """
        Forget every event whose lifetime has run out at the current time.

        Returns:
            Number of events removed
        """
        before = len(self.memory)
        self.memory = [e for e in self.memory if not e.expired(self.time)]
        return before - len(self.memory)

    def objects_of_type(self, cls: type) -> Iterator[tuple[str, Object[O]]]:
        """Iterate over (id, object) pairs whose object_type is an instance of `cls`."""
        for object_id, obj in self.objects.items():
            if isinstance(obj.object_type, cls):
                yield object_id, obj


@dataclass
class GeneratedData(Generic[E, O]):
    """What one generator produced for one tick."""

    events: list[E] = field(default_factory=list)
    generate_objects: list[O] = field(default_factory=list)
    remove_objects: list[str] = field(default_factory=list)


class Generator(Protocol):
    """
    Protocol for world rules.

    produce() must treat the Context as read-only. Generators may keep their
    own state (random sources, counters) between ticks.
    """

    def produce(self, ctx: Context) -> GeneratedData:
        ...


GeneratorFunction = Callable[[Context], GeneratedData]


@dataclass
class FunctionGenerator:
    """Adapter that lets a plain function act as a Generator."""

    function: GeneratorFunction

    def produce(self, ctx: Context) -> GeneratedData:
        return self.function(ctx)


def as_generator(generator: Union[Generator, GeneratorFunction]) -> Generator:
    """Accept either a Generator or a bare function of the Context."""
    if hasattr(generator, "produce"):
        return generator
    if callable(generator):
        return FunctionGenerator(generator)
    raise TypeError(f"Not a generator: {generator!r}")
