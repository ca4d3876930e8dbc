"""Unit tests for Object, Event and the capability contracts."""

from dataclasses import dataclass
from typing import Optional

from hakoniwa.core.contracts import EventContents, ObjectType
from hakoniwa.core.entities import Event, Object
from hakoniwa.core.point import Point
from hakoniwa.core.time import Time


@dataclass(frozen=True)
class Rock:
    origin: Point

    def name(self) -> str:
        return "rock"

    def generated_point(self) -> Point:
        return self.origin


@dataclass(frozen=True)
class Push:
    actor: str
    target: Optional[str] = None
    span: Optional[Time] = None

    def do_object(self) -> str:
        return self.actor

    def target_object(self) -> Optional[str]:
        return self.target

    def lifetime(self) -> Optional[Time]:
        return self.span

    def move_object(self) -> Optional[tuple[str, Point]]:
        return None


class TestContracts:
    """Host variants satisfy the runtime-checkable protocols."""

    def test_object_type(self):
        assert isinstance(Rock(Point(0, 0)), ObjectType)
        assert not isinstance(Push("a"), ObjectType)

    def test_event_contents(self):
        assert isinstance(Push("a"), EventContents)
        assert not isinstance(Rock(Point(0, 0)), EventContents)


class TestObject:
    """Tests for Object."""

    def test_from_type(self, calendar):
        now = calendar.at(50)
        obj = Object.from_type(Rock(Point(2, 3)), now)
        assert obj.generated_time == now
        assert obj.point == Point(2, 3)
        assert obj.object_type == Rock(Point(2, 3))

    def test_moved_to_keeps_provenance(self, calendar):
        obj = Object.from_type(Rock(Point(2, 3)), calendar.at(50))
        moved = obj.moved_to(Point(9, 9))
        assert moved.point == Point(9, 9)
        assert moved.generated_time == obj.generated_time
        assert moved.object_type is obj.object_type
        assert obj.point == Point(2, 3)

    def test_age(self, calendar):
        obj = Object.from_type(Rock(Point(0, 0)), calendar.at(10))
        assert obj.age(calendar.at(34)) == 24


class TestEvent:
    """Tests for Event."""

    def test_from_contents(self, calendar):
        now = calendar.at(7)
        contents = Push("a", target="b", span=calendar.days(1))
        event = Event.from_contents(contents, now)

        assert event.generated_time == now
        assert event.lifetime == calendar.days(1)
        assert event.contents is contents
        assert event.do_object == "a"
        assert event.target_object == "b"

    def test_expiry_boundary(self, calendar):
        event = Event.from_contents(Push("a", span=calendar.at(24)), calendar.at(10))
        assert not event.expired(calendar.at(33))
        assert not event.expired(calendar.at(34))  # 10 + 24 is not < 34
        assert event.expired(calendar.at(35))

    def test_no_lifetime_never_expires(self, calendar):
        event = Event.from_contents(Push("a"), calendar.zero())
        assert event.lifetime is None
        assert not event.expired(calendar.at(10 ** 12))
