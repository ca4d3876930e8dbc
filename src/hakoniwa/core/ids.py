"""
Identifier assignment for newly generated objects.

Two schemes:
- counter: a digest of (name, point, tick) plus a per-world counter.
  Deterministic, and unique within the world.
- wall_clock: name, point, tick and a wall-clock sample, base64-encoded.
  Unique in practice only; two objects of the same type generated at the
  same point in the same tick may collide if the clock does not move.
"""

from __future__ import annotations
import base64
import hashlib
import time
from dataclasses import dataclass
from typing import Literal, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from hakoniwa.core.point import Point

IdScheme = Literal["counter", "wall_clock"]


class IdAssigner(Protocol):
    """Protocol for registry key generation."""

    def assign(self, name: str, point: "Point", tick: int) -> str:
        ...


def _encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


@dataclass
class CounterIdAssigner:
    """
    Deterministic ids: 8-byte content digest followed by a running counter.

    The digest keeps ids traceable to (name, point, tick); the counter makes
    them unique. Each world should own its own assigner.
    """

    next_index: int = 0
    digest_size: int = 8

    def assign(self, name: str, point: "Point", tick: int) -> str:
        digest = hashlib.sha256(f"{name}:{point.x},{point.y}:{tick}".encode("utf-8")).digest()
        index = self.next_index
        self.next_index += 1
        width = max(1, (index.bit_length() + 7) // 8)
        return _encode(digest[: self.digest_size] + index.to_bytes(width, "big"))


@dataclass
class WallClockIdAssigner:
    """Ids from <name><point><tick><wall clock>, base64-encoded."""

    def assign(self, name: str, point: "Point", tick: int) -> str:
        raw = f"{name}({point.x},{point.y}){tick}{time.time_ns()}"
        return _encode(raw.encode("utf-8"))


def create_id_assigner(scheme: IdScheme = "counter") -> IdAssigner:
    """
    Factory for id assigners.

    Args:
        scheme: "counter" (deterministic) or "wall_clock"
    """
    if scheme == "counter":
        return CounterIdAssigner()
    if scheme == "wall_clock":
        return WallClockIdAssigner()
    raise ValueError(f"Unknown id scheme: {scheme!r}")
