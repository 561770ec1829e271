"""
Overlap detection.

Appointments occupy half-open intervals [start, start + duration) measured
in minutes since midnight. Two intervals [s1, e1) and [s2, e2) intersect
iff s1 < e2 and s2 < e1, so back-to-back appointments never conflict.
"""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from datetime import time
from enum import Enum

from app.scheduling.slots import minutes_since_midnight


@dataclass(frozen=True)
class Interval:
    """Half-open [start, end) interval in minutes since midnight."""

    start: int
    end: int

    @classmethod
    def from_start(cls, start: time, duration_minutes: int) -> "Interval":
        begin = minutes_since_midnight(start)
        return cls(begin, begin + duration_minutes)

    @classmethod
    def from_bounds(cls, start: time, end: time) -> "Interval":
        return cls(minutes_since_midnight(start), minutes_since_midnight(end))


def overlaps(a: Interval, b: Interval) -> bool:
    """Return True if the two half-open intervals intersect."""
    return a.start < b.end and b.start < a.end


class RejectionReason(str, Enum):
    """Why a candidate interval cannot be placed."""

    OVERLAP = "overlap"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Placement:
    """Outcome of a placement check."""

    accepted: bool
    reason: RejectionReason | None = None
    conflicts: tuple[Hashable, ...] = field(default_factory=tuple)


def can_place(
    candidate: Interval,
    existing: Iterable[tuple[Hashable, Interval]],
    blocked: Iterable[tuple[Hashable, Interval]] = (),
    exclude: Hashable | None = None,
) -> Placement:
    """
    Decide whether a candidate interval fits into a day.

    Args:
        candidate: interval being created or edited
        existing: (id, interval) pairs for the appointments of the same day
        blocked: (id, interval) pairs for blocked periods of the same day
        exclude: id to ignore in ``existing`` (the record being edited)

    Returns:
        Placement: accepted, or rejected with the reason and the ids of
        every conflicting record. Appointment overlaps win over blocks.
    """
    conflicts = tuple(
        key for key, interval in existing if key != exclude and overlaps(candidate, interval)
    )
    if conflicts:
        return Placement(accepted=False, reason=RejectionReason.OVERLAP, conflicts=conflicts)

    blocking = tuple(key for key, interval in blocked if overlaps(candidate, interval))
    if blocking:
        return Placement(accepted=False, reason=RejectionReason.BLOCKED, conflicts=blocking)

    return Placement(accepted=True)
