"""
Sweep events and the event queue.

The queue keeps events in ascending x. An event inserted with the same x as
queued events is polled before all of them, so ties resolve in reverse
arrival order.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from polytriang.sweepline.segment import Segment
from polytriang.vector import Point2


class EventKind(Enum):
    START = 0
    END = 1
    INTERSECTION = 2


@dataclass
class Event:
    point: Point2
    kind: EventKind
    segments: Tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def x(self) -> float:
        return self.point.x

    def involves(self, s1: Segment, s2: Segment) -> bool:
        """True for an intersection event on the unordered pair {s1, s2}."""
        if self.kind is not EventKind.INTERSECTION:
            return False
        a, b = self.segments
        return (a.id == s1.id and b.id == s2.id) or (a.id == s2.id and b.id == s1.id)


def start_event(segment: Segment) -> Event:
    return Event(segment.first(), EventKind.START, (segment,))


def end_event(segment: Segment) -> Event:
    return Event(segment.second(), EventKind.END, (segment,))


def intersection_event(point: Point2, s1: Segment, s2: Segment) -> Event:
    return Event(point, EventKind.INTERSECTION, (s1, s2))


class EventQueue:
    """
    Priority queue of sweep events ordered by x.

    Events are stored in descending x with a parallel list of negated keys,
    so the minimum is popped from the tail and insertion is a bisect.
    """

    def __init__(self):
        self._events: List[Event] = []
        self._keys: List[float] = []  # -x, ascending

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def __iter__(self) -> Iterator[Event]:
        """Iterate in poll order."""
        return reversed(self._events)

    def insert(self, event: Event) -> None:
        key = -event.x
        # bisect_right puts the new event after (i.e. polled before) equal keys
        pos = bisect.bisect_right(self._keys, key)
        self._keys.insert(pos, key)
        self._events.insert(pos, event)

    def peek(self) -> Optional[Event]:
        return self._events[-1] if self._events else None

    def poll(self) -> Event:
        """Remove and return the event with the smallest x."""
        if not self._events:
            raise IndexError("poll from an empty event queue")
        self._keys.pop()
        return self._events.pop()

    def _find_intersection(self, s1: Segment, s2: Segment) -> int:
        for pos in range(len(self._events) - 1, -1, -1):
            if self._events[pos].involves(s1, s2):
                return pos
        return -1

    def has_intersection_between(self, s1: Segment, s2: Segment) -> bool:
        return self._find_intersection(s1, s2) >= 0

    def remove_intersection_between(self, s1: Segment, s2: Segment) -> bool:
        """Drop the first pending intersection event on {s1, s2}, if any."""
        pos = self._find_intersection(s1, s2)
        if pos < 0:
            return False
        del self._keys[pos]
        del self._events[pos]
        return True
