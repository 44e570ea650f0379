"""
Bentley-Ottmann style sweep for segment intersections.

Based on the plane-sweep pseudo-code in
https://web.archive.org/web/20141211224415/http://www.lems.brown.edu/~wq/projects/cs252.html

A vertical line moves left to right over the event queue. Only segments that
are adjacent in the status structure are tested, and a crossing is scheduled
only when it lies strictly to the right of the sweep line. Two exceptions sit
exactly on the sweep line:

- a vertical segment is tested against every segment in the status when it
  starts, and its hits are recorded on the spot;
- when several segments cross at one point, neighbours that become adjacent
  at that point are scheduled there too, once per pair.

Known limitations (floating point, no tolerance):
- parallel or collinear overlapping segments are never reported;
- a vertical segment may miss segments that only touch it with an endpoint at
  its x.
"""

from __future__ import annotations

import logging
import math
from typing import FrozenSet, Iterable, List, NamedTuple, Optional, Sequence, Set, Tuple, Union

from polytriang.sweepline.events import (
    Event,
    EventKind,
    EventQueue,
    end_event,
    intersection_event,
    start_event,
)
from polytriang.sweepline.segment import Segment
from polytriang.sweepline.status import StatusStructure
from polytriang.vector import Point2, PointLike

logger = logging.getLogger(__name__)

SegmentLike = Union[Segment, Tuple[PointLike, PointLike], Sequence[PointLike]]


class Intersection(NamedTuple):
    point: Point2
    first: Segment
    second: Segment


def as_segments(segments: Iterable[SegmentLike]) -> List[Segment]:
    """Coerce point pairs into Segments numbered by position."""
    out: List[Segment] = []
    for i, s in enumerate(segments):
        if isinstance(s, Segment):
            out.append(s)
        else:
            a, b = s
            out.append(Segment.of(i, a, b))
    ids = [s.id for s in out]
    if len(set(ids)) != len(ids):
        raise ValueError("segment ids must be unique")
    return out


class SweepLine:
    """Drives the event queue / status pair across a set of segments."""

    def __init__(self, segments: Iterable[SegmentLike]):
        self.segments = as_segments(segments)
        self.queue = EventQueue()
        self.status = StatusStructure()
        self.position = -math.inf
        self.intersections: List[Intersection] = []
        self._reported: Set[FrozenSet[int]] = set()

    def run(self) -> List[Intersection]:
        self.queue = EventQueue()
        self.status = StatusStructure()
        self.position = -math.inf
        self.intersections = []
        self._reported = set()

        for seg in self.segments:
            if seg.is_vertical:
                # Ties poll the newest event first, so Start must go in last.
                self.queue.insert(end_event(seg))
                self.queue.insert(start_event(seg))
            else:
                self.queue.insert(start_event(seg))
                self.queue.insert(end_event(seg))

        while self.queue:
            event = self.queue.poll()
            self.position = event.x
            if event.kind is EventKind.START:
                self._handle_start(event)
            elif event.kind is EventKind.END:
                self._handle_end(event)
            else:
                self._handle_intersection(event)

        logger.debug("sweep over %d segments found %d intersections",
                     len(self.segments), len(self.intersections))
        return self.intersections

    def _handle_start(self, event: Event) -> None:
        seg = event.segments[0]
        x = self.position
        self.status.recalculate(x)
        if seg.is_vertical:
            self._cross_vertical(seg)
        self.status.insert(seg, seg.value_at(x))

        lower = self.status.lower(seg)
        higher = self.status.higher(seg)
        if lower is not None:
            self._report(lower, seg)
        if higher is not None:
            self._report(higher, seg)
        if lower is not None and higher is not None:
            # seg now separates them
            self.queue.remove_intersection_between(lower, higher)

    def _handle_end(self, event: Event) -> None:
        seg = event.segments[0]
        lower = self.status.lower(seg)
        higher = self.status.higher(seg)
        if lower is not None and higher is not None:
            self._report(higher, lower)
        self.status.remove(seg)

    def _handle_intersection(self, event: Event) -> None:
        s1, s2 = event.segments
        self._record(event.point, s1, s2)
        if s1 in self.status and s2 in self.status:
            self.status.swap(s1, s2)
            if self.status.position(s1) < self.status.position(s2):
                upper, under = s1, s2
            else:
                upper, under = s2, s1

            above = self.status.higher(upper)
            if above is not None:
                self._report(above, upper, at=event.point)
                self.queue.remove_intersection_between(above, under)
            below = self.status.lower(under)
            if below is not None:
                self._report(under, below, at=event.point)
                self.queue.remove_intersection_between(below, upper)

    def _cross_vertical(self, seg: Segment) -> None:
        """Record where a vertical segment crosses the status; all hits lie on the sweep line."""
        lo, hi = sorted((seg.a.y, seg.b.y))
        for other in list(self.status):
            if not lo <= self.status.value(other) <= hi:
                continue
            point = crossing_point(seg, other)
            if point is not None:
                self._record(point, seg, other)

    def _record(self, point: Point2, s1: Segment, s2: Segment) -> None:
        logger.debug("intersection of %r and %r at (%g, %g)", s1, s2, point.x, point.y)
        self._reported.add(frozenset((s1.id, s2.id)))
        self.intersections.append(Intersection(point, s1, s2))

    def _report(self, s1: Segment, s2: Segment, at: Optional[Point2] = None) -> Optional[Point2]:
        """
        Schedule the crossing of s1 and s2 if it lies right of the sweep line.

        A crossing exactly at ``at`` (the point being handled) is scheduled as
        well, provided the pair has not been reported yet.
        """
        point = crossing_point(s1, s2)
        if point is None:
            return None
        if not point.x > self.position:
            if point != at or frozenset((s1.id, s2.id)) in self._reported:
                return None
        if self.queue.has_intersection_between(s1, s2):
            return None
        self.queue.insert(intersection_event(point, s1, s2))
        return point


def crossing_point(s1: Segment, s2: Segment) -> Optional[Point2]:
    """
    Parametric intersection of two segments, or None.

    Parallel and collinear pairs (zero determinant) return None.
    """
    x1, y1 = s1.first()
    x2, y2 = s1.second()
    x3, y3 = s2.first()
    x4, y4 = s2.second()

    r = (x2 - x1) * (y4 - y3) - (y2 - y1) * (x4 - x3)
    if r == 0:
        return None
    t = ((x3 - x1) * (y4 - y3) - (y3 - y1) * (x4 - x3)) / r
    u = ((x3 - x1) * (y2 - y1) - (y3 - y1) * (x2 - x1)) / r
    if not (0 <= t <= 1 and 0 <= u <= 1):
        return None
    return Point2(x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def sweep_intersections(segments: Iterable[SegmentLike]) -> List[Intersection]:
    """Intersections with the pair of segments that produced each one."""
    return SweepLine(segments).run()


def find_intersections(segments: Iterable[SegmentLike]) -> List[Point2]:
    """Intersection points in discovery order (not sorted, may repeat)."""
    return [hit.point for hit in SweepLine(segments).run()]
