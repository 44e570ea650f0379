"""Sweep-line segment intersection."""

from polytriang.sweepline.engine import (
    Intersection,
    SweepLine,
    crossing_point,
    find_intersections,
    sweep_intersections,
)
from polytriang.sweepline.events import Event, EventKind, EventQueue
from polytriang.sweepline.segment import Segment
from polytriang.sweepline.status import StatusStructure

__all__ = [
    "Event",
    "EventKind",
    "EventQueue",
    "Intersection",
    "Segment",
    "StatusStructure",
    "SweepLine",
    "crossing_point",
    "find_intersections",
    "sweep_intersections",
]
