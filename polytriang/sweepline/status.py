"""
Sweep-line status: the segments crossing the sweep line, top to bottom.

Uses binary search on a sorted list (simpler than a balanced tree for
Python); lookups by segment id are linear.
"""

from __future__ import annotations

import bisect
from typing import Dict, Iterator, List, Optional, Tuple

from polytriang.sweepline.segment import Segment


class StatusStructure:
    """
    Ordered multiset of segments by descending sweep value.

    Equal values are ordered by descending slope, which is the vertical order
    just to the right of the sweep line. Values are stored here, not on the
    segments; ``recalculate`` refreshes them without re-sorting.
    """

    def __init__(self):
        self._ids: List[int] = []
        self._keys: List[Tuple[float, float]] = []
        self._segments: Dict[int, Segment] = {}
        self._values: Dict[int, float] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, segment: Segment) -> bool:
        return segment.id in self._segments

    def __iter__(self) -> Iterator[Segment]:
        return (self._segments[i] for i in self._ids)

    def _key(self, segment: Segment, value: float) -> Tuple[float, float]:
        return (-value, -segment.slope)

    def value(self, segment: Segment) -> float:
        return self._values[segment.id]

    def position(self, segment: Segment) -> int:
        """Rank from the top; raises ValueError when absent."""
        return self._ids.index(segment.id)

    def insert(self, segment: Segment, value: float) -> bool:
        """Insert keeping the order; no-op if the segment is already present."""
        if segment.id in self._segments:
            return False
        key = self._key(segment, value)
        pos = bisect.bisect_right(self._keys, key)
        self._ids.insert(pos, segment.id)
        self._keys.insert(pos, key)
        self._segments[segment.id] = segment
        self._values[segment.id] = value
        return True

    def remove(self, segment: Segment) -> bool:
        if segment.id not in self._segments:
            return False
        pos = self._ids.index(segment.id)
        del self._ids[pos]
        del self._keys[pos]
        del self._segments[segment.id]
        del self._values[segment.id]
        return True

    def _neighbour(self, segment: Segment, offset: int) -> Optional[Segment]:
        if segment.id not in self._segments:
            return None
        pos = self._ids.index(segment.id) + offset
        if 0 <= pos < len(self._ids):
            return self._segments[self._ids[pos]]
        return None

    def lower(self, segment: Segment) -> Optional[Segment]:
        """Segment immediately below ``segment``."""
        return self._neighbour(segment, 1)

    def higher(self, segment: Segment) -> Optional[Segment]:
        """Segment immediately above ``segment``."""
        return self._neighbour(segment, -1)

    def recalculate(self, x: float) -> None:
        """Recompute every sweep value at position x, in place."""
        for pos, sid in enumerate(self._ids):
            seg = self._segments[sid]
            value = seg.value_at(x)
            self._values[sid] = value
            self._keys[pos] = self._key(seg, value)

    def swap(self, s1: Segment, s2: Segment) -> None:
        """
        Exchange the places and sweep values of two segments.

        Each segment takes over the other's slot and the slot keys are left
        as they are, so the order never depends on how the exchanged values
        compare with a third segment's.
        """
        p1 = self._ids.index(s1.id)
        p2 = self._ids.index(s2.id)
        self._ids[p1], self._ids[p2] = self._ids[p2], self._ids[p1]
        self._values[s1.id], self._values[s2.id] = self._values[s2.id], self._values[s1.id]
