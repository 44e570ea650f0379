"""
Sweep-line tests: event queue ordering, status structure, intersection engine.
"""

import pytest

from polytriang.sweepline import (
    EventKind,
    EventQueue,
    Segment,
    StatusStructure,
    SweepLine,
    crossing_point,
    find_intersections,
    sweep_intersections,
)
from polytriang.sweepline.events import end_event, intersection_event, start_event
from polytriang.vector import Point2


def seg(i, a, b):
    return Segment.of(i, a, b)


def event_at(x, y, s):
    return intersection_event(Point2(x, y), s, s)


class TestSegment:
    """Endpoint order and sweep values"""

    def test_first_is_leftmost(self):
        s = seg(0, (3, 1), (1, 2))
        assert s.first() == Point2(1, 2)
        assert s.second() == Point2(3, 1)

    def test_value_at(self):
        s = seg(0, (0, 0), (4, 2))
        assert s.value_at(0) == 0
        assert s.value_at(2) == 1.0
        assert s.value_at(4) == 2.0

    def test_vertical_segment(self):
        s = seg(0, (1, 3), (1, -1))
        assert s.is_vertical
        assert s.value_at(1) == -1
        assert s.slope == float("inf")


class TestEventQueue:
    """Ascending x with newest-first ties"""

    def test_poll_order_by_x(self):
        q = EventQueue()
        s = seg(0, (0, 0), (1, 1))
        q.insert(intersection_event(Point2(2, 0), s, s))
        q.insert(intersection_event(Point2(0, 0), s, s))
        q.insert(intersection_event(Point2(1, 0), s, s))
        assert [q.poll().x for _ in range(3)] == [0, 1, 2]

    def test_ties_poll_newest_first(self):
        q = EventQueue()
        s = seg(0, (0, 0), (1, 1))
        q.insert(event_at(1, 10, s))
        q.insert(event_at(1, 20, s))
        q.insert(event_at(0, 30, s))
        q.insert(event_at(1, 40, s))
        assert [q.poll().point.y for _ in range(4)] == [30, 40, 20, 10]

    def test_poll_empty_raises(self):
        with pytest.raises(IndexError):
            EventQueue().poll()

    def test_peek_does_not_remove(self):
        q = EventQueue()
        assert q.peek() is None
        s = seg(0, (0, 0), (1, 1))
        q.insert(start_event(s))
        q.insert(end_event(s))
        assert q.peek().kind is EventKind.START
        assert len(q) == 2

    def test_remove_intersection_between(self):
        a = seg(0, (0, 0), (2, 2))
        b = seg(1, (0, 2), (2, 0))
        c = seg(2, (0, 1), (2, 1))
        q = EventQueue()
        q.insert(start_event(a))
        q.insert(intersection_event(Point2(1, 1), a, b))
        q.insert(end_event(a))
        assert q.has_intersection_between(b, a)
        assert not q.remove_intersection_between(a, c)
        assert q.remove_intersection_between(b, a)
        assert not q.has_intersection_between(a, b)
        assert [e.kind for e in q] == [EventKind.START, EventKind.END]


class TestStatusStructure:
    """Descending sweep value order"""

    def setup_method(self):
        self.top = seg(0, (0, 3), (4, 3))
        self.mid = seg(1, (0, 2), (4, 2))
        self.bottom = seg(2, (0, 1), (4, 1))
        self.status = StatusStructure()
        for s in (self.mid, self.bottom, self.top):
            self.status.insert(s, s.value_at(0))

    def test_order_top_to_bottom(self):
        assert list(self.status) == [self.top, self.mid, self.bottom]

    def test_neighbours(self):
        assert self.status.lower(self.mid) == self.bottom
        assert self.status.higher(self.mid) == self.top
        assert self.status.higher(self.top) is None
        assert self.status.lower(self.bottom) is None

    def test_duplicate_insert_is_noop(self):
        assert not self.status.insert(self.mid, 2.0)
        assert len(self.status) == 3

    def test_remove(self):
        assert self.status.remove(self.mid)
        assert not self.status.remove(self.mid)
        assert self.status.lower(self.top) == self.bottom

    def test_equal_values_ordered_by_slope(self):
        status = StatusStructure()
        rising = seg(0, (0, 0), (1, 1))
        falling = seg(1, (0, 0), (1, -1))
        status.insert(falling, 0.0)
        status.insert(rising, 0.0)
        assert list(status) == [rising, falling]

    def test_recalculate(self):
        status = StatusStructure()
        s = seg(0, (0, 0), (4, 4))
        status.insert(s, s.value_at(0))
        status.recalculate(3)
        assert status.value(s) == 3.0

    def test_swap_exchanges_places_and_values(self):
        self.status.swap(self.top, self.mid)
        assert list(self.status) == [self.mid, self.top, self.bottom]
        assert self.status.value(self.mid) == 3.0
        assert self.status.value(self.top) == 2.0


class TestCrossingPoint:
    """Parametric pair test"""

    def test_crossing(self):
        p = crossing_point(seg(0, (0, 0), (2, 2)), seg(1, (0, 2), (2, 0)))
        assert p == pytest.approx((1.0, 1.0))

    def test_parallel_is_none(self):
        assert crossing_point(seg(0, (0, 0), (1, 0)), seg(1, (0, 1), (1, 1))) is None

    def test_collinear_overlap_is_none(self):
        assert crossing_point(seg(0, (0, 0), (2, 0)), seg(1, (1, 0), (3, 0))) is None

    def test_outside_segments_is_none(self):
        assert crossing_point(seg(0, (0, 0), (1, 1)), seg(1, (3, 0), (2, 1))) is None


class TestFindIntersections:
    """Bentley-Ottmann sweep"""

    def test_non_intersecting(self):
        segments = [((0, 0), (1, 0)), ((0, 1), (1, 1.5)), ((2, 0), (3, 1))]
        assert find_intersections(segments) == []

    def test_single_crossing(self):
        points = find_intersections([((0, 0), (2, 2)), ((0, 2), (2, 0))])
        assert len(points) == 1
        assert points[0] == pytest.approx((1.0, 1.0))

    def test_three_crossings_in_sweep_order(self):
        segments = [((0, 0), (4, 4)), ((0, 4), (4, 0)), ((0, 1), (4, 1.5))]
        points = find_intersections(segments)
        assert len(points) == 3
        assert points[0] == pytest.approx((8 / 7, 8 / 7))
        assert points[1] == pytest.approx((2.0, 2.0))
        assert points[2] == pytest.approx((8 / 3, 4 / 3))

    def test_parallel_segments_not_reported(self):
        assert find_intersections([((0, 0), (2, 0)), ((1, 0), (3, 0))]) == []

    def test_crossing_pairs_are_reported(self):
        hits = sweep_intersections([((0, 0), (2, 2)), ((0, 2), (2, 0))])
        assert {hits[0].first.id, hits[0].second.id} == {0, 1}

    def test_accepts_segments(self):
        segments = [seg(7, (0, 0), (2, 2)), seg(9, (0, 2), (2, 0))]
        hits = SweepLine(segments).run()
        assert {hits[0].first.id, hits[0].second.id} == {7, 9}

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            find_intersections([seg(0, (0, 0), (1, 1)), seg(0, (0, 1), (1, 0))])

    def test_rerun_is_identical(self):
        sweep = SweepLine([((0, 0), (4, 4)), ((0, 4), (4, 0)), ((0, 1), (4, 1.5))])
        assert sweep.run() == sweep.run()

    def test_three_segments_through_one_point(self):
        hits = sweep_intersections([((0, 0), (2, 2)), ((0, 2), (2, 0)), ((0, 1), (2, 1))])
        pairs = sorted(tuple(sorted((h.first.id, h.second.id))) for h in hits)
        assert pairs == [(0, 1), (0, 2), (1, 2)]
        assert all(h.point == (1.0, 1.0) for h in hits)


class TestVerticalSegments:
    """Crossings that lie on the sweep line itself"""

    def test_vertical_crossing(self):
        points = find_intersections([((1, -1), (1, 1)), ((0, 0), (2, 0.1))])
        assert len(points) == 1
        assert points[0] == pytest.approx((1.0, 0.05))

    def test_vertical_crosses_every_spanned_segment(self):
        segments = [((1, -2), (1, 2)), ((0, 0), (2, 0)), ((0, 1), (2, 1))]
        assert sorted(find_intersections(segments)) == [(1.0, 0.0), (1.0, 1.0)]

    def test_vertical_out_of_range(self):
        assert find_intersections([((1, 2), (1, 3)), ((0, 0), (2, 0))]) == []
