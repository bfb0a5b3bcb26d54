"""
Test Overlap Filter
===================

Covers overlap_ratio accumulation, threshold decisions, OverlapReport and
the thread-pool mode of OverlapFilter.

Usage:
    pytest test_overlap_filter.py
"""

import json
import logging
import math

import pytest

from hullfilter_core import (
    ConvexHull,
    OverlapFilter,
    filter_hulls,
    overlap_ratio,
)
from hullfilter_io.logging import LogEvent, create_logger


def square(x0, y0, hull_id, size=1.0):
    return ConvexHull(
        [(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size)],
        hull_id=hull_id,
    )


@pytest.fixture
def quiet_filter():
    """OverlapFilter factory whose logger only emits warnings."""
    logger = create_logger("test", level=logging.WARNING)

    def make(**kwargs):
        return OverlapFilter(logger=logger, **kwargs)

    return make


def test_near_duplicate_squares_are_dropped(quiet_filter):
    """Ids 1 and 2 overlap ~90%; id 3 is far away and survives."""
    hulls = [square(0, 0, 1), square(0.1, 0, 2), square(5, 5, 3)]

    survivors = quiet_filter().filter(hulls)

    assert [hull.hull_id for hull in survivors] == [3]
    assert [hull.hull_id for hull in filter_hulls(hulls)] == [3]


def test_quarter_overlap_keeps_both(quiet_filter):
    hulls = [square(0, 0, 1), square(0.5, 0.5, 2)]

    report = quiet_filter().evaluate(hulls)

    assert report.ratios == pytest.approx([0.25, 0.25])
    assert report.kept_ids == [1, 2]
    assert report.dropped_ids == []


def test_identical_pair_ratio_is_one():
    hull_a = square(0, 0, 1)
    hull_b = square(0, 0, 2)

    assert overlap_ratio(hull_a, [hull_a, hull_b]) == pytest.approx(1.0)
    assert overlap_ratio(hull_b, [hull_a, hull_b]) == pytest.approx(1.0)


def test_ratio_skips_hulls_sharing_the_reference_id():
    """Entries with the reference's id are never compared, even if distinct."""
    reference = square(0, 0, 7)
    same_id = square(0, 0, 7)
    other = square(0.5, 0.5, 8)

    assert overlap_ratio(reference, [reference, same_id, other]) == pytest.approx(0.25)


def test_ratio_is_additive_not_union():
    """
    Two neighbours covering the same half of the reference count twice:
    the ratio is a sum of pairwise fractions and may exceed 1.0.
    """
    reference = square(0, 0, 1, size=2.0)
    neighbour_a = ConvexHull([(0, 0), (2, 0), (2, 1), (0, 1)], hull_id=2)
    neighbour_b = ConvexHull([(0, 0), (2, 0), (2, 1), (0, 1)], hull_id=3)
    covering = square(-1, -1, 4, size=4.0)

    assert overlap_ratio(reference, [reference, neighbour_a]) == pytest.approx(0.5)
    assert overlap_ratio(
        reference, [reference, neighbour_a, neighbour_b]
    ) == pytest.approx(1.0)
    assert overlap_ratio(
        reference, [reference, neighbour_a, neighbour_b, covering]
    ) == pytest.approx(2.0)


def test_threshold_is_inclusive(quiet_filter):
    """A ratio of exactly 0.5 is kept."""
    reference = square(0, 0, 1, size=2.0)
    half = ConvexHull([(0, 0), (2, 0), (2, 1), (0, 1)], hull_id=2)

    report = quiet_filter().evaluate([reference, half])

    assert report.decisions[0].ratio == pytest.approx(0.5)
    assert report.decisions[0].kept
    # The half-rectangle lies fully inside the square
    assert report.decisions[1].ratio == pytest.approx(1.0)
    assert not report.decisions[1].kept


def test_custom_threshold(quiet_filter):
    hulls = [square(0, 0, 1), square(0.5, 0.5, 2)]

    assert quiet_filter(threshold=0.2).filter(hulls) == []
    assert filter_hulls(hulls, threshold=0.2) == []


def test_output_preserves_input_order(quiet_filter):
    hulls = [square(10, 10, 5), square(0, 0, 3), square(20, 20, 9), square(0.05, 0, 4)]

    survivors = quiet_filter().filter(hulls)

    assert [hull.hull_id for hull in survivors] == [5, 9]


def test_isolated_zero_area_hull_is_kept(quiet_filter):
    """A flat hull that intersects nothing accumulates no ratio."""
    flat = ConvexHull([(0, 0), (1, 1), (2, 2)], hull_id=1)
    hulls = [flat, square(5, 5, 2)]

    report = quiet_filter().evaluate(hulls)

    assert overlap_ratio(flat, hulls) == 0.0
    assert report.kept_ids == [1, 2]
    assert [hull.hull_id for hull in filter_hulls(hulls)] == [1, 2]


def test_intersecting_zero_area_hull_is_dropped(quiet_filter):
    """
    The diagonal crosses the rectangle, so an intersection region exists
    and the flat hull's ratio (x / 0) is infinite. The rectangle only
    gains a zero-area contribution and survives.
    """
    flat = ConvexHull([(0, 0), (1, 1), (2, 2)], hull_id=1)
    band = ConvexHull([(0.5, 0), (1.5, 0), (1.5, 3), (0.5, 3)], hull_id=2)
    hulls = [flat, band]

    report = quiet_filter().evaluate(hulls)

    assert math.isinf(report.decisions[0].ratio)
    assert report.decisions[1].ratio == pytest.approx(0.0)
    assert report.kept_ids == [2]


def test_empty_input(quiet_filter):
    report = quiet_filter().evaluate([])

    assert len(report) == 0
    assert quiet_filter().filter([]) == []


def test_thread_pool_matches_sequential(quiet_filter):
    hulls = [
        square(0, 0, 1),
        square(0.5, 0.5, 2),
        square(0.25, 0.75, 3),
        square(3, 3, 4),
        ConvexHull([(2.5, 2.5), (4, 3), (3.2, 4.4)], hull_id=5),
    ]

    sequential = quiet_filter().ratios(hulls)
    pooled = quiet_filter(max_workers=4).ratios(hulls)

    assert pooled == sequential


def test_invalid_filter_configuration():
    with pytest.raises(ValueError):
        OverlapFilter(threshold=-0.1)
    with pytest.raises(ValueError):
        OverlapFilter(threshold=float("nan"))
    with pytest.raises(ValueError):
        OverlapFilter(max_workers=0)


def test_report_summary(quiet_filter):
    report = quiet_filter().evaluate([square(0, 0, 1), square(0.1, 0, 2), square(5, 5, 3)])

    assert report.kept_mask == [False, False, True]
    assert str(report) == "OverlapReport(threshold=0.5, kept=1, dropped=2)"


def test_filter_logs_structured_events(caplog):
    logger = create_logger("test_events", level=logging.DEBUG)
    overlap_filter = OverlapFilter(logger=logger)

    with caplog.at_level(logging.DEBUG, logger="hullfilter.test_events"):
        overlap_filter.evaluate([square(0, 0, 1), square(5, 5, 2)])

    events = [json.loads(record.getMessage())["event"] for record in caplog.records]
    assert events[0] == LogEvent.FILTER_STARTED.value
    assert events[-1] == LogEvent.FILTER_COMPLETED.value
    assert events.count(LogEvent.HULL_KEPT.value) == 2
