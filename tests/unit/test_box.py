import itertools

import pytest

from hilbert_ranges.geometry import Box
from hilbert_ranges.query.bisect import split, split_box


def test_box_envelope_from_unsorted_corners():
    box = Box((3, 0), (1, 2))
    assert box.low == (1, 0)
    assert box.high == (3, 2)
    assert box.dimensions == 2
    assert box.num_points() == 9
    assert box.extent(0) == (1, 3)


def test_box_rejects_mismatched_corners():
    with pytest.raises(ValueError):
        Box((0, 0), (1, 1, 1))


def test_box_contains_and_intersects():
    box = Box((1, 1), (2, 3))
    assert box.contains((1, 3))
    assert not box.contains((0, 3))
    assert not box.contains((1, 1, 1))
    assert box.intersects((0, 0), (1, 1))
    assert not box.intersects((3, 0), (4, 9))


def test_box_corners_enumerates_all_combinations():
    corners = list(Box((0, 5, 2), (1, 7, 2)).corners())
    assert len(corners) == 8
    assert set(corners) == {(x, y, 2) for x in (0, 1) for y in (5, 7)}


def test_with_axis_replaces_one_extent():
    box = Box((0, 0), (7, 7)).with_axis(1, 2, 3)
    assert box.low == (0, 2)
    assert box.high == (7, 3)


def test_split_box_cuts_at_power_of_two_boundary():
    parts = split_box(Box((0, 1), (3, 6)), axis=1)
    assert [p.extent(1) for p in parts] == [(1, 3), (4, 6)]
    assert all(p.extent(0) == (0, 3) for p in parts)
    assert split_box(Box((2, 2), (2, 5)), axis=0) == [Box((2, 2), (2, 5))]


def test_split_produces_aligned_quadrants():
    leaves = split(Box((0, 0), (3, 3)), 1)
    assert {(b.low, b.high) for b in leaves} == {
        ((0, 0), (1, 1)),
        ((0, 2), (1, 3)),
        ((2, 0), (3, 1)),
        ((2, 2), (3, 3)),
    }


def test_split_leaves_partition_the_box():
    box = Box((1, 2, 0), (6, 5, 3))
    for depth in range(4):
        leaves = split(box, depth)
        assert len(leaves) <= 2 ** (box.dimensions * depth)
        assert sum(b.num_points() for b in leaves) == box.num_points()
        points = [p for b in leaves for p in _points(b)]
        assert len(points) == len(set(points))


def test_split_of_single_point_is_itself():
    box = Box((2, 2), (2, 2))
    assert split(box, 3) == [box]


def _points(box):
    return itertools.product(*[range(lo, hi + 1) for lo, hi in zip(box.low, box.high)])
