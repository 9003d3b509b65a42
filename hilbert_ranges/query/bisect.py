"""Bit-aligned box bisection query.

The query box is cut along each axis in turn at the largest power-of-two
boundary inside its extent, ``split_depth`` rounds over all axes. Cuts at
those boundaries line up with the curve's own quadrant structure, so leaf
boxes tend to map onto few contiguous index runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from hilbert_ranges.geometry import Box, Range, simplify
from hilbert_ranges.transform import most_significant_between
from hilbert_ranges.utils.loggers import log_large_query, log_query_plan, log_query_result

from .strategy import BISECT

if TYPE_CHECKING:
    from hilbert_ranges.curve import HilbertCurve


def split_box(box: Box, axis: int) -> List[Box]:
    low, high = box.extent(axis)
    if low == high:
        return [box]
    boundary = most_significant_between(low, high)
    return [box.with_axis(axis, low, boundary - 1), box.with_axis(axis, boundary, high)]


def split(box: Box, split_depth: int) -> List[Box]:
    boxes = [box]
    for _ in range(split_depth):
        for axis in range(box.dimensions):
            boxes = [part for b in boxes for part in split_box(b, axis)]
    return boxes


def corner_range(curve: "HilbertCurve", box: Box) -> Range:
    indices = [curve.encode(p) for p in box.corners()]
    return Range(min(indices), max(indices))


def query2(
    curve: "HilbertCurve",
    box: Box,
    split_depth: int,
    *,
    exact: bool = True,
    warn_sub_boxes: int | None = None,
) -> List[Range]:
    leaves = split(box, split_depth)
    log_query_plan(BISECT, split_depth, len(leaves), exact)
    if warn_sub_boxes is not None and len(leaves) > warn_sub_boxes:
        log_large_query(BISECT, len(leaves), warn_sub_boxes)

    if exact:
        ranges = [curve.index_bounds(leaf) for leaf in leaves]
    else:
        ranges = [corner_range(curve, leaf) for leaf in leaves]

    merged = simplify(ranges)
    log_query_result(BISECT, len(ranges), len(merged))
    return merged
