"""Corner cross-product query.

Each axis interval of the query box is halved ``split_depth`` times, the
per-axis pieces are combined into sub-boxes, and every sub-box contributes
one index range. The ranges are merged before returning.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Iterator, List, Sequence, Tuple

from hilbert_ranges.geometry import Box, Range, simplify
from hilbert_ranges.utils.loggers import log_large_query, log_query_plan, log_query_result

from .strategy import CORNERS

if TYPE_CHECKING:
    from hilbert_ranges.curve import HilbertCurve


def axis_pieces(box: Box, split_depth: int) -> List[List[Range]]:
    return [Range(lo, hi).split(split_depth) for lo, hi in zip(box.low, box.high)]


def sub_boxes(pieces: Sequence[Sequence[Range]]) -> Iterator[Tuple[Range, ...]]:
    return itertools.product(*pieces)


def snapped_corner_range(
    curve: "HilbertCurve", combo: Sequence[Range], axis_lows: Sequence[int]
) -> Range:
    # Low edges other than the axis' global low move one step inward.
    choices = []
    for r, global_low in zip(combo, axis_lows):
        low = r.low if r.low == global_low else min(r.high, r.low + 1)
        choices.append((low, r.high))
    indices = [curve.encode(p) for p in itertools.product(*choices)]
    return Range(min(indices), max(indices))


def query(
    curve: "HilbertCurve",
    box: Box,
    split_depth: int,
    *,
    exact: bool = True,
    warn_sub_boxes: int | None = None,
) -> List[Range]:
    pieces = axis_pieces(box, split_depth)
    count = 1
    for p in pieces:
        count *= len(p)
    log_query_plan(CORNERS, split_depth, count, exact)
    if warn_sub_boxes is not None and count > warn_sub_boxes:
        log_large_query(CORNERS, count, warn_sub_boxes)

    axis_lows = [p[0].low for p in pieces]
    ranges: List[Range] = []
    for combo in sub_boxes(pieces):
        if exact:
            sub = Box(tuple(r.low for r in combo), tuple(r.high for r in combo))
            ranges.append(curve.index_bounds(sub))
        else:
            ranges.append(snapped_corner_range(curve, combo, axis_lows))

    merged = simplify(ranges)
    log_query_result(CORNERS, len(ranges), len(merged))
    return merged
