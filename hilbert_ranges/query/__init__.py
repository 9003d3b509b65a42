"""Decomposition of query boxes into curve-index ranges.

Two strategies share one result contract (a sorted list of disjoint,
non-adjacent :class:`~hilbert_ranges.geometry.Range` values):

``corners``
    per-axis halving and a cross-product of the pieces.
``bisect``
    recursive cuts of the box at power-of-two boundaries.
"""

from __future__ import annotations

from .bisect import query2
from .corners import query
from .strategy import BISECT, CORNERS, STRATEGIES, check_split_depth, normalize_strategy

__all__ = [
    "BISECT",
    "CORNERS",
    "STRATEGIES",
    "check_split_depth",
    "normalize_strategy",
    "query",
    "query2",
]
