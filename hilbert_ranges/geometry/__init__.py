"""Value types shared by the curve and the query engine.

Exports :class:`Range` (inclusive index interval) and :class:`Box`
(axis-aligned hyper-rectangle), plus :func:`simplify` for merging ranges.
"""

from __future__ import annotations

from .box import Box, Point
from .range import Range, simplify, total_size

__all__ = ["Box", "Point", "Range", "simplify", "total_size"]
