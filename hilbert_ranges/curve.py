from __future__ import annotations

import operator
from typing import List, Sequence

import numpy as np

from hilbert_ranges import query as _query
from hilbert_ranges.cfg.schema import CurveConfig, QueryConfig
from hilbert_ranges.errors import InvalidArgumentError
from hilbert_ranges.geometry import Box, Point, Range
from hilbert_ranges.skilling import transpose, untranspose
from hilbert_ranges.transform import MAX_INDEX_BITS, deinterleave, interleave
from hilbert_ranges.utils.loggers import log_curve_created

Array = np.ndarray


def _as_int(value: object, what: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{what} must be an int, got bool")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise InvalidArgumentError(f"{what} must be an int, got {value!r}") from exc


class HilbertCurve:
    """N-dimensional Hilbert curve with ``bits`` bits per coordinate.

    Indices are plain ints in ``[0, 2 ** (bits * dimensions) - 1]``; the total
    must fit a signed 64-bit integer, hence ``bits * dimensions <= 63``.
    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, bits: int, dimensions: int) -> None:
        bits = _as_int(bits, "bits")
        dimensions = _as_int(dimensions, "dimensions")
        if bits < 1:
            raise InvalidArgumentError(f"bits must be >= 1, got {bits}")
        if dimensions < 1:
            raise InvalidArgumentError(f"dimensions must be >= 1, got {dimensions}")
        if bits * dimensions > MAX_INDEX_BITS:
            raise InvalidArgumentError(
                f"bits * dimensions must be less than or equal to {MAX_INDEX_BITS}, "
                f"got {bits} * {dimensions} = {bits * dimensions}"
            )
        self._bits = bits
        self._dimensions = dimensions
        self._length = bits * dimensions
        log_curve_created(bits, dimensions)

    @classmethod
    def from_config(cls, cfg: CurveConfig) -> "HilbertCurve":
        return cls(cfg.bits, cfg.dimensions)

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def length(self) -> int:
        return self._length

    @property
    def max_coordinate(self) -> int:
        return (1 << self._bits) - 1

    @property
    def max_index(self) -> int:
        return (1 << self._length) - 1

    def __repr__(self) -> str:
        return f"HilbertCurve(bits={self._bits}, dimensions={self._dimensions})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HilbertCurve):
            return NotImplemented
        return (self._bits, self._dimensions) == (other._bits, other._dimensions)

    def __hash__(self) -> int:
        return hash((self._bits, self._dimensions))

    # ------------------------------------------------------------------ points

    def _check_point(self, point: Sequence[int], what: str = "point") -> Point:
        if len(point) != self._dimensions:
            raise InvalidArgumentError(
                f"{what} has {len(point)} coordinates, expected {self._dimensions}"
            )
        coords = tuple(_as_int(c, f"{what} coordinate") for c in point)
        top = self.max_coordinate
        for c in coords:
            if c < 0 or c > top:
                raise InvalidArgumentError(f"{what} coordinate {c} outside [0, {top}]")
        return coords

    def encode(self, point: Sequence[int]) -> int:
        coords = self._check_point(point)
        return interleave(transpose(self._bits, coords), self._bits)

    def decode(self, index: int) -> Point:
        index = _as_int(index, "index")
        if index < 0:
            raise InvalidArgumentError(f"index must be >= 0, got {index}")
        if index > self.max_index:
            raise InvalidArgumentError(f"index {index} exceeds max_index {self.max_index}")
        transposed = deinterleave(index, self._bits, self._dimensions)
        return tuple(untranspose(self._bits, transposed))

    def encode_many(self, points: Array) -> Array:
        pts = np.asarray(points)
        if pts.ndim != 2 or pts.shape[1] != self._dimensions:
            raise InvalidArgumentError(f"points must have shape (N, {self._dimensions})")
        if pts.size and not np.issubdtype(pts.dtype, np.integer):
            raise InvalidArgumentError(f"points must be integers, got dtype {pts.dtype}")
        out = np.empty((pts.shape[0],), dtype=np.int64)
        for i in range(pts.shape[0]):
            out[i] = self.encode([int(c) for c in pts[i]])
        return out

    def decode_many(self, indices: Array) -> Array:
        idx = np.asarray(indices)
        if idx.ndim != 1:
            raise InvalidArgumentError("indices must be a 1-D array")
        if idx.size and not np.issubdtype(idx.dtype, np.integer):
            raise InvalidArgumentError(f"indices must be integers, got dtype {idx.dtype}")
        out = np.empty((idx.shape[0], self._dimensions), dtype=np.int64)
        for i in range(idx.shape[0]):
            out[i] = self.decode(int(idx[i]))
        return out

    # ------------------------------------------------------------------ boxes

    def box(self, a: Sequence[int], b: Sequence[int]) -> Box:
        return Box(self._check_point(a, "a"), self._check_point(b, "b"))

    def _extreme_index(self, box: Box, lowest: bool) -> int:
        # Every aligned block of 2**(dimensions*level) indices fills one
        # aligned cube of side 2**level; descend into the first (or last)
        # child block whose cube meets the box.
        d = self._dimensions
        children = range(1 << d) if lowest else range((1 << d) - 1, -1, -1)
        start = 0
        for level in range(self._bits - 1, -1, -1):
            block = 1 << (d * level)
            side = 1 << level
            for child in children:
                s = start + child * block
                origin = [(c >> level) << level for c in self.decode(s)]
                far = [c + side - 1 for c in origin]
                if box.intersects(origin, far):
                    start = s
                    break
            else:
                raise RuntimeError("no child block intersects the box")
        return start

    def index_bounds(self, box: Box) -> Range:
        """Smallest and largest curve index of any point inside ``box``."""
        if box.dimensions != self._dimensions:
            raise InvalidArgumentError(
                f"box has {box.dimensions} dimensions, expected {self._dimensions}"
            )
        self._check_point(box.low, "box.low")
        self._check_point(box.high, "box.high")
        return Range(self._extreme_index(box, True), self._extreme_index(box, False))

    # ---------------------------------------------------------------- queries

    def query(
        self,
        a: Sequence[int],
        b: Sequence[int],
        split_depth: int,
        *,
        exact: bool = True,
        warn_sub_boxes: int | None = None,
    ) -> List[Range]:
        split_depth = _query.check_split_depth(split_depth)
        return _query.query(
            self, self.box(a, b), split_depth, exact=exact, warn_sub_boxes=warn_sub_boxes
        )

    def query2(
        self,
        a: Sequence[int],
        b: Sequence[int],
        split_depth: int,
        *,
        exact: bool = True,
        warn_sub_boxes: int | None = None,
    ) -> List[Range]:
        split_depth = _query.check_split_depth(split_depth)
        return _query.query2(
            self, self.box(a, b), split_depth, exact=exact, warn_sub_boxes=warn_sub_boxes
        )

    def query_ranges(
        self, a: Sequence[int], b: Sequence[int], cfg: QueryConfig | None = None
    ) -> List[Range]:
        cfg = cfg or QueryConfig()
        strategy = _query.normalize_strategy(cfg.strategy)
        run = self.query if strategy == _query.CORNERS else self.query2
        return run(a, b, cfg.split_depth, exact=cfg.exact, warn_sub_boxes=cfg.warn_sub_boxes)

