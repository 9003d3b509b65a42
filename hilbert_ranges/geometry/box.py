from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple

Point = Tuple[int, ...]


@dataclass(frozen=True)
class Box:
    """Axis-aligned box spanned by two opposite corners ``a`` and ``b``.

    The corners need not be ordered per axis; ``low`` and ``high`` hold the
    coordinate-wise envelope.
    """

    a: Point
    b: Point
    low: Point = field(init=False, repr=False, compare=False)
    high: Point = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        a = tuple(int(v) for v in self.a)
        b = tuple(int(v) for v in self.b)
        if len(a) != len(b):
            raise ValueError(f"Box corners differ in dimension: {len(a)} vs {len(b)}")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "low", tuple(min(x, y) for x, y in zip(a, b)))
        object.__setattr__(self, "high", tuple(max(x, y) for x, y in zip(a, b)))

    @classmethod
    def from_bounds(cls, low: Sequence[int], high: Sequence[int]) -> "Box":
        return cls(tuple(low), tuple(high))

    @property
    def dimensions(self) -> int:
        return len(self.a)

    def extent(self, axis: int) -> Tuple[int, int]:
        return self.low[axis], self.high[axis]

    def contains(self, point: Sequence[int]) -> bool:
        if len(point) != self.dimensions:
            return False
        return all(lo <= int(x) <= hi for lo, x, hi in zip(self.low, point, self.high))

    def intersects(self, low: Sequence[int], high: Sequence[int]) -> bool:
        return all(
            lo <= self_hi and hi >= self_lo
            for lo, hi, self_lo, self_hi in zip(low, high, self.low, self.high)
        )

    def corners(self) -> Iterator[Point]:
        """All ``2 ** dimensions`` literal corners (duplicates on degenerate axes)."""
        return itertools.product(*zip(self.low, self.high))

    def with_axis(self, axis: int, low: int, high: int) -> "Box":
        lo = list(self.low)
        hi = list(self.high)
        lo[axis] = low
        hi[axis] = high
        return Box(tuple(lo), tuple(hi))

    def num_points(self) -> int:
        n = 1
        for lo, hi in zip(self.low, self.high):
            n *= hi - lo + 1
        return n
