from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True, order=True)
class Range:
    """Inclusive interval of curve indices (or of coordinates along one axis)."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"Range low must be <= high, got low={self.low}, high={self.high}")

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    def contains(self, value: int) -> bool:
        return self.low <= value <= self.high

    def join(self, other: "Range") -> "Range":
        return Range(min(self.low, other.low), max(self.high, other.high))

    def split(self, depth: int) -> List["Range"]:
        """Halve the interval ``depth`` times.

        The pieces are ascending and partition ``[low, high]`` exactly. Single
        values are not split further, so fewer than ``2 ** depth`` pieces come
        back for narrow intervals.
        """
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        if depth == 0 or self.low == self.high:
            return [self]
        mid = self.low + (self.high - self.low) // 2
        return Range(self.low, mid).split(depth - 1) + Range(mid + 1, self.high).split(depth - 1)


def simplify(ranges: Iterable[Range]) -> List[Range]:
    """Sort ranges and merge the ones that overlap or touch."""
    out: List[Range] = []
    for r in sorted(ranges):
        if out and r.low <= out[-1].high + 1:
            out[-1] = out[-1].join(r)
        else:
            out.append(r)
    return out


def total_size(ranges: Iterable[Range]) -> int:
    return sum(r.size for r in ranges)
