from __future__ import annotations

from typing import List, Sequence

MAX_INDEX_BITS = 63


def interleave(transposed: Sequence[int], bits: int) -> int:
    """Pack a transposed index into the scalar curve index.

    Bit levels are visited most significant first and, within a level, axes in
    order ``0..dimensions-1``; the emitted bits fill the result big-endian.
    """
    dimensions = len(transposed)
    out = 0
    pos = bits * dimensions - 1
    mask = 1 << (bits - 1)
    for _ in range(bits):
        for j in range(dimensions):
            if transposed[j] & mask:
                out |= 1 << pos
            pos -= 1
        mask >>= 1
    return out


def deinterleave(index: int, bits: int, dimensions: int) -> List[int]:
    """Inverse of :func:`interleave`; bits at or above ``bits * dimensions`` are ignored."""
    length = bits * dimensions
    x = [0] * dimensions
    for idx in range(length):
        if (index >> idx) & 1:
            dim = (length - idx - 1) % dimensions
            shift = (idx // dimensions) % bits
            x[dim] |= 1 << shift
    return x


def most_significant_between(low: int, high: int) -> int:
    """Value in ``(low, high]`` with the most trailing zero bits.

    This is the largest power-of-two boundary strictly inside ``[low, high]``;
    splitting there yields ``[low, v - 1]`` and ``[v, high]``.
    """
    if low >= high:
        raise ValueError(f"expected low < high, got low={low}, high={high}")
    bit = (low ^ high).bit_length() - 1
    return (high >> bit) << bit
