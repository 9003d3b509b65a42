"""Skilling's transpose primitive for N-dimensional Hilbert curves.

J. Skilling, "Programming the Hilbert curve", AIP Conf. Proc. 707 (2004).

``transpose`` maps a point to its *transposed index*: one integer per axis
whose bits, read level by level across the axes, spell the curve index.
``untranspose`` is the inverse. Both operate on plain Python ints and never
mutate their input.
"""

from __future__ import annotations

from typing import List, Sequence


def transpose(bits: int, point: Sequence[int]) -> List[int]:
    x = [int(c) for c in point]
    n = len(x)
    m = 1 << (bits - 1)

    # inverse undo
    q = m
    while q > 1:
        p = q - 1
        for i in range(n):
            if x[i] & q:
                x[0] ^= p
            else:
                t = (x[0] ^ x[i]) & p
                x[0] ^= t
                x[i] ^= t
        q >>= 1

    # gray encode
    for i in range(1, n):
        x[i] ^= x[i - 1]
    t = 0
    q = m
    while q > 1:
        if x[n - 1] & q:
            t ^= q - 1
        q >>= 1
    for i in range(n):
        x[i] ^= t
    return x


def untranspose(bits: int, transposed: Sequence[int]) -> List[int]:
    x = [int(c) for c in transposed]
    n = len(x)
    top = 2 << (bits - 1)

    # gray decode by H ^ (H / 2)
    t = x[n - 1] >> 1
    for i in range(n - 1, 0, -1):
        x[i] ^= x[i - 1]
    x[0] ^= t

    # undo excess work
    q = 2
    while q != top:
        p = q - 1
        for i in range(n - 1, -1, -1):
            if x[i] & q:
                x[0] ^= p
            else:
                t = (x[0] ^ x[i]) & p
                x[0] ^= t
                x[i] ^= t
        q <<= 1
    return x
