from __future__ import annotations

import operator

from hilbert_ranges.errors import InvalidArgumentError

CORNERS = "corners"
BISECT = "bisect"

STRATEGIES: tuple[str, ...] = (CORNERS, BISECT)


def normalize_strategy(strategy: object) -> str:
    s = str(strategy).strip().lower()
    if s not in STRATEGIES:
        raise InvalidArgumentError(f"Unknown query strategy {strategy!r}; expected one of {STRATEGIES}")
    return s


def check_split_depth(split_depth: object) -> int:
    if isinstance(split_depth, bool):
        raise InvalidArgumentError("split_depth must be an int, got bool")
    try:
        depth = operator.index(split_depth)
    except TypeError as exc:
        raise InvalidArgumentError(f"split_depth must be an int, got {split_depth!r}") from exc
    if depth < 0:
        raise InvalidArgumentError(f"split_depth must be >= 0, got {depth}")
    return depth
