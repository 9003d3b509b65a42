from __future__ import annotations

import logging
from logging import Logger

from hilbert_ranges.cfg.schema import LoggingConfig

_DEFAULT_LOGGER_NAME = "hilbert_ranges"


def get_logger(name: str | None = None) -> Logger:
    base = logging.getLogger(_DEFAULT_LOGGER_NAME)
    if not base.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        base.addHandler(handler)
        base.setLevel(logging.INFO)
        base.propagate = False
    return base if name is None else base.getChild(str(name))


def configure_logging(cfg: LoggingConfig) -> Logger:
    base = get_logger()
    base.setLevel(str(cfg.level).upper())
    return base


def log_curve_created(bits: int, dimensions: int) -> None:
    get_logger("curve").debug(
        "Hilbert curve bits=%d dimensions=%d (index bits=%d).", bits, dimensions, bits * dimensions
    )


def log_query_plan(strategy: str, split_depth: int, sub_boxes: int, exact: bool) -> None:
    get_logger("query").debug(
        "Query strategy=%r split_depth=%d sub_boxes=%d exact=%s.",
        strategy,
        split_depth,
        sub_boxes,
        exact,
    )


def log_query_result(strategy: str, raw: int, merged: int) -> None:
    get_logger("query").debug(
        "Query strategy=%r produced %d sub-box ranges, %d after merging.", strategy, raw, merged
    )


def log_large_query(strategy: str, sub_boxes: int, limit: int) -> None:
    get_logger("query").warning(
        "Query strategy=%r visits %d sub-boxes (warn threshold %d); "
        "consider a smaller split_depth.",
        strategy,
        sub_boxes,
        limit,
    )
