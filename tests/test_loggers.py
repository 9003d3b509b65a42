from __future__ import annotations

import logging

from hilbert_ranges import HilbertCurve
from hilbert_ranges.cfg import LoggingConfig
from hilbert_ranges.utils.loggers import configure_logging, get_logger


class _Collect(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_get_logger_returns_children_of_package_logger() -> None:
    base = get_logger()
    assert base.name == "hilbert_ranges"
    assert get_logger("query").name == "hilbert_ranges.query"
    assert len(base.handlers) >= 1
    get_logger()
    assert len(get_logger().handlers) == len(base.handlers)


def test_large_query_emits_warning() -> None:
    base = get_logger()
    handler = _Collect()
    base.addHandler(handler)
    try:
        curve = HilbertCurve(3, 2)
        curve.query((0, 0), (7, 7), 2, warn_sub_boxes=4)
        curve.query2((0, 0), (7, 7), 2, warn_sub_boxes=4)
    finally:
        base.removeHandler(handler)

    warnings = [r for r in handler.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert all("sub-boxes" in r.getMessage() for r in warnings)


def test_configure_logging_sets_level() -> None:
    base = get_logger()
    previous = base.level
    try:
        configure_logging(LoggingConfig(level="DEBUG"))
        assert base.level == logging.DEBUG
        handler = _Collect()
        base.addHandler(handler)
        try:
            HilbertCurve(2, 2).query((0, 0), (3, 3), 1)
        finally:
            base.removeHandler(handler)
        assert any(r.name == "hilbert_ranges.query" for r in handler.records)
    finally:
        base.setLevel(previous)
