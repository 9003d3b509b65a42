from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

StrategyLiteral = Literal["corners", "bisect"]
LevelLiteral = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class CurveConfig:
    bits: int = 16
    dimensions: int = 2


@dataclass(frozen=True)
class QueryConfig:
    split_depth: int = 2
    strategy: StrategyLiteral = "corners"
    exact: bool = True
    warn_sub_boxes: int = 65_536


@dataclass(frozen=True)
class LoggingConfig:
    level: LevelLiteral = "INFO"


@dataclass(frozen=True)
class Config:
    curve: CurveConfig = field(default_factory=CurveConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
