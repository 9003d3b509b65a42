from __future__ import annotations

import sys
from collections.abc import Mapping as ABCMapping
from dataclasses import MISSING, asdict, fields, is_dataclass
from pathlib import Path
from typing import Any, Literal, Mapping, MutableMapping, Type, Union, get_args, get_origin, get_type_hints

import yaml

from hilbert_ranges.transform import MAX_INDEX_BITS

from .schema import Config


class ConfigError(ValueError):
    pass


def load_config(path: Union[str, Path]) -> Config:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read config file: {p}") from exc
    return loads_config(text)


def loads_config(yaml_text: str) -> Config:
    try:
        data = yaml.safe_load(yaml_text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid configuration data: {exc}") from exc

    if not isinstance(data, Mapping):
        raise ConfigError(f"Top-level configuration must be a mapping, got {type(data).__name__}")

    cfg = _from_mapping(Config, data, path="config")
    validate_config(cfg)
    return cfg


def validate_config(cfg: Config) -> None:
    bits = cfg.curve.bits
    dims = cfg.curve.dimensions
    if bits < 1:
        raise ConfigError("curve.bits must be >= 1")
    if dims < 1:
        raise ConfigError("curve.dimensions must be >= 1")
    if bits * dims > MAX_INDEX_BITS:
        raise ConfigError(
            f"curve.bits * curve.dimensions must be <= {MAX_INDEX_BITS}; "
            f"got {bits} * {dims} = {bits * dims}"
        )
    if cfg.query.split_depth < 0:
        raise ConfigError("query.split_depth must be >= 0")
    if cfg.query.warn_sub_boxes < 1:
        raise ConfigError("query.warn_sub_boxes must be >= 1")


def to_dict(cfg: Config) -> dict:
    return asdict(cfg)


def _from_mapping(cls: Type[Any], data: Mapping[str, Any], path: str) -> Any:
    if not is_dataclass(cls):
        raise ConfigError(f"Internal error: target {cls!r} is not a dataclass")

    allowed = {f.name for f in fields(cls)}
    unknown = set(data.keys()) - allowed
    if unknown:
        pretty = ", ".join(sorted(map(str, unknown)))
        raise ConfigError(f"Unknown field(s) at {path}: {pretty}")

    mod = sys.modules.get(cls.__module__)
    gns = mod.__dict__ if mod is not None else None
    type_hints = get_type_hints(cls, globalns=gns, localns=None)

    kwargs: MutableMapping[str, Any] = {}
    for f in fields(cls):
        key = f.name
        target_type = type_hints.get(key, f.type)
        if key in data:
            kwargs[key] = _coerce_value_to_type(data[key], target_type, f"{path}.{key}")
        elif f.default is MISSING and f.default_factory is MISSING:
            raise ConfigError(f"Missing required field: {path}.{key}")

    try:
        return cls(**kwargs)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Failed to construct {cls.__name__} at {path}: {exc}") from exc


def _coerce_value_to_type(value: Any, typ: Any, path: str) -> Any:
    origin = get_origin(typ)
    args = get_args(typ)

    if is_dataclass(typ):
        if value is None:
            value = {}
        if not isinstance(value, ABCMapping):
            raise ConfigError(f"Expected mapping at {path}, got {type(value).__name__}")
        return _from_mapping(typ, value, path)

    if origin is Literal:
        if value in args:
            return value
        if isinstance(value, str):
            for candidate in (value.strip().lower(), value.strip().upper()):
                if candidate in args:
                    return candidate
        raise ConfigError(f"{path}: expected one of {sorted(map(repr, args))}, got {value!r}")

    if typ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            low = value.strip().lower()
            if low in {"1", "true", "yes", "y", "on"}:
                return True
            if low in {"0", "false", "no", "n", "off"}:
                return False
        raise ConfigError(f"Expected bool at {path}, got {value!r}")

    if typ is int:
        if isinstance(value, bool):
            raise ConfigError(f"Expected int at {path}, got bool")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and float(value).is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Expected int at {path}, got {value!r}")

    if typ is str:
        return value if isinstance(value, str) else str(value)

    return value
