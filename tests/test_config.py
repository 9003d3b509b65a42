from __future__ import annotations

from pathlib import Path

import pytest

from hilbert_ranges.cfg import Config, ConfigError, load_config, loads_config, to_dict


def test_loads_config_parses_and_coerces() -> None:
    cfg = loads_config(
        """
curve:
  bits: "21"
  dimensions: 3
query:
  split_depth: 4.0
  strategy: BISECT
  exact: "no"
logging:
  level: debug
""".lstrip()
    )
    assert (cfg.curve.bits, cfg.curve.dimensions) == (21, 3)
    assert cfg.query.split_depth == 4
    assert cfg.query.strategy == "bisect"
    assert cfg.query.exact is False
    assert cfg.logging.level == "DEBUG"


def test_empty_document_gives_defaults() -> None:
    assert loads_config("") == Config()
    assert to_dict(loads_config(""))["query"]["strategy"] == "corners"


def test_loads_config_rejects_invalid_documents() -> None:
    with pytest.raises(ConfigError, match="Unknown field"):
        loads_config("curve:\n  bits: 2\n  depth: 3\n")
    with pytest.raises(ConfigError, match="must be <= 63"):
        loads_config("curve:\n  bits: 32\n  dimensions: 2\n")
    with pytest.raises(ConfigError, match="split_depth"):
        loads_config("query:\n  split_depth: -1\n")
    with pytest.raises(ConfigError):
        loads_config("query:\n  strategy: zorder\n")
    with pytest.raises(ConfigError):
        loads_config("curve:\n  bits: true\n")
    with pytest.raises(ConfigError):
        loads_config("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        loads_config("curve: [1, 2\n")


def test_load_config_from_file(tmp_path: Path) -> None:
    path = tmp_path / "hilbert.yaml"
    path.write_text("curve:\n  bits: 8\n  dimensions: 4\n", encoding="utf-8")
    cfg = load_config(path)
    assert (cfg.curve.bits, cfg.curve.dimensions) == (8, 4)

    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")
