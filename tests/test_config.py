from pathlib import Path

import pytest
import yaml

from rcdesign.config import SearchConfig, config_from_mapping, load_config
from rcdesign.errors import ConfigError


def _write_config(tmp_path: Path, payload: object) -> Path:
    config_path = tmp_path / "search.yaml"
    config_path.write_text(yaml.safe_dump(payload, sort_keys=True), encoding="utf-8")
    return config_path


def test_defaults_match_command_line_driver():
    config = SearchConfig()
    assert config.resistors == (5, 10, 25, 50, 100)
    assert config.capacitors == (100, 250, 400)
    assert config.max_resistors == 3
    assert config.max_capacitors == 2
    assert config.target_time_constant_s == 0.01
    assert config.nearness == 0.2


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {
            "resistors": [5, 10],
            "capacitors": [100],
            "max_resistors": 2,
            "max_capacitors": 1,
            "target_time_constant_s": None,
        },
    )
    config = load_config(config_path)
    assert config.resistors == (5, 10)
    assert config.capacitors == (100,)
    assert config.max_resistors == 2
    assert config.target_time_constant_s is None
    assert config.nearness == 0.2


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")
    assert load_config(config_path) == SearchConfig()


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, [1, 2, 3])
    with pytest.raises(ConfigError, match="mapping"):
        load_config(config_path)


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"colour": "red"}, "Unknown configuration keys: colour"),
        ({"resistors": 5}, "resistors must be a list"),
        ({"capacitors": [100, -1]}, "positive"),
        ({"max_resistors": "three"}, "max_resistors must be an integer"),
        ({"nearness": -0.1}, "nearness must be non-negative"),
        ({"target_time_constant_s": "soon"}, "target_time_constant_s must be a number"),
    ],
)
def test_config_validation(payload, message):
    with pytest.raises(ConfigError, match=message):
        config_from_mapping(payload)


def test_with_overrides_skips_none():
    config = SearchConfig().with_overrides(max_resistors=1, target_time_constant_s=None, capacitors=(47,))
    assert config.max_resistors == 1
    assert config.capacitors == (47,)
    assert config.target_time_constant_s == 0.01
