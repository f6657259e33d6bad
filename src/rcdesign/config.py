"""Search configuration loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from rcdesign.errors import CircuitValidationError, ConfigError
from rcdesign.palette import parse_magnitude


@dataclass(frozen=True)
class SearchConfig:
    """Parameters of one enumerate-then-filter run."""

    resistors: Tuple[int, ...] = (5, 10, 25, 50, 100)
    capacitors: Tuple[int, ...] = (100, 250, 400)
    max_resistors: int = 3
    max_capacitors: int = 2
    target_time_constant_s: Optional[float] = 0.01
    nearness: float = 0.2

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "resistors", tuple(parse_magnitude(v) for v in self.resistors))
            object.__setattr__(self, "capacitors", tuple(parse_magnitude(v) for v in self.capacitors))
        except CircuitValidationError as exc:
            raise ConfigError(str(exc)) from exc
        for name in ("max_resistors", "max_capacitors"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer.")
        for name in ("target_time_constant_s", "nearness"):
            value = getattr(self, name)
            if value is None and name == "target_time_constant_s":
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number.")
        if self.target_time_constant_s is not None and self.target_time_constant_s < 0:
            raise ConfigError("target_time_constant_s must be non-negative.")
        if self.nearness < 0:
            raise ConfigError("nearness must be non-negative.")

    def with_overrides(self, **overrides: Any) -> "SearchConfig":
        """Return a copy with every non-None override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **updates)


def config_from_mapping(data: Mapping[str, Any]) -> SearchConfig:
    known = {f.name for f in fields(SearchConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
    kwargs: Dict[str, Any] = dict(data)
    for key in ("resistors", "capacitors"):
        if key in kwargs:
            if not isinstance(kwargs[key], (list, tuple)):
                raise ConfigError(f"{key} must be a list of values.")
            kwargs[key] = tuple(kwargs[key])
    return SearchConfig(**kwargs)


def load_config(path: Path) -> SearchConfig:
    """Load a search configuration from a YAML mapping."""
    if not path.exists():
        raise FileNotFoundError(f"config file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return config_from_mapping(data)
