"""Weather configuration dataclass and loader."""
from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from tick_weather.types import WeatherConfigError


@dataclass(frozen=True)
class WeatherConfig:
    """Immutable configuration for zone weather.

    Attributes:
        change_interval_ms: Milliseconds between regeneration attempts.
        tps: Ticks per second of the loop driving the weather.
    """

    change_interval_ms: int = 600_000
    tps: int = 20

    def __post_init__(self) -> None:
        if self.change_interval_ms <= 0:
            raise WeatherConfigError("change_interval_ms must be positive")
        if self.tps <= 0:
            raise WeatherConfigError("tps must be positive")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WeatherConfig:
        """Build a config from a mapping. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise WeatherConfigError(f"{key} must be an integer, got {value!r}")
            values[key] = value
        return cls(**values)


def load_config(path: str | Path) -> WeatherConfig:
    """Read a WeatherConfig from a JSON object on disk."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise WeatherConfigError(f"{path}: expected a JSON object")
    return WeatherConfig.from_dict(data)
