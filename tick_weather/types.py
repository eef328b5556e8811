"""Core data types for zone weather simulation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WEATHER_SEASONS = 4


class WeatherType(IntEnum):
    """Coarse weather category stored on a cycle."""

    FINE = 0
    RAIN = 1
    SNOW = 2
    STORM = 3
    THUNDERS = 86
    BLACKRAIN = 90


class WeatherState(IntEnum):
    """Observer-facing weather state sent to clients. Values are wire ids."""

    FINE = 0
    FOG = 1
    LIGHT_RAIN = 3
    MEDIUM_RAIN = 4
    HEAVY_RAIN = 5
    LIGHT_SNOW = 6
    MEDIUM_SNOW = 7
    HEAVY_SNOW = 8
    LIGHT_SANDSTORM = 22
    MEDIUM_SANDSTORM = 41
    HEAVY_SANDSTORM = 42
    THUNDERS = 86
    BLACKRAIN = 90


STATE_LABELS: dict[WeatherState, str] = {
    WeatherState.FINE: "fine",
    WeatherState.FOG: "fog",
    WeatherState.LIGHT_RAIN: "light rain",
    WeatherState.MEDIUM_RAIN: "medium rain",
    WeatherState.HEAVY_RAIN: "heavy rain",
    WeatherState.LIGHT_SNOW: "light snow",
    WeatherState.MEDIUM_SNOW: "medium snow",
    WeatherState.HEAVY_SNOW: "heavy snow",
    WeatherState.LIGHT_SANDSTORM: "light sandstorm",
    WeatherState.MEDIUM_SANDSTORM: "medium sandstorm",
    WeatherState.HEAVY_SANDSTORM: "heavy sandstorm",
    WeatherState.THUNDERS: "thunders",
    WeatherState.BLACKRAIN: "blackrain",
}


def state_label(state: WeatherState) -> str:
    """Human-readable name of a weather state. Unknown states read as fine."""
    return STATE_LABELS.get(state, "fine")


class Season(IntEnum):
    """Calendar bucket, also the row index into WeatherData.seasons."""

    SPRING = 0
    SUMMER = 1
    FALL = 2
    WINTER = 3

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class SeasonChances:
    """Percentage weights (out of 100) for one season. Remainder is fine."""

    rain_chance: int = 0
    snow_chance: int = 0
    storm_chance: int = 0


@dataclass(frozen=True)
class WeatherData:
    """Season-indexed chance table for one zone. Read-only once loaded."""

    seasons: tuple[SeasonChances, SeasonChances, SeasonChances, SeasonChances]

    def __post_init__(self) -> None:
        if len(self.seasons) != WEATHER_SEASONS:
            raise WeatherDataError(
                f"expected {WEATHER_SEASONS} season rows, got {len(self.seasons)}"
            )

    def chances(self, season: Season) -> SeasonChances:
        return self.seasons[season]


@dataclass(frozen=True)
class WeatherPacket:
    """Weather notification handed to the transport."""

    state: WeatherState
    intensity: float = 0.0

    @classmethod
    def fine(cls) -> WeatherPacket:
        """Reduced clear-sky notification, independent of any zone state."""
        return cls(WeatherState.FINE)


class WeatherConfigError(ValueError):
    """Raised when weather configuration values are invalid."""


class WeatherDataError(ValueError):
    """Raised when a weather chance table cannot be built from its rows."""
