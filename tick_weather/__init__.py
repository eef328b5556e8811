"""tick-weather - Per-zone weather simulation for the tick engine."""
from __future__ import annotations

from tick_weather.clock import GameClock, season_for_day
from tick_weather.config import WeatherConfig, load_config
from tick_weather.data import load_weather_data, load_weather_data_file
from tick_weather.engine import Engine, TickContext
from tick_weather.hooks import WeatherHooks
from tick_weather.manager import WeatherManager
from tick_weather.systems import make_clock_system, make_weather_system
from tick_weather.timer import IntervalTimer
from tick_weather.types import (
    Season,
    SeasonChances,
    WeatherConfigError,
    WeatherData,
    WeatherDataError,
    WeatherPacket,
    WeatherState,
    WeatherType,
    state_label,
)
from tick_weather.weather import WeatherCycle, classify
from tick_weather.zones import Observer, ZoneDirectory, ZoneMessenger

__all__ = [
    "Engine",
    "TickContext",
    "GameClock",
    "season_for_day",
    "IntervalTimer",
    "WeatherConfig",
    "load_config",
    "load_weather_data",
    "load_weather_data_file",
    "WeatherHooks",
    "WeatherManager",
    "WeatherCycle",
    "classify",
    "make_clock_system",
    "make_weather_system",
    "Observer",
    "ZoneDirectory",
    "ZoneMessenger",
    "Season",
    "SeasonChances",
    "WeatherData",
    "WeatherPacket",
    "WeatherState",
    "WeatherType",
    "state_label",
    "WeatherConfigError",
    "WeatherDataError",
]
