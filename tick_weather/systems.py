"""System factories wiring the game clock and weather into the Engine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_weather.clock import GameClock
    from tick_weather.engine import TickContext
    from tick_weather.manager import WeatherManager


def make_clock_system(clock: GameClock) -> Callable[[TickContext], None]:
    """Return a system that advances game time by each tick's dt."""

    def clock_system(ctx: TickContext) -> None:
        clock.advance(ctx.dt_ms)

    return clock_system


def make_weather_system(manager: WeatherManager) -> Callable[[TickContext], None]:
    """Return a system that updates every zone's weather once per tick.

    Register it after the clock system so seasons see the current day.
    """

    def weather_system(ctx: TickContext) -> None:
        manager.update(ctx.dt_ms)

    return weather_system
