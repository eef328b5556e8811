"""Game clock and season lookup."""
from __future__ import annotations

import time
from typing import Protocol

from tick_weather.types import WEATHER_SEASONS, Season

# Day 78 (0-based) is March 20, the start of spring; 365 / 4 = 91 days a season.
SPRING_START_DAY = 78
DAYS_PER_SEASON = 91


class DayOfYearSource(Protocol):
    """Anything that can say which day of the year it is in game time."""

    def day_of_year(self) -> int: ...


def season_for_day(day_of_year: int) -> Season:
    """Map a 0-based day of the year onto its season."""
    index = ((day_of_year - SPRING_START_DAY + 365) // DAYS_PER_SEASON) % WEATHER_SEASONS
    return Season(index)


class GameClock:
    """Game time in epoch seconds, advanced by the tick loop."""

    def __init__(self, start: float | None = None) -> None:
        if start is None:
            start = time.time()
        self._game_time = float(start)

    @property
    def game_time(self) -> float:
        return self._game_time

    def advance(self, diff_ms: int) -> float:
        self._game_time += diff_ms / 1000.0
        return self._game_time

    def set_game_time(self, game_time: float) -> None:
        self._game_time = float(game_time)

    def day_of_year(self) -> int:
        return time.localtime(self._game_time).tm_yday - 1

    def season(self) -> Season:
        return season_for_day(self.day_of_year())
