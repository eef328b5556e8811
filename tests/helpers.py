"""Test doubles shared by the tick_weather tests."""
from __future__ import annotations

import random
from collections import deque

from tick_weather.types import SeasonChances, WeatherData

MINUTE_MS = 60_000

# Day 350 falls in winter, day 100 in spring.
WINTER_DAY = 350
SPRING_DAY = 100


class ScriptedRandom(random.Random):
    """Random whose randint/gauss return queued values, in order.

    Running out of queued integers raises IndexError, so a test can assert
    that no draw happened at all.
    """

    def __init__(self, ints=(), norms=()) -> None:
        super().__init__(0)
        self.ints: deque[int] = deque(ints)
        self.norms: deque[float] = deque(norms)
        self.randint_calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.randint_calls.append((a, b))
        value = self.ints.popleft()
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def gauss(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return self.norms.popleft()

    def push(self, *ints: int) -> None:
        self.ints.extend(ints)


class FixedClock:
    def __init__(self, day: int = WINTER_DAY) -> None:
        self.day = day

    def day_of_year(self) -> int:
        return self.day


class RecordingMessenger:
    """Zone messenger that records packets and reports a fixed reach."""

    def __init__(self, reachable: bool = True) -> None:
        self.reachable = reachable
        self.sent: list[tuple[object, object]] = []

    def send_zone_message(self, zone_id, packet) -> bool:
        if not self.reachable:
            return False
        self.sent.append((zone_id, packet))
        return True


class RecordingObserver:
    def __init__(self, name: str = "observer") -> None:
        self.name = name
        self.packets: list = []

    def send_direct_message(self, packet) -> None:
        self.packets.append(packet)


def make_weather_data(
    spring: tuple[int, int, int] = (0, 0, 0),
    summer: tuple[int, int, int] = (0, 0, 0),
    fall: tuple[int, int, int] = (0, 0, 0),
    winter: tuple[int, int, int] = (0, 0, 0),
) -> WeatherData:
    return WeatherData(
        seasons=tuple(
            SeasonChances(rain_chance=r, snow_chance=s, storm_chance=st)
            for r, s, st in (spring, summer, fall, winter)
        )
    )
