"""Shared fixtures for tick_weather tests."""
from __future__ import annotations

import pytest

from tick_weather.types import WeatherData

from helpers import make_weather_data


@pytest.fixture
def winter_data() -> WeatherData:
    """Winter: 40% rain, 40% snow, 10% storm. Spring: always snow."""
    return make_weather_data(spring=(0, 100, 0), winter=(40, 40, 10))
