"""Tests for GameClock and season lookup."""
import time

import pytest

from tick_weather.clock import GameClock, season_for_day
from tick_weather.types import Season


class TestSeasonForDay:
    @pytest.mark.parametrize(
        "day, season",
        [
            (0, Season.WINTER),
            (76, Season.WINTER),
            (78, Season.SPRING),
            (150, Season.SPRING),
            (200, Season.SUMMER),
            (260, Season.FALL),
            (350, Season.WINTER),
            (364, Season.WINTER),
        ],
    )
    def test_known_days(self, day, season):
        assert season_for_day(day) == season

    def test_every_day_has_a_season(self):
        seasons = {season_for_day(day) for day in range(366)}
        assert seasons == set(Season)

    def test_labels(self):
        assert [s.label for s in Season] == ["spring", "summer", "fall", "winter"]


class TestGameClock:
    def test_day_of_year_is_zero_based(self):
        """March 20, 2023 is the 79th day, index 78."""
        clock = GameClock(time.mktime((2023, 3, 20, 12, 0, 0, 0, 0, -1)))
        assert clock.day_of_year() == 78
        assert clock.season() == Season.SPRING

    def test_advance_moves_game_time(self):
        clock = GameClock(1000.0)
        clock.advance(1500)
        assert clock.game_time == pytest.approx(1001.5)

    def test_advancing_a_day_moves_the_date(self):
        clock = GameClock(time.mktime((2023, 1, 10, 12, 0, 0, 0, 0, -1)))
        clock.advance(24 * 60 * 60 * 1000)
        assert clock.day_of_year() == 10

    def test_defaults_to_wall_time(self):
        before = time.time()
        clock = GameClock()
        assert clock.game_time >= before

    def test_set_game_time(self):
        clock = GameClock(0.0)
        clock.set_game_time(42.0)
        assert clock.game_time == 42.0
