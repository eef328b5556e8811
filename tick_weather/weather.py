"""WeatherCycle - one zone's weather state, regeneration and broadcast."""
from __future__ import annotations

import logging
import random as _random_mod
from typing import TYPE_CHECKING

from tick_weather.clock import season_for_day
from tick_weather.timer import IntervalTimer
from tick_weather.types import (
    WeatherData,
    WeatherPacket,
    WeatherState,
    WeatherType,
    state_label,
)

if TYPE_CHECKING:
    from tick_weather.clock import DayOfYearSource
    from tick_weather.hooks import WeatherHooks
    from tick_weather.zones import Observer, ZoneId, ZoneMessenger

logger = logging.getLogger(__name__)

THIRD = 1.0 / 3.0
TWO_THIRDS = 2.0 / 3.0
MAX_INTENSITY = 0.9999
MIN_INTENSITY = 0.0001

# Classification thresholds.
FINE_BELOW = 0.27
LIGHT_BELOW = 0.40
MEDIUM_BELOW = 0.70

# Spread of the half-normal behind new intensities.
NORM_SIGMA = 0.4

_BANDED_STATES: dict[WeatherType, tuple[WeatherState, WeatherState, WeatherState]] = {
    WeatherType.RAIN: (
        WeatherState.LIGHT_RAIN,
        WeatherState.MEDIUM_RAIN,
        WeatherState.HEAVY_RAIN,
    ),
    WeatherType.SNOW: (
        WeatherState.LIGHT_SNOW,
        WeatherState.MEDIUM_SNOW,
        WeatherState.HEAVY_SNOW,
    ),
    WeatherType.STORM: (
        WeatherState.LIGHT_SANDSTORM,
        WeatherState.MEDIUM_SANDSTORM,
        WeatherState.HEAVY_SANDSTORM,
    ),
}


def rand_norm(rng: _random_mod.Random) -> float:
    """Light-biased draw in [0, 1): a half-normal truncated at 1."""
    while True:
        value = abs(rng.gauss(0.0, NORM_SIGMA))
        if value < 1.0:
            return value


def classify(weather_type: WeatherType, intensity: float) -> WeatherState:
    """Derive the observer-facing state from a (type, intensity) pair."""
    if intensity < FINE_BELOW:
        return WeatherState.FINE

    if weather_type == WeatherType.BLACKRAIN:
        return WeatherState.BLACKRAIN
    if weather_type == WeatherType.THUNDERS:
        return WeatherState.THUNDERS

    bands = _BANDED_STATES.get(weather_type)
    if bands is None:
        return WeatherState.FINE
    light, medium, heavy = bands
    if intensity < LIGHT_BELOW:
        return light
    if intensity < MEDIUM_BELOW:
        return medium
    return heavy


class WeatherCycle:
    """Weather of a single zone, regenerated every `change_interval_ms`.

    The owner calls `update` once per tick. When it returns False the zone
    had nobody left to tell about a change and the owner should drop the
    cycle; a fresh one is created when observers come back.

    Args:
        zone_id: Identifier of the owning zone.
        weather_chances: Season chance table, or None for a zone that never
            has weather (permanently fine).
        messenger: Zone container used for zone-wide delivery.
        clock: Game clock; only its day of the year is read.
        change_interval_ms: Milliseconds between regeneration attempts.
        rng: Random source for every draw. Defaults to a fresh Random().
        hooks: Listener registry for tick and change notifications.
    """

    def __init__(
        self,
        zone_id: ZoneId,
        weather_chances: WeatherData | None,
        messenger: ZoneMessenger,
        clock: DayOfYearSource,
        change_interval_ms: int,
        rng: _random_mod.Random | None = None,
        hooks: WeatherHooks | None = None,
    ) -> None:
        self._zone_id = zone_id
        self._weather_chances = weather_chances
        self._messenger = messenger
        self._clock = clock
        self._rng = rng if rng is not None else _random_mod.Random()
        self._hooks = hooks
        self._timer = IntervalTimer(interval=change_interval_ms)
        self.type = WeatherType.FINE
        self.intensity = 0.0

        logger.info(
            "Starting weather system for zone %s (change every %d minutes).",
            zone_id,
            change_interval_ms // 60000,
        )

    @property
    def zone_id(self) -> ZoneId:
        return self._zone_id

    @property
    def weather_chances(self) -> WeatherData | None:
        return self._weather_chances

    @property
    def timer(self) -> IntervalTimer:
        return self._timer

    # --- Tick ---

    def update(self, diff: int) -> bool:
        """Advance the change timer by `diff` ms. False means: discard me."""
        if self._timer.current >= 0:
            self._timer.update(diff)
        else:
            self._timer.current = 0

        if self._timer.passed():
            self._timer.reset()
            # Only broadcast when regeneration actually changed something.
            if self.regenerate():
                if not self.update_weather():
                    return False

        if self._hooks is not None:
            self._hooks.notify_ticked(self, diff)
        return True

    def regenerate(self) -> bool:
        """Roll the next weather. Returns True if (type, intensity) changed.

        u in [0, 99]:
        - 0-29: no change
        - 30-59: improves (if not fine) or a new type is picked
        - 60-89: worsens (if not fine)
        - 90-99: radical change (if not fine)
        """
        if self._weather_chances is None:
            self.type = WeatherType.FINE
            self.intensity = 0.0
            return False

        rng = self._rng
        u = rng.randint(0, 99)
        if u < 30:
            return False

        old_type = self.type
        old_intensity = self.intensity

        season = season_for_day(self._clock.day_of_year())
        logger.info(
            "Generating a change in %s weather for zone %s.", season.label, self._zone_id
        )

        if u < 60 and self.intensity < THIRD:  # clearing up
            self.type = WeatherType.FINE
            self.intensity = 0.0

        if u < 60 and self.type != WeatherType.FINE:  # improving
            self.intensity -= THIRD
            return True

        if u < 90 and self.type != WeatherType.FINE:  # worsening
            self.intensity += THIRD
            return True

        if self.type != WeatherType.FINE:
            # Radical change: light goes heavy, medium clears, heavy goes
            # light half of the time and clears otherwise.
            if self.intensity < THIRD:
                self.intensity = MAX_INTENSITY
                return True
            if self.intensity > TWO_THIRDS and rng.randint(0, 99) < 50:
                self.intensity -= TWO_THIRDS
                return True
            self.type = WeatherType.FINE
            self.intensity = 0.0

        chances = self._weather_chances.chances(season)
        rain_up_to = chances.rain_chance
        snow_up_to = rain_up_to + chances.snow_chance
        storm_up_to = snow_up_to + chances.storm_chance

        r = rng.randint(1, 100)
        if r <= rain_up_to:
            self.type = WeatherType.RAIN
        elif r <= snow_up_to:
            self.type = WeatherType.SNOW
        elif r <= storm_up_to:
            self.type = WeatherType.STORM
        else:
            self.type = WeatherType.FINE

        if self.type == WeatherType.FINE:
            self.intensity = 0.0
        elif u < 90:
            self.intensity = rand_norm(rng) * THIRD
        elif rng.randint(0, 99) < 50:
            self.intensity = rand_norm(rng) * THIRD + THIRD
        else:
            self.intensity = rand_norm(rng) * THIRD + TWO_THIRDS

        return self.type != old_type or self.intensity != old_intensity

    # --- Queries ---

    def weather_state(self) -> WeatherState:
        """Current observer-facing state. Pure; safe to call at any time."""
        return classify(self.type, self.intensity)

    # --- Delivery ---

    def update_weather(self, trigger_hooks: bool = True) -> bool:
        """Broadcast the current weather to the zone.

        Returns False when no observer was reached.
        """
        if self.intensity > MAX_INTENSITY:
            self.intensity = MAX_INTENSITY
        elif self.intensity < MIN_INTENSITY:
            self.intensity = MIN_INTENSITY

        state = self.weather_state()
        packet = WeatherPacket(state, self.intensity)
        if not self._messenger.send_zone_message(self._zone_id, packet):
            return False

        logger.info(
            "Change the weather of zone %s to %s.", self._zone_id, state_label(state)
        )
        if trigger_hooks and self._hooks is not None:
            self._hooks.notify_changed(self, state, self.intensity)
        return True

    def set_weather(
        self, weather_type: WeatherType, intensity: float, trigger_hooks: bool = True
    ) -> None:
        """Force a weather immediately, bypassing regeneration and the timer."""
        if self.type == weather_type and self.intensity == intensity:
            return

        self.type = weather_type
        self.intensity = intensity
        self.update_weather(trigger_hooks)

    def send_weather_update_to(self, observer: Observer) -> None:
        observer.send_direct_message(WeatherPacket(self.weather_state(), self.intensity))

    @staticmethod
    def send_fine_weather_update_to(observer: Observer) -> None:
        observer.send_direct_message(WeatherPacket.fine())

    def __repr__(self) -> str:
        return (
            f"WeatherCycle(zone={self._zone_id!r}, type={self.type!r}, "
            f"intensity={self.intensity:.4f})"
        )
