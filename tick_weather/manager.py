"""WeatherManager - owns the weather cycles of one map's zones."""
from __future__ import annotations

import logging
import random as _random_mod
from typing import TYPE_CHECKING, Mapping

from tick_weather.config import WeatherConfig
from tick_weather.weather import WeatherCycle

if TYPE_CHECKING:
    from tick_weather.clock import DayOfYearSource
    from tick_weather.hooks import WeatherHooks
    from tick_weather.types import WeatherData, WeatherType
    from tick_weather.zones import Observer, ZoneId, ZoneMessenger

logger = logging.getLogger(__name__)


class WeatherManager:
    """Creates, updates and discards per-zone weather cycles.

    A cycle exists only for zones that have a chance table. Cycles are
    created when someone needs them (an observer entering, an override) and
    dropped once an update finds the zone empty.
    """

    def __init__(
        self,
        weather_data: Mapping[ZoneId, WeatherData],
        messenger: ZoneMessenger,
        clock: DayOfYearSource,
        config: WeatherConfig | None = None,
        rng: _random_mod.Random | None = None,
        hooks: WeatherHooks | None = None,
    ) -> None:
        self._weather_data = weather_data
        self._messenger = messenger
        self._clock = clock
        self._config = config if config is not None else WeatherConfig()
        self._rng = rng if rng is not None else _random_mod.Random()
        self._hooks = hooks
        self._cycles: dict[ZoneId, WeatherCycle] = {}

    @property
    def config(self) -> WeatherConfig:
        return self._config

    # --- Lookup ---

    def weather_data(self, zone_id: ZoneId) -> WeatherData | None:
        return self._weather_data.get(zone_id)

    def find_weather(self, zone_id: ZoneId) -> WeatherCycle | None:
        return self._cycles.get(zone_id)

    def zones(self) -> list[ZoneId]:
        """Zones with a live cycle, in creation order."""
        return list(self._cycles)

    # --- Lifecycle ---

    def add_weather(self, zone_id: ZoneId) -> WeatherCycle | None:
        """Create a cycle for the zone. None if the zone has no weather data."""
        data = self.weather_data(zone_id)
        if data is None:
            return None

        cycle = WeatherCycle(
            zone_id,
            data,
            self._messenger,
            self._clock,
            self._config.change_interval_ms,
            rng=self._rng,
            hooks=self._hooks,
        )
        self._cycles[zone_id] = cycle
        cycle.regenerate()
        return cycle

    def get_or_create_weather(self, zone_id: ZoneId) -> WeatherCycle | None:
        cycle = self.find_weather(zone_id)
        if cycle is None:
            cycle = self.add_weather(zone_id)
        return cycle

    def remove_weather(self, zone_id: ZoneId) -> None:
        self._cycles.pop(zone_id, None)

    def update(self, diff: int) -> None:
        """Update every cycle; drop the ones with nobody left in the zone."""
        for zone_id, cycle in list(self._cycles.items()):
            if not cycle.update(diff):
                logger.debug("Removing weather for zone %s, no observers left.", zone_id)
                del self._cycles[zone_id]

    # --- Observers and overrides ---

    def observer_entered_zone(self, observer: Observer, zone_id: ZoneId) -> None:
        """Tell a newly arrived observer the zone's weather."""
        cycle = self.get_or_create_weather(zone_id)
        if cycle is not None:
            cycle.send_weather_update_to(observer)
        else:
            WeatherCycle.send_fine_weather_update_to(observer)

    def set_zone_weather(
        self,
        zone_id: ZoneId,
        weather_type: WeatherType,
        intensity: float,
        trigger_hooks: bool = True,
    ) -> bool:
        """Force a zone's weather. False if the zone has no weather data."""
        cycle = self.get_or_create_weather(zone_id)
        if cycle is None:
            return False
        cycle.set_weather(weather_type, intensity, trigger_hooks)
        return True
