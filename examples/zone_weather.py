"""Zone weather -- a few simulated hours of weather in two zones.

Demonstrates:
- Loading season chance tables from rows
- Wiring GameClock, WeatherManager and ZoneDirectory into the Engine
- Listening for weather changes through WeatherHooks
- An observer arriving in a zone without weather data

Run: python -m examples.zone_weather
"""

import logging

from tick_weather import (
    Engine,
    GameClock,
    WeatherConfig,
    WeatherHooks,
    WeatherManager,
    ZoneDirectory,
    load_weather_data,
    make_clock_system,
    make_weather_system,
    state_label,
)


class PrintingObserver:
    def __init__(self, name: str) -> None:
        self.name = name

    def send_direct_message(self, packet) -> None:
        print(f"  {self.name} <- {state_label(packet.state)} ({packet.intensity:.2f})")


def weather_rows() -> list[dict]:
    # Zone 1 is wet all year, zone 2 snows in winter.
    rows = []
    for zone, chances in ((1, (60, 0, 10)), (2, (10, 50, 0))):
        row = {"zone": zone}
        for season in ("spring", "summer", "fall", "winter"):
            row[f"{season}_rain_chance"] = chances[0]
            row[f"{season}_snow_chance"] = chances[1] if season == "winter" else 0
            row[f"{season}_storm_chance"] = chances[2]
        rows.append(row)
    return rows


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    print("=== Zone Weather ===\n")

    config = WeatherConfig(change_interval_ms=10 * 60 * 1000, tps=10)
    engine = Engine(tps=config.tps, seed=2024)
    clock = GameClock()
    zones = ZoneDirectory()
    hooks = WeatherHooks()
    hooks.on_changed(
        lambda cycle, state, intensity: print(
            f"[tick {engine.tick_number}] zone {cycle.zone_id}: {state_label(state)}"
        )
    )

    manager = WeatherManager(
        load_weather_data(weather_rows()),
        zones,
        clock,
        config=config,
        rng=engine.random,
        hooks=hooks,
    )

    alice, bob, carol = PrintingObserver("alice"), PrintingObserver("bob"), PrintingObserver("carol")
    for observer, zone in ((alice, 1), (bob, 2), (carol, 3)):
        zones.enter(observer, zone)
        manager.observer_entered_zone(observer, zone)

    engine.add_system(make_clock_system(clock))
    engine.add_system(make_weather_system(manager))

    # Three hours of game time.
    engine.run(config.tps * 60 * 60 * 3)

    print(f"\nDone. Zones with weather: {manager.zones()}")


if __name__ == "__main__":
    main()
