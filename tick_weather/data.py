"""Loading per-zone season chance tables from plain rows."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from tick_weather.types import Season, SeasonChances, WeatherData, WeatherDataError

logger = logging.getLogger(__name__)

# Value a chance above 100 is reset to.
FALLBACK_CHANCE = 25

_KINDS = ("rain", "snow", "storm")


def _chance(row: Mapping[str, Any], zone: Any, season: Season, kind: str) -> int:
    column = f"{season.label}_{kind}_chance"
    try:
        value = int(row[column])
    except KeyError:
        raise WeatherDataError(f"zone {zone}: missing column {column!r}") from None
    except (TypeError, ValueError):
        raise WeatherDataError(
            f"zone {zone}: column {column!r} is not an integer: {row[column]!r}"
        ) from None

    if value < 0:
        raise WeatherDataError(f"zone {zone}: column {column!r} is negative ({value})")
    if value > 100:
        logger.error(
            "Weather for zone %s season %s has wrong %s chance > 100%%, reset to %d.",
            zone,
            season.label,
            kind,
            FALLBACK_CHANCE,
        )
        value = FALLBACK_CHANCE
    return value


def weather_data_from_row(row: Mapping[str, Any]) -> WeatherData:
    """Build one zone's table from a row of `<season>_<kind>_chance` columns."""
    zone = row.get("zone")
    seasons = []
    for season in Season:
        rain, snow, storm = (_chance(row, zone, season, kind) for kind in _KINDS)
        seasons.append(SeasonChances(rain_chance=rain, snow_chance=snow, storm_chance=storm))
    return WeatherData(seasons=tuple(seasons))


def load_weather_data(rows: Iterable[Mapping[str, Any]]) -> dict[Any, WeatherData]:
    """Build the zone -> WeatherData table. Each row needs a `zone` key."""
    table: dict[Any, WeatherData] = {}
    for row in rows:
        if "zone" not in row:
            raise WeatherDataError(f"row without a zone: {dict(row)!r}")
        table[row["zone"]] = weather_data_from_row(row)
    return table


def load_weather_data_file(path: str | Path) -> dict[Any, WeatherData]:
    """Read weather rows from a JSON array on disk."""
    with open(path, encoding="utf-8") as fh:
        rows = json.load(fh)
    if not isinstance(rows, list):
        raise WeatherDataError(f"{path}: expected a JSON array of rows")
    return load_weather_data(rows)
