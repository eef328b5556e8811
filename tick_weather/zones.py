"""Zone container: which observers are where, and zone-wide delivery."""
from __future__ import annotations

from collections.abc import Hashable
from typing import Protocol, runtime_checkable

from tick_weather.types import WeatherPacket

ZoneId = Hashable


@runtime_checkable
class Observer(Protocol):
    """A connected entity that can receive weather notifications."""

    def send_direct_message(self, packet: WeatherPacket) -> None: ...


@runtime_checkable
class ZoneMessenger(Protocol):
    """Delivers a packet to every observer in a zone.

    Returns False when the zone had no observers to deliver to.
    """

    def send_zone_message(self, zone_id: ZoneId, packet: WeatherPacket) -> bool: ...


class ZoneDirectory:
    """In-memory zone membership for one map."""

    def __init__(self) -> None:
        self._members: dict[ZoneId, list[Observer]] = {}
        self._zone_of: dict[int, ZoneId] = {}

    def enter(self, observer: Observer, zone_id: ZoneId) -> None:
        """Move an observer into a zone, leaving any previous one."""
        self.leave(observer)
        self._members.setdefault(zone_id, []).append(observer)
        self._zone_of[id(observer)] = zone_id

    def leave(self, observer: Observer) -> None:
        if id(observer) not in self._zone_of:
            return
        zone_id = self._zone_of.pop(id(observer))
        members = self._members[zone_id]
        members.remove(observer)
        if not members:
            del self._members[zone_id]

    def zone_of(self, observer: Observer) -> ZoneId | None:
        return self._zone_of.get(id(observer))

    def observers(self, zone_id: ZoneId) -> list[Observer]:
        return list(self._members.get(zone_id, []))

    def send_zone_message(self, zone_id: ZoneId, packet: WeatherPacket) -> bool:
        members = self._members.get(zone_id)
        if not members:
            return False
        for observer in list(members):
            observer.send_direct_message(packet)
        return True
