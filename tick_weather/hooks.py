"""Listener registry for weather tick and change notifications."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_weather.types import WeatherState
    from tick_weather.weather import WeatherCycle

TickedHandler = Callable[["WeatherCycle", int], None]
ChangedHandler = Callable[["WeatherCycle", "WeatherState", float], None]


class WeatherHooks:
    """Dispatches weather notifications to subscribed handlers, in order.

    Dispatch is immediate: handlers run inside the call that raised the
    notification, on the tick thread.
    """

    def __init__(self) -> None:
        self._ticked: list[TickedHandler] = []
        self._changed: list[ChangedHandler] = []

    # --- Registration ---

    def on_ticked(self, handler: TickedHandler) -> None:
        """Called with (cycle, diff_ms) on every weather update."""
        self._ticked.append(handler)

    def on_changed(self, handler: ChangedHandler) -> None:
        """Called with (cycle, state, intensity) after a successful broadcast."""
        self._changed.append(handler)

    def unsubscribe(self, handler: Callable[..., None]) -> None:
        for handlers in (self._ticked, self._changed):
            try:
                handlers.remove(handler)
            except ValueError:
                pass

    def clear(self) -> None:
        self._ticked.clear()
        self._changed.clear()

    # --- Dispatch ---

    def notify_ticked(self, cycle: WeatherCycle, diff: int) -> None:
        for handler in list(self._ticked):
            handler(cycle, diff)

    def notify_changed(
        self, cycle: WeatherCycle, state: WeatherState, intensity: float
    ) -> None:
        for handler in list(self._changed):
            handler(cycle, state, intensity)
