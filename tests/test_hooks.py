"""Unit tests for WeatherHooks."""
from __future__ import annotations

from tick_weather.hooks import WeatherHooks
from tick_weather.types import WeatherState


def test_ticked_handlers_called_in_order():
    hooks = WeatherHooks()
    calls = []
    hooks.on_ticked(lambda cycle, diff: calls.append(("a", cycle, diff)))
    hooks.on_ticked(lambda cycle, diff: calls.append(("b", cycle, diff)))

    hooks.notify_ticked("cycle", 50)

    assert calls == [("a", "cycle", 50), ("b", "cycle", 50)]


def test_changed_handlers_receive_state_and_intensity():
    hooks = WeatherHooks()
    calls = []
    hooks.on_changed(lambda cycle, state, intensity: calls.append((state, intensity)))

    hooks.notify_changed("cycle", WeatherState.LIGHT_SNOW, 0.3)

    assert calls == [(WeatherState.LIGHT_SNOW, 0.3)]


def test_unsubscribe_removes_handler():
    hooks = WeatherHooks()
    calls = []

    def handler(cycle, diff):
        calls.append(diff)

    hooks.on_ticked(handler)
    hooks.unsubscribe(handler)
    hooks.notify_ticked("cycle", 10)

    assert calls == []


def test_unsubscribe_unknown_handler_is_noop():
    hooks = WeatherHooks()
    hooks.unsubscribe(lambda *args: None)  # Should not raise


def test_notify_without_handlers():
    hooks = WeatherHooks()
    hooks.notify_ticked("cycle", 10)
    hooks.notify_changed("cycle", WeatherState.FINE, 0.0)


def test_clear_drops_all_handlers():
    hooks = WeatherHooks()
    calls = []
    hooks.on_ticked(lambda cycle, diff: calls.append(diff))
    hooks.on_changed(lambda cycle, state, intensity: calls.append(state))
    hooks.clear()

    hooks.notify_ticked("cycle", 10)
    hooks.notify_changed("cycle", WeatherState.FINE, 0.0)

    assert calls == []
