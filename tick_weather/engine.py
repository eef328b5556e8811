"""Engine - fixed-timestep loop driving the weather systems."""
from __future__ import annotations

import os
import random
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt_ms: int
    elapsed_ms: int
    request_stop: Callable[[], None]
    random: random.Random


System = Callable[[TickContext], None]


class Engine:
    def __init__(self, tps: int = 20, seed: int | None = None) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt_ms = round(1000 / tps)
        self._tick_number = 0
        self._systems: list[System] = []
        self._start_hooks: list[System] = []
        self._stop_hooks: list[System] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt_ms(self) -> int:
        return self._dt_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: System) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: System) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt_ms=self._dt_ms,
            elapsed_ms=self._tick_number * self._dt_ms,
            request_stop=self._request_stop,
            random=self._rng,
        )

    def _tick(self) -> None:
        self._tick_number += 1
        ctx = self._context()
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[System]) -> None:
        ctx = self._context()
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)

        dt = self._dt_ms / 1000.0
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            sleep_time = dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)
