"""Interval timer used to pace weather regeneration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class IntervalTimer:
    """Accumulates elapsed milliseconds. Passed once `current` reaches `interval`."""

    interval: int
    current: int = 0

    def update(self, diff: int) -> None:
        self.current += diff
        if self.current < 0:
            self.current = 0

    def passed(self) -> bool:
        return self.current >= self.interval

    def reset(self) -> None:
        self.current = 0
