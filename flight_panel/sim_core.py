from __future__ import annotations

import math
import random
from typing import Protocol


class JitterSource(Protocol):
    """Source of the small random offsets applied by the simulation updaters."""

    def uniform(self, a: float, b: float) -> float:
        ...


class SeededRng:
    """Simple seeded RNG wrapper to keep deterministic streams explicit."""

    def __init__(self, seed: int) -> None:
        self._seed = int(seed)
        self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)

    def random(self) -> float:
        return self._rng.random()


class NoJitter:
    """Jitter source that always returns the centre of the requested range.

    All jitter ranges used by the simulation are symmetric around zero, so this
    yields zero jitter and a fully reproducible run.
    """

    def uniform(self, a: float, b: float) -> float:
        return (float(a) + float(b)) / 2.0


def approach(current: float, target: float, max_change: float) -> float:
    """Move ``current`` toward ``target`` by at most ``max_change``.

    ``max_change`` is always ``rate_per_second * dt``. The step is linear, not an
    exponential decay, and never overshoots the target.
    """

    if max_change <= 0.0:
        return current
    diff = target - current
    if abs(diff) <= max_change:
        return target
    return current + max_change if diff > 0 else current - max_change


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def clamp01(x: float) -> float:
    return 0.0 if x <= 0.0 else 1.0 if x >= 1.0 else float(x)


def normalize_heading(deg: float) -> float:
    """Wrap an angle into [0, 360)."""

    wrapped = math.fmod(float(deg), 360.0)
    if wrapped < 0.0:
        wrapped += 360.0
    # fmod of a tiny negative value can round up to exactly 360.
    return 0.0 if wrapped >= 360.0 else wrapped


def shortest_turn(from_deg: float, to_deg: float) -> float:
    """Signed turn in (-180, 180] taking the short way from one heading to another."""

    diff = normalize_heading(to_deg - from_deg)
    return diff - 360.0 if diff > 180.0 else diff


def is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
