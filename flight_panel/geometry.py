"""Backend independent dial geometry.

Angles are degrees in screen space: 0 points right (3 o'clock) and angles grow
clockwise on a y-down display, so 90 is 6 o'clock and 270 is 12 o'clock.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import GaugeConfigError
from .sim_core import clamp, is_finite_number

Point = tuple[float, float]

FULL_TURN_DEG = 360.0


@dataclass(frozen=True, slots=True)
class SweepScale:
    """Linear value -> angle mapping shared by every dial.

    ``clockwise=False`` mirrors the sweep (left/right tachometer halves).
    ``wrap=True`` is for compass style dials: values wrap around the range
    instead of being clamped to it.
    """

    min_value: float
    max_value: float
    start_deg: float
    sweep_deg: float
    clockwise: bool = True
    wrap: bool = False

    def __post_init__(self) -> None:
        for name in ("min_value", "max_value", "start_deg", "sweep_deg"):
            if not is_finite_number(getattr(self, name)):
                raise GaugeConfigError(f"{name} must be a finite number")
        if self.min_value == self.max_value:
            raise GaugeConfigError(f"degenerate scale range: min == max == {self.min_value}")
        if self.min_value > self.max_value:
            raise GaugeConfigError("scale min_value must be below max_value")
        if self.sweep_deg <= 0:
            raise GaugeConfigError("sweep_deg must be > 0")
        if self.wrap and self.sweep_deg > FULL_TURN_DEG:
            raise GaugeConfigError("wrapping scales cannot sweep more than one full turn")

    @property
    def span(self) -> float:
        return self.max_value - self.min_value

    @property
    def direction(self) -> float:
        return 1.0 if self.clockwise else -1.0

    def fraction(self, value: float) -> float:
        if self.wrap:
            return math.fmod(value - self.min_value, self.span) / self.span % 1.0
        return (clamp(value, self.min_value, self.max_value) - self.min_value) / self.span

    def angle(self, value: float) -> float:
        return self.start_deg + self.direction * self.fraction(value) * self.sweep_deg

    @property
    def end_deg(self) -> float:
        return self.start_deg + self.direction * self.sweep_deg


def modulo_angle(value: float, period: float, full_turn: float = FULL_TURN_DEG) -> float:
    """Angle of a multi-hand dial hand that turns once every ``period`` units."""

    if not is_finite_number(period) or period <= 0:
        raise GaugeConfigError(f"period must be > 0, got {period!r}")
    return (value % period) / period * full_turn


@dataclass(frozen=True, slots=True)
class Band:
    """Coloured sub-range of a scale (e.g. caution range)."""

    start_value: float
    end_value: float
    role: str


@dataclass(frozen=True, slots=True)
class ArcSpan:
    start_deg: float
    end_deg: float
    role: str

    @property
    def sweep_deg(self) -> float:
        return self.end_deg - self.start_deg


def band_spans(scale: SweepScale, bands: Iterable[Band]) -> list[ArcSpan]:
    """Map each band to its arc, in the scale's own direction."""

    spans: list[ArcSpan] = []
    for band in bands:
        if band.start_value >= band.end_value:
            raise GaugeConfigError(f"band {band.role!r} must have start_value < end_value")
        if band.start_value < scale.min_value or band.end_value > scale.max_value:
            raise GaugeConfigError(
                f"band {band.role!r} [{band.start_value}, {band.end_value}] lies outside "
                f"the scale [{scale.min_value}, {scale.max_value}]"
            )
        spans.append(ArcSpan(scale.angle(band.start_value), scale.angle(band.end_value), band.role))
    return spans


def polar(cx: float, cy: float, radius: float, angle_deg: float) -> Point:
    rad = math.radians(angle_deg)
    return (cx + math.cos(rad) * radius, cy + math.sin(rad) * radius)


def radial_segment(
    cx: float,
    cy: float,
    angle_deg: float,
    inner: float,
    outer: float,
) -> tuple[Point, Point]:
    """Line along a radius, from ``inner`` to ``outer`` distance (ticks, needles)."""

    return polar(cx, cy, inner, angle_deg), polar(cx, cy, outer, angle_deg)


def arc_points(
    cx: float,
    cy: float,
    radius: float,
    start_deg: float,
    end_deg: float,
    *,
    segments: int | None = None,
) -> list[Point]:
    """Polyline approximation of an arc from ``start_deg`` to ``end_deg``."""

    sweep = end_deg - start_deg
    if segments is None:
        segments = max(2, int(math.ceil(abs(sweep) / 7.5)))
    step = sweep / segments
    return [polar(cx, cy, radius, start_deg + step * i) for i in range(segments + 1)]


def sector_points(
    cx: float,
    cy: float,
    radius: float,
    start_deg: float,
    end_deg: float,
    *,
    segments: int | None = None,
) -> list[Point]:
    """Closed pie slice: centre followed by the arc."""

    return [(cx, cy), *arc_points(cx, cy, radius, start_deg, end_deg, segments=segments)]


def rotate_point(point: Point, angle_deg: float, origin: Point = (0.0, 0.0)) -> Point:
    rad = math.radians(angle_deg)
    c = math.cos(rad)
    s = math.sin(rad)
    x = point[0] - origin[0]
    y = point[1] - origin[1]
    return (origin[0] + x * c - y * s, origin[1] + x * s + y * c)
