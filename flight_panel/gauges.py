"""Instrument drawings as plain primitives.

Every ``render_*`` call turns one physical value (or tuple of values), the
active palette and a ``GaugeConfig`` into a list of drawing primitives. The
primitives are backend independent; the pygame shell only paints them.

Round dials are drawn in a local frame centred on the needle pivot with a
nominal outer radius of about 340 units (see ``DIAL_HALF_EXTENT``). The
attitude indicator uses a rectangle centred on the origin.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Union

from .color_scheme import RGB, Palette
from .exceptions import InvalidGaugeValue
from .flight_sim import FlightSnapshot
from .geometry import (
    Band,
    Point,
    SweepScale,
    arc_points,
    band_spans,
    modulo_angle,
    polar,
    radial_segment,
    rotate_point,
    sector_points,
)
from .sim_core import is_finite_number

DIAL_HALF_EXTENT = 380.0


# --- primitives -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Line:
    start: Point
    end: Point
    color: RGB
    width: float = 1.0


@dataclass(frozen=True, slots=True)
class Polyline:
    points: tuple[Point, ...]
    color: RGB
    width: float = 1.0


@dataclass(frozen=True, slots=True)
class Polygon:
    points: tuple[Point, ...]
    fill: RGB | None = None
    outline: RGB | None = None
    width: float = 1.0


@dataclass(frozen=True, slots=True)
class Circle:
    center: Point
    radius: float
    fill: RGB | None = None
    outline: RGB | None = None
    width: float = 1.0


@dataclass(frozen=True, slots=True)
class RectShape:
    x: float
    y: float
    w: float
    h: float
    fill: RGB | None = None
    outline: RGB | None = None
    width: float = 1.0
    corner_radius: float = 0.0


@dataclass(frozen=True, slots=True)
class Text:
    text: str
    pos: Point
    color: RGB
    size: float
    align: str = "center"  # "left" | "center" | "right", anchored on pos
    rotation_deg: float = 0.0  # clockwise on screen


Primitive = Union[Line, Polyline, Polygon, Circle, RectShape, Text]


@dataclass(frozen=True, slots=True)
class GaugeConfig:
    show_border: bool = True
    show_bank_scale: bool = True
    show_aircraft: bool = True
    transparent_background: bool = False
    # Attitude only: draw sky/ground/horizon and nothing else.
    background_mode: bool = False
    # Attitude only: size of the rectangular display.
    width: float = 760.0
    height: float = 780.0


class GaugeKind(StrEnum):
    TACHOMETER = "tachometer"
    ALTIMETER = "altimeter"
    VSI = "vsi"
    AIRSPEED = "airspeed"
    ATTITUDE = "attitude"
    HEADING = "heading"


def _require_number(name: str, value: object) -> float:
    if not is_finite_number(value):
        raise InvalidGaugeValue(f"{name} must be a finite number, got {value!r}")
    return float(value)  # type: ignore[arg-type]


def _dial_face(radius: float, palette: Palette, config: GaugeConfig, *, rim: float = 8.0) -> list[Primitive]:
    if config.transparent_background:
        return [Circle((0.0, 0.0), radius, outline=palette.border, width=rim)]
    return [
        Circle((0.0, 0.0), radius, fill=palette.bg, outline=palette.border, width=rim),
        Circle((0.0, 0.0), radius - rim, fill=palette.bg),
    ]


def _center_cap(outer: float, inner: float, palette: Palette, config: GaugeConfig) -> list[Primitive]:
    fill = None if config.transparent_background else palette.bg
    return [
        Circle((0.0, 0.0), outer, fill=fill, outline=palette.border, width=5.0),
        Circle((0.0, 0.0), inner, fill=palette.border),
    ]


def _ticks(
    scale: SweepScale,
    values: tuple[float, ...],
    *,
    inner: float,
    outer: float,
    width: float,
    color: RGB,
) -> list[Primitive]:
    out: list[Primitive] = []
    for value in values:
        start, end = radial_segment(0.0, 0.0, scale.angle(value), inner, outer)
        out.append(Line(start, end, color, width))
    return out


def _needle(angle_deg: float, *, length: float, tail: float, width: float, color: RGB) -> list[Primitive]:
    tip = polar(0.0, 0.0, length, angle_deg)
    back = polar(0.0, 0.0, tail, angle_deg + 180.0)
    return [Line((0.0, 0.0), tip, color, width), Line((0.0, 0.0), back, color, width)]


def _label_at(scale: SweepScale, value: float, text: str, *, dist: float, color: RGB, size: float) -> Text:
    return Text(text, polar(0.0, 0.0, dist, scale.angle(value)), color, size)


# --- dual tachometer --------------------------------------------------------

TACH_RADIUS = 320.0
TACH_MAX_RPM = 3500.0
TACH_REDLINE_RPM = 3000.0

# Both halves pivot on one point: "(" for the left engine, ")" for the right.
# Zero RPM sits at 6 o'clock, full scale at 12 o'clock.
TACH_LEFT_SCALE = SweepScale(0.0, TACH_MAX_RPM, 90.0, 180.0, clockwise=True)
TACH_RIGHT_SCALE = SweepScale(0.0, TACH_MAX_RPM, 90.0, 180.0, clockwise=False)

TACH_BANDS: tuple[Band, ...] = (
    Band(2100.0, 2700.0, "secondary"),
    Band(2700.0, 3000.0, "border"),
    Band(3000.0, 3500.0, "critical"),
)

OIL_BAR_THRESHOLDS_C: tuple[float, ...] = (30.0, 50.0, 65.0, 80.0, 95.0, 105.0, 115.0)
OIL_BAR_COLORS: tuple[RGB, ...] = (
    (255, 220, 0),
    (255, 180, 0),
    (255, 140, 0),
    (255, 100, 0),
    (255, 60, 0),
    (255, 30, 0),
    (255, 0, 0),
)
OIL_BAR_DIM = 0.2


def oil_bar_states(temp_c: float) -> tuple[bool, ...]:
    """Which of the seven oil temperature bars are lit, bottom bar first."""

    return tuple(temp_c >= threshold for threshold in OIL_BAR_THRESHOLDS_C)


def _tach_half(scale: SweepScale, side: str, palette: Palette, config: GaugeConfig) -> list[Primitive]:
    r = TACH_RADIUS
    out: list[Primitive] = []

    face = tuple(sector_points(0.0, 0.0, r, scale.start_deg, scale.end_deg))
    if config.transparent_background:
        out.append(Polygon(face, outline=palette.border, width=6.0))
    else:
        out.append(Polygon(face, fill=palette.bg, outline=palette.border, width=6.0))

    for span in band_spans(scale, TACH_BANDS):
        pts = tuple(arc_points(0.0, 0.0, r - 35.0, span.start_deg, span.end_deg))
        out.append(Polyline(pts, palette[span.role], 22.0))
    redline = radial_segment(0.0, 0.0, scale.angle(TACH_REDLINE_RPM), r - 65.0, r - 12.0)
    out.append(Line(*redline, palette.critical, 5.0))

    majors = tuple(float(rpm) for rpm in range(0, 3501, 500))
    minors = tuple(float(rpm) for rpm in range(0, 3501, 100) if rpm % 500 != 0)
    out += _ticks(scale, majors, inner=r - 57.0, outer=r - 12.0, width=6.0, color=palette.tick)
    out += _ticks(scale, minors, inner=r - 40.0, outer=r - 12.0, width=2.0, color=palette.tick)

    for rpm in majors:
        out.append(_label_at(scale, rpm, str(int(rpm) // 100), dist=r - 85.0, color=palette.primary, size=38.0))

    sign = -1.0 if side == "left" else 1.0
    align = "left" if side == "left" else "right"
    out.append(Text("RPM", (sign * (r - 80.0), -r + 100.0), palette.primary, 32.0, align=align))
    out.append(Text("x100", (sign * (r - 80.0), -r + 135.0), palette.tick, 24.0, align=align))
    return out


def _oil_bars(temp_c: float, x: float, palette: Palette) -> list[Primitive]:
    bar_w = 28.0
    bar_h = 10.0
    gap = 3.0
    count = len(OIL_BAR_THRESHOLDS_C)
    total_h = count * bar_h + (count - 1) * gap
    start_y = total_h / 2.0 - bar_h / 2.0

    out: list[Primitive] = []
    for idx, lit in enumerate(oil_bar_states(temp_c)):
        r, g, b = OIL_BAR_COLORS[idx]
        color = (r, g, b) if lit else (int(r * OIL_BAR_DIM), int(g * OIL_BAR_DIM), int(b * OIL_BAR_DIM))
        y = start_y - idx * (bar_h + gap)
        out.append(RectShape(x - bar_w / 2.0, y, bar_w, bar_h, fill=color, corner_radius=2.0))
    return out


def render_dual_tachometer(
    value: tuple[float, float, float, float],
    palette: Palette,
    config: GaugeConfig,
) -> list[Primitive]:
    """``value`` is ``(left_rpm, right_rpm, left_oil_temp, right_oil_temp)``."""

    try:
        left_raw, right_raw, left_oil_raw, right_oil_raw = value
    except (TypeError, ValueError):
        raise InvalidGaugeValue(
            "expected (left_rpm, right_rpm, left_oil_temp, right_oil_temp)"
        ) from None
    left_rpm = _require_number("left_rpm", left_raw)
    right_rpm = _require_number("right_rpm", right_raw)
    left_oil = _require_number("left_oil_temp", left_oil_raw)
    right_oil = _require_number("right_oil_temp", right_oil_raw)

    out: list[Primitive] = []
    out += _tach_half(TACH_LEFT_SCALE, "left", palette, config)
    out += _tach_half(TACH_RIGHT_SCALE, "right", palette, config)
    out += _oil_bars(left_oil, -150.0, palette)
    out += _oil_bars(right_oil, 150.0, palette)
    out += _needle(TACH_LEFT_SCALE.angle(left_rpm), length=TACH_RADIUS - 50.0, tail=40.0, width=6.0, color=palette.needle)
    out += _needle(TACH_RIGHT_SCALE.angle(right_rpm), length=TACH_RADIUS - 50.0, tail=40.0, width=6.0, color=palette.needle)

    cap_fill = None if config.transparent_background else palette.bg
    out.append(Circle((0.0, 0.0), 28.0, fill=cap_fill, outline=palette.border, width=4.0))
    out.append(Circle((0.0, 0.0), 12.0, fill=palette.border))

    out.append(Text("ENG 1", (-200.0, TACH_RADIUS + 30.0), palette.primary, 32.0))
    out.append(Text("ENG 2", (200.0, TACH_RADIUS + 30.0), palette.primary, 32.0))
    return out


# --- altimeter --------------------------------------------------------------

ALT_RADIUS = 340.0
FEET_TO_METERS = 0.3048

# One turn of the long hand is 1000 ft, zero at 12 o'clock.
ALT_DIAL = SweepScale(0.0, 1000.0, 270.0, 360.0, wrap=True)
ALT_HAND_PERIODS_FT: tuple[float, float, float] = (1000.0, 10000.0, 100000.0)


def altimeter_hand_angles(altitude_ft: float) -> tuple[float, float, float]:
    """Screen angles of the 100 ft, 1000 ft and 10,000 ft hands."""

    alt = max(0.0, altitude_ft)
    return tuple(ALT_DIAL.start_deg + modulo_angle(alt, period) for period in ALT_HAND_PERIODS_FT)  # type: ignore[return-value]


def altimeter_readout(altitude_ft: float) -> str:
    return f"{int(max(0.0, altitude_ft) * FEET_TO_METERS)} m"


def _hand(angle_deg: float, *, length: float, tail: float, width: float, color: RGB) -> Line:
    return Line(polar(0.0, 0.0, tail, angle_deg + 180.0), polar(0.0, 0.0, length, angle_deg), color, width)


def render_altimeter(altitude_ft: float, palette: Palette, config: GaugeConfig) -> list[Primitive]:
    alt = _require_number("altitude", altitude_ft)
    r = ALT_RADIUS

    out = _dial_face(r, palette, config)
    majors = tuple(float(v) for v in range(0, 1000, 100))
    minors = tuple(float(v) for v in range(0, 1000, 20) if v % 100 != 0)
    out += _ticks(ALT_DIAL, majors, inner=r - 60.0, outer=r - 15.0, width=8.0, color=palette.tick)
    out += _ticks(ALT_DIAL, minors, inner=r - 40.0, outer=r - 15.0, width=3.0, color=palette.secondary)
    for idx, value in enumerate(majors):
        out.append(_label_at(ALT_DIAL, value, str(idx), dist=r - 100.0, color=palette.primary, size=56.0))

    out.append(Text(altimeter_readout(alt), (0.0, 180.0), palette.primary, 36.0))

    hundreds, thousands, ten_thousands = altimeter_hand_angles(alt)
    out.append(_hand(hundreds, length=r - 50.0, tail=25.0, width=6.0, color=palette.primary))
    out.append(_hand(thousands, length=r - 120.0, tail=40.0, width=12.0, color=palette.secondary))

    short_len = r - 180.0
    tip = polar(0.0, 0.0, short_len, ten_thousands)
    base = polar(0.0, 0.0, short_len - 60.0, ten_thousands)
    out.append(
        Polygon(
            (
                tip,
                polar(base[0], base[1], 18.0, ten_thousands - 90.0),
                polar(base[0], base[1], 18.0, ten_thousands + 90.0),
            ),
            fill=palette.tick,
        )
    )
    out.append(_hand(ten_thousands, length=short_len - 50.0, tail=50.0, width=18.0, color=palette.tick))

    out += _center_cap(35.0, 15.0, palette, config)
    return out


# --- vertical speed indicator -----------------------------------------------

VSI_RADIUS = 340.0
VSI_MAX_FPM = 2000.0

# Zero at 9 o'clock; climb sweeps clockwise over the top, descent under the bottom.
VSI_SCALE = SweepScale(-VSI_MAX_FPM, VSI_MAX_FPM, 30.0, 300.0, clockwise=True)


def render_vsi(vertical_speed_fpm: float, palette: Palette, config: GaugeConfig) -> list[Primitive]:
    rate = _require_number("vertical_speed", vertical_speed_fpm)
    r = VSI_RADIUS

    out = _dial_face(r, palette, config)
    majors = (0.0, 500.0, 1000.0, 1500.0, 2000.0, -500.0, -1000.0, -1500.0, -2000.0)
    minors = (250.0, 750.0, 1250.0, 1750.0, -250.0, -750.0, -1250.0, -1750.0)
    out += _ticks(VSI_SCALE, majors, inner=r - 70.0, outer=r - 15.0, width=8.0, color=palette.tick)
    out += _ticks(VSI_SCALE, minors, inner=r - 50.0, outer=r - 15.0, width=3.0, color=palette.tick)
    for value in majors:
        label = str(int(abs(value)) // 100)
        out.append(_label_at(VSI_SCALE, value, label, dist=r - 100.0, color=palette.primary, size=48.0))

    out.append(Text("UP", (-150.0, -60.0), palette.positive, 36.0))
    out.append(Text("DN", (-150.0, 60.0), palette.negative, 36.0))
    out.append(Text("VERTICAL", (0.0, 80.0), palette.secondary, 32.0))
    out.append(Text("SPEED", (0.0, 115.0), palette.secondary, 32.0))

    out += _needle(VSI_SCALE.angle(rate), length=r - 70.0, tail=55.0, width=8.0, color=palette.needle)
    out += _center_cap(35.0, 15.0, palette, config)
    return out


# --- airspeed indicator -----------------------------------------------------

ASI_RADIUS = 310.0
VS0_KT = 45.0
VS1_KT = 55.0
VFE_KT = 100.0
VNO_KT = 140.0
VNE_KT = 180.0
ASI_MAX_KT = 200.0

ASI_SCALE = SweepScale(0.0, ASI_MAX_KT, 225.0, 270.0)

ASI_ARC_WIDTH = 18.0
# (band, ring): ring 0 is the outer ring, ring 1 sits just inside it.
ASI_BANDS: tuple[tuple[Band, int], ...] = (
    (Band(VS0_KT, VFE_KT, "arc_white"), 0),
    (Band(VS1_KT, VNO_KT, "arc_green"), 1),
    (Band(VNO_KT, VNE_KT, "arc_yellow"), 0),
)


def airspeed_readout_role(airspeed_kt: float) -> str:
    if airspeed_kt >= VNE_KT:
        return "critical"
    if airspeed_kt >= VNO_KT:
        return "warning"
    if 0.0 < airspeed_kt < VS1_KT:
        return "critical"
    return "primary"


def render_airspeed(airspeed_kt: float, palette: Palette, config: GaugeConfig) -> list[Primitive]:
    speed = _require_number("airspeed", airspeed_kt)
    r = ASI_RADIUS
    arc_r = r - 25.0

    out = _dial_face(r, palette, config)
    spans = band_spans(ASI_SCALE, [band for band, _ in ASI_BANDS])
    for span, (_, ring) in zip(spans, ASI_BANDS, strict=True):
        radius = arc_r - ring * (ASI_ARC_WIDTH + 2.0)
        pts = tuple(arc_points(0.0, 0.0, radius, span.start_deg, span.end_deg, segments=24))
        out.append(Polyline(pts, palette[span.role], ASI_ARC_WIDTH))
    out.append(Line(*radial_segment(0.0, 0.0, ASI_SCALE.angle(VNE_KT), arc_r - 30.0, arc_r + 5.0), palette.arc_red, 6.0))

    majors = tuple(float(v) for v in range(0, 201, 20))
    minors = tuple(float(v) for v in range(10, 200, 20))
    out += _ticks(ASI_SCALE, majors, inner=r - 60.0, outer=r - 15.0, width=8.0, color=palette.tick)
    out += _ticks(ASI_SCALE, minors, inner=r - 40.0, outer=r - 15.0, width=3.0, color=palette.tick)
    for value in range(0, 201, 40):
        out.append(_label_at(ASI_SCALE, float(value), str(value), dist=r - 85.0, color=palette.primary, size=42.0))

    out.append(Text("AIRSPEED", (0.0, -80.0), palette.primary, 28.0))
    out.append(Text("KNOTS", (0.0, -50.0), palette.primary, 24.0))
    out.append(Text(str(int(max(0.0, speed))), (0.0, 100.0), palette[airspeed_readout_role(speed)], 48.0))

    out += _needle(ASI_SCALE.angle(speed), length=r - 60.0, tail=50.0, width=8.0, color=palette.needle)
    out += _center_cap(30.0, 12.0, palette, config)
    return out


# --- heading indicator ------------------------------------------------------

HDG_RADIUS = 310.0

# Compass card: card bearing 0 drawn at 12 o'clock when the heading is 0.
HDG_CARD = SweepScale(0.0, 360.0, 270.0, 360.0, wrap=True)
HDG_CARDINALS: dict[int, str] = {0: "N", 90: "E", 180: "S", 270: "W"}


def heading_readout(heading_deg: float) -> str:
    value = int(round(heading_deg)) % 360
    if value == 0:
        value = 360
    return f"{value:03d}°"


def card_angle(bearing_deg: float, heading_deg: float) -> float:
    """Screen angle of a card bearing when the card is turned to ``heading_deg``."""

    return HDG_CARD.angle(bearing_deg - heading_deg)


def render_heading(heading_deg: float, palette: Palette, config: GaugeConfig) -> list[Primitive]:
    heading = _require_number("heading", heading_deg)
    r = HDG_RADIUS

    out = _dial_face(r, palette, config)

    for bearing in range(0, 360, 10):
        length, width = (40.0, 4.0) if bearing % 30 == 0 else (25.0, 2.0)
        start, end = radial_segment(0.0, 0.0, card_angle(bearing, heading), r - 20.0 - length, r - 20.0)
        out.append(Line(start, end, palette.tick, width))

    for bearing in range(0, 360, 30):
        angle = card_angle(bearing, heading)
        pos = polar(0.0, 0.0, r - 80.0, angle)
        # Labels stay upright relative to the card, like a real compass card.
        rotation = angle + 90.0
        cardinal = HDG_CARDINALS.get(bearing)
        if cardinal is None:
            out.append(Text(str(bearing // 10), pos, palette.primary, 36.0, rotation_deg=rotation))
        else:
            color = palette.cardinal if cardinal == "N" else palette.primary
            out.append(Text(cardinal, pos, color, 44.0, rotation_deg=rotation))

    out.append(Polygon(((0.0, -r + 15.0), (-12.0, -r + 40.0), (12.0, -r + 40.0)), fill=palette.needle))
    out.append(Line((-r + 20.0, 0.0), (-r + 50.0, 0.0), palette.tick, 4.0))
    out.append(Line((r - 20.0, 0.0), (r - 50.0, 0.0), palette.tick, 4.0))

    out.append(Line((0.0, -40.0), (0.0, 40.0), palette.aircraft, 4.0))
    out.append(Line((-35.0, 5.0), (35.0, 5.0), palette.aircraft, 4.0))
    out.append(Line((-15.0, 35.0), (15.0, 35.0), palette.aircraft, 3.0))
    out.append(Circle((0.0, 0.0), 6.0, fill=palette.aircraft))

    out.append(Text(heading_readout(heading), (0.0, r - 60.0), palette.primary, 42.0))
    return out


# --- attitude indicator -----------------------------------------------------

PIXELS_PER_DEGREE = 12.0
PITCH_LADDER_DEG: tuple[int, ...] = (-30, -25, -20, -15, -10, -5, 5, 10, 15, 20, 25, 30)
BANK_SCALE = SweepScale(-60.0, 60.0, 210.0, 120.0)
BANK_MARKS: tuple[tuple[float, bool], ...] = (
    (0.0, True),
    (10.0, False),
    (-10.0, False),
    (20.0, False),
    (-20.0, False),
    (30.0, True),
    (-30.0, True),
    (45.0, False),
    (-45.0, False),
    (60.0, True),
    (-60.0, True),
)


def attitude_center(config: GaugeConfig) -> Point:
    return (0.0, 0.0) if config.background_mode else (0.0, 20.0)


def render_attitude(value: tuple[float, float], palette: Palette, config: GaugeConfig) -> list[Primitive]:
    """``value`` is ``(pitch, roll)`` in degrees."""

    try:
        pitch_raw, roll_raw = value
    except (TypeError, ValueError):
        raise InvalidGaugeValue("expected (pitch, roll)") from None
    pitch = _require_number("pitch", pitch_raw)
    roll = _require_number("roll", roll_raw)

    w = float(config.width)
    h = float(config.height)
    center = attitude_center(config)
    y_off = pitch * PIXELS_PER_DEGREE

    def place(p: Point) -> Point:
        x, y = rotate_point(p, roll)
        return (x + center[0], y + center[1])

    size = w + h
    sky = ((-size, y_off - size), (size, y_off - size), (size, y_off), (-size, y_off))
    ground = ((-size, y_off), (size, y_off), (size, y_off + size), (-size, y_off + size))

    out: list[Primitive] = [
        Polygon(tuple(place(p) for p in sky), fill=palette.sky),
        Polygon(tuple(place(p) for p in ground), fill=palette.ground),
        Line(place((-w, y_off)), place((w, y_off)), palette.horizon, 3.0),
    ]
    if config.background_mode:
        return out

    for mark in PITCH_LADDER_DEG:
        y = y_off - mark * PIXELS_PER_DEGREE
        half = 80.0 if mark % 10 == 0 else 40.0
        out.append(Line(place((-half, y)), place((-20.0, y)), palette.primary, 2.0))
        out.append(Line(place((20.0, y)), place((half, y)), palette.primary, 2.0))
        if mark < 0:
            out.append(Line(place((-half, y)), place((-half, y - 10.0)), palette.primary, 2.0))
            out.append(Line(place((half, y)), place((half, y - 10.0)), palette.primary, 2.0))
        if mark % 10 == 0:
            label = str(abs(mark))
            out.append(Text(label, place((-half - 10.0, y)), palette.primary, 24.0, align="right", rotation_deg=roll))
            out.append(Text(label, place((half + 10.0, y)), palette.primary, 24.0, align="left", rotation_deg=roll))

    cx, cy = center
    if config.show_bank_scale:
        bank_r = min(w, h) / 2.0 - 100.0
        for deg, major in BANK_MARKS:
            length, width = (25.0, 4.0) if major else (15.0, 2.0)
            start, end = radial_segment(cx, cy, BANK_SCALE.angle(deg), bank_r - length, bank_r)
            out.append(Line(start, end, palette.tick, width))

        pointer_r = min(w, h) / 2.0 - 130.0
        tip_angle = BANK_SCALE.angle(roll)
        spread = math.degrees(0.12)
        out.append(
            Polygon(
                (
                    polar(cx, cy, pointer_r, tip_angle),
                    polar(cx, cy, pointer_r + 18.0, tip_angle - spread),
                    polar(cx, cy, pointer_r + 18.0, tip_angle + spread),
                ),
                fill=palette.aircraft,
                outline=palette.tick,
                width=1.0,
            )
        )

    if config.show_aircraft:
        span = 90.0
        gap = 30.0
        out.append(Line((cx - gap, cy), (cx - span, cy), palette.aircraft, 8.0))
        out.append(Line((cx - span, cy), (cx - span, cy + 25.0), palette.aircraft, 8.0))
        out.append(Line((cx + gap, cy), (cx + span, cy), palette.aircraft, 8.0))
        out.append(Line((cx + span, cy), (cx + span, cy + 25.0), palette.aircraft, 8.0))
        out.append(Circle((cx, cy), 8.0, fill=palette.aircraft))

    if config.show_border:
        out.append(RectShape(-w / 2.0, -h / 2.0, w, h, outline=palette.border, width=3.0))
    return out


# --- dispatch ---------------------------------------------------------------


def gauge_value(kind: GaugeKind, snapshot: FlightSnapshot) -> object:
    """The part of a snapshot a given gauge reads."""

    if kind is GaugeKind.TACHOMETER:
        return snapshot.engines
    if kind is GaugeKind.ALTIMETER:
        return snapshot.altitude
    if kind is GaugeKind.VSI:
        return snapshot.vertical_speed
    if kind is GaugeKind.AIRSPEED:
        return snapshot.airspeed
    if kind is GaugeKind.ATTITUDE:
        return snapshot.attitude
    return snapshot.heading


def gauge_half_extent(kind: GaugeKind, config: GaugeConfig) -> tuple[float, float]:
    """Half width/height of the local drawing frame, for fitting into a cell."""

    if kind is GaugeKind.ATTITUDE:
        return (float(config.width) / 2.0, float(config.height) / 2.0)
    return (DIAL_HALF_EXTENT, DIAL_HALF_EXTENT)


def render_gauge(kind: GaugeKind, snapshot: FlightSnapshot, palette: Palette, config: GaugeConfig) -> list[Primitive]:
    value = gauge_value(kind, snapshot)
    if kind is GaugeKind.TACHOMETER:
        return render_dual_tachometer(value, palette, config)  # type: ignore[arg-type]
    if kind is GaugeKind.ALTIMETER:
        return render_altimeter(value, palette, config)  # type: ignore[arg-type]
    if kind is GaugeKind.VSI:
        return render_vsi(value, palette, config)  # type: ignore[arg-type]
    if kind is GaugeKind.AIRSPEED:
        return render_airspeed(value, palette, config)  # type: ignore[arg-type]
    if kind is GaugeKind.ATTITUDE:
        return render_attitude(value, palette, config)  # type: ignore[arg-type]
    return render_heading(value, palette, config)  # type: ignore[arg-type]
