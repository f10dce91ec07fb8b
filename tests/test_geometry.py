from __future__ import annotations

import math

import pytest

from flight_panel.exceptions import ConfigError, GaugeConfigError
from flight_panel.geometry import (
    Band,
    SweepScale,
    arc_points,
    band_spans,
    modulo_angle,
    polar,
    radial_segment,
    rotate_point,
    sector_points,
)


def test_sweep_scale_maps_linearly() -> None:
    scale = SweepScale(0.0, 200.0, 225.0, 270.0)
    assert scale.angle(0.0) == 225.0
    assert scale.angle(100.0) == pytest.approx(360.0)
    assert scale.angle(200.0) == pytest.approx(495.0)
    assert scale.end_deg == pytest.approx(495.0)


def test_sweep_scale_clamps_out_of_range_values() -> None:
    scale = SweepScale(0.0, 200.0, 225.0, 270.0)
    assert scale.angle(-50.0) == scale.angle(0.0)
    assert scale.angle(999.0) == scale.angle(200.0)


def test_counter_clockwise_scale_mirrors_the_sweep() -> None:
    left = SweepScale(0.0, 3500.0, 90.0, 180.0, clockwise=True)
    right = SweepScale(0.0, 3500.0, 90.0, 180.0, clockwise=False)
    assert left.angle(1750.0) == pytest.approx(180.0)  # 9 o'clock
    assert right.angle(1750.0) == pytest.approx(0.0)  # 3 o'clock
    assert left.angle(3500.0) == pytest.approx(270.0)
    assert right.angle(3500.0) == pytest.approx(-90.0)


def test_wrapping_scale_wraps_instead_of_clamping() -> None:
    card = SweepScale(0.0, 360.0, 270.0, 360.0, wrap=True)
    assert card.angle(0.0) == 270.0
    assert card.angle(360.0) == 270.0
    assert card.angle(-90.0) == pytest.approx(card.angle(270.0))
    assert card.angle(450.0) == pytest.approx(card.angle(90.0))


def test_mapping_is_pure() -> None:
    scale = SweepScale(-2000.0, 2000.0, 30.0, 300.0)
    assert scale.angle(1234.5) == scale.angle(1234.5)
    assert SweepScale(-2000.0, 2000.0, 30.0, 300.0).angle(1234.5) == scale.angle(1234.5)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(min_value=5.0, max_value=5.0, start_deg=0.0, sweep_deg=90.0),
        dict(min_value=10.0, max_value=0.0, start_deg=0.0, sweep_deg=90.0),
        dict(min_value=0.0, max_value=10.0, start_deg=0.0, sweep_deg=0.0),
        dict(min_value=0.0, max_value=math.inf, start_deg=0.0, sweep_deg=90.0),
        dict(min_value=0.0, max_value=10.0, start_deg=math.nan, sweep_deg=90.0),
        dict(min_value=0.0, max_value=10.0, start_deg=0.0, sweep_deg=400.0, wrap=True),
    ],
)
def test_degenerate_scales_are_rejected(kwargs: dict) -> None:
    with pytest.raises(GaugeConfigError):
        SweepScale(**kwargs)


def test_gauge_config_error_is_a_config_error() -> None:
    with pytest.raises(ConfigError):
        SweepScale(1.0, 1.0, 0.0, 90.0)


def test_modulo_angle_for_multi_hand_dials() -> None:
    assert modulo_angle(250.0, 1000.0) == 90.0
    assert modulo_angle(1250.0, 1000.0) == 90.0
    assert modulo_angle(12500.0, 10000.0) == 90.0
    assert modulo_angle(5.0, 10.0, full_turn=100.0) == 50.0
    with pytest.raises(GaugeConfigError):
        modulo_angle(1.0, 0.0)
    with pytest.raises(GaugeConfigError):
        modulo_angle(1.0, -5.0)


def test_band_spans_follow_scale_direction() -> None:
    right = SweepScale(0.0, 3500.0, 90.0, 180.0, clockwise=False)
    (span,) = band_spans(right, [Band(3000.0, 3500.0, "critical")])
    assert span.role == "critical"
    assert span.start_deg == pytest.approx(right.angle(3000.0))
    assert span.end_deg == pytest.approx(-90.0)
    assert span.sweep_deg < 0


@pytest.mark.parametrize(
    "band",
    [Band(100.0, 50.0, "x"), Band(50.0, 50.0, "x"), Band(-10.0, 50.0, "x"), Band(150.0, 250.0, "x")],
)
def test_invalid_bands_are_rejected(band: Band) -> None:
    scale = SweepScale(0.0, 200.0, 225.0, 270.0)
    with pytest.raises(GaugeConfigError):
        band_spans(scale, [band])


def test_polar_uses_screen_angles() -> None:
    x, y = polar(0.0, 0.0, 10.0, 90.0)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(10.0)  # 6 o'clock on a y-down display
    x, y = polar(5.0, 5.0, 10.0, 270.0)
    assert (x, y) == pytest.approx((5.0, -5.0))


def test_radial_segment_spans_inner_to_outer() -> None:
    start, end = radial_segment(0.0, 0.0, 0.0, 20.0, 30.0)
    assert start == pytest.approx((20.0, 0.0))
    assert end == pytest.approx((30.0, 0.0))


def test_arc_and_sector_points() -> None:
    pts = arc_points(0.0, 0.0, 10.0, 0.0, 90.0, segments=3)
    assert len(pts) == 4
    assert pts[0] == pytest.approx((10.0, 0.0))
    assert pts[-1][0] == pytest.approx(0.0, abs=1e-9)
    assert pts[-1][1] == pytest.approx(10.0)
    assert all(math.hypot(*p) == pytest.approx(10.0) for p in pts)

    sector = sector_points(1.0, 2.0, 10.0, 90.0, 270.0)
    assert sector[0] == (1.0, 2.0)
    assert len(sector) >= 4


def test_rotate_point_clockwise_on_screen() -> None:
    assert rotate_point((10.0, 0.0), 90.0) == pytest.approx((0.0, 10.0))
    assert rotate_point((11.0, 1.0), 180.0, origin=(1.0, 1.0)) == pytest.approx((-9.0, 1.0))
