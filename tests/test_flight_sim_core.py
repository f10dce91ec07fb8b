from __future__ import annotations

import dataclasses
import math

import pytest

from flight_panel.flight_sim import (
    CLIMB_RPM,
    IDLE_RPM,
    TAKEOFF_RPM,
    FlightPhase,
    FlightSim,
    new_state,
    next_phase,
    oil_temp_target,
    tick,
    update_airspeed,
    update_attitude,
    update_flight_dynamics,
    update_heading,
    update_oil_temp,
    update_phase,
    update_rpm,
)
from flight_panel.sim_core import NoJitter


class FixedJitter:
    """Always returns the upper end of the requested range."""

    def uniform(self, a: float, b: float) -> float:
        return b


def test_new_state_is_parked_on_the_runway() -> None:
    s = new_state()
    assert s.phase is FlightPhase.GROUND_IDLE
    assert s.phase_timer == 0.0
    assert s.left_rpm == s.right_rpm == s.target_rpm == IDLE_RPM
    assert s.altitude == 0.0
    assert s.vertical_speed == 0.0
    assert s.airspeed == 0.0
    assert s.heading == 270.0
    assert s.target_heading == 270.0


def test_ground_idle_waits_three_seconds_then_starts_takeoff_roll() -> None:
    s = new_state()
    s.phase_timer = 2.9
    update_phase(s, 0.05)
    assert s.phase is FlightPhase.GROUND_IDLE
    assert s.phase_timer == pytest.approx(2.95)
    assert s.target_rpm == IDLE_RPM

    update_phase(s, 0.1)
    assert s.phase is FlightPhase.TAKEOFF_ROLL
    assert s.phase_timer == 0.0
    assert s.target_rpm == TAKEOFF_RPM


def test_takeoff_roll_rotates_after_four_seconds() -> None:
    s = new_state()
    s.phase = FlightPhase.TAKEOFF_ROLL
    s.phase_timer = 3.95
    update_phase(s, 0.1)
    assert s.phase is FlightPhase.ROTATION
    assert s.phase_timer == 0.0


@pytest.mark.parametrize(
    ("phase", "altitude", "expected", "target_rpm"),
    [
        (FlightPhase.ROTATION, 500.0, FlightPhase.ROTATION, None),
        (FlightPhase.ROTATION, 501.0, FlightPhase.INITIAL_CLIMB, None),
        (FlightPhase.INITIAL_CLIMB, 3001.0, FlightPhase.CRUISE_CLIMB, 2500.0),
        (FlightPhase.CRUISE_CLIMB, 11999.0, FlightPhase.CRUISE_CLIMB, None),
        (FlightPhase.CRUISE_CLIMB, 12001.0, FlightPhase.LEVEL_OFF, 2300.0),
        (FlightPhase.DESCENT, 3000.0, FlightPhase.DESCENT, None),
        (FlightPhase.DESCENT, 2999.0, FlightPhase.APPROACH, 1500.0),
        (FlightPhase.APPROACH, 99.0, FlightPhase.LANDING, 800.0),
    ],
)
def test_altitude_guards(
    phase: FlightPhase,
    altitude: float,
    expected: FlightPhase,
    target_rpm: float | None,
) -> None:
    s = new_state()
    s.phase = phase
    s.altitude = altitude
    s.target_rpm = 1234.0
    s.phase_timer = 1.0
    update_phase(s, 0.05)

    assert s.phase is expected
    if expected is phase:
        assert s.phase_timer == pytest.approx(1.05)
        assert s.target_rpm == 1234.0
    else:
        assert s.phase_timer == 0.0
        assert s.target_rpm == (1234.0 if target_rpm is None else target_rpm)


def test_level_off_needs_small_vertical_speed_and_two_seconds() -> None:
    s = new_state()
    s.phase = FlightPhase.LEVEL_OFF
    s.phase_timer = 1.95
    s.vertical_speed = 60.0
    update_phase(s, 0.1)
    assert s.phase is FlightPhase.LEVEL_OFF

    s.vertical_speed = 40.0
    update_phase(s, 0.1)
    assert s.phase is FlightPhase.CRUISE


def test_cruise_starts_descent_after_eight_seconds() -> None:
    s = new_state()
    s.phase = FlightPhase.CRUISE
    s.phase_timer = 7.95
    update_phase(s, 0.1)
    assert s.phase is FlightPhase.DESCENT
    assert s.target_rpm == 1800.0
    assert s.target_heading == 90.0


def test_landing_returns_to_ground_idle_and_zeroes_motion() -> None:
    s = new_state()
    s.phase = FlightPhase.LANDING
    s.phase_timer = 2.95
    s.altitude = 0.0
    s.vertical_speed = -30.0
    s.airspeed = 12.0
    update_phase(s, 0.1)
    assert s.phase is FlightPhase.GROUND_IDLE
    assert s.altitude == 0.0
    assert s.vertical_speed == 0.0
    assert s.airspeed == 0.0
    assert s.target_heading == 270.0


def test_landing_waits_until_on_the_ground() -> None:
    s = new_state()
    s.phase = FlightPhase.LANDING
    s.phase_timer = 10.0
    s.altitude = 5.0
    update_phase(s, 0.1)
    assert s.phase is FlightPhase.LANDING


def test_at_most_one_transition_per_tick() -> None:
    s = new_state()
    s.phase_timer = 100.0
    s.altitude = 50000.0
    update_phase(s, 0.1)
    assert s.phase is FlightPhase.TAKEOFF_ROLL


def test_transition_sets_heading_target_for_the_new_phase() -> None:
    s = new_state()
    s.phase = FlightPhase.INITIAL_CLIMB
    s.altitude = 3500.0
    update_phase(s, 0.1)
    assert s.phase is FlightPhase.CRUISE_CLIMB
    assert s.target_rpm == CLIMB_RPM
    # 360 is stored as 0.
    assert s.target_heading == 0.0


def test_next_phase_wraps_to_ground_idle() -> None:
    assert next_phase(FlightPhase.GROUND_IDLE) is FlightPhase.TAKEOFF_ROLL
    assert next_phase(FlightPhase.LANDING) is FlightPhase.GROUND_IDLE


def test_rpm_converges_monotonically_without_overshoot() -> None:
    s = new_state()
    s.target_rpm = 2700.0
    seen = [s.left_rpm]
    for _ in range(5):
        update_rpm(s, 1.0, NoJitter())
        seen.append(s.left_rpm)

    assert seen == [800.0, 1200.0, 1600.0, 2000.0, 2400.0, 2700.0]
    assert all(b - a <= 400.0 for a, b in zip(seen, seen[1:]))


def test_right_engine_tracks_jittered_target() -> None:
    s = new_state()
    s.target_rpm = 2700.0
    for _ in range(10):
        update_rpm(s, 1.0, FixedJitter())
    assert s.left_rpm == 2700.0
    assert s.right_rpm == 2710.0


def test_ground_phases_hold_altitude_at_zero() -> None:
    for phase in (FlightPhase.GROUND_IDLE, FlightPhase.TAKEOFF_ROLL):
        s = new_state()
        s.phase = phase
        s.altitude = 40.0
        s.vertical_speed = 500.0
        update_flight_dynamics(s, 0.1)
        assert s.altitude == 0.0
        assert s.vertical_speed == pytest.approx(470.0)


def test_cruise_keeps_altitude_this_tick() -> None:
    s = new_state()
    s.phase = FlightPhase.CRUISE
    s.altitude = 12400.0
    s.vertical_speed = 300.0
    update_flight_dynamics(s, 1.0)
    assert s.altitude == 12400.0
    assert s.vertical_speed == 0.0


def test_climb_integrates_vertical_speed_per_minute() -> None:
    s = new_state()
    s.phase = FlightPhase.INITIAL_CLIMB
    s.altitude = 1000.0
    s.vertical_speed = 1200.0
    s.left_rpm = s.right_rpm = TAKEOFF_RPM
    update_flight_dynamics(s, 1.0)
    assert s.altitude == pytest.approx(1020.0)
    # Target is 0.85 * 2000 = 1700 ft/min, reached at 300 (ft/min)/s.
    assert s.vertical_speed == pytest.approx(1500.0)


def test_landing_floors_altitude_and_stops_sink() -> None:
    s = new_state()
    s.phase = FlightPhase.LANDING
    s.altitude = 2.0
    s.vertical_speed = -400.0
    update_flight_dynamics(s, 1.0)
    assert s.altitude == 0.0
    assert s.vertical_speed == 0.0


def test_airspeed_is_rate_limited_and_never_negative() -> None:
    s = new_state()
    s.phase = FlightPhase.CRUISE
    s.airspeed = 100.0
    update_airspeed(s, 1.0)
    assert s.airspeed == 115.0

    s.phase = FlightPhase.LANDING
    s.phase_timer = 10.0
    s.airspeed = 5.0
    update_airspeed(s, 1.0)
    assert s.airspeed == 0.0


def test_oil_temperature_follows_engine_load() -> None:
    assert oil_temp_target(IDLE_RPM) == 20.0
    assert oil_temp_target(TAKEOFF_RPM) == 110.0

    s = new_state()
    s.left_rpm = s.right_rpm = TAKEOFF_RPM
    update_oil_temp(s, 2.0, NoJitter())
    assert s.left_oil_temp == 30.0
    assert s.right_oil_temp == 30.0


def test_attitude_moves_toward_phase_targets() -> None:
    s = new_state()
    s.phase = FlightPhase.ROTATION
    update_attitude(s, 1.0)
    assert s.pitch == 3.0
    assert s.roll_phase == pytest.approx(0.3)
    assert s.roll == pytest.approx(math.sin(0.3) * 2.0)


def test_heading_holds_on_the_ground() -> None:
    s = new_state()
    s.target_heading = 90.0
    update_heading(s, 1.0)
    assert s.heading == 270.0


def test_heading_turns_the_short_way_across_north() -> None:
    s = new_state()
    s.phase = FlightPhase.CRUISE
    s.heading = 358.0
    s.target_heading = 2.0
    update_heading(s, 1.0)
    assert s.heading == pytest.approx(1.0)

    s.heading = 359.0
    s.target_heading = 0.0
    update_heading(s, 1.0)
    assert s.heading == 0.0


@pytest.mark.parametrize("dt", [-0.05, math.nan, math.inf, True])
def test_tick_rejects_invalid_dt(dt: float) -> None:
    with pytest.raises(ValueError):
        tick(new_state(), dt)


def test_tick_with_zero_dt_changes_nothing() -> None:
    s = new_state()
    before = dataclasses.astuple(s)
    tick(s, 0.0)
    assert dataclasses.astuple(s) == before


def test_tick_mutates_and_returns_the_same_state() -> None:
    s = new_state()
    assert tick(s, 0.05) is s


def test_flight_sim_same_seed_same_snapshots() -> None:
    a = FlightSim(seed=901)
    b = FlightSim(seed=901)
    stream_a = [a.tick(0.05) for _ in range(400)]
    stream_b = [b.tick(0.05) for _ in range(400)]
    assert stream_a == stream_b
    assert any(s.left_rpm != s.right_rpm for s in stream_a)


def test_flight_sim_without_seed_has_no_jitter() -> None:
    sim = FlightSim()
    for _ in range(400):
        snap = sim.tick(0.05)
        assert snap.left_rpm == snap.right_rpm
    assert sim.seed is None


def test_flight_sim_rejects_seed_and_jitter_together() -> None:
    with pytest.raises(ValueError):
        FlightSim(seed=1, jitter=NoJitter())


def test_snapshot_is_frozen_copy() -> None:
    sim = FlightSim(seed=3)
    snap = sim.snapshot()
    sim.tick(1.0)
    assert snap.phase_timer == 0.0
    assert snap.engines == (800.0, 800.0, 20.0, 20.0)
    assert snap.attitude == (0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.altitude = 10.0  # type: ignore[misc]
