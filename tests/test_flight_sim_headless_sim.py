from __future__ import annotations

from flight_panel.flight_sim import PHASE_ORDER, FlightPhase, FlightSim, new_state, tick


def test_scripted_three_seconds_on_the_ground_then_takeoff_roll() -> None:
    state = new_state()
    for i in range(1, 62):
        state = tick(state, 0.05)
        if state.phase is FlightPhase.GROUND_IDLE:
            assert state.target_rpm == 800.0
        else:
            assert state.phase is FlightPhase.TAKEOFF_ROLL
            assert state.target_rpm == 2700.0
        if i == 59:
            assert state.phase is FlightPhase.GROUND_IDLE
    assert state.phase is FlightPhase.TAKEOFF_ROLL


def test_full_flight_visits_every_phase_in_order_and_lands() -> None:
    sim = FlightSim(seed=2024)
    visited = [sim.phase]
    max_ticks = 100_000

    for _ in range(max_ticks):
        snap = sim.tick(0.1)

        assert snap.altitude >= 0.0
        assert 0.0 <= snap.heading < 360.0
        assert 0.0 <= snap.target_heading < 360.0
        if snap.phase in (FlightPhase.GROUND_IDLE, FlightPhase.TAKEOFF_ROLL):
            assert snap.altitude == 0.0

        if snap.phase is not visited[-1]:
            visited.append(snap.phase)
            assert snap.phase_timer == 0.0
        if len(visited) == len(PHASE_ORDER) + 1:
            break

    assert visited == [*PHASE_ORDER, FlightPhase.GROUND_IDLE]


def test_cruise_is_reached_near_cruise_altitude() -> None:
    sim = FlightSim()
    snap = sim.snapshot()
    for _ in range(100_000):
        snap = sim.tick(0.1)
        if snap.phase is FlightPhase.CRUISE:
            break
    assert snap.phase is FlightPhase.CRUISE
    assert snap.altitude > 12000.0
    assert abs(snap.vertical_speed) < 50.0
