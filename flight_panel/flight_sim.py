"""Flight-phase state machine and per-tick physical value updaters.

One simulated flight cycles forever through ten phases:

    ground idle -> takeoff roll -> rotation -> initial climb -> cruise climb
    -> level off -> cruise -> descent -> approach -> landing -> ground idle

The phase decides the targets (engine RPM, vertical speed, airspeed, pitch,
roll amplitude, heading); every physical value then moves toward its target
at a fixed rate per second. This is a cosmetic approximation for driving the
gauges, not a flight model.

Deterministic: given a state, ``dt`` and the jitter source, ``tick`` always
produces the same result. No I/O happens here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from .sim_core import (
    JitterSource,
    NoJitter,
    SeededRng,
    approach,
    clamp01,
    normalize_heading,
    shortest_turn,
)


class FlightPhase(StrEnum):
    GROUND_IDLE = "ground_idle"
    TAKEOFF_ROLL = "takeoff_roll"
    ROTATION = "rotation"
    INITIAL_CLIMB = "initial_climb"
    CRUISE_CLIMB = "cruise_climb"
    LEVEL_OFF = "level_off"
    CRUISE = "cruise"
    DESCENT = "descent"
    APPROACH = "approach"
    LANDING = "landing"


PHASE_ORDER: tuple[FlightPhase, ...] = tuple(FlightPhase)

IDLE_RPM = 800.0
TAKEOFF_RPM = 2700.0
CLIMB_RPM = 2500.0
CRUISE_RPM = 2300.0
DESCENT_RPM = 1800.0
APPROACH_RPM = 1500.0

MAX_CLIMB_RATE_FPM = 2000.0
CRUISE_ALTITUDE_FT = 12500.0

AMBIENT_OIL_TEMP_C = 20.0
MAX_OIL_TEMP_C = 110.0

# Rates per second.
RPM_RATE = 400.0
VERTICAL_SPEED_RATE = 300.0
LEVEL_OFF_VS_DECAY = 200.0
AIRSPEED_RATE = 15.0
OIL_TEMP_RATE = 5.0
PITCH_RATE = 3.0
ROLL_RATE = 5.0
ROLL_PHASE_RATE = 0.3
TURN_RATE = 3.0

RIGHT_ENGINE_JITTER_RPM = 10.0
OIL_TEMP_JITTER_C = 1.0

_RPM_RANGE = TAKEOFF_RPM - IDLE_RPM

_ON_GROUND = frozenset({FlightPhase.GROUND_IDLE, FlightPhase.TAKEOFF_ROLL})
_NO_TURN = _ON_GROUND | {FlightPhase.ROTATION}

PITCH_TARGET_DEG: dict[FlightPhase, float] = dict(
    zip(PHASE_ORDER, (0.0, 0.0, 12.0, 10.0, 6.0, 2.0, 1.0, -5.0, -3.0, -2.0), strict=True)
)

ROLL_AMPLITUDE_DEG: dict[FlightPhase, float] = dict(
    zip(PHASE_ORDER, (0.0, 0.0, 2.0, 4.0, 3.0, 2.0, 3.0, 4.0, 2.0, 1.0), strict=True)
)

HEADING_TARGET_DEG: dict[FlightPhase, float] = {
    FlightPhase.GROUND_IDLE: 270.0,
    FlightPhase.TAKEOFF_ROLL: 270.0,
    FlightPhase.ROTATION: 270.0,
    FlightPhase.INITIAL_CLIMB: 270.0,
    FlightPhase.CRUISE_CLIMB: 0.0,
    FlightPhase.LEVEL_OFF: 0.0,
    FlightPhase.CRUISE: 0.0,
    FlightPhase.DESCENT: 90.0,
    FlightPhase.APPROACH: 90.0,
    FlightPhase.LANDING: 90.0,
}


@dataclass(slots=True)
class SimulationState:
    """Mutable simulation state, owned by the tick loop."""

    phase: FlightPhase
    phase_timer: float
    left_rpm: float
    right_rpm: float
    target_rpm: float
    altitude: float
    vertical_speed: float
    airspeed: float
    left_oil_temp: float
    right_oil_temp: float
    pitch: float
    roll: float
    roll_phase: float
    heading: float
    target_heading: float


@dataclass(frozen=True, slots=True)
class FlightSnapshot:
    """View model for the gauges (pure data, copied once per frame)."""

    phase: FlightPhase
    phase_timer: float
    left_rpm: float
    right_rpm: float
    target_rpm: float
    altitude: float
    vertical_speed: float
    airspeed: float
    left_oil_temp: float
    right_oil_temp: float
    pitch: float
    roll: float
    roll_phase: float
    heading: float
    target_heading: float

    @property
    def engines(self) -> tuple[float, float, float, float]:
        return (self.left_rpm, self.right_rpm, self.left_oil_temp, self.right_oil_temp)

    @property
    def attitude(self) -> tuple[float, float]:
        return (self.pitch, self.roll)


def new_state() -> SimulationState:
    """Aircraft parked on the runway: engines idling, everything at rest."""

    return SimulationState(
        phase=FlightPhase.GROUND_IDLE,
        phase_timer=0.0,
        left_rpm=IDLE_RPM,
        right_rpm=IDLE_RPM,
        target_rpm=IDLE_RPM,
        altitude=0.0,
        vertical_speed=0.0,
        airspeed=0.0,
        left_oil_temp=AMBIENT_OIL_TEMP_C,
        right_oil_temp=AMBIENT_OIL_TEMP_C,
        pitch=0.0,
        roll=0.0,
        roll_phase=0.0,
        heading=HEADING_TARGET_DEG[FlightPhase.GROUND_IDLE],
        target_heading=HEADING_TARGET_DEG[FlightPhase.GROUND_IDLE],
    )


def snapshot_of(state: SimulationState) -> FlightSnapshot:
    return FlightSnapshot(
        phase=state.phase,
        phase_timer=state.phase_timer,
        left_rpm=state.left_rpm,
        right_rpm=state.right_rpm,
        target_rpm=state.target_rpm,
        altitude=state.altitude,
        vertical_speed=state.vertical_speed,
        airspeed=state.airspeed,
        left_oil_temp=state.left_oil_temp,
        right_oil_temp=state.right_oil_temp,
        pitch=state.pitch,
        roll=state.roll,
        roll_phase=state.roll_phase,
        heading=state.heading,
        target_heading=state.target_heading,
    )


def tick(
    state: SimulationState,
    dt: float,
    jitter: JitterSource | None = None,
) -> SimulationState:
    """Advance ``state`` in place by ``dt`` seconds and return it.

    The phase step runs first; the updaters then run in a fixed order, each one
    reading the values produced by the ones before it.
    """

    if isinstance(dt, bool) or not isinstance(dt, (int, float)) or not math.isfinite(dt):
        raise ValueError("dt must be a finite number of seconds")
    if dt < 0:
        raise ValueError("dt must be >= 0")

    source: JitterSource = NoJitter() if jitter is None else jitter
    dt = float(dt)

    update_phase(state, dt)
    update_rpm(state, dt, source)
    update_flight_dynamics(state, dt)
    update_airspeed(state, dt)
    update_oil_temp(state, dt, source)
    update_attitude(state, dt)
    update_heading(state, dt)
    return state


def update_phase(state: SimulationState, dt: float) -> None:
    """Evaluate the current phase's guard; fire at most one transition."""

    t = state.phase_timer + dt
    phase = state.phase
    nxt: FlightPhase | None = None

    if phase is FlightPhase.GROUND_IDLE:
        if t > 3.0:
            nxt = FlightPhase.TAKEOFF_ROLL
            state.target_rpm = TAKEOFF_RPM
    elif phase is FlightPhase.TAKEOFF_ROLL:
        if t > 4.0:
            nxt = FlightPhase.ROTATION
    elif phase is FlightPhase.ROTATION:
        if state.altitude > 500.0:
            nxt = FlightPhase.INITIAL_CLIMB
    elif phase is FlightPhase.INITIAL_CLIMB:
        if state.altitude > 3000.0:
            nxt = FlightPhase.CRUISE_CLIMB
            state.target_rpm = CLIMB_RPM
    elif phase is FlightPhase.CRUISE_CLIMB:
        if state.altitude > CRUISE_ALTITUDE_FT - 500.0:
            nxt = FlightPhase.LEVEL_OFF
            state.target_rpm = CRUISE_RPM
    elif phase is FlightPhase.LEVEL_OFF:
        if abs(state.vertical_speed) < 50.0 and t > 2.0:
            nxt = FlightPhase.CRUISE
    elif phase is FlightPhase.CRUISE:
        if t > 8.0:
            nxt = FlightPhase.DESCENT
            state.target_rpm = DESCENT_RPM
    elif phase is FlightPhase.DESCENT:
        if state.altitude < 3000.0:
            nxt = FlightPhase.APPROACH
            state.target_rpm = APPROACH_RPM
    elif phase is FlightPhase.APPROACH:
        if state.altitude < 100.0:
            nxt = FlightPhase.LANDING
            state.target_rpm = IDLE_RPM
    elif phase is FlightPhase.LANDING:
        if state.altitude <= 0.0 and t > 3.0:
            nxt = FlightPhase.GROUND_IDLE
            state.altitude = 0.0
            state.vertical_speed = 0.0
            state.airspeed = 0.0

    if nxt is None:
        state.phase_timer = t
        return

    state.phase = nxt
    state.phase_timer = 0.0
    state.target_heading = normalize_heading(HEADING_TARGET_DEG[nxt])


def next_phase(phase: FlightPhase) -> FlightPhase:
    idx = PHASE_ORDER.index(phase)
    return PHASE_ORDER[(idx + 1) % len(PHASE_ORDER)]


def rpm_fraction(rpm: float) -> float:
    return clamp01((rpm - IDLE_RPM) / _RPM_RANGE)


def update_rpm(state: SimulationState, dt: float, jitter: JitterSource) -> None:
    max_change = RPM_RATE * dt
    right_target = state.target_rpm + jitter.uniform(-RIGHT_ENGINE_JITTER_RPM, RIGHT_ENGINE_JITTER_RPM)
    state.left_rpm = approach(state.left_rpm, state.target_rpm, max_change)
    state.right_rpm = approach(state.right_rpm, right_target, max_change)


def update_flight_dynamics(state: SimulationState, dt: float) -> None:
    """Derive vertical speed and altitude from the phase and engine thrust."""

    thrust = rpm_fraction((state.left_rpm + state.right_rpm) / 2.0)
    phase = state.phase
    climbed = state.altitude + state.vertical_speed * dt / 60.0

    if phase in _ON_GROUND:
        target_vs = 0.0
        altitude = 0.0
    elif phase is FlightPhase.ROTATION:
        target_vs = 0.9 * thrust * MAX_CLIMB_RATE_FPM
        altitude = climbed
    elif phase is FlightPhase.INITIAL_CLIMB:
        target_vs = 0.85 * thrust * MAX_CLIMB_RATE_FPM
        altitude = climbed
    elif phase is FlightPhase.CRUISE_CLIMB:
        target_vs = 0.5 * thrust * MAX_CLIMB_RATE_FPM
        altitude = climbed
    elif phase is FlightPhase.LEVEL_OFF:
        target_vs = max(0.0, state.vertical_speed - LEVEL_OFF_VS_DECAY * dt)
        altitude = climbed
    elif phase is FlightPhase.CRUISE:
        target_vs = 0.0
        altitude = state.altitude
    elif phase is FlightPhase.DESCENT:
        target_vs = -800.0 - 200.0 * thrust
        altitude = climbed
    elif phase is FlightPhase.APPROACH:
        target_vs = -600.0
        altitude = climbed
    else:
        # Landing: touch down, then stay on the runway.
        if climbed <= 0.0:
            state.altitude = 0.0
            state.vertical_speed = 0.0
            return
        target_vs = -400.0
        altitude = climbed

    state.vertical_speed = approach(state.vertical_speed, target_vs, VERTICAL_SPEED_RATE * dt)
    state.altitude = max(0.0, altitude)


def airspeed_target(phase: FlightPhase, phase_timer: float) -> float:
    if phase is FlightPhase.GROUND_IDLE:
        return 0.0
    if phase is FlightPhase.TAKEOFF_ROLL:
        return 70.0 * min(1.0, phase_timer / 4.0)
    if phase is FlightPhase.ROTATION:
        return 75.0
    if phase is FlightPhase.INITIAL_CLIMB:
        return 95.0
    if phase is FlightPhase.CRUISE_CLIMB:
        return 120.0
    if phase is FlightPhase.LEVEL_OFF:
        return 140.0
    if phase is FlightPhase.CRUISE:
        return 145.0
    if phase is FlightPhase.DESCENT:
        return 130.0
    if phase is FlightPhase.APPROACH:
        return 90.0
    return max(0.0, 70.0 - phase_timer * 25.0)


def update_airspeed(state: SimulationState, dt: float) -> None:
    target = airspeed_target(state.phase, state.phase_timer)
    state.airspeed = max(0.0, approach(state.airspeed, target, AIRSPEED_RATE * dt))


def oil_temp_target(rpm: float) -> float:
    return AMBIENT_OIL_TEMP_C + rpm_fraction(rpm) * (MAX_OIL_TEMP_C - AMBIENT_OIL_TEMP_C)


def update_oil_temp(state: SimulationState, dt: float, jitter: JitterSource) -> None:
    max_change = OIL_TEMP_RATE * dt
    left_target = oil_temp_target(state.left_rpm) + jitter.uniform(-OIL_TEMP_JITTER_C, OIL_TEMP_JITTER_C)
    right_target = oil_temp_target(state.right_rpm) + jitter.uniform(-OIL_TEMP_JITTER_C, OIL_TEMP_JITTER_C)
    state.left_oil_temp = approach(state.left_oil_temp, left_target, max_change)
    state.right_oil_temp = approach(state.right_oil_temp, right_target, max_change)


def update_attitude(state: SimulationState, dt: float) -> None:
    state.pitch = approach(state.pitch, PITCH_TARGET_DEG[state.phase], PITCH_RATE * dt)

    state.roll_phase += ROLL_PHASE_RATE * dt
    roll_target = math.sin(state.roll_phase) * ROLL_AMPLITUDE_DEG[state.phase]
    state.roll = approach(state.roll, roll_target, ROLL_RATE * dt)


def update_heading(state: SimulationState, dt: float) -> None:
    rate = 0.0 if state.phase in _NO_TURN else TURN_RATE
    turn = approach(0.0, shortest_turn(state.heading, state.target_heading), rate * dt)
    state.heading = normalize_heading(state.heading + turn)


class FlightSim:
    """Owner of one simulation state and its jitter source.

    - Deterministic: jitter comes from an RNG seeded at construction.
    - ``seed=None`` runs without jitter (both engines track the same target).
    """

    def __init__(self, *, seed: int | None = None, jitter: JitterSource | None = None) -> None:
        if seed is not None and jitter is not None:
            raise ValueError("pass either seed or jitter, not both")
        if jitter is not None:
            self._jitter: JitterSource = jitter
        elif seed is not None:
            self._jitter = SeededRng(seed)
        else:
            self._jitter = NoJitter()
        self._seed = seed
        self._state = new_state()

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def phase(self) -> FlightPhase:
        return self._state.phase

    def tick(self, dt: float) -> FlightSnapshot:
        tick(self._state, dt, self._jitter)
        return snapshot_of(self._state)

    def snapshot(self) -> FlightSnapshot:
        return snapshot_of(self._state)
