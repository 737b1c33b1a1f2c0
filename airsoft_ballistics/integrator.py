"""
Numerical Integration Engine
=============================
Fixed-step Euler integration of the BB equations of motion:

    v_{n+1} = v_n + a(v_n, ω_n) * dt
    x_{n+1} = x_n + v_{n+1} * dt

``step`` is a pure transition on an immutable ``FlightState``;
``simulate`` owns the loop, sampling and termination.  A flight ends when
the BB drops below the ground (muzzle height under the line of sight),
passes the distance ceiling, or exceeds the flight-time guard.

Output: SimulationResult dataclass with one TrajectoryPoint per metre.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .atmosphere import air_density
from .config import SimulationConfig, DEFAULT_CONFIG
from .drag_model import spin_rate
from .projectile import (
    Projectile, EnergyPolicy, DEFAULT_POLICY, muzzle_state, compute_forces,
)
from .validation import BallisticInput, normalize_inputs

logger = logging.getLogger(__name__)


class Termination(Enum):
    GROUND_IMPACT = 'ground_impact'
    CEILING_REACHED = 'ceiling_reached'
    TIME_LIMIT = 'time_limit'


@dataclass(frozen=True)
class FlightState:
    """Snapshot of the BB at one instant."""
    time: float
    position: np.ndarray   # [x, y], y relative to the muzzle
    velocity: np.ndarray   # [vx, vy]
    spin: float            # rad/s

    @property
    def speed(self) -> float:
        return math.hypot(self.velocity[0], self.velocity[1])

    def spun_down(self, decay: float) -> 'FlightState':
        """Same state with the backspin reduced by one decay step."""
        return FlightState(self.time, self.position, self.velocity, self.spin * decay)


def launch_state(muzzle_velocity: float, spin: float) -> FlightState:
    return FlightState(
        time=0.0,
        position=np.zeros(2),
        velocity=np.array([muzzle_velocity, 0.0]),
        spin=spin,
    )


def step(state: FlightState, acceleration: np.ndarray, dt: float) -> FlightState:
    """
    Advance ``state`` by one Euler step under ``acceleration``.

    Velocity is updated first and the new velocity moves the position.
    """
    velocity = state.velocity + acceleration * dt
    position = state.position + velocity * dt
    return FlightState(state.time + dt, position, velocity, state.spin)


@dataclass(frozen=True)
class TrajectoryPoint:
    """One recorded sample along the flight."""
    distance: float   # m downrange
    drop: float       # cm relative to the line of sight, + above
    velocity: float   # m/s
    energy: float     # J
    time: float       # s


@dataclass(frozen=True)
class SimulationResult:
    """Complete trajectory output for one BB weight."""
    weight: float                       # g
    label: str
    points: Tuple[TrajectoryPoint, ...]
    max_range: float                    # m
    effective_range: float              # m, 0 if never within the target window
    muzzle_energy: float                # J
    muzzle_velocity: float              # m/s
    termination: Termination = Termination.GROUND_IMPACT
    energy_policy: EnergyPolicy = DEFAULT_POLICY

    @property
    def flight_time(self) -> float:
        """Time of the last recorded point (s)."""
        return self.points[-1].time

    @property
    def impact_velocity(self) -> float:
        return self.points[-1].velocity

    @property
    def impact_energy(self) -> float:
        return self.points[-1].energy

    @property
    def max_ordinate(self) -> float:
        """Highest rise above the line of sight (cm)."""
        return max(p.drop for p in self.points)

    def summary(self) -> str:
        """Human-readable summary string."""
        lines = [
            f"╔══════════════════════════════════════════════╗",
            f"║  TRAJECTORY SUMMARY — {self.label:<22s} ║",
            f"╠══════════════════════════════════════════════╣",
            f"║  Energy model : {self.energy_policy.value:<28s} ║",
            f"║  Muzzle vel   : {self.muzzle_velocity:>10.1f} m/s{'':<14s} ║",
            f"║  Muzzle energy: {self.muzzle_energy:>10.2f} J{'':<16s} ║",
            f"╠══════════════════════════════════════════════╣",
            f"║  Max range    : {self.max_range:>10.1f} m{'':<16s} ║",
            f"║  Effective    : {self.effective_range:>10.1f} m{'':<16s} ║",
            f"║  Max rise     : {self.max_ordinate:>10.1f} cm{'':<15s} ║",
            f"║  Flight time  : {self.flight_time:>10.2f} s{'':<16s} ║",
            f"║  Ended by     : {self.termination.value:<28s} ║",
            f"╚══════════════════════════════════════════════╝",
        ]
        return '\n'.join(lines)


def _point(state: FlightState, speed: float, mass: float) -> TrajectoryPoint:
    return TrajectoryPoint(
        distance=float(state.position[0]),
        drop=float(state.position[1]) * 100,
        velocity=speed,
        energy=0.5 * mass * speed ** 2,
        time=state.time,
    )


def simulate(inputs: BallisticInput, weight_override: Optional[float] = None,
             config: SimulationConfig = DEFAULT_CONFIG,
             policy: EnergyPolicy = DEFAULT_POLICY) -> SimulationResult:
    """
    Fly one BB from the muzzle until ground impact or the distance ceiling.

    Parameters
    ----------
    inputs : BallisticInput
        Chronograph reading and environment.
    weight_override : float, optional
        Simulate this weight (g) instead of ``inputs.bullet_weight``,
        with its muzzle energy given by ``policy``.
    config : SimulationConfig
    policy : EnergyPolicy

    Raises
    ------
    InvalidWeight, InvalidVelocity, DegenerateEnvironment
        Before the integration loop starts; never from inside it.
    """
    inputs = normalize_inputs(inputs, config)
    muzzle = muzzle_state(inputs, weight_override, policy, config)
    rho = air_density(inputs.temperature, inputs.humidity, config)
    projectile = Projectile(muzzle.weight, config)

    ground = -inputs.muzzle_height_m
    window = inputs.target_size / 2

    state = launch_state(muzzle.velocity, spin_rate(inputs.hop_up_level, config))
    points = [_point(state, muzzle.velocity, projectile.mass)]
    last_dist = 0.0
    effective_range = 0.0
    termination = None

    while termination is None:
        speed = state.speed
        state = state.spun_down(config.spin_decay)
        acc = compute_forces(state.velocity, state.spin, projectile, rho)
        state = step(state, acc, config.dt)

        x = float(state.position[0])
        on_ground = state.position[1] < ground
        if on_ground:
            termination = Termination.GROUND_IMPACT
        elif x >= config.distance_ceiling:
            termination = Termination.CEILING_REACHED
        elif state.time >= config.max_time:
            termination = Termination.TIME_LIMIT

        if last_dist + config.range_step <= x <= config.distance_ceiling:
            point = _point(state, speed, projectile.mass)
            points.append(point)
            last_dist = x
            if (not on_ground and abs(point.drop) <= window
                    and x > config.effective_range_min):
                effective_range = x

    result = SimulationResult(
        weight=muzzle.weight,
        label=projectile.label,
        points=tuple(points),
        max_range=points[-1].distance,
        effective_range=effective_range,
        muzzle_energy=muzzle.energy,
        muzzle_velocity=muzzle.velocity,
        termination=termination,
        energy_policy=policy,
    )
    logger.debug("%s @ %.1f m/s: %s after %.1f m (effective %.1f m)",
                 result.label, result.muzzle_velocity, termination.value,
                 result.max_range, result.effective_range)
    return result
