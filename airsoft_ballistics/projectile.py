"""
Projectile Definition, Muzzle Energy & Forces
=============================================
Defines the BB, derives its muzzle energy/velocity from the chronograph
reading, and sums all accelerations acting on it:
  - Gravity
  - Aerodynamic drag
  - Magnus lift from hop-up backspin

Two energy models are available when a comparison weight differs from the
weight the chronograph reading was taken with:

  CONSTANT_SYSTEM_ENERGY  every weight leaves the barrel with the same energy
  JOULE_CREEP_BONUS       heavier BBs pick up extra energy from the gas/spring
                          system, proportional to their weight above 0.20 g

Coordinate system:
  x = downrange (horizontal)
  y = height relative to the muzzle (up positive)
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from .config import SimulationConfig, DEFAULT_CONFIG
from .drag_model import cross_section_area, drag_force, magnus_force
from .exceptions import InvalidVelocity
from .validation import BallisticInput, check_weight, check_velocity, kinetic_energy


def constant_system_energy(reference_energy: float, reference_weight: float,
                           weight: float, config: SimulationConfig) -> float:
    """Strict conservation: the same energy for every weight."""
    return reference_energy


def joule_creep_energy(reference_energy: float, reference_weight: float,
                       weight: float, config: SimulationConfig) -> float:
    """
    Reference energy plus an empirical bonus for weight above 0.20 g.

    Only creep beyond what the chronographed weight already had is added,
    so that weight gets back the measured energy and a lighter BB is never
    given less than it.
    """
    def creep(w):
        return config.joule_creep_factor * max(0.0, w - config.reference_weight)

    return reference_energy + max(0.0, creep(weight) - creep(reference_weight))


class EnergyPolicy(Enum):
    JOULE_CREEP_BONUS = 'joule_creep_bonus'
    CONSTANT_SYSTEM_ENERGY = 'constant_system_energy'

    def energy(self, reference_energy: float, reference_weight: float,
               weight: float, config: SimulationConfig = DEFAULT_CONFIG) -> float:
        """Muzzle energy (J) of ``weight`` grams given the chronographed reading."""
        return _ENERGY_MODELS[self](reference_energy, reference_weight, weight, config)


_ENERGY_MODELS = {
    EnergyPolicy.JOULE_CREEP_BONUS: joule_creep_energy,
    EnergyPolicy.CONSTANT_SYSTEM_ENERGY: constant_system_energy,
}

DEFAULT_POLICY = EnergyPolicy.CONSTANT_SYSTEM_ENERGY


@dataclass
class Projectile:
    """
    A 6 mm BB of a given weight.
    """
    weight: float = 0.20                 # g
    config: SimulationConfig = field(default=DEFAULT_CONFIG, repr=False)

    def __post_init__(self):
        check_weight(self.weight)
        self.area = cross_section_area(self.config)  # m²

    @property
    def mass(self) -> float:
        """Mass in kg."""
        return self.weight / 1000

    @property
    def label(self) -> str:
        return f"{self.weight:.2f}g"


@dataclass(frozen=True)
class MuzzleState:
    """Energy and speed of one BB weight as it leaves the barrel."""
    weight: float      # g
    energy: float      # J
    velocity: float    # m/s


def muzzle_state(inputs: BallisticInput, weight_override: Optional[float] = None,
                 policy: EnergyPolicy = DEFAULT_POLICY,
                 config: SimulationConfig = DEFAULT_CONFIG) -> MuzzleState:
    """
    Derive muzzle energy and velocity for the simulated weight.

    The chronograph reading (``inputs.velocity``) is taken with
    ``inputs.bullet_weight``; that pair defines the reference energy.
    Without an override the BB simply leaves at the measured speed.

    Raises
    ------
    InvalidWeight
        The chronographed weight or the override is not positive.
    InvalidVelocity
        The measured speed, or the speed derived for the override, is not
        positive and finite.
    """
    reference_weight = check_weight(inputs.bullet_weight)
    measured = check_velocity(inputs.velocity_ms)

    reference_energy = kinetic_energy(reference_weight, measured)
    if weight_override is None:
        return MuzzleState(reference_weight, reference_energy, measured)

    weight = check_weight(weight_override)
    energy = policy.energy(reference_energy, reference_weight, weight, config)
    if not energy > 0:
        raise InvalidVelocity(f"{policy.name} left {energy!r} J for a {weight:.2f}g BB")
    velocity = math.sqrt(2 * energy / (weight / 1000))
    if not math.isfinite(velocity):
        raise InvalidVelocity(f"Muzzle velocity evaluated to {velocity!r} m/s")
    return MuzzleState(weight, energy, velocity)


def compute_forces(velocity: np.ndarray, spin: float, projectile: Projectile,
                   rho: float) -> np.ndarray:
    """
    Total acceleration acting on the BB.

    Parameters
    ----------
    velocity : [vx, vy] in m/s
    spin : current backspin in rad/s
    projectile : Projectile instance (carries mass, area and config)
    rho : air density in kg/m³

    Returns
    -------
    acceleration : np.ndarray [ax, ay] in m/s²
    """
    cfg = projectile.config

    # ── 1. Gravity ────────────────────────────────────────────────────────
    a_gravity = np.array([0.0, -cfg.gravity])

    # ── 2. Aerodynamic drag ───────────────────────────────────────────────
    a_drag = drag_force(velocity, rho, cfg.drag_coefficient, projectile.area) / projectile.mass

    # ── 3. Magnus lift ────────────────────────────────────────────────────
    a_lift = magnus_force(velocity, rho, projectile.area, cfg.radius,
                          spin, cfg.lift_efficiency) / projectile.mass

    return a_drag + a_lift + a_gravity
