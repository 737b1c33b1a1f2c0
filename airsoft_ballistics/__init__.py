"""
Airsoft Ballistics Core
=======================
Trajectory simulation for 6 mm airsoft BBs from muzzle to ground impact,
incorporating the forces that shape a hop-up shot:
  - Gravity
  - Aerodynamic drag (constant Cd for a polished sphere)
  - Magnus lift from hop-up backspin, with spin decay
  - Air density from temperature and humidity

Given one chronograph reading, the chosen BB weight is flown alongside a
lighter and a heavier comparison weight, with their muzzle energy given by
a selectable energy model (constant system energy or joule creep).
"""

import logging

from .config import SimulationConfig, DEFAULT_CONFIG
from .exceptions import (
    BallisticsError, InvalidWeight, InvalidVelocity, DegenerateEnvironment,
)
from .validation import (
    BallisticInput, DEFAULT_INPUTS, normalize_inputs,
    fps_to_ms, ms_to_fps, kinetic_energy,
)
from .atmosphere import air_density, dry_air_density
from .drag_model import cross_section_area, spin_rate, drag_force, magnus_force
from .projectile import EnergyPolicy, DEFAULT_POLICY, Projectile, muzzle_state, compute_forces
from .integrator import (
    FlightState, TrajectoryPoint, SimulationResult, Termination, step, simulate,
)
from .comparison import STANDARD_WEIGHTS, select_comparison_weights, compute_comparison_set
from .range_table import range_table

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    'SimulationConfig', 'DEFAULT_CONFIG',
    'BallisticsError', 'InvalidWeight', 'InvalidVelocity', 'DegenerateEnvironment',
    'BallisticInput', 'DEFAULT_INPUTS', 'normalize_inputs',
    'fps_to_ms', 'ms_to_fps', 'kinetic_energy',
    'air_density', 'dry_air_density',
    'cross_section_area', 'spin_rate', 'drag_force', 'magnus_force',
    'EnergyPolicy', 'DEFAULT_POLICY', 'Projectile', 'muzzle_state', 'compute_forces',
    'FlightState', 'TrajectoryPoint', 'SimulationResult', 'Termination',
    'step', 'simulate',
    'STANDARD_WEIGHTS', 'select_comparison_weights', 'compute_comparison_set',
    'range_table',
]
