"""
Aerodynamic Force Model
=======================
Forces on a spinning 6 mm BB in the vertical flight plane.

  - Drag   : F_d = ½ ρ |v|² A Cd,             opposite to v
  - Magnus : F_l = ½ ρ |v|² A (r ω η / |v|),  v rotated +90°

ω is the backspin rate imparted by the hop-up rubber and η the lift
efficiency.  A constant Cd is used: airsoft BBs stay well below the
transonic regime, so there is no Mach table here.

Hop-up level maps to spin through a power curve, so the last few clicks
of hop add much more lift than the first few.
"""

import math

import numpy as np

from .config import SimulationConfig, DEFAULT_CONFIG
from .exceptions import DegenerateEnvironment

_ZERO = np.zeros(2)


def cross_section_area(config: SimulationConfig = DEFAULT_CONFIG) -> float:
    """Frontal area of the BB (m²)."""
    return math.pi * config.radius ** 2


def hop_ratio(hop_up_level: float, config: SimulationConfig = DEFAULT_CONFIG) -> float:
    """Hop-up level clamped to [hop_min, hop_max] and normalised to 0..1."""
    level = max(config.hop_min, min(config.hop_max, hop_up_level))
    return (level - config.hop_min) / (config.hop_max - config.hop_min)


def spin_rate(hop_up_level: float, config: SimulationConfig = DEFAULT_CONFIG) -> float:
    """
    Initial backspin (rad/s) for a hop-up setting.

    ω = ω_min + ratio^k × (ω_max − ω_min)

    Raises
    ------
    DegenerateEnvironment
        If the configured range yields a non-finite or negative spin.
    """
    ratio = hop_ratio(hop_up_level, config)
    spin = config.min_spin_rate + ratio ** config.hop_exponent * (
        config.max_spin_rate - config.min_spin_rate
    )
    if not math.isfinite(spin) or spin < 0:
        raise DegenerateEnvironment(f"Spin rate evaluated to {spin!r} rad/s")
    return spin


def drag_force(velocity: np.ndarray, rho: float, cd: float,
               area: float) -> np.ndarray:
    """
    Aerodynamic drag force vector (N).

    Parameters
    ----------
    velocity : np.ndarray
        [vx, vy] in m/s
    rho : float
        Air density (kg/m³)
    cd : float
        Drag coefficient
    area : float
        Cross-sectional area (m²)
    """
    v_mag = math.hypot(velocity[0], velocity[1])
    if v_mag == 0:
        return _ZERO.copy()

    f_mag = 0.5 * rho * v_mag ** 2 * area * cd
    return -f_mag * velocity / v_mag


def magnus_force(velocity: np.ndarray, rho: float, area: float, radius: float,
                 spin: float, lift_efficiency: float) -> np.ndarray:
    """
    Magnus lift force vector (N) for backspin ``spin`` (rad/s).

    Perpendicular to velocity; pure upward lift in level forward flight.
    """
    v_mag = math.hypot(velocity[0], velocity[1])
    if v_mag == 0:
        return _ZERO.copy()

    cl = radius * spin * lift_efficiency / v_mag
    f_mag = 0.5 * rho * v_mag ** 2 * area * cl
    normal = np.array([-velocity[1], velocity[0]]) / v_mag
    return f_mag * normal
