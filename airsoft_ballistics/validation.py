"""
Input Record & Validation
=========================
Defines the caller-owned ``BallisticInput`` and the single place where it is
checked before any physics runs:

  - weight and velocity are *rejected* when they cannot be simulated
  - humidity, hop-up, shooter height and target size are *clamped*

Clamping is deliberate and logged, so a slider that overshoots its range
still produces a trajectory while a zero-weight BB never does.
"""

import logging
import math
from dataclasses import dataclass, replace

from .config import SimulationConfig, DEFAULT_CONFIG
from .exceptions import InvalidWeight, InvalidVelocity, DegenerateEnvironment

logger = logging.getLogger(__name__)

FPS_TO_MS = 0.3048


def fps_to_ms(speed_fps: float) -> float:
    return speed_fps * FPS_TO_MS


def ms_to_fps(speed_ms: float) -> float:
    return speed_ms / FPS_TO_MS


def kinetic_energy(weight_g: float, speed_ms: float) -> float:
    """Kinetic energy (J) of a BB of ``weight_g`` grams moving at ``speed_ms``."""
    return 0.5 * (weight_g / 1000) * speed_ms ** 2


@dataclass(frozen=True)
class BallisticInput:
    """
    Muzzle and environment parameters as entered by the user.
    """
    velocity: float = 120.0          # m/s if is_metric else ft/s
    is_metric: bool = True
    bullet_weight: float = 0.20      # g
    hop_up_level: float = 70.0       # 60 (light hop) .. 80 (deep hop)
    shooter_height: float = 170.0    # cm, muzzle height above ground
    temperature: float = 25.0        # °C
    humidity: float = 60.0           # %
    target_size: float = 30.0        # cm, target diameter

    @property
    def velocity_ms(self) -> float:
        """Velocity in m/s regardless of the unit flag."""
        return self.velocity if self.is_metric else fps_to_ms(self.velocity)

    @property
    def muzzle_height_m(self) -> float:
        return self.shooter_height / 100


DEFAULT_INPUTS = BallisticInput()


def check_weight(weight: float) -> float:
    """Return ``weight`` unchanged, or raise ``InvalidWeight``."""
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeight(f"BB weight must be a positive number of grams, got {weight!r}")
    return weight


def check_velocity(speed_ms: float) -> float:
    """Return ``speed_ms`` unchanged, or raise ``InvalidVelocity``."""
    if not math.isfinite(speed_ms) or speed_ms <= 0:
        raise InvalidVelocity(f"Muzzle velocity must be positive, got {speed_ms!r} m/s")
    return speed_ms


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _clamped(name: str, value: float, lo: float, hi: float) -> float:
    result = clamp(value, lo, hi)
    if result != value:
        logger.warning("%s=%r outside [%s, %s], clamped to %r", name, value, lo, hi, result)
    return result


def clamp_hop_up(level: float, config: SimulationConfig = DEFAULT_CONFIG) -> float:
    return _clamped('hop_up_level', level, config.hop_min, config.hop_max)


def clamp_humidity(humidity: float) -> float:
    return _clamped('humidity', humidity, 0.0, 100.0)


def normalize_inputs(inputs: BallisticInput,
                     config: SimulationConfig = DEFAULT_CONFIG) -> BallisticInput:
    """
    Validate ``inputs`` and return a copy with soft parameters clamped.

    Raises
    ------
    InvalidWeight
        ``bullet_weight`` is not a positive finite number.
    InvalidVelocity
        ``velocity`` resolves to a non-positive or non-finite m/s value.
    DegenerateEnvironment
        A clampable parameter is NaN or infinite.
    """
    check_weight(inputs.bullet_weight)
    check_velocity(inputs.velocity_ms)
    for name in ('hop_up_level', 'humidity', 'shooter_height', 'target_size'):
        value = getattr(inputs, name)
        if not math.isfinite(value):
            raise DegenerateEnvironment(f"{name} must be finite, got {value!r}")

    return replace(
        inputs,
        hop_up_level=clamp_hop_up(inputs.hop_up_level, config),
        humidity=clamp_humidity(inputs.humidity),
        shooter_height=_clamped('shooter_height', inputs.shooter_height, 0.0, math.inf),
        target_size=_clamped('target_size', inputs.target_size, 0.0, math.inf),
    )
