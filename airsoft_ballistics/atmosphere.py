"""
Field Atmosphere Model
======================
Air density at the shooting site from the ideal gas law:

    ρ = P / (R_specific × T)

with pressure held at sea-level standard and a linear humidity
correction (humid air is slightly lighter than dry air):

    ρ_humid = ρ_dry × (1 − RH / 4000)

This is a field approximation for short-range airsoft trajectories,
not a psychrometric model.  It has no altitude or barometric input.
"""

import math

from .config import SimulationConfig, DEFAULT_CONFIG, KELVIN_OFFSET
from .exceptions import DegenerateEnvironment


def celsius_to_kelvin(temperature_c: float) -> float:
    return temperature_c + KELVIN_OFFSET


def dry_air_density(temperature_c: float,
                    config: SimulationConfig = DEFAULT_CONFIG) -> float:
    """Dry air density (kg/m³) at fixed pressure."""
    return config.pressure / (config.gas_constant * celsius_to_kelvin(temperature_c))


def air_density(temperature_c: float, humidity: float,
                config: SimulationConfig = DEFAULT_CONFIG) -> float:
    """
    Air density (kg/m³) corrected for relative humidity.

    Parameters
    ----------
    temperature_c : float
        Air temperature in °C.
    humidity : float
        Relative humidity in percent.  Callers are expected to clamp it
        to [0, 100] first.

    Raises
    ------
    DegenerateEnvironment
        If the temperature is at or below absolute zero or the result is
        not a positive finite number.
    """
    if not celsius_to_kelvin(temperature_c) > 0:
        raise DegenerateEnvironment(
            f"Temperature {temperature_c!r} °C is at or below absolute zero"
        )
    rho = dry_air_density(temperature_c, config) * (1 - humidity / config.humidity_divisor)
    if not math.isfinite(rho) or rho <= 0:
        raise DegenerateEnvironment(f"Air density evaluated to {rho!r} kg/m³")
    return rho


if __name__ == "__main__":
    print("Air density vs temperature (60 % RH)")
    print("=" * 36)
    print(f"{'T (°C)':>8} {'ρ dry':>12} {'ρ humid':>12}")
    for t in [-10, 0, 10, 20, 25, 30, 40]:
        print(f"{t:>8} {dry_air_density(t):>12.5f} {air_density(t, 60):>12.5f}")
