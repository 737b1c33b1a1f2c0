"""
Simulation Configuration
========================
Every tunable constant of the trajectory engine lives here, collected in one
frozen ``SimulationConfig`` so tests can override a single value with
``dataclasses.replace`` without touching the integration code.

The drag coefficient and the lift efficiency were tuned together against
chronograph/drop observations of 6 mm BBs.  Change them as a pair.
"""

from dataclasses import dataclass


# ── Physical constants ────────────────────────────────────────────────────
GRAVITY              = 9.81        # m/s²
SEA_LEVEL_PRESSURE   = 101325.0    # Pa  (held fixed, no barometer input)
R_SPECIFIC           = 287.05      # J/(kg·K)  specific gas constant for dry air
HUMIDITY_DIVISOR     = 4000.0      # density × (1 - RH/4000), rough humid-air correction
KELVIN_OFFSET        = 273.15

# ── BB geometry & aerodynamics ────────────────────────────────────────────
BB_DIAMETER          = 0.00595     # m  (5.95 mm standard airsoft BB)
DRAG_COEFFICIENT     = 0.45        # polished sphere, tuned with LIFT_EFFICIENCY
LIFT_EFFICIENCY      = 1.5         # Magnus force scalar, tuned with DRAG_COEFFICIENT
SPIN_DECAY           = 0.9993      # spin multiplier per time step

# ── Hop-up → backspin mapping ─────────────────────────────────────────────
HOP_MIN              = 60.0
HOP_MAX              = 80.0
HOP_EXPONENT         = 1.3         # >1: deep hop adds spin disproportionately
MIN_SPIN_RATE        = 50.0        # rad/s at HOP_MIN
MAX_SPIN_RATE        = 600.0       # rad/s at HOP_MAX

# ── Energy model ──────────────────────────────────────────────────────────
REFERENCE_WEIGHT     = 0.20        # g, weight with zero joule creep
JOULE_CREEP_FACTOR   = 0.5         # J of extra energy per gram above REFERENCE_WEIGHT

# ── Integration & sampling ────────────────────────────────────────────────
TIME_STEP            = 0.001       # s
RANGE_STEP           = 1.0         # m between recorded points
DISTANCE_CEILING     = 200.0       # m, stop even if still airborne
MAX_FLIGHT_TIME      = 60.0        # s, guard for overhopped BBs drifting backwards
EFFECTIVE_RANGE_MIN  = 5.0         # m, closer points never count as effective range


@dataclass(frozen=True)
class SimulationConfig:
    """
    Named bundle of the engine constants.

    Defaults reproduce the calibrated airsoft model.  Instances are
    immutable; derive variants with ``dataclasses.replace(cfg, dt=...)``.
    """
    gravity: float = GRAVITY
    pressure: float = SEA_LEVEL_PRESSURE
    gas_constant: float = R_SPECIFIC
    humidity_divisor: float = HUMIDITY_DIVISOR

    diameter: float = BB_DIAMETER
    drag_coefficient: float = DRAG_COEFFICIENT
    lift_efficiency: float = LIFT_EFFICIENCY
    spin_decay: float = SPIN_DECAY

    hop_min: float = HOP_MIN
    hop_max: float = HOP_MAX
    hop_exponent: float = HOP_EXPONENT
    min_spin_rate: float = MIN_SPIN_RATE
    max_spin_rate: float = MAX_SPIN_RATE

    reference_weight: float = REFERENCE_WEIGHT
    joule_creep_factor: float = JOULE_CREEP_FACTOR

    dt: float = TIME_STEP
    range_step: float = RANGE_STEP
    distance_ceiling: float = DISTANCE_CEILING
    max_time: float = MAX_FLIGHT_TIME
    effective_range_min: float = EFFECTIVE_RANGE_MIN

    @property
    def radius(self) -> float:
        return self.diameter / 2


DEFAULT_CONFIG = SimulationConfig()
