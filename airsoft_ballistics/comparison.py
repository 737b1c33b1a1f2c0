"""
Comparison Weights
==================
Picks a lighter and a heavier standard BB weight to fly next to the
user's choice, so the three curves can be overlaid:

  ≤ 0.20 g         → 0.12 g / 0.25 g  (ultra-light class below the catalog)
  ≥ 0.40 g         → 0.32 g / 0.48 g
  in between       → two catalog slots either side

A pick equal to the chosen weight falls back to the immediate neighbour.
If that still collides (0.48 g has no heavier neighbour), the nearest
distinct catalog weight is used instead.
"""

import logging
import math
from typing import Tuple

from .config import SimulationConfig, DEFAULT_CONFIG
from .integrator import SimulationResult, simulate
from .projectile import EnergyPolicy, DEFAULT_POLICY
from .validation import BallisticInput, check_weight

logger = logging.getLogger(__name__)

STANDARD_WEIGHTS = (0.20, 0.25, 0.28, 0.30, 0.32, 0.36, 0.40, 0.43, 0.45, 0.48)
ULTRA_LIGHT_PAIR = (0.12, 0.25)
HEAVY_PAIR = (0.32, 0.48)
MATCH_TOLERANCE = 0.001


def catalog_index(weight: float) -> int:
    """Index of ``weight`` in STANDARD_WEIGHTS, or 0 if it is not listed."""
    for i, w in enumerate(STANDARD_WEIGHTS):
        if abs(w - weight) < MATCH_TOLERANCE:
            return i
    return 0


def _same(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=0.0, abs_tol=MATCH_TOLERANCE / 2)


def _nearest_distinct(chosen: float, *taken: float) -> float:
    for w in sorted(STANDARD_WEIGHTS, key=lambda w: (abs(w - chosen), w)):
        if not _same(w, chosen) and not any(_same(w, t) for t in taken):
            return w
    raise ValueError(f"No catalog weight distinct from {chosen!r} and {taken!r}")


def select_comparison_weights(chosen: float) -> Tuple[float, float]:
    """
    Return ``(lighter, heavier)`` comparison weights for ``chosen`` grams.
    """
    last = len(STANDARD_WEIGHTS) - 1
    idx = catalog_index(chosen)

    if chosen <= 0.20:
        lighter, heavier = ULTRA_LIGHT_PAIR
    elif chosen >= 0.40:
        lighter, heavier = HEAVY_PAIR
    else:
        lighter = STANDARD_WEIGHTS[max(0, idx - 2)]
        heavier = STANDARD_WEIGHTS[min(last, idx + 2)]

    if lighter == chosen:
        lighter = STANDARD_WEIGHTS[max(0, idx - 1)]
    if heavier == chosen:
        heavier = STANDARD_WEIGHTS[min(last, idx + 1)]

    if _same(lighter, chosen):
        lighter = _nearest_distinct(chosen, heavier)
    if _same(heavier, chosen) or _same(heavier, lighter):
        heavier = _nearest_distinct(chosen, lighter)

    return lighter, heavier


def compute_comparison_set(inputs: BallisticInput,
                           config: SimulationConfig = DEFAULT_CONFIG,
                           policy: EnergyPolicy = DEFAULT_POLICY,
                           ) -> Tuple[SimulationResult, SimulationResult, SimulationResult]:
    """
    Simulate the chosen weight and its two comparison weights.

    Returns
    -------
    (lighter, selected, heavier) : tuple of SimulationResult
    """
    check_weight(inputs.bullet_weight)
    lighter_w, heavier_w = select_comparison_weights(inputs.bullet_weight)
    logger.debug("Comparing %.2fg against %.2fg and %.2fg",
                 inputs.bullet_weight, lighter_w, heavier_w)

    selected = simulate(inputs, config=config, policy=policy)
    lighter = simulate(inputs, lighter_w, config=config, policy=policy)
    heavier = simulate(inputs, heavier_w, config=config, policy=policy)
    return lighter, selected, heavier
