"""
Ballistic Log
=============
Resamples a simulated trajectory at round distances (every 5 m by
default) so drop, remaining velocity and energy can be read off as a
range card.  Recorded points sit at slightly uneven distances (one per
metre of travel, at whatever time step crossed it), so values are
linearly interpolated between them.
"""

from typing import List

import numpy as np
from scipy.interpolate import interp1d

from .integrator import SimulationResult, TrajectoryPoint

LOG_INTERVAL = 5.0  # m


def range_table(result: SimulationResult, interval: float = LOG_INTERVAL) -> List[TrajectoryPoint]:
    """
    Trajectory values at ``0, interval, 2*interval, ...`` up to ``max_range``.

    Raises
    ------
    ValueError
        If ``interval`` is not positive.
    """
    if interval <= 0:
        raise ValueError(f"Interval must be positive, got {interval!r}")

    if len(result.points) < 2:
        return list(result.points)

    table = np.array([
        (p.distance, p.drop, p.velocity, p.energy, p.time) for p in result.points
    ])
    interp = interp1d(table[:, 0], table[:, 1:], axis=0, kind='linear', assume_sorted=True)

    distances = np.minimum(interval * np.arange(int(result.max_range // interval) + 1),
                           result.max_range)
    rows = interp(distances)
    return [
        TrajectoryPoint(distance=float(d), drop=float(row[0]), velocity=float(row[1]),
                        energy=float(row[2]), time=float(row[3]))
        for d, row in zip(distances, rows)
    ]
