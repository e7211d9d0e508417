"""Random simple rings built by angle accumulation.

Vertices are placed around a center at strictly increasing angles that span
exactly one full turn, with every angular gap kept below a half turn.  The
center is then strictly inside the ring and each edge lies in its own wedge,
so no two edges can cross: the ring is simple and counter-clockwise by
construction and no intersection test is ever run.

Draw order for one ring is fixed: vertex count (int), mean radius, ``n`` angle
steps, ``n`` radial offsets.
"""
from __future__ import annotations

import math

import numpy as np

from ..config.schema import RingParams
from ..errors import DegenerateRing
from ..random_source import RandomLike, RandomSource, as_random_source
from ..utils.logging import logger

__all__ = [
    "TAU",
    "max_irregularity",
    "angle_steps",
    "vertex_angles",
    "vertex_radii",
    "build_ring",
    "random_ring",
]

TAU = 2.0 * math.pi
# floors, as fractions of the even step / the mean radius
MIN_STEP_FRACTION = 1e-3
MIN_RADIUS_FRACTION = 1e-3
# keeps the widest possible normalized step strictly below a half turn
STEP_CAP_MARGIN = 0.99


def max_irregularity(vertex_count: int) -> float:
    """Largest irregularity for which every normalized step stays below pi.

    The widest step after normalization comes from one draw at the top of the
    range with all others at the bottom: ``(1+g) < (n-1)(1-g)``, i.e.
    ``g < (n-2)/n``.
    """
    n = int(vertex_count)
    return STEP_CAP_MARGIN * (n - 2) / n


def angle_steps(rng: RandomSource, vertex_count: int, irregularity: float) -> np.ndarray:
    """Draw ``n`` positive angle steps summing to exactly one turn."""
    n = int(vertex_count)
    even = TAU / n
    g = min(float(irregularity), max_irregularity(n))
    lo, hi = even * (1.0 - g), even * (1.0 + g)
    floor = even * MIN_STEP_FRACTION

    steps = np.array([max(rng.uniform_real(lo, hi), floor) for _ in range(n)], dtype=float)
    steps *= TAU / float(steps.sum())
    # absorb rounding drift in the last step
    steps[-1] = TAU - float(steps[:-1].sum())
    return steps


def vertex_angles(steps: np.ndarray) -> np.ndarray:
    """Cumulative angle of each vertex; vertex 0 sits at angle 0."""
    angles = np.zeros(steps.shape[0], dtype=float)
    angles[1:] = np.cumsum(steps[:-1])
    return angles


def vertex_radii(
    rng: RandomSource, vertex_count: int, mean_radius: float, spikiness: float
) -> np.ndarray:
    s = float(spikiness)
    offsets = np.array([rng.uniform_real(-s, s) for _ in range(int(vertex_count))], dtype=float)
    return np.maximum(mean_radius * (1.0 + offsets), mean_radius * MIN_RADIUS_FRACTION)


def build_ring(
    rng: RandomLike,
    center: tuple[float, float],
    vertex_count: int,
    radius_range: tuple[float, float],
    irregularity: float,
    spikiness: float,
) -> np.ndarray:
    """Build a closed ring with a resolved vertex count.

    Returns a read-only ``(n+1, 2)`` array whose last row is the first row.
    """
    n = int(vertex_count)
    if n < 3:
        raise DegenerateRing(n)
    src = as_random_source(rng)

    mean_radius = src.uniform_real(radius_range[0], radius_range[1])
    steps = angle_steps(src, n, irregularity)
    radii = vertex_radii(src, n, mean_radius, spikiness)
    angles = vertex_angles(steps)

    cx, cy = float(center[0]), float(center[1])
    ring = np.empty((n + 1, 2), dtype=float)
    ring[:n, 0] = cx + radii * np.cos(angles)
    ring[:n, 1] = cy + radii * np.sin(angles)
    ring[n] = ring[0]
    ring.setflags(write=False)

    logger.debug(
        "ring n=%d center=(%.6g, %.6g) mean_radius=%.6g max_step=%.4f",
        n, cx, cy, mean_radius, float(steps.max()),
    )
    return ring


def random_ring(rng: RandomLike, center: tuple[float, float], params: RingParams) -> np.ndarray:
    """Simple, closed, counter-clockwise ring around ``center``.

    The vertex count is drawn from ``params.vertex_count_range``; see
    :func:`build_ring` for the rest.
    """
    src = as_random_source(rng)
    n = src.uniform_int(params.vertex_count_range[0], params.vertex_count_range[1])
    return build_ring(
        src,
        center,
        n,
        params.radius_range,
        params.irregularity,
        params.spikiness,
    )
