"""Wrap generated rings into shapely shapes."""
from __future__ import annotations

import math

import numpy as np
import shapely

from ..config.schema import GenerationParameters, LineStringParams, PolygonParams
from ..primitives.points import random_coordinate, random_point
from ..primitives.polygons import ring_clearance
from ..primitives.rings import TAU, build_ring, random_ring
from ..random_source import RandomLike, RandomSource, as_random_source
from ..utils.logging import logger

__all__ = [
    "resolve_center",
    "hole_slots",
    "assemble_point",
    "assemble_line_string",
    "assemble_polygon",
]


def resolve_center(rng: RandomLike, params: GenerationParameters) -> tuple[float, float]:
    """``params.center`` if set (no draws), else a draw from ``center_range``."""
    if params.center is not None:
        return float(params.center[0]), float(params.center[1])
    box = params.center_range
    return random_coordinate(rng, box.x_range, box.y_range)


def assemble_point(rng: RandomLike, params: GenerationParameters) -> shapely.Point:
    box = params.center_range
    return random_point(rng, box.x_range, box.y_range)


def assemble_line_string(
    rng: RandomLike, center: tuple[float, float], params: LineStringParams
) -> shapely.LineString:
    """Open path along a generated ring.

    The closing duplicate is dropped; ``path_vertex_count`` further truncates
    the path to its first vertices.
    """
    ring = random_ring(rng, center, params)
    coords = ring[:-1]
    if params.path_vertex_count is not None:
        coords = coords[: params.path_vertex_count]
    return shapely.LineString(coords)


def hole_slots(
    src: RandomSource, center: tuple[float, float], clearance: float, count: int
) -> tuple[list[tuple[float, float]], float]:
    """Centers and maximum radius for ``count`` disjoint holes.

    Every slot is a disk inside the disk of radius ``clearance`` around
    ``center``.  One hole shares the exterior's center; several holes sit on a
    circle of radius ``clearance/2`` after a single rotation draw.
    """
    if count == 1:
        return [center], clearance
    offset = src.uniform_real(0.0, TAU)
    rho = 0.5 * clearance
    slot = rho * min(1.0, math.sin(math.pi / count))
    centers = [
        (
            center[0] + rho * math.cos(offset + TAU * j / count),
            center[1] + rho * math.sin(offset + TAU * j / count),
        )
        for j in range(count)
    ]
    return centers, slot


def _random_holes(
    src: RandomSource,
    center: tuple[float, float],
    exterior: np.ndarray,
    params: PolygonParams,
) -> list[np.ndarray]:
    count = src.uniform_int(params.hole_count_range[0], params.hole_count_range[1])
    if count == 0:
        return []

    centers, slot = hole_slots(src, center, ring_clearance(exterior, center), count)
    # vertices reach at most mean * (1 + spikiness)
    grow = 1.0 + params.spikiness
    radius_range = (
        slot * params.hole_scale_range[0] / grow,
        slot * params.hole_scale_range[1] / grow,
    )

    shell = shapely.Polygon(exterior)
    holes = []
    for c in centers:
        n = src.uniform_int(params.vertex_count_range[0], params.vertex_count_range[1])
        ring = build_ring(src, c, n, radius_range, params.irregularity, params.spikiness)
        if not shell.contains(shapely.Polygon(ring)):
            logger.warning("dropping hole at (%.6g, %.6g): not inside the exterior ring", c[0], c[1])
            continue
        holes.append(ring[::-1])
    return holes


def assemble_polygon(
    rng: RandomLike, center: tuple[float, float], params: PolygonParams
) -> shapely.Polygon:
    """Polygon with a counter-clockwise exterior and clockwise holes."""
    src = as_random_source(rng)
    exterior = random_ring(src, center, params)
    holes = _random_holes(src, center, exterior, params)
    return shapely.Polygon(exterior, holes)
