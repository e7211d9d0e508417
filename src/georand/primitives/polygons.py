"""Ring geometry checks: orientation, self-intersection and clearance."""
from __future__ import annotations

import math

import numpy as np

__all__ = [
    "open_ring",
    "ring_vertex_count",
    "ring_signed_area",
    "ring_is_ccw",
    "segments_self_intersect",
    "ring_self_intersects",
    "point_segment_distance",
    "ring_clearance",
]


def open_ring(ring: np.ndarray) -> np.ndarray:
    """Drop the closing duplicate vertex if present."""
    pts = np.asarray(ring, float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("ring must be of shape (N,2)")
    if pts.shape[0] > 1 and np.array_equal(pts[0], pts[-1]):
        return pts[:-1]
    return pts


def ring_vertex_count(ring: np.ndarray) -> int:
    """Number of distinct vertices, not counting the closing duplicate."""
    return int(open_ring(ring).shape[0])


def ring_signed_area(ring: np.ndarray) -> float:
    """Shoelace area; positive for counter-clockwise rings."""
    pts = open_ring(ring)
    x, y = pts[:, 0], pts[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


def ring_is_ccw(ring: np.ndarray) -> bool:
    return ring_signed_area(ring) > 0.0


def _orient(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
    return float((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))


def _on_segment(a: np.ndarray, b: np.ndarray, c: np.ndarray, eps: float) -> bool:
    return (
        min(a[0], b[0]) - eps <= c[0] <= max(a[0], b[0]) + eps
        and min(a[1], b[1]) - eps <= c[1] <= max(a[1], b[1]) + eps
    )


def _segments_intersect(a, b, c, d, eps: float) -> bool:
    o1 = _orient(a, b, c)
    o2 = _orient(a, b, d)
    o3 = _orient(c, d, a)
    o4 = _orient(c, d, b)

    if abs(o1) < eps and _on_segment(a, b, c, eps):
        return True
    if abs(o2) < eps and _on_segment(a, b, d, eps):
        return True
    if abs(o3) < eps and _on_segment(c, d, a, eps):
        return True
    if abs(o4) < eps and _on_segment(c, d, b, eps):
        return True
    return (o1 > 0) != (o2 > 0) and (o3 > 0) != (o4 > 0)


def segments_self_intersect(pts: np.ndarray, closed: bool = True, eps: float = 1e-9) -> bool:
    """Return ``True`` if any two non-adjacent edges of ``pts`` intersect.

    ``pts`` holds distinct vertices.  With ``closed`` the edge from the last
    vertex back to the first is part of the chain.
    """
    pts = np.asarray(pts, float)
    n = pts.shape[0]
    n_edges = n if closed else n - 1
    if n_edges < 3:
        return False
    segs = [(pts[i], pts[(i + 1) % n]) for i in range(n_edges)]
    for i in range(n_edges):
        for j in range(i + 2, n_edges):
            if closed and i == 0 and j == n_edges - 1:
                continue
            if _segments_intersect(segs[i][0], segs[i][1], segs[j][0], segs[j][1], eps):
                return True
    return False


def ring_self_intersects(ring: np.ndarray, eps: float = 1e-9) -> bool:
    """Self-intersection test for a ring; open or closed input is accepted."""
    pts = open_ring(ring)
    if pts.shape[0] < 4:
        return False
    return segments_self_intersect(pts, closed=True, eps=eps)


def point_segment_distance(p, a, b) -> float:
    ax, ay = float(a[0]), float(a[1])
    vx, vy = float(b[0]) - ax, float(b[1]) - ay
    px, py = float(p[0]) - ax, float(p[1]) - ay
    L2 = vx * vx + vy * vy
    if L2 <= 0.0:
        return math.hypot(px, py)
    t = max(0.0, min(1.0, (px * vx + py * vy) / L2))
    return math.hypot(px - t * vx, py - t * vy)


def ring_clearance(ring: np.ndarray, center: tuple[float, float]) -> float:
    """Smallest distance from ``center`` to any edge of ``ring``."""
    pts = open_ring(ring)
    n = pts.shape[0]
    return min(point_segment_distance(center, pts[i], pts[(i + 1) % n]) for i in range(n))
