"""Bounding-box helpers for placement routines."""
from __future__ import annotations

from typing import Sequence

import numpy as np

BBox = tuple[float, float, float, float]


def bbox_of(coords: np.ndarray) -> BBox:
    """Return ``(min_x, min_y, max_x, max_y)`` of an ``(N,2)`` coordinate array."""
    pts = np.asarray(coords, float)
    if pts.ndim != 2 or pts.shape[1] != 2 or pts.shape[0] == 0:
        raise ValueError("coords must be a non-empty array of shape (N,2)")
    x0, y0 = pts.min(axis=0)
    x1, y1 = pts.max(axis=0)
    return float(x0), float(y0), float(x1), float(y1)


def bboxes_overlap(a: BBox, b: BBox) -> bool:
    """Closed-interval overlap test; boxes that only touch count as overlapping."""
    return a[0] <= b[2] and b[0] <= a[2] and a[1] <= b[3] and b[1] <= a[3]


def overlaps_any(box: BBox, others: Sequence[BBox]) -> bool:
    return any(bboxes_overlap(box, o) for o in others)

