from .points import random_coordinate, random_point
from .polygons import ring_is_ccw, ring_self_intersects, ring_vertex_count
from .rings import build_ring, random_ring

__all__ = [
    "random_coordinate",
    "random_point",
    "build_ring",
    "random_ring",
    "ring_is_ccw",
    "ring_self_intersects",
    "ring_vertex_count",
]
