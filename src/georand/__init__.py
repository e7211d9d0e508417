"""georand: random, simple 2-D shapes for test fixtures.

External users can simply ``from georand import polygon``::

    import numpy as np
    from georand import multi_polygon

    shapes = multi_polygon(np.random.default_rng(0))
"""

from .api import (
    line_string,
    multi_line_string,
    multi_point,
    multi_polygon,
    place_line_strings,
    place_points,
    place_polygons,
    point,
    polygon,
)
from .build_random.placement import PlacementResult
from .config import DEFAULT_PARAMETERS, GenerationParameters, load_parameters
from .errors import DegenerateRing, GeorandError, InvalidParameter
from .generators import rand
from .primitives.rings import random_ring
from .random_source import RandomSource, as_random_source

__all__ = [
    "DEFAULT_PARAMETERS",
    "DegenerateRing",
    "GenerationParameters",
    "GeorandError",
    "InvalidParameter",
    "PlacementResult",
    "RandomSource",
    "as_random_source",
    "line_string",
    "load_parameters",
    "multi_line_string",
    "multi_point",
    "multi_polygon",
    "place_line_strings",
    "place_points",
    "place_polygons",
    "point",
    "polygon",
    "rand",
    "random_ring",
]
