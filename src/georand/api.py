"""Public generation entry points, one per shape kind.

Every function takes a randomness source (``numpy.random.Generator``,
``random.Random`` or any :class:`~georand.random_source.RandomSource`) and
optional :class:`~georand.config.schema.GenerationParameters`.  The same
source state and parameters always give the same coordinates.

Collections avoid bounding-box overlap between members on a best-effort
basis only; use :func:`place_polygons` and friends to see which members, if
any, had to be accepted overlapping.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import shapely

from .build_random.placement import PlacementResult
from .config.schema import GenerationParameters
from .generators import (
    LineStringGenerator,
    MultiLineStringGenerator,
    MultiPointGenerator,
    MultiPolygonGenerator,
    PointGenerator,
    PolygonGenerator,
)
from .random_source import RandomLike

__all__ = [
    "point",
    "line_string",
    "polygon",
    "multi_point",
    "multi_line_string",
    "multi_polygon",
    "place_points",
    "place_line_strings",
    "place_polygons",
]

Params = Optional[Union[GenerationParameters, Mapping[str, Any]]]

_POINT = PointGenerator()
_LINE_STRING = LineStringGenerator()
_POLYGON = PolygonGenerator()
_MULTI_POINT = MultiPointGenerator()
_MULTI_LINE_STRING = MultiLineStringGenerator()
_MULTI_POLYGON = MultiPolygonGenerator()


def point(rng: RandomLike, params: Params = None) -> shapely.Point:
    """A point drawn uniformly from ``center_range``."""
    return _POINT.generate(rng, params)


def line_string(rng: RandomLike, params: Params = None) -> shapely.LineString:
    """An open, non-self-intersecting path along a random ring."""
    return _LINE_STRING.generate(rng, params)


def polygon(rng: RandomLike, params: Params = None) -> shapely.Polygon:
    """A simple polygon with a counter-clockwise exterior ring."""
    return _POLYGON.generate(rng, params)


def multi_point(rng: RandomLike, params: Params = None) -> shapely.MultiPoint:
    return _MULTI_POINT.generate(rng, params)


def multi_line_string(rng: RandomLike, params: Params = None) -> shapely.MultiLineString:
    return _MULTI_LINE_STRING.generate(rng, params)


def multi_polygon(rng: RandomLike, params: Params = None) -> shapely.MultiPolygon:
    return _MULTI_POLYGON.generate(rng, params)


def place_points(rng: RandomLike, params: Params = None) -> PlacementResult:
    return _MULTI_POINT.place(rng, params)


def place_line_strings(rng: RandomLike, params: Params = None) -> PlacementResult:
    return _MULTI_LINE_STRING.place(rng, params)


def place_polygons(rng: RandomLike, params: Params = None) -> PlacementResult:
    return _MULTI_POLYGON.place(rng, params)
