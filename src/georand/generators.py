"""One generator per shapely kind, and ``rand(kind, rng, params)``.

Every generator satisfies :class:`ShapeGenerator`: ``generate(rng, params)``
returns an instance of its ``kind``.  The plural kinds also expose
``place(rng, params)`` which keeps the placement bookkeeping
(:class:`~georand.build_random.placement.PlacementResult`).
"""
from __future__ import annotations

from typing import Dict, Optional, Protocol, Type, TypeVar, overload

import shapely

from .build_random.placement import PlacementResult, random_collection
from .build_random.shapes import (
    assemble_line_string,
    assemble_point,
    assemble_polygon,
    resolve_center,
)
from .config.schema import GenerationParameters, validate_parameters
from .random_source import RandomLike, RandomSource, as_random_source

__all__ = [
    "ShapeGenerator",
    "PointGenerator",
    "LineStringGenerator",
    "PolygonGenerator",
    "MultiPointGenerator",
    "MultiLineStringGenerator",
    "MultiPolygonGenerator",
    "GENERATORS",
    "generator_for",
    "rand",
]

S = TypeVar("S", bound=shapely.Geometry)
S_co = TypeVar("S_co", bound=shapely.Geometry, covariant=True)


class ShapeGenerator(Protocol[S_co]):
    kind: type

    def generate(
        self, rng: RandomLike, params: Optional[GenerationParameters] = None
    ) -> S_co: ...


class PointGenerator:
    kind = shapely.Point

    def generate(self, rng, params=None) -> shapely.Point:
        return assemble_point(as_random_source(rng), validate_parameters(params))


class LineStringGenerator:
    kind = shapely.LineString

    def generate(self, rng, params=None) -> shapely.LineString:
        src = as_random_source(rng)
        params = validate_parameters(params)
        return assemble_line_string(src, resolve_center(src, params), params.line_string)


class PolygonGenerator:
    kind = shapely.Polygon

    def generate(self, rng, params=None) -> shapely.Polygon:
        src = as_random_source(rng)
        params = validate_parameters(params)
        return assemble_polygon(src, resolve_center(src, params), params.polygon)


class _CollectionGenerator:
    kind: type

    def build(self, src: RandomSource, center: tuple[float, float], params: GenerationParameters):
        raise NotImplementedError

    def place(self, rng, params=None) -> PlacementResult:
        params = validate_parameters(params)
        return random_collection(rng, params, lambda src, c: self.build(src, c, params))

    def generate(self, rng, params=None):
        return self.place(rng, params).as_multi(self.kind)


class MultiPointGenerator(_CollectionGenerator):
    kind = shapely.MultiPoint

    def build(self, src, center, params) -> shapely.Point:
        return shapely.Point(center)


class MultiLineStringGenerator(_CollectionGenerator):
    kind = shapely.MultiLineString

    def build(self, src, center, params) -> shapely.LineString:
        return assemble_line_string(src, center, params.line_string)


class MultiPolygonGenerator(_CollectionGenerator):
    kind = shapely.MultiPolygon

    def build(self, src, center, params) -> shapely.Polygon:
        return assemble_polygon(src, center, params.polygon)


GENERATORS: Dict[type, ShapeGenerator] = {
    g.kind: g
    for g in (
        PointGenerator(),
        LineStringGenerator(),
        PolygonGenerator(),
        MultiPointGenerator(),
        MultiLineStringGenerator(),
        MultiPolygonGenerator(),
    )
}


def generator_for(kind: Type[S]) -> ShapeGenerator[S]:
    try:
        return GENERATORS[kind]
    except KeyError:
        raise TypeError(f"no generator for {getattr(kind, '__name__', kind)!r}") from None


@overload
def rand(kind: Type[S], rng: RandomLike) -> S: ...
@overload
def rand(kind: Type[S], rng: RandomLike, params: Optional[GenerationParameters]) -> S: ...


def rand(kind, rng, params=None):
    """``rand(shapely.Polygon, rng, params)`` builds a random polygon, etc."""
    return generator_for(kind).generate(rng, params)
