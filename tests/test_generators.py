import numpy as np
import pytest
import shapely

import georand
from georand import api
from georand.config.schema import GenerationParameters
from georand.generators import GENERATORS, generator_for, rand

KINDS = [
    shapely.Point,
    shapely.LineString,
    shapely.Polygon,
    shapely.MultiPoint,
    shapely.MultiLineString,
    shapely.MultiPolygon,
]


@pytest.mark.parametrize("kind", KINDS, ids=lambda k: k.__name__)
def test_rand_returns_requested_kind(kind, rng):
    shape = rand(kind, rng)
    assert isinstance(shape, kind)
    if kind is not shapely.MultiPolygon:
        assert shape.is_valid
    assert generator_for(kind).kind is kind


def test_every_kind_registered():
    assert set(GENERATORS) == set(KINDS)


def test_unknown_kind():
    with pytest.raises(TypeError):
        rand(shapely.GeometryCollection, np.random.default_rng(0))


def test_api_matches_rand():
    params = GenerationParameters(collection={"shape_count_range": (2, 4)})
    a = api.multi_polygon(np.random.default_rng(7), params)
    b = rand(shapely.MultiPolygon, np.random.default_rng(7), params)
    assert shapely.to_wkb(a) == shapely.to_wkb(b)


def test_multi_point_inside_center_range():
    params = {"center_range": {"min_x": -1, "min_y": -2, "max_x": 1, "max_y": 2},
              "collection": {"shape_count_range": (5, 5), "max_placement_attempts": 1}}
    mp = api.multi_point(np.random.default_rng(3), params)
    assert len(mp.geoms) == 5
    for p in mp.geoms:
        assert -1 <= p.x < 1 and -2 <= p.y < 2


def test_multi_polygon_members_are_simple():
    params = GenerationParameters(
        polygon={"vertex_count_range": (3, 10), "irregularity": 1.0, "spikiness": 1.0},
        collection={"shape_count_range": (5, 8)},
    )
    for seed in range(5):
        mp = api.multi_polygon(np.random.default_rng(seed), params)
        assert 5 <= len(mp.geoms) <= 8
        for poly in mp.geoms:
            assert poly.is_valid and poly.exterior.is_ccw


def test_multi_line_string_members_are_simple():
    mls = api.multi_line_string(np.random.default_rng(4), {"collection": {"shape_count_range": (3, 3)}})
    assert len(mls.geoms) == 3
    assert all(ls.is_simple for ls in mls.geoms)


def test_place_polygons_reports_bookkeeping():
    res = api.place_polygons(np.random.default_rng(0), {"collection": {"shape_count_range": (4, 4)}})
    assert isinstance(res, georand.PlacementResult)
    assert len(res) == len(res.attempts) == 4
    assert all(isinstance(p, shapely.Polygon) for p in res)


def test_polygon_at_fixed_center():
    params = GenerationParameters(center=(500.0, -500.0), polygon={"radius_range": (1.0, 2.0), "spikiness": 0.0})
    poly = georand.polygon(np.random.default_rng(0), params)
    assert poly.contains(shapely.Point(500.0, -500.0))
    minx, miny, maxx, maxy = poly.bounds
    assert 498.0 <= minx and maxx <= 502.0 and -502.0 <= miny and maxy <= -498.0


def test_invalid_mapping_rejected_at_entry():
    with pytest.raises(georand.InvalidParameter):
        api.polygon(np.random.default_rng(0), {"polygon": {"spikiness": 9}})
