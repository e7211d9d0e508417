import numpy as np
import pytest
import shapely

from georand.build_random.shapes import (
    assemble_line_string,
    assemble_polygon,
    hole_slots,
    resolve_center,
)
from georand.config.schema import GenerationParameters, LineStringParams, PolygonParams
from georand.primitives.polygons import ring_is_ccw
from georand.random_source import as_random_source

from _util_geom import assert_radius_bounds


@pytest.mark.parametrize("seed", range(15))
def test_polygon_with_holes_is_valid(seed):
    params = PolygonParams(
        vertex_count_range=(5, 12),
        radius_range=(20.0, 60.0),
        irregularity=0.8,
        spikiness=0.6,
        hole_count_range=(1, 4),
    )
    poly = assemble_polygon(np.random.default_rng(seed), (50.0, 50.0), params)
    assert poly.is_valid
    assert 1 <= len(poly.interiors) <= 4
    assert ring_is_ccw(np.asarray(poly.exterior.coords))
    for hole in poly.interiors:
        assert not hole.is_ccw
        assert shapely.Polygon(poly.exterior).contains(shapely.Polygon(hole))


def test_polygon_without_holes(rng):
    poly = assemble_polygon(rng, (0.0, 0.0), PolygonParams())
    assert len(poly.interiors) == 0
    assert poly.exterior.is_ccw


def test_hole_slots_are_disjoint_and_inside():
    src = as_random_source(np.random.default_rng(2))
    clearance = 10.0
    for count in (2, 3, 5, 8):
        centers, slot = hole_slots(src, (0.0, 0.0), clearance, count)
        assert len(centers) == count
        disks = [shapely.Point(c).buffer(slot * 0.999) for c in centers]
        outer = shapely.Point(0.0, 0.0).buffer(clearance)
        for i, d in enumerate(disks):
            assert outer.contains(d)
            for other in disks[i + 1:]:
                assert not d.intersects(other)


def test_line_string_is_open_path():
    params = LineStringParams(vertex_count_range=(6, 6))
    ls = assemble_line_string(np.random.default_rng(1), (0.0, 0.0), params)
    coords = np.asarray(ls.coords)
    assert coords.shape == (6, 2)
    assert not np.array_equal(coords[0], coords[-1])
    assert ls.is_simple


def test_line_string_truncated():
    params = LineStringParams(vertex_count_range=(5, 9), path_vertex_count=3)
    for seed in range(10):
        ls = assemble_line_string(np.random.default_rng(seed), (10.0, 10.0), params)
        assert len(ls.coords) == 3
        assert_radius_bounds(ls.coords, (10.0, 10.0), params.radius_range, params.spikiness)


def test_path_longer_than_ring_keeps_all_vertices():
    params = LineStringParams(vertex_count_range=(4, 4), path_vertex_count=10)
    ls = assemble_line_string(np.random.default_rng(0), (0.0, 0.0), params)
    assert len(ls.coords) == 4


def test_fixed_center_draws_nothing(counting_source):
    src = counting_source(0)
    params = GenerationParameters(center=(100.0, 200.0))
    assert resolve_center(src, params) == (100.0, 200.0)
    assert src.reals == 0


def test_center_drawn_from_range(counting_source):
    src = counting_source(0)
    params = GenerationParameters(center_range={"min_x": 5, "max_x": 6, "min_y": -6, "max_y": -5})
    x, y = resolve_center(src, params)
    assert 5 <= x < 6 and -6 <= y < -5
    assert src.reals == 2
