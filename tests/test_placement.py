import logging
from itertools import combinations

import numpy as np
import shapely

from georand.build_random.placement import PlacementResult, random_collection
from georand.build_random.shapes import assemble_polygon
from georand.config.schema import GenerationParameters
from georand.sampling.helpers import bbox_of, bboxes_overlap


def _polygons(src, center, params):
    return assemble_polygon(src, center, params.polygon)


def _params(**collection):
    return GenerationParameters(
        center_range={"min_x": 0, "min_y": 0, "max_x": 1000, "max_y": 1000},
        polygon={"radius_range": (5.0, 10.0)},
        collection=collection,
    )


def test_three_members_have_disjoint_boxes():
    params = _params(shape_count_range=(3, 3))
    res = random_collection(np.random.default_rng(0), params, lambda s, c: _polygons(s, c, params))
    assert len(res) == 3
    assert res.separated
    boxes = [bbox_of(np.asarray(p.exterior.coords)) for p in res]
    for a, b in combinations(boxes, 2):
        assert not bboxes_overlap(a, b)


def test_count_within_range():
    params = _params(shape_count_range=(2, 5))
    for seed in range(10):
        res = random_collection(np.random.default_rng(seed), params, lambda s, c: _polygons(s, c, params))
        assert 2 <= len(res) <= 5
        assert len(res.attempts) == len(res)


def test_exhaustion_accepts_overlap(caplog):
    params = GenerationParameters(
        center_range={"min_x": 0, "min_y": 0, "max_x": 0, "max_y": 0},
        collection={"shape_count_range": (3, 3), "max_placement_attempts": 5},
    )
    caplog.set_level(logging.WARNING, logger="georand")
    res = random_collection(np.random.default_rng(1), params, lambda s, c: _polygons(s, c, params))
    assert len(res) == 3
    assert res.overlapping == (1, 2)
    assert res.attempts == (1, 5, 5)
    assert not res.separated
    assert "still overlaps" in caplog.text


def test_overlap_check_can_be_disabled():
    params = GenerationParameters(
        center_range={"min_x": 0, "min_y": 0, "max_x": 0, "max_y": 0},
        collection={"shape_count_range": (4, 4), "avoid_overlap": False},
    )
    res = random_collection(np.random.default_rng(2), params, lambda s, c: _polygons(s, c, params))
    assert res.overlapping == ()
    assert res.attempts == (1, 1, 1, 1)


def test_exact_test_is_opt_in():
    params = _params(shape_count_range=(4, 4), overlap_test="exact")
    res = random_collection(np.random.default_rng(3), params, lambda s, c: _polygons(s, c, params))
    assert res.separated
    for a, b in combinations(res.shapes, 2):
        assert not a.intersects(b)


def test_points_collide_only_when_equal():
    params = GenerationParameters(
        center_range={"min_x": 0, "min_y": 0, "max_x": 0, "max_y": 0},
        collection={"shape_count_range": (2, 2), "max_placement_attempts": 3},
    )
    res = random_collection(np.random.default_rng(0), params, lambda s, c: shapely.Point(c))
    assert res.overlapping == (1,)


def test_as_multi():
    res = PlacementResult((shapely.Point(0, 0), shapely.Point(1, 1)))
    multi = res.as_multi(shapely.MultiPoint)
    assert isinstance(multi, shapely.MultiPoint)
    assert len(multi.geoms) == 2
