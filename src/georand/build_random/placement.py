"""Place several shapes while avoiding overlap on a best-effort basis.

Each member gets up to ``max_placement_attempts`` candidate centers.  When
every candidate collides with an already accepted member, the last candidate
is kept anyway and its index is reported in
:attr:`PlacementResult.overlapping`: exhausting the attempts never fails the
call.  The default test compares bounding boxes only, so members of a
"separated" collection are guaranteed to have disjoint boxes and nothing more.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Sequence, TypeVar

import shapely

from ..config.schema import CollectionParams, GenerationParameters
from ..primitives.points import random_coordinate
from ..random_source import RandomLike, RandomSource, as_random_source
from ..sampling.helpers import BBox, overlaps_any
from ..utils.logging import logger

__all__ = ["PlacementResult", "random_collection", "collides"]

S = TypeVar("S", bound=shapely.Geometry)

ShapeBuilder = Callable[[RandomSource, tuple[float, float]], S]


@dataclass(frozen=True)
class PlacementResult(Generic[S]):
    """Members in generation order plus placement bookkeeping."""

    shapes: tuple[S, ...]
    overlapping: tuple[int, ...] = ()
    attempts: tuple[int, ...] = ()

    @property
    def separated(self) -> bool:
        return not self.overlapping

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[S]:
        return iter(self.shapes)

    def as_multi(self, kind: type) -> shapely.Geometry:
        """Wrap the members, e.g. ``result.as_multi(shapely.MultiPolygon)``."""
        return kind(list(self.shapes))


def collides(
    candidate: shapely.Geometry,
    accepted: Sequence[shapely.Geometry],
    boxes: Sequence[BBox],
    overlap_test: str = "bbox",
) -> bool:
    if overlap_test == "exact":
        return any(candidate.intersects(other) for other in accepted)
    return overlaps_any(candidate.bounds, boxes)


def random_collection(
    rng: RandomLike,
    params: GenerationParameters,
    build: ShapeBuilder,
) -> PlacementResult:
    """Generate ``shape_count_range`` members with ``build(rng, center)``.

    Centers are drawn from ``params.center_range``.
    """
    src = as_random_source(rng)
    cfg: CollectionParams = params.collection
    box = params.center_range
    k = src.uniform_int(cfg.shape_count_range[0], cfg.shape_count_range[1])

    shapes: list = []
    boxes: list[BBox] = []
    overlapping: list[int] = []
    attempts: list[int] = []
    for i in range(k):
        for attempt in range(1, cfg.max_placement_attempts + 1):
            center = random_coordinate(src, box.x_range, box.y_range)
            shape = build(src, center)
            if not cfg.avoid_overlap or not collides(shape, shapes, boxes, cfg.overlap_test):
                break
        else:
            overlapping.append(i)
            logger.warning(
                "member %d still overlaps after %d attempts; keeping it",
                i, cfg.max_placement_attempts,
            )
        shapes.append(shape)
        boxes.append(tuple(shape.bounds))
        attempts.append(attempt)

    logger.debug(
        "placed %d members, %d overlapping, %d candidates",
        k, len(overlapping), sum(attempts),
    )
    return PlacementResult(tuple(shapes), tuple(overlapping), tuple(attempts))
