"""Point generation."""
from __future__ import annotations

import shapely

from ..random_source import RandomLike, as_random_source

__all__ = ["random_coordinate", "random_point"]


def random_coordinate(
    rng: RandomLike,
    x_range: tuple[float, float],
    y_range: tuple[float, float],
) -> tuple[float, float]:
    """Draw ``(x, y)`` uniformly; exactly two draws, x first."""
    src = as_random_source(rng)
    x = src.uniform_real(x_range[0], x_range[1])
    y = src.uniform_real(y_range[0], y_range[1])
    return x, y


def random_point(
    rng: RandomLike,
    x_range: tuple[float, float],
    y_range: tuple[float, float],
) -> shapely.Point:
    return shapely.Point(random_coordinate(rng, x_range, y_range))
