"""Pydantic models for generation parameters."""
from __future__ import annotations

from typing import Any, Literal, Mapping, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    ValidationError,
    field_validator,
    model_validator,
)

from ..errors import InvalidParameter
from ..utils.dict_merge import deep_update

IntRange = Tuple[int, int]
FloatRange = Tuple[FiniteFloat, FiniteFloat]


def _flatten_errors(exc: ValidationError) -> list[dict[str, Any]]:
    # Nested sections run their own ``__init__``, so their InvalidParameter
    # arrives wrapped as a value error at the section's loc.
    out: list[dict[str, Any]] = []
    for err in exc.errors(include_url=False):
        inner = (err.get("ctx") or {}).get("error")
        if isinstance(inner, InvalidParameter):
            prefix = tuple(err["loc"])
            out.extend({**sub, "loc": prefix + tuple(sub["loc"])} for sub in inner.errors)
        else:
            out.append(err)
    return out


def _as_invalid(exc: ValidationError) -> InvalidParameter:
    errors = _flatten_errors(exc)
    first = errors[0]
    field = ".".join(str(p) for p in first["loc"])
    return InvalidParameter(field, first["msg"], errors)


def _check_order(v: tuple) -> tuple:
    lo, hi = v
    if lo > hi:
        raise ValueError(f"lower bound {lo} exceeds upper bound {hi}")
    return v


class _Params(BaseModel):
    """Frozen, strict base: unknown keys and bad values raise ``InvalidParameter``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _as_invalid(exc) from exc


class Bounds(_Params):
    min_x: FiniteFloat = 0.0
    min_y: FiniteFloat = 0.0
    max_x: FiniteFloat = 400.0
    max_y: FiniteFloat = 400.0

    @model_validator(mode="after")
    def _check_axes(self):  # type: ignore[override]
        if self.max_x < self.min_x:
            raise ValueError(f"max_x {self.max_x} is below min_x {self.min_x}")
        if self.max_y < self.min_y:
            raise ValueError(f"max_y {self.max_y} is below min_y {self.min_y}")
        return self

    @property
    def x_range(self) -> tuple[float, float]:
        return self.min_x, self.max_x

    @property
    def y_range(self) -> tuple[float, float]:
        return self.min_y, self.max_y


class RingParams(_Params):
    """Knobs shared by every ring-based shape."""

    vertex_count_range: IntRange = (3, 7)
    radius_range: FloatRange = (10.0, 40.0)
    irregularity: float = Field(default=0.5, ge=0.0, le=1.0)
    spikiness: float = Field(default=0.3, ge=0.0, le=1.0)

    @field_validator("vertex_count_range")
    @classmethod
    def _check_vertices(cls, v: IntRange) -> IntRange:
        _check_order(v)
        if v[0] < 3:
            raise ValueError(f"a ring needs at least 3 vertices, got lower bound {v[0]}")
        return v

    @field_validator("radius_range")
    @classmethod
    def _check_radius(cls, v: FloatRange) -> FloatRange:
        _check_order(v)
        if v[0] <= 0:
            raise ValueError(f"radius must be positive, got lower bound {v[0]}")
        return v


class PolygonParams(RingParams):
    hole_count_range: IntRange = (0, 0)
    hole_scale_range: FloatRange = (0.3, 0.6)

    @field_validator("hole_count_range")
    @classmethod
    def _check_holes(cls, v: IntRange) -> IntRange:
        _check_order(v)
        if v[0] < 0:
            raise ValueError(f"hole count cannot be negative, got lower bound {v[0]}")
        return v

    @field_validator("hole_scale_range")
    @classmethod
    def _check_hole_scale(cls, v: FloatRange) -> FloatRange:
        _check_order(v)
        if v[0] <= 0 or v[1] >= 1:
            raise ValueError("hole scale must lie strictly between 0 and 1")
        return v


class LineStringParams(RingParams):
    vertex_count_range: IntRange = (4, 8)
    path_vertex_count: Optional[int] = Field(default=None, ge=2)


class CollectionParams(_Params):
    shape_count_range: IntRange = (1, 8)
    max_placement_attempts: int = Field(default=100, ge=1)
    avoid_overlap: bool = True
    overlap_test: Literal["bbox", "exact"] = "bbox"

    @field_validator("shape_count_range")
    @classmethod
    def _check_count(cls, v: IntRange) -> IntRange:
        _check_order(v)
        if v[0] < 1:
            raise ValueError(f"a collection needs at least one member, got lower bound {v[0]}")
        return v


class GenerationParameters(_Params):
    """Every tunable knob of the generators, validated once at construction.

    ``center`` anchors single shapes; when it is ``None`` a center is drawn from
    ``center_range``, which also bounds point kinds and collection members.
    """

    center: Optional[Tuple[FiniteFloat, FiniteFloat]] = None
    center_range: Bounds = Field(default_factory=Bounds)
    polygon: PolygonParams = Field(default_factory=PolygonParams)
    line_string: LineStringParams = Field(default_factory=LineStringParams)
    collection: CollectionParams = Field(default_factory=CollectionParams)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationParameters":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise _as_invalid(exc) from exc

    def evolve(self, overrides: Mapping[str, Any]) -> "GenerationParameters":
        """Return a validated copy with ``overrides`` deep-merged in."""
        return self.from_mapping(deep_update(self.model_dump(), overrides))


DEFAULT_PARAMETERS = GenerationParameters()


def validate_parameters(
    data: GenerationParameters | Mapping[str, Any] | None,
) -> GenerationParameters:
    """Return ``data`` as :class:`GenerationParameters`; ``None`` means defaults."""
    if data is None:
        return DEFAULT_PARAMETERS
    if isinstance(data, GenerationParameters):
        return data
    return GenerationParameters.from_mapping(data)


__all__ = [
    "Bounds",
    "RingParams",
    "PolygonParams",
    "LineStringParams",
    "CollectionParams",
    "GenerationParameters",
    "DEFAULT_PARAMETERS",
    "validate_parameters",
]
