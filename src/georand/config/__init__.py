"""Generation parameters and their loading."""
from .loader import dump_parameters, load_parameters
from .schema import (
    DEFAULT_PARAMETERS,
    Bounds,
    CollectionParams,
    GenerationParameters,
    LineStringParams,
    PolygonParams,
    RingParams,
    validate_parameters,
)

__all__ = [
    "Bounds",
    "CollectionParams",
    "DEFAULT_PARAMETERS",
    "GenerationParameters",
    "LineStringParams",
    "PolygonParams",
    "RingParams",
    "dump_parameters",
    "load_parameters",
    "validate_parameters",
]
