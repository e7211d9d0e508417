from .placement import PlacementResult, random_collection
from .shapes import assemble_line_string, assemble_point, assemble_polygon, resolve_center

__all__ = [
    "PlacementResult",
    "random_collection",
    "assemble_line_string",
    "assemble_point",
    "assemble_polygon",
    "resolve_center",
]
