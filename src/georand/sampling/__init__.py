from .helpers import BBox, bbox_of, bboxes_overlap, overlaps_any

__all__ = ["BBox", "bbox_of", "bboxes_overlap", "overlaps_any"]
