"""Exception types raised by georand."""
from __future__ import annotations

from typing import Any, Sequence

__all__ = ["GeorandError", "InvalidParameter", "DegenerateRing"]


class GeorandError(Exception):
    """Base class for all georand errors."""


class InvalidParameter(GeorandError, ValueError):
    """A generation parameter is out of contract.

    Raised while building :class:`~georand.config.schema.GenerationParameters`,
    never during generation.  ``field`` is the dotted path of the offending
    option (``"polygon.irregularity"``), ``reason`` a human readable message.
    ``errors`` keeps every problem found in the same validation pass.
    """

    def __init__(self, field: str, reason: str, errors: Sequence[dict[str, Any]] = ()):
        self.field = field
        self.reason = reason
        self.errors = list(errors)
        super().__init__(f"{field}: {reason}" if field else reason)


class DegenerateRing(GeorandError, RuntimeError):
    """A ring was requested with fewer than three vertices."""

    def __init__(self, vertex_count: int):
        self.vertex_count = int(vertex_count)
        super().__init__(f"ring needs at least 3 vertices, got {self.vertex_count}")
