"""GeoJSON geometry kinds.

The seven geometry type names defined by RFC 7946, modelled as a closed
enum so the accepted-kinds policy is a set over enum members rather than
a scatter of string comparisons.
"""

from __future__ import annotations

import enum


class GeometryKind(enum.Enum):
    """A GeoJSON geometry ``type`` value."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @classmethod
    def parse(cls, value: object) -> GeometryKind | None:
        """Return the kind named by *value*, or ``None`` if unrecognised."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Plot boundaries are single polygons without holes
ACCEPTED_GEOMETRY_KINDS: frozenset[GeometryKind] = frozenset({GeometryKind.POLYGON})
