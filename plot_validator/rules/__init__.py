"""Validation rules, leaf-first.

- coordinate: single position format, WGS 84 bounds, precision
- ring: closure, duplicates, self-intersection, spikes, straight lines
- polygon: exterior ring only, no holes
- geometry: GeoJSON type recognition and Polygon-only policy
- feature: type, properties, required/typed properties
- collection: FeatureCollection root with non-empty features

Each rule records its outcome on an explicit ``Diagnostics`` recorder and
delegates to the next rule down.
"""

from plot_validator.rules._diagnostics import Diagnostics
from plot_validator.rules.collection import check_collection, collection_features
from plot_validator.rules.coordinate import check_position
from plot_validator.rules.feature import check_feature
from plot_validator.rules.geometry import check_geometry
from plot_validator.rules.polygon import check_polygon_coordinates
from plot_validator.rules.ring import check_ring, crossing_edges

__all__ = [
    "Diagnostics",
    "check_collection",
    "check_feature",
    "check_geometry",
    "check_polygon_coordinates",
    "check_position",
    "check_ring",
    "collection_features",
    "crossing_edges",
]
