"""Geometry rule: recognised GeoJSON type, Polygon-only policy, coordinate array."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from plot_validator.models.geometry import ACCEPTED_GEOMETRY_KINDS, GeometryKind
from plot_validator.rules._predicates import is_array
from plot_validator.rules.polygon import check_polygon_coordinates

if TYPE_CHECKING:
    from plot_validator.core.config import ValidatorConfig
    from plot_validator.rules._diagnostics import Diagnostics


def check_geometry(
    geometry: object,
    feature_index: int,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    """Validate a feature's geometry object and descend into its coordinates.

    An unknown ``type`` and a known-but-unaccepted ``type`` are distinct
    violations; both stop the geometry checks.
    """
    label = f"Feature {feature_index}"
    rule = f"{label} geometry type"

    kind = GeometryKind.parse(geometry.get("type")) if isinstance(geometry, Mapping) else None
    if kind is None:
        diagnostics.failed(rule, f"{label}: Invalid geometry type")
        return
    diagnostics.passed(rule, f"{label}: Geometry type is '{kind.value}'")

    if kind not in ACCEPTED_GEOMETRY_KINDS:
        diagnostics.failed(rule, f"{label}: Only Polygon geometries are supported")
        return

    coordinates = geometry.get("coordinates")  # type: ignore[union-attr]
    if not is_array(coordinates):
        diagnostics.failed(f"{label} coordinates", f"{label}: Coordinates must be an array")
        return
    diagnostics.passed(f"{label} coordinates", f"{label}: Coordinates are an array")

    if kind is GeometryKind.POLYGON:
        check_polygon_coordinates(coordinates, feature_index, diagnostics, config)
