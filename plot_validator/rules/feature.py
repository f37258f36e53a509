"""Feature rule: type, properties shape, required and typed properties, geometry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from plot_validator.core.constants import AREA_PROPERTY, FEATURE_TYPE
from plot_validator.rules._predicates import is_number
from plot_validator.rules.geometry import check_geometry

if TYPE_CHECKING:
    from plot_validator.core.config import ValidatorConfig
    from plot_validator.rules._diagnostics import Diagnostics


def check_feature(
    feature: object,
    feature_index: int,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    """Validate one Feature and delegate its geometry.

    Missing required properties and a non-numeric ``area`` are reported
    without stopping; a bad ``type``, bad ``properties`` or a missing
    ``geometry`` stop this feature's checks. ``geometry: null`` is valid.
    """
    label = f"Feature {feature_index}"

    if not isinstance(feature, Mapping) or feature.get("type") != FEATURE_TYPE:
        diagnostics.failed(f"{label} type", f"{label}: Type must be '{FEATURE_TYPE}'")
        return
    diagnostics.passed(f"{label} type", f"{label} type is '{FEATURE_TYPE}'")

    properties = feature.get("properties")
    if "properties" not in feature or (
        properties is not None and not isinstance(properties, Mapping)
    ):
        diagnostics.failed(
            f"{label} properties", f"{label}: 'properties' must be an object or null"
        )
        return
    diagnostics.passed(f"{label} properties", f"{label}: 'properties' is valid")

    for prop in config.required_properties:
        rule = f"{label} property {prop}"
        if properties is None or prop not in properties:
            diagnostics.failed(rule, f"{label}: Missing required property '{prop}'")
        else:
            diagnostics.passed(rule, f"{label}: Property '{prop}' is present")

    if properties is not None and AREA_PROPERTY in properties:
        rule = f"{label} property {AREA_PROPERTY}"
        if is_number(properties[AREA_PROPERTY]):
            diagnostics.passed(rule, f"{label}: '{AREA_PROPERTY}' property is a number")
        else:
            diagnostics.failed(rule, f"{label}: '{AREA_PROPERTY}' property must be a number")

    if "geometry" not in feature:
        diagnostics.failed(f"{label} geometry", f"{label}: Missing 'geometry' property")
        return
    geometry = feature["geometry"]
    if geometry is None:
        diagnostics.passed(f"{label} geometry", f"{label}: geometry is null (allowed)")
        return

    check_geometry(geometry, feature_index, diagnostics, config)
