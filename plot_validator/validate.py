"""Validation entry points.

- ``validate``: one aggregate result for the whole document, with a
  single shared step/error trace.
- ``validate_all_features``: one independent result per feature, so a
  plot can be fixed in isolation from the others.

Both take an already-parsed GeoJSON document (dicts/lists as produced by
``json.loads``) and never raise on malformed input.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from plot_validator.core.config import ValidatorConfig
from plot_validator.core.constants import FARMER_NAME_PROPERTY, PLOT_ID_PROPERTY
from plot_validator.geodesy import compute_geodesic_area_ha
from plot_validator.models.results import PerPlotResult
from plot_validator.rules import Diagnostics, check_collection, check_feature, collection_features

if TYPE_CHECKING:
    from plot_validator.models.results import ValidationResult

logger = logging.getLogger("plot_validator.validate")


def validate(document: object, *, config: ValidatorConfig | None = None) -> ValidationResult:
    """Validate a FeatureCollection as a whole.

    Args:
        document: Parsed GeoJSON document.
        config: Validator options; defaults when ``None``.

    Returns:
        A ``ValidationResult`` whose ``steps`` list every rule evaluated
        across all features, in evaluation order.
    """
    config = config or ValidatorConfig()
    diagnostics = Diagnostics()
    check_collection(document, diagnostics, config)
    result = diagnostics.to_result()

    logger.info(
        "Document validated | valid=%s | errors=%d | steps=%d",
        result.is_valid,
        len(result.errors),
        len(result.steps),
    )
    return result


def validate_all_features(
    document: object, *, config: ValidatorConfig | None = None
) -> list[PerPlotResult]:
    """Validate every feature of a FeatureCollection independently.

    Args:
        document: Parsed GeoJSON document.
        config: Validator options; defaults when ``None``.

    Returns:
        One ``PerPlotResult`` per feature, in input order. Empty if the
        root is not a FeatureCollection with a ``features`` array.
    """
    config = config or ValidatorConfig()
    features = collection_features(document)
    if features is None:
        logger.info("Per-plot validation skipped | reason=not a FeatureCollection")
        return []

    results = [_validate_plot(feature, index, config) for index, feature in enumerate(features)]

    logger.info(
        "Plots validated | total=%d | valid=%d",
        len(results),
        sum(1 for r in results if r.is_valid),
    )
    return results


def _validate_plot(feature: object, index: int, config: ValidatorConfig) -> PerPlotResult:
    diagnostics = Diagnostics()
    check_feature(feature, index, diagnostics, config)

    properties = _properties(feature)
    plot_id = properties.get(PLOT_ID_PROPERTY)
    farmer = properties.get(FARMER_NAME_PROPERTY)

    area_ha = None
    if diagnostics.is_valid and config.compute_area:
        area_ha = _plot_area_ha(feature)

    return PerPlotResult(
        plot_id=str(plot_id) if plot_id else f"Feature {index}",
        farmer=str(farmer) if farmer else "",
        is_valid=diagnostics.is_valid,
        errors=diagnostics.errors,
        steps=diagnostics.steps,
        feature_index=index,
        area_ha=area_ha,
    )


def _properties(feature: object) -> Mapping[str, object]:
    if isinstance(feature, Mapping) and isinstance(feature.get("properties"), Mapping):
        return feature["properties"]
    return {}


def _plot_area_ha(feature: object) -> float | None:
    """Area of a feature that already passed validation; ``None`` for null geometry."""
    geometry = feature.get("geometry")  # type: ignore[union-attr]
    if geometry is None:
        return None
    return compute_geodesic_area_ha(geometry["coordinates"][0])
