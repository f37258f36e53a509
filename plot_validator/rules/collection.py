"""Collection rule: the root document is a non-empty FeatureCollection."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from plot_validator.core.constants import FEATURE_COLLECTION_TYPE
from plot_validator.rules._predicates import is_array
from plot_validator.rules.feature import check_feature

if TYPE_CHECKING:
    from plot_validator.core.config import ValidatorConfig
    from plot_validator.rules._diagnostics import Diagnostics


def collection_features(document: object) -> Sequence[object] | None:
    """Return the ``features`` array of a FeatureCollection, else ``None``."""
    if not isinstance(document, Mapping) or document.get("type") != FEATURE_COLLECTION_TYPE:
        return None
    features = document.get("features")
    return features if is_array(features) else None


def check_collection(
    document: object,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    """Validate the root document, then every feature in order.

    A root-level failure records exactly one failing step and stops.
    """
    if not isinstance(document, Mapping):
        diagnostics.failed("Root type", "GeoJSON must be a valid object")
        return
    if document.get("type") != FEATURE_COLLECTION_TYPE:
        diagnostics.failed("Root type", f"Root type must be '{FEATURE_COLLECTION_TYPE}'")
        return
    diagnostics.passed("Root type", f"Root type is '{FEATURE_COLLECTION_TYPE}'")

    features = collection_features(document)
    if not features:
        diagnostics.failed("Features array", "'features' must be a non-empty array")
        return
    diagnostics.passed("Features array", "'features' is a non-empty array")

    for index, feature in enumerate(features):
        check_feature(feature, index, diagnostics, config)
