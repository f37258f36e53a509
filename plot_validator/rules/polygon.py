"""Polygon rule: a plot is a single exterior ring without holes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plot_validator.rules.ring import check_ring

if TYPE_CHECKING:
    from collections.abc import Sequence

    from plot_validator.core.config import ValidatorConfig
    from plot_validator.rules._diagnostics import Diagnostics


def check_polygon_coordinates(
    rings: Sequence[object],
    feature_index: int,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    """Reject interior rings and missing exterior rings, then check ring 0."""
    label = f"Feature {feature_index}"

    if len(rings) > 1:
        diagnostics.failed(
            f"{label} interior rings", f"{label}: Interior rings (holes) are not allowed"
        )
        return
    diagnostics.passed(f"{label} interior rings", f"{label}: No interior rings")

    if not rings:
        diagnostics.failed(
            f"{label} exterior ring", f"{label}: Polygon must have an exterior ring"
        )
        return
    diagnostics.passed(f"{label} exterior ring", f"{label}: Polygon has an exterior ring")

    check_ring(rings[0], feature_index, diagnostics, config)
