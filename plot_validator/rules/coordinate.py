"""Coordinate rule: format, WGS 84 bounds, and decimal precision of a position."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plot_validator.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MAX_POSITION_LENGTH,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_POSITION_LENGTH,
)
from plot_validator.rules._predicates import (
    fractional_digits,
    is_array,
    is_finite_number,
    is_number,
)

if TYPE_CHECKING:
    from plot_validator.core.config import ValidatorConfig
    from plot_validator.rules._diagnostics import Diagnostics


def _in_range(value: object, low: float, high: float) -> bool:
    return is_finite_number(value) and low <= value <= high  # type: ignore[operator]


def check_position(
    position: object,
    feature_index: int,
    point_index: int,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    """Validate one ``[lon, lat]`` or ``[lon, lat, alt]`` position.

    Longitude and latitude are checked independently; a malformed
    position stops after the format step.
    """
    label = f"Feature {feature_index} Point {point_index}"

    if not is_array(position) or not (
        MIN_POSITION_LENGTH <= len(position) <= MAX_POSITION_LENGTH  # type: ignore[arg-type]
    ):
        diagnostics.failed(f"{label} format", f"{label}: Invalid coordinate format")
        return
    diagnostics.passed(f"{label} format", f"{label}: Coordinate format is valid")

    lon, lat = position[0], position[1]  # type: ignore[index]

    if _in_range(lon, MIN_LONGITUDE, MAX_LONGITUDE):
        diagnostics.passed(f"{label} longitude", f"{label}: Longitude is valid")
    else:
        diagnostics.failed(f"{label} longitude", f"{label}: Invalid longitude {lon!r}")

    if _in_range(lat, MIN_LATITUDE, MAX_LATITUDE):
        diagnostics.passed(f"{label} latitude", f"{label}: Latitude is valid")
    else:
        diagnostics.failed(f"{label} latitude", f"{label}: Invalid latitude {lat!r}")

    if config.enforce_coordinate_precision:
        limit = config.max_coordinate_decimals
        excessive = any(
            is_number(value) and fractional_digits(value) > limit  # type: ignore[arg-type]
            for value in (lon, lat)
        )
        if excessive:
            diagnostics.failed(f"{label} precision", f"{label}: Excessive coordinate precision")
        else:
            diagnostics.passed(f"{label} precision", f"{label}: Coordinate precision is valid")

