"""Geometric and type predicates shared by the rule modules.

The geometry here is deliberately planar and heuristic: positions are
treated as Cartesian ``(lon, lat)`` pairs, equality is tolerance-based
(rounded to 6 decimal places, ~0.1 m at the equator), and the crossing
test is the classic orientation (CCW) test without collinear handling.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from plot_validator.core.constants import (
    MAX_POSITION_LENGTH,
    MIN_POSITION_LENGTH,
    POSITION_TOLERANCE_DECIMALS,
)

# Angle reported for a vertex with a zero-length incident edge
DEGENERATE_ANGLE_DEG = 180.0


def is_number(value: object) -> bool:
    """Whether *value* is a JSON number (``bool`` excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: object) -> bool:
    """Whether *value* is a JSON number other than NaN or an infinity.

    Integers are finite by construction and are never converted to float,
    since arbitrarily large JSON integers overflow the conversion.
    """
    if not is_number(value):
        return False
    return isinstance(value, int) or math.isfinite(value)  # type: ignore[arg-type]


def is_array(value: object) -> bool:
    """Whether *value* is a JSON array."""
    return isinstance(value, (list, tuple))


def is_well_formed_position(position: object) -> bool:
    """Whether *position* has the right arity and finite numeric lon/lat."""
    if not is_array(position):
        return False
    if not MIN_POSITION_LENGTH <= len(position) <= MAX_POSITION_LENGTH:  # type: ignore[arg-type]
        return False
    lon, lat = position[0], position[1]  # type: ignore[index]
    return is_finite_number(lon) and is_finite_number(lat)


def round_position(position: Sequence[object]) -> tuple[object, ...]:
    """Round every numeric member of *position* to the comparison tolerance."""
    return tuple(
        round(value, POSITION_TOLERANCE_DECIMALS) if is_number(value) else value
        for value in position
    )


def positions_equal(first: object, second: object) -> bool:
    """Tolerance-rounded, element-wise position equality."""
    if not (is_array(first) and is_array(second)):
        return first == second
    return round_position(first) == round_position(second)  # type: ignore[arg-type]


def fractional_digits(value: float) -> int:
    """Number of digits after the decimal point in the shortest repr of *value*."""
    if isinstance(value, int) or not math.isfinite(value):
        return 0
    exponent = Decimal(repr(value)).as_tuple().exponent
    return max(0, -int(exponent))


def _ccw(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> bool:
    return (c[1] - a[1]) * (b[0] - a[0]) > (b[1] - a[1]) * (c[0] - a[0])


def segments_intersect(
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    p4: Sequence[float],
) -> bool:
    """Whether segment ``p1-p2`` properly crosses segment ``p3-p4``."""
    return _ccw(p1, p3, p4) != _ccw(p2, p3, p4) and _ccw(p1, p2, p3) != _ccw(p1, p2, p4)


def vertex_angle_deg(
    previous: Sequence[float],
    vertex: Sequence[float],
    following: Sequence[float],
) -> float:
    """Angle in degrees at *vertex* between its two incident edges.

    Returns ``DEGENERATE_ANGLE_DEG`` when either incident edge has zero
    length, so duplicate points are never reported as spikes.
    """
    v1 = (previous[0] - vertex[0], previous[1] - vertex[1])
    v2 = (following[0] - vertex[0], following[1] - vertex[1])
    mag1 = math.hypot(*v1)
    mag2 = math.hypot(*v2)
    if mag1 == 0 or mag2 == 0:
        return DEGENERATE_ANGLE_DEG
    cos_theta = (v1[0] * v2[0] + v1[1] * v2[1]) / (mag1 * mag2)
    return math.degrees(math.acos(max(-1.0, min(1.0, cos_theta))))
