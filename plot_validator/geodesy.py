"""Geodesic area of a plot boundary.

Uses ``pyproj.Geod`` on the WGS 84 ellipsoid so the area is accurate at
any latitude, independent of ring winding order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plot_validator.core.constants import SQ_METRES_PER_HECTARE

if TYPE_CHECKING:
    from collections.abc import Sequence


def compute_geodesic_area_ha(ring: Sequence[Sequence[float]]) -> float:
    """Compute the geodesic area enclosed by *ring* in hectares.

    Args:
        ring: Exterior ring as ``[lon, lat(, alt)]`` positions; altitude
            is ignored.

    Returns:
        Absolute area in hectares; ``0.0`` for an empty ring.
    """
    if not ring:
        return 0.0

    from pyproj import Geod

    geod = Geod(ellps="WGS84")
    lons = [position[0] for position in ring]
    lats = [position[1] for position in ring]

    # Geod.polygon_area_perimeter returns (area_m2, perimeter_m)
    area_m2, _perimeter = geod.polygon_area_perimeter(lons, lats)
    return abs(area_m2) / SQ_METRES_PER_HECTARE
