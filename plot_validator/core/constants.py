"""Shared validator constants, single source of truth.

Centralises the rulebook's numeric thresholds and property names so the
rule modules, the configuration defaults, and the tests agree.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# A position is [lon, lat] or [lon, lat, alt]
MIN_POSITION_LENGTH = 2
MAX_POSITION_LENGTH = 3

# ---------------------------------------------------------------------------
# Ring rules
# ---------------------------------------------------------------------------

# Minimum positions for a ring (3 distinct + closing = 4)
MIN_RING_POSITIONS = 4

# Decimal places used when comparing two positions for equality
POSITION_TOLERANCE_DECIMALS = 6

DEFAULT_MAX_COORDINATE_DECIMALS = 6
"""Maximum fractional digits allowed on longitude/latitude."""

DEFAULT_MIN_SPIKE_ANGLE_DEG = 5.0
"""Interior angles below this threshold mark a spike vertex."""

# ---------------------------------------------------------------------------
# Document / feature vocabulary
# ---------------------------------------------------------------------------

FEATURE_COLLECTION_TYPE: str = "FeatureCollection"
FEATURE_TYPE: str = "Feature"

PLOT_ID_PROPERTY: str = "plot_ID"
FARMER_NAME_PROPERTY: str = "farmer_name"
AREA_PROPERTY: str = "area"

DEFAULT_REQUIRED_PROPERTIES: tuple[str, ...] = (PLOT_ID_PROPERTY, FARMER_NAME_PROPERTY)
"""Properties every plot feature must carry."""

# Square metres per hectare
SQ_METRES_PER_HECTARE = 10_000.0
