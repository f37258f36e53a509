"""Data models and schemas.

Defines the value types produced by the validator:
- ValidationStep: One named pass/fail rule evaluation
- ValidationResult: Aggregate verdict, error list, and step trace
- PerPlotResult: Independent verdict for a single plot feature
- GeometryKind: Closed set of GeoJSON geometry type names
"""

from plot_validator.models.geometry import ACCEPTED_GEOMETRY_KINDS, GeometryKind
from plot_validator.models.results import PerPlotResult, ValidationResult, ValidationStep

__all__ = [
    "ACCEPTED_GEOMETRY_KINDS",
    "GeometryKind",
    "PerPlotResult",
    "ValidationResult",
    "ValidationStep",
]
