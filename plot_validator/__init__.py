"""Harvest Plot Boundary Validator.

Rule-based gatekeeper for land-plot polygons submitted as GeoJSON.
Checks document structure, geometry type policy, ring topology,
coordinate bounds and precision, and shape-quality heuristics, and
returns a step-by-step trace suitable for end-user remediation.
"""

from plot_validator.core.config import ValidatorConfig
from plot_validator.models.results import PerPlotResult, ValidationResult, ValidationStep
from plot_validator.summary import ValidationSummary, find_plot, summarize
from plot_validator.validate import validate, validate_all_features

__version__ = "0.1.0"

__all__ = [
    "PerPlotResult",
    "ValidationResult",
    "ValidationStep",
    "ValidationSummary",
    "ValidatorConfig",
    "find_plot",
    "summarize",
    "validate",
    "validate_all_features",
]
