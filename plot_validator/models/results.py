"""Validation result models.

A ``ValidationResult`` is the verdict for a whole document (aggregate
mode); a ``PerPlotResult`` is the verdict for a single feature
(per-feature mode). Both carry the ordered ``steps`` trace, one entry per
rule evaluated, which the portal renders as remediation guidance.

All models are immutable and are built fresh per validation call by the
diagnostics recorder in ``plot_validator.rules``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationStep:
    """One named pass/fail rule evaluation.

    Attributes:
        rule: Short rule label scoped to the feature
            (e.g. ``"Feature 0 ring closure"``).
        passed: Whether the rule passed.
        message: Human-readable outcome shown to the user.
    """

    rule: str
    passed: bool
    message: str

    def to_dict(self) -> dict[str, object]:
        return {"rule": self.rule, "passed": self.passed, "message": self.message}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Aggregate verdict for one validation call.

    Attributes:
        is_valid: ``True`` iff no failing step was recorded.
        errors: Failure messages in evaluation order.
        steps: Every rule evaluation in evaluation order.
    """

    is_valid: bool = True
    errors: tuple[str, ...] = ()
    steps: tuple[ValidationStep, ...] = ()

    @property
    def failed_steps(self) -> tuple[ValidationStep, ...]:
        """Steps that did not pass, in evaluation order."""
        return tuple(step for step in self.steps if not step.passed)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-compatible dict."""
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "steps": [step.to_dict() for step in self.steps],
        }


@dataclass(frozen=True, slots=True)
class PerPlotResult:
    """Independent verdict for a single plot feature.

    Attributes:
        plot_id: The feature's ``plot_ID`` property, or ``"Feature <index>"``
            when absent.
        farmer: The feature's ``farmer_name`` property, or ``""``.
        is_valid: ``True`` iff no failing step was recorded for this feature.
        errors: Failure messages in evaluation order.
        steps: Every rule evaluation for this feature in evaluation order.
        feature_index: Zero-based position of the feature in the collection.
        area_ha: Geodesic area of the plot in hectares, for valid polygon
            features when area computation is enabled; ``None`` otherwise.
    """

    plot_id: str
    farmer: str = ""
    is_valid: bool = True
    errors: tuple[str, ...] = ()
    steps: tuple[ValidationStep, ...] = ()
    feature_index: int = 0
    area_ha: float | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-compatible dict."""
        return {
            "plot_id": self.plot_id,
            "farmer": self.farmer,
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "steps": [step.to_dict() for step in self.steps],
            "feature_index": self.feature_index,
            "area_ha": self.area_ha,
        }
