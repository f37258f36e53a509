"""Batch summary over per-plot validation results.

Backs the portal's results dialog: "N of M plots valid", valid/invalid
counts, the most common issues across the batch, and lookup of a single
plot's result when the user jumps to fix it.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from plot_validator.models.results import PerPlotResult

DEFAULT_TOP_ISSUES = 2
NO_COMMON_ISSUES = "No common issues found"


@dataclass(frozen=True, slots=True)
class ValidationSummary:
    """Counts and common issues for a batch of plots.

    Attributes:
        total: Number of plots validated.
        valid: Number of plots without errors.
        invalid: Number of plots with at least one error.
        common_issues: Most frequent error messages, most frequent first.
        total_area_ha: Summed geodesic area of valid plots with a known area.
    """

    total: int = 0
    valid: int = 0
    invalid: int = 0
    common_issues: tuple[str, ...] = ()
    total_area_ha: float = 0.0

    @property
    def headline(self) -> str:
        return f"{self.valid} of {self.total} plots valid"

    @property
    def common_issues_text(self) -> str:
        return ", ".join(self.common_issues) or NO_COMMON_ISSUES

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-compatible dict."""
        return {
            "total": self.total,
            "valid": self.valid,
            "invalid": self.invalid,
            "common_issues": list(self.common_issues),
            "total_area_ha": self.total_area_ha,
        }


def summarize(
    results: Sequence[PerPlotResult], *, top_n: int = DEFAULT_TOP_ISSUES
) -> ValidationSummary:
    """Summarise per-plot results.

    Ties between equally frequent errors keep the order in which they
    were first seen.
    """
    counts: Counter[str] = Counter(error for result in results for error in result.errors)
    valid = sum(1 for result in results if result.is_valid)
    area = sum(
        result.area_ha for result in results if result.is_valid and result.area_ha is not None
    )
    return ValidationSummary(
        total=len(results),
        valid=valid,
        invalid=len(results) - valid,
        common_issues=tuple(error for error, _ in counts.most_common(top_n)),
        total_area_ha=area,
    )


def find_plot(results: Iterable[PerPlotResult], plot_id: str) -> PerPlotResult | None:
    """Return the first result for *plot_id*, or ``None``."""
    return next((result for result in results if result.plot_id == plot_id), None)
