"""Ring rule: topology and shape quality of a polygon's exterior ring.

The checks run in a fixed order. The two structural gates (array-ness
and minimum size) stop the ring checks; every later check is independent,
so one ring can accumulate several distinct violations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plot_validator.core.constants import MIN_RING_POSITIONS
from plot_validator.rules._predicates import (
    is_array,
    is_well_formed_position,
    positions_equal,
    segments_intersect,
    vertex_angle_deg,
)
from plot_validator.rules.coordinate import check_position

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from plot_validator.core.config import ValidatorConfig
    from plot_validator.rules._diagnostics import Diagnostics


def check_ring(
    ring: object,
    feature_index: int,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    """Validate a closed linear ring.

    Order: array-ness, minimum size, closure, duplicate consecutive
    points, per-position coordinate rule, self-intersection, spike
    vertices, straight-line heuristic. Self-intersection and spike checks
    need numeric geometry and are omitted when any position is malformed
    (those positions have already failed the coordinate rule).
    """
    label = f"Feature {feature_index}"

    if not is_array(ring):
        diagnostics.failed(f"{label} ring array", f"{label}: Ring must be an array of positions")
        return
    diagnostics.passed(f"{label} ring array", f"{label}: Ring is an array of positions")

    if len(ring) < MIN_RING_POSITIONS:  # type: ignore[arg-type]
        diagnostics.failed(
            f"{label} ring points", f"{label}: Ring must have at least {MIN_RING_POSITIONS} points"
        )
        return
    diagnostics.passed(
        f"{label} ring points", f"{label}: Ring has at least {MIN_RING_POSITIONS} points"
    )

    positions: Sequence[object] = ring  # type: ignore[assignment]

    if positions_equal(positions[0], positions[-1]):
        diagnostics.passed(f"{label} ring closure", f"{label}: Ring is closed")
    else:
        diagnostics.failed(
            f"{label} ring closure",
            f"{label}: Ring must be closed (first/last points identical)",
        )

    _check_duplicate_points(positions, label, diagnostics, config)

    for point_index, position in enumerate(positions):
        check_position(position, feature_index, point_index, diagnostics, config)

    if all(is_well_formed_position(position) for position in positions):
        _check_self_intersections(positions, label, diagnostics, config)  # type: ignore[arg-type]
        _check_spikes(positions, label, diagnostics, config)  # type: ignore[arg-type]

    _check_straight_lines(positions, label, diagnostics)


def _duplicate_pairs(positions: Sequence[object]) -> Iterator[int]:
    """Yield ``i`` for every adjacent pair ``(i - 1, i)`` of equal positions."""
    for i in range(1, len(positions)):
        if positions_equal(positions[i], positions[i - 1]):
            yield i


def _check_duplicate_points(
    positions: Sequence[object],
    label: str,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    """Record one failing step per offending pair; a clean ring records none."""
    duplicates = list(_duplicate_pairs(positions))

    for i in duplicates:
        diagnostics.failed(
            f"{label} duplicate points",
            f"{label}: Duplicate consecutive points at {i - 1} and {i}",
        )

    if not config.report_zero_length_edges:
        return
    # Legacy wording for consumers that match on the zero-length edge message
    for i in duplicates:
        diagnostics.failed(
            f"{label} zero-length edge",
            f"{label}: Zero-length edge at points {i - 1} and {i}",
        )


def crossing_edges(ring: Sequence[Sequence[float]]) -> Iterator[tuple[int, int]]:
    """Yield ``(i, j)`` for every pair of non-adjacent ring edges that cross.

    Edge ``k`` runs from position ``k`` to ``k + 1``. Adjacent edges and
    the first/last pair (which meet at the closing seam) are skipped.
    """
    last_edge = len(ring) - 2
    for i in range(len(ring) - 1):
        for j in range(i + 2, len(ring) - 1):
            if i == 0 and j == last_edge:
                continue
            if segments_intersect(ring[i], ring[i + 1], ring[j], ring[j + 1]):
                yield i, j


def _check_self_intersections(
    ring: Sequence[Sequence[float]],
    label: str,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    rule = f"{label} self-intersection"
    found = False
    for i, j in crossing_edges(ring):
        found = True
        if not config.report_all_self_intersections:
            diagnostics.failed(rule, f"{label}: Self-intersection detected")
            break
        diagnostics.failed(rule, f"{label}: Self-intersection detected between edges {i} and {j}")
    if not found:
        diagnostics.passed(rule, f"{label}: No self-intersections")


def _check_spikes(
    ring: Sequence[Sequence[float]],
    label: str,
    diagnostics: Diagnostics,
    config: ValidatorConfig,
) -> None:
    rule = f"{label} spike vertex"
    found = False
    for i in range(1, len(ring) - 1):
        angle = vertex_angle_deg(ring[i - 1], ring[i], ring[i + 1])
        if angle < config.min_spike_angle_deg:
            found = True
            diagnostics.failed(rule, f"{label}: Spike vertex detected ({angle:.1f}°)")
    if not found:
        diagnostics.passed(rule, f"{label}: No spike vertices")


def _check_straight_lines(
    positions: Sequence[object],
    label: str,
    diagnostics: Diagnostics,
) -> None:
    rule = f"{label} straight lines"
    # A closed triangle is the one short ring that is acceptable
    if len(positions) == MIN_RING_POSITIONS and positions_equal(positions[0], positions[-1]):
        diagnostics.passed(rule, f"{label}: Polygon is a closed triangle (acceptable)")
        return
    if len(positions) <= MIN_RING_POSITIONS:
        diagnostics.failed(
            rule,
            f"{label}: Polygon may have excessive straight lines (not enough points for curves)",
        )
        return
    diagnostics.passed(rule, f"{label}: Polygon has enough points for curves")
