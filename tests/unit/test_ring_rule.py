"""Tests for the ring rule (exterior ring topology and shape quality).

Covers:
- Structural gates: array-ness and minimum size stop the ring checks
- Closure under tolerance
- Duplicate consecutive points, with optional legacy zero-length wording
- Self-intersection, stop-at-first and report-all modes
- Spike vertices below the angle threshold
- The straight-line heuristic and its closed-triangle exemption
"""

from __future__ import annotations

from plot_validator.core.config import ValidatorConfig
from plot_validator.models.results import ValidationResult
from plot_validator.rules import Diagnostics, check_ring, crossing_edges
from tests.samples import (
    BLUNT_TIP_RING,
    BOWTIE_RING,
    PENTAGRAM_RING,
    SPIKE_RING,
    SQUARE_RING,
    TRIANGLE_RING,
)


def _check(ring: object, config: ValidatorConfig | None = None) -> ValidationResult:
    diagnostics = Diagnostics()
    check_ring(ring, 0, diagnostics, config or ValidatorConfig())
    return diagnostics.to_result()


def _rules(result: ValidationResult) -> list[str]:
    return [step.rule for step in result.steps]


def _failed_rules(result: ValidationResult) -> list[str]:
    return [step.rule for step in result.failed_steps]


class TestRingStructure:
    """Array-ness and minimum point count."""

    def test_rectangle_is_valid(self) -> None:
        result = _check(SQUARE_RING)
        assert result.is_valid
        assert result.errors == ()

    def test_not_an_array(self) -> None:
        result = _check({"ring": SQUARE_RING})
        assert result.errors == ("Feature 0: Ring must be an array of positions",)
        assert _rules(result) == ["Feature 0 ring array"]

    def test_fewer_than_four_points(self) -> None:
        result = _check([[0, 0], [1, 0], [0, 0]])
        assert not result.is_valid
        assert result.errors == ("Feature 0: Ring must have at least 4 points",)

    def test_short_ring_skips_shape_checks(self) -> None:
        result = _check([[0, 0], [1, 1], [0, 0]])
        rules = _rules(result)
        assert "Feature 0 self-intersection" not in rules
        assert "Feature 0 spike vertex" not in rules
        assert "Feature 0 ring closure" not in rules

    def test_check_order(self) -> None:
        rules = _rules(_check(SQUARE_RING))
        ring_rules = [rule for rule in rules if "Point" not in rule]
        assert ring_rules == [
            "Feature 0 ring array",
            "Feature 0 ring points",
            "Feature 0 ring closure",
            "Feature 0 self-intersection",
            "Feature 0 spike vertex",
            "Feature 0 straight lines",
        ]
        # Coordinate steps sit between closure and the intersection check
        first_point = rules.index("Feature 0 Point 0 format")
        assert rules.index("Feature 0 ring closure") < first_point
        assert first_point < rules.index("Feature 0 self-intersection")


class TestRingClosure:
    """First and last positions must coincide."""

    def test_open_ring_reported(self) -> None:
        ring = [[0, 0], [0, 1], [1, 1], [1, 0], [0.5, 0]]
        result = _check(ring)
        assert "Feature 0: Ring must be closed (first/last points identical)" in result.errors

    def test_open_ring_continues_checking(self) -> None:
        ring = [[0, 0], [0, 1], [1, 1], [1, 0], [0.5, 0]]
        assert "Feature 0 straight lines" in _rules(_check(ring))

    def test_closure_within_tolerance(self) -> None:
        ring = [[0, 0], [0, 1], [1, 1], [1, 0], [0.0000001, 0]]
        assert "Feature 0 ring closure" not in _failed_rules(_check(ring))


class TestDuplicatePoints:
    """Adjacent equal positions."""

    def test_appended_duplicate_keeps_closure(self) -> None:
        ring = [*SQUARE_RING, SQUARE_RING[-1]]
        result = _check(ring)
        assert "Feature 0 ring closure" not in _failed_rules(result)
        assert result.errors == ("Feature 0: Duplicate consecutive points at 4 and 5",)

    def test_each_pair_reported(self) -> None:
        ring = [[0, 0], [0, 0], [0, 1], [1, 1], [1, 1], [1, 0], [0, 0]]
        result = _check(ring)
        duplicates = [e for e in result.errors if "Duplicate consecutive" in e]
        assert duplicates == [
            "Feature 0: Duplicate consecutive points at 0 and 1",
            "Feature 0: Duplicate consecutive points at 3 and 4",
        ]

    def test_clean_ring_records_no_duplicate_step(self) -> None:
        rules = _rules(_check(SQUARE_RING, ValidatorConfig(report_zero_length_edges=True)))
        assert "Feature 0 duplicate points" not in rules
        assert "Feature 0 zero-length edge" not in rules

    def test_duplicates_come_before_coordinate_steps(self) -> None:
        rules = _rules(_check([*SQUARE_RING, SQUARE_RING[-1]]))
        assert rules.index("Feature 0 duplicate points") < rules.index("Feature 0 Point 0 format")

    def test_zero_length_edges_off_by_default(self) -> None:
        ring = [*SQUARE_RING, SQUARE_RING[-1]]
        assert all("zero-length" not in rule for rule in _rules(_check(ring)))

    def test_legacy_zero_length_wording(self) -> None:
        ring = [*SQUARE_RING, SQUARE_RING[-1]]
        result = _check(ring, ValidatorConfig(report_zero_length_edges=True))
        assert result.errors == (
            "Feature 0: Duplicate consecutive points at 4 and 5",
            "Feature 0: Zero-length edge at points 4 and 5",
        )


class TestSelfIntersection:
    """Crossing non-adjacent edges."""

    def test_bowtie_detected(self) -> None:
        result = _check(BOWTIE_RING)
        assert result.errors == ("Feature 0: Self-intersection detected",)

    def test_reversal_preserves_verdict(self) -> None:
        assert not _check(list(reversed(BOWTIE_RING))).is_valid
        assert _check(list(reversed(SQUARE_RING))).is_valid

    def test_closing_seam_not_a_crossing(self) -> None:
        assert list(crossing_edges(TRIANGLE_RING)) == []
        assert list(crossing_edges(SQUARE_RING)) == []

    def test_pentagram_crossings(self) -> None:
        assert list(crossing_edges(PENTAGRAM_RING)) == [(0, 2), (0, 3), (1, 3), (1, 4), (2, 4)]

    def test_stops_at_first_by_default(self) -> None:
        result = _check(PENTAGRAM_RING)
        assert _failed_rules(result) == ["Feature 0 self-intersection"]

    def test_report_all_records_each_pair(self) -> None:
        result = _check(PENTAGRAM_RING, ValidatorConfig(report_all_self_intersections=True))
        assert len(result.failed_steps) == 5
        assert result.errors[0] == "Feature 0: Self-intersection detected between edges 0 and 2"
        assert result.errors[-1] == "Feature 0: Self-intersection detected between edges 2 and 4"

    def test_malformed_position_skips_shape_checks(self) -> None:
        ring = [[0, 0], [1, 1], ["x", 1], [1, 0], [0, 0]]
        result = _check(ring)
        rules = _rules(result)
        assert "Feature 0 self-intersection" not in rules
        assert "Feature 0 spike vertex" not in rules
        assert "Feature 0 straight lines" in rules
        assert result.errors == ("Feature 0 Point 2: Invalid longitude 'x'",)


class TestSpikeVertices:
    """Interior angles below the spike threshold."""

    def test_two_degree_spike_detected(self) -> None:
        result = _check(SPIKE_RING)
        assert result.errors == ("Feature 0: Spike vertex detected (2.0°)",)

    def test_blunt_tip_passes(self) -> None:
        result = _check(BLUNT_TIP_RING)
        assert result.is_valid

    def test_threshold_configurable(self) -> None:
        result = _check(BLUNT_TIP_RING, ValidatorConfig(min_spike_angle_deg=15.0))
        assert result.errors == ("Feature 0: Spike vertex detected (11.4°)",)

    def test_duplicate_point_is_not_a_spike(self) -> None:
        ring = [*SQUARE_RING, SQUARE_RING[-1]]
        assert "Feature 0 spike vertex" not in _failed_rules(_check(ring))


class TestStraightLines:
    """Closed triangles pass; other rings need more than four points."""

    def test_closed_triangle_exempt(self) -> None:
        result = _check(TRIANGLE_RING)
        assert result.is_valid
        assert result.steps[-1].message == "Feature 0: Polygon is a closed triangle (acceptable)"

    def test_open_four_point_ring_fails(self) -> None:
        result = _check([[0, 0], [1, 0], [1, 1], [0, 1]])
        assert _failed_rules(result) == ["Feature 0 ring closure", "Feature 0 straight lines"]

    def test_five_points_pass(self) -> None:
        result = _check(SQUARE_RING)
        assert result.steps[-1].message == "Feature 0: Polygon has enough points for curves"
