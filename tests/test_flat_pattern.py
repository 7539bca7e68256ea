"""
Tests for multi-segment flat pattern calculations.

Run with: pytest tests/test_flat_pattern.py -v
"""
import math

import pytest

from fabcalc.core.sheet_metal import (
    flat_pattern_length,
    resolve_segment_radius,
    validate_flat_pattern,
)
from fabcalc.models import BendBreakdown, FlatPatternResult, Segment


class TestResolveSegmentRadius:
    """Test per-segment radius resolution order."""

    def test_override_wins(self) -> None:
        assert resolve_segment_radius(Segment(10.0, 90.0, 2.0), 1.0) == 2.0

    def test_default_when_no_override(self) -> None:
        assert resolve_segment_radius(Segment(10.0, 90.0), 1.0) == 1.0

    def test_default_when_override_not_finite(self) -> None:
        assert resolve_segment_radius(Segment(10.0, 90.0, math.nan), 1.5) == 1.5

    def test_zero_when_nothing_usable(self) -> None:
        assert resolve_segment_radius(Segment(10.0, 90.0), None) == 0.0
        assert resolve_segment_radius(Segment(10.0, 90.0), math.nan) == 0.0

    def test_zero_override_is_kept(self) -> None:
        assert resolve_segment_radius(Segment(10.0, 90.0, 0.0), 3.0) == 0.0


class TestFlatPatternLength:
    """Test developed length calculation."""

    def test_straight_then_bend(self) -> None:
        segments = [Segment(10.0, 0.0), Segment(20.0, 90.0, 2.0)]
        result = flat_pattern_length(segments, thickness=1.0, k_factor=0.4, default_radius=1.0)

        expected_ba = (math.pi / 2) * (2 + 0.4)
        assert result.total_straight == 30.0
        assert result.total_bend_allowance == pytest.approx(expected_ba)
        assert result.total_bend_allowance == pytest.approx(3.7699111843)
        assert result.flat_length == pytest.approx(30.0 + expected_ba)
        assert result.flat_length == pytest.approx(33.7699111843)

    def test_breakdown_only_lists_bends(self) -> None:
        segments = [Segment(10.0, 0.0), Segment(20.0, 90.0, 2.0)]
        result = flat_pattern_length(segments, thickness=1.0, k_factor=0.4, default_radius=1.0)

        assert len(result.bends) == 1
        bend = result.bends[0]
        assert bend.index == 2
        assert bend.angle_deg == 90.0
        assert bend.radius == 2.0
        assert bend.bend_allowance == pytest.approx(3.7699111843)

    def test_breakdown_in_input_order(self) -> None:
        segments = [
            Segment(5.0, 45.0),
            Segment(5.0, 0.0),
            Segment(5.0, 90.0, 3.0),
            Segment(5.0, 30.0),
        ]
        result = flat_pattern_length(segments, thickness=2.0, k_factor=0.5, default_radius=1.0)

        assert [b.index for b in result.bends] == [1, 3, 4]
        assert [b.radius for b in result.bends] == [1.0, 3.0, 1.0]
        assert result.total_bend_allowance == pytest.approx(sum(b.bend_allowance for b in result.bends))

    def test_sums_are_consistent(self) -> None:
        segments = [Segment(12.5, 90.0), Segment(7.5, 120.0), Segment(3.0, 0.0)]
        result = flat_pattern_length(segments, thickness=1.5, k_factor=0.33, default_radius=2.0)
        assert result.flat_length == pytest.approx(result.total_straight + result.total_bend_allowance)

    def test_all_straight(self) -> None:
        segments = [Segment(10.0, 0.0), Segment(15.0, 0.0)]
        result = flat_pattern_length(segments, thickness=1.0, k_factor=0.4, default_radius=1.0)
        assert result == FlatPatternResult(
            total_straight=25.0,
            total_bend_allowance=0.0,
            flat_length=25.0,
            bends=[],
        )

    def test_empty_segments(self) -> None:
        result = flat_pattern_length([], thickness=1.0, k_factor=0.4, default_radius=1.0)
        assert result.flat_length == 0.0
        assert result.bends == []

    def test_blank_default_uses_zero_for_unset_segments(self) -> None:
        segments = [Segment(10.0, 90.0), Segment(10.0, 90.0, 1.0)]
        result = flat_pattern_length(segments, thickness=1.0, k_factor=0.5, default_radius=None)
        assert result.bends[0].radius == 0.0
        assert result.bends[0].bend_allowance == pytest.approx(math.pi / 2 * 0.5)


class TestValidateFlatPattern:
    """Test flat pattern validation gate."""

    def test_valid(self) -> None:
        segments = [Segment(10.0, 0.0), Segment(20.0, 90.0, 2.0)]
        assert validate_flat_pattern(segments, 1.0, 0.4, 1.0) is True

    def test_no_segments(self) -> None:
        assert validate_flat_pattern([], 1.0, 0.4, 1.0) is False

    def test_zero_thickness(self) -> None:
        assert validate_flat_pattern([Segment(10.0, 90.0)], 0.0, 0.4, 1.0) is False

    def test_k_factor_out_of_range(self) -> None:
        assert validate_flat_pattern([Segment(10.0, 90.0)], 1.0, 1.5, 1.0) is False

    def test_negative_length(self) -> None:
        assert validate_flat_pattern([Segment(-1.0, 90.0)], 1.0, 0.4, 1.0) is False

    def test_zero_length_allowed(self) -> None:
        assert validate_flat_pattern([Segment(0.0, 90.0)], 1.0, 0.4, 1.0) is True

    def test_angle_out_of_range(self) -> None:
        assert validate_flat_pattern([Segment(10.0, 181.0)], 1.0, 0.4, 1.0) is False

    def test_nan_length(self) -> None:
        assert validate_flat_pattern([Segment(math.nan, 90.0)], 1.0, 0.4, 1.0) is False

    def test_blank_default_with_override(self) -> None:
        """A blank default is fine once some segment carries its own radius."""
        segments = [Segment(10.0, 90.0, 2.0)]
        assert validate_flat_pattern(segments, 1.0, 0.4, None) is True

    def test_blank_default_without_override(self) -> None:
        assert validate_flat_pattern([Segment(10.0, 90.0)], 1.0, 0.4, None) is False

    def test_blank_default_with_partial_overrides(self) -> None:
        """Segments without an override still need a usable default."""
        segments = [Segment(10.0, 90.0, 2.0), Segment(10.0, 90.0)]
        assert validate_flat_pattern(segments, 1.0, 0.4, None) is False

    def test_negative_default(self) -> None:
        assert validate_flat_pattern([Segment(10.0, 90.0)], 1.0, 0.4, -1.0) is False

    def test_unparsable_default(self) -> None:
        assert validate_flat_pattern([Segment(10.0, 90.0, 2.0)], 1.0, 0.4, math.nan) is False

    def test_negative_override(self) -> None:
        assert validate_flat_pattern([Segment(10.0, 90.0, -2.0)], 1.0, 0.4, 1.0) is False

    def test_nan_override(self) -> None:
        assert validate_flat_pattern([Segment(10.0, 90.0, math.nan)], 1.0, 0.4, 1.0) is False


class TestBendBreakdownRepr:
    """Test BendBreakdown display."""

    def test_repr(self) -> None:
        bend = BendBreakdown(index=2, angle_deg=90.0, radius=2.0, bend_allowance=3.7699111843)
        assert repr(bend) == "BendBreakdown(#2, angle=90.0, R=2, BA=3.7699)"
