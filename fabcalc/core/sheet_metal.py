"""Sheet-metal bend calculations.

The formulas assume their inputs already passed validate_bend_parameters()
(or validate_flat_pattern() for multi-segment parts). They do no bounds
checking of their own, so out-of-range input produces meaningless numbers
rather than errors.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from ..models.bend_data import BendBreakdown, BendParameters, FlatPatternResult, Segment
from ..models.types import KFactorPresetKey
from .limits import (
    ANGLE_MAX_DEG,
    ANGLE_MIN_DEG,
    K_FACTOR_MAX,
    K_FACTOR_MIN,
    LENGTH_MIN,
    RADIUS_MIN,
)
from .parsing import is_in_range

# Typical K-factors for air bending; 'none' leaves the field as entered
K_FACTOR_PRESETS: Mapping[KFactorPresetKey, float | None] = MappingProxyType({
    'none': None,
    'mildSteel': 0.40,
    'aluminum': 0.33,
    'stainless': 0.45,
})


def bend_allowance(params: BendParameters) -> float:
    """
    Calculate bend allowance, the arc length of the neutral axis.

    BA = theta * (R + K * T), with theta in radians.
    """
    theta = math.radians(params.angle_deg)
    return theta * (params.inside_radius + params.k_factor * params.thickness)


def setback(params: BendParameters) -> float:
    """
    Calculate outside setback, the distance from the bend tangent to the mold line.

    SB = (R + T) * tan(theta / 2)
    """
    return (params.inside_radius + params.thickness) * math.tan(math.radians(params.angle_deg) / 2)


def bend_deduction(params: BendParameters) -> float:
    """
    Calculate bend deduction, the length removed from the sum of the flange lengths.

    BD = 2 * SB - BA
    """
    return 2 * setback(params) - bend_allowance(params)


def _radius_ok(radius: float) -> bool:
    return math.isfinite(radius) and radius >= RADIUS_MIN


def bend_parameter_errors(params: BendParameters) -> list[str]:
    """
    List every out-of-range field of a parameter set.

    Returns:
        One message per failing field, empty if all fields are valid
    """
    errors: list[str] = []
    if not is_in_range(params.angle_deg, ANGLE_MIN_DEG, ANGLE_MAX_DEG):
        errors.append(
            f"angle must be between {ANGLE_MIN_DEG:g} and {ANGLE_MAX_DEG:g} degrees, "
            f"got {params.angle_deg}"
        )
    if not _radius_ok(params.inside_radius):
        errors.append(f"inside radius cannot be negative, got {params.inside_radius}")
    if not (math.isfinite(params.thickness) and params.thickness > 0):
        errors.append(f"thickness must be positive, got {params.thickness}")
    if not is_in_range(params.k_factor, K_FACTOR_MIN, K_FACTOR_MAX):
        errors.append(
            f"K-factor must be between {K_FACTOR_MIN:g} and {K_FACTOR_MAX:g}, "
            f"got {params.k_factor}"
        )
    return errors


def validate_bend_parameters(params: BendParameters) -> bool:
    """
    Check every field of a parameter set against its range.

    angle in [0, 180], inside radius >= 0, thickness > 0 and K in [0, 1].
    A single failing field invalidates the whole set.
    """
    return not bend_parameter_errors(params)


def resolve_segment_radius(segment: Segment, default_radius: float | None) -> float:
    """
    Pick the inside radius used for a segment's bend.

    The segment's own radius wins when it is set and finite, otherwise the
    pattern default applies. Falls back to 0 when neither is usable.
    """
    if segment.inside_radius is not None and math.isfinite(segment.inside_radius):
        return segment.inside_radius
    if default_radius is not None and math.isfinite(default_radius):
        return default_radius
    return 0.0


def validate_flat_pattern(
    segments: Sequence[Segment],
    thickness: float,
    k_factor: float,
    default_radius: float | None,
) -> bool:
    """
    Check a multi-segment part before computing its flat length.

    Args:
        segments: Ordered segments of the part
        thickness: Material thickness (must be > 0)
        k_factor: Neutral axis ratio (0 to 1)
        default_radius: Inside radius for segments without their own,
            or None when the field is blank

    Returns:
        True if every global field and every segment is in range. A blank
        default radius is accepted only if some segment sets its own radius.
    """
    if not (math.isfinite(thickness) and thickness > 0):
        return False
    if not is_in_range(k_factor, K_FACTOR_MIN, K_FACTOR_MAX):
        return False
    if not segments:
        return False

    has_override = any(s.inside_radius is not None for s in segments)
    if not (default_radius is None and has_override):
        if default_radius is None or not _radius_ok(default_radius):
            return False

    for segment in segments:
        if not (math.isfinite(segment.length) and segment.length >= LENGTH_MIN):
            return False
        if not is_in_range(segment.angle_deg, ANGLE_MIN_DEG, ANGLE_MAX_DEG):
            return False
        radius = segment.inside_radius if segment.inside_radius is not None else default_radius
        if radius is None or not _radius_ok(radius):
            return False
    return True


def flat_pattern_length(
    segments: Sequence[Segment],
    thickness: float,
    k_factor: float,
    default_radius: float | None,
) -> FlatPatternResult:
    """
    Develop a multi-segment part into its flat length.

    Every segment contributes its straight length. Segments with an angle
    above zero also contribute the bend allowance of their bend; a zero
    angle is a plain straight run.

    Args:
        segments: Ordered segments of the part
        thickness: Material thickness
        k_factor: Neutral axis ratio
        default_radius: Inside radius for segments without their own

    Returns:
        FlatPatternResult with the straight and bend sums and one
        BendBreakdown per bend, in segment order
    """
    total_straight = 0.0
    total_ba = 0.0
    bends: list[BendBreakdown] = []

    for i, segment in enumerate(segments):
        total_straight += segment.length
        if segment.angle_deg > 0:
            radius = resolve_segment_radius(segment, default_radius)
            ba = bend_allowance(BendParameters(
                angle_deg=segment.angle_deg,
                inside_radius=radius,
                thickness=thickness,
                k_factor=k_factor,
            ))
            total_ba += ba
            bends.append(BendBreakdown(
                index=i + 1,
                angle_deg=segment.angle_deg,
                radius=radius,
                bend_allowance=ba,
            ))

    return FlatPatternResult(
        total_straight=total_straight,
        total_bend_allowance=total_ba,
        flat_length=total_straight + total_ba,
        bends=bends,
    )
