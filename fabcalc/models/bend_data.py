"""Sheet-metal bend data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class BendParameters:
    """Inputs shared by every single-bend formula.

    Lengths are in the active unit system; the angle is in degrees.
    """
    angle_deg: float
    inside_radius: float
    thickness: float
    k_factor: float


@dataclass(frozen=True, slots=True)
class Segment:
    """One straight run of a flat pattern, followed by an optional bend."""
    length: float
    angle_deg: float
    inside_radius: float | None = None  # Overrides the pattern's default radius


@dataclass(frozen=True, slots=True)
class BendBreakdown:
    """Bend allowance contributed by a single segment."""

    index: int  # 1-based position of the segment
    angle_deg: float
    radius: float
    bend_allowance: float

    def __repr__(self) -> str:
        return (
            f"BendBreakdown(#{self.index}, angle={self.angle_deg:.1f}, "
            f"R={self.radius:g}, BA={self.bend_allowance:.4f})"
        )


@dataclass(frozen=True, slots=True)
class FlatPatternResult:
    """Developed length of a multi-segment part."""
    total_straight: float
    total_bend_allowance: float
    flat_length: float
    bends: list[BendBreakdown] = field(default_factory=list)
