"""Flat pattern length calculator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from .. import config
from ..core.formatting import round_by_unit
from ..core.parsing import is_blank, is_valid_number, parse_numeric_input
from ..core.sheet_metal import flat_pattern_length, validate_flat_pattern
from ..models.bend_data import FlatPatternResult, Segment
from ..models.results import CalculationResult
from ..models.types import UnitSystem
from .base import SheetMetalCalculator, UnknownFieldError, convert_field_text

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SegmentFields:
    """Raw text of one segment row."""
    length: str = ''
    angle_deg: str = ''
    inside_radius: str = ''  # Blank uses the default inside radius

    def to_segment(self) -> Segment:
        return Segment(
            length=parse_numeric_input(self.length),
            angle_deg=parse_numeric_input(self.angle_deg),
            inside_radius=None if is_blank(self.inside_radius) else parse_numeric_input(self.inside_radius),
        )


SEGMENT_FIELDS: tuple[str, ...] = ('length', 'angle_deg', 'inside_radius')


class FlatPattern(SheetMetalCalculator):
    """Developed length of a part made of straight runs and bends.

    Each segment row holds a straight length and the angle of the bend
    that follows it. A segment may override the default inside radius.
    """

    calculator_id: ClassVar[str] = 'flat-pattern'
    title: ClassVar[str] = 'Flat Pattern Length'
    FIELDS: ClassVar[tuple[str, ...]] = ('thickness', 'default_inside_radius', 'k_factor')
    DIMENSION_FIELDS: ClassVar[tuple[str, ...]] = ('thickness', 'default_inside_radius')
    INVALID_MESSAGE: ClassVar[str] = config.MSG_FLAT_PATTERN

    def __init__(self) -> None:
        self._segments: list[SegmentFields] = [SegmentFields()]
        self._pattern: FlatPatternResult | None = None
        super().__init__()

    # -- segment rows -----------------------------------------------------

    @property
    def segments(self) -> list[SegmentFields]:
        """Copies of the segment rows, in order."""
        return [SegmentFields(s.length, s.angle_deg, s.inside_radius) for s in self._segments]

    def add_segment(self) -> None:
        """Append an empty segment row."""
        self._segments.append(SegmentFields())
        self._on_change()

    def remove_segment(self, index: int) -> None:
        """
        Remove a segment row.

        Raises:
            IndexError: If no row exists at index
        """
        if not 0 <= index < len(self._segments):
            raise IndexError(f"No segment at index {index} ({len(self._segments)} segments)")
        del self._segments[index]
        self._on_change()

    def update_segment(self, index: int, name: str, text: str) -> None:
        """
        Replace the text of one field of a segment row.

        Args:
            index: 0-based row index
            name: 'length', 'angle_deg' or 'inside_radius'
            text: New field text
        """
        if name not in SEGMENT_FIELDS:
            raise UnknownFieldError(f"{self.calculator_id}: unknown segment field {name!r}")
        if not 0 <= index < len(self._segments):
            raise IndexError(f"No segment at index {index} ({len(self._segments)} segments)")
        setattr(self._segments[index], name, text)
        self._on_change()

    def _convert_extra_fields(self, from_unit: UnitSystem, to_unit: UnitSystem) -> None:
        for row in self._segments:
            row.length = convert_field_text(row.length, from_unit, to_unit)
            row.inside_radius = convert_field_text(row.inside_radius, from_unit, to_unit)

    # -- derivation -------------------------------------------------------

    def has_input(self) -> bool:
        # K-factor is prefilled by the preset, so it does not count as input here
        if not is_blank(self.get_field('thickness')) or not is_blank(self.get_field('default_inside_radius')):
            return True
        return any(
            not is_blank(row.length) or not is_blank(row.angle_deg) or not is_blank(row.inside_radius)
            for row in self._segments
        )

    def _default_radius(self) -> float | None:
        text = self.get_field('default_inside_radius')
        return None if is_blank(text) else parse_numeric_input(text)

    def _parsed_segments(self) -> list[Segment]:
        return [row.to_segment() for row in self._segments]

    def _develop(self) -> FlatPatternResult:
        return flat_pattern_length(
            self._parsed_segments(),
            thickness=self.value('thickness'),
            k_factor=self.value('k_factor'),
            default_radius=self._default_radius(),
        )

    def is_valid(self) -> bool:
        valid = validate_flat_pattern(
            self._parsed_segments(),
            thickness=self.value('thickness'),
            k_factor=self.value('k_factor'),
            default_radius=self._default_radius(),
        )
        # Long enough runs can still sum past the float range
        return valid and is_valid_number(self._develop().flat_length)

    def _rejection_detail(self) -> str:
        return f"{self.INVALID_MESSAGE} ({len(self._segments)} segments)"

    def _on_change(self) -> None:
        super()._on_change()
        if self._result is None:
            self._pattern = None

    def _compute(self) -> CalculationResult:
        pattern = self._develop()
        self._pattern = pattern
        unit = self.unit_system
        logger.debug(
            f"{self.calculator_id}: {len(self._segments)} segments, "
            f"{len(pattern.bends)} bends, flat length {pattern.flat_length}"
        )
        return CalculationResult(
            value=round_by_unit(pattern.flat_length, unit),
            unit=self.units.unit_symbol,
            details={
                'straight_total': round_by_unit(pattern.total_straight, unit),
                'bend_allowance_total': round_by_unit(pattern.total_bend_allowance, unit),
            },
        )

    def calculate(self) -> CalculationResult | None:
        result = super().calculate()
        if result is None:
            self._pattern = None
        return result

    @property
    def pattern(self) -> FlatPatternResult | None:
        """Numeric breakdown behind the current result, if any."""
        return self._pattern

    def bend_rows(self) -> list[dict[str, str]]:
        """Per-bend breakdown formatted for display, in segment order."""
        if self._pattern is None:
            return []
        unit = self.unit_system
        return [
            {
                'index': str(bend.index),
                'angle_deg': f"{bend.angle_deg:g}",
                'radius': round_by_unit(bend.radius, unit),
                'bend_allowance': round_by_unit(bend.bend_allowance, unit),
            }
            for bend in self._pattern.bends
        ]

    def reset(self) -> None:
        self._segments = [SegmentFields()]
        super().reset()
        self._pattern = None
