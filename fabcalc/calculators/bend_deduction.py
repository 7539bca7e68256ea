"""Bend deduction calculator."""

from __future__ import annotations

from typing import ClassVar

from ..core.formatting import round_by_unit
from ..core.parsing import is_valid_number
from ..core.sheet_metal import (
    bend_allowance,
    bend_deduction,
    setback,
    validate_bend_parameters,
)
from ..models.results import CalculationResult
from .base import SheetMetalCalculator


class BendDeduction(SheetMetalCalculator):
    """Length to subtract from the flange sum for a single bend.

    The setback and bend allowance the deduction is built from are
    reported under details.
    """

    calculator_id: ClassVar[str] = 'bend-deduction'
    title: ClassVar[str] = 'Bend Deduction'
    FIELDS: ClassVar[tuple[str, ...]] = ('angle_deg', 'inside_radius', 'thickness', 'k_factor')
    DIMENSION_FIELDS: ClassVar[tuple[str, ...]] = ('inside_radius', 'thickness')

    def is_valid(self) -> bool:
        params = self.bend_parameters()
        if not validate_bend_parameters(params):
            return False
        return is_valid_number(setback(params)) and is_valid_number(bend_deduction(params))

    def _compute(self) -> CalculationResult:
        params = self.bend_parameters()
        unit = self.unit_system
        return CalculationResult(
            value=round_by_unit(bend_deduction(params), unit),
            unit=self.units.unit_symbol,
            details={
                'setback': round_by_unit(setback(params), unit),
                'bend_allowance': round_by_unit(bend_allowance(params), unit),
            },
        )
