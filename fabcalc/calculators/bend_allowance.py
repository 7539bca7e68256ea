"""Bend allowance calculator."""

from __future__ import annotations

from typing import ClassVar

from ..core.formatting import round_by_unit
from ..core.parsing import is_valid_number
from ..core.sheet_metal import bend_allowance, validate_bend_parameters
from ..models.results import CalculationResult
from .base import SheetMetalCalculator


class BendAllowance(SheetMetalCalculator):
    """Arc length of the neutral axis through a single bend."""

    calculator_id: ClassVar[str] = 'bend-allowance'
    title: ClassVar[str] = 'Bend Allowance'
    FIELDS: ClassVar[tuple[str, ...]] = ('angle_deg', 'inside_radius', 'thickness', 'k_factor')
    DIMENSION_FIELDS: ClassVar[tuple[str, ...]] = ('inside_radius', 'thickness')

    def is_valid(self) -> bool:
        params = self.bend_parameters()
        return validate_bend_parameters(params) and is_valid_number(bend_allowance(params))

    def _compute(self) -> CalculationResult:
        ba = bend_allowance(self.bend_parameters())
        return CalculationResult(
            value=round_by_unit(ba, self.unit_system),
            unit=self.units.unit_symbol,
        )
