"""Length converter calculator."""

from __future__ import annotations

from typing import ClassVar

from .. import config
from ..core.conversion import LENGTH_TO_METERS, UnknownUnitError, convert_length
from ..core.formatting import format_number
from ..core.parsing import is_valid_number
from ..models.results import CalculationResult
from ..models.types import LengthUnit
from .base import FormCalculator


def _check_length_unit(unit: str) -> None:
    if unit not in LENGTH_TO_METERS:
        raise UnknownUnitError(f"Unknown length unit: {unit!r}")


class LengthConverter(FormCalculator):
    """Convert a length between two units as the value is typed."""

    calculator_id: ClassVar[str] = 'length-converter'
    title: ClassVar[str] = 'Length Converter'
    FIELDS: ClassVar[tuple[str, ...]] = ('value',)

    def __init__(
        self,
        from_unit: LengthUnit = config.DEFAULT_LENGTH_FROM,
        to_unit: LengthUnit = config.DEFAULT_LENGTH_TO,
    ) -> None:
        _check_length_unit(from_unit)
        _check_length_unit(to_unit)
        super().__init__()
        self._from_unit = from_unit
        self._to_unit = to_unit

    @property
    def from_unit(self) -> LengthUnit:
        return self._from_unit

    @property
    def to_unit(self) -> LengthUnit:
        return self._to_unit

    def set_from_unit(self, unit: LengthUnit) -> None:
        _check_length_unit(unit)
        self._from_unit = unit
        self._on_change()

    def set_to_unit(self, unit: LengthUnit) -> None:
        _check_length_unit(unit)
        self._to_unit = unit
        self._on_change()

    def swap_units(self) -> None:
        """Exchange the source and target units."""
        self._from_unit, self._to_unit = self._to_unit, self._from_unit
        self._on_change()

    def _converted(self) -> float:
        return convert_length(self.value('value'), self._from_unit, self._to_unit)

    def is_valid(self) -> bool:
        # Huge values can overflow when converted to a much smaller unit
        return is_valid_number(self.value('value')) and is_valid_number(self._converted())

    def _compute(self) -> CalculationResult:
        converted = self._converted()
        return CalculationResult(
            value=format_number(converted, config.CONVERSION_DIGITS),
            unit=self._to_unit,
        )
