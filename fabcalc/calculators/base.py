"""Form state shared by every calculator.

A calculator holds the raw text of its fields and derives a result from
them. Live calculators re-derive on every edit; explicit calculators only
on calculate(), and any edit clears a previously shown result.
"""

from __future__ import annotations

import logging
import math
from typing import ClassVar

from .. import config
from ..core.conversion import convert_dimension
from ..core.formatting import number_to_text
from ..core.parsing import is_blank, parse_numeric_input
from ..core.sheet_metal import K_FACTOR_PRESETS, bend_parameter_errors
from ..models.bend_data import BendParameters
from ..models.results import CalculationResult
from ..models.types import KFactorPresetKey, TriggerMode, UnitSystem
from ..models.units import UnitConfig, get_unit_config

logger = logging.getLogger(__name__)


class UnknownFieldError(KeyError):
    """Raised when a form field name is not defined by the calculator."""

    pass


class FormCalculator:
    """Base class for a calculator form.

    Subclasses declare FIELDS and implement is_valid() and _compute().
    _compute() is only ever called after is_valid() returned True.
    """

    calculator_id: ClassVar[str] = ''
    title: ClassVar[str] = ''
    trigger: ClassVar[TriggerMode] = 'live'
    FIELDS: ClassVar[tuple[str, ...]] = ()
    INVALID_MESSAGE: ClassVar[str] = config.MSG_NUMBER

    def __init__(self) -> None:
        self._fields: dict[str, str] = {name: '' for name in self.FIELDS}
        self._result: CalculationResult | None = None

    # -- field access -----------------------------------------------------

    def get_field(self, name: str) -> str:
        """Get the raw text of a field."""
        if name not in self._fields:
            raise UnknownFieldError(f"{self.calculator_id}: unknown field {name!r}")
        return self._fields[name]

    def set_field(self, name: str, text: str) -> None:
        """
        Replace the raw text of a field.

        Args:
            name: Field name from FIELDS
            text: New field text, stored as entered
        """
        if name not in self._fields:
            raise UnknownFieldError(f"{self.calculator_id}: unknown field {name!r}")
        self._fields[name] = text
        self._on_change()

    def value(self, name: str) -> float:
        """Parse a field's text (NaN if it holds no number)."""
        return parse_numeric_input(self.get_field(name))

    @property
    def fields(self) -> dict[str, str]:
        """Snapshot of all field texts."""
        return dict(self._fields)

    def has_input(self) -> bool:
        """Check whether any field holds text."""
        return any(not is_blank(text) for text in self._fields.values())

    # -- derivation -------------------------------------------------------

    def is_valid(self) -> bool:
        raise NotImplementedError

    def _compute(self) -> CalculationResult:
        raise NotImplementedError

    def _rejection_detail(self) -> str:
        return self.INVALID_MESSAGE

    def _derive(self) -> CalculationResult | None:
        if not self.is_valid():
            return None
        return self._compute()

    def _on_change(self) -> None:
        """Refresh or clear the result after any input changes."""
        if self.trigger == 'live':
            self._result = self._derive()
        else:
            self._result = None

    def calculate(self) -> CalculationResult | None:
        """
        Derive the result from the current input.

        Returns:
            The new result, or None if the input is invalid
        """
        self._result = self._derive()
        if self._result is None:
            logger.debug(f"{self.calculator_id}: calculation rejected: {self._rejection_detail()}")
        return self._result

    @property
    def result(self) -> CalculationResult | None:
        """The result currently on display, if any."""
        return self._result

    @property
    def state(self) -> str:
        """'result' while a result is shown, otherwise 'idle'."""
        return 'result' if self._result is not None else 'idle'

    @property
    def error(self) -> str:
        """Validation message for invalid, non-empty input ('' otherwise)."""
        if self.has_input() and not self.is_valid():
            return self.INVALID_MESSAGE
        return ''

    def reset(self) -> None:
        """Clear every field and the result."""
        for name in self._fields:
            self._fields[name] = ''
        self._result = None


def convert_field_text(text: str, from_unit: UnitSystem, to_unit: UnitSystem) -> str:
    """
    Convert the number in a dimensional field to another unit system.

    Blank or unparsable text is returned unchanged.
    """
    converted = convert_dimension(parse_numeric_input(text), from_unit, to_unit)
    if not math.isfinite(converted):
        return text
    return number_to_text(converted)


class SheetMetalCalculator(FormCalculator):
    """Explicit-trigger calculator with a mm/in toggle and K-factor presets.

    Fields named in DIMENSION_FIELDS are converted when the unit system
    changes; angle and K-factor fields are unit independent.
    """

    trigger: ClassVar[TriggerMode] = 'explicit'
    DIMENSION_FIELDS: ClassVar[tuple[str, ...]] = ()
    INVALID_MESSAGE: ClassVar[str] = config.MSG_BEND_PARAMETERS

    def __init__(self) -> None:
        super().__init__()
        self._unit_system: UnitSystem = config.DEFAULT_UNIT_SYSTEM
        self._k_preset: KFactorPresetKey = 'none'
        self.select_preset(config.DEFAULT_K_PRESET)

    @property
    def unit_system(self) -> UnitSystem:
        return self._unit_system

    @property
    def units(self) -> UnitConfig:
        return get_unit_config(self._unit_system)

    @property
    def k_preset(self) -> KFactorPresetKey:
        return self._k_preset

    def set_unit_system(self, unit: UnitSystem) -> None:
        """
        Switch between mm and in, converting every dimensional field in place.

        Args:
            unit: Target unit system
        """
        get_unit_config(unit)  # Rejects unknown tags before anything changes
        previous = self._unit_system
        if unit == previous:
            return

        for name in self.DIMENSION_FIELDS:
            self._fields[name] = convert_field_text(self._fields[name], previous, unit)
        self._convert_extra_fields(previous, unit)
        self._unit_system = unit
        logger.debug(f"{self.calculator_id}: unit system {previous} -> {unit}")
        self._on_change()

    def _convert_extra_fields(self, from_unit: UnitSystem, to_unit: UnitSystem) -> None:
        """Hook for dimensional input held outside the flat field map."""
        pass

    def select_preset(self, key: KFactorPresetKey) -> None:
        """
        Select a K-factor preset.

        Fills the K-factor field with the preset's value; the field stays
        editable afterwards. The 'none' preset leaves the field as it is.

        Raises:
            ValueError: If the preset key is unknown
        """
        if key not in K_FACTOR_PRESETS:
            raise ValueError(f"Unknown K-factor preset: {key!r}")
        self._k_preset = key
        preset_value = K_FACTOR_PRESETS[key]
        if preset_value is not None:
            logger.debug(f"{self.calculator_id}: K-factor preset {key} = {preset_value}")
            self.set_field('k_factor', number_to_text(preset_value))

    def bend_parameters(self) -> BendParameters:
        """Parse the single-bend fields into a parameter set."""
        return BendParameters(
            angle_deg=self.value('angle_deg'),
            inside_radius=self.value('inside_radius'),
            thickness=self.value('thickness'),
            k_factor=self.value('k_factor'),
        )

    def _rejection_detail(self) -> str:
        errors = bend_parameter_errors(self.bend_parameters())
        return '; '.join(errors) or 'result is out of the floating-point range'

    def reset(self) -> None:
        """Clear every field, then refill the K-factor from the selected preset."""
        super().reset()
        self.select_preset(self._k_preset)
