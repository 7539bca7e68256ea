"""Calculator result model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """
    A formatted calculator output.

    Attributes:
        value: Formatted decimal string
        unit: Unit tag of the value
        details: Secondary formatted values keyed by label (e.g. setback)
    """

    value: str
    unit: str
    details: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"
