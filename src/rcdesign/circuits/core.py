"""Component value types for series RC networks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resistor:
    """Ideal resistor identified only by its resistance."""

    resistance_ohms: int

    def __str__(self) -> str:
        return f"{self.resistance_ohms}ohms"


@dataclass(frozen=True)
class Capacitor:
    """Ideal capacitor identified only by its capacitance in microfarads."""

    capacitance_uf: int

    def __str__(self) -> str:
        return f"{self.capacitance_uf}uF"
