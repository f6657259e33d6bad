"""Series RC circuit: a resistor block in series with a capacitor block."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from functools import cached_property
from typing import Iterable, Tuple

from rcdesign.circuits.core import Capacitor, Resistor
from rcdesign.errors import InvalidCircuitError


MICROFARADS_TO_FARADS = 1e-6


def _mutually_contained(left: Tuple[object, ...], right: Tuple[object, ...]) -> bool:
    """Return True when every element of each sequence appears in the other."""
    return all(item in right for item in left) and all(item in left for item in right)


@dataclass(frozen=True, eq=False, init=False)
class SeriesRCCircuit:
    """Resistors in series followed by capacitors in series.

    Element order is kept for display only. Two circuits compare equal when
    each resistor sequence contains every resistor of the other (and likewise
    for capacitors); multiplicity is not compared, so ``[5, 5]`` and ``[5]``
    are considered the same resistor block.
    """

    resistors: Tuple[Resistor, ...]
    capacitors: Tuple[Capacitor, ...]

    def __init__(self, resistors: Iterable[Resistor], capacitors: Iterable[Capacitor]) -> None:
        object.__setattr__(self, "resistors", tuple(resistors))
        object.__setattr__(self, "capacitors", tuple(capacitors))
        if not self.capacitors:
            raise InvalidCircuitError("Series RC circuit requires at least one capacitor.")

    @property
    def effective_resistance_ohms(self) -> int:
        """Series resistances add: R = R1 + R2 + ... + Rn."""
        return sum(r.resistance_ohms for r in self.resistors)

    @property
    def effective_capacitance_uf(self) -> float:
        """Series capacitances combine harmonically: 1/C = 1/C1 + ... + 1/Cn."""
        # Summed as exact rationals, so the result does not depend on element order.
        return float(1 / sum(Fraction(1) / Fraction(c.capacitance_uf) for c in self.capacitors))

    @cached_property
    def time_constant_s(self) -> float:
        """RC time constant in seconds."""
        return self.effective_resistance_ohms * self.effective_capacitance_uf * MICROFARADS_TO_FARADS

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SeriesRCCircuit):
            return NotImplemented
        return _mutually_contained(self.capacitors, other.capacitors) and _mutually_contained(
            self.resistors, other.resistors
        )

    def __hash__(self) -> int:
        return hash((frozenset(self.resistors), frozenset(self.capacitors)))

    def describe(self) -> str:
        resistors = ", ".join(str(r) for r in self.resistors)
        capacitors = ", ".join(str(c) for c in self.capacitors)
        return (
            f"Time Constant: {self.time_constant_s:,.8f}"
            f" | Resistors: [{resistors}]"
            f" | Capacitors: [{capacitors}]"
            f" | Eff Resistance: {self.effective_resistance_ohms}ohms"
            f" | Eff Capacitance: {self.effective_capacitance_uf:,.5f}uF"
        )

    def __str__(self) -> str:
        return self.describe()
