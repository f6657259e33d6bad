"""Circuit primitives and container types."""

from rcdesign.circuits.core import Capacitor, Resistor
from rcdesign.circuits.series import SeriesRCCircuit

__all__ = [
    "Resistor",
    "Capacitor",
    "SeriesRCCircuit",
]
