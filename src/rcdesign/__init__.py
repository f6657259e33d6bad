"""Series RC circuit enumeration package."""

from rcdesign.circuits import Capacitor, Resistor, SeriesRCCircuit
from rcdesign.errors import CircuitValidationError, ConfigError, InvalidCircuitError
from rcdesign.palette import ComponentPalette
from rcdesign.search import (
    CircuitEnumerator,
    combinations_with_repetition,
    filter_circuits_by_time_constant,
    tolerance_from_fraction,
)

__all__ = [
    "Resistor",
    "Capacitor",
    "SeriesRCCircuit",
    "CircuitEnumerator",
    "combinations_with_repetition",
    "filter_circuits_by_time_constant",
    "tolerance_from_fraction",
    "ComponentPalette",
    "CircuitValidationError",
    "ConfigError",
    "InvalidCircuitError",
]
