"""Editable lists of allowed component values."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from rcdesign.errors import CircuitValidationError


DEFAULT_RESISTORS_OHMS: Tuple[int, ...] = (25, 50, 100, 200, 250)
DEFAULT_CAPACITORS_UF: Tuple[int, ...] = (100, 250, 450)


def parse_number(text: str, allow_fraction: bool = False) -> float | int:
    """Parse a form field that may only hold digits (and one '.' if allowed)."""
    text = text.strip()
    if not text:
        raise CircuitValidationError("Value must not be empty.")
    periods = text.count(".")
    digits = text.replace(".", "", 1) if allow_fraction else text
    if not (digits.isascii() and digits.isdigit()) or periods > (1 if allow_fraction else 0):
        raise CircuitValidationError(f"Not a valid number: {text!r}")
    if periods:
        return float(text)
    return int(text)


def parse_magnitude(value: int | str) -> int:
    """Return a positive integer component magnitude."""
    if isinstance(value, bool):
        raise CircuitValidationError(f"Not a valid component value: {value!r}")
    if isinstance(value, str):
        value = parse_number(value)
    if not isinstance(value, int):
        raise CircuitValidationError(f"Component value must be an integer: {value!r}")
    if value <= 0:
        raise CircuitValidationError("Component value must be positive.")
    return value


class ComponentPalette:
    """Ordered set of allowed magnitudes for one component kind."""

    def __init__(self, values: Iterable[int | str] = ()) -> None:
        self._values: List[int] = []
        for value in values:
            self.add(value)

    def add(self, value: int | str) -> bool:
        """Add a magnitude; returns False when it is already present."""
        magnitude = parse_magnitude(value)
        if magnitude in self._values:
            return False
        self._values.append(magnitude)
        return True

    def remove(self, values: Iterable[int]) -> int:
        """Drop the given magnitudes and return how many were removed."""
        selected = set(values)
        before = len(self._values)
        self._values = [value for value in self._values if value not in selected]
        return before - len(self._values)

    def magnitudes(self) -> List[int]:
        return list(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    @classmethod
    def default_resistors(cls) -> "ComponentPalette":
        return cls(DEFAULT_RESISTORS_OHMS)

    @classmethod
    def default_capacitors(cls) -> "ComponentPalette":
        return cls(DEFAULT_CAPACITORS_UF)
