"""Enumeration of series RC circuits from allowed component values."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple, TypeVar

import numpy as np

from rcdesign.circuits.core import Capacitor, Resistor
from rcdesign.circuits.series import SeriesRCCircuit
from rcdesign.search.combinations import combinations_with_repetition, count_combinations_with_repetition


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Relative slack applied to the filter boundary to absorb float rounding.
_FILTER_REL_EPS = 1e-9


def _as_resistors(values: Iterable[Resistor | int]) -> List[Resistor]:
    return [value if isinstance(value, Resistor) else Resistor(int(value)) for value in values]


def _as_capacitors(values: Iterable[Capacitor | int]) -> List[Capacitor]:
    return [value if isinstance(value, Capacitor) else Capacitor(int(value)) for value in values]


def _combinations_up_to(pool: Sequence[T], max_size: int) -> List[Tuple[T, ...]]:
    combos: List[Tuple[T, ...]] = []
    for size in range(1, max_size + 1):
        combos.extend(combinations_with_repetition(pool, size))
    return combos


def tolerance_from_fraction(target: float, fraction: float) -> float:
    """Convert a fractional nearness (0.2 is +/-20%) into an absolute tolerance."""
    if fraction < 0:
        raise ValueError("Nearness fraction must be non-negative.")
    return abs(target) * fraction


def filter_circuits_by_time_constant(
    circuits: Sequence[SeriesRCCircuit],
    target: float,
    tolerance: float,
) -> List[SeriesRCCircuit]:
    """Keep circuits whose time constant lies within ``tolerance`` seconds of ``target``.

    Input order is preserved. A zero tolerance keeps only circuits whose time
    constant equals the target up to floating-point rounding.
    """
    if tolerance < 0:
        raise ValueError("Time constant tolerance must be non-negative.")
    if not circuits:
        return []
    taus = np.fromiter((circuit.time_constant_s for circuit in circuits), dtype=np.float64, count=len(circuits))
    slack = _FILTER_REL_EPS * max(abs(target), tolerance)
    mask = np.abs(taus - target) <= tolerance + slack
    kept = [circuit for circuit, keep in zip(circuits, mask) if keep]
    logger.debug(
        "Kept %d of %d circuits within %g s of %g s.", len(kept), len(circuits), tolerance, target
    )
    return kept


class CircuitEnumerator:
    """Builds every resistor-block x capacitor-block pairing from two pools.

    Pools are ordered and may hold repeated values; each entry is a separate
    slot for combination purposes.
    """

    def __init__(
        self,
        resistors: Iterable[Resistor | int] = (),
        capacitors: Iterable[Capacitor | int] = (),
    ) -> None:
        self._resistors: List[Resistor] = _as_resistors(resistors)
        self._capacitors: List[Capacitor] = _as_capacitors(capacitors)

    @property
    def resistors(self) -> Tuple[Resistor, ...]:
        return tuple(self._resistors)

    @property
    def capacitors(self) -> Tuple[Capacitor, ...]:
        return tuple(self._capacitors)

    def set_resistors(self, values: Iterable[Resistor | int]) -> None:
        """Replace the resistor pool with ohm values or prebuilt resistors."""
        self._resistors = _as_resistors(values)

    def set_capacitors(self, values: Iterable[Capacitor | int]) -> None:
        """Replace the capacitor pool with microfarad values or prebuilt capacitors."""
        self._capacitors = _as_capacitors(values)

    def expected_circuit_count(self, max_resistors: int, max_capacitors: int) -> int:
        """Number of circuits :meth:`get_all_possible_circuits` would return."""
        n_r = len(self._resistors)
        n_c = len(self._capacitors)
        resistor_combos = sum(count_combinations_with_repetition(n_r, r) for r in range(1, max_resistors + 1))
        capacitor_combos = sum(count_combinations_with_repetition(n_c, c) for c in range(1, max_capacitors + 1))
        return resistor_combos * capacitor_combos

    def get_all_possible_circuits(self, max_resistors: int, max_capacitors: int) -> List[SeriesRCCircuit]:
        """Return one circuit per pairing of resistor and capacitor combinations.

        Combinations of every size from 1 up to the given maxima are used.
        Non-positive maxima produce no combinations and so an empty result.
        """
        resistor_combos = _combinations_up_to(self._resistors, max_resistors)
        capacitor_combos = _combinations_up_to(self._capacitors, max_capacitors)
        logger.debug(
            "Generated %d resistor and %d capacitor combinations (max %d resistors, %d capacitors).",
            len(resistor_combos),
            len(capacitor_combos),
            max_resistors,
            max_capacitors,
        )
        circuits = [
            SeriesRCCircuit(resistors=resistor_combo, capacitors=capacitor_combo)
            for resistor_combo in resistor_combos
            for capacitor_combo in capacitor_combos
        ]
        logger.debug("Built %d candidate circuits.", len(circuits))
        return circuits

    filter_circuits_by_time_constant = staticmethod(filter_circuits_by_time_constant)
