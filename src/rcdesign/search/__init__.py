"""Combination generation and circuit enumeration."""

from rcdesign.search.combinations import (
    combinations_with_repetition,
    count_combinations_with_repetition,
    iter_combinations_with_repetition,
)
from rcdesign.search.enumerator import (
    CircuitEnumerator,
    filter_circuits_by_time_constant,
    tolerance_from_fraction,
)

__all__ = [
    "combinations_with_repetition",
    "count_combinations_with_repetition",
    "iter_combinations_with_repetition",
    "CircuitEnumerator",
    "filter_circuits_by_time_constant",
    "tolerance_from_fraction",
]
