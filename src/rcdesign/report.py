"""Text and table rendering of enumerated circuits."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from rcdesign.circuits.series import SeriesRCCircuit


TABLE_COLUMNS = (
    "Resistors (Ohms)",
    "Capacitors (uF)",
    "Effective Resistance (Ohms)",
    "Effective Capacitance (uF)",
    "Time Constant (s)",
)


def circuit_table_rows(circuits: Sequence[SeriesRCCircuit]) -> List[Dict[str, str]]:
    """One row per circuit keyed by :data:`TABLE_COLUMNS`."""
    rows: List[Dict[str, str]] = []
    for circuit in circuits:
        values = (
            ", ".join(str(r) for r in circuit.resistors),
            ", ".join(str(c) for c in circuit.capacitors),
            str(circuit.effective_resistance_ohms),
            repr(circuit.effective_capacitance_uf),
            f"{circuit.time_constant_s:,.8f}",
        )
        rows.append(dict(zip(TABLE_COLUMNS, values)))
    return rows


def _format_list(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(value) for value in values) + "]"


def format_summary(
    circuits: Sequence[SeriesRCCircuit],
    resistors_ohms: Sequence[int],
    capacitors_uf: Sequence[int],
    max_resistors: int,
    max_capacitors: int,
    target_time_constant_s: Optional[float] = None,
    nearness: Optional[float] = None,
) -> str:
    if target_time_constant_s is None:
        header = f"Found {len(circuits)} circuits with {max_resistors} resistors and {max_capacitors} capacitors"
    else:
        percent = (nearness or 0.0) * 100
        header = (
            f"Found {len(circuits)} circuits with {max_resistors} resistors, {max_capacitors} capacitors, "
            f"and a time constant within {percent:f}% of {target_time_constant_s:f}s"
        )
    lines = [
        header,
        f"  Allowed Resistors (Ohms): {_format_list(resistors_ohms)}",
        f"  Allowed Capacitors (uF):  {_format_list(capacitors_uf)}",
    ]
    for index, circuit in enumerate(circuits, start=1):
        lines.append(f"  Circuit #{index}:")
        lines.append(f"    {circuit.describe()}")
    return "\n".join(lines)
