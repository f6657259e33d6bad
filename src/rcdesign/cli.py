"""Command-line driver: enumerate series RC circuits and print matches."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from rcdesign.circuits.series import SeriesRCCircuit
from rcdesign.config import SearchConfig, load_config
from rcdesign.errors import CircuitValidationError, ConfigError
from rcdesign.report import format_summary
from rcdesign.search.enumerator import (
    CircuitEnumerator,
    filter_circuits_by_time_constant,
    tolerance_from_fraction,
)


logger = logging.getLogger(__name__)


def _int_list(text: str) -> List[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected comma-separated integers, got {text!r}.") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Enumerate series RC circuits and match a time constant.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML search config.")
    parser.add_argument("--resistors", type=_int_list, default=None, help="Allowed resistors in ohms, e.g. 5,10,25.")
    parser.add_argument("--capacitors", type=_int_list, default=None, help="Allowed capacitors in uF, e.g. 100,250.")
    parser.add_argument("--max-resistors", type=int, default=None, help="Maximum resistors in series.")
    parser.add_argument("--max-capacitors", type=int, default=None, help="Maximum capacitors in series.")
    parser.add_argument("--target", type=float, default=None, help="Target time constant in seconds.")
    parser.add_argument(
        "--nearness",
        type=float,
        default=None,
        help="Allowed deviation as a fraction of the target (0 for exact).",
    )
    parser.add_argument("--no-target", action="store_true", help="List every circuit without filtering.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def resolve_config(args: argparse.Namespace) -> SearchConfig:
    config = load_config(args.config) if args.config else SearchConfig()
    config = config.with_overrides(
        resistors=tuple(args.resistors) if args.resistors is not None else None,
        capacitors=tuple(args.capacitors) if args.capacitors is not None else None,
        max_resistors=args.max_resistors,
        max_capacitors=args.max_capacitors,
        target_time_constant_s=args.target,
        nearness=args.nearness,
    )
    if args.no_target:
        config = replace(config, target_time_constant_s=None)
    return config


def run_search(config: SearchConfig) -> List[SeriesRCCircuit]:
    """Enumerate every circuit for ``config`` and apply its time-constant filter."""
    enumerator = CircuitEnumerator(config.resistors, config.capacitors)
    logger.info(
        "Enumerating up to %d circuits.",
        enumerator.expected_circuit_count(config.max_resistors, config.max_capacitors),
    )
    circuits = enumerator.get_all_possible_circuits(config.max_resistors, config.max_capacitors)
    if config.target_time_constant_s is not None:
        tolerance = tolerance_from_fraction(config.target_time_constant_s, config.nearness)
        circuits = filter_circuits_by_time_constant(circuits, config.target_time_constant_s, tolerance)
    return circuits


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except (ConfigError, CircuitValidationError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    circuits = run_search(config)
    print(
        format_summary(
            circuits,
            config.resistors,
            config.capacitors,
            config.max_resistors,
            config.max_capacitors,
            target_time_constant_s=config.target_time_constant_s,
            nearness=config.nearness,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
