r"""
Command line interface.

::

    jvlap solve costs.txt
    jvlap route --drivers drivers.txt --addresses addresses.txt

Paths that are not given to ``route`` are prompted for.
"""

from __future__ import annotations

import argparse
import sys
import typing as T
from pathlib import Path

import numpy as np

from . import __version__
from .assignment import lapjv
from .routing import assign_routes

__all__ = ["main", "read_lines"]


def read_lines(path: Path | str) -> list[str]:
    """
    Read one entry per line, skipping blank lines.
    """
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def _prompt_path(message: str) -> Path:
    return Path(input(f"{message} ").strip())


def _solve(args: argparse.Namespace) -> int:
    cost_matrix = np.loadtxt(args.costs, delimiter=args.delimiter, dtype=np.float64, ndmin=2)
    solution = lapjv(cost_matrix.shape[0], cost_matrix)

    print(f"total cost: {solution.cost}")
    print("assignments:")
    for row, col in enumerate(solution.row_to_col.tolist()):
        print(f"\t{row} -> {col}")
    return 0


def _route(args: argparse.Namespace) -> int:
    addresses_path = args.addresses or _prompt_path("Enter path to addresses file:")
    drivers_path = args.drivers or _prompt_path("Enter path to drivers file:")

    plan = assign_routes(read_lines(drivers_path), read_lines(addresses_path))

    print(f"total score: {plan.total_score}")
    print("assignments:")
    for driver, address in plan.assignments.items():
        print(f"\tDriver: {driver}")
        print(f"\tDestination: {address}\n")
    for driver in plan.unassigned_drivers:
        print(f"\tDriver without destination: {driver}")
    for address in plan.unassigned_addresses:
        print(f"\tDestination without driver: {address}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jvlap",
        description="Solve linear assignment problems with the Jonker-Volgenant algorithm.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    solve = commands.add_parser("solve", help="solve a square cost matrix read from a text file")
    solve.add_argument("costs", type=Path, help="text file with one matrix row per line")
    solve.add_argument("--delimiter", default=None, help="column delimiter, whitespace by default")
    solve.set_defaults(handler=_solve)

    route = commands.add_parser("route", help="assign drivers to shipment destinations")
    route.add_argument("--drivers", type=Path, default=None, help="file with one driver name per line")
    route.add_argument("--addresses", type=Path, default=None, help="file with one address per line")
    route.set_defaults(handler=_route)

    return parser


def main(argv: T.Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (ValueError, OSError) as err:
        print(f"jvlap: error: {err}", file=sys.stderr)
        return 2
