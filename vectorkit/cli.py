"""Command line interface for pricing queries and vector angle checks."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import ConfigurationError, load_cost_config
from .costs import CostData, InvalidAmountError, get_cost, get_max_buy
from .vector3 import Vector3

LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    # //1.- Construct the top-level parser shared across tests and runtime execution.
    parser = argparse.ArgumentParser(prog="vectorkit", description="Vector and pricing utilities")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    commands = parser.add_subparsers(dest="command", required=True)

    cost = commands.add_parser("cost", help="Price a batch of units")
    cost.add_argument("--count", type=float, required=True, help="Units already owned")
    cost.add_argument("--amount", type=int, default=1, help="Units to buy")
    _add_curve_arguments(cost)

    max_buy = commands.add_parser("max-buy", help="Largest batch affordable with an income")
    max_buy.add_argument("--count", type=float, required=True, help="Units already owned")
    max_buy.add_argument("--income", type=float, required=True, help="Available budget")
    _add_curve_arguments(max_buy)

    angle = commands.add_parser("angle", help="Angle between two 3D vectors")
    angle.add_argument("components", type=float, nargs=6, metavar="V", help="x1 y1 z1 x2 y2 z2")
    angle.add_argument("--radians", action="store_true", help="Report radians instead of degrees")
    return parser


def _add_curve_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--base", type=float, help="Cost of the first unit")
    parser.add_argument("--multiplier", type=float, help="Growth factor per unit")
    parser.add_argument("--config", help="JSON file with cost_base and multiplier")


def _resolve_curve(args: argparse.Namespace) -> CostData:
    # //2.- Start from configuration then let explicit flags override individual values.
    data = load_cost_config(path=args.config)
    mapping = {"cost_base": data.cost_base, "multiplier": data.multiplier}
    if args.base is not None:
        mapping["cost_base"] = args.base
    if args.multiplier is not None:
        mapping["multiplier"] = args.multiplier
    return load_cost_config(mapping)


def _execute(args: argparse.Namespace) -> str:
    if args.command == "angle":
        x1, y1, z1, x2, y2, z2 = args.components
        start, end = Vector3(x1, y1, z1), Vector3(x2, y2, z2)
        value = Vector3.angle_rad(start, end) if args.radians else Vector3.angle(start, end)
        return repr(value)
    curve = _resolve_curve(args)
    LOGGER.info("Using cost_base=%s multiplier=%s", curve.cost_base, curve.multiplier)
    if args.command == "cost":
        return repr(get_cost(args.count, curve, args.amount))
    return str(get_max_buy(args.count, curve, args.income))


def run(argv: Optional[Sequence[str]] = None) -> int:
    # //3.- Parse arguments, configure logging, and translate domain errors to exit codes.
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(asctime)s] %(levelname)s %(message)s")
    try:
        print(_execute(args))
    except (InvalidAmountError, ConfigurationError) as exc:
        LOGGER.error("%s", exc)
        return 2
    return 0


def main() -> int:
    """Console script entry point invoked via ``python -m vectorkit``."""

    return run()


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    sys.exit(main())
