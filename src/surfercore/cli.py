"""Command line access to node sets, weights and coefficient fits."""

from __future__ import annotations

import argparse
import json
from typing import Sequence

from .config import SurferConfig
from .constants import BACKEND_NAMES, CANONICAL_LOWER, CANONICAL_UPPER, DEFAULT_BACKEND, DEFAULT_DEGREE, DEFAULT_STRATEGY
from .errors import InterpolationError
from .selector import AlgorithmSelector, available_strategies


def _add_algorithm_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--strategy", choices=available_strategies(), default=DEFAULT_STRATEGY)
    ap.add_argument("--degree", type=int, default=DEFAULT_DEGREE)
    ap.add_argument("--lower", type=float, default=CANONICAL_LOWER, help="Lower bound of the ray-parameter interval")
    ap.add_argument("--upper", type=float, default=CANONICAL_UPPER, help="Upper bound of the ray-parameter interval")
    ap.add_argument("--backend", choices=BACKEND_NAMES, default=DEFAULT_BACKEND)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="surfercore", description="Polynomial interpolation nodes for ray casting.")
    sub = ap.add_subparsers(dest="command", required=True)

    _add_algorithm_args(sub.add_parser("nodes", help="Print the node set for a strategy and degree"))
    _add_algorithm_args(sub.add_parser("weights", help="Print barycentric weights of the node set"))
    fit = sub.add_parser("fit", help="Fit samples taken at the nodes to monomial coefficients")
    _add_algorithm_args(fit)
    fit.add_argument("--values", type=float, nargs="+", required=True, help="Samples, one per node")
    sub.add_parser("strategies", help="List available node strategies")
    return ap


def run(args: argparse.Namespace) -> object:
    if args.command == "strategies":
        return list(available_strategies())
    cfg = SurferConfig(
        strategy=args.strategy,
        degree=args.degree,
        interval_lower=args.lower,
        interval_upper=args.upper,
        backend=args.backend,
    )
    algorithm = AlgorithmSelector.from_config(cfg).current
    if args.command == "nodes":
        return algorithm.nodes().tolist()
    if args.command == "weights":
        return algorithm.barycentric_weights().tolist()
    return algorithm.fit(args.values).coefficients.tolist()


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        result = run(args)
    except InterpolationError as exc:
        ap.error(str(exc))
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
