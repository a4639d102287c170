from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from hillclimb.engine.climber import HillClimber
from hillclimb.engine.config import SearchConfig
from hillclimb.foundation.exceptions import HillClimbError
from hillclimb.foundation.logging import configure_hillclimb_logging
from hillclimb.problems.registry import available_problem_names, problem_entry


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _parse_non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{raw}'") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("must be non-negative")
    return value


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every accepted improvement.")
    parser.add_argument("--debug", action="store_true", help="Also log problem details and run statistics.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator.")
    parser.add_argument(
        "--max-iterations",
        type=_parse_non_negative_int,
        default=None,
        help="Stop after this many mutations even if the maximum score was not reached.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hillclimb",
        description="Run a hill-climbing search on one of the example problems and print the best score.",
    )
    sub = parser.add_subparsers(dest="problem", required=True)
    for name in available_problem_names():
        entry = problem_entry(name)
        problem_parser = sub.add_parser(name, help=entry.summary)
        entry.add_arguments(problem_parser)
        _add_common_args(problem_parser)
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.debug:
        return logging.DEBUG
    return logging.INFO if args.verbose else logging.WARNING


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_hillclimb_logging(level=_log_level(args))

    entry = problem_entry(args.problem)
    try:
        provider = entry.factory(**entry.kwargs_from_args(args))
        config = SearchConfig(verbose=args.verbose, max_iterations=args.max_iterations)
    except HillClimbError as exc:
        parser.error(exc.message)

    describe = getattr(provider, "describe", None)
    if callable(describe):
        _logger().debug("problem %s: %s", entry.name, describe())

    result = HillClimber(provider).run(config)
    _logger().debug("run: %s", result.summary())
    print(result.score)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
