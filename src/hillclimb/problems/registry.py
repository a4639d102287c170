"""
Named example problems.

Each entry pairs a provider factory with the command-line options that
configure it, so the CLI can build one sub-command per registered problem.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any, Callable

from hillclimb.engine.provider import CandidateProvider
from hillclimb.foundation.exceptions import InvalidProblemError
from hillclimb.problems.one_max import OneMaximizer
from hillclimb.problems.string_guess import DEFAULT_GENES, StringGuesser

DEFAULT_STRING_TARGET = "Hello, world!"
DEFAULT_ONEMAX_SIZE = 10000


@dataclass(frozen=True)
class ProblemEntry:
    name: str
    factory: Callable[..., CandidateProvider[Any]]
    summary: str
    add_arguments: Callable[[argparse.ArgumentParser], None]
    kwargs_from_args: Callable[[argparse.Namespace], dict[str, Any]]


PROBLEMS: dict[str, ProblemEntry] = {}


def register_problem(entry: ProblemEntry, *, override: bool = False) -> ProblemEntry:
    key = entry.name.strip().lower()
    if key in PROBLEMS and not override:
        raise ValueError(f"Problem '{key}' is already registered.")
    PROBLEMS[key] = entry
    return entry


def problem_entry(name: str) -> ProblemEntry:
    key = name.strip().lower()
    if key not in PROBLEMS:
        raise InvalidProblemError(name, list(available_problem_names()))
    return PROBLEMS[key]


def available_problem_names() -> tuple[str, ...]:
    return tuple(sorted(PROBLEMS))


def make_problem(name: str, **kwargs: Any) -> CandidateProvider[Any]:
    """Instantiate the provider registered under ``name``."""
    return problem_entry(name).factory(**kwargs)


def _string_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--target", default=DEFAULT_STRING_TARGET, help="String to recover.")
    parser.add_argument("--genes", default=DEFAULT_GENES, help="Alphabet candidates are built from.")


def _onemax_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--size", type=int, default=DEFAULT_ONEMAX_SIZE, help="Number of bits.")


register_problem(
    ProblemEntry(
        name="string",
        factory=StringGuesser,
        summary="Recover a target string.",
        add_arguments=_string_arguments,
        kwargs_from_args=lambda args: {"target": args.target, "genes": args.genes, "rng": args.seed},
    )
)
register_problem(
    ProblemEntry(
        name="onemax",
        factory=OneMaximizer,
        summary="Set every bit of a bit vector.",
        add_arguments=_onemax_arguments,
        kwargs_from_args=lambda args: {"target": args.size, "rng": args.seed},
    )
)


__all__ = [
    "DEFAULT_STRING_TARGET",
    "DEFAULT_ONEMAX_SIZE",
    "ProblemEntry",
    "PROBLEMS",
    "register_problem",
    "problem_entry",
    "available_problem_names",
    "make_problem",
]
